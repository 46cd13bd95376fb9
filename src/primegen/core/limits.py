"""Validation of the ``limit`` argument shared by every prime generator."""

from __future__ import annotations

import operator


def check_limit(limit: int) -> int:
    """Validate an upper bound and return it as a plain ``int``.

    NumPy integer scalars are accepted; floats, strings and bools are not.

    Args:
        limit: Upper bound for prime generation (inclusive).

    Returns:
        The limit as a Python int.

    Raises:
        TypeError: If limit is not an integer.
        ValueError: If limit is negative.
    """
    if isinstance(limit, bool):
        raise TypeError(f"limit must be an integer, got {limit!r}")
    try:
        limit = operator.index(limit)
    except TypeError:
        raise TypeError(f"limit must be an integer, got {type(limit).__name__}") from None

    if limit < 0:
        raise ValueError(f"limit must be >= 0, got {limit}")

    return limit
