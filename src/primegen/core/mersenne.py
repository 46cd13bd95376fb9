"""Mersenne prime filtering."""

from __future__ import annotations

import operator

import numpy as np

from primegen.core.limits import check_limit
from primegen.core.trial_division import trial_division


def is_power_of_two(m: int) -> bool:
    """Check if a positive integer is a power of 2.

    Halves m while it is even; powers of two end at exactly 1, anything else
    ends at an odd number greater than 1.

    Args:
        m: Number to check.

    Returns:
        True if m == 2**k for some k >= 0, otherwise False.

    Raises:
        TypeError: If m is not an integer.
        ValueError: If m is zero or negative.
    """
    if isinstance(m, bool):
        raise TypeError(f"m must be an integer, got {m!r}")
    try:
        m = operator.index(m)
    except TypeError:
        raise TypeError(f"m must be an integer, got {type(m).__name__}") from None

    if m <= 0:
        raise ValueError(f"m must be positive, got {m}")

    while m % 2 == 0:
        m //= 2

    return m == 1


def mersenne_primes(limit: int) -> np.ndarray:
    """Generate Mersenne primes (primes of the form 2^n - 1) up to limit.

    The candidates come from trial_division; 2 is skipped since it is not of
    that form.

    Args:
        limit: Upper bound (inclusive).

    Returns:
        Ascending int64 array of Mersenne primes <= limit.

    Raises:
        TypeError: If limit is not an integer.
        ValueError: If limit is negative.
    """
    limit = check_limit(limit)
    primes = trial_division(limit)

    mersenne = [int(p) for p in primes[1:] if is_power_of_two(int(p) + 1)]

    return np.array(mersenne, dtype=np.int64)
