"""Prime generation by trial division."""

from __future__ import annotations

from math import isqrt

import numpy as np

from primegen.core.limits import check_limit


def _is_odd_prime(candidate: int) -> bool:
    """Check an odd candidate >= 5 against every odd divisor up to its root."""
    for divisor in range(3, isqrt(candidate) + 1, 2):
        if candidate % divisor == 0:
            return False
    return True


def trial_division(limit: int) -> np.ndarray:
    """Generate all primes up to and including limit using trial division.

    2 and 3 are seeded directly; every odd candidate from 5 onwards is tested
    for divisibility by the odd numbers up to its square root.

    Complexity is O(limit * sqrt(limit)), so this is only practical for small
    limits. Use the sieves for anything large.

    Args:
        limit: Upper bound for prime generation (inclusive).

    Returns:
        Ascending int64 array of primes <= limit. Empty if limit < 2.

    Raises:
        TypeError: If limit is not an integer.
        ValueError: If limit is negative.
    """
    limit = check_limit(limit)

    primes = [p for p in (2, 3) if p <= limit]

    for candidate in range(5, limit + 1, 2):
        if _is_odd_prime(candidate):
            primes.append(candidate)

    return np.array(primes, dtype=np.int64)
