"""Prime generation using sieve implementations.

Both sieves work on a NumPy boolean marking array indexed by candidate value,
allocated per call and discarded on return.
"""

from __future__ import annotations

from math import isqrt

import numpy as np

from primegen.core.limits import check_limit

# Number of grid cells evaluated at once by the Atkin marking pass.
ATKIN_BLOCK_CELLS = 1 << 16


def prime_flags(limit: int) -> np.ndarray:
    """Generate a boolean mask where mask[i] is True if i is prime.

    Uses the Sieve of Eratosthenes.

    Args:
        limit: Largest index of the mask (inclusive).

    Returns:
        Boolean array of length limit + 1.
    """
    limit = check_limit(limit)

    flags = np.ones(limit + 1, dtype=bool)
    flags[:2] = False

    for i in range(2, isqrt(limit) + 1):
        if flags[i]:
            flags[i*i::i] = False

    return flags


def sieve_of_eratosthenes(limit: int) -> np.ndarray:
    """Generate all primes up to and including limit.

    Args:
        limit: Upper bound for prime generation (inclusive).

    Returns:
        Ascending int64 array of primes <= limit. Empty if limit < 2.

    Raises:
        TypeError: If limit is not an integer.
        ValueError: If limit is negative.
    """
    return np.nonzero(prime_flags(limit))[0].astype(np.int64)


def _mark_atkin_candidates(is_prime: np.ndarray, limit: int, lim: int, block_rows: int | None = None) -> None:
    """Mark the values <= limit hit by one of the three quadratic forms.

    Evaluates 4x^2 + y^2, 3x^2 + y^2 and 3x^2 - y^2 (x > y) over the 1..lim
    grid and marks each value whose residue mod 12 matches its form. Numbers
    are marked, not toggled. The grid is walked in blocks of block_rows
    values of x so working memory stays bounded by ATKIN_BLOCK_CELLS.
    """
    if block_rows is None:
        block_rows = max(1, ATKIN_BLOCK_CELLS // lim)

    y = np.arange(1, lim + 1, dtype=np.int64)[np.newaxis, :]
    yy = y * y

    for start in range(1, lim + 1, block_rows):
        x = np.arange(start, min(start + block_rows, lim + 1), dtype=np.int64)[:, np.newaxis]
        xx = x * x

        n1 = 4 * xx + yy
        is_prime[n1[(n1 <= limit) & ((n1 % 12 == 1) | (n1 % 12 == 5))]] = True

        n2 = 3 * xx + yy
        is_prime[n2[(n2 <= limit) & (n2 % 12 == 7)]] = True

        n3 = 3 * xx - yy
        is_prime[n3[(x > y) & (n3 <= limit) & (n3 % 12 == 11)]] = True


def sieve_of_atkin(limit: int) -> np.ndarray:
    """Generate all primes up to and including limit using the Sieve of Atkin.

    This is a simplified Atkin: the quadratic forms mark every candidate they
    reach, and false positives are then removed by striking out multiples of
    each surviving i in 5..ceil(sqrt(limit)), starting at i*i. Any composite
    that passes the mod 12 filter has a smallest prime factor in that range,
    so the result is exact.

    Args:
        limit: Upper bound for prime generation (inclusive).

    Returns:
        Ascending int64 array of primes <= limit. Empty if limit < 2.

    Raises:
        TypeError: If limit is not an integer.
        ValueError: If limit is negative.
    """
    limit = check_limit(limit)

    if limit < 2:
        return np.array([], dtype=np.int64)

    is_prime = np.zeros(limit + 1, dtype=bool)
    is_prime[2:4] = True

    lim = isqrt(limit)
    if lim * lim < limit:
        lim += 1

    _mark_atkin_candidates(is_prime, limit, lim)

    for i in range(5, lim + 1):
        if is_prime[i]:
            is_prime[i*i::i] = False

    return np.nonzero(is_prime)[0].astype(np.int64)
