"""Name-based access to the prime generators.

Groups the four algorithms behind a stateless PrimeGenerator and provides a
cross-check that runs several of them on the same limit.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Sequence

import numpy as np

from primegen.core.limits import check_limit
from primegen.core.mersenne import mersenne_primes
from primegen.core.sieve import sieve_of_atkin, sieve_of_eratosthenes
from primegen.core.trial_division import trial_division

PrimeFunction = Callable[[int], np.ndarray]

ALGORITHMS: Dict[str, PrimeFunction] = {
    "trial-division": trial_division,
    "eratosthenes": sieve_of_eratosthenes,
    "atkin": sieve_of_atkin,
    "mersenne": mersenne_primes,
}

# Algorithms that return every prime <= limit (mersenne only returns a subset).
PRIME_LIST_METHODS = ("trial-division", "eratosthenes", "atkin")


def get_algorithm(name: str) -> PrimeFunction:
    """Look up a prime generator by name.

    Raises:
        ValueError: If name is not one of ALGORITHMS.
    """
    try:
        return ALGORITHMS[name]
    except KeyError:
        valid = ", ".join(ALGORITHMS)
        raise ValueError(f"Unknown method '{name}'. Available: {valid}") from None


@dataclass
class CrossValidation:
    """Result of running several algorithms on the same limit."""
    limit: int
    counts: Dict[str, int] = field(default_factory=dict)
    mismatches: List[str] = field(default_factory=list)

    @property
    def agree(self) -> bool:
        return not self.mismatches


def cross_validate(limit: int, methods: Optional[Sequence[str]] = None) -> CrossValidation:
    """Run several algorithms and compare their results.

    The first method is the reference; every other method whose output
    differs from it is reported in mismatches.

    Args:
        limit: Upper bound passed to every algorithm.
        methods: Algorithm names. Defaults to the three that return
            every prime <= limit.

    Returns:
        CrossValidation with the prime count of each method.
    """
    limit = check_limit(limit)
    methods = list(methods) if methods is not None else list(PRIME_LIST_METHODS)
    if not methods:
        raise ValueError("At least one method is required")

    result = CrossValidation(limit=limit)
    reference = None

    for name in methods:
        primes = get_algorithm(name)(limit)
        result.counts[name] = len(primes)
        if reference is None:
            reference = primes
        elif not np.array_equal(primes, reference):
            result.mismatches.append(name)

    return result


class PrimeGenerator:
    """Stateless entry point exposing every algorithm as a method."""

    trial_division = staticmethod(trial_division)
    sieve_of_eratosthenes = staticmethod(sieve_of_eratosthenes)
    sieve_of_atkin = staticmethod(sieve_of_atkin)
    mersenne_primes = staticmethod(mersenne_primes)
    cross_validate = staticmethod(cross_validate)

    @staticmethod
    def generate(method: str, limit: int) -> np.ndarray:
        """Run the algorithm registered under method."""
        return get_algorithm(method)(limit)
