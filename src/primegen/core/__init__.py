"""Core prime generation algorithms."""

from primegen.core.mersenne import is_power_of_two, mersenne_primes
from primegen.core.sieve import prime_flags, sieve_of_atkin, sieve_of_eratosthenes
from primegen.core.trial_division import trial_division

__all__ = [
    "trial_division",
    "sieve_of_eratosthenes",
    "sieve_of_atkin",
    "prime_flags",
    "mersenne_primes",
    "is_power_of_two",
]
