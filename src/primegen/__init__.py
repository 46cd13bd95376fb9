"""primegen - prime number generation with four independent algorithms."""

__version__ = "0.1.0"

from primegen.core.mersenne import is_power_of_two, mersenne_primes
from primegen.core.sieve import prime_flags, sieve_of_atkin, sieve_of_eratosthenes
from primegen.core.trial_division import trial_division
from primegen.generator import ALGORITHMS, CrossValidation, PrimeGenerator, cross_validate, get_algorithm

__all__ = [
    "trial_division",
    "sieve_of_eratosthenes",
    "sieve_of_atkin",
    "prime_flags",
    "mersenne_primes",
    "is_power_of_two",
    "PrimeGenerator",
    "CrossValidation",
    "ALGORITHMS",
    "get_algorithm",
    "cross_validate",
]
