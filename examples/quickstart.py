"""Quick start example for primegen.

Run this script to compare the four algorithms and test the installation.
"""

import time

from primegen import PrimeGenerator, mersenne_primes, sieve_of_atkin, sieve_of_eratosthenes, trial_division


def main():
    print("primegen - Quick Start Demo")
    print("=" * 50)

    print("\n1. Primes up to 50 with each sieve...")
    print(f"   Trial division: {trial_division(50).tolist()}")
    print(f"   Eratosthenes:   {sieve_of_eratosthenes(50).tolist()}")
    print(f"   Atkin:          {sieve_of_atkin(50).tolist()}")

    print("\n2. Mersenne primes up to 10,000...")
    print(f"   {mersenne_primes(10_000).tolist()}")

    print("\n3. Cross-checking algorithms up to 100,000...")
    start = time.perf_counter()
    result = PrimeGenerator.cross_validate(100_000)
    elapsed = time.perf_counter() - start
    for name, count in result.counts.items():
        print(f"   {name:<16} {count} primes")
    print(f"   Agree: {result.agree} ({elapsed:.2f}s)")

    print("\n" + "=" * 50)
    print("Done.")


if __name__ == "__main__":
    main()
