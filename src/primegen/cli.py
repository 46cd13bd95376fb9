"""Command-line interface for primegen."""

from __future__ import annotations

import argparse
import json
import sys
import time
from pathlib import Path
from typing import List

from primegen.generator import ALGORITHMS, PRIME_LIST_METHODS, PrimeGenerator, get_algorithm


def _parse_methods(value: str | None, default: List[str]) -> List[str]:
    """Split a comma-separated method list, validating each name."""
    if value is None:
        return default
    methods = [m.strip() for m in value.split(",") if m.strip()]
    for name in methods:
        get_algorithm(name)
    return methods


def cmd_generate(args: argparse.Namespace) -> int:
    """Generate primes with a single algorithm."""
    primes = PrimeGenerator.generate(args.method, args.limit)

    if args.count_only:
        print(len(primes))
    else:
        print(" ".join(str(p) for p in primes))

    if args.output:
        output = Path(args.output)
        document = {
            "method": args.method,
            "limit": args.limit,
            "count": len(primes),
            "primes": primes.tolist(),
        }
        with open(output, "w") as f:
            json.dump(document, f, indent=2)
        print(f"Saved to {output}", file=sys.stderr)

    return 0


def cmd_compare(args: argparse.Namespace) -> int:
    """Cross-validate algorithms against each other."""
    methods = _parse_methods(args.methods, list(PRIME_LIST_METHODS))

    print(f"Comparing {len(methods)} methods up to {args.limit}")

    result = PrimeGenerator.cross_validate(args.limit, methods)

    print(f"{'Method':<16} {'Primes':>8} {'Status':>8}")
    for name, count in result.counts.items():
        status = "MISMATCH" if name in result.mismatches else "ok"
        print(f"{name:<16} {count:>8} {status:>8}")

    if not result.agree:
        print(f"\nResults differ from {methods[0]}: {', '.join(result.mismatches)}")
        return 1

    print("\nAll methods agree")
    return 0


def cmd_benchmark(args: argparse.Namespace) -> int:
    """Time each algorithm on the same limit."""
    methods = _parse_methods(args.methods, list(ALGORITHMS))

    if args.repeat < 1:
        raise ValueError(f"repeat must be >= 1, got {args.repeat}")

    print(f"Benchmarking up to {args.limit}, {args.repeat} run(s) each")
    print(f"{'Method':<16} {'Primes':>8} {'Best (s)':>10} {'Mean (s)':>10}")

    for name in methods:
        func = get_algorithm(name)
        timings = []
        for _ in range(args.repeat):
            start = time.perf_counter()
            primes = func(args.limit)
            timings.append(time.perf_counter() - start)

        mean = sum(timings) / len(timings)
        print(f"{name:<16} {len(primes):>8} {min(timings):>10.4f} {mean:>10.4f}")

    return 0


def main(argv: List[str] | None = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        prog="primegen",
        description="Prime number generation with trial division, Eratosthenes, Atkin and Mersenne filtering",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    gen_parser = subparsers.add_parser("generate", help="Generate primes up to a limit")
    gen_parser.add_argument("limit", type=int, help="Upper bound (inclusive)")
    gen_parser.add_argument("--method", "-m", choices=list(ALGORITHMS), default="eratosthenes", help="Algorithm")
    gen_parser.add_argument("--count-only", action="store_true", help="Print only the number of primes")
    gen_parser.add_argument("--output", "-o", default=None, help="Write results to a JSON file")

    cmp_parser = subparsers.add_parser("compare", help="Check that algorithms produce the same primes")
    cmp_parser.add_argument("limit", type=int, help="Upper bound (inclusive)")
    cmp_parser.add_argument("--methods", type=str, default=None,
                            help="Comma-separated methods (default: trial-division,eratosthenes,atkin)")

    bench_parser = subparsers.add_parser("benchmark", help="Time each algorithm")
    bench_parser.add_argument("limit", type=int, help="Upper bound (inclusive)")
    bench_parser.add_argument("--methods", type=str, default=None, help="Comma-separated methods (default: all)")
    bench_parser.add_argument("--repeat", type=int, default=3, help="Runs per method")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    commands = {
        "generate": cmd_generate,
        "compare": cmd_compare,
        "benchmark": cmd_benchmark,
    }

    try:
        return commands[args.command](args)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
