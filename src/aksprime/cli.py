"""Command-line interface for aksprime."""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

from .aks import InvalidInput, certify
from .config import ConfigError, clear_config, configure
from .runtime import JobCancelled


EXIT_INVALID = 2
EXIT_CANCELLED = 3


def _describe(result) -> str:
    verdict = "prime" if result.is_prime else "composite"
    return f"{result.n}: {verdict}"


def _explain(result) -> str:
    parts = [f"stage={result.stage.value}"]
    if result.r is not None:
        parts.append(f"r={result.r}")
    if result.witness_limit is not None:
        parts.append(f"witnesses={result.witness_limit}")
    if result.elapsed_s is not None:
        parts.append(f"elapsed={result.elapsed_s:.3f}s")
    return f"{_describe(result)} ({', '.join(parts)})"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="aksprime",
        description="Deterministic AKS primality test",
    )
    parser.add_argument("numbers", type=int, nargs="+", help="Integers >= 2 to test")
    parser.add_argument("--workers", type=int, default=1, help="Worker processes for witness checks")
    parser.add_argument("--deadline", type=float, default=None, help="Per-number time limit in seconds")
    parser.add_argument("--explain", action="store_true", help="Show how each decision was reached")
    parser.add_argument("--verbose", "-v", action="store_true", help="Print progress")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        configure(
            workers=args.workers,
            deadline_s=args.deadline,
            time_job=args.explain,
            progress_to_terminal=args.verbose,
        )
    except ConfigError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_INVALID

    try:
        for n in args.numbers:
            result = certify(n)
            print(_explain(result) if args.explain else _describe(result))
    except InvalidInput as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_INVALID
    except JobCancelled as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_CANCELLED
    finally:
        clear_config()
    return 0


if __name__ == "__main__":
    sys.exit(main())
