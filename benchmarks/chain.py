#!/usr/bin/env python3
from __future__ import annotations

import argparse
import statistics
import sys
import timeit
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1] / "python"))

from nullsafe import wrap  # noqa: E402

_SAMPLE = {
    "owner": {"name": "Jon", "roles": ["admin", "ops"], "greet": lambda: "hi"},
    "ids": [1, 2, 3],
}


def _present_chain() -> object:
    return wrap(_SAMPLE).get("owner").get("roles", 1).call("upper").value


def _absent_chain() -> object:
    return wrap(_SAMPLE).get("missing").call("junk").apply("more", [1]).value


def _path_chain() -> object:
    return wrap(_SAMPLE, ["owner", "roles", 0]).value


def _method_chain() -> object:
    return wrap(_SAMPLE).call("get", "owner").call("greet").value


_CHAINS = {
    "present": _present_chain,
    "absent": _absent_chain,
    "path": _path_chain,
    "method": _method_chain,
}


def _sample(chain, iterations: int, repeat: int) -> list[float]:
    totals = timeit.repeat(chain, number=repeat, repeat=iterations)
    return [total * 1_000_000.0 / repeat for total in totals]


def _summarize(name: str, result: object, samples: list[float]) -> str:
    best = min(samples)
    median = statistics.median(samples)
    spread = statistics.pstdev(samples)
    return f"{name:<8} {best:>9.3f} {median:>9.3f} {spread:>9.3f}  {result!r}"


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Time nullsafe proxy chains (microseconds per chain).",
    )
    parser.add_argument("--iterations", type=int, default=20)
    parser.add_argument(
        "--repeat",
        type=int,
        default=10_000,
        help="Chains evaluated per sample.",
    )
    parser.add_argument(
        "chains",
        nargs="*",
        metavar="CHAIN",
        help=f"Chain shapes to time ({', '.join(sorted(_CHAINS))}); default: all",
    )
    args = parser.parse_args(argv)

    if args.iterations <= 0:
        parser.error("--iterations must be positive")
    if args.repeat <= 0:
        parser.error("--repeat must be positive")
    unknown = [name for name in args.chains if name not in _CHAINS]
    if unknown:
        parser.error(f"unknown chain: {', '.join(unknown)}")

    names = args.chains or sorted(_CHAINS)
    print(f"{'chain':<8} {'best':>9} {'median':>9} {'stdev':>9}  result")
    for name in names:
        chain = _CHAINS[name]
        samples = _sample(chain, args.iterations, args.repeat)
        print(_summarize(name, chain(), samples))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
