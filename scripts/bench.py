#!/usr/bin/env python3
"""Fixed-point primitive profiler.

Runs micro-benchmarks of every scalar primitive plus the vectorized
multiply, reporting calls per second.

Usage:
    uv run python scripts/bench.py                 # all primitives
    uv run python scripts/bench.py mul             # substring match
    uv run python scripts/bench.py --cprofile sin  # cProfile dump
    uv run python scripts/bench.py -n 100000       # fewer iterations
"""

from __future__ import annotations

import argparse
import cProfile
import io
import pstats
import sys
import time
from pathlib import Path
from typing import Any

# Add project to path so we can import without installing
sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "src"))

from fplib.arith import mul_aq15_q16
from fplib.cli import OPERATIONS, Operation

MICRO_N = 200_000
VECTOR_LEN = 256

# Operand patterns cycled through by every benchmark, chosen to hit
# signed, unsigned and composite half-word paths
PATTERNS: list[int] = [0x0001, 0x4000, 0x7FFF, 0x8000, 0xC3A5, 0xFFFF]


def _operands(op: Operation) -> list[list[int]]:
    """Build operand tuples for op, wrapped to its declared formats."""
    rows = []
    for i in range(len(PATTERNS)):
        row = []
        for j, fmt in enumerate(op.args):
            raw = PATTERNS[(i + j) % len(PATTERNS)]
            if fmt.width == 32:
                raw = (raw << 16) | PATTERNS[(i + j + 1) % len(PATTERNS)]
            row.append(fmt.wrap(raw))
        # Keep the division precondition
        if op.func.__name__ == "div_q16_q16" and row[1] == 0:
            row[1] = 1
        rows.append(row)
    return rows


def bench_operation(op: Operation, n: int = MICRO_N) -> dict[str, Any]:
    """Benchmark one scalar primitive over a fixed operand mix."""
    rows = _operands(op)
    nr = len(rows)
    func = op.func
    start = time.perf_counter()
    for i in range(n):
        func(*rows[i % nr])
    elapsed = time.perf_counter() - start
    return {"ops": n, "elapsed": elapsed, "ops_per_sec": n / elapsed}


def bench_vector(n: int = MICRO_N) -> dict[str, Any]:
    """Benchmark mul_aq15_q16 in place; ops counts elements, not calls."""
    buf = [(i * 257) % 65536 - 32768 for i in range(VECTOR_LEN)]
    calls = max(1, n // VECTOR_LEN)
    start = time.perf_counter()
    for _ in range(calls):
        mul_aq15_q16(buf, 0xFFFF, buf)
    elapsed = time.perf_counter() - start
    ops = calls * VECTOR_LEN
    return {"ops": ops, "elapsed": elapsed, "ops_per_sec": ops / elapsed}


def run_cprofile(op: Operation, n: int) -> pstats.Stats:
    """Run one benchmark under cProfile and return stats."""
    pr = cProfile.Profile()
    pr.enable()
    bench_operation(op, n)
    pr.disable()
    return pstats.Stats(pr)


# ---------------------------------------------------------------------------
# Output formatting
# ---------------------------------------------------------------------------

def fmt_rate(ips: float) -> str:
    """Format operations per second."""
    if ips >= 1_000_000:
        return f"{ips / 1_000_000:.2f}M"
    if ips >= 1_000:
        return f"{ips / 1_000:.1f}K"
    return f"{ips:.0f}"


def print_micro_result(name: str, result: dict[str, Any]) -> None:
    """Print results for a micro-benchmark."""
    print(f"  {name:<24} {result['elapsed']:7.3f}s  "
          f"{fmt_rate(result['ops_per_sec']):>8}/s  "
          f"({result['ops']:,} ops)")


def print_cprofile_report(stats: pstats.Stats, top_n: int = 15) -> None:
    """Print a cProfile report focused on the hot path."""
    stream = io.StringIO()
    stats.stream = stream
    stats.sort_stats("tottime")
    stats.print_stats(top_n)
    print(stream.getvalue())


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------

VECTOR_NAME = "mul_aq15_q16"


def select_benchmarks(pattern: str | None) -> tuple[dict[str, Operation], bool]:
    """Pick the scalar primitives and decide whether to run the vector one.

    Args:
        pattern: Substring to match against primitive names, or None for all.

    Returns:
        Tuple of (matching scalar operations, whether the vector multiply
        matches).
    """
    if not pattern:
        return dict(OPERATIONS), True
    pattern = pattern.lower()
    selected = {name: op for name, op in OPERATIONS.items() if pattern in name}
    return selected, pattern in VECTOR_NAME


def main() -> None:
    parser = argparse.ArgumentParser(description="Profile the fixed-point primitives")
    parser.add_argument("operation", nargs="?", default=None,
                        help="Run only matching primitives (substring match)")
    parser.add_argument("--cprofile", action="store_true",
                        help="Run under cProfile and print hot functions")
    parser.add_argument("-n", type=int, default=MICRO_N,
                        help=f"Calls per benchmark (default {MICRO_N:,})")
    args = parser.parse_args()

    selected, run_vector = select_benchmarks(args.operation)
    if not selected and not run_vector:
        print(f"No primitive matching '{args.operation}'")
        print(f"Available: {', '.join(OPERATIONS)}, {VECTOR_NAME}")
        sys.exit(1)

    if selected:
        print("Scalar primitives")
        print("-" * 65)
        for name, op in selected.items():
            if args.cprofile:
                print(f"\ncProfile: {name}")
                print("=" * 65)
                print_cprofile_report(run_cprofile(op, args.n))
            else:
                print_micro_result(name, bench_operation(op, args.n))
        print()

    if run_vector:
        print("Vector primitives")
        print("-" * 65)
        print_micro_result(f"{VECTOR_NAME} (len {VECTOR_LEN})", bench_vector(args.n))
        print()


if __name__ == "__main__":
    main()
