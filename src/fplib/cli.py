"""Command-line interface for evaluating fixed-point primitives."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable
from dataclasses import dataclass

from rich.console import Console

from . import arith, convert, interp, trig
from .formats import FORMATS, Q15, Q16, Q32, Q1516, Q1616, UINT16, QFormat
from .report import build_error_table, build_format_table, format_value, sine_error_profile


@dataclass(frozen=True)
class Operation:
    """A scalar primitive together with its operand and result formats."""

    func: Callable[..., int]
    args: tuple[QFormat, ...]
    result: QFormat


def _interp_sine_lut(x: int) -> int:
    """Sine over half a period via interp_lut_256_q15 and SINE_LUT."""
    return interp.interp_lut_256_q15(trig.SINE_LUT, x)


OPERATIONS: dict[str, Operation] = {
    "convert_q15_q16_naive": Operation(convert.convert_q15_q16_naive, (Q15,), Q16),
    "convert_q15_q16": Operation(convert.convert_q15_q16, (Q15,), Q16),
    "convert_q16_q1516": Operation(convert.convert_q16_q1516, (Q16,), Q1516),
    "convert_q16_q15": Operation(convert.convert_q16_q15, (Q16,), Q15),
    "convert_q1516_q16": Operation(convert.convert_q1516_q16, (Q1516,), Q16),
    "abs_q15": Operation(arith.abs_q15, (Q15,), Q15),
    "mul_q15_q15": Operation(arith.mul_q15_q15, (Q15, Q15), Q15),
    "mul_q15_q16": Operation(arith.mul_q15_q16, (Q15, Q16), Q15),
    "mul_q15_q1616": Operation(arith.mul_q15_q1616, (Q15, Q1616), Q15),
    "mul_q16_q16": Operation(arith.mul_q16_q16, (Q16, Q16), Q16),
    "mul_q32_q16": Operation(arith.mul_q32_q16, (Q32, Q16), Q32),
    "mul_q32_uint": Operation(arith.mul_q32_uint, (Q32, UINT16), Q32),
    "mul_q1616_q16": Operation(arith.mul_q1616_q16, (Q1616, Q16), Q1616),
    "mul_q1616_uint": Operation(arith.mul_q1616_uint, (Q1616, UINT16), Q1616),
    "mul_q1616_q1616": Operation(arith.mul_q1616_q1616, (Q1616, Q1616), Q1616),
    "div_q16_q16": Operation(arith.div_q16_q16, (Q16, Q16), Q1616),
    "interp_linear": Operation(interp.interp_linear, (Q15, Q15, Q16), Q15),
    "interp_sine_lut": Operation(_interp_sine_lut, (Q16,), Q15),
    "sin_q15": Operation(trig.sin_q15, (Q15,), Q15),
}


def _parse_int(value: str) -> int:
    """Parse an integer argument in any base Python accepts (0x.., 0b.., -12).

    Raises:
        argparse.ArgumentTypeError: If value is not an integer literal.
    """
    try:
        return int(value, 0)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer '{value}'") from None


def main(argv: list[str] | None = None) -> None:
    """Entry point for the fplib CLI."""
    parser = argparse.ArgumentParser(description="Fixed-point primitive library")
    sub = parser.add_subparsers(dest="command")

    sub.add_parser("formats", help="List the fixed-point formats")

    eval_parser = sub.add_parser("eval", help="Evaluate one primitive")
    eval_parser.add_argument("op", help="Operation name (see 'fplib ops')")
    eval_parser.add_argument(
        "args", nargs="*", type=_parse_int, metavar="ARG",
        help="Raw integer operands, e.g. 0x4000 or -16384",
    )

    sub.add_parser("ops", help="List operations available to 'eval'")

    err_parser = sub.add_parser("sine-error", help="Report sin_q15 approximation error")
    err_parser.add_argument(
        "--top", type=int, default=10, metavar="N",
        help="Show the N worst segments (0 shows all)",
    )

    fmt_parser = sub.add_parser("show", help="Show a raw value in a given format")
    fmt_parser.add_argument("format", help="Format name, e.g. Q0.15")
    fmt_parser.add_argument("value", type=_parse_int, help="Raw integer value")

    args = parser.parse_args(argv)
    console = Console(highlight=False)

    if args.command == "formats":
        console.print(build_format_table())
    elif args.command == "ops":
        list_operations(console)
    elif args.command == "eval":
        evaluate(console, args.op, args.args)
    elif args.command == "sine-error":
        report_sine_error(console, args.top)
    elif args.command == "show":
        fmt = FORMATS.get(args.format)
        if fmt is None:
            print(f"Error: unknown format '{args.format}'", file=sys.stderr)
            sys.exit(1)
        console.print(format_value(fmt, args.value))
    else:
        parser.print_help()
        sys.exit(1)


def list_operations(console: Console) -> None:
    """Print every registered operation with its signature."""
    for name, op in OPERATIONS.items():
        operands = ", ".join(fmt.name for fmt in op.args)
        console.print(f"{name}({operands}) -> {op.result.name}")


def evaluate(console: Console, name: str, operands: list[int]) -> int:
    """Run one registered operation and print operands and result.

    Operands are wrapped to their declared formats before the call.

    Args:
        console: Console to print to.
        name: Key into OPERATIONS.
        operands: Raw integer operands.

    Returns:
        The raw result.

    Raises:
        SystemExit: If the operation is unknown or the arity is wrong.
    """
    op = OPERATIONS.get(name)
    if op is None:
        print(f"Error: unknown operation '{name}'", file=sys.stderr)
        sys.exit(1)
    if len(operands) != len(op.args):
        print(
            f"Error: {name} takes {len(op.args)} operand(s), got {len(operands)}",
            file=sys.stderr,
        )
        sys.exit(1)

    wrapped = [fmt.wrap(v) for fmt, v in zip(op.args, operands)]
    for fmt, v in zip(op.args, wrapped):
        console.print(f"  in:  {format_value(fmt, v)}")
    result = op.func(*wrapped)
    console.print(f"  out: {format_value(op.result, result)}")
    return result


def report_sine_error(console: Console, top_n: int) -> None:
    """Print the worst sine segments and the overall maximum error."""
    profile = sine_error_profile()
    console.print(build_error_table(profile, top_n if top_n > 0 else None))
    worst = max(profile, key=lambda s: s.max_error)
    console.print(
        f"Max error: {worst.max_error:.3f} LSB "
        f"at x = 0x{worst.worst_x & 0xFFFF:04X} (segment {worst.index})"
    )
