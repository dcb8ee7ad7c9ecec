"""Report formatting: fixed-point values, format summary, sine error profile."""

from __future__ import annotations

import math
from dataclasses import dataclass

from rich.table import Table

from .formats import Q15, Q16, Q32, Q1516, Q1616, QFormat, to_s16
from .trig import SINE_SEGMENTS, sin_q15


def format_value(fmt: QFormat, raw: int) -> str:
    """Format a raw fixed-point value for display in a Rich console.

    Shows the bit pattern in hex, the raw integer and the real value.
    Values sitting on a saturation bound (the format maximum, or the
    minimum of a signed format) are highlighted with Rich markup
    ``[bold yellow]...[/bold yellow]``.

    Args:
        fmt: Format of the value.
        raw: Raw value; wrapped to the format width first.

    Returns:
        A string with Rich markup.
    """
    raw = fmt.wrap(raw)
    digits = fmt.width // 4
    text = f"{fmt.name} 0x{raw & fmt.mask:0{digits}X} ({raw}) = {fmt.to_float(raw):.10g}"
    if raw == fmt.max_raw or (fmt.signed and raw == fmt.min_raw):
        return f"[bold yellow]{text}[/bold yellow]"
    return text


def build_format_table() -> Table:
    """Build a Rich table describing the five fixed-point formats."""
    table = Table(title="Fixed-point formats")
    table.add_column("Format")
    table.add_column("Width", justify="right")
    table.add_column("Signed")
    table.add_column("Range")
    table.add_column("Resolution")
    for fmt in (Q15, Q16, Q32, Q1616, Q1516):
        lo = fmt.min_raw / fmt.scale
        hi = (fmt.max_raw + 1) / fmt.scale
        table.add_row(
            fmt.name,
            str(fmt.width),
            "yes" if fmt.signed else "no",
            f"[{lo:g}, {hi:g})",
            f"2^-{fmt.frac_bits}",
        )
    return table


@dataclass(frozen=True)
class SegmentError:
    """Worst-case error of sin_q15 over one table segment."""

    index: int
    slope: int
    intercept: int
    max_error: float  # in Q0.15 LSB
    worst_x: int  # Q0.15 argument where max_error occurs

    @property
    def start(self) -> float:
        """Real value of the first argument covered by the segment."""
        return Q15.to_float(self.index << 8)


def sine_error_profile() -> list[SegmentError]:
    """Measure sin_q15 against math.sin over every Q0.15 argument.

    Returns:
        One SegmentError per table segment, in segment order.
    """
    profile: list[SegmentError] = []
    for index, (slope, intercept) in enumerate(SINE_SEGMENTS):
        max_error = -1.0
        worst_x = 0
        for low in range(256):
            x = to_s16((index << 8) | low)
            exact = math.sin(math.pi * x / Q15.scale) * Q15.scale
            error = abs(sin_q15(x) - exact)
            if error > max_error:
                max_error = error
                worst_x = x
        profile.append(SegmentError(index, slope, intercept, max_error, worst_x))
    return profile


def build_error_table(profile: list[SegmentError], top_n: int | None = None) -> Table:
    """Build a Rich table of sine segment errors.

    Args:
        profile: Output of sine_error_profile.
        top_n: If given, show only the top_n segments with the largest
            error, worst first. Otherwise all segments in order.

    Returns:
        A Rich Table ready for printing.
    """
    rows = profile
    if top_n is not None:
        rows = sorted(profile, key=lambda s: s.max_error, reverse=True)[:top_n]

    table = Table(title="sin_q15 segment error")
    table.add_column("Seg", justify="right")
    table.add_column("Start", justify="right")
    table.add_column("Slope", justify="right")
    table.add_column("Intercept", justify="right")
    table.add_column("Max err (LSB)", justify="right")
    table.add_column("Worst x", justify="right")
    for seg in rows:
        table.add_row(
            str(seg.index),
            f"{seg.start:+.5f}",
            str(seg.slope),
            str(seg.intercept),
            f"{seg.max_error:.3f}",
            f"0x{seg.worst_x & 0xFFFF:04X}",
        )
    return table
