"""Linear interpolation in Q0.15.

Unlike the multiply primitives, interpolation rounds: the weighted sum is
accumulated at full width and rounded to nearest (ties toward +inf) once,
when it is narrowed to Q0.15.
"""

from collections.abc import Sequence

from .formats import to_s16, to_u16

# Samples in a lookup table for interp_lut_256_q15 (256 segments + 1)
LUT_256_LENGTH: int = 257


def interp_linear(y1: int, y2: int, x: int) -> int:
    """Interpolate linearly between two Q0.15 samples.

    y(x) = y1 * (1 - x) + y2 * x = y1 - y1 * x + y2 * x, with x a
    fractional coordinate in [0, 1). Since x never reaches 1.0,
    interp_linear(y1, y2, 0xFFFF) lands within one LSB of y2 rather than
    exactly on it.

    Args:
        y1: Q0.15 sample at x = 0.
        y2: Q0.15 sample at x = 1.
        x: Q0.16 position between the samples.

    Returns:
        Q0.15 interpolation result.
    """
    y1 = to_s16(y1)
    y2 = to_s16(y2)
    # Q0.31 accumulator: y1 loaded into the high word
    acc = (y1 << 16) + (y2 - y1) * to_u16(x)
    return to_s16((acc + 0x8000) >> 16)


def interp_lut_256_q15(table: Sequence[int], x: int) -> int:
    """Interpolate a 257-point Q0.15 lookup table at Q0.16 position x.

    The upper byte of x selects the samples table[idx] and table[idx + 1],
    the lower byte is the weight between them in steps of 1/256. The
    result is exact at segment boundaries, so y(0) == table[0], and
    approaches table[256] as x approaches 1.

    Args:
        table: Exactly 257 Q0.15 samples (asserted only).
        x: Q0.16 position in [0, 1).

    Returns:
        Q0.15 interpolation result.
    """
    assert len(table) == LUT_256_LENGTH, "lookup table must hold 257 samples"
    x = to_u16(x)
    idx = x >> 8
    frac = x & 0xFF
    left = to_s16(table[idx])
    right = to_s16(table[idx + 1])
    acc = (left << 8) + (right - left) * frac
    return to_s16((acc + 0x80) >> 8)
