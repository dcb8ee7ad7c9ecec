"""Conversions between fixed-point formats.

None of these conversions round. Those that narrow a range either
saturate or simply drop bits, as documented per function.
"""

from .formats import HalfWords, to_s16, to_u16, to_s32


def convert_q15_q16_naive(arg: int) -> int:
    """Convert Q0.15 to Q0.16 by shifting the binary point.

    The value is shifted left one bit and bit 14 is copied into the freed
    LSB, so the Q0.15 maximum 0x7FFF maps onto the Q0.16 maximum 0xFFFF.
    Only correct for non-negative arguments; negative input wraps to an
    unrelated value. Use convert_q15_q16 when the sign is unknown.

    Args:
        arg: Q0.15 value.

    Returns:
        Q0.16 value.
    """
    arg = to_s16(arg)
    return to_u16((arg << 1) + (arg >> 14))


def convert_q15_q16(arg: int) -> int:
    """Convert Q0.15 to Q0.16, clipping negative values to zero."""
    arg = to_s16(arg)
    res = convert_q15_q16_naive(arg)
    # 0x0000 for arg < 0, 0xFFFF otherwise
    sat = to_u16(~(arg >> 15))
    return res & sat


def convert_q16_q1516(arg: int) -> int:
    """Convert Q0.16 to Q15.16 (zero-extension, exact)."""
    return HalfWords(high=0, low=to_u16(arg), signed=True).value


def convert_q16_q15(arg: int) -> int:
    """Convert Q0.16 to Q0.15 by dropping the least significant bit.

    This is a logical shift of the 16-bit pattern, so the result is
    always in 0..0x7FFF.
    """
    return to_u16(arg) >> 1


def convert_q1516_q16(arg: int) -> int:
    """Convert Q15.16 to Q0.16 with saturation.

    Values already in [0, 1) pass through unchanged. Negative values clip
    to 0, values >= 1.0 clip to the Q0.16 maximum 0xFFFF.

    Args:
        arg: Q15.16 value.

    Returns:
        Q0.16 value.
    """
    words = HalfWords.from_value(to_s32(arg), signed=True)
    if words.high == 0:
        return words.low
    # Fill zeros if negative, ones if positive
    return to_u16(~(words.high >> 15))
