"""Fixed-point absolute value, multiplication and division.

Multiplications compute the full-width product and keep only the bits of
the declared output format. They truncate (toward negative infinity for
signed results), never round, and never check for overflow: results wrap
to the output width.
"""

from __future__ import annotations

from collections.abc import MutableSequence, Sequence

from .formats import HalfWords, to_s16, to_u16, to_u32

Q15_MIN: int = -0x8000
Q15_MAX: int = 0x7FFF


# ---------------------------------------------------------------------------
# Absolute value
# ---------------------------------------------------------------------------

def abs_q15(arg: int) -> int:
    """Saturating absolute value of a Q0.15 number.

    abs(-32768) has no Q0.15 representation, so it maps to 32767 instead
    of wrapping back to -32768.

    Args:
        arg: Q0.15 value.

    Returns:
        Non-negative Q0.15 value.
    """
    arg = to_s16(arg)
    if arg == Q15_MIN:
        return Q15_MAX
    return -arg if arg < 0 else arg


# ---------------------------------------------------------------------------
# Scalar multiplication
# ---------------------------------------------------------------------------

def mul_q15_q15(arg1: int, arg2: int) -> int:
    """Q0.15 x Q0.15 -> Q0.15, truncated.

    The Q1.30 product is shifted into Q0.15. -1.0 * -1.0 is not
    representable and wraps to -1.0.
    """
    return to_s16((to_s16(arg1) * to_s16(arg2)) >> 15)


def mul_q15_q16(arg1: int, arg2: int) -> int:
    """Q0.15 x Q0.16 -> Q0.15, truncated."""
    return to_s16((to_s16(arg1) * to_u16(arg2)) >> 16)


def mul_q15_q1616(arg1: int, arg2: int) -> int:
    """Q0.15 x Q16.16 -> Q0.15, truncated but not clipped.

    The integer half of arg2 contributes the low word of its product,
    the fractional half is handled by mul_q15_q16.

    Args:
        arg1: Q0.15 factor.
        arg2: Q16.16 factor.

    Returns:
        Q0.15 product; wraps if the magnitude reaches 1.0.
    """
    arg1 = to_s16(arg1)
    words = HalfWords.from_value(arg2)
    int_part = to_u16(arg1 * words.high)
    return to_s16(int_part + mul_q15_q16(arg1, words.low))


def mul_q16_q16(arg1: int, arg2: int) -> int:
    """Q0.16 x Q0.16 -> Q0.16, truncated."""
    return (to_u16(arg1) * to_u16(arg2)) >> 16


def mul_q32_q16(arg1: int, arg2: int) -> int:
    """Q0.32 x Q0.16 -> Q0.32, truncated from the Q0.48 product."""
    words = HalfWords.from_value(arg1)
    arg2 = to_u16(arg2)
    res = words.high * arg2
    res += (words.low * arg2) >> 16
    return to_u32(res)


def mul_q32_uint(arg1: int, arg2: int) -> int:
    """Q0.32 x uint16 -> Q0.32, keeping only the fractional part.

    The caller must make sure the integer part of the product is zero;
    any integer bits are silently dropped.

    Args:
        arg1: Q0.32 factor.
        arg2: Plain unsigned 16-bit integer.

    Returns:
        Q0.32 product.
    """
    words = HalfWords.from_value(arg1)
    arg2 = to_u16(arg2)
    res = words.low * arg2
    # Only the low word of the high-half product lands in the result
    res += to_u16(words.high * arg2) << 16
    return to_u32(res)


def mul_q1616_q16(arg1: int, arg2: int) -> int:
    """Q16.16 x Q0.16 -> Q16.16, truncated from the Q16.32 product."""
    words = HalfWords.from_value(arg1)
    arg2 = to_u16(arg2)
    res = words.high * arg2
    res += (words.low * arg2) >> 16
    return to_u32(res)


def mul_q1616_uint(arg1: int, arg2: int) -> int:
    """Q16.16 x uint16 -> Q16.16.

    The integer part of the product must not exceed 65535; overflow is
    not detected and wraps.
    """
    words = HalfWords.from_value(arg1)
    arg2 = to_u16(arg2)
    res = words.low * arg2
    res += to_u16(words.high * arg2) << 16
    return to_u32(res)


def mul_q1616_q1616(arg1: int, arg2: int) -> int:
    """Q16.16 x Q16.16 -> Q16.16, truncated.

    Built from the integer and fractional halves of arg2. The integer
    part of the product must not exceed 65535; overflow wraps.

    Args:
        arg1: Q16.16 factor.
        arg2: Q16.16 factor.

    Returns:
        Q16.16 product.
    """
    words = HalfWords.from_value(arg2)
    return to_u32(mul_q1616_uint(arg1, words.high) + mul_q1616_q16(arg1, words.low))


# ---------------------------------------------------------------------------
# Vector multiplication
# ---------------------------------------------------------------------------

def mul_aq15_q16(src: Sequence[int], val: int, dst: MutableSequence[int]) -> None:
    """Multiply every Q0.15 element of src by the Q0.16 scalar val.

    Each result is what mul_q15_q16 returns for that element. Elements
    are processed in index order and each one is read before its result
    is written, so src and dst may be the same list.

    Preconditions (checked by assertions only): len(src) >= 1 and
    len(dst) == len(src).

    Args:
        src: Q0.15 input elements.
        val: Q0.16 factor.
        dst: Destination for the Q0.15 products.
    """
    n = len(src)
    assert n >= 1, "mul_aq15_q16 requires at least one element"
    assert len(dst) == n, "destination length must match source length"
    val = to_u16(val)
    for i in range(n):
        dst[i] = mul_q15_q16(src[i], val)


# ---------------------------------------------------------------------------
# Division
# ---------------------------------------------------------------------------

def div_q16_q16(num: int, den: int) -> int:
    """Divide two Q0.16 numbers, returning a Q16.16 quotient.

    Equivalent to restoring long division of num * 2**16 by den: 16
    integer quotient bits followed by 16 fractional bits. The quotient is
    truncated, not rounded. den must be non-zero; this is only asserted.

    Args:
        num: Q0.16 numerator.
        den: Q0.16 denominator, non-zero.

    Returns:
        Q16.16 quotient.
    """
    num = to_u16(num)
    den = to_u16(den)
    assert den != 0, "div_q16_q16 denominator must be non-zero"
    return to_u32((num << 16) // den)
