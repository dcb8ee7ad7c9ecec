"""Sine approximation in Q0.15 from a piecewise-linear segment table."""

import math

from .formats import Q15, to_s16, to_u16

# One full sine period over the Q0.15 domain [-1, 1) in 256 equal segments,
# stored as interleaved (slope, intercept) pairs:
#   slope[0], intercept[0], slope[1], intercept[1], ..., slope[255], intercept[255]
# Segment i covers bit patterns i * 256 .. i * 256 + 255. The pairs are
# fitted to minimize the maximum error over each segment, so they are not
# endpoint secants.
_SINE_TABLE: tuple[int, ...] = (
    804, 0, 804, 804, 802, 1608, 802, 2410, 799, 3212, 797, 4011, 794, 4808, 791, 5602,
    786, 6393, 783, 7179, 777, 7962, 773, 8739, 766, 9512, 761, 10278, 754, 11039, 746, 11793,
    740, 12539, 731, 13279, 722, 14010, 714, 14732, 705, 15446, 695, 16151, 684, 16846, 674, 17530,
    664, 18204, 651, 18868, 640, 19519, 628, 20159, 616, 20787, 602, 21403, 589, 22005, 576, 22594,
    561, 23170, 548, 23731, 532, 24279, 518, 24811, 503, 25329, 487, 25832, 471, 26319, 455, 26790,
    438, 27245, 422, 27683, 405, 28105, 388, 28510, 370, 28898, 353, 29268, 335, 29621, 317, 29956,
    298, 30273, 281, 30571, 261, 30852, 243, 31113, 224, 31356, 205, 31580, 186, 31785, 166, 31971,
    148, 32137, 127, 32285, 109, 32412, 88, 32521, 69, 32609, 50, 32678, 29, 32728, 10, 32757,
    -10, 32767, -29, 32757, -50, 32728, -69, 32678, -88, 32609, -109, 32521, -127, 32412, -148, 32285,
    -166, 32137, -186, 31971, -205, 31785, -224, 31580, -243, 31356, -261, 31113, -281, 30852, -298, 30571,
    -317, 30273, -335, 29956, -353, 29621, -370, 29268, -388, 28898, -405, 28510, -422, 28105, -438, 27683,
    -455, 27245, -471, 26790, -487, 26319, -503, 25832, -518, 25329, -532, 24811, -548, 24279, -561, 23731,
    -576, 23170, -589, 22594, -602, 22005, -616, 21403, -628, 20787, -640, 20159, -651, 19519, -664, 18868,
    -674, 18204, -684, 17530, -695, 16846, -705, 16151, -714, 15446, -722, 14732, -731, 14010, -740, 13279,
    -746, 12539, -754, 11793, -761, 11039, -766, 10278, -773, 9512, -777, 8739, -783, 7962, -786, 7179,
    -791, 6393, -794, 5602, -797, 4808, -799, 4011, -802, 3212, -802, 2410, -804, 1608, -804, 804,
    -804, 0, -804, -804, -802, -1608, -802, -2410, -799, -3212, -797, -4011, -794, -4808, -791, -5602,
    -786, -6393, -783, -7179, -777, -7962, -773, -8739, -766, -9512, -761, -10278, -754, -11039, -746, -11793,
    -740, -12539, -731, -13279, -722, -14010, -714, -14732, -705, -15446, -695, -16151, -684, -16846, -674, -17530,
    -664, -18204, -651, -18868, -640, -19519, -628, -20159, -616, -20787, -602, -21403, -589, -22005, -576, -22594,
    -561, -23170, -548, -23731, -532, -24279, -518, -24811, -503, -25329, -487, -25832, -471, -26319, -455, -26790,
    -438, -27245, -422, -27683, -405, -28105, -388, -28510, -370, -28898, -353, -29268, -335, -29621, -317, -29956,
    -298, -30273, -281, -30571, -261, -30852, -243, -31113, -224, -31356, -205, -31580, -186, -31785, -166, -31971,
    -148, -32137, -127, -32285, -109, -32412, -88, -32521, -69, -32609, -50, -32678, -29, -32728, -10, -32757,
    10, -32767, 29, -32757, 50, -32728, 69, -32678, 88, -32609, 109, -32521, 127, -32412, 148, -32285,
    166, -32137, 186, -31971, 205, -31785, 224, -31580, 243, -31356, 261, -31113, 281, -30852, 298, -30571,
    317, -30273, 335, -29956, 353, -29621, 370, -29268, 388, -28898, 405, -28510, 422, -28105, 438, -27683,
    455, -27245, 471, -26790, 487, -26319, 503, -25832, 518, -25329, 532, -24811, 548, -24279, 561, -23731,
    576, -23170, 589, -22594, 602, -22005, 616, -21403, 628, -20787, 640, -20159, 651, -19519, 664, -18868,
    674, -18204, 684, -17530, 695, -16846, 705, -16151, 714, -15446, 722, -14732, 731, -14010, 740, -13279,
    746, -12539, 754, -11793, 761, -11039, 766, -10278, 773, -9512, 777, -8739, 783, -7962, 786, -7179,
    791, -6393, 794, -5602, 797, -4808, 799, -4011, 802, -3212, 802, -2410, 804, -1608, 804, -804,
)

SINE_SEGMENTS: tuple[tuple[int, int], ...] = tuple(
    zip(_SINE_TABLE[0::2], _SINE_TABLE[1::2])
)


def sin_q15(x: int) -> int:
    """Compute sin(pi * x) for a Q0.15 argument.

    The interval [-1, 1) of x is mapped onto [-pi, pi). The upper byte of
    the two's-complement pattern of x selects a segment and the lower byte
    is the position inside it:

        y = intercept[seg] + slope[seg] * frac

    evaluated as a truncating Q0.15 x Q0.16 multiply with frac moved into
    the upper byte. No rounding beyond that truncation is applied.

    Args:
        x: Q0.15 angle as a fraction of pi.

    Returns:
        Q0.15 sine value.
    """
    bits = to_u16(x)
    slope, intercept = SINE_SEGMENTS[bits >> 8]
    frac = (bits & 0xFF) << 8
    return to_s16(intercept + ((slope * frac) >> 16))


def build_sine_lut() -> list[int]:
    """Precompute a 257-point Q0.15 table of sin(pi * x) for x in [0, 1].

    Entry i holds sin(pi * i / 256), rounded and saturated to Q0.15, so
    the table suits interp_lut_256_q15 over half a period.

    Returns:
        List of 257 Q0.15 values.
    """
    return [Q15.from_float(math.sin(math.pi * i / 256)) for i in range(257)]


# Module-level precomputed table
SINE_LUT: tuple[int, ...] = tuple(build_sine_lut())
