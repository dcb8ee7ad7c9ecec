"""Fixed-point arithmetic primitives: Q-formats, conversion, multiply, divide,
interpolation and sine approximation."""

from .arith import (
    abs_q15,
    div_q16_q16,
    mul_aq15_q16,
    mul_q15_q15,
    mul_q15_q16,
    mul_q15_q1616,
    mul_q16_q16,
    mul_q32_q16,
    mul_q32_uint,
    mul_q1616_q16,
    mul_q1616_q1616,
    mul_q1616_uint,
)
from .convert import (
    convert_q15_q16,
    convert_q15_q16_naive,
    convert_q16_q15,
    convert_q16_q1516,
    convert_q1516_q16,
)
from .formats import FORMATS, Q15, Q16, Q16_HALF, Q32, Q1516, Q1616, HalfWords, QFormat
from .interp import interp_linear, interp_lut_256_q15
from .trig import SINE_LUT, SINE_SEGMENTS, sin_q15

__all__ = [
    "FORMATS",
    "HalfWords",
    "Q15",
    "Q16",
    "Q16_HALF",
    "Q32",
    "Q1516",
    "Q1616",
    "QFormat",
    "SINE_LUT",
    "SINE_SEGMENTS",
    "abs_q15",
    "convert_q15_q16",
    "convert_q15_q16_naive",
    "convert_q16_q15",
    "convert_q16_q1516",
    "convert_q1516_q16",
    "div_q16_q16",
    "interp_linear",
    "interp_lut_256_q15",
    "mul_aq15_q16",
    "mul_q15_q15",
    "mul_q15_q16",
    "mul_q15_q1616",
    "mul_q16_q16",
    "mul_q32_q16",
    "mul_q32_uint",
    "mul_q1616_q16",
    "mul_q1616_q1616",
    "mul_q1616_uint",
    "sin_q15",
]
