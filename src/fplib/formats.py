"""Q-format fixed-point types and half-word access for 32-bit values."""

from __future__ import annotations

import math
from dataclasses import dataclass


def to_s16(value: int) -> int:
    """Interpret the low 16 bits of value as a signed Python int."""
    value = value & 0xFFFF
    return value - 0x10000 if value >= 0x8000 else value


def to_u16(value: int) -> int:
    """Mask value to an unsigned 16-bit int."""
    return value & 0xFFFF


def to_s32(value: int) -> int:
    """Interpret the low 32 bits of value as a signed Python int."""
    value = value & 0xFFFFFFFF
    return value - 0x100000000 if value >= 0x80000000 else value


def to_u32(value: int) -> int:
    """Mask value to an unsigned 32-bit int."""
    return value & 0xFFFFFFFF


@dataclass(frozen=True)
class QFormat:
    """Fixed-point format QI.F with an optional sign bit.

    A value is stored as a plain int whose bit pattern is
    round(real_value * 2**frac_bits). Signed formats are held as their
    two's-complement signed interpretation, unsigned formats as their
    unsigned interpretation.
    """

    name: str
    int_bits: int
    frac_bits: int
    signed: bool

    @property
    def width(self) -> int:
        """Total bit width including the sign bit."""
        return self.int_bits + self.frac_bits + (1 if self.signed else 0)

    @property
    def mask(self) -> int:
        return (1 << self.width) - 1

    @property
    def scale(self) -> int:
        """Raw value representing 1.0 (may exceed max_raw)."""
        return 1 << self.frac_bits

    @property
    def resolution(self) -> float:
        return 1.0 / self.scale

    @property
    def min_raw(self) -> int:
        return -(1 << (self.width - 1)) if self.signed else 0

    @property
    def max_raw(self) -> int:
        return (1 << (self.width - 1)) - 1 if self.signed else self.mask

    def wrap(self, raw: int) -> int:
        """Reduce an arbitrary int to this format's width (modular).

        This is construction from a bit pattern: 0xC000 and -0x4000 both
        wrap to the same Q0.15 value.
        """
        raw = raw & self.mask
        if self.signed and raw > self.max_raw:
            raw -= 1 << self.width
        return raw

    def saturate(self, raw: int) -> int:
        """Clamp an arbitrary int to the representable range."""
        return max(self.min_raw, min(self.max_raw, raw))

    def from_float(self, value: float) -> int:
        """Convert a real value to this format, rounding half up and saturating."""
        return self.saturate(math.floor(value * self.scale + 0.5))

    def to_float(self, raw: int) -> float:
        """Convert a raw value (wrapped to this format first) to a float."""
        return self.wrap(raw) / self.scale


Q15 = QFormat("Q0.15", 0, 15, True)
Q16 = QFormat("Q0.16", 0, 16, False)
Q32 = QFormat("Q0.32", 0, 32, False)
Q1616 = QFormat("Q16.16", 16, 16, False)
Q1516 = QFormat("Q15.16", 15, 16, True)

# Plain 16-bit unsigned integer operand of the *_uint multiplies
UINT16 = QFormat("UINT16", 16, 0, False)

FORMATS: dict[str, QFormat] = {
    fmt.name: fmt for fmt in (Q15, Q16, Q32, Q1616, Q1516, UINT16)
}

# 0.5 in Q0.16
Q16_HALF: int = 32768


@dataclass(frozen=True)
class HalfWords:
    """A 32-bit value viewed as a high and a low 16-bit half-word.

    The low half is always unsigned (the fractional part of a Q16.16 or
    Q15.16 value). The high half is unsigned for the unsigned view and a
    sign-extended int16 for the signed view. Both halves denote one
    logical 32-bit value; the split is lossless in both directions.
    """

    high: int
    low: int
    signed: bool = False

    @classmethod
    def from_value(cls, value: int, signed: bool = False) -> HalfWords:
        """Split a 32-bit value (masked to 32 bits) into its half-words.

        Args:
            value: Any int; only its low 32 bits are used.
            signed: If True, the high half is returned as a signed int16.

        Returns:
            The half-word view of value.
        """
        value = value & 0xFFFFFFFF
        high = value >> 16
        if signed:
            high = to_s16(high)
        return cls(high=high, low=value & 0xFFFF, signed=signed)

    @property
    def value(self) -> int:
        """Recombine the halves into the 32-bit value.

        Signed views return the signed 32-bit interpretation, unsigned
        views the unsigned one.
        """
        combined = ((self.high & 0xFFFF) << 16) | (self.low & 0xFFFF)
        return to_s32(combined) if self.signed else combined
