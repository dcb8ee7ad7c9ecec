"""Tests for two-point and lookup-table interpolation."""

import pytest

from fplib.arith import mul_q15_q16
from fplib.interp import LUT_256_LENGTH, interp_linear, interp_lut_256_q15
from fplib.trig import SINE_LUT


class TestInterpLinear:
    """Tests for interp_linear."""

    def test_zero_weight_returns_y1(self, q15_grid) -> None:
        for y1 in q15_grid:
            for y2 in q15_grid:
                assert interp_linear(y1, y2, 0) == y1

    def test_max_weight_within_one_lsb_of_y2(self, q15_grid) -> None:
        for y1 in q15_grid:
            for y2 in q15_grid:
                assert abs(interp_linear(y1, y2, 0xFFFF) - y2) <= 1

    def test_result_between_samples(self, q15_grid, q16_grid) -> None:
        for y1 in q15_grid[::2]:
            for y2 in q15_grid[1::2]:
                for x in q16_grid:
                    y = interp_linear(y1, y2, x)
                    assert min(y1, y2) <= y <= max(y1, y2)

    @pytest.mark.parametrize(
        "y1, y2, x, expected",
        [
            (0, 100, 0x8000, 50),
            (1000, 0, 0x8000, 500),
            (0, 32767, 0x4000, 8192),
            (-16384, 16384, 0x8000, 0),
        ],
    )
    def test_values(self, y1, y2, x, expected) -> None:
        assert interp_linear(y1, y2, x) == expected

    def test_rounds_instead_of_truncating(self) -> None:
        """1.5 LSB rounds to 2; a truncating multiply would give 1."""
        assert interp_linear(0, 3, 0x8000) == 2
        assert mul_q15_q16(3, 0x8000) == 1

    def test_ties_round_up(self) -> None:
        assert interp_linear(0, 101, 0x8000) == 51
        assert interp_linear(0, -101, 0x8000) == -50

    def test_accepts_bit_patterns(self) -> None:
        assert interp_linear(0xC000, 0x4000, 0x8000) == interp_linear(-0x4000, 0x4000, 0x8000)


class TestInterpLut256:
    """Tests for interp_lut_256_q15."""

    @staticmethod
    def _ramp() -> list[int]:
        return [100 * i for i in range(LUT_256_LENGTH)]

    def test_segment_boundaries_exact(self) -> None:
        table = [(i * 997) % 65536 - 32768 for i in range(LUT_256_LENGTH)]
        for idx in range(256):
            assert interp_lut_256_q15(table, idx << 8) == table[idx]

    def test_sine_lut_boundaries(self) -> None:
        for idx in range(256):
            assert interp_lut_256_q15(SINE_LUT, idx << 8) == SINE_LUT[idx]

    @pytest.mark.parametrize(
        "x, expected",
        [
            (0x0000, 0),
            (0x0001, 0),
            (0x0002, 1),
            (0x0080, 50),
            (0x0180, 150),
            (0xFFFF, 25600),
        ],
    )
    def test_ramp(self, x, expected) -> None:
        assert interp_lut_256_q15(self._ramp(), x) == expected

    def test_ties_round_up(self) -> None:
        table = [0] * LUT_256_LENGTH
        table[1] = 1
        assert interp_lut_256_q15(table, 0x0080) == 1
        table[1] = -1
        assert interp_lut_256_q15(table, 0x0080) == 0

    def test_last_segment_uses_final_entry(self) -> None:
        table = [0] * LUT_256_LENGTH
        table[256] = 25600
        assert interp_lut_256_q15(table, 0xFF80) == 12800

    def test_wrong_length_is_precondition_violation(self) -> None:
        with pytest.raises(AssertionError):
            interp_lut_256_q15([0] * 256, 0)
