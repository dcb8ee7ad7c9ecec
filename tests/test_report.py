"""Tests for report formatters."""

from fplib.formats import Q15, Q16, Q1516, Q1616
from fplib.report import (
    SegmentError,
    build_error_table,
    build_format_table,
    format_value,
)


class TestFormatValue:
    """Tests for format_value."""

    def test_q15_half(self) -> None:
        result = format_value(Q15, 0x4000)
        assert "Q0.15 0x4000" in result
        assert "(16384)" in result
        assert "= 0.5" in result
        assert "[bold yellow]" not in result

    def test_negative_shown_as_pattern_and_value(self) -> None:
        result = format_value(Q15, -16384)
        assert "0xC000" in result
        assert "(-16384)" in result
        assert "= -0.5" in result

    def test_wraps_before_formatting(self) -> None:
        assert format_value(Q15, 0xC000) == format_value(Q15, -16384)

    def test_max_highlighted(self) -> None:
        assert format_value(Q15, 0x7FFF).startswith("[bold yellow]")
        assert format_value(Q16, 0xFFFF).startswith("[bold yellow]")

    def test_signed_min_highlighted(self) -> None:
        result = format_value(Q15, -32768)
        assert result.startswith("[bold yellow]")
        assert "0x8000" in result

    def test_unsigned_zero_not_highlighted(self) -> None:
        assert "[bold yellow]" not in format_value(Q16, 0)

    def test_32bit_padding(self) -> None:
        result = format_value(Q1616, 0x18000)
        assert "0x00018000" in result
        assert "= 1.5" in result

    def test_q1516_negative(self) -> None:
        result = format_value(Q1516, -0x8000)
        assert "0xFFFF8000" in result
        assert "= -0.5" in result


class TestFormatTable:
    """Tests for build_format_table."""

    def test_one_row_per_format(self) -> None:
        table = build_format_table()
        assert table.row_count == 5
        assert table.columns[0].header == "Format"

    def test_format_names(self) -> None:
        table = build_format_table()
        names = list(table.columns[0].cells)
        assert names == ["Q0.15", "Q0.16", "Q0.32", "Q16.16", "Q15.16"]


class TestSineErrorProfile:
    """Tests for sine_error_profile and build_error_table."""

    def test_one_entry_per_segment(self, sine_profile) -> None:
        assert len(sine_profile) == 256
        assert [s.index for s in sine_profile] == list(range(256))

    def test_entries_carry_table_pairs(self, sine_profile) -> None:
        assert sine_profile[0].slope == 804
        assert sine_profile[0].intercept == 0

    def test_error_bounded(self, sine_profile) -> None:
        for seg in sine_profile:
            assert 0.0 <= seg.max_error <= 4.65

    def test_worst_segment(self, sine_profile) -> None:
        """The bound above is the one the table actually reaches."""
        worst = max(sine_profile, key=lambda s: s.max_error)
        assert worst.index == 0x3C
        assert worst.worst_x == 0x3C73
        assert 4.6 < worst.max_error <= 4.65

    def test_worst_x_inside_segment(self, sine_profile) -> None:
        for seg in sine_profile:
            assert (seg.worst_x & 0xFFFF) >> 8 == seg.index

    def test_segment_start(self) -> None:
        assert SegmentError(128, -804, 0, 0.0, -32768).start == -1.0
        assert SegmentError(64, -10, 32767, 0.0, 0x4000).start == 0.5

    def test_table_all_rows(self, sine_profile) -> None:
        assert build_error_table(sine_profile).row_count == 256

    def test_table_top_n_sorted(self, sine_profile) -> None:
        table = build_error_table(sine_profile, top_n=3)
        assert table.row_count == 3
        errors = [float(e) for e in table.columns[4].cells]
        assert errors == sorted(errors, reverse=True)
