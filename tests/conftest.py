"""Shared fixtures for fixed-point tests."""

import pytest

from fplib.report import sine_error_profile


@pytest.fixture
def q15_grid() -> list[int]:
    """Sparse Q0.15 grid including both range bounds and values around zero."""
    return [-32768, -32767, -16384, -12345, -257, -256, -1, 0, 1, 255, 256, 4321, 16384, 32766, 32767]


@pytest.fixture
def q16_grid() -> list[int]:
    """Sparse Q0.16 grid including both range bounds."""
    return [0, 1, 2, 255, 256, 0x1234, 0x7FFF, 0x8000, 0x8001, 0xABCD, 0xFFFE, 0xFFFF]


@pytest.fixture
def u32_grid() -> list[int]:
    """Sparse 32-bit unsigned grid (Q0.32 / Q16.16 bit patterns)."""
    return [
        0, 1, 0xFFFF, 0x10000, 0x18000, 0x12345678, 0x7FFFFFFF,
        0x80000000, 0xDEADBEEF, 0xFFFF0000, 0xFFFFFFFF,
    ]


@pytest.fixture(scope="session")
def sine_profile():
    """Per-segment sin_q15 error profile (expensive, computed once)."""
    return sine_error_profile()
