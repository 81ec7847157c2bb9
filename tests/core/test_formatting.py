"""Tests for core/formatting.py."""

import pytest

from gest.core.formatting import compress_ranges, format_lines, format_seconds


class TestFormatSeconds:
    """Tests for format_seconds."""

    @pytest.mark.parametrize(
        ("seconds", "expected"),
        [(0.0, "0.00s"), (0.345, "0.34s"), (1.0, "1.00s"), (125.5, "125.50s")],
    )
    def test_two_decimals(self, seconds: float, expected: str) -> None:
        assert format_seconds(seconds) == expected


class TestFormatLines:
    """Tests for format_lines."""

    def test_joins_with_commas(self) -> None:
        assert format_lines([3, 7, 9]) == "3,7,9"

    def test_empty(self) -> None:
        assert format_lines([]) == ""


class TestCompressRanges:
    """Tests for compress_ranges."""

    def test_empty_list(self) -> None:
        assert compress_ranges([]) == ""

    def test_single_line(self) -> None:
        assert compress_ranges([5]) == "5"

    def test_two_consecutive_lines(self) -> None:
        assert compress_ranges([1, 2]) == "1-2"

    def test_two_non_consecutive_lines(self) -> None:
        assert compress_ranges([1, 5]) == "1,5"

    def test_mixed_ranges_and_singles(self) -> None:
        assert compress_ranges([1, 2, 3, 5, 7, 8, 9]) == "1-3,5,7-9"

    def test_long_gap(self) -> None:
        assert compress_ranges([1, 2, 100, 101, 102]) == "1-2,100-102"
