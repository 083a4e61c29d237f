"""Tests for domain/model/window.py."""

import sys

import pytest

from grepbat.domain.model.window import DEFAULT_WINDOW_SIZE, MAX_LINE, DisplayWindow


class TestDisplayWindowAround:
    """Tests for DisplayWindow.around()."""

    def test_default_size_is_forty(self) -> None:
        assert DEFAULT_WINDOW_SIZE == 40

    def test_center_far_from_top(self) -> None:
        window = DisplayWindow.around(100)
        assert window.first == 87
        assert window.last == 126
        assert window.highlight == 100

    def test_center_near_top_clamps_to_one(self) -> None:
        window = DisplayWindow.around(5)
        assert window.first == 1
        assert window.last == 40
        assert window.highlight == 5

    def test_center_zero(self) -> None:
        window = DisplayWindow.around(0)
        assert window.first == 1
        assert window.last == 40
        assert window.highlight == 0

    def test_center_equal_to_offset_clamps_to_one(self) -> None:
        window = DisplayWindow.around(13)
        assert window.first == 1

    def test_center_just_past_offset(self) -> None:
        window = DisplayWindow.around(14)
        assert window.first == 1
        assert window.last == 40

    def test_center_one_line_further(self) -> None:
        window = DisplayWindow.around(15)
        assert window.first == 2
        assert window.last == 41

    def test_window_always_has_size_lines(self) -> None:
        for center in (0, 1, 13, 50, 10_000):
            window = DisplayWindow.around(center)
            assert window.last - window.first + 1 == 40

    def test_last_clamped_at_max_line(self) -> None:
        window = DisplayWindow.around(MAX_LINE)
        assert MAX_LINE == sys.maxsize
        assert window.first == MAX_LINE - 13
        assert window.last == MAX_LINE

    def test_custom_size(self) -> None:
        window = DisplayWindow.around(100, size=10)
        assert window.first == 97
        assert window.last == 106

    def test_negative_center_raises(self) -> None:
        with pytest.raises(ValueError, match="center must be >= 0"):
            DisplayWindow.around(-1)

    def test_zero_size_raises(self) -> None:
        with pytest.raises(ValueError, match="size must be >= 1"):
            DisplayWindow.around(10, size=0)


class TestDisplayWindowFailFirst:
    """Tests for FAIL-FIRST validation in DisplayWindow."""

    def test_first_zero_raises(self) -> None:
        with pytest.raises(ValueError, match="first must be >= 1"):
            DisplayWindow(first=0, last=10, highlight=5)

    def test_last_before_first_raises(self) -> None:
        with pytest.raises(ValueError, match="last.*must be >= first"):
            DisplayWindow(first=10, last=5, highlight=5)

    def test_negative_highlight_raises(self) -> None:
        with pytest.raises(ValueError, match="highlight must be >= 0"):
            DisplayWindow(first=1, last=10, highlight=-1)


class TestDisplayWindowArgs:
    """Tests for bat flag rendering."""

    def test_range_arg(self) -> None:
        assert DisplayWindow.around(100).range_arg == "--line-range=87:126"

    def test_highlight_arg(self) -> None:
        assert DisplayWindow.around(100).highlight_arg == "--highlight-line=100"
