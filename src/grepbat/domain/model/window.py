"""Display window value object."""

from __future__ import annotations

import sys
from dataclasses import dataclass

# Largest line number handed to the viewer; sums past it are clamped.
MAX_LINE = sys.maxsize

DEFAULT_WINDOW_SIZE = 40


@dataclass(frozen=True, slots=True)
class DisplayWindow:
    """Contiguous range of lines shown around a match.

    Attributes:
        first: First displayed line (1-based, >= 1)
        last: Last displayed line (>= first)
        highlight: Line to highlight (the match)
    """

    first: int
    last: int
    highlight: int

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.first < 1:
            raise ValueError(f"first must be >= 1, got {self.first}")
        if self.last < self.first:
            raise ValueError(f"last ({self.last}) must be >= first ({self.first})")
        if self.highlight < 0:
            raise ValueError(f"highlight must be >= 0, got {self.highlight}")

    @classmethod
    def around(cls, center: int, size: int = DEFAULT_WINDOW_SIZE) -> DisplayWindow:
        """Build a window placing center about a third below the top.

        Args:
            center: Line to highlight
            size: Number of lines in the window

        Returns:
            Window clamped to [1, MAX_LINE]
        """
        if center < 0:
            raise ValueError(f"center must be >= 0, got {center}")
        if size < 1:
            raise ValueError(f"size must be >= 1, got {size}")

        first = max(1, center - size // 3)
        last = min(MAX_LINE, first + size - 1)
        return cls(first=first, last=last, highlight=center)

    @property
    def range_arg(self) -> str:
        """Line range flag for bat."""
        return f"--line-range={self.first}:{self.last}"

    @property
    def highlight_arg(self) -> str:
        """Highlight flag for bat."""
        return f"--highlight-line={self.highlight}"
