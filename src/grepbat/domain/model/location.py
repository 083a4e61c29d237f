"""Parsed search result location value object."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ParsedLocation:
    """File path and line recovered from one grep-style result line.

    Attributes:
        path: File path as written in the result (drive prefix kept)
        line: Line number (must be >= 0)
    """

    path: str
    line: int

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.path:
            raise ValueError("path must be non-empty")
        if self.line < 0:
            raise ValueError(f"line must be >= 0, got {self.line}")

    def __str__(self) -> str:
        """Format as path:line."""
        return f"{self.path}:{self.line}"
