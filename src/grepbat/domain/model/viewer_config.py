"""Viewer configuration.

Fixed constants for the external viewer invocation.
Not exposed on the command line.
"""

from __future__ import annotations

from dataclasses import dataclass

from grepbat.domain.model.window import DEFAULT_WINDOW_SIZE


@dataclass(frozen=True, slots=True)
class ViewerConfig:
    """Immutable viewer configuration with FAIL-FIRST validation.

    Attributes:
        executable: Viewer program, looked up on PATH.
        window_size: Lines shown per result.
        style_flag: Enables line numbers.
        color_flag: Forces color even when stdout is not a terminal.
        pager_flag: Disables the interactive pager.
    """

    executable: str = "bat"
    window_size: int = DEFAULT_WINDOW_SIZE
    style_flag: str = "--style=numbers"
    color_flag: str = "--color=always"
    pager_flag: str = "--pager=never"

    def __post_init__(self) -> None:
        """Validate configuration. FAIL-FIRST."""
        if not self.executable:
            raise ValueError("executable must not be empty")
        if self.window_size < 3:
            raise ValueError(f"window_size must be >= 3, got {self.window_size}")

    @property
    def fixed_flags(self) -> tuple[str, ...]:
        """Presentation flags passed on every invocation."""
        return (self.style_flag, self.color_flag, self.pager_flag)
