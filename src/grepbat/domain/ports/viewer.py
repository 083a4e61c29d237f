"""Viewer runner port.

The invoker depends on this Protocol, not on subprocess.
Tests substitute a fake runner.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import Sequence


@dataclass(frozen=True, slots=True)
class ViewerOutput:
    """Captured result of one viewer run.

    Attributes:
        stdout: Raw standard output bytes
        stderr: Raw standard error bytes
        returncode: Exit status (informational only, never checked)
    """

    stdout: bytes
    stderr: bytes
    returncode: int = 0


class ViewerRunnerProtocol(Protocol):
    """Contract for running the external viewer.

    Blocks until the process exits and its output is fully captured.
    """

    def run(self, argv: Sequence[str]) -> ViewerOutput:
        """Run viewer and capture its streams.

        Args:
            argv: Full command line, program first

        Returns:
            Captured output

        Raises:
            ViewerSpawnError: If the process cannot be started
        """
        ...
