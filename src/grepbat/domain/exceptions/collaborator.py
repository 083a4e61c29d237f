"""External viewer exceptions.

Any of these aborts the whole run: remaining arguments are not processed.
"""

from grepbat.domain.exceptions.base import GrepBatError


class CollaboratorError(GrepBatError):
    """External viewer could not be run or its output not forwarded.

    Attributes:
        executable: Viewer program name (must not be empty)
        reason: What went wrong (must not be empty)
    """

    def __init__(self, executable: str, reason: str) -> None:
        # FAIL-FIRST validation
        if not executable:
            raise ValueError("executable must not be empty")
        if not reason:
            raise ValueError("reason must not be empty")

        self.executable = executable
        self.reason = reason
        super().__init__(f"{executable}: {reason}")


class ViewerSpawnError(CollaboratorError):
    """Viewer process could not be started (not found, permission denied)."""

    def __init__(self, executable: str, reason: str) -> None:
        super().__init__(executable, f"failed to start: {reason}")


class OutputWriteError(CollaboratorError):
    """Captured viewer output could not be written to our own streams.

    Attributes:
        stream: Name of the failing stream ("stdout" or "stderr")
    """

    def __init__(self, executable: str, stream: str, reason: str) -> None:
        if stream not in ("stdout", "stderr"):
            raise ValueError(f"stream must be 'stdout' or 'stderr', got {stream!r}")

        self.stream = stream
        super().__init__(executable, f"failed to write {stream}: {reason}")
