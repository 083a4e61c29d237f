"""Subprocess-backed viewer runner."""

from __future__ import annotations

import subprocess
from typing import TYPE_CHECKING

from grepbat.domain.exceptions import ViewerSpawnError
from grepbat.domain.ports.viewer import ViewerOutput

if TYPE_CHECKING:
    from collections.abc import Sequence


class BatRunner:
    """Runs the viewer as a child process and captures both streams.

    No timeout: a hung viewer hangs the run.
    """

    def run(self, argv: Sequence[str]) -> ViewerOutput:
        """Run argv to completion.

        Raises:
            ViewerSpawnError: If the program cannot be started
        """
        if not argv:
            raise ValueError("argv must not be empty")

        try:
            completed = subprocess.run(list(argv), capture_output=True, check=False)
        except OSError as e:
            raise ViewerSpawnError(argv[0], str(e)) from e

        return ViewerOutput(
            stdout=completed.stdout,
            stderr=completed.stderr,
            returncode=completed.returncode,
        )
