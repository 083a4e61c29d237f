"""Viewer invoker: ParsedLocation → bat output on our terminal."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, BinaryIO

from grepbat.domain.exceptions import OutputWriteError
from grepbat.domain.model.viewer_config import ViewerConfig
from grepbat.domain.model.window import DisplayWindow

if TYPE_CHECKING:
    from grepbat.domain.ports.viewer import ViewerOutput, ViewerRunnerProtocol

logger = logging.getLogger(__name__)


class ViewerInvoker:
    """Runs the viewer for one location and forwards its output.

    Output is written through byte-for-byte: stdout to stdout, stderr to
    stderr. Ordering between the two streams is not preserved.
    """

    def __init__(
        self,
        runner: ViewerRunnerProtocol,
        config: ViewerConfig | None = None,
        stdout: BinaryIO | None = None,
        stderr: BinaryIO | None = None,
    ) -> None:
        """Initialize invoker.

        Args:
            runner: Collaborator that actually runs the viewer.
            config: Viewer constants. Uses defaults if None.
            stdout: Binary stream for viewer stdout. sys.stdout.buffer if None.
            stderr: Binary stream for viewer stderr. sys.stderr.buffer if None.
        """
        if runner is None:
            raise TypeError("runner must not be None")

        self._runner = runner
        self._config = config or ViewerConfig()
        self._stdout = stdout
        self._stderr = stderr

    def window_for(self, center_line: int) -> DisplayWindow:
        """Compute display window for center_line."""
        return DisplayWindow.around(center_line, self._config.window_size)

    def build_argv(self, path: str, center_line: int) -> list[str]:
        """Build full viewer command line.

        Args:
            path: File to display (last positional argument)
            center_line: Line to highlight

        Returns:
            argv with the program first
        """
        window = self.window_for(center_line)
        return [
            self._config.executable,
            *self._config.fixed_flags,
            window.range_arg,
            window.highlight_arg,
            path,
        ]

    def invoke(self, path: str, center_line: int) -> None:
        """Show path around center_line.

        Blocks until the viewer exits. Its exit status is ignored.

        Raises:
            ViewerSpawnError: Viewer could not be started
            OutputWriteError: Captured output could not be forwarded
        """
        argv = self.build_argv(path, center_line)
        logger.debug("Running viewer: %s", argv)

        output = self._runner.run(argv)
        logger.debug("Viewer exited with status %d", output.returncode)

        self._forward(output)

    def _forward(self, output: ViewerOutput) -> None:
        """Write captured streams through verbatim."""
        stdout = self._stdout if self._stdout is not None else sys.stdout.buffer
        stderr = self._stderr if self._stderr is not None else sys.stderr.buffer

        for name, stream, data in (
            ("stdout", stdout, output.stdout),
            ("stderr", stderr, output.stderr),
        ):
            try:
                stream.write(data)
                stream.flush()
            except OSError as e:
                raise OutputWriteError(self._config.executable, name, str(e)) from e
