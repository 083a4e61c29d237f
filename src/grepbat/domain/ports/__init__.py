"""Ports: contracts implemented by outer layers."""

from grepbat.domain.ports.viewer import ViewerOutput, ViewerRunnerProtocol

__all__ = [
    "ViewerOutput",
    "ViewerRunnerProtocol",
]
