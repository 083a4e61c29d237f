"""Domain exceptions."""

from grepbat.domain.exceptions.base import GrepBatError
from grepbat.domain.exceptions.collaborator import (
    CollaboratorError,
    OutputWriteError,
    ViewerSpawnError,
)

__all__ = [
    "GrepBatError",
    "CollaboratorError",
    "ViewerSpawnError",
    "OutputWriteError",
]
