"""Domain value objects."""

from grepbat.domain.model.location import ParsedLocation
from grepbat.domain.model.viewer_config import ViewerConfig
from grepbat.domain.model.window import DisplayWindow

__all__ = [
    "ParsedLocation",
    "DisplayWindow",
    "ViewerConfig",
]
