"""Infrastructure layer: process execution."""

from grepbat.infrastructure.bat_runner import BatRunner

__all__ = ["BatRunner"]
