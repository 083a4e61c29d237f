"""grepbat - view grep/ag search results through bat."""

__version__ = "0.1.0"

from grepbat.application.parser import parse_result_line

__all__ = ["parse_result_line", "__version__"]
