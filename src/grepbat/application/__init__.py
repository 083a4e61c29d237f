"""Application layer: parsing and viewer orchestration."""

from grepbat.application.invoker import ViewerInvoker
from grepbat.application.parser import content_fragment_count, parse_result_line
from grepbat.application.runner import process_arguments

__all__ = [
    "ViewerInvoker",
    "content_fragment_count",
    "parse_result_line",
    "process_arguments",
]
