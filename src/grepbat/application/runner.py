"""Argument loop: parse each result, view each match, stop at first failure."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from grepbat.application.parser import parse_result_line

if TYPE_CHECKING:
    from collections.abc import Iterable

    from grepbat.application.invoker import ViewerInvoker

logger = logging.getLogger(__name__)


def process_arguments(arguments: Iterable[str], invoker: ViewerInvoker) -> None:
    """View every parsable argument in order.

    Malformed arguments are skipped silently. A CollaboratorError from the
    invoker propagates immediately and remaining arguments are not touched.

    Args:
        arguments: Raw result lines, usually sys.argv[1:]
        invoker: Viewer invoker
    """
    for raw in arguments:
        location = parse_result_line(raw)
        if location is None:
            continue

        logger.debug("Viewing %s", location)
        invoker.invoke(location.path, location.line)
