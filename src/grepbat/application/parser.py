"""Search result line parser.

Turns one grep/ag result line into a ParsedLocation:

    path:line:column:content

Both the path and the content may contain colons. Content colons are
harmless since content is dropped wholesale from the right. Path colons
are only recognized for a single-letter drive prefix (``c:\\src\\x.py``).
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING

from grepbat.domain.model.location import ParsedLocation
from grepbat.domain.model.window import MAX_LINE

if TYPE_CHECKING:
    from collections.abc import Sequence

logger = logging.getLogger(__name__)

FIELD_SEPARATOR = ":"
DRIVE_SEPARATOR = "\\"

# path + line + column + content
MIN_FRAGMENTS = 4

# Unsigned decimal, optional leading plus. No whitespace, no underscores.
_LINE_NUMBER_PATTERN = re.compile(r"\+?[0-9]+")

# Significant digits in MAX_LINE; longer numbers cannot fit.
_MAX_LINE_DIGITS = len(str(MAX_LINE))


def has_drive_prefix(fragments: Sequence[str]) -> bool:
    """Check the drive letter heuristic.

    True if the first fragment is exactly one byte (UTF-8) and the second
    starts with a backslash. Longer drive names and UNC paths are not
    recognized.
    """
    return len(fragments[0].encode()) == 1 and fragments[1].startswith(DRIVE_SEPARATOR)


def content_fragment_count(fragments: Sequence[str]) -> int:
    """Number of trailing fragments that belong to the matched content.

    Args:
        fragments: Result line split on ':' (at least MIN_FRAGMENTS items)

    Returns:
        Fragments to drop from the right before the column field
    """
    if len(fragments) < MIN_FRAGMENTS:
        raise ValueError(f"need at least {MIN_FRAGMENTS} fragments, got {len(fragments)}")

    leading = 4 if has_drive_prefix(fragments) else 3
    return len(fragments) - leading


def parse_line_number(text: str) -> int | None:
    """Parse unsigned decimal line number, None if malformed or above MAX_LINE."""
    if not _LINE_NUMBER_PATTERN.fullmatch(text):
        return None

    digits = text.removeprefix("+").lstrip("0")
    if len(digits) > _MAX_LINE_DIGITS:
        return None

    value = int(digits or "0")
    if value > MAX_LINE:
        return None
    return value


def parse_result_line(raw: str) -> ParsedLocation | None:
    """Extract file path and line number from a grep-style result.

    Args:
        raw: One result line, e.g. "src/app.py:10:4: import os"

    Returns:
        ParsedLocation, or None if the line is not a search result

    Example:
        >>> parse_result_line("foo:10:20: something")
        ParsedLocation(path='foo', line=10)
        >>> parse_result_line("c:\\\\foo:10:20: something")
        ParsedLocation(path='c:\\\\foo', line=10)
    """
    fragments = raw.split(FIELD_SEPARATOR)
    if len(fragments) < MIN_FRAGMENTS:
        logger.debug("Skipping %r: %d fields", raw, len(fragments))
        return None

    # content, then column
    keep = len(fragments) - content_fragment_count(fragments) - 1
    path_fragments = fragments[: keep - 1]

    line = parse_line_number(fragments[keep - 1])
    if line is None:
        logger.debug("Skipping %r: bad line number %r", raw, fragments[keep - 1])
        return None

    path = FIELD_SEPARATOR.join(path_fragments)
    if not path:
        logger.debug("Skipping %r: empty path", raw)
        return None

    return ParsedLocation(path=path, line=line)
