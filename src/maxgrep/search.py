"""Line-by-line substring search over in-memory text."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .utils import iter_lines

if TYPE_CHECKING:
    from .config import GrepConfig

logger = logging.getLogger(__name__)


def is_selected(contains: bool, invert_match: bool) -> bool:
    """Whether a line is kept, given if it contains the query and the invert flag."""
    return contains != invert_match


def search(config: GrepConfig, text: str) -> dict[int, str]:
    """Return selected lines of *text*, keyed by 1-based line number.

    Comparison is plain substring containment.  With ``case_insensitive``
    both query and line are lowercased before comparing, but the stored
    value is always the original line.  With ``invert_match`` the lines
    that do not contain the query are selected instead.

    The mapping is unordered; callers sort the keys before rendering.
    """
    query = config.query.lower() if config.case_insensitive else config.query

    results: dict[int, str] = {}
    scanned = 0
    for line_number, line in enumerate(iter_lines(text), start=1):
        scanned = line_number
        haystack = line.lower() if config.case_insensitive else line
        if is_selected(query in haystack, config.invert_match):
            results[line_number] = line

    logger.debug("Scanned %d line(s), selected %d", scanned, len(results))
    return results
