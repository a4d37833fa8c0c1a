"""GrepConfig and command-line token parsing."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from .exceptions import InvalidArgumentCountError

if TYPE_CHECKING:
    from collections.abc import Sequence

logger = logging.getLogger(__name__)

LINE_NUMBER_FLAG = "/n"
INVERT_FLAG = "/v"
CASE_INSENSITIVE_FLAG = "/c"


@dataclass(frozen=True, slots=True)
class GrepConfig:
    """Immutable search configuration built once from the command line.

    Attributes:
        query: Substring to search for.
        target: Path of the file to search.
        case_insensitive: Lowercase both query and line before comparing (``/c``).
        show_line_numbers: Prefix each printed line with its 1-based number (``/n``).
        invert_match: Select lines that do NOT contain the query (``/v``).
    """

    query: str
    target: str
    case_insensitive: bool = False
    show_line_numbers: bool = False
    invert_match: bool = False


def _first_index(tokens: Sequence[str], flag: str) -> int | None:
    """Return the index of the first token equal to *flag*, or None."""
    for i, token in enumerate(tokens):
        if token == flag:
            return i
    return None


def parse_args(tokens: Sequence[str]) -> GrepConfig:
    """Build a :class:`GrepConfig` from raw command-line tokens.

    Only the first occurrence of each flag is consumed; a repeated flag is
    left behind and counts as a positional.  Unrecognized ``/x`` tokens are
    positionals too.  After flag removal exactly two tokens must remain:
    the query, then the target path.

    *tokens* is not modified.

    Raises:
        InvalidArgumentCountError: If the remaining token count is not two.
    """
    consumed: set[int] = set()
    found: dict[str, bool] = {}
    for flag in (LINE_NUMBER_FLAG, INVERT_FLAG, CASE_INSENSITIVE_FLAG):
        index = _first_index(tokens, flag)
        found[flag] = index is not None
        if index is not None:
            consumed.add(index)

    positionals = [token for i, token in enumerate(tokens) if i not in consumed]
    if len(positionals) != 2:
        logger.debug("Expected 2 positional arguments, got %d: %r", len(positionals), positionals)
        raise InvalidArgumentCountError()

    query, target = positionals
    return GrepConfig(
        query=query,
        target=target,
        case_insensitive=found[CASE_INSENSITIVE_FLAG],
        show_line_numbers=found[LINE_NUMBER_FLAG],
        invert_match=found[INVERT_FLAG],
    )
