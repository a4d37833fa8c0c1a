"""Command-line entry point: parse, read, search, print."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, TextIO

from .config import parse_args
from .exceptions import FileReadError, InvalidArgumentCountError
from .search import search
from .utils import read_text_file

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from .config import GrepConfig

logger = logging.getLogger(__name__)


def format_matches(results: Mapping[int, str], show_line_numbers: bool = False) -> list[str]:
    """Render *results* in ascending line-number order, one string per line."""
    if show_line_numbers:
        return [f"{n}: {results[n]}" for n in sorted(results)]
    return [results[n] for n in sorted(results)]


def run(config: GrepConfig, stream: TextIO | None = None) -> None:
    """Search ``config.target`` and print the selected lines to *stream*.

    Nothing is written unless the file was read successfully.

    Raises:
        FileReadError: If the target cannot be read as text.
    """
    out = stream if stream is not None else sys.stdout
    content = read_text_file(config.target)
    results = search(config, content)
    for rendered in format_matches(results, config.show_line_numbers):
        out.write(rendered + "\n")


def main(argv: Sequence[str] | None = None) -> int:
    """Process entry point.  Returns the exit code."""
    tokens = list(sys.argv[1:] if argv is None else argv)
    logger.debug("Arguments: %r", tokens)

    try:
        config = parse_args(tokens)
    except InvalidArgumentCountError as e:
        print(f"Error occurred: {e}", file=sys.stderr)
        return 1
    logger.debug("Parsed %r", config)

    try:
        run(config)
    except FileReadError as e:
        print(e, file=sys.stderr)
        return 1
    return 0
