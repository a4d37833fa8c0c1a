"""File reading and line iteration."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .exceptions import FileReadError

if TYPE_CHECKING:
    from collections.abc import Iterator

logger = logging.getLogger(__name__)


def read_text_file(path: str) -> str:
    """Read the whole of *path* as UTF-8 text.

    Line endings are preserved as-is (no newline translation), so ``\\r\\n``
    handling is left to :func:`iter_lines`.

    Raises:
        FileReadError: If the file is missing, unreadable, a directory, or
            not valid UTF-8.  The original exception is chained.
    """
    try:
        with open(path, encoding="utf-8", newline="") as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        logger.debug("Read failed for %s: %s", path, e)
        raise FileReadError(path, str(e)) from e


def iter_lines(text: str) -> Iterator[str]:
    """Yield the lines of *text* without their line terminators.

    - Splits on ``\\n`` only
    - Strips one ``\\r`` directly before a ``\\n``; a final ``\\r`` with no
      ``\\n`` after it is kept
    - A trailing newline does not produce a final empty line

    Examples:
        list(iter_lines("a\\nb\\n")) -> ["a", "b"]
        list(iter_lines("a\\r\\nb")) -> ["a", "b"]
        list(iter_lines("\\n")) -> [""]
        list(iter_lines("a\\r")) -> ["a\\r"]
        list(iter_lines("")) -> []
    """
    start = 0
    end = len(text)
    while start < end:
        newline = text.find("\n", start)
        if newline == -1:
            line = text[start:]
            start = end
        else:
            line = text[start:newline]
            start = newline + 1
            if line.endswith("\r"):
                line = line[:-1]
        yield line
