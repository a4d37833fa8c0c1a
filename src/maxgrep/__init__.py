"""maxgrep: findstr-style line search.

Print the lines of a file that contain (or, with ``/v``, do not contain) a
query string, optionally case-insensitively (``/c``) and with line numbers
(``/n``).
"""

__version__ = "0.1.0"

from maxgrep.cli import format_matches, main, run
from maxgrep.config import GrepConfig, parse_args
from maxgrep.exceptions import FileReadError, InvalidArgumentCountError, MaxgrepError
from maxgrep.search import is_selected, search
from maxgrep.utils import iter_lines, read_text_file

__all__ = [
    "FileReadError",
    "GrepConfig",
    "InvalidArgumentCountError",
    "MaxgrepError",
    "__version__",
    "format_matches",
    "is_selected",
    "iter_lines",
    "main",
    "parse_args",
    "read_text_file",
    "run",
    "search",
]
