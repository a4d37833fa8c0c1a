"""Custom exception hierarchy for maxgrep."""


class MaxgrepError(Exception):
    """Base exception for all maxgrep errors."""


class InvalidArgumentCountError(MaxgrepError):
    """Raised when the positional arguments left after flag removal are not exactly two."""

    def __init__(self, message: str = "Invalid number of arguments.") -> None:
        super().__init__(message)


class FileReadError(MaxgrepError):
    """Raised when the target file cannot be read as text (missing, unreadable, not UTF-8)."""

    def __init__(self, path: str, message: str) -> None:
        super().__init__(message)
        self.path = path
