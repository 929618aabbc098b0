"""Error taxonomy for index generation."""
from __future__ import annotations

from pathlib import Path
from typing import Optional


class BookIndexError(RuntimeError):
    """Base class for failures that abort a generation run."""


class UsageError(BookIndexError):
    """Raised when the command line is missing the input path."""


class FileError(BookIndexError):
    """Raised when the input cannot be read or the output cannot be written."""

    def __init__(self, path: Path | str, reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"{self.path}: {reason}")


class ParseError(BookIndexError):
    """Raised when the input is not valid delimited tabular data."""

    def __init__(self, path: Path | str, reason: str, line: Optional[int] = None) -> None:
        self.path = Path(path)
        self.reason = reason
        self.line = line
        location = f"{self.path}, line {line}" if line is not None else str(self.path)
        super().__init__(f"{location}: {reason}")
