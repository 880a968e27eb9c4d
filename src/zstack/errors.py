"""Error types raised by the extraction pipeline."""

from __future__ import annotations

from pathlib import Path


class ZStackError(Exception):
    """Base error for all zstack errors."""


class ParseError(ZStackError):
    """Raised when style-sheet or document text is not well-formed."""

    def __init__(
        self, message: str, line: int | None = None, column: int | None = None
    ):
        self.line = line
        self.column = column
        super().__init__(message)


class NoCompanionDocument(ZStackError):
    """Raised when the companion HTML document is missing or unreadable."""

    def __init__(self, path: str | Path, *, cause: Exception | None = None) -> None:
        self.path = Path(path)
        self.cause = cause
        super().__init__(f"No companion document at {self.path}")
