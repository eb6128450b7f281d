"""Exception hierarchy for PDN Core.

The parse errors intentionally reuse the names ``IndentationError`` and
``SyntaxError``; import this module qualified (``from . import errors``) so
the builtins stay reachable elsewhere.
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(Enum):
    INDENTATION = "indentation"
    SYNTAX = "syntax"
    ESCAPE = "escape"
    DUPLICATE_KEY = "duplicate_key"


class PDNError(Exception):
    """Base class for every error raised by PDN Core."""


class ParseError(PDNError):
    """A document could not be parsed.

    ``line`` and ``column`` are 1-based. Either may be ``None`` when the
    error was raised outside of a document (e.g. ``escape.decode`` called
    directly on a loose string).
    """

    kind: ErrorKind = ErrorKind.SYNTAX

    def __init__(
        self,
        message: str,
        line: int | None = None,
        column: int | None = None,
    ) -> None:
        self.message = message
        self.line = line
        self.column = column
        super().__init__(str(self))

    def __str__(self) -> str:
        if self.line is None and self.column is None:
            return self.message
        if self.line is None:
            return f"column {self.column}: {self.message}"
        return f"line {self.line}, column {self.column}: {self.message}"


class IndentationError(ParseError):
    kind = ErrorKind.INDENTATION


class SyntaxError(ParseError):
    kind = ErrorKind.SYNTAX


class EscapeError(ParseError):
    kind = ErrorKind.ESCAPE

    def __init__(
        self,
        sequence: str,
        line: int | None = None,
        column: int | None = None,
    ) -> None:
        self.sequence = sequence
        super().__init__(f"unrecognized escape sequence {sequence!r}", line, column)


class DuplicateKeyError(ParseError):
    kind = ErrorKind.DUPLICATE_KEY

    def __init__(self, key: str, line: int | None = None, column: int | None = None) -> None:
        self.key = key
        super().__init__(f"duplicate key {key!r}", line, column)
