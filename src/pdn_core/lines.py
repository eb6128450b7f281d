"""Line classification: one physical line -> kind + indentation width."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from . import errors
from .escape import decode


# ---------------------------------------------------------------------------
# LineKind
# ---------------------------------------------------------------------------

class LineKind(Enum):
    BLANK = auto()
    COMMENT = auto()      # #
    KEY = auto()          # (key)
    ARRAY_ITEM = auto()   # >
    SET_ITEM = auto()     # >|
    TEXT = auto()


# Longest marker first: ">|" must win over ">".
_ITEM_MARKERS: tuple[tuple[str, LineKind], ...] = (
    (">|", LineKind.SET_ITEM),
    (">", LineKind.ARRAY_ITEM),
)


@dataclass(frozen=True, slots=True)
class Line:
    lineno: int
    indent: int
    kind: LineKind
    content: str  # text after the indentation
    raw: str = ""  # whole line, terminator stripped

    @property
    def significant(self) -> bool:
        """False for lines that never contribute to the tree."""
        return self.kind not in (LineKind.BLANK, LineKind.COMMENT)


@dataclass(frozen=True, slots=True)
class KeyParts:
    key: str
    inline: str | None
    column: int  # document column of the inline value


@dataclass(frozen=True, slots=True)
class ItemParts:
    inline: str | None
    column: int
    opens_object: bool = False


# ---------------------------------------------------------------------------
# Classifier
# ---------------------------------------------------------------------------

class LineClassifier:
    """Classifies the lines of one document.

    Remembers the first indentation character it sees so that a document
    indenting some lines with tabs and others with spaces is rejected.
    """

    def __init__(self) -> None:
        self.indent_char: str | None = None

    def classify(self, raw: str, lineno: int) -> Line:
        if raw.endswith("\r"):
            raw = raw[:-1]
        content = raw.lstrip(" \t")
        indent = len(raw) - len(content)

        if not content.strip():
            return Line(lineno, indent, LineKind.BLANK, content, raw)

        if indent:
            self._check_indentation(raw[:indent], lineno)

        return Line(lineno, indent, _kind_of(content), content, raw)

    def _check_indentation(self, leading: str, lineno: int) -> None:
        if " " in leading and "\t" in leading:
            raise errors.IndentationError(
                "indentation mixes tabs and spaces", lineno, 1
            )
        char = leading[0]
        if self.indent_char is None:
            self.indent_char = char
        elif char != self.indent_char:
            raise errors.IndentationError(
                f"indented with {_char_name(char)} but the document uses "
                f"{_char_name(self.indent_char)}",
                lineno,
                1,
            )


def _kind_of(content: str) -> LineKind:
    if content.startswith("#"):
        return LineKind.COMMENT
    if content.startswith("("):
        return LineKind.KEY
    for marker, kind in _ITEM_MARKERS:
        if content == marker or content.startswith(marker + " "):
            return kind
    return LineKind.TEXT


def _char_name(char: str) -> str:
    return "tabs" if char == "\t" else "spaces"


# ---------------------------------------------------------------------------
# Key / item splitting
# ---------------------------------------------------------------------------

def find_closing_paren(text: str, start: int = 1) -> int:
    """Index of the first unescaped ``)`` at or after *start*, or -1."""
    i = start
    while i < len(text):
        ch = text[i]
        if ch == "\\":
            i += 2
            continue
        if ch == ")":
            return i
        i += 1
    return -1


def _inline(rest: str, column: int) -> tuple[str | None, int]:
    # Only the single separating space is removed.
    if rest.startswith(" "):
        rest = rest[1:]
        column += 1
    if not rest.strip():
        return None, column
    return rest, column


def split_key(line: Line) -> KeyParts:
    """Split a KEY line into its decoded key and raw inline value."""
    content = line.content
    close = find_closing_paren(content)
    if close < 0:
        raise errors.SyntaxError(
            "unterminated key: missing ')'", line.lineno, line.indent + 1
        )
    key = decode(content[1:close], line.lineno, line.indent + 2)
    inline, column = _inline(content[close + 1:], line.indent + close + 2)
    return KeyParts(key, inline, column)


def split_item(line: Line) -> ItemParts:
    """Split an ARRAY_ITEM / SET_ITEM line.

    ``> (marker)`` with nothing after the marker opens a list-of-objects
    element; the marker text is discarded.
    """
    marker = ">|" if line.kind is LineKind.SET_ITEM else ">"
    inline, column = _inline(
        line.content[len(marker):], line.indent + len(marker) + 1
    )
    if inline is not None and inline.startswith("("):
        close = find_closing_paren(inline)
        if close >= 0 and not inline[close + 1:].strip():
            return ItemParts(None, column, opens_object=True)
    return ItemParts(inline, column)
