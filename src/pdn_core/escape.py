"""Escape codec for scalar text.

Recognized sequences: ``\\n`` ``\\t`` ``\\\\`` ``\\(`` ``\\)`` ``\\#``.
Multi-line string blocks only use the ``\\#`` rule, see ``encode_block_line``.
"""

from __future__ import annotations

from . import errors

_DECODE: dict[str, str] = {
    "n": "\n",
    "t": "\t",
    "\\": "\\",
    "(": "(",
    ")": ")",
    "#": "#",
}

_ENCODE: dict[str, str] = {
    "\\": "\\\\",
    "(": "\\(",
    ")": "\\)",
    "\t": "\\t",
}


def decode(text: str, line: int | None = None, column: int = 1) -> str:
    """Replace escape sequences in *text*.

    *column* is the document column of ``text[0]``; it is only used to
    position an ``EscapeError``.
    """
    if "\\" not in text:
        return text
    out: list[str] = []
    i = 0
    n = len(text)
    while i < n:
        ch = text[i]
        if ch != "\\":
            out.append(ch)
            i += 1
            continue
        if i + 1 >= n:
            raise errors.EscapeError("\\", line, column + i)
        replacement = _DECODE.get(text[i + 1])
        if replacement is None:
            raise errors.EscapeError(text[i:i + 2], line, column + i)
        out.append(replacement)
        i += 2
    return "".join(out)


def encode(text: str) -> str:
    """Escape *text* for a single-line context so ``decode`` gives it back."""
    encoded = "".join(_ENCODE.get(ch, ch) for ch in text).replace("\n", "\\n")
    return _escape_leading_hash(encoded)


# ---------------------------------------------------------------------------
# String block lines
# ---------------------------------------------------------------------------
#
# Block lines are taken verbatim apart from one rule: a line whose first
# visible character is "#" is a comment, so a literal "#" there is written
# "\#".

def encode_block_line(text: str) -> str:
    return _escape_leading_hash(text)


def decode_block_line(text: str) -> str:
    body = text.lstrip(" ")
    if body.startswith("\\#"):
        return text[:len(text) - len(body)] + body[1:]
    return text


def _escape_leading_hash(text: str) -> str:
    body = text.lstrip(" ")
    if body.startswith("#"):
        return text[:len(text) - len(body)] + "\\" + body
    return text
