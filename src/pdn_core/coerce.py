"""Type coercion: inline scalar token -> Value."""

from __future__ import annotations

import re

from .escape import decode
from .values import Nil, Value, VBool, VFloat, VInt, VText

_INT_RE = re.compile(r"[+-]?[0-9]+")
_FLOAT_RE = re.compile(r"[+-]?[0-9]+\.[0-9]+(?:[eE][+-]?[0-9]+)?")

_LITERALS: dict[str, Value] = {
    "true": VBool(True),
    "false": VBool(False),
}


def coerce(token: str, line: int | None = None, column: int = 1) -> Value:
    """Convert a raw inline token to a Value.

    Precedence: ``true``/``false`` -> VBool, signed digits -> VInt,
    signed decimal with optional exponent -> VFloat, ``nil`` -> Nil,
    anything else -> VText after unescaping. Matching is case-sensitive
    and the token is never trimmed.
    """
    literal = _LITERALS.get(token)
    if literal is not None:
        return literal
    if _INT_RE.fullmatch(token):
        try:
            return VInt(int(token))
        except ValueError:
            # beyond sys.get_int_max_str_digits(); keep the digits as text
            pass
    if _FLOAT_RE.fullmatch(token):
        return VFloat(float(token))
    if token == "nil":
        return Nil
    return VText(decode(token, line, column))
