"""PDN Core: parser and serializer for parenthesized data notation."""

from .errors import (
    DuplicateKeyError,
    ErrorKind,
    EscapeError,
    IndentationError,
    ParseError,
    PDNError,
    SyntaxError,
)
from .options import DuplicateKeyPolicy, FormatOptions, NewlineStyle, SetOrder
from .reader import loads, parse, parse_lines
from .values import (
    Nil,
    Value,
    VBool,
    VFloat,
    VInt,
    VList,
    VMap,
    VSet,
    VText,
    _NilType,
    from_native,
    is_empty,
    structural_key,
    to_native,
)
from .writer import dumps, serialize

__all__ = [
    "parse",
    "parse_lines",
    "serialize",
    "loads",
    "dumps",
    "FormatOptions",
    "NewlineStyle",
    "DuplicateKeyPolicy",
    "SetOrder",
    "Nil",
    "Value",
    "VBool",
    "VFloat",
    "VInt",
    "VList",
    "VMap",
    "VSet",
    "VText",
    "from_native",
    "to_native",
    "is_empty",
    "structural_key",
    "PDNError",
    "ParseError",
    "ErrorKind",
    "IndentationError",
    "SyntaxError",
    "EscapeError",
    "DuplicateKeyError",
]
