"""Writer layer: converts a value tree to canonical PDN text."""

from __future__ import annotations

import logging
import math
from typing import Any, Iterator

from .escape import encode, encode_block_line
from .options import FormatOptions, SetOrder, resolve_options
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
    from_native,
    is_empty,
)

LOG = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Scalars
# ---------------------------------------------------------------------------

def format_float(value: float) -> str:
    """Shortest round-tripping form, always with a decimal point.

    ``inf`` and ``nan`` have no numeric spelling and come back as text.
    """
    if math.isnan(value) or math.isinf(value):
        return repr(value)
    mantissa, sep, exponent = repr(value).partition("e")
    if "." not in mantissa:
        mantissa += ".0"
    return mantissa + sep + exponent


def format_scalar(value: Value) -> str | None:
    """Single-line form of a scalar, or None if *value* needs a block."""
    if value is Nil:
        return "nil"
    if isinstance(value, VBool):
        return "true" if value.value else "false"
    if isinstance(value, VInt):
        return str(value.value)
    if isinstance(value, VFloat):
        return format_float(value.value)
    if isinstance(value, VText):
        encoded = encode(value.value)
        # a blank inline value reads back as nil
        return encoded if encoded.strip() else "nil"
    return None


# ---------------------------------------------------------------------------
# Writer
# ---------------------------------------------------------------------------

class _Writer:
    def __init__(self, options: FormatOptions) -> None:
        self.options = options
        self.unit = options.indent_unit

    def mapping(self, value: VMap, depth: int) -> Iterator[str]:
        pad = self.unit * depth
        for key, item in value.entries.items():
            yield from self._entry(f"{pad}({encode(key)})", item, depth)

    def sequence(self, value: VList | VSet, depth: int) -> Iterator[str]:
        marker = ">|" if isinstance(value, VSet) else ">"
        items = value.items
        if isinstance(value, VSet) and self.options.set_order is SetOrder.SORTED:
            items = sorted(items, key=lambda v: "\n".join(self._element(marker, v, 0)))
        if isinstance(value, VSet):
            yield from self._unique_elements(marker, items, depth)
            return
        for item in items:
            yield from self._element(marker, item, depth)

    def _unique_elements(self, marker: str, items, depth: int) -> Iterator[str]:
        # Distinct values can share a spelling (VText("1") and VInt(1)).
        seen: set[str] = set()
        for item in items:
            lines = list(self._element(marker, item, depth))
            text = "\n".join(lines)
            if text in seen:
                continue
            seen.add(text)
            yield from lines

    def _entry(self, head: str, value: Value, depth: int) -> Iterator[str]:
        if is_empty(value):
            yield head + " nil"
        elif isinstance(value, VText) and "\n" in value.value and self._blockable(value.value):
            yield head
            pad = self.unit * (depth + 1)
            for part in value.value.split("\n"):
                yield pad + encode_block_line(part) if part else ""
        elif isinstance(value, VMap):
            yield head
            yield from self.mapping(value, depth + 1)
        elif isinstance(value, (VList, VSet)):
            yield head
            yield from self.sequence(value, depth + 1)
        else:
            yield f"{head} {_require_scalar(value)}"

    def _element(self, marker: str, value: Value, depth: int) -> Iterator[str]:
        head = self.unit * depth + marker
        if is_empty(value):
            yield head + " nil"
        elif isinstance(value, VMap):
            yield f"{head} ({encode(self.options.item_marker)})"
            yield from self.mapping(value, depth + 1)
        elif isinstance(value, (VList, VSet)):
            yield head
            yield from self.sequence(value, depth + 1)
        else:
            yield f"{head} {_require_scalar(value)}"

    def _blockable(self, text: str) -> bool:
        """Whether multi-line *text* reads back unchanged as a string block."""
        if text.startswith("\n") or text.endswith("\n"):
            return False
        if "\r" in text or "\t" in text:
            return False
        parts = text.split("\n")
        # the first line decides the block kind: "(" opens keys, ">" items
        if parts[0].lstrip(" ").startswith(("(", ">")):
            return False
        # "\#" at the start of a block line reads back as "#"
        if any(part.lstrip(" ").startswith("\\#") for part in parts):
            return False
        if any(part and not part.strip() for part in parts):
            return False
        leading = [len(part) - len(part.lstrip(" ")) for part in parts if part]
        if min(leading) > 0:
            return False
        if self.options.tab_indentation_allowed and any(leading):
            return False
        return True


def _require_scalar(value: Value) -> str:
    text = format_scalar(value)
    if text is None:
        raise TypeError(f"cannot serialize {type(value).__name__}: not a PDN value")
    return text


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def serialize(value: VMap | Any, options: FormatOptions | None = None) -> str:
    """Write *value* (a mapping, or Nil for an empty document) as canonical text.

    Nil and every empty collection are written as ``nil``. A value outside
    the closed set of PDN types raises ``TypeError``.
    """
    opts = resolve_options(options)
    if value is Nil:
        lines: list[str] = []
    elif isinstance(value, VMap):
        lines = list(_Writer(opts).mapping(value, 0))
    else:
        raise TypeError(
            f"a document must be a VMap or Nil, got {type(value).__name__}"
        )
    LOG.debug("serialized %d keys into %d lines", len(value) if value else 0, len(lines))
    if not lines:
        return ""
    newline = opts.newline_style.terminator
    return newline.join(lines) + newline


def dumps(obj: dict[str, Any], **options: Any) -> str:
    """Serialize plain Python objects (``None`` -> ``nil``)."""
    return serialize(from_native(obj), resolve_options(**options))
