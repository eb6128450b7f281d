"""Reader layer: converts PDN text to a value tree.

The grammar is recursive (a key's block may hold keys, lists or text that
hold further blocks) but the reader is iterative: open blocks live on an
``IndentationTracker`` instead of the call stack, so nesting depth is only
bounded by memory.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Iterable, Iterator

from . import errors
from .coerce import coerce
from .indentation import IndentationTracker
from .lines import Line, LineClassifier, LineKind, split_item, split_key
from .escape import decode_block_line
from .options import DuplicateKeyPolicy, FormatOptions, resolve_options
from .values import Nil, Value, VList, VMap, VSet, VText, to_native

LOG = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Line source
# ---------------------------------------------------------------------------

class LineSource:
    """Pull-based sequence of classified lines with one line of lookahead."""

    def __init__(self, lines: Iterable[str]) -> None:
        self._lines: Iterator[str] = iter(lines)
        self._classifier = LineClassifier()
        self._lineno = 0
        self._peeked: Line | None = None

    @property
    def lines_read(self) -> int:
        return self._lineno

    def peek(self) -> Line | None:
        if self._peeked is None:
            self._peeked = self._read()
        return self._peeked

    def next(self) -> Line | None:
        line = self.peek()
        self._peeked = None
        return line

    def next_significant(self) -> Line | None:
        """Skip blank and comment lines."""
        while (line := self.next()) is not None:
            if line.significant:
                return line
        return None

    def _read(self) -> Line | None:
        raw = next(self._lines, None)
        if raw is None:
            return None
        self._lineno += 1
        if raw.endswith("\n"):
            raw = raw[:-1]
        return self._classifier.classify(raw, self._lineno)


# ---------------------------------------------------------------------------
# Open blocks
# ---------------------------------------------------------------------------

@dataclass
class _Slot:
    """Where a block's value goes once the block is finished."""

    parent: "_Frame"
    key: str | None
    line: Line
    expect_mapping: bool = False

    @property
    def width(self) -> int:
        return self.line.indent

    def deliver(self, value: Value) -> None:
        self.parent.store(self.key, value)


@dataclass
class _Frame:
    slot: _Slot | None

    def accept(self, line: Line) -> _Slot | None:
        raise NotImplementedError

    def store(self, key: str | None, value: Value) -> None:
        raise NotImplementedError

    def finish(self) -> Value:
        raise NotImplementedError

    def close(self) -> None:
        if self.slot is not None:
            self.slot.deliver(self.finish())


@dataclass
class _MapFrame(_Frame):
    policy: DuplicateKeyPolicy = DuplicateKeyPolicy.OVERWRITE
    entries: dict[str, Value] = field(default_factory=dict)

    def accept(self, line: Line) -> _Slot | None:
        if line.kind is not LineKind.KEY:
            raise _misplaced(line, "mapping")
        parts = split_key(line)
        if parts.key in self.entries and self.policy is DuplicateKeyPolicy.ERROR:
            raise errors.DuplicateKeyError(parts.key, line.lineno, line.indent + 2)
        if parts.inline is None:
            return _Slot(self, parts.key, line)
        self.entries[parts.key] = coerce(parts.inline, line.lineno, parts.column)
        return None

    def store(self, key: str | None, value: Value) -> None:
        if key is None:
            raise TypeError("a mapping entry needs a key")
        self.entries[key] = value

    def finish(self) -> Value:
        return VMap(self.entries)


@dataclass
class _SeqFrame(_Frame):
    kind: LineKind = LineKind.ARRAY_ITEM
    items: list[Value] = field(default_factory=list)

    def accept(self, line: Line) -> _Slot | None:
        if line.kind is not self.kind:
            raise _misplaced(line, "set" if self.kind is LineKind.SET_ITEM else "list")
        parts = split_item(line)
        if parts.opens_object:
            return _Slot(self, None, line, expect_mapping=True)
        if parts.inline is None:
            return _Slot(self, None, line)
        self.items.append(coerce(parts.inline, line.lineno, parts.column))
        return None

    def store(self, key: str | None, value: Value) -> None:
        self.items.append(value)

    def finish(self) -> Value:
        if self.kind is LineKind.SET_ITEM:
            return VSet(tuple(self.items))
        return VList(tuple(self.items))


def _misplaced(line: Line, block: str) -> errors.SyntaxError:
    if line.kind is LineKind.TEXT:
        message = "plain text outside a multi-line string block"
    elif line.kind is LineKind.KEY:
        message = f"key line inside a {block} block"
    elif line.kind is LineKind.SET_ITEM:
        message = f"set item '>|' inside a {block} block"
    else:
        message = f"list item '>' inside a {block} block"
    return errors.SyntaxError(message, line.lineno, line.indent + 1)


# ---------------------------------------------------------------------------
# Builder
# ---------------------------------------------------------------------------

class _Builder:
    def __init__(self, source: LineSource, options: FormatOptions) -> None:
        self.source = source
        self.options = options
        self.root = _MapFrame(slot=None, policy=options.duplicate_key_policy)
        self.tracker: IndentationTracker[_Frame] = IndentationTracker(0, self.root)

    def build(self) -> VMap:
        pending: _Slot | None = None
        while (line := self.source.next_significant()) is not None:
            if pending is not None:
                if line.indent > pending.width:
                    if not self._open_block(pending, line):
                        # string block: already consumed and delivered
                        pending = None
                        continue
                else:
                    pending.deliver(Nil)
                pending = None

            if line.kind is LineKind.TEXT:
                raise _misplaced(line, "mapping")
            if line.indent > self.tracker.width:
                raise errors.IndentationError(
                    "unexpected indent", line.lineno, line.indent + 1
                )
            if line.indent < self.tracker.width:
                for frame in self.tracker.dedent(line.indent, line.lineno):
                    frame.close()
            pending = self.tracker.top.accept(line)

        if pending is not None:
            pending.deliver(Nil)
        for frame in self.tracker.drain():
            frame.close()
        return VMap(self.root.entries)

    def _open_block(self, slot: _Slot, first: Line) -> bool:
        """Open the block that *first* starts under *slot*.

        Returns True when a structural frame was pushed and *first* still
        has to be accepted by it; False when the block was a string and is
        complete.
        """
        if first.kind is LineKind.KEY:
            frame: _Frame = _MapFrame(slot=slot, policy=self.options.duplicate_key_policy)
        elif slot.expect_mapping:
            raise errors.SyntaxError(
                "a list-of-objects element must contain key lines",
                first.lineno,
                first.indent + 1,
            )
        elif first.kind in (LineKind.ARRAY_ITEM, LineKind.SET_ITEM):
            frame = _SeqFrame(slot=slot, kind=first.kind)
        else:
            slot.deliver(self._read_text_block(first, slot.width))
            return False
        self.tracker.push(first.indent, frame)
        return True

    def _read_text_block(self, first: Line, owner_width: int) -> VText:
        content: list[Line] = [first]
        blanks: list[Line] = []
        while (line := self.source.peek()) is not None:
            if line.kind is LineKind.COMMENT:
                self.source.next()
                continue
            if line.kind is LineKind.BLANK:
                blanks.append(self.source.next())
                continue
            if IndentationTracker.closes_block(line.indent, owner_width):
                break
            content.extend(blanks)
            blanks.clear()
            content.append(self.source.next())

        base = min(line.indent for line in content if line.kind is not LineKind.BLANK)
        parts = []
        for line in content:
            if line.kind is LineKind.BLANK:
                parts.append("")
            else:
                parts.append(decode_block_line(line.raw[base:]))
        return VText("\n".join(parts))


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def parse_lines(lines: Iterable[str], options: FormatOptions | None = None) -> VMap:
    """Parse a document given as an iterable of lines.

    The iterable is consumed once; lines may keep their terminators.
    The first error aborts parsing and no partial tree is returned.
    """
    source = LineSource(lines)
    tree = _Builder(source, resolve_options(options)).build()
    LOG.debug("parsed %d lines into %d top-level keys", source.lines_read, len(tree))
    return tree


def parse(text: str | bytes, options: FormatOptions | None = None) -> VMap:
    """Parse a complete document into a mapping."""
    if isinstance(text, bytes):
        text = text.decode("utf-8")
    if text.startswith("\ufeff"):
        text = text[1:]
    return parse_lines(text.split("\n"), options)


def loads(text: str | bytes, **options: Any) -> dict[str, Any]:
    """Parse *text* straight to plain Python objects (``nil`` -> ``None``)."""
    return to_native(parse(text, resolve_options(**options)))
