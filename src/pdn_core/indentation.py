"""Indentation tracker: the stack of open indentation levels."""

from __future__ import annotations

from typing import Generic, TypeVar

from . import errors

T = TypeVar("T")


class IndentationTracker(Generic[T]):
    """Stack of ``(width, owner)`` entries, innermost last.

    A deeper line opens a child of the top owner, an equal line continues
    it, and a shallower line pops back to the ancestor opened at exactly
    that width.
    """

    def __init__(self, width: int, owner: T) -> None:
        self._stack: list[tuple[int, T]] = [(width, owner)]

    def __len__(self) -> int:
        return len(self._stack)

    @property
    def depth(self) -> int:
        return len(self._stack) - 1

    @property
    def top(self) -> T:
        return self._stack[-1][1]

    @property
    def width(self) -> int:
        return self._stack[-1][0]

    def push(self, width: int, owner: T) -> None:
        if width <= self.width:
            raise ValueError(
                f"child width {width} must exceed the current width {self.width}"
            )
        self._stack.append((width, owner))

    def pop(self) -> T:
        if len(self._stack) == 1:
            raise IndexError("cannot pop the root level")
        return self._stack.pop()[1]

    def dedent(self, width: int, lineno: int | None = None) -> list[T]:
        """Pop levels until one opened at exactly *width* is on top.

        Returns the popped owners, innermost first. Raises
        ``IndentationError`` when *width* matches no open level; the stack
        is left untouched in that case.
        """
        if width > self.width or not any(w == width for w, _ in self._stack):
            raise errors.IndentationError(
                f"dedent to width {width} matches no open indentation level",
                lineno,
                1,
            )
        popped: list[T] = []
        while self.width != width:
            popped.append(self._stack.pop()[1])
        return popped

    def drain(self) -> list[T]:
        """Pop every level above the root, innermost first."""
        popped: list[T] = []
        while len(self._stack) > 1:
            popped.append(self._stack.pop()[1])
        return popped

    @staticmethod
    def closes_block(width: int, owner_width: int) -> bool:
        """True when a line at *width* ends a block owned at *owner_width*."""
        return width <= owner_width
