"""Parse and serialize options."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class NewlineStyle(str, Enum):
    LF = "lf"
    CRLF = "crlf"

    @property
    def terminator(self) -> str:
        return "\r\n" if self is NewlineStyle.CRLF else "\n"


class DuplicateKeyPolicy(str, Enum):
    OVERWRITE = "overwrite"
    ERROR = "error"


class SetOrder(str, Enum):
    """Order in which unique-set members are written.

    Neither order is meaningful to a reader; ``SORTED`` only makes output
    independent of how the set was built.
    """

    INSERTION = "insertion"
    SORTED = "sorted"


class FormatOptions(BaseModel):
    """Settings shared by ``parse`` and ``serialize``."""

    indent_width: int = Field(default=2, ge=1, description="Spaces per nesting level.")
    newline_style: NewlineStyle = Field(default=NewlineStyle.LF)
    duplicate_key_policy: DuplicateKeyPolicy = Field(
        default=DuplicateKeyPolicy.OVERWRITE,
        description="What parse does with a key repeated at the same level.",
    )
    tab_indentation_allowed: bool = Field(
        default=False, description="Indent serialized output with one tab per level."
    )
    set_order: SetOrder = Field(default=SetOrder.INSERTION)
    item_marker: str = Field(
        default="item",
        min_length=1,
        description="Discarded key written on list-of-objects element lines.",
    )

    @property
    def indent_unit(self) -> str:
        if self.tab_indentation_allowed:
            return "\t"
        return " " * self.indent_width


DEFAULT_OPTIONS = FormatOptions()


def resolve_options(options: FormatOptions | None = None, **overrides) -> FormatOptions:
    """Return *options* (or the defaults) with keyword *overrides* applied."""
    base = options if options is not None else DEFAULT_OPTIONS
    if not overrides:
        return base
    return FormatOptions(**{**base.model_dump(), **overrides})
