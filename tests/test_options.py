"""Tests for pdn_core.options."""

import pytest
from pydantic import ValidationError

from pdn_core.options import (
    DEFAULT_OPTIONS,
    DuplicateKeyPolicy,
    FormatOptions,
    NewlineStyle,
    SetOrder,
    resolve_options,
)


def test_defaults():
    opts = FormatOptions()
    assert opts.indent_width == 2
    assert opts.newline_style is NewlineStyle.LF
    assert opts.duplicate_key_policy is DuplicateKeyPolicy.OVERWRITE
    assert opts.tab_indentation_allowed is False
    assert opts.set_order is SetOrder.INSERTION
    assert opts.item_marker == "item"

def test_indent_width_must_be_positive():
    with pytest.raises(ValidationError):
        FormatOptions(indent_width=0)

def test_enum_from_string():
    opts = FormatOptions(newline_style="crlf", duplicate_key_policy="error")
    assert opts.newline_style is NewlineStyle.CRLF
    assert opts.duplicate_key_policy is DuplicateKeyPolicy.ERROR

def test_unknown_enum_value():
    with pytest.raises(ValidationError):
        FormatOptions(newline_style="cr")

def test_indent_unit():
    assert FormatOptions(indent_width=4).indent_unit == "    "
    assert FormatOptions(tab_indentation_allowed=True).indent_unit == "\t"

def test_terminator():
    assert NewlineStyle.LF.terminator == "\n"
    assert NewlineStyle.CRLF.terminator == "\r\n"

def test_resolve_defaults():
    assert resolve_options() is DEFAULT_OPTIONS

def test_resolve_overrides():
    base = FormatOptions(indent_width=4)
    opts = resolve_options(base, set_order="sorted")
    assert opts.indent_width == 4
    assert opts.set_order is SetOrder.SORTED
    assert base.set_order is SetOrder.INSERTION
