"""Tests for pdn_core.lines."""

import pytest

from pdn_core.errors import IndentationError, SyntaxError
from pdn_core.lines import LineClassifier, LineKind, split_item, split_key


def classify(raw, lineno=1):
    return LineClassifier().classify(raw, lineno)


# ---------------------------------------------------------------------------
# classify
# ---------------------------------------------------------------------------

@pytest.mark.parametrize(
    "raw, kind",
    [
        ("", LineKind.BLANK),
        ("    ", LineKind.BLANK),
        ("# note", LineKind.COMMENT),
        ("  #indented note", LineKind.COMMENT),
        ("(name) Joe", LineKind.KEY),
        ("(name)", LineKind.KEY),
        ("> 1", LineKind.ARRAY_ITEM),
        (">", LineKind.ARRAY_ITEM),
        (">| a", LineKind.SET_ITEM),
        (">|", LineKind.SET_ITEM),
        (">x", LineKind.TEXT),
        ("just words", LineKind.TEXT),
        (r"\# escaped", LineKind.TEXT),
    ],
)
def test_kinds(raw, kind):
    assert classify(raw).kind is kind

def test_indent_width_spaces():
    line = classify("    (a) 1")
    assert line.indent == 4
    assert line.content == "(a) 1"

def test_indent_width_tabs():
    line = classify("\t\t> x")
    assert line.indent == 2
    assert line.kind is LineKind.ARRAY_ITEM

def test_carriage_return_stripped():
    line = classify("(a) 1\r")
    assert line.content == "(a) 1"
    assert line.raw == "(a) 1"

def test_mixed_in_one_line():
    with pytest.raises(IndentationError):
        classify(" \t(a) 1")

def test_mixed_across_lines():
    classifier = LineClassifier()
    classifier.classify("  (a) 1", 1)
    with pytest.raises(IndentationError) as exc:
        classifier.classify("\t(b) 2", 2)
    assert exc.value.line == 2

def test_blank_lines_exempt_from_indent_check():
    classifier = LineClassifier()
    classifier.classify("  (a) 1", 1)
    line = classifier.classify("\t", 2)
    assert line.kind is LineKind.BLANK


# ---------------------------------------------------------------------------
# split_key
# ---------------------------------------------------------------------------

def test_split_key_inline():
    parts = split_key(classify("(name) Joe Smith"))
    assert parts.key == "name"
    assert parts.inline == "Joe Smith"
    assert parts.column == 8

def test_split_key_no_inline():
    parts = split_key(classify("  (items)"))
    assert parts.key == "items"
    assert parts.inline is None

def test_split_key_whitespace_only_inline():
    assert split_key(classify("(k)    ")).inline is None

def test_split_key_only_one_space_trimmed():
    assert split_key(classify("(k)   x ")).inline == "  x "

def test_split_key_keeps_inner_whitespace():
    assert split_key(classify("( spaced key )")).key == " spaced key "

def test_split_key_escaped_paren():
    parts = split_key(classify(r"(a\)b) v"))
    assert parts.key == "a)b"
    assert parts.inline == "v"

def test_split_key_unterminated():
    with pytest.raises(SyntaxError) as exc:
        split_key(classify("  (name Joe", lineno=4))
    assert exc.value.line == 4
    assert exc.value.column == 3


# ---------------------------------------------------------------------------
# split_item
# ---------------------------------------------------------------------------

def test_split_item_inline():
    parts = split_item(classify("  > hello"))
    assert parts.inline == "hello"
    assert parts.column == 5
    assert not parts.opens_object

def test_split_item_set():
    assert split_item(classify(">| x")).inline == "x"

def test_split_item_bare():
    parts = split_item(classify(">"))
    assert parts.inline is None
    assert not parts.opens_object

def test_split_item_marker():
    parts = split_item(classify("> (item)"))
    assert parts.inline is None
    assert parts.opens_object

def test_split_item_marker_with_text_is_scalar():
    parts = split_item(classify("> (item) extra"))
    assert parts.inline == "(item) extra"
    assert not parts.opens_object

def test_split_item_unterminated_marker_is_scalar():
    assert split_item(classify("> (oops")).inline == "(oops"
