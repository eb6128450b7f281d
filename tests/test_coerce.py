"""Tests for pdn_core.coerce."""

import pytest

from pdn_core.coerce import coerce
from pdn_core.errors import EscapeError
from pdn_core.values import Nil, VBool, VFloat, VInt, VText


class TestLiterals:
    def test_true(self):
        assert coerce("true") == VBool(True)

    def test_false(self):
        assert coerce("false") == VBool(False)

    def test_case_sensitive(self):
        assert coerce("True") == VText("True")
        assert coerce("NIL") == VText("NIL")

    def test_nil(self):
        assert coerce("nil") is Nil


class TestNumbers:
    def test_integer(self):
        assert coerce("42") == VInt(42)

    def test_negative_integer(self):
        assert coerce("-5") == VInt(-5)

    def test_plus_sign(self):
        assert coerce("+5") == VInt(5)

    def test_leading_zeros(self):
        assert coerce("007") == VInt(7)

    def test_big_integer(self):
        assert coerce("123456789012345678901234567890") == VInt(123456789012345678901234567890)

    def test_float(self):
        assert coerce("3.14") == VFloat(3.14)

    def test_float_exponent(self):
        assert coerce("-1.5e-3") == VFloat(-0.0015)

    def test_float_needs_digits_both_sides(self):
        assert coerce("1.") == VText("1.")
        assert coerce(".5") == VText(".5")

    @pytest.mark.parametrize("token", ["\u0661\u0662", "\uff11", "1.\u0665"])
    def test_non_ascii_digits_are_text(self, token):
        assert coerce(token) == VText(token)

    def test_trailing_newline_is_text(self):
        assert coerce("12\n") == VText("12\n")

    @pytest.mark.parametrize("token", ["1e5", "Infinity", "NaN", "0x10", "1_000", "12abc"])
    def test_other_spellings_are_text(self, token):
        assert coerce(token) == VText(token)


class TestText:
    def test_plain(self):
        assert coerce("hello") == VText("hello")

    def test_whitespace_not_trimmed(self):
        assert coerce(" a b  ") == VText(" a b  ")

    def test_escapes_decoded(self):
        assert coerce(r"a\nb") == VText("a\nb")

    def test_escaped_literal_is_text(self):
        assert coerce(r"\#true") == VText("#true")

    def test_bad_escape(self):
        with pytest.raises(EscapeError) as exc:
            coerce(r"a\z", line=3, column=5)
        assert exc.value.line == 3
        assert exc.value.column == 6
