"""Tests for pdn_core.indentation."""

import pytest

from pdn_core.errors import IndentationError
from pdn_core.indentation import IndentationTracker


def make():
    tracker = IndentationTracker(0, "root")
    tracker.push(2, "a")
    tracker.push(6, "b")
    return tracker


def test_top_and_width():
    tracker = make()
    assert tracker.top == "b"
    assert tracker.width == 6
    assert tracker.depth == 2

def test_push_must_go_deeper():
    tracker = make()
    with pytest.raises(ValueError):
        tracker.push(6, "c")

def test_dedent_to_ancestor():
    tracker = make()
    assert tracker.dedent(0) == ["b", "a"]
    assert tracker.top == "root"

def test_dedent_to_same_width():
    tracker = make()
    assert tracker.dedent(6) == []
    assert tracker.top == "b"

def test_dedent_ambiguous():
    tracker = make()
    with pytest.raises(IndentationError) as exc:
        tracker.dedent(4, lineno=9)
    assert exc.value.line == 9
    assert tracker.top == "b"
    assert len(tracker) == 3

def test_drain():
    tracker = make()
    assert tracker.drain() == ["b", "a"]
    assert tracker.depth == 0

def test_pop_root_refused():
    tracker = IndentationTracker(0, "root")
    with pytest.raises(IndexError):
        tracker.pop()

def test_closes_block():
    assert IndentationTracker.closes_block(2, 2)
    assert IndentationTracker.closes_block(0, 2)
    assert not IndentationTracker.closes_block(4, 2)
