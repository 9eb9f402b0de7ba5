"""Tests for mixkit.counter."""

from mix.dispatch import dispatch
from mix.objects import attributes
from mixkit.counter import make_counter


def test_counts():
    c = make_counter()
    assert dispatch(c, "increment") == 1
    assert dispatch(c, "increment") == 2
    assert dispatch(c, "decrement") == 1
    assert dispatch(c, "add", [10]) == 11
    assert dispatch(c, "get_count") == 11


def test_reset_returns_to_start():
    c = make_counter(5)
    dispatch(c, "add", [3])
    assert dispatch(c, "reset") == 5


def test_attributes_is_a_snapshot():
    c = make_counter()
    snapshot = attributes(c)
    dispatch(c, "increment")
    assert snapshot == {"count": 0}
    assert attributes(c) == {"count": 1}


def test_counters_are_independent():
    a, b = make_counter(), make_counter()
    dispatch(a, "increment")
    assert dispatch(b, "get_count") == 0
