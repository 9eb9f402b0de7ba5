"""Tests for mix.clash: composition that keeps every implementation."""

from mix.clash import compose_with_clashes, merge_clashing
from mix.dispatch import END_OF_CHAIN, call_next, dispatch, dispatch_all, dispatch_at
from mix.objects import Chain, Single, create, method_names
from mixkit.counter import make_counter


O1 = create({"getAttribute1": lambda: 500})
O2 = create({"getAttribute1": lambda: 600, "getAttribute2": lambda: 700})


def test_merge_keeps_unshared_entries():
    merged = merge_clashing(O1, O2)
    assert merged.table["getAttribute2"] is O2.table["getAttribute2"]


def test_merge_builds_chain_left_first():
    merged = merge_clashing(O1, O2)
    entry = merged.table["getAttribute1"]
    assert isinstance(entry, Chain)
    assert entry.members == (O1.table["getAttribute1"].fn, O2.table["getAttribute1"].fn)


class TestTwoObjectChain:
    clashed = compose_with_clashes([O1, O2])

    def test_head_answers_plain_dispatch(self):
        assert dispatch(self.clashed, "getAttribute1", []) == 500

    def test_second_member(self):
        assert dispatch_at(self.clashed, "getAttribute1", [], 2) == 600

    def test_past_the_end(self):
        assert dispatch_at(self.clashed, "getAttribute1", [], 3) is END_OF_CHAIN

    def test_unclashed_name(self):
        assert dispatch(self.clashed, "getAttribute2", []) == 700
        assert dispatch_at(self.clashed, "getAttribute2", [], 5) == 700

    def test_next(self):
        assert call_next(self.clashed, "getAttribute1", [], 1) == 600
        assert call_next(self.clashed, "getAttribute1", [], 2) is END_OF_CHAIN

    def test_method_names(self):
        assert method_names(self.clashed) == {"getAttribute1", "getAttribute2"}


def test_three_way_clash_is_flat():
    o3 = create({"getAttribute1": lambda: 800})
    clashed = compose_with_clashes([O1, O2, o3])
    entry = clashed.table["getAttribute1"]
    assert len(entry) == 3
    assert all(not isinstance(m, (Chain, Single)) for m in entry.members)
    assert dispatch_all(clashed, "getAttribute1") == [500, 600, 800]


def test_partial_clash_keeps_object_order():
    o3 = create({"getAttribute2": lambda: 900})
    clashed = compose_with_clashes([o3, O1, O2])
    assert dispatch_all(clashed, "getAttribute2") == [900, 700]
    assert dispatch_all(clashed, "getAttribute1") == [500, 600]


def test_empty_and_single():
    assert method_names(compose_with_clashes([])) == set()
    single = compose_with_clashes([O2])
    assert single is not O2
    assert dispatch(single, "getAttribute1") == 600


def test_attributes_entry_clashes_too():
    a = create({"attributes": lambda: {"a": 1}})
    b = create({"attributes": lambda: {"b": 2}})
    clashed = compose_with_clashes([a, b])
    assert dispatch_all(clashed, "attributes") == [{"a": 1}, {"b": 2}]


def test_inputs_left_alone():
    merge_clashing(O1, O2)
    compose_with_clashes([O1, O2, O1])
    assert method_names(O1) == {"getAttribute1"}
    assert not isinstance(O1.table["getAttribute1"], Chain)
    assert method_names(O2) == {"getAttribute1", "getAttribute2"}
    assert not isinstance(O2.table["getAttribute1"], Chain)


def test_mutation_through_chain_is_shared():
    first, second = make_counter(), make_counter(10)
    clashed = compose_with_clashes([first, second])
    assert dispatch_at(clashed, "increment", [], 2) == 11
    assert dispatch(second, "get_count") == 11
    assert dispatch(first, "get_count") == 0
