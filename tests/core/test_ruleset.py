from helpers import mk_trip
from hypertime.core.ruleset import EMPTY_RULESET, MappingRuleset
from hypertime.core.types import make_history


def test_exact_lookup():
    a = mk_trip("a", 3, 1)
    rules = MappingRuleset({make_history(): [a]})
    assert rules.lookup(make_history()) == (a,)
    assert rules.lookup(make_history("a")) == ()


def test_lookup_ignores_history_order():
    b = mk_trip("b", 1, 2)
    rules = MappingRuleset([(["x", "y"], [b])])
    assert rules.lookup(make_history("y", "x")) == (b,)


def test_no_superset_or_subset_match():
    b = mk_trip("b", 1, 2)
    rules = MappingRuleset([(["x"], [b])])
    assert rules.lookup(make_history("x", "y")) == ()
    assert rules.lookup(make_history()) == ()


def test_trips_by_id():
    a, b = mk_trip("a", 3, 1), mk_trip("b", 1, 2)
    rules = MappingRuleset([([], [a]), (["a"], [b])])
    assert rules.trips_by_id == {"a": a, "b": b}
    assert len(rules) == 2


def test_empty_ruleset():
    assert EMPTY_RULESET.lookup(make_history()) == ()
    assert len(EMPTY_RULESET) == 0


def test_equality():
    a = mk_trip("a", 3, 1)
    assert MappingRuleset([([], [a])]) == MappingRuleset({make_history(): (a,)})
