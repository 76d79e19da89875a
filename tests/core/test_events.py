import pytest

from helpers import mk_chunk, mk_event, mk_god_view, mk_rules
from hypertime.core.events import get_non_past_events, immediate_events
from hypertime.core.ruleset import EMPTY_RULESET
from hypertime.core.time import INFINITY

inf = INFINITY


def test_no_events_for_empty_universe():
    assert get_non_past_events(mk_god_view(EMPTY_RULESET)) == ()


def test_includes_a_simple_future_departure():
    gv = mk_god_view(mk_rules(([], [("a", 3, 1)])))
    assert get_non_past_events(gv) == (mk_event("a", r0=3, depart_h0=0, arrive_h0=2),)


def test_includes_a_future_arrival_off_the_edge():
    gv = mk_god_view(mk_rules(([], [("a", 3, 5)])))
    assert get_non_past_events(gv) == (mk_event("a", r0=3, depart_h0=0, arrive_h0=-2),)


def test_ignores_past_events():
    gv = mk_god_view(mk_rules(([], [("a", -1, 3)])))
    assert get_non_past_events(gv) == ()


def test_event_at_now_is_not_past():
    gv = mk_god_view(mk_rules(([], [("a", 3, 1)])), now=3)
    assert get_non_past_events(gv) == (mk_event("a", 3, 0, 2),)


def test_exact_history_match_only():
    rules = mk_rules((["a"], [("b", 1, 1)]))
    gv = mk_god_view(
        rules,
        chunks=[mk_chunk(0, 2), mk_chunk(2, 4, ["a"]), mk_chunk(4, inf, ["a", "c"])],
    )
    assert get_non_past_events(gv) == (mk_event("b", 3, 2, 2),)


def test_only_chunk_starts_are_evaluated():
    rules = mk_rules(([], [("a", 10, 0)]))
    gv = mk_god_view(rules, chunks=[mk_chunk(0, 5, ["x"]), mk_chunk(5, inf)])
    assert get_non_past_events(gv) == (mk_event("a", 15, 5, 15),)


def test_trip_order_preserved():
    rules = mk_rules(([], [("a", 3, 1), ("b", 4, 0)]))
    assert [e.trip_id for e in get_non_past_events(mk_god_view(rules))] == ["a", "b"]


# ============================================================
# chained lookahead
# ============================================================
def test_chained_event_uses_original_depart_point(preemption_rules):
    gv = mk_god_view(preemption_rules, now=5)
    assert get_non_past_events(gv) == (
        mk_event("a", r0=5, depart_h0=0, arrive_h0=5),
        mk_event("b", r0=7, depart_h0=0, arrive_h0=2),
    )


def test_no_chaining_for_future_departures(preemption_rules):
    gv = mk_god_view(preemption_rules, now=0)
    assert get_non_past_events(gv) == (mk_event("a", 5, 0, 5),)


def test_no_chaining_when_landing_off_the_edge():
    rules = mk_rules(([], [("a", 0, 3)]), (["a"], [("b", 1, 0)]))
    assert get_non_past_events(mk_god_view(rules)) == (mk_event("a", 0, 0, -3),)


def test_chained_event_at_or_before_now_is_dropped():
    # b would depart from the landing point at r0' == now
    rules = mk_rules(([], [("a", 5, 0)]), (["a"], [("b", 0, 1)]))
    gv = mk_god_view(rules, now=5)
    assert get_non_past_events(gv) == (mk_event("a", 5, 0, 5),)


def test_chaining_is_only_one_level_deep():
    rules = mk_rules(
        ([], [("a", 5, 0)]),
        (["a"], [("b", 1, 0)]),
        (["a", "b"], [("c", 1, 0)]),
    )
    gv = mk_god_view(rules, now=5)
    assert [e.trip_id for e in get_non_past_events(gv)] == ["a", "b"]


def test_chaining_uses_landing_chunk_history():
    rules = mk_rules(([], [("a", 5, 0)]), (["a", "x"], [("b", 2, 2)]))
    gv = mk_god_view(rules, now=5, chunks=[mk_chunk(0, 4), mk_chunk(4, inf, ["x"])])
    assert get_non_past_events(gv) == (
        mk_event("a", 5, 0, 5),
        mk_event("b", 7, 0, 5),
    )


def test_immediate_events(preemption_rules):
    gv = mk_god_view(preemption_rules, now=5)
    assert immediate_events(gv) == (mk_event("a", 5, 0, 5),)
