import pytest

from helpers import mk_chunk, mk_god_view, mk_rules
from hypertime.core.oracle import get_next_interesting_time
from hypertime.core.ruleset import EMPTY_RULESET
from hypertime.core.time import INFINITY

inf = INFINITY


def test_empty_ruleset_is_quiescent():
    assert get_next_interesting_time(mk_god_view(EMPTY_RULESET)) == inf


def test_future_departure_is_next():
    gv = mk_god_view(mk_rules(([], [("a", 8, 6)])), now=5)
    assert get_next_interesting_time(gv) == 8


def test_pure_future_travel_bounded_by_edge_of_universe():
    gv = mk_god_view(mk_rules(([], [("a", 5, 7)])), now=5)
    assert get_next_interesting_time(gv) == 7


def test_past_travel_bounded_by_self_intersection():
    gv = mk_god_view(mk_rules(([], [("a", 5, 3)])), now=5)
    assert get_next_interesting_time(gv) == 7


def test_departure_band_bounded_by_its_chunk():
    rules = mk_rules(([], [("a", 5, 3)]))
    gv = mk_god_view(rules, now=5, chunks=[mk_chunk(0, 1), mk_chunk(1, inf, ["z"])])
    assert get_next_interesting_time(gv) == 6


def test_arrival_band_bounded_by_its_chunk():
    rules = mk_rules(([], [("a", 5, 3)]))
    gv = mk_god_view(
        rules, now=5, chunks=[mk_chunk(0, 2), mk_chunk(2, 2.5, ["z"]), mk_chunk(2.5, inf, ["y"])]
    )
    # lands at 2, inside [2, 2.5)
    assert get_next_interesting_time(gv) == 5.5


def test_other_arrival_band_catches_up():
    rules = mk_rules(([], [("a", 5, 105)]), (["x"], [("b", 1, 4)]))
    gv = mk_god_view(rules, now=5, chunks=[mk_chunk(0, 4), mk_chunk(4, inf, ["x"])])
    # a's departure band grows from 0 and reaches b's landing point 1 after one unit
    assert get_next_interesting_time(gv) == 6


def test_quiescent_after_everything_is_past():
    gv = mk_god_view(mk_rules(([], [("a", 3, 1)])), now=4)
    assert get_next_interesting_time(gv) == inf


def test_accepts_precomputed_events():
    gv = mk_god_view(mk_rules(([], [("a", 8, 6)])), now=5)
    assert get_next_interesting_time(gv, events=()) == inf
