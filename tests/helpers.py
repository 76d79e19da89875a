# tests/helpers.py
"""Lazy builders: plain numbers / lists in, core types out."""
from __future__ import annotations

from hypertime.core.god_view import GodView
from hypertime.core.ruleset import MappingRuleset
from hypertime.core.time import INFINITY
from hypertime.core.types import Box, Chunk, Event, Trip, TripId, make_history


def mk_trip(id: str, depart, arrive) -> Trip:
    return Trip(id=TripId(id), depart=depart, arrive=arrive)


def mk_chunk(start, end, history=()) -> Chunk:
    return Chunk(start=start, end=end, history=make_history(*history))


def mk_event(trip_id: str, r0, depart_h0, arrive_h0) -> Event:
    return Event(trip_id=TripId(trip_id), r0=r0, depart_h0=depart_h0, arrive_h0=arrive_h0)


def mk_box(trip_id: str, r0, rf, depart_h0, arrive_h0) -> Box:
    return Box(start=mk_event(trip_id, r0, depart_h0, arrive_h0), rf=rf)


def mk_rules(*pairs) -> MappingRuleset:
    """mk_rules(([], [("a", 3, 1)]), (["a"], [("b", 2, 5)]))"""
    return MappingRuleset(
        (history, [mk_trip(*t) for t in trips]) for history, trips in pairs
    )


def mk_god_view(rules, now=0, chunks=None, past=()) -> GodView:
    if chunks is None:
        chunks = [mk_chunk(0, INFINITY)]
    return GodView(rules=rules, now=now, chunks=tuple(chunks), past=tuple(past))


def box_tuple(b: Box):
    return (b.trip_id, b.r0, b.rf, b.start.depart_h0, b.start.arrive_h0)


def assert_partition(chunks):
    """Sorted, gap-free, covers [0, inf), no empty members."""
    assert chunks, "empty partition"
    assert chunks[0].start == 0
    assert chunks[-1].end == INFINITY
    for c in chunks:
        assert c.start < c.end
    for a, b in zip(chunks, chunks[1:]):
        assert a.end == b.start
