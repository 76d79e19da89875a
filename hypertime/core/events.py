#!filepath: hypertime/core/events.py
from __future__ import annotations

from typing import TYPE_CHECKING, List, Tuple

from .chunks import find_chunk
from .time import Hypertime, arrival_hypertime, departure_real_time
from .types import Event

if TYPE_CHECKING:
    from .god_view import GodView

"""
Event Discovery (FINAL / FROZEN)

Every trip that departs now or later, given the current partition.

Semantics:
- Only chunk starts are evaluated; chunk interiors are covered by the
  dt-wide bands laid down in evolve_chunks.
- Exactly ONE level of chained lookahead: a departure happening right now
  that lands on tracked hypertime may satisfy, instantly, the history of a
  further trip. That further trip is reported with the ORIGINAL chunk's
  start as depart_h0. Deeper chains surface on later steps.
"""


def get_non_past_events(gv: "GodView") -> Tuple[Event, ...]:
    now = gv.now
    res: List[Event] = []

    for chunk in gv.chunks:
        for trip in gv.rules.lookup(chunk.history):
            r0 = departure_real_time(chunk.start, trip.depart)
            if r0 < now:
                continue

            arrive_h0 = arrival_hypertime(r0, trip.arrive)
            res.append(Event(trip_id=trip.id, r0=r0, depart_h0=chunk.start, arrive_h0=arrive_h0))

            if r0 != now or arrive_h0 < 0:
                continue

            # departing right now: what will the landing point fire next?
            landing = find_chunk(gv.chunks, arrive_h0)
            for next_trip in gv.rules.lookup(landing.history | {trip.id}):
                next_r0 = departure_real_time(arrive_h0, next_trip.depart)
                if next_r0 <= now:
                    continue
                res.append(
                    Event(
                        trip_id=next_trip.id,
                        r0=next_r0,
                        depart_h0=chunk.start,
                        arrive_h0=arrival_hypertime(next_r0, next_trip.arrive),
                    )
                )

    return tuple(res)


def immediate_events(gv: "GodView") -> Tuple[Event, ...]:
    return tuple(e for e in get_non_past_events(gv) if e.r0 == gv.now)


def departure_points(events) -> frozenset[Hypertime]:
    return frozenset(e.depart_h0 for e in events)
