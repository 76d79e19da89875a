#!filepath: hypertime/core/oracle.py
from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, List, Optional

from .chunks import time_until_chunk_end
from .events import get_non_past_events
from .time import INFINITY, RealTime
from .types import Event

if TYPE_CHECKING:
    from .god_view import GodView


def _candidates(gv: "GodView", events: Iterable[Event]) -> List:
    now = gv.now
    events = tuple(events)
    active = [e for e in events if e.r0 == now]
    out = []

    for e in events:
        if e.r0 > now:
            out.append(e.r0)
            continue

        # active band: it stops being uniform when either end leaves its chunk
        out.append(now + time_until_chunk_end(gv.chunks, e.depart_h0))
        out.append(now + time_until_chunk_end(gv.chunks, e.arrive_h0))

        # another arrival band catches up with where this band started
        for e2 in active:
            if e2.arrive_h0 > e.depart_h0:
                out.append(now + (e2.arrive_h0 - e.depart_h0))

    return out


def get_next_interesting_time(gv: "GodView", events: Optional[Iterable[Event]] = None) -> RealTime:
    """
    Minimal future real time at which the partition or a history must change.

    +inf means the universe is permanently quiescent.
    """
    if events is None:
        events = get_non_past_events(gv)
    return RealTime(min(_candidates(gv, events), default=INFINITY))
