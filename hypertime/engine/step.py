#!filepath: hypertime/engine/step.py
from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

from hypertime import logs
from hypertime.core.evolution import evolve_chunks
from hypertime.core.events import get_non_past_events
from hypertime.core.god_view import GodView, normalize_god_view
from hypertime.core.oracle import get_next_interesting_time
from hypertime.core.types import Box, Event
from hypertime.observability.instrumentation import Instrumentation, NoOpInstrumentation

"""
Step Function (FINAL / FROZEN)

One atomic transition:
  1. normalize input (forced splits at pending departure points)
  2. next = oracle(gv); dt = next - now
  3. immediate = events with r0 == now
  4. drop immediate departures whose point is another immediate arrival
  5. evolve chunks with the rest over dt
  6. log one box [r0, r0 + dt) per evolved immediate event
  7. normalize the new snapshot at now = next

A quiescent snapshot (now == inf) is a fixed point.
"""


def split_preempted(immediate: Sequence[Event]) -> Tuple[List[Event], List[Event]]:
    """
    Partition immediate events into (evolving, preempted).

    A departure point that another traveler is arriving at this very
    instant already belongs to that arrival; evolving it too would count
    the boundary twice.
    """
    evolving, preempted = [], []
    for i, e in enumerate(immediate):
        hit = any(
            j != i and other.arrive_h0 == e.depart_h0
            for j, other in enumerate(immediate)
        )
        (preempted if hit else evolving).append(e)
    return evolving, preempted


def step_god_view(
    gv: GodView,
    inst: Optional[Instrumentation | NoOpInstrumentation] = None,
) -> GodView:
    inst = inst if inst is not None else NoOpInstrumentation()

    with inst.phase("normalize"):
        gv = normalize_god_view(gv)
    if gv.is_quiescent:
        return gv

    with inst.phase("discover_events"):
        events = get_non_past_events(gv)
    with inst.phase("oracle"):
        next_time = get_next_interesting_time(gv, events)
    dt = next_time - gv.now

    immediate = [e for e in events if e.r0 == gv.now]
    evolving, preempted = split_preempted(immediate)

    logs.debug(
        f"[Step] now={gv.now} next={next_time} "
        f"immediate={len(immediate)} preempted={[e.trip_id for e in preempted]}"
    )

    with inst.phase("evolve_chunks"):
        chunks = evolve_chunks(gv.chunks, evolving, dt)
    new_boxes = tuple(Box(start=e, rf=e.r0 + dt) for e in evolving)

    with inst.phase("normalize"):
        out = normalize_god_view(
            GodView(
                rules=gv.rules,
                now=next_time,
                chunks=chunks,
                past=gv.past + new_boxes,
            )
        )

    inst.observe_step(
        events=len(events),
        evolved=len(evolving),
        preempted=len(preempted),
        chunks=len(out.chunks),
    )
    return out
