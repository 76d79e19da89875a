#!filepath: hypertime/core/evolution.py
from __future__ import annotations

from typing import Iterable, List, Optional, Sequence, Tuple

from hypertime.utils.errors import InvariantError

from .types import Chunk, Event, History

"""
Partition Evolution (FINAL / FROZEN)

Over a step of width dt, every hypertime in [h0, h0 + dt) crosses the same
trigger, each one instant after its left neighbour. So:

- an arrival at arrive_h0 turns [arrive_h0, arrive_h0 + dt) into
  history | {trip_id}
- a departure at depart_h0 carves out [depart_h0, depart_h0 + dt) with its
  history unchanged (the arrival elsewhere is what changes history)
"""


def intersect(a: Tuple, b: Tuple) -> Optional[Tuple]:
    """Half-open intersection, None when empty."""
    lo, hi = max(a[0], b[0]), min(a[1], b[1])
    if lo >= hi:
        return None
    return lo, hi


def split_interval(chunk: Chunk, band: Tuple, history: History) -> List[Chunk]:
    """
    Cut `band` out of `chunk`: the overlap gets `history`,
    what is left on either side keeps the chunk's own history.
    """
    overlap = intersect((chunk.start, chunk.end), band)
    if overlap is None:
        return [chunk]

    out = [Chunk(start=overlap[0], end=overlap[1], history=history)]
    if chunk.start < overlap[0]:
        out.append(Chunk(start=chunk.start, end=overlap[0], history=chunk.history))
    if overlap[1] < chunk.end:
        out.append(Chunk(start=overlap[1], end=chunk.end, history=chunk.history))
    return out


def evolve_chunks(chunks: Sequence[Chunk], events: Iterable[Event], dt) -> Tuple[Chunk, ...]:
    events = tuple(events)
    if not events:
        return tuple(chunks)

    r0s = {e.r0 for e in events}
    if len(r0s) > 1:
        raise InvariantError(f"multiple r0s in one evolution: {sorted(r0s)}")

    res: List[Chunk] = []
    for chunk in chunks:
        subchunks = [chunk]

        for e in events:
            if not chunk.contains(e.arrive_h0):
                continue
            band = (e.arrive_h0, e.arrive_h0 + dt)
            subchunks = [
                piece
                for sub in subchunks
                for piece in split_interval(sub, band, sub.history | {e.trip_id})
            ]

        for e in events:
            if not chunk.contains(e.depart_h0):
                continue
            band = (e.depart_h0, e.depart_h0 + dt)
            subchunks = [
                piece
                for sub in subchunks
                for piece in split_interval(sub, band, sub.history)
            ]

        res.extend(subchunks)

    return tuple(res)
