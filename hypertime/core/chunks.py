#!filepath: hypertime/core/chunks.py
from __future__ import annotations

from typing import AbstractSet, Iterable, Optional, Tuple

from hypertime.utils.errors import InvariantError

from .time import INFINITY, Hypertime
from .types import EMPTY_HISTORY, Chunk, History

"""
Chunk Partition (FINAL / FROZEN)

A chunk list answers ONE question:
- As of now, which exact set of travelers has reached hypertime h?

Invariants (re-established by normalize_chunks):
- sorted by start, first start == 0, last end == inf
- no gaps, no zero/negative-length chunks
- adjacent chunks differ in history, except at forced split points
"""

Chunks = Tuple[Chunk, ...]


def initial_chunks() -> Chunks:
    return (Chunk(start=Hypertime(0), end=Hypertime(INFINITY), history=EMPTY_HISTORY),)


def normalize_chunks(
    chunks: Iterable[Chunk],
    force_split_at: Optional[AbstractSet[Hypertime]] = None,
) -> Chunks:
    ordered = sorted(chunks, key=lambda c: c.start)
    if not ordered:
        raise InvariantError("no chunks")

    if ordered[0].start != 0:
        raise InvariantError(f"chunks do not start at 0: first is {ordered[0]!r}")
    if ordered[-1].end != INFINITY:
        raise InvariantError(f"chunks do not end at inf: last is {ordered[-1]!r}")
    for chunk in ordered:
        if chunk.start >= chunk.end:
            raise InvariantError(f"chunk has zero or negative length: {chunk!r}")

    force_split_at = force_split_at or frozenset()
    res = [ordered[0]]
    for chunk in ordered[1:]:
        prev = res[-1]
        if chunk.start != prev.end:
            raise InvariantError(f"chunks have a gap at {prev.end}..{chunk.start}: {res!r}")

        if chunk.history == prev.history and chunk.start not in force_split_at:
            res[-1] = Chunk(start=prev.start, end=chunk.end, history=prev.history)
        else:
            res.append(chunk)

    return tuple(res)


def find_chunk(chunks: Iterable[Chunk], h: Hypertime) -> Chunk:
    for chunk in chunks:
        if chunk.contains(h):
            return chunk
    raise InvariantError(f"no chunk contains {h}")


def history_at(chunks: Iterable[Chunk], h: Hypertime) -> History:
    return find_chunk(chunks, h).history


def time_until_chunk_end(chunks: Iterable[Chunk], h: Hypertime):
    """
    Real time until a band starting at h leaves its current chunk.

    Negative h is off the edge of the universe: the band needs |h|
    to cross into tracked hypertime.
    """
    if h < 0:
        return abs(h)
    return find_chunk(chunks, h).end - h
