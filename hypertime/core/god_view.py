#!filepath: hypertime/core/god_view.py
from __future__ import annotations

from dataclasses import dataclass

from .boxes import Boxes, normalize_boxes, validate_past
from .chunks import Chunks, initial_chunks, normalize_chunks
from .events import departure_points, get_non_past_events
from .ruleset import Ruleset
from .time import INFINITY, RealTime


@dataclass(frozen=True)
class GodView:
    """
    GodView (FINAL / FROZEN)

    Full immutable simulation snapshot:
      - rules  : shared read-only Ruleset capability
      - now    : simulation clock (RealTime, inf once quiescent)
      - chunks : the hypertime partition as of now
      - past   : append-only Box log, every box ends at or before now

    Snapshots are never mutated. Stepping always builds a new one, so a
    caller may keep any number of them for scrubbing.
    """

    rules: Ruleset
    now: RealTime
    chunks: Chunks
    past: Boxes = ()

    @classmethod
    def initial(cls, rules: Ruleset) -> "GodView":
        return cls(rules=rules, now=RealTime(0), chunks=initial_chunks(), past=())

    @property
    def is_quiescent(self) -> bool:
        return self.now == INFINITY


def normalize_god_view(gv: GodView) -> GodView:
    """
    Canonical form of a snapshot.

    Boundaries at the departure points of pending events are kept apart
    even when histories match, so a just-triggered boundary is not merged
    away.
    """
    ordered = tuple(sorted(gv.chunks, key=lambda c: c.start))
    pending = get_non_past_events(GodView(rules=gv.rules, now=gv.now, chunks=ordered, past=gv.past))
    chunks = normalize_chunks(ordered, departure_points(pending))

    past = normalize_boxes(gv.past)
    validate_past(past, gv.now)

    return GodView(rules=gv.rules, now=gv.now, chunks=chunks, past=past)
