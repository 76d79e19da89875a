#!filepath: hypertime/core/types.py
from __future__ import annotations

from dataclasses import dataclass
from typing import FrozenSet, NewType

from .time import CalTime, Hypertime, RealTime

TripId = NewType("TripId", str)
History = FrozenSet[TripId]

EMPTY_HISTORY: History = frozenset()


def make_history(*trip_ids: str) -> History:
    return frozenset(TripId(t) for t in trip_ids)


# -------------------------
# Rule
# -------------------------
@dataclass(frozen=True)
class Trip:
    id: TripId
    depart: CalTime
    arrive: CalTime


# -------------------------
# Discovered candidate firing
# -------------------------
@dataclass(frozen=True)
class Event:
    trip_id: TripId
    r0: RealTime
    depart_h0: Hypertime
    arrive_h0: Hypertime


# -------------------------
# Permanent log record
# -------------------------
@dataclass(frozen=True)
class Box:
    """
    The trip was in transit over real time [start.r0, rf).
    """

    start: Event
    rf: RealTime

    @property
    def trip_id(self) -> TripId:
        return self.start.trip_id

    @property
    def r0(self) -> RealTime:
        return self.start.r0

    @property
    def duration(self):
        return self.rf - self.start.r0


# -------------------------
# Partition member
# -------------------------
@dataclass(frozen=True)
class Chunk:
    """
    Half-open hypertime interval [start, end) sharing one history.
    """

    start: Hypertime
    end: Hypertime
    history: History = EMPTY_HISTORY

    @property
    def length(self):
        return self.end - self.start

    def contains(self, h) -> bool:
        return self.start <= h < self.end
