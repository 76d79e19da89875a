#!filepath: hypertime/core/time.py
from __future__ import annotations

import math
from typing import NewType

# Values may be int / Fraction / float; INFINITY is the only non-rational one.
CalTime = NewType("CalTime", float)
Hypertime = NewType("Hypertime", float)
RealTime = NewType("RealTime", float)

INFINITY = math.inf


def departure_real_time(h: Hypertime, c: CalTime) -> RealTime:
    """A traveler leaving hypertime h with offset c departs at real time h + c."""
    return RealTime(h + c)


def arrival_hypertime(r: RealTime, c: CalTime) -> Hypertime:
    """A traveler departing at real time r with offset c lands on hypertime r - c."""
    return Hypertime(r - c)


def calendar_offset(r: RealTime, h: Hypertime) -> CalTime:
    return CalTime(r - h)


def is_finite(t) -> bool:
    return t != INFINITY and t != -INFINITY
