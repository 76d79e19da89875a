#!filepath: hypertime/core/boxes.py
from __future__ import annotations

from typing import Iterable, Tuple

from hypertime.utils.errors import InvariantError

from .types import Box

Boxes = Tuple[Box, ...]


def _continues(prev: Box, new: Box) -> bool:
    """new picks up prev's departure band exactly where prev stopped."""
    return (
        prev.trip_id == new.trip_id
        and prev.rf == new.r0
        and new.start.depart_h0 == prev.start.depart_h0 + prev.duration
    )


def _lands_in_band(prev: Box, new: Box) -> bool:
    """prev's arrival point sits inside new's departure band."""
    band_start = new.start.depart_h0
    return band_start <= prev.start.arrive_h0 < band_start + new.duration


def normalize_boxes(boxes: Iterable[Box]) -> Boxes:
    """
    Sort by r0 and coalesce continuation boxes.

    A box continues an earlier box of the same trip when it starts at that
    box's rf and departs from the end of that box's band. Walking back from
    the newest record, an arrival landing inside the new band stops the
    search: that band was preempted and is logged on its own.
    """
    ordered = sorted(boxes, key=lambda b: b.r0)
    res: list[Box] = []

    for new in ordered:
        merged = False
        for i in range(len(res) - 1, -1, -1):
            prev = res[i]
            if _continues(prev, new):
                res[i] = Box(start=prev.start, rf=new.rf)
                merged = True
                break
            if _lands_in_band(prev, new):
                break
        if not merged:
            res.append(new)

    return tuple(res)


def validate_past(boxes: Iterable[Box], now) -> None:
    for b in boxes:
        if b.r0 >= b.rf:
            raise InvariantError(f"box has zero or negative length: {b!r}")
        if b.rf > now:
            raise InvariantError(f"supposedly-past box is actually in future: now={now} box={b!r}")
