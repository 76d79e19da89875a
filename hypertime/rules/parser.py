#!filepath: hypertime/rules/parser.py
"""
Ruleset text format

    $HISTORY -> $ID,$DEPART,$ARRIVE; $ID,$DEPART,$ARRIVE; ...

- HISTORY: comma-separated trip ids, may be empty
- blank lines are skipped, '#' starts a comment
- every trip id appears once in the whole ruleset
- every history appears on at most one line
"""
from __future__ import annotations

import re
from fractions import Fraction
from typing import Dict, Iterable, List, Sequence, Tuple

from hypertime.core.ruleset import MappingRuleset
from hypertime.core.time import CalTime
from hypertime.core.types import History, Trip, TripId
from hypertime.utils.errors import RulesetParseError


_TRIP_RE = re.compile(r"^(.*?)\s*,\s*(-?[0-9.]+)\s*,\s*(-?[0-9.]+)\s*$")
TRIP_FORMAT = "Format: $ID,$DEPART,$ARRIVE; $ID,$DEPART,$ARRIVE; ..."
LINE_FORMAT = "Format: $HISTORY -> $FUTURE"


def _parse_number(s: str, line_no: int) -> CalTime:
    """Exact parse: ints stay int, decimals become Fraction."""
    try:
        if re.fullmatch(r"-?[0-9]+", s):
            return CalTime(int(s))
        return CalTime(Fraction(s))
    except (ValueError, ZeroDivisionError):
        raise RulesetParseError(f"not a number: {s!r}", line_no) from None


def _parse_trip(text: str, line_no: int) -> Trip:
    match = _TRIP_RE.match(text)
    if not match:
        raise RulesetParseError(TRIP_FORMAT, line_no)
    trip_id, depart_s, arrive_s = (g.strip() for g in match.groups())
    if not trip_id:
        raise RulesetParseError(f"empty trip id in {text!r}", line_no)
    return Trip(
        id=TripId(trip_id),
        depart=_parse_number(depart_s, line_no),
        arrive=_parse_number(arrive_s, line_no),
    )


def parse_rule_lines(text: str) -> List[Tuple[History, Tuple[Trip, ...], int]]:
    lines = []
    for line_no, raw in enumerate(text.splitlines(), start=1):
        line = raw.split("#", 1)[0].strip()
        if not line:
            continue

        if "->" not in line:
            raise RulesetParseError(LINE_FORMAT, line_no)
        history_s, future_s = (part.strip() for part in line.split("->", 1))

        history = frozenset(TripId(t.strip()) for t in history_s.split(",") if t.strip())
        trips = tuple(
            _parse_trip(t.strip(), line_no) for t in future_s.split(";") if t.strip()
        )
        lines.append((history, trips, line_no))
    return lines


def parse_ruleset(text: str) -> MappingRuleset:
    """
    Parse and validate ruleset text.

    Raises RulesetParseError (a UserInputError) with a displayable message.
    """
    lines = parse_rule_lines(text)

    seen_ids: Dict[TripId, int] = {}
    for _, trips, line_no in lines:
        for trip in trips:
            if trip.id in seen_ids:
                raise RulesetParseError(
                    f"Duplicate id: {trip.id} (first on line {seen_ids[trip.id]})", line_no
                )
            seen_ids[trip.id] = line_no

    rules: Dict[History, Tuple[Trip, ...]] = {}
    for history, trips, line_no in lines:
        if history in rules:
            raise RulesetParseError(
                f"Duplicate history: {', '.join(sorted(history))}", line_no
            )
        rules[history] = trips

    return MappingRuleset(rules)


def _format_number(x) -> str:
    if isinstance(x, Fraction):
        if x.denominator == 1:
            return str(x.numerator)
        return str(float(x))
    return str(x)


def format_ruleset(rules: Iterable[Tuple[Iterable[str], Sequence[Trip]]]) -> str:
    """Render (history, trips) pairs back into ruleset text."""
    out = []
    for history, trips in rules:
        future = "; ".join(
            f"{t.id}, {_format_number(t.depart)}, {_format_number(t.arrive)}" for t in trips
        )
        out.append(f"{', '.join(sorted(history))} -> {future}".strip())
    return "\n".join(out)
