#!filepath: hypertime/core/ruleset.py
from __future__ import annotations

from typing import Dict, Iterable, Mapping, Protocol, Sequence, Tuple, Union

from .types import History, Trip, TripId

RulePairs = Iterable[Tuple[Iterable[str], Sequence[Trip]]]


class Ruleset(Protocol):
    """
    Rule lookup capability (FROZEN)

    Contract:
    - lookup(history) returns the ordered trips that fire for EXACTLY that history
    - unknown histories return an empty sequence
    - the core never enumerates a ruleset
    """

    def lookup(self, history: History) -> Sequence[Trip]:
        ...


class MappingRuleset:
    """
    Immutable map-backed Ruleset.

    Duplicate ids / histories are the parser's business; this class
    just stores what it is given (later pairs win on duplicate history).
    """

    __slots__ = ("_rules",)

    def __init__(self, rules: Union[Mapping[History, Sequence[Trip]], RulePairs] = ()):
        items = rules.items() if isinstance(rules, Mapping) else rules
        self._rules: Dict[History, Tuple[Trip, ...]] = {
            frozenset(TripId(t) for t in history): tuple(trips)
            for history, trips in items
        }

    def lookup(self, history: History) -> Sequence[Trip]:
        return self._rules.get(frozenset(history), ())

    # --------------------------------------------------
    # Introspection (outside the core only)
    # --------------------------------------------------
    def items(self):
        return self._rules.items()

    @property
    def trips_by_id(self) -> Dict[TripId, Trip]:
        return {trip.id: trip for trips in self._rules.values() for trip in trips}

    def __len__(self) -> int:
        return len(self._rules)

    def __eq__(self, other) -> bool:
        if not isinstance(other, MappingRuleset):
            return NotImplemented
        return self._rules == other._rules

    def __hash__(self) -> int:
        return hash(frozenset(self._rules.items()))

    def __repr__(self) -> str:
        return f"MappingRuleset({self._rules!r})"


EMPTY_RULESET = MappingRuleset()
