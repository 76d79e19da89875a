#!filepath: hypertime/observability/instrumentation.py
from __future__ import annotations

from collections import OrderedDict
from contextlib import contextmanager, nullcontext
from dataclasses import dataclass, field
from time import perf_counter
from typing import Dict

from hypertime.observability.metrics import MetricRecorder
from hypertime.observability.timeline_reporter import TimelineReporter


@dataclass
class PhaseStat:
    seconds: float = 0.0
    calls: int = 0

    @property
    def mean(self) -> float:
        return self.seconds / self.calls if self.calls else 0.0


@dataclass
class Instrumentation:
    """
    Per-run accounting for the engine.

    Rules:
    1. phases are leaves: repeated entries accumulate seconds and calls
    2. observe_step() is the only place step outcomes are counted
    3. no logging on the hot path; report once at the end
    """

    enabled: bool = True
    timeline: Dict[str, PhaseStat] = field(default_factory=OrderedDict)

    def __post_init__(self):
        self.metrics = MetricRecorder(enabled=self.enabled)

    def phase(self, name: str):
        if not self.enabled:
            return nullcontext()
        return self._timed(name)

    @contextmanager
    def _timed(self, name: str):
        start = perf_counter()
        try:
            yield
        finally:
            stat = self.timeline.setdefault(name, PhaseStat())
            stat.seconds += perf_counter() - start
            stat.calls += 1

    def observe_step(self, *, events: int, evolved: int, preempted: int, chunks: int):
        m = self.metrics
        m.increment("steps")
        m.increment("events", events)
        m.increment("evolved", evolved)
        m.increment("preempted", preempted)
        m.peak("peak_chunks", chunks)

    def generate_timeline_report(self, label: str):
        if not self.enabled:
            return
        TimelineReporter(self.timeline, self.metrics.as_dict(), label).print()


class NoOpInstrumentation:
    """Used when observability is disabled."""

    def __init__(self):
        self.metrics = MetricRecorder(enabled=False)
        self.timeline: Dict[str, PhaseStat] = {}

    def phase(self, name: str):
        return nullcontext()

    def observe_step(self, **counts):
        pass

    def generate_timeline_report(self, label: str):
        pass
