#!filepath: hypertime/observability/timeline_reporter.py
from typing import Any, Dict, Mapping

from hypertime import logs


class TimelineReporter:
    """
    End-of-run report:
    - phase -> calls, total seconds, mean per call, share of total
    - run metrics
    """

    def __init__(self, timeline: Mapping, metrics: Dict[str, Any], label: str):
        self.timeline = timeline
        self.metrics = metrics
        self.label = label

    def rows(self):
        total = sum(stat.seconds for stat in self.timeline.values())
        for name, stat in self.timeline.items():
            share = stat.seconds / total if total else 0.0
            yield name, stat.calls, stat.seconds, stat.mean, share

    def print(self):
        logs.info(f"[Timeline] ===== Simulation timeline for {self.label} =====")
        for name, calls, sec, mean, share in self.rows():
            logs.info(
                f"[Timeline] {name:<18} {calls:>6} calls {sec:>8.3f}s "
                f"{mean * 1e6:>9.1f}us/call {share:>6.1%}"
            )
        for name, value in self.metrics.items():
            logs.info(f"[Timeline] {name:<18} {value}")
        logs.info("[Timeline] ===========================================")
