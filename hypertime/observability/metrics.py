#!filepath: hypertime/observability/metrics.py
from dataclasses import dataclass, field
from typing import Any, Dict

from hypertime import logs


@dataclass
class MetricRecorder:
    """
    Run metrics of one simulation.

    counters : summed per step (steps, events, evolved, preempted)
    gauges   : last value or running peak (peak_chunks, boxes, final_now)
    """

    enabled: bool = True
    counters: Dict[str, int] = field(default_factory=dict)
    gauges: Dict[str, Any] = field(default_factory=dict)

    def increment(self, name: str, by: int = 1):
        if not self.enabled:
            return
        self.counters[name] = self.counters.get(name, 0) + by

    def peak(self, name: str, value):
        if not self.enabled:
            return
        if name not in self.gauges or value > self.gauges[name]:
            self.gauges[name] = value

    def record(self, name: str, value: Any):
        if not self.enabled:
            return
        self.gauges[name] = value
        logs.info(f"[Metric] {name} = {value}")

    def as_dict(self) -> Dict[str, Any]:
        return {**self.counters, **self.gauges}
