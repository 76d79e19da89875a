"""
Simulation Engine

Defines HOW the universe is driven: one atomic step at a time.

- step     : discovery + oracle + evolution -> new snapshot
- driver   : repeat steps until a target real time or quiescence
- timeline : caller-side list of retained snapshots (scrubbing)

Time advancement is always requested by the caller; nothing here runs
on its own.
"""

from .step import step_god_view
from .driver import evolve_until, iter_steps
from .timeline import SnapshotTimeline

__all__ = ["step_god_view", "evolve_until", "iter_steps", "SnapshotTimeline"]
