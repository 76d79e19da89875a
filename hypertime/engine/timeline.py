#!filepath: hypertime/engine/timeline.py
from __future__ import annotations

from typing import List

from hypertime.core.god_view import GodView

from .step import step_god_view


class SnapshotTimeline:
    """
    Retained snapshots for scrubbing.

    snapshots[0] is the initial GodView, snapshots[n] is n steps later.
    Seeking forward steps as needed; seeking back just reads what is kept.
    """

    def __init__(self, initial: GodView):
        self._snapshots: List[GodView] = [initial]

    def __len__(self) -> int:
        return len(self._snapshots)

    def __getitem__(self, index: int) -> GodView:
        return self._snapshots[index]

    @property
    def latest(self) -> GodView:
        return self._snapshots[-1]

    def seek(self, index: int) -> GodView:
        if index < 0:
            raise IndexError(f"step index must be >= 0, got {index}")
        while index >= len(self._snapshots):
            self._snapshots.append(step_god_view(self._snapshots[-1]))
        return self._snapshots[index]

    def truncate(self, index: int) -> None:
        """Forget every snapshot after `index`."""
        del self._snapshots[max(index, 0) + 1:]
