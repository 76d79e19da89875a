#!filepath: hypertime/config/simulation_config.py
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field


class SimulationConfig(BaseModel):
    """
    SimulationConfig

    Semantics:
      - default driver target (real time) for `hypertime run`
      - hard cap on the number of steps per driver run
      - whether the driver records a per-run timing timeline
    """

    target_time: float = 20.0
    max_steps: Optional[int] = Field(default=10_000, ge=1)
    record_timeline: bool = False
