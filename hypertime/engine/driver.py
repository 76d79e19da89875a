#!filepath: hypertime/engine/driver.py
from __future__ import annotations

from typing import Iterator, Optional

from hypertime import logs
from hypertime.core.god_view import GodView
from hypertime.core.time import RealTime
from hypertime.observability.instrumentation import Instrumentation, NoOpInstrumentation

from .step import step_god_view


def iter_steps(
    initial: GodView,
    inst: Instrumentation | NoOpInstrumentation | None = None,
) -> Iterator[GodView]:
    """
    Lazily yield successive snapshots, starting with the first step.

    Stops after the quiescent snapshot (stepping it again is a no-op).
    """
    gv = initial
    while not gv.is_quiescent:
        gv = step_god_view(gv, inst)
        yield gv


@logs.catch(msg="driver failed")
def evolve_until(
    target_time: RealTime,
    initial: GodView,
    *,
    max_steps: Optional[int] = None,
    inst: Instrumentation | NoOpInstrumentation | None = None,
) -> GodView:
    """
    Step while now < target_time and now is finite.

    Every step's boxes end exactly at the new now, so overshooting the
    target never puts a box in the future. With max_steps the run stops
    early (warning) once that many steps were applied.
    """
    inst = inst if inst is not None else NoOpInstrumentation()

    gv = initial
    steps = 0
    while gv.now < target_time and not gv.is_quiescent:
        if max_steps is not None and steps >= max_steps:
            logs.warning(
                f"[Driver] max_steps={max_steps} reached at now={gv.now} "
                f"(target={target_time})"
            )
            break
        gv = step_god_view(gv, inst)
        steps += 1

    inst.metrics.record("boxes", len(gv.past))
    inst.metrics.record("final_now", gv.now)

    if gv.is_quiescent:
        logs.info(f"[Driver] quiescent after {steps} steps")
    else:
        logs.info(f"[Driver] reached now={gv.now} after {steps} steps (target={target_time})")
    return gv
