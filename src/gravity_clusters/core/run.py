"""Simulation run loop with optional sampling."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable

import numpy as np

from .simulation import MergeEvent, Simulation


class StopSimulation(Exception):
    """Raised by a run callback to stop issuing further ticks."""


@dataclass(slots=True)
class RunResult:
    simulation: Simulation
    steps_run: int
    merges: list[MergeEvent] = field(default_factory=list)
    step: np.ndarray | None = None
    names: list[str] | None = None
    pos: np.ndarray | None = None
    vel: np.ndarray | None = None


def run(
    simulation: Simulation,
    steps: int,
    sample_every: int | None = None,
    callback: Callable[[int, Simulation], None] | None = None,
) -> RunResult:
    """Advance ``simulation`` by ``steps`` ticks.

    With ``sample_every`` set, leaf positions and velocities are recorded at
    step 0 and every ``sample_every`` ticks as arrays of shape (S, N, 3).
    Merges never change the set of leaves, so N is constant over a run.
    """
    if steps < 0:
        raise ValueError("steps must be >= 0")
    if sample_every is not None and sample_every <= 0:
        raise ValueError("sample_every must be > 0")

    sampled_steps: list[int] = []
    pos: list[np.ndarray] = []
    vel: list[np.ndarray] = []
    # Merges reorder the leaves; sample in the order they had at step 0.
    tracked = simulation.bodies()
    merges: list[MergeEvent] = []

    def sample(step: int) -> None:
        sampled_steps.append(step)
        pos.append(np.asarray([b.position.as_array() for b in tracked], dtype=np.float64))
        vel.append(np.asarray([b.velocity.as_array() for b in tracked], dtype=np.float64))

    if sample_every is not None:
        sample(0)

    done = 0
    for step in range(1, steps + 1):
        merges.extend(simulation.step())
        done = step
        if sample_every is not None and step % sample_every == 0:
            sample(step)
        if callback is not None:
            try:
                callback(step, simulation)
            except StopSimulation:
                break

    if sample_every is None:
        return RunResult(simulation=simulation, steps_run=done, merges=merges)

    return RunResult(
        simulation=simulation,
        steps_run=done,
        merges=merges,
        step=np.asarray(sampled_steps, dtype=np.int64),
        names=[body.name for body in tracked],
        pos=np.asarray(pos, dtype=np.float64),
        vel=np.asarray(vel, dtype=np.float64),
    )
