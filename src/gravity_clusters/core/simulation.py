"""Tick loop over the top-level clusters."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from .cluster.base import Cluster, leaves
from .cluster.body import Body
from .constants import G as G_DEFAULT
from .forces.pairwise import accumulate_forces, reset_forces


logger = logging.getLogger(__name__)


@dataclass(slots=True, frozen=True)
class MergeEvent:
    step: int
    first: str
    second: str
    number_of_bodies: int


@dataclass(slots=True)
class Simulation:
    """Owns the top-level clusters and advances them one tick at a time.

    A tick zeroes every leaf's pending force, accumulates all pairwise
    gravitational forces, moves every leaf, then merges overlapping
    top-level clusters.
    """

    clusters: list[Cluster]
    G: float = G_DEFAULT
    merge: bool = True
    current_step: int = 0
    merges: list[MergeEvent] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.clusters = list(self.clusters)
        self.G = float(self.G)

    def bodies(self) -> list[Body]:
        return leaves(self.clusters)

    def step(self) -> list[MergeEvent]:
        bodies = self.bodies()
        reset_forces(bodies)
        accumulate_forces(bodies, self.G)
        for body in bodies:
            body.move()
        self.current_step += 1
        events = self._merge_overlapping() if self.merge else []
        self.merges.extend(events)
        logger.debug(
            "step %d: %d clusters, %d bodies",
            self.current_step,
            len(self.clusters),
            len(bodies),
        )
        return events

    def _merge_overlapping(self) -> list[MergeEvent]:
        # Each cluster takes part in at most one merge per tick.
        events: list[MergeEvent] = []
        merged: list[Cluster] = []
        consumed: set[int] = set()
        n = len(self.clusters)
        for i in range(n):
            if i in consumed:
                continue
            a = self.clusters[i]
            result = a
            for j in range(i + 1, n):
                if j in consumed:
                    continue
                b = self.clusters[j]
                if not overlapping(a, b):
                    continue
                joined = a.add(b)
                if joined is a:
                    continue
                consumed.add(j)
                result = joined
                event = MergeEvent(
                    step=self.current_step,
                    first=str(a),
                    second=str(b),
                    number_of_bodies=joined.number_of_bodies(),
                )
                logger.info("step %d: merged %s with %s", event.step, a, b)
                events.append(event)
                break
            merged.append(result)
        self.clusters = merged
        return events


def overlapping(a: Cluster, b: Cluster) -> bool:
    """True when the centers of mass are within the sum of the radii."""
    return a.mass_center.distance_to(b.mass_center) <= a.radius + b.radius
