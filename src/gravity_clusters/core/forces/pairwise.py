"""All-pairs Newtonian gravity between leaf bodies."""

from __future__ import annotations

from typing import Sequence

import numpy as np

from ..cluster.body import Body
from ..constants import G as G_DEFAULT
from ..math.vector import Vector3


def net_forces(bodies: Sequence[Body], G: float = G_DEFAULT) -> np.ndarray:
    """Return the net gravitational force on each body as (N, 3).

    Each unordered pair (i, j), i < j, is evaluated once; body i receives
    the force and body j its negation. O(N^2), no spatial partitioning.
    """
    n = len(bodies)
    acc = np.zeros((n, 3), dtype=np.float64)
    for i in range(n):
        bi = bodies[i]
        for j in range(i + 1, n):
            f = bi.gravitational_force(bodies[j], G).as_array()
            acc[i] += f
            acc[j] -= f
    return acc


def reset_forces(bodies: Sequence[Body]) -> None:
    for body in bodies:
        body.set_force(Vector3.zero())


def accumulate_forces(bodies: Sequence[Body], G: float = G_DEFAULT) -> None:
    """Add the pairwise gravitational forces to each body's pending force."""
    for body, f in zip(bodies, net_forces(bodies, G)):
        body.set_force(body.force.plus(Vector3.from_array(f)))
