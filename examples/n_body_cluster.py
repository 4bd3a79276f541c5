"""Small cluster of rocks collapsing and merging (deterministic)."""

from __future__ import annotations

import numpy as np

from gravity_clusters.core.cluster import Body
from gravity_clusters.core.diagnostics import linear_momentum, total_mass
from gravity_clusters.core.math import Vector3
from gravity_clusters.core.run import run
from gravity_clusters.core.simulation import Simulation


if __name__ == "__main__":
    rng = np.random.default_rng(123)
    n = 30
    pos = rng.normal(scale=1e7, size=(n, 3))
    vel = rng.normal(scale=10.0, size=(n, 3))
    mass = rng.uniform(low=1e20, high=1e22, size=(n,))
    radius = rng.uniform(low=1e5, high=1e6, size=(n,))

    bodies = [
        Body(
            name=f"rock{i:02d}",
            mass=float(mass[i]),
            radius=float(radius[i]),
            position=Vector3.from_array(pos[i]),
            velocity=Vector3.from_array(vel[i]),
        )
        for i in range(n)
    ]
    simulation = Simulation(clusters=bodies)
    m0 = total_mass(simulation.clusters)

    result = run(simulation, steps=5000)

    print("merges:", len(result.merges))
    print("top-level clusters:", len(simulation.clusters))
    print("largest cluster:", max(c.number_of_bodies() for c in simulation.clusters), "bodies")
    print("mass drift:", total_mass(simulation.clusters) - m0)
    print("total momentum:", linear_momentum(simulation.clusters))
