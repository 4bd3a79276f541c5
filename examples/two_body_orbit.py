"""Sun-Earth orbit example with diagnostics."""

from __future__ import annotations

import numpy as np

from gravity_clusters.core.catalog import make_body
from gravity_clusters.core.diagnostics import linear_momentum, total_energy_gravity
from gravity_clusters.core.math import Vector3
from gravity_clusters.core.simulation import Simulation


if __name__ == "__main__":
    sun = make_body("Sun")
    earth = make_body("Earth", Vector3(1.496e11, 0.0, 0.0), Vector3(0.0, 29290.0, 0.0))
    simulation = Simulation(clusters=[sun, earth])

    steps = 100_000
    report_every = 10_000

    r = earth.distance_to(sun)
    r_min = r
    r_max = r
    e0 = total_energy_gravity(simulation.clusters)

    for step in range(1, steps + 1):
        simulation.step()
        r = earth.distance_to(sun)
        r_min = min(r_min, r)
        r_max = max(r_max, r)

        if step % report_every == 0:
            p = linear_momentum(simulation.clusters)
            e = total_energy_gravity(simulation.clusters)
            print(
                f"step {step:6d} | r_min={r_min:.6e} r_max={r_max:.6e} | "
                f"|p|={np.linalg.norm(p):.6e} | dE={e - e0:.6e}"
            )
