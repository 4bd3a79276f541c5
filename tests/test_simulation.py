from __future__ import annotations

import logging

import numpy as np
import pytest

from gravity_clusters.core.cluster import Body, DoubleSystem
from gravity_clusters.core.diagnostics import linear_momentum, total_mass
from gravity_clusters.core.errors import CoincidentBodiesError
from gravity_clusters.core.forces import accumulate_forces, net_forces, reset_forces
from gravity_clusters.core.math import Vector3
from gravity_clusters.core.simulation import Simulation, overlapping


G = 6.674e-11


def _sun_earth() -> tuple[Body, Body]:
    sun = Body("Sun", 1.989e30, 6.9634e8, Vector3(0.0, 0.0, 0.0), Vector3(0.0, 0.0, 0.0))
    earth = Body(
        "Earth", 5.972e24, 6.371e6, Vector3(1.496e11, 0.0, 0.0), Vector3(0.0, 29290.0, 0.0)
    )
    return sun, earth


def test_one_tick_attracts_sun_and_earth() -> None:
    sun, earth = _sun_earth()
    sim = Simulation(clusters=[sun, earth], G=G)
    events = sim.step()

    assert events == []
    assert sim.current_step == 1
    f_earth = earth.force.as_array()
    f_sun = sun.force.as_array()
    expected = G * 1.989e30 * 5.972e24 / (1.496e11 * 1.496e11)
    assert f_earth[0] < 0.0
    assert f_sun[0] > 0.0
    assert np.linalg.norm(f_earth) == pytest.approx(expected, rel=1e-12)
    assert np.allclose(f_earth, -f_sun, rtol=1e-12)

    assert earth.position.x < 1.496e11
    assert earth.position.y == pytest.approx(29290.0)
    assert sun.position.x > 0.0


def test_forces_are_reset_each_tick() -> None:
    sun, earth = _sun_earth()
    sim = Simulation(clusters=[sun, earth], G=G)
    sim.step()
    first = earth.force.as_array()
    sim.step()
    second = earth.force.as_array()
    # Same order of magnitude; not doubled by leftover accumulation.
    assert np.linalg.norm(second) == pytest.approx(np.linalg.norm(first), rel=1e-6)


def test_pairwise_forces_cancel() -> None:
    bodies = [
        Body("a", 1.0, 0.1, Vector3(-1.0, 0.0, 0.0)),
        Body("b", 1.5, 0.1, Vector3(1.0, 0.0, 0.0)),
        Body("c", 0.8, 0.1, Vector3(0.0, 1.0, 0.0)),
        Body("d", 1.2, 0.1, Vector3(0.0, -1.0, 0.5)),
    ]
    forces = net_forces(bodies, G=1.0)
    assert forces.shape == (4, 3)
    assert np.allclose(np.sum(forces, axis=0), 0.0, atol=1e-12)

    reset_forces(bodies)
    accumulate_forces(bodies, G=1.0)
    accumulate_forces(bodies, G=1.0)
    assert np.allclose(bodies[0].force.as_array(), 2.0 * forces[0])


def test_coincident_leaves_raise() -> None:
    a = Body("a", 1.0, 1.0, Vector3(0.0, 0.0, 0.0))
    b = Body("b", 1.0, 1.0, Vector3(0.0, 0.0, 0.0))
    sim = Simulation(clusters=[a, b], G=1.0, merge=False)
    with pytest.raises(CoincidentBodiesError):
        sim.step()


def test_overlapping_clusters_merge(caplog: pytest.LogCaptureFixture) -> None:
    a = Body("A", 1.0, 10.0, Vector3(0.0, 0.0, 0.0))
    b = Body("B", 2.0, 5.0, Vector3(12.0, 0.0, 0.0))
    far = Body("Far", 1.0, 1.0, Vector3(1e6, 0.0, 0.0))
    sim = Simulation(clusters=[a, b, far], G=G)

    with caplog.at_level(logging.INFO):
        events = sim.step()

    assert len(events) == 1
    assert (events[0].first, events[0].second) == ("A", "B")
    assert events[0].number_of_bodies == 2
    assert sim.merges == events
    assert len(sim.clusters) == 2
    merged = sim.clusters[0]
    assert isinstance(merged, DoubleSystem)
    assert merged.bigger is a
    assert sim.clusters[1] is far
    assert len(sim.bodies()) == 3
    assert "merged A with B" in caplog.text


def test_merge_disabled_keeps_clusters() -> None:
    a = Body("A", 1.0, 10.0, Vector3(0.0, 0.0, 0.0))
    b = Body("B", 2.0, 5.0, Vector3(12.0, 0.0, 0.0))
    sim = Simulation(clusters=[a, b], G=G, merge=False)
    assert sim.step() == []
    assert sim.clusters == [a, b]


def test_cluster_merges_once_per_tick() -> None:
    a = Body("A", 1.0, 10.0, Vector3(0.0, 0.0, 0.0))
    b = Body("B", 1.0, 10.0, Vector3(15.0, 0.0, 0.0))
    c = Body("C", 1.0, 10.0, Vector3(25.0, 0.0, 0.0))
    sim = Simulation(clusters=[a, b, c], G=G)

    assert len(sim.step()) == 1
    assert [cl.number_of_bodies() for cl in sim.clusters] == [2, 1]

    assert len(sim.step()) == 1
    assert len(sim.clusters) == 1
    assert sim.clusters[0].number_of_bodies() == 3


def test_merge_conserves_mass_and_momentum() -> None:
    a = Body("A", 3.0e10, 10.0, Vector3(0.0, 0.0, 0.0), Vector3(0.0, 0.1, 0.0))
    b = Body("B", 1.0e10, 5.0, Vector3(14.0, 0.0, 0.0), Vector3(0.0, -0.1, 0.0))
    sim = Simulation(clusters=[a, b], G=G)
    m0 = total_mass(sim.clusters)
    p0 = linear_momentum(sim.clusters)

    sim.step()

    assert len(sim.clusters) == 1
    assert total_mass(sim.clusters) == pytest.approx(m0)
    assert np.allclose(linear_momentum(sim.clusters), p0, rtol=1e-9, atol=1.0)


def test_overlapping_uses_cluster_radius() -> None:
    a = Body("A", 1.0, 1.0, Vector3(0.0, 0.0, 0.0))
    b = Body("B", 1.0, 1.0, Vector3(2.0, 0.0, 0.0))
    c = Body("C", 1.0, 1.0, Vector3(2.5, 0.0, 0.0))
    assert overlapping(a, b)
    assert not overlapping(a, Body("D", 1.0, 0.5, Vector3(2.0, 0.0, 0.0)))
    assert overlapping(DoubleSystem(a, b), c)


def test_determinism() -> None:
    def build() -> Simulation:
        sun, earth = _sun_earth()
        moon = Body(
            "Moon", 7.349e22, 1.737e6, Vector3(1.496e11 + 3.844e8, 0.0, 0.0),
            Vector3(0.0, 29290.0 + 1022.0, 0.0),
        )
        return Simulation(clusters=[sun, earth, moon], G=G)

    s1, s2 = build(), build()
    for _ in range(50):
        s1.step()
        s2.step()
    for b1, b2 in zip(s1.bodies(), s2.bodies()):
        assert np.array_equal(b1.position.as_array(), b2.position.as_array())
        assert np.array_equal(b1.velocity.as_array(), b2.velocity.as_array())
