"""Whole-system diagnostics over top-level clusters."""

from __future__ import annotations

from typing import Iterable

import numpy as np

from .cluster.base import Cluster, leaves
from .constants import G as G_DEFAULT


def _arrays(clusters: Iterable[Cluster]) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    bodies = leaves(clusters)
    if not bodies:
        return np.zeros((0, 3)), np.zeros((0, 3)), np.zeros(0)
    pos = np.asarray([b.position.as_array() for b in bodies], dtype=np.float64)
    vel = np.asarray([b.velocity.as_array() for b in bodies], dtype=np.float64)
    mass = np.asarray([b.mass for b in bodies], dtype=np.float64)
    return pos, vel, mass


def total_mass(clusters: Iterable[Cluster]) -> float:
    _, _, mass = _arrays(clusters)
    return float(np.sum(mass))


def center_of_mass(clusters: Iterable[Cluster]) -> np.ndarray:
    pos, _, mass = _arrays(clusters)
    if mass.size == 0:
        raise ValueError("cannot compute center of mass for an empty system")
    return np.sum(pos * mass[:, np.newaxis], axis=0) / np.sum(mass)


def linear_momentum(clusters: Iterable[Cluster]) -> np.ndarray:
    """Sum of mass times per-tick displacement."""
    _, vel, mass = _arrays(clusters)
    if mass.size == 0:
        return np.zeros(3, dtype=np.float64)
    return np.sum(vel * mass[:, np.newaxis], axis=0)


def kinetic_energy(clusters: Iterable[Cluster]) -> float:
    _, vel, mass = _arrays(clusters)
    v2 = np.sum(vel**2, axis=1)
    return float(0.5 * np.sum(mass * v2))


def potential_energy_gravity(clusters: Iterable[Cluster], G: float = G_DEFAULT) -> float:
    pos, _, mass = _arrays(clusters)
    n = pos.shape[0]
    if n < 2:
        return 0.0
    delta = pos[None, :, :] - pos[:, None, :]
    dist2 = np.sum(delta * delta, axis=-1)
    iu = np.triu_indices(n, k=1)
    dist = np.sqrt(dist2[iu])
    mprod = mass[iu[0]] * mass[iu[1]]
    return float(-G * np.sum(mprod / dist))


def total_energy_gravity(clusters: Iterable[Cluster], G: float = G_DEFAULT) -> float:
    clusters = list(clusters)
    return kinetic_energy(clusters) + potential_energy_gravity(clusters, G)
