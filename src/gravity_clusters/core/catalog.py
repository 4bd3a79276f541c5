"""Solar-system bodies available to scenarios by name.

Masses in kg, radii in m. Colors are plain names for whatever renderer is
attached.
"""

from __future__ import annotations

from dataclasses import dataclass

from .cluster.body import Body
from .math.vector import Vector3


@dataclass(frozen=True, slots=True)
class CatalogEntry:
    name: str
    mass: float
    radius: float
    color: str


CATALOG: dict[str, CatalogEntry] = {
    entry.name: entry
    for entry in (
        CatalogEntry("Sun", 1.989e30, 696340e3, "yellow"),
        CatalogEntry("Mercury", 3.301e23, 2440e3, "gray"),
        CatalogEntry("Venus", 4.86747e24, 6052e3, "pink"),
        CatalogEntry("Earth", 5.972e24, 6371e3, "blue"),
        CatalogEntry("Moon", 7.349e22, 1.737e6, "gray"),
        CatalogEntry("Mars", 6.41712e23, 3390e3, "red"),
        CatalogEntry("Phobos", 1.08e20, 5e3, "gray"),
        CatalogEntry("Deimos", 1.8e20, 6e3, "gray"),
        CatalogEntry("Ceres", 9.394e20, 5e5, "gray"),
        CatalogEntry("Vesta", 2.5908e20, 5e5, "gray"),
        CatalogEntry("Pallas", 2.14e20, 5e5, "gray"),
        CatalogEntry("Hygiea", 8.32e19, 5e5, "gray"),
        CatalogEntry("Oumuamua", 8e6, 0.2e3, "white"),
    )
}


def catalog_names() -> list[str]:
    return list(CATALOG.keys())


def make_body(
    name: str,
    position: Vector3 | None = None,
    velocity: Vector3 | None = None,
) -> Body:
    if name not in CATALOG:
        raise ValueError(f"unknown catalog body: {name}")
    entry = CATALOG[name]
    return Body(
        name=entry.name,
        mass=entry.mass,
        radius=entry.radius,
        position=position if position is not None else Vector3.zero(),
        velocity=velocity if velocity is not None else Vector3.zero(),
        color=entry.color,
    )
