"""Point-mass celestial body."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Any

from ..constants import G as G_DEFAULT
from ..constants import MASS_EPSILON, VISUAL_RADIUS_SCALE
from ..errors import CoincidentBodiesError, DoubleSystemError
from ..math.vector import DotRenderer, Vector3
from .base import Cluster
from .double_system import DoubleSystem


logger = logging.getLogger(__name__)


@dataclass(slots=True, eq=False)
class Body:
    """A star, planet, moon or asteroid.

    Units are SI: mass in kg, radius in m, position in m. ``velocity`` is the
    displacement applied per tick (see ``move``). ``force`` holds the net
    force accumulated for the current tick.

    Two bodies are equal when they share a name and their masses differ by
    less than ``MASS_EPSILON``; position and velocity are ignored.
    """

    name: str
    mass: float
    radius: float
    position: Vector3 = field(default_factory=Vector3.zero)
    velocity: Vector3 = field(default_factory=Vector3.zero)
    color: Any = None
    force: Vector3 = field(default_factory=Vector3.zero)

    def __post_init__(self) -> None:
        self.mass = float(self.mass)
        self.radius = float(self.radius)
        if self.mass <= 0.0:
            raise ValueError(f"{self.name}: mass must be > 0")
        if self.radius <= 0.0:
            raise ValueError(f"{self.name}: radius must be > 0")

    def distance_to(self, other: "Body") -> float:
        return self.position.distance_to(other.position)

    def gravitational_force(self, other: "Body", G: float = G_DEFAULT) -> Vector3:
        """Return the force exerted by ``other`` on this body.

        F = G * m1 * m2 / r**2, directed from this body toward ``other``.
        """
        distance = self.distance_to(other)
        if distance == 0.0:
            raise CoincidentBodiesError(
                f"{self.name} and {other.name} are at the same position"
            )
        direction = other.position.minus(self.position)
        direction.normalize()
        magnitude = G * self.mass * other.mass / (distance * distance)
        return direction.times(magnitude)

    def move(self, force: Vector3 | None = None) -> None:
        """Advance one tick under ``force`` (the pending force if omitted).

        new position = position + force / mass + velocity;
        the new velocity is the displacement just applied.
        """
        if force is None:
            force = self.force
        new_position = self.position.plus(force.times(1.0 / self.mass)).plus(self.velocity)
        self.velocity = new_position.minus(self.position)
        self.position = new_position

    def set_force(self, force: Vector3) -> None:
        self.force = force

    def set_pos_vel(self, position: Vector3, velocity: Vector3) -> None:
        self.position = position
        self.velocity = velocity

    def switch_mass_and_radius(self, other: "Body") -> None:
        self.mass, other.mass = other.mass, self.mass
        self.radius, other.radius = other.radius, self.radius

    def visual_radius(self) -> float:
        return VISUAL_RADIUS_SCALE * math.log10(self.radius)

    def draw(self, renderer: DotRenderer) -> None:
        self.position.draw_as_dot(self.visual_radius(), self.color, renderer)

    # Cluster interface

    @property
    def mass_center(self) -> Vector3:
        return self.position

    def number_of_bodies(self) -> int:
        return 1

    def largest(self) -> "Body":
        return self

    def add(self, other: Cluster) -> Cluster:
        """Join ``other`` with this body, larger radius first.

        A degenerate pairing is logged and leaves this body unchanged.
        """
        try:
            if other.radius >= self.radius:
                return DoubleSystem(other, self)
            return DoubleSystem(self, other)
        except DoubleSystemError as exc:
            logger.warning("merge of %s with %s dropped: %s", self, other, exc)
        return self

    def __iter__(self) -> "SingleBodyIterator":
        return SingleBodyIterator(self)

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Body):
            return NotImplemented
        return self.name == other.name and abs(self.mass - other.mass) < MASS_EPSILON

    def __hash__(self) -> int:
        return hash(self.name)

    def __str__(self) -> str:
        return self.name


class SingleBodyIterator:
    """Yields one body, then reports exhaustion on every further call."""

    __slots__ = ("_body", "_pending")

    def __init__(self, body: Body) -> None:
        self._body = body
        self._pending = True

    def has_next(self) -> bool:
        return self._pending

    def __next__(self) -> Body:
        if not self._pending:
            raise StopIteration("no more elements")
        self._pending = False
        return self._body

    def __iter__(self) -> "SingleBodyIterator":
        return self
