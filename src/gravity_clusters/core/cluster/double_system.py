"""Binary composite cluster."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterator

from ..errors import DoubleSystemError
from ..math.vector import Vector3
from .base import Cluster

if TYPE_CHECKING:
    from .body import Body


logger = logging.getLogger(__name__)


class DoubleSystem:
    """Two child clusters bound into one.

    The child with the larger radius becomes ``bigger``; on a tie the first
    argument wins. Children are never shared between systems, so joining
    the same cluster twice, or two clusters that already have a leaf in
    common, raises ``DoubleSystemError``.
    """

    __slots__ = ("bigger", "smaller")

    def __init__(self, a: Cluster, b: Cluster) -> None:
        if a is b:
            raise DoubleSystemError("cannot join a cluster with itself")
        ids_a = {id(body) for body in a}
        if any(id(body) in ids_a for body in b):
            raise DoubleSystemError("clusters share a body")
        if a.radius >= b.radius:
            self.bigger, self.smaller = a, b
        else:
            self.bigger, self.smaller = b, a

    @property
    def mass(self) -> float:
        return self.bigger.mass + self.smaller.mass

    @property
    def radius(self) -> float:
        return max(self.bigger.radius, self.smaller.radius)

    @property
    def mass_center(self) -> Vector3:
        m_big = self.bigger.mass
        m_small = self.smaller.mass
        weighted = (
            self.bigger.mass_center.as_array() * m_big
            + self.smaller.mass_center.as_array() * m_small
        )
        return Vector3.from_array(weighted / (m_big + m_small))

    def number_of_bodies(self) -> int:
        return self.bigger.number_of_bodies() + self.smaller.number_of_bodies()

    def largest(self) -> "Body":
        # Radii can change after construction (switch_mass_and_radius).
        if self.smaller.radius > self.bigger.radius:
            return self.smaller.largest()
        return self.bigger.largest()

    def add(self, other: Cluster) -> Cluster:
        try:
            if other.radius >= self.radius:
                return DoubleSystem(other, self)
            return DoubleSystem(self, other)
        except DoubleSystemError as exc:
            logger.warning("merge of %s with %s dropped: %s", self, other, exc)
        return self

    def __iter__(self) -> Iterator["Body"]:
        yield from self.bigger
        yield from self.smaller

    def __str__(self) -> str:
        return "(" + " + ".join(str(body) for body in self) + ")"

    def __repr__(self) -> str:
        return f"DoubleSystem({self.bigger!r}, {self.smaller!r})"
