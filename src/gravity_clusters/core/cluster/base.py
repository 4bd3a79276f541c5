"""Cluster interface shared by single bodies and composites."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, Iterator, Protocol, runtime_checkable

from ..math.vector import Vector3

if TYPE_CHECKING:
    from .body import Body


@runtime_checkable
class Cluster(Protocol):
    """A physical aggregate treated uniformly as one body or many.

    Iterating a cluster yields its leaf bodies: a finite, non-empty sequence
    in which every leaf appears exactly once. Each call to ``iter`` starts a
    fresh traversal.
    """

    @property
    def mass(self) -> float:
        """Sum of the leaf masses."""

    @property
    def radius(self) -> float:
        """Radius of the largest-radius leaf."""

    @property
    def mass_center(self) -> Vector3:
        """Mass-weighted average of the leaf positions."""

    def number_of_bodies(self) -> int:
        ...

    def largest(self) -> "Body":
        """Return the leaf with the largest radius."""

    def add(self, other: "Cluster") -> "Cluster":
        """Return a cluster joining this one with ``other``."""

    def __iter__(self) -> Iterator["Body"]:
        ...


def leaves(clusters: Iterable[Cluster]) -> list["Body"]:
    """Flatten top-level clusters into their leaf bodies, in traversal order."""
    out: list[Body] = []
    for cluster in clusters:
        out.extend(cluster)
    return out
