"""3D vector value type backed by a NumPy array.

Arithmetic returns new vectors; only ``normalize`` mutates in place.
"""

from __future__ import annotations

from typing import Any, Iterator, Protocol

import numpy as np
from numpy.typing import ArrayLike, NDArray

from ..errors import ZeroVectorError


ArrayF = NDArray[np.float64]


class DotRenderer(Protocol):
    def draw_dot(self, position: "Vector3", radius: float, color: Any) -> None:
        """Draw a filled dot at ``position`` projected to the canvas."""


class Vector3:
    __slots__ = ("_xyz",)

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0) -> None:
        self._xyz = np.array([x, y, z], dtype=np.float64)

    @classmethod
    def from_array(cls, values: ArrayLike) -> "Vector3":
        arr = np.asarray(values, dtype=np.float64)
        if arr.shape != (3,):
            raise ValueError("vector must have shape (3,)")
        vec = cls.__new__(cls)
        vec._xyz = arr.copy()
        return vec

    @classmethod
    def zero(cls) -> "Vector3":
        return cls(0.0, 0.0, 0.0)

    @property
    def x(self) -> float:
        return float(self._xyz[0])

    @property
    def y(self) -> float:
        return float(self._xyz[1])

    @property
    def z(self) -> float:
        return float(self._xyz[2])

    def as_array(self) -> ArrayF:
        return self._xyz.copy()

    def plus(self, other: "Vector3") -> "Vector3":
        return Vector3.from_array(self._xyz + other._xyz)

    def minus(self, other: "Vector3") -> "Vector3":
        return Vector3.from_array(self._xyz - other._xyz)

    def times(self, scalar: float) -> "Vector3":
        return Vector3.from_array(self._xyz * float(scalar))

    def negated(self) -> "Vector3":
        return Vector3.from_array(-self._xyz)

    def length(self) -> float:
        return float(np.linalg.norm(self._xyz))

    def distance_to(self, other: "Vector3") -> float:
        """Return the Euclidean distance between the two points."""
        return float(np.linalg.norm(self._xyz - other._xyz))

    def normalize(self) -> None:
        """Scale this vector in place to unit length."""
        n = self.length()
        if n == 0.0:
            raise ZeroVectorError("cannot normalize a zero vector")
        self._xyz = self._xyz / n

    def draw_as_dot(self, radius: float, color: Any, renderer: DotRenderer) -> None:
        renderer.draw_dot(self, radius, color)

    def __add__(self, other: "Vector3") -> "Vector3":
        return self.plus(other)

    def __sub__(self, other: "Vector3") -> "Vector3":
        return self.minus(other)

    def __mul__(self, scalar: float) -> "Vector3":
        return self.times(scalar)

    __rmul__ = __mul__

    def __neg__(self) -> "Vector3":
        return self.negated()

    def __iter__(self) -> Iterator[float]:
        return iter((self.x, self.y, self.z))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector3):
            return NotImplemented
        return bool(np.array_equal(self._xyz, other._xyz))

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Vector3({self.x!r}, {self.y!r}, {self.z!r})"
