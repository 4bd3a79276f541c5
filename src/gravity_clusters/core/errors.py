"""Exceptions raised by the simulation core."""

from __future__ import annotations


class ZeroVectorError(ValueError):
    """Raised when a zero-length vector is normalized."""


class CoincidentBodiesError(ValueError):
    """Raised when a force is requested between two bodies at the same position."""


class DoubleSystemError(ValueError):
    """Raised when two clusters cannot be joined into a DoubleSystem."""
