"""Clusters: single bodies and binary composites."""

from .base import Cluster, leaves  # noqa: F401
from .body import Body, SingleBodyIterator  # noqa: F401
from .double_system import DoubleSystem  # noqa: F401
