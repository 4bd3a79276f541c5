"""Math utilities namespace."""

from .vector import DotRenderer, Vector3  # noqa: F401
