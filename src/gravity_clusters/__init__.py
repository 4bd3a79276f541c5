"""Gravitational N-body simulation with mergeable body clusters."""

__version__ = "0.1.0"
