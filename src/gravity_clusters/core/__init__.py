"""Simulation core: vectors, bodies, clusters and the tick loop."""
