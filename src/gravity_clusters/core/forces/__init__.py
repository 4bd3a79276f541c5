"""Force accumulation."""

from .pairwise import accumulate_forces, net_forces, reset_forces  # noqa: F401
