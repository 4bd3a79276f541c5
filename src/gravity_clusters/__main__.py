"""Command-line entrypoint: run a scenario and print a summary."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Sequence

import numpy as np

from . import __version__
from .core.diagnostics import linear_momentum, total_energy_gravity, total_mass
from .core.run import run
from .io import load_scenario, scenario_to_runtime


logger = logging.getLogger("gravity_clusters")

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _non_negative_int(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {text!r}") from None
    if value < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0: {value}")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="gravity_clusters")
    parser.add_argument("scenario", type=Path)
    parser.add_argument("--steps", type=_non_negative_int, default=None, help="override simulation.steps")
    parser.add_argument("--day", default=None, help="override ephemeris.day")
    parser.add_argument("--out", type=Path, default=None, help="save samples to .npz")
    parser.add_argument("--log-level", type=str.upper, choices=LOG_LEVELS, default="WARNING")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        defn = load_scenario(args.scenario)
        if args.day is not None:
            defn.setdefault("ephemeris", {})["day"] = args.day
        simulation, steps, aux = scenario_to_runtime(defn, base_dir=args.scenario.parent)
    except (OSError, ValueError) as exc:
        logger.error("cannot load %s: %s", args.scenario, exc)
        return 2
    if args.steps is not None:
        steps = args.steps

    sample_every = aux.get("sample_every")
    if args.out is not None and sample_every is None:
        sample_every = 1

    result = run(simulation, steps, sample_every=sample_every)
    clusters = result.simulation.clusters

    print("steps:", result.steps_run)
    print("clusters:", len(clusters))
    for cluster in clusters:
        print(f"  {cluster}: {cluster.number_of_bodies()} bodies, mass {cluster.mass:.6e} kg")
    for event in result.merges:
        print(f"merge at step {event.step}: {event.first} + {event.second}")
    print("total mass:", total_mass(clusters))
    print("momentum:", linear_momentum(clusters))
    print("total energy:", total_energy_gravity(clusters, simulation.G))

    if args.out is not None and result.pos is not None:
        np.savez_compressed(
            args.out,
            step=result.step,
            names=np.asarray(result.names),
            pos=result.pos,
            vel=result.vel,
        )
        print("saved samples to:", args.out)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
