"""Scenario I/O and adapters."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import numpy as np

from ..core.catalog import CATALOG, make_body
from ..core.cluster.body import Body
from ..core.constants import G as G_DEFAULT
from ..core.math.vector import Vector3
from ..core.simulation import Simulation
from .ephemeris import read_configuration


ScenarioDefinition = dict[str, Any]


def load_scenario(path: str | Path) -> ScenarioDefinition:
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    return _validate_scenario_v1(data)


def save_scenario(path: str | Path, defn: ScenarioDefinition) -> None:
    Path(path).write_text(
        json.dumps(defn, indent=2, sort_keys=True),
        encoding="utf-8",
    )


def scenario_to_runtime(
    defn: ScenarioDefinition,
    base_dir: str | Path | None = None,
) -> tuple[Simulation, int, dict[str, Any]]:
    """Build the simulation described by ``defn``.

    Ephemeris paths are resolved against ``base_dir`` (the current directory
    when omitted).
    """
    sim = defn["simulation"]
    steps = int(sim["steps"])
    G = float(sim.get("G", G_DEFAULT))
    merge = bool(sim.get("merge", True))
    day = defn.get("ephemeris", {}).get("day")
    root = Path(base_dir) if base_dir is not None else Path.cwd()

    bodies: list[Body] = []
    for idx, entry in enumerate(defn["bodies"]):
        body = _body_from_entry(entry)
        path = entry.get("ephemeris")
        if path is not None and day is not None:
            state_path = Path(path)
            if not state_path.is_absolute():
                state_path = root / state_path
            if not read_configuration(body, state_path, day):
                raise ValueError(
                    f"bodies[{idx}].ephemeris has no record for day {day!r}"
                )
        bodies.append(body)

    simulation = Simulation(clusters=bodies, G=G, merge=merge)
    aux = {
        "sample_every": defn.get("sampling", {}).get("every"),
        "metadata": defn.get("metadata", {}),
        "day": day,
    }
    return simulation, steps, aux


def _body_from_entry(entry: dict[str, Any]) -> Body:
    pos = Vector3.from_array(entry.get("pos", [0.0, 0.0, 0.0]))
    vel = Vector3.from_array(entry.get("vel", [0.0, 0.0, 0.0]))
    if "catalog" in entry:
        body = make_body(entry["catalog"], pos, vel)
        if "name" in entry:
            body.name = str(entry["name"])
        if "color" in entry:
            body.color = entry["color"]
        return body
    return Body(
        name=str(entry["name"]),
        mass=float(entry["mass"]),
        radius=float(entry["radius"]),
        position=pos,
        velocity=vel,
        color=entry.get("color"),
    )


def _require(obj: dict[str, Any], key: str, ctx: str) -> Any:
    if key not in obj:
        raise ValueError(f"missing required field: {ctx}.{key}")
    return obj[key]


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _validate_vector(value: Any, ctx: str) -> None:
    a = np.asarray(value, dtype=np.float64)
    if a.shape != (3,):
        raise ValueError(f"{ctx} must have length 3")
    if not np.all(np.isfinite(a)):
        raise ValueError(f"{ctx} must be finite")


def _validate_body(entry: Any, ctx: str) -> str:
    if not isinstance(entry, dict):
        raise ValueError(f"{ctx} must be an object")
    if "catalog" in entry:
        if entry["catalog"] not in CATALOG:
            raise ValueError(f"{ctx}.catalog is not a known body: {entry['catalog']}")
        name = entry.get("name", entry["catalog"])
    else:
        name = _require(entry, "name", ctx)
        mass = _require(entry, "mass", ctx)
        radius = _require(entry, "radius", ctx)
        if not _is_number(mass) or mass <= 0.0:
            raise ValueError(f"{ctx}.mass must be a number > 0")
        if not _is_number(radius) or radius <= 0.0:
            raise ValueError(f"{ctx}.radius must be a number > 0")
    if not isinstance(name, str) or not name:
        raise ValueError(f"{ctx}.name must be a non-empty string")
    if "pos" in entry:
        _validate_vector(entry["pos"], f"{ctx}.pos")
    if "vel" in entry:
        _validate_vector(entry["vel"], f"{ctx}.vel")
    if "ephemeris" in entry and not isinstance(entry["ephemeris"], str):
        raise ValueError(f"{ctx}.ephemeris must be a path string")
    return name


def _validate_scenario_v1(data: dict[str, Any]) -> ScenarioDefinition:
    if not isinstance(data, dict):
        raise ValueError("scenario must be a JSON object")
    if data.get("schema_version") != 1:
        raise ValueError("schema_version must be 1")

    sim = _require(data, "simulation", "scenario")
    steps = _require(sim, "steps", "simulation")
    if not isinstance(steps, int) or isinstance(steps, bool) or steps < 0:
        raise ValueError("simulation.steps must be an integer >= 0")
    if "G" in sim and (not _is_number(sim["G"]) or sim["G"] <= 0.0):
        raise ValueError("simulation.G must be a number > 0")
    if "merge" in sim and not isinstance(sim["merge"], bool):
        raise ValueError("simulation.merge must be boolean")

    if "sampling" in data:
        sampling = data["sampling"]
        if not isinstance(sampling, dict):
            raise ValueError("sampling must be an object")
        every = sampling.get("every")
        if every is not None and (
            not isinstance(every, int) or isinstance(every, bool) or every <= 0
        ):
            raise ValueError("sampling.every must be an integer > 0")

    day = None
    if "ephemeris" in data:
        eph = data["ephemeris"]
        if not isinstance(eph, dict):
            raise ValueError("ephemeris must be an object")
        day = eph.get("day")
        if day is not None and (not isinstance(day, str) or not day):
            raise ValueError("ephemeris.day must be a non-empty string")

    bodies = _require(data, "bodies", "scenario")
    if not isinstance(bodies, list) or not bodies:
        raise ValueError("bodies must be a non-empty list")
    names: set[str] = set()
    for idx, entry in enumerate(bodies):
        name = _validate_body(entry, f"bodies[{idx}]")
        if name in names:
            raise ValueError(f"duplicate body name: {name}")
        names.add(name)
        if "ephemeris" in entry and day is None:
            raise ValueError(f"bodies[{idx}].ephemeris requires ephemeris.day")

    return data
