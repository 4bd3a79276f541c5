"""Ephemeris state files (JPL Horizons CSV vector tables).

Only the block between the ``$$SOE`` and ``$$EOE`` marker lines is read.
Each line in it has the fields

    JDTDB, TIME, X, Y, Z, VX, VY, VZ

with positions in km and velocities in km/s; they are converted to SI on
read.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

from ..core.cluster.body import Body
from ..core.math.vector import Vector3


logger = logging.getLogger(__name__)

START_MARKER = "$$SOE"
END_MARKER = "$$EOE"
N_FIELDS = 8
KM_TO_M = 1e3

_FIELD_SEP = re.compile(r", ?")


class StateFileError(OSError):
    """Base class for unreadable or malformed state files."""


class StateFileNotFoundError(StateFileError):
    pass


class StateFileFormatError(StateFileError):
    pass


@dataclass(frozen=True, slots=True)
class EphemerisRecord:
    jdtdb: float
    time: str
    position: Vector3
    velocity: Vector3


def parse_line(line: str) -> EphemerisRecord:
    fields = _FIELD_SEP.split(line)
    # A line-terminating comma leaves empty trailing fields.
    while fields and fields[-1] == "":
        fields.pop()
    if len(fields) != N_FIELDS:
        raise StateFileFormatError(
            f"expected {N_FIELDS} fields, got {len(fields)}: {line!r}"
        )
    try:
        jdtdb = float(fields[0])
        values = [float(v) for v in fields[2:]]
    except ValueError as exc:
        raise StateFileFormatError(f"bad number in line {line!r}") from exc
    x, y, z, vx, vy, vz = values
    return EphemerisRecord(
        jdtdb=jdtdb,
        time=fields[1],
        position=Vector3(x, y, z).times(KM_TO_M),
        velocity=Vector3(vx, vy, vz).times(KM_TO_M),
    )


def read_ephemeris(path: str | Path) -> list[EphemerisRecord]:
    """Parse and validate every record of the data block."""
    try:
        with open(path, encoding="utf-8") as fh:
            lines = fh.read().splitlines()
    except FileNotFoundError as exc:
        raise StateFileNotFoundError(f"state file not found: {path}") from exc
    except UnicodeDecodeError as exc:
        raise StateFileFormatError(f"state file is not UTF-8 text: {path}") from exc

    records: list[EphemerisRecord] = []
    in_block = False
    for line in lines:
        if not in_block:
            in_block = line == START_MARKER
            continue
        if line == END_MARKER:
            break
        if line == START_MARKER:
            continue
        records.append(parse_line(line))
    return records


def find_record(records: Sequence[EphemerisRecord], day: str) -> EphemerisRecord | None:
    """Return the first record whose TIME field contains ``day``."""
    for record in records:
        if day in record.time:
            return record
    return None


def read_configuration(body: Body, path: str | Path, day: str) -> bool:
    """Set the state of ``body`` to its state on ``day`` from the file at ``path``.

    Returns False, leaving ``body`` untouched, when no record matches
    ``day``. The whole file is validated before ``body`` is changed.
    """
    record = find_record(read_ephemeris(path), day)
    if record is None:
        logger.debug("%s: no record for %r in %s", body, day, path)
        return False
    body.set_pos_vel(record.position, record.velocity)
    logger.debug("%s: state set from %s (JDTDB %s)", body, path, record.jdtdb)
    return True
