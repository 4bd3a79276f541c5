"""Scenario and ephemeris I/O."""

from .ephemeris import (  # noqa: F401
    StateFileError,
    StateFileFormatError,
    StateFileNotFoundError,
    read_configuration,
    read_ephemeris,
)
from .scenario import load_scenario, save_scenario, scenario_to_runtime  # noqa: F401
