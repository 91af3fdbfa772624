# crucible/__init__.py

from .types import Position
from .config import GlobalConfig
from .map import CostGrid, GridFormatError
from .vehicles import (
    CrucibleConfig,
    CrucibleVehicle,
    Direction,
    Heading,
    InvalidRunLimitsError,
    STANDARD_CRUCIBLE,
    ULTRA_CRUCIBLE,
)
from .planning.planners import CrucibleDijkstraPlanner, GridDijkstraPlanner, solve

__all__ = [
    "Position",
    "GlobalConfig",
    "CostGrid",
    "GridFormatError",
    "CrucibleConfig",
    "CrucibleVehicle",
    "Direction",
    "Heading",
    "InvalidRunLimitsError",
    "STANDARD_CRUCIBLE",
    "ULTRA_CRUCIBLE",
    "CrucibleDijkstraPlanner",
    "GridDijkstraPlanner",
    "solve",
]
