# [入口] 负责暴露类，让外部调用更简洁

# crucible/vehicles/__init__.py

from .heading import Direction, Heading
from .config import CrucibleConfig, InvalidRunLimitsError, STANDARD_CRUCIBLE, ULTRA_CRUCIBLE
from .base import VehicleBase
from .crucible import CrucibleVehicle

__all__ = [
    "Direction",
    "Heading",
    "CrucibleConfig",
    "InvalidRunLimitsError",
    "STANDARD_CRUCIBLE",
    "ULTRA_CRUCIBLE",
    "VehicleBase",
    "CrucibleVehicle",
]
