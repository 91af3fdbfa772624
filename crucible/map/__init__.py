# crucible/map/__init__.py

from .base import MapBase, GridFormatError
from .cost_grid import CostGrid
from .generator import CostMapGenerator

__all__ = ["MapBase", "GridFormatError", "CostGrid", "CostMapGenerator"]
