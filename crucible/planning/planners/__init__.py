# crucible/planning/planners/__init__.py

from .base import PlannerBase
from .crucible_dijkstra import CrucibleDijkstraPlanner, solve
from .dijkstra import GridDijkstraPlanner


__all__ = [
    "PlannerBase",
    "CrucibleDijkstraPlanner",
    "GridDijkstraPlanner",
    "solve",
]
