# crucible/puzzle.py
"""
两种标准坩埚配置的入口：
- part 1: 普通坩埚 (min_run=0, max_run=3)
- part 2: 超级坩埚 (min_run=4, max_run=10)

这一层的调用方默认路径一定存在，所以无解时抛出 NoPathError。
"""
from typing import Optional

from crucible.config import GlobalConfig
from crucible.map.cost_grid import CostGrid
from crucible.planning.planners.crucible_dijkstra import CrucibleDijkstraPlanner
from crucible.vehicles.config import CrucibleConfig, STANDARD_CRUCIBLE, ULTRA_CRUCIBLE
from crucible.vehicles.crucible import CrucibleVehicle
from crucible.visualization.observers import DebugObserver, build_observer


class NoPathError(RuntimeError):
    """给定约束下不存在能在终点停车的路径"""


def parse_input(text: str) -> CostGrid:
    return CostGrid.from_text(text)


def _solve_or_raise(grid: CostGrid, limits: CrucibleConfig, config: Optional[GlobalConfig]) -> int:
    observer = build_observer(config or GlobalConfig())
    planner = CrucibleDijkstraPlanner(CrucibleVehicle(limits))
    try:
        cost = planner.plan(grid, debugger=observer)
    finally:
        if isinstance(observer, DebugObserver):
            observer.close()
    if cost is None:
        raise NoPathError(
            f"No path to {grid.destination} with min_run={limits.min_run}, max_run={limits.max_run}"
        )
    return cost


def solve_part1(grid: CostGrid, config: Optional[GlobalConfig] = None) -> int:
    return _solve_or_raise(grid, STANDARD_CRUCIBLE, config)


def solve_part2(grid: CostGrid, config: Optional[GlobalConfig] = None) -> int:
    return _solve_or_raise(grid, ULTRA_CRUCIBLE, config)
