# crucible/planning/planners/crucible_dijkstra.py
import logging
from typing import Optional

from crucible.map.base import MapBase
from crucible.planning.frontier import DistanceTable, Frontier
from crucible.planning.interfaces import IPlannerObserver
from crucible.planning.planners.base import PlannerBase
from crucible.planning.state import SearchState
from crucible.vehicles.base import VehicleBase
from crucible.vehicles.config import CrucibleConfig
from crucible.vehicles.crucible import CrucibleVehicle
from crucible.visualization.observers import EfficientObserver

logger = logging.getLogger(__name__)


class CrucibleDijkstraPlanner(PlannerBase):
    """
    带直行步数约束的 Dijkstra。

    节点不是格子，而是 (格子, 朝向, run_length)：
    1. 起点以运动模型给出的种子朝向入队，代价为 0。
    2. 每次弹出代价最小的状态，过期条目直接丢弃。
    3. 到达终点且允许停车 (run_length >= min_run) 时返回代价。
    4. 否则按运动模型展开后继，越界分支丢弃，严格更优才松弛入队。
    5. Frontier 耗尽仍未到达，返回 None (无解是正常结果)。
    """

    def __init__(self, vehicle_model: VehicleBase):
        self.vehicle = vehicle_model

    def plan(self,
             grid: MapBase,
             debugger: Optional[IPlannerObserver] = None) -> Optional[int]:

        # 1. 初始化观察者
        if debugger is None:
            debugger = EfficientObserver()
        debugger.set_map_info(grid)

        config = self.vehicle.config
        debugger.log("Start planning", payload={
            "min_run": config.min_run,
            "max_run": config.max_run,
            "rows": grid.rows,
            "cols": grid.cols,
        })

        # 2. 初始化核心容器 (只属于本次调用)
        frontier = Frontier()
        dist = DistanceTable()

        for heading in self.vehicle.initial_headings():
            seed = SearchState(grid.origin, heading)
            dist.relax(seed, 0)
            frontier.push(0, seed)

        goal = grid.destination
        expanded = 0

        # 3. 主循环
        while frontier:
            cost, state = frontier.pop()

            # A. 过期条目：之后找到了更便宜的路径
            if dist.is_stale(state, cost):
                continue

            expanded += 1
            debugger.record_current_expansion(state, cost)

            # B. 终止条件：必须已满足最小直行步数才能停车
            if state.position == goal and self.vehicle.can_stop(state.heading):
                debugger.log("Path found", payload={
                    "cost": cost, "expanded": expanded, "states": len(dist),
                })
                logger.debug("Found cost %d after %d expansions", cost, expanded)
                return cost

            # C. 扩展后继
            for next_heading in self.vehicle.next_headings(state.heading):
                next_position = next_heading.next_position(state.position)

                # C.1 越界直接丢弃，不回绕也不惩罚
                if not grid.is_inside(next_position):
                    continue

                next_state = SearchState(next_position, next_heading)
                candidate = cost + grid.cost_at(next_position)

                # C.2 松弛
                if dist.relax(next_state, candidate):
                    frontier.push(candidate, next_state)
                    debugger.record_open_set_node(next_state, candidate)
                    debugger.record_edge(state, next_state)

        debugger.log("Frontier is empty, no path found.", level='WARN', payload={
            "expanded": expanded, "states": len(dist),
        })
        logger.debug("No path after %d expansions", expanded)
        return None


def solve(grid: MapBase,
          min_run: int,
          max_run: int,
          debugger: Optional[IPlannerObserver] = None) -> Optional[int]:
    """
    便捷入口：先校验约束 (不合法时抛出 InvalidRunLimitsError)，再独立搜索一次。
    """
    vehicle = CrucibleVehicle(CrucibleConfig(min_run=min_run, max_run=max_run))
    return CrucibleDijkstraPlanner(vehicle).plan(grid, debugger=debugger)
