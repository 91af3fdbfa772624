# crucible/planning/planners/base.py
from abc import ABC, abstractmethod
from typing import Optional

from crucible.map.base import MapBase
from crucible.planning.interfaces import IPlannerObserver


class PlannerBase(ABC):
    """
    所有代价规划器的抽象基类
    """

    @abstractmethod
    def plan(self,
             grid: MapBase,
             debugger: Optional[IPlannerObserver] = None) -> Optional[int]:
        """
        计算从 grid.origin 到 grid.destination 的最小累计代价
        :param grid: 代价地图 (只读)
        :param debugger: 观察者钩子 (用于记录搜索过程)
        :return: 最小代价 (不含起点格子)；无解时返回 None
        """
        pass
