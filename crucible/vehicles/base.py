# crucible/vehicles/base.py
from abc import ABC, abstractmethod
from typing import List

from .config import CrucibleConfig
from .heading import Heading


class VehicleBase(ABC):
    """
    运动模型接口基类
    规划器只通过这里询问 "从当前朝向能走到哪些朝向"，不关心具体约束。
    """
    def __init__(self, config: CrucibleConfig):
        self.config = config

    @abstractmethod
    def initial_headings(self) -> List[Heading]:
        """起点处的种子朝向 (第一步不受之前方向约束)"""
        pass

    @abstractmethod
    def next_headings(self, heading: Heading) -> List[Heading]:
        """合法的后继朝向，永远非空，永远不含掉头"""
        pass

    @abstractmethod
    def can_stop(self, heading: Heading) -> bool:
        """以该朝向到达终点时能否停车"""
        pass
