# crucible/planning/interfaces.py
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

from crucible.map.base import MapBase
from crucible.planning.state import SearchState


class IPlannerObserver(ABC):
    """
    规划器观察者接口
    搜索循环只负责调用钩子，记录 / 调试 / 可视化 全部交给实现类。
    三种模式见 crucible.visualization.observers：
    1. Efficient: 空实现
    2. Experiment: 内存中记录扩展顺序，供画图和统计
    3. Debug: 额外写日志文件
    """

    @abstractmethod
    def set_map_info(self, grid: MapBase):
        """每次规划开始时调用一次"""
        pass

    @abstractmethod
    def record_current_expansion(self, state: SearchState, cost: int):
        """弹出且未过期的状态 (即将扩展)"""
        pass

    @abstractmethod
    def record_open_set_node(self, state: SearchState, cost: int):
        """松弛成功并压入 Frontier 的状态"""
        pass

    @abstractmethod
    def record_edge(self, parent: SearchState, child: SearchState):
        """松弛成功时对应的一条边 parent -> child"""
        pass

    @abstractmethod
    def log(self, message: str, level: str = 'INFO', payload: Optional[Dict[str, Any]] = None):
        """
        结构化日志记录
        :param level: 'INFO', 'WARN', 'ERROR', 'DEBUG'
        :param payload: 额外的结构化数据 (约束参数、地图尺寸、搜索统计等)
        """
        pass
