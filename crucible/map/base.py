# crucible/map/base.py
from abc import ABC, abstractmethod
import numpy as np

from crucible.types import Position


class GridFormatError(ValueError):
    """地图数据不合法 (非数字字符、行长度不一致、负代价等)"""


class MapBase(ABC):
    """
    代价地图抽象基类
    """

    @property
    @abstractmethod
    def data(self) -> np.ndarray:
        """
        返回代价矩阵 (rows, cols)，按 [y, x] 索引。
        约定：只读，每个格子是非负整数代价。
        """
        pass

    @property
    @abstractmethod
    def rows(self) -> int:
        """行数 (y方向数量)"""
        pass

    @property
    @abstractmethod
    def cols(self) -> int:
        """列数 (x方向数量)"""
        pass

    @abstractmethod
    def is_inside(self, position: Position) -> bool:
        """检查栅格坐标是否在地图范围内"""
        pass

    @abstractmethod
    def cost_at(self, position: Position) -> int:
        """
        [关键接口] 查询进入该格子的代价
        调用方必须先做越界检查，越界时抛出 IndexError。
        """
        pass

    @property
    def origin(self) -> Position:
        """起点固定为左上角"""
        return Position(0, 0)

    @property
    def destination(self) -> Position:
        """终点固定为右下角"""
        return Position(self.cols - 1, self.rows - 1)
