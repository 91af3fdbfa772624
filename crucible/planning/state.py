# crucible/planning/state.py
from dataclasses import dataclass

from crucible.types import Position
from crucible.vehicles.heading import Heading


@dataclass(frozen=True)
class SearchState:
    """
    隐式搜索图的节点：格子 + 朝向。
    同一个格子在不同朝向 / run_length 下是不同节点，因为后续可选动作不同。
    """
    position: Position
    heading: Heading

    # 为了方便观察者记录坐标 (和 Node.x / Node.y 用法一致)
    @property
    def x(self) -> int: return self.position.x

    @property
    def y(self) -> int: return self.position.y
