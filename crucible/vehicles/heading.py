# crucible/vehicles/heading.py
from dataclasses import dataclass
from enum import Enum
from typing import List

from crucible.types import Position


class Direction(Enum):
    """
    四个基本方向，值为单位位移 (dx, dy)。
    成员按顺时针顺序定义：N -> E -> S -> W。

    只提供 left / right / straight 三种变换，
    任何组合都无法一步得到反方向 (不允许掉头)。
    """
    NORTH = (0, -1)
    EAST = (1, 0)
    SOUTH = (0, 1)
    WEST = (-1, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    def _rotate(self, quarter_turns: int) -> "Direction":
        members = list(Direction)
        return members[(members.index(self) + quarter_turns) % len(members)]

    def left(self) -> "Direction":
        """逆时针 90°"""
        return self._rotate(-1)

    def right(self) -> "Direction":
        """顺时针 90°"""
        return self._rotate(1)

    def straight(self) -> "Direction":
        return self


@dataclass(frozen=True)
class Heading:
    """
    朝向 + 已沿该方向连续走过的步数 (run_length)
    """
    direction: Direction
    run_length: int = 0

    def turn_left(self) -> "Heading":
        return Heading(self.direction.left(), 1)

    def turn_right(self) -> "Heading":
        return Heading(self.direction.right(), 1)

    def go_straight(self) -> "Heading":
        return Heading(self.direction.straight(), self.run_length + 1)

    def can_stop(self, min_run: int) -> bool:
        """已满足最小直行步数，才允许在终点停下"""
        return self.run_length >= min_run

    def next_headings(self, min_run: int, max_run: int) -> List["Heading"]:
        """
        核心分支规则：
        1. run_length < min_run: 只能继续直行
        2. run_length < max_run: 左转 / 直行 / 右转
        3. 否则 (已达上限): 只能左转或右转
        """
        if self.run_length < min_run:
            return [self.go_straight()]
        if self.run_length < max_run:
            return [self.turn_left(), self.go_straight(), self.turn_right()]
        return [self.turn_left(), self.turn_right()]

    def next_position(self, position: Position) -> Position:
        return position.offset(self.direction.dx, self.direction.dy)
