# crucible/types.py
from dataclasses import dataclass


@dataclass(frozen=True)
class Position:
    """
    栅格坐标 (列 x, 行 y)
    约定：y 轴向下增长，原点 (0, 0) 位于左上角。
    """
    x: int
    y: int

    def offset(self, dx: int, dy: int) -> "Position":
        return Position(self.x + dx, self.y + dy)
