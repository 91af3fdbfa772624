# crucible/map/cost_grid.py
from typing import Iterable, List

import numpy as np

from crucible.types import Position
from .base import MapBase, GridFormatError


class CostGrid(MapBase):
    """
    不可变的整数代价栅格。

    构造时完成全部校验 (矩形、非负)，搜索过程中不会再出现格式错误。
    内部数据是只读的 int64 矩阵，外部拿到的 data 也无法被写入。
    """

    def __init__(self, data):
        try:
            raw = np.array(data)
        except (TypeError, ValueError, OverflowError) as e:
            # 行长度不一致时 numpy 会拒绝构造规则矩阵
            raise GridFormatError(f"Grid rows must be rectangular integer data: {e}") from e

        if raw.ndim != 2:
            raise GridFormatError(f"Grid must be 2-dimensional, got shape {raw.shape}")
        if raw.size == 0:
            raise GridFormatError("Grid must contain at least one cell")
        # 浮点会被 astype 静默截断；超出 int64 的整数会退化成 object / uint64
        if raw.dtype.kind not in "iu":
            raise GridFormatError(f"Grid costs must be int64 integers, got dtype {raw.dtype}")
        if raw.dtype.kind == "u" and raw.max() > np.iinfo(np.int64).max:
            raise GridFormatError(f"Cost {raw.max()} does not fit in int64")

        try:
            grid = raw.astype(np.int64)
        except OverflowError as e:
            raise GridFormatError(f"Grid costs must fit in int64: {e}") from e

        if (grid < 0).any():
            y, x = np.argwhere(grid < 0)[0]
            raise GridFormatError(f"Negative cost {grid[y, x]} at (x={x}, y={y})")

        grid.flags.writeable = False
        self._grid = grid

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> "CostGrid":
        """
        每行一个字符串，每个字符是一位十进制数字 (0-9)。
        行尾换行符 (LF 或 CRLF) 会被去掉，可以直接传入打开的文件对象。
        """
        rows: List[List[int]] = []
        for y, line in enumerate(lines):
            line = line.rstrip("\r\n")
            row = []
            for x, ch in enumerate(line):
                if ch not in "0123456789":
                    raise GridFormatError(f"Invalid character {ch!r} at row {y}, column {x}")
                row.append(int(ch))
            if rows and len(row) != len(rows[0]):
                raise GridFormatError(
                    f"Row {y} has length {len(row)}, expected {len(rows[0])}"
                )
            rows.append(row)

        if not rows or not rows[0]:
            raise GridFormatError("Grid must contain at least one cell")
        return cls(rows)

    @classmethod
    def from_text(cls, text: str) -> "CostGrid":
        """解析多行文本，忽略首尾空行和每行首尾空白"""
        return cls.from_lines(line.strip() for line in text.strip().splitlines())

    @property
    def data(self) -> np.ndarray:
        return self._grid

    @property
    def rows(self) -> int:
        return self._grid.shape[0]

    @property
    def cols(self) -> int:
        return self._grid.shape[1]

    def is_inside(self, position: Position) -> bool:
        return (0 <= position.x < self.cols) and (0 <= position.y < self.rows)

    def cost_at(self, position: Position) -> int:
        # numpy 的负索引会回绕，必须显式检查
        if not self.is_inside(position):
            raise IndexError(f"{position} is outside a {self.cols}x{self.rows} grid")
        return int(self._grid[position.y, position.x])

    def to_text(self) -> str:
        """渲染回逐行数字格式 (仅适用于 0-9 的代价)"""
        if (self._grid > 9).any():
            raise ValueError("Only single-digit grids can be rendered as text")
        return "\n".join("".join(str(v) for v in row) for row in self._grid)

    def __repr__(self) -> str:
        return f"CostGrid(rows={self.rows}, cols={self.cols})"
