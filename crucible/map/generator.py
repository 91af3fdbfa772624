# crucible/map/generator.py
import numpy as np

from crucible.map.cost_grid import CostGrid


class CostMapGenerator:
    """
    随机代价地图生成器
    用于 benchmark 和性质测试，固定 seed 时结果可复现。
    """

    def __init__(self, min_cost: int = 1, max_cost: int = 9, seed: int = None):
        if not 0 <= min_cost <= max_cost:
            raise ValueError(f"Invalid cost range [{min_cost}, {max_cost}]")
        self.min_cost = min_cost
        self.max_cost = max_cost
        self.seed = seed
        self._rng = np.random.default_rng(seed)

    def generate(self, rows: int, cols: int) -> CostGrid:
        # 上界是开区间，所以 +1
        data = self._rng.integers(self.min_cost, self.max_cost + 1, size=(rows, cols))
        return CostGrid(data)

    @staticmethod
    def straight_line(length: int, cost: int = 1, vertical: bool = False) -> CostGrid:
        """单行 (或单列) 的常数代价地图，用于检查最小/最大直行边界"""
        data = np.full((1, length), cost, dtype=np.int64)
        return CostGrid(data.T if vertical else data)
