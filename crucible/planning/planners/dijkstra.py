# crucible/planning/planners/dijkstra.py
from typing import Optional

import numpy as np
from scipy.sparse import csr_matrix
from scipy.sparse.csgraph import dijkstra

from crucible.map.base import MapBase
from crucible.planning.interfaces import IPlannerObserver
from crucible.planning.planners.base import PlannerBase
from crucible.visualization.observers import EfficientObserver


class GridDijkstraPlanner(PlannerBase):
    """
    无方向约束的 4-连通格子 Dijkstra，作为对照基准。

    每个格子是图中一个节点，边 u -> v 的权重是进入 v 的代价。
    用 (data, (row, col)) 构造稀疏矩阵，显式存储的 0 权重仍然是边。
    """

    def plan(self,
             grid: MapBase,
             debugger: Optional[IPlannerObserver] = None) -> Optional[int]:
        if debugger is None:
            debugger = EfficientObserver()
        debugger.set_map_info(grid)

        graph = self._build_graph(grid.data)
        origin = self._node_id(grid.origin.x, grid.origin.y, grid.cols)
        goal = self._node_id(grid.destination.x, grid.destination.y, grid.cols)

        distances = dijkstra(graph, directed=True, indices=origin)
        result = distances[goal]

        debugger.log("Reference planning finished", payload={"cost": result})
        if np.isinf(result):
            return None
        return int(round(result))

    @staticmethod
    def _node_id(x: int, y: int, cols: int) -> int:
        return y * cols + x

    def _build_graph(self, costs: np.ndarray) -> csr_matrix:
        """
        向量化构造邻接矩阵：对每个方向平移一次整张网格
        """
        rows, cols = costs.shape
        ids = np.arange(rows * cols).reshape(rows, cols)

        src, dst, weight = [], [], []
        # (源格子切片, 目标格子切片)，分别对应 E / W / S / N
        shifts = [
            ((slice(None), slice(0, cols - 1)), (slice(None), slice(1, cols))),
            ((slice(None), slice(1, cols)), (slice(None), slice(0, cols - 1))),
            ((slice(0, rows - 1), slice(None)), (slice(1, rows), slice(None))),
            ((slice(1, rows), slice(None)), (slice(0, rows - 1), slice(None))),
        ]
        for from_sl, to_sl in shifts:
            src.append(ids[from_sl].ravel())
            dst.append(ids[to_sl].ravel())
            weight.append(costs[to_sl].ravel())

        n = rows * cols
        return csr_matrix(
            (np.concatenate(weight).astype(float), (np.concatenate(src), np.concatenate(dst))),
            shape=(n, n),
        )
