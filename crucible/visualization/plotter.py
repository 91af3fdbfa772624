# 绘图逻辑 (Matplotlib)

import matplotlib.pyplot as plt

from crucible.map.base import MapBase
from crucible.visualization.observers import ExperimentObserver, DebugObserver


def plot_search(grid: MapBase, observer=None, ax=None, title: str = "Crucible Search"):
    """
    画出代价热力图，并叠加搜索过程中扩展过的格子
    :param observer: ExperimentObserver 或 DebugObserver (可选)
    :return: matplotlib Figure
    """
    if ax is None:
        fig, ax = plt.subplots(figsize=(8, 8))
    else:
        fig = ax.figure

    # A. 代价底图 (origin='upper' 与 y 轴向下的栅格坐标一致)
    im = ax.imshow(grid.data, cmap='hot_r', origin='upper', interpolation='nearest')
    fig.colorbar(im, ax=ax, label='Heat loss')

    # B. 已扩展格子 - 蓝色小点
    if isinstance(observer, (ExperimentObserver, DebugObserver)) and observer.expanded_nodes:
        cells = observer.expanded_cells
        ax.scatter([c[0] for c in cells], [c[1] for c in cells],
                   c='blue', s=4, alpha=0.3, label='Expanded')

    # C. 起点和终点
    ax.plot(grid.origin.x, grid.origin.y, 'go', markersize=10, label='Start')
    ax.plot(grid.destination.x, grid.destination.y, 'rx', markersize=10, label='Goal')

    ax.set_title(title)
    ax.set_xlabel("X [cell]")
    ax.set_ylabel("Y [cell]")
    ax.legend(loc='upper right')
    ax.set_aspect('equal')
    return fig
