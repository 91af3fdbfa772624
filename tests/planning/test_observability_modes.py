import glob
import os

import pytest

from crucible.config import GlobalConfig
from crucible.map.cost_grid import CostGrid
from crucible.planning.planners import CrucibleDijkstraPlanner
from crucible.vehicles.config import CrucibleConfig, STANDARD_CRUCIBLE
from crucible.vehicles.crucible import CrucibleVehicle
from crucible.visualization.observers import (
    DebugObserver, EfficientObserver, ExperimentObserver, build_observer,
)


@pytest.fixture
def planner_setup():
    grid = CostGrid.from_text("2413\n3215\n3255\n3446")
    planner = CrucibleDijkstraPlanner(CrucibleVehicle(STANDARD_CRUCIBLE))
    return planner, grid


def test_efficient_mode(planner_setup):
    planner, grid = planner_setup
    observer = EfficientObserver()

    cost = planner.plan(grid, debugger=observer)

    assert cost is not None
    # EfficientObserver 不保存任何搜索数据
    assert not hasattr(observer, 'expanded_nodes')
    assert not hasattr(observer, 'open_set_history')


def test_experiment_mode(planner_setup):
    planner, grid = planner_setup
    observer = ExperimentObserver()

    cost = planner.plan(grid, debugger=observer)

    assert observer.map_info is grid
    assert len(observer.expanded_nodes) > 0
    # 扩展顺序的代价单调不减 (Dijkstra 性质)
    assert observer.expanded_costs == sorted(observer.expanded_costs)
    # 最后扩展的就是终点
    last = observer.expanded_nodes[-1]
    assert (last.x, last.y) == (grid.destination.x, grid.destination.y)
    assert observer.expanded_costs[-1] == cost
    assert len(observer.edges) == len(observer.open_set_history)
    assert (0, 0) == observer.expanded_cells[0]


def test_experiment_mode_no_path_warns():
    grid = CostGrid.from_text("1111")
    observer = ExperimentObserver()
    planner = CrucibleDijkstraPlanner(
        CrucibleVehicle(CrucibleConfig(min_run=4, max_run=10))
    )

    assert planner.plan(grid, debugger=observer) is None
    assert any(level == 'WARN' for level, _ in observer.messages)


def test_debug_mode(planner_setup, tmp_path):
    planner, grid = planner_setup
    log_dir = str(tmp_path / "planning_debug")

    observer = DebugObserver(log_dir=log_dir)
    try:
        planner.plan(grid, debugger=observer)

        # 1. 兼容 Experiment 模式 (可以取出 expanded_nodes)
        assert len(observer.expanded_nodes) > 0

        # 2. 检查日志文件
        log_files = glob.glob(os.path.join(log_dir, "*.log"))
        assert len(log_files) > 0
        for handler in observer.logger.handlers:
            handler.flush()

        with open(log_files[0], 'r', encoding='utf-8') as f:
            content = f.read()
        assert "Start planning" in content
        assert "Expanding" in content
        assert "Path found" in content
    finally:
        observer.close()


def test_build_observer(tmp_path):
    assert isinstance(build_observer(GlobalConfig()), EfficientObserver)
    observer = build_observer(GlobalConfig(debug_mode=True, log_dir=str(tmp_path)))
    try:
        assert isinstance(observer, DebugObserver)
    finally:
        observer.close()


def test_debug_observers_write_separate_files(tmp_path):
    first = DebugObserver(log_dir=str(tmp_path))
    second = DebugObserver(log_dir=str(tmp_path))
    try:
        assert first.log_file != second.log_file
        assert len(glob.glob(os.path.join(str(tmp_path), "plan_debug_*.log"))) == 2
    finally:
        first.close()
        second.close()
