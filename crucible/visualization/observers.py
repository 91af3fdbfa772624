import itertools
import logging
import time
import os
from typing import Any, Dict, List, Optional, Tuple

from crucible.config import GlobalConfig
from crucible.map.base import MapBase
from crucible.planning.interfaces import IPlannerObserver
from crucible.planning.state import SearchState


# 进程内递增的会话编号，保证同一秒内创建的多个 DebugObserver 不共用日志文件
_SESSION_IDS = itertools.count()


class EfficientObserver(IPlannerObserver):
    """
    高效运行模式
    除了必要的流程不额外进行信息记录。
    相当于 NoOp。
    """
    def set_map_info(self, grid: MapBase): pass
    def record_current_expansion(self, state: SearchState, cost: int): pass
    def record_open_set_node(self, state: SearchState, cost: int): pass
    def record_edge(self, parent: SearchState, child: SearchState): pass
    def log(self, message: str, level: str = 'INFO', payload: Optional[Dict[str, Any]] = None):
        # 仅在 ERROR 级别打印
        if level == 'ERROR':
            print(f"[ERROR] {message}")


class ExperimentObserver(IPlannerObserver):
    """
    实验模式
    记录 Frontier 历史、扩展顺序、松弛边等关键内容，
    主要用于算法比较和可视化 (Replay)。
    """
    def __init__(self):
        # 存储格式: List[Tuple[x, y, cost]]
        self.open_set_history: List[Tuple[int, int, int]] = []
        # 存储格式: List[SearchState]，按扩展顺序
        self.expanded_nodes: List[SearchState] = []
        self.expanded_costs: List[int] = []
        # 存储格式: List[Tuple[parent, child]]
        self.edges: List[Tuple[SearchState, SearchState]] = []
        self.map_info: Optional[MapBase] = None
        self.messages: List[Tuple[str, str]] = []

    def set_map_info(self, grid: MapBase):
        self.map_info = grid

    def record_current_expansion(self, state: SearchState, cost: int):
        self.expanded_nodes.append(state)
        self.expanded_costs.append(cost)

    def record_open_set_node(self, state: SearchState, cost: int):
        self.open_set_history.append((state.x, state.y, cost))

    def record_edge(self, parent: SearchState, child: SearchState):
        self.edges.append((parent, child))

    def log(self, message: str, level: str = 'INFO', payload: Optional[Dict[str, Any]] = None):
        # 控制台保持安静，只留在内存里
        self.messages.append((level, message))

    @property
    def expanded_cells(self) -> List[Tuple[int, int]]:
        """去掉朝向后的扩展格子 (保持首次出现顺序)"""
        return list(dict.fromkeys((s.x, s.y) for s in self.expanded_nodes))


class DebugObserver(IPlannerObserver):
    """
    Debug 模式
    用于详细分析一次搜索为什么代价异常甚至无解。
    将详细日志写入文件，同时保留可视化数据以便对照。
    """
    def __init__(self, log_dir: str = "logs/planning_debug"):
        # 复用 ExperimentObserver 的存储，以便 Debug 时也能画图
        self.viz_observer = ExperimentObserver()

        self.log_dir = log_dir
        os.makedirs(self.log_dir, exist_ok=True)

        timestamp = time.strftime("%Y%m%d_%H%M%S")
        session = f"{timestamp}_{os.getpid()}_{next(_SESSION_IDS)}"
        self.log_file = os.path.join(self.log_dir, f"plan_debug_{session}.log")

        self.logger = logging.getLogger(f"CrucibleDebug_{session}")
        self.logger.setLevel(logging.DEBUG)
        self.logger.propagate = False

        # 避免添加重复 Handler
        if not self.logger.handlers:
            fh = logging.FileHandler(self.log_file, encoding='utf-8')
            fh.setLevel(logging.DEBUG)
            formatter = logging.Formatter('%(asctime)s - %(levelname)s - %(message)s')
            fh.setFormatter(formatter)
            self.logger.addHandler(fh)

        self.logger.info("=== Debug Session Started ===")

    def set_map_info(self, grid: MapBase):
        self.viz_observer.set_map_info(grid)
        self.logger.info(f"Map Info set: {grid}")

    def record_current_expansion(self, state: SearchState, cost: int):
        self.viz_observer.record_current_expansion(state, cost)
        self.logger.debug(
            f"Expanding: ({state.x}, {state.y}) {state.heading.direction.name}"
            f"/{state.heading.run_length} cost={cost}"
        )

    def record_open_set_node(self, state: SearchState, cost: int):
        self.viz_observer.record_open_set_node(state, cost)

    def record_edge(self, parent: SearchState, child: SearchState):
        self.viz_observer.record_edge(parent, child)

    def log(self, message: str, level: str = 'INFO', payload: Optional[Dict[str, Any]] = None):
        self.viz_observer.log(message, level)
        if payload:
            message = f"{message} | Payload: {payload}"

        if level == 'DEBUG':
            self.logger.debug(message)
        elif level == 'WARN':
            self.logger.warning(message)
        elif level == 'ERROR':
            self.logger.error(message)
        else:
            self.logger.info(message)

    def close(self):
        """释放文件句柄 (测试中清理临时目录前需要)"""
        for handler in list(self.logger.handlers):
            handler.close()
            self.logger.removeHandler(handler)

    # Proxy properties for ExperimentObserver compatibility
    @property
    def expanded_nodes(self): return self.viz_observer.expanded_nodes
    @property
    def expanded_cells(self): return self.viz_observer.expanded_cells
    @property
    def open_set_history(self): return self.viz_observer.open_set_history
    @property
    def edges(self): return self.viz_observer.edges
    @property
    def map_info(self): return self.viz_observer.map_info


def build_observer(config: GlobalConfig) -> IPlannerObserver:
    """根据全局配置选择观察者模式"""
    if config.debug_mode:
        return DebugObserver(log_dir=config.log_dir)
    return EfficientObserver()
