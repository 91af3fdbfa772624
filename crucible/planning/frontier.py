# crucible/planning/frontier.py
import heapq
import itertools
from typing import Dict, Iterator, List, Optional, Tuple

from crucible.planning.state import SearchState


class Frontier:
    """
    按暂定代价升序弹出的优先队列 (OpenSet)

    存储 (cost, seq, state)：
    - heapq 是最小堆，直接得到升序，不需要取反。
    - seq 是插入序号，代价相同时按先入先出，保证单次运行确定性；
      同时避免 heapq 去比较 SearchState。
    过期条目不做删除，由调用方在弹出时丢弃 (lazy deletion)。
    """

    def __init__(self):
        self._heap: List[Tuple[int, int, SearchState]] = []
        self._counter = itertools.count()

    def push(self, cost: int, state: SearchState):
        heapq.heappush(self._heap, (cost, next(self._counter), state))

    def pop(self) -> Tuple[int, SearchState]:
        """弹出代价最小的条目，队列为空时抛出 IndexError"""
        cost, _, state = heapq.heappop(self._heap)
        return cost, state

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)


class DistanceTable:
    """
    SearchState -> 目前已知的最小累计代价
    只记录访问过的状态，不物化整张图。
    """

    def __init__(self):
        self._best: Dict[SearchState, int] = {}

    def get(self, state: SearchState) -> Optional[int]:
        return self._best.get(state)

    def is_stale(self, state: SearchState, cost: int) -> bool:
        """弹出的代价严格大于已记录值，说明之后找到了更优路径"""
        best = self._best.get(state)
        return best is not None and cost > best

    def relax(self, state: SearchState, cost: int) -> bool:
        """
        松弛操作：代价严格更小 (或尚无记录) 时写入并返回 True
        """
        best = self._best.get(state)
        if best is None or cost < best:
            self._best[state] = cost
            return True
        return False

    def __contains__(self, state: SearchState) -> bool:
        return state in self._best

    def __len__(self) -> int:
        return len(self._best)

    def __iter__(self) -> Iterator[SearchState]:
        return iter(self._best)
