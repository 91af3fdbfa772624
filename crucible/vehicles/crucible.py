# crucible/vehicles/crucible.py
from typing import List

from .base import VehicleBase
from .config import CrucibleConfig
from .heading import Direction, Heading


class CrucibleVehicle(VehicleBase):
    """
    坩埚车模型实现

    特点：
    1. 只能沿四个基本方向移动，不能掉头。
    2. 转弯前至少直行 min_run 步，同方向最多直行 max_run 步。
    3. 起点同时以 EAST/0 和 SOUTH/0 两个朝向出发；
       run_length 从 0 开始，使第一段也受 min_run 约束。
    """

    def __init__(self, config: CrucibleConfig):
        super().__init__(config)
        self.config: CrucibleConfig = config

    def initial_headings(self) -> List[Heading]:
        return [Heading(Direction.EAST, 0), Heading(Direction.SOUTH, 0)]

    def next_headings(self, heading: Heading) -> List[Heading]:
        return heading.next_headings(self.config.min_run, self.config.max_run)

    def can_stop(self, heading: Heading) -> bool:
        return heading.can_stop(self.config.min_run)
