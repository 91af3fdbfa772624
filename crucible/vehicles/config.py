# [配置] 该模块独有的配置数据类
from dataclasses import dataclass


class InvalidRunLimitsError(ValueError):
    """直行步数限制不合法 (调用方违反约定)"""


@dataclass(frozen=True)
class CrucibleConfig:
    """
    坩埚车的直行约束
    - min_run: 转弯 (或停车) 前至少要直行的步数
    - max_run: 同一方向最多连续直行的步数
    """
    min_run: int = 0
    max_run: int = 3

    def __post_init__(self):
        if self.min_run < 0:
            raise InvalidRunLimitsError(f"min_run must be >= 0, got {self.min_run}")
        if self.min_run > self.max_run:
            raise InvalidRunLimitsError(
                f"min_run ({self.min_run}) must not exceed max_run ({self.max_run})"
            )


# 两种标准配置
STANDARD_CRUCIBLE = CrucibleConfig(min_run=0, max_run=3)
ULTRA_CRUCIBLE = CrucibleConfig(min_run=4, max_run=10)
