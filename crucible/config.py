# [关键] 全局配置定义

# crucible/config.py
from dataclasses import dataclass

@dataclass
class GlobalConfig:
    debug_mode: bool = False
    log_dir: str = "logs/planning_debug"
