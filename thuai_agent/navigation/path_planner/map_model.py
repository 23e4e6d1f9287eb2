from dataclasses import dataclass, field
from enum import Enum
from typing import List

from thuai_agent.agent.position import Position


class PathStatus(str, Enum):
    """单次路径搜索的结果分类"""
    OK = "ok"
    GOAL_OCCUPIED = "goal_occupied"    # 终点与墙/栅栏重合
    OUT_OF_BOUNDS = "out_of_bounds"    # 起点或终点不在地图内（或不是整数栅格）
    START_BLOCKED = "start_blocked"    # 起点位于安全间隙内（仅在拒绝受阻起点时）
    UNREACHABLE = "unreachable"        # 搜索队列耗尽仍未到达终点


@dataclass
class SearchOutcome:
    path: List[Position]               # 终点 -> 起点，失败为空
    status: PathStatus
    expanded: int = 0                  # 出队扩展的格子数

    @property
    def found(self) -> bool:
        return self.status is PathStatus.OK


@dataclass
class PlanRequest:
    start: Position
    goal: Position


@dataclass
class PlanResult:
    ok: bool
    path: List[Position] = field(default_factory=list)
    reason: PathStatus = PathStatus.OK
