#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
PathPlanningService

中间层：
- 从环境快照中取出墙与栅栏（子弹不参与规划）
- 把连续坐标转换为栅格坐标
- 调用底层 search_path 进行栅格路径搜索
- 输出：PlanResult（路径 + 失败原因），供决策逻辑 / 移动执行器使用
"""

from collections import Counter
from typing import List, Optional

from loguru import logger

from thuai_agent.agent.environment_info import EnvironmentInfo
from thuai_agent.agent.position import Position
from thuai_agent.navigation.config.models import PathFindingConfig
from thuai_agent.navigation.core.coordinate_utils import path_to_tuples, world_to_grid
from thuai_agent.navigation.path_planner.map_model import (
    PathStatus,
    PlanRequest,
    PlanResult,
    SearchOutcome,
)
from thuai_agent.navigation.path_planner.path_finding import search_path


class PathPlanningService:
    """
    路径规划服务（中间层）

    每次调用相互独立，除统计计数外不保存任何跨调用状态：

    1. 创建实例：pps = PathPlanningService(cfg.path_finding)
    2. 决策逻辑每 tick 调用：pps.plan(PlanRequest(start, goal), env_info)
    """

    def __init__(self, cfg: Optional[PathFindingConfig] = None) -> None:
        self.cfg = cfg if cfg is not None else PathFindingConfig()

        # 统计计数器
        self._plan_count: int = 0
        self._success_count: int = 0
        self._failure_counts: Counter = Counter()

    @property
    def plan_count(self) -> int:
        return self._plan_count

    @property
    def success_count(self) -> int:
        return self._success_count

    def failure_count(self, reason: PathStatus) -> int:
        return self._failure_counts[reason]

    def plan(self, req: PlanRequest, environment: EnvironmentInfo) -> PlanResult:
        """
        在给定环境快照上做一次路径规划

        Args:
            req: 规划请求（允许浮点坐标，会先转换为所在栅格）。
                终点与任一障碍物坐标重合（取整前比较）时直接判定 GOAL_OCCUPIED
            environment: 当前 tick 的环境快照，调用期间不可修改

        Returns:
            PlanResult；reverse_path 为 True 时路径为 起点 -> 终点 顺序，
            否则保持 终点 -> 起点 顺序
        """
        start = world_to_grid(req.start)
        goal = world_to_grid(req.goal)

        # 终点占用按取整前的原始坐标判断，浮点障碍物也能命中
        if req.goal in set(environment.obstacle_positions()):
            outcome = SearchOutcome(path=[], status=PathStatus.GOAL_OCCUPIED)
        else:
            outcome = search_path(
                start,
                goal,
                environment.walls,
                environment.fences,
                map_size=self.cfg.map_size,
                clearance_radius=self.cfg.clearance_radius,
                reject_blocked_start=self.cfg.reject_blocked_start,
            )

        self._plan_count += 1
        if outcome.found:
            self._success_count += 1
            path = list(reversed(outcome.path)) if self.cfg.reverse_path else outcome.path
            logger.debug(
                f"[PathPlanningService] 规划成功: start={start.to_tuple()}, goal={goal.to_tuple()}, "
                f"path={path_to_tuples(path)}"
            )
            result = PlanResult(ok=True, path=path, reason=PathStatus.OK)
        else:
            self._failure_counts[outcome.status] += 1
            logger.warning(
                f"[PathPlanningService] 规划失败（{outcome.status.value}）: "
                f"start={start.to_tuple()}, goal={goal.to_tuple()}, "
                f"walls={len(environment.walls)}, fences={len(environment.fences)}"
            )
            result = PlanResult(ok=False, path=[], reason=outcome.status)

        if self._plan_count % self.cfg.stats_log_interval == 0:
            self._log_stats()

        return result

    def find_path_between(
        self,
        start: Position,
        goal: Position,
        environment: EnvironmentInfo,
    ) -> List[Position]:
        """只返回路径的便捷接口，失败为 []"""
        return self.plan(PlanRequest(start=start, goal=goal), environment).path

    def _log_stats(self) -> None:
        success_rate = self._success_count / self._plan_count * 100
        failures = ", ".join(
            f"{reason.value}={count}" for reason, count in sorted(
                self._failure_counts.items(), key=lambda item: item[0].value
            )
        )
        logger.info(
            f"路径规划统计 (共{self._plan_count}次): "
            f"成功率={success_rate:.1f}% ({self._success_count}/{self._plan_count}), "
            f"失败: {failures or '无'}"
        )
