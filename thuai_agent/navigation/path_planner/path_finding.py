#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
路径搜索模块：基于曼哈顿距离优先级的最佳优先搜索（贪心）

注意这不是广度优先搜索，也不是 A*：队列只按"到终点的曼哈顿距离"排序，
不累计已走代价，因此能快速找到一条可用路径，但不保证最短。

障碍判定采用安全间隙：与任意墙/栅栏曼哈顿距离 <= clearance_radius 的格子
都不可通行，用来近似坦克与障碍物的实际尺寸。
"""

# 标准库导入
import heapq
import itertools
import math
from typing import Iterable, Iterator, List, Sequence

# 第三方库导入
import numpy as np
from loguru import logger

from thuai_agent.agent.environment_info import Fence, Wall
from thuai_agent.agent.position import Position, manhattan_distance
from thuai_agent.navigation.common.constants import (
    CLEARANCE_RADIUS,
    DIRECTIONS_8WAY,
    MAP_SIZE,
)
from thuai_agent.navigation.core.coordinate_utils import in_bounds
from thuai_agent.navigation.path_planner.map_model import PathStatus, SearchOutcome


def is_blocked(
    cell: Position,
    obstacles: Iterable[Position],
    clearance_radius: int = CLEARANCE_RADIUS,
) -> bool:
    """
    线性扫描判断格子是否受阻

    Args:
        cell: 待检查的格子
        obstacles: 障碍物位置
        clearance_radius: 安全间隙半径

    Returns:
        是否存在曼哈顿距离 <= clearance_radius 的障碍物
    """
    return any(manhattan_distance(cell, obstacle) <= clearance_radius for obstacle in obstacles)


def build_blocked_mask(
    obstacles: Iterable[Position],
    map_size: int = MAP_SIZE,
    clearance_radius: int = CLEARANCE_RADIUS,
) -> np.ndarray:
    """
    构建受阻掩码（空间索引），与 is_blocked 的逐格结果一致

    只遍历每个障碍物周围的包围盒，地图外的障碍物同样会影响地图边缘的格子。

    Args:
        obstacles: 障碍物位置（允许浮点坐标）
        map_size: 地图边长
        clearance_radius: 安全间隙半径

    Returns:
        形状为 (map_size, map_size) 的布尔数组，按 [y, x] 索引，True = 受阻
    """
    mask = np.zeros((map_size, map_size), dtype=bool)

    for obstacle in obstacles:
        ox, oy = obstacle.x, obstacle.y
        x_lo = max(0, math.ceil(ox - clearance_radius))
        x_hi = min(map_size, math.floor(ox + clearance_radius) + 1)
        y_lo = max(0, math.ceil(oy - clearance_radius))
        y_hi = min(map_size, math.floor(oy + clearance_radius) + 1)
        if x_lo >= x_hi or y_lo >= y_hi:
            continue

        xs = np.abs(np.arange(x_lo, x_hi) - ox)
        ys = np.abs(np.arange(y_lo, y_hi) - oy)
        mask[y_lo:y_hi, x_lo:x_hi] |= (ys[:, None] + xs[None, :]) <= clearance_radius

    return mask


def get_neighbors(cell: Position, blocked: np.ndarray, map_size: int = MAP_SIZE) -> Iterator[Position]:
    """
    按固定顺序产出八邻域中可通行的格子

    Args:
        cell: 当前格子
        blocked: build_blocked_mask 生成的受阻掩码
        map_size: 地图边长

    Yields:
        在地图范围内且未受阻的邻居
    """
    for dx, dy in DIRECTIONS_8WAY:
        neighbor = Position(cell.x + dx, cell.y + dy)
        if not in_bounds(neighbor, map_size):
            continue
        if blocked[neighbor.y, neighbor.x]:
            continue
        yield neighbor


def search_path(
    start: Position,
    goal: Position,
    walls: Sequence[Wall],
    fences: Sequence[Fence],
    *,
    map_size: int = MAP_SIZE,
    clearance_radius: int = CLEARANCE_RADIUS,
    reject_blocked_start: bool = False,
) -> SearchOutcome:
    """
    最佳优先搜索核心实现，返回路径及失败原因

    Args:
        start: 起点栅格
        goal: 终点栅格
        walls: 墙（只读）
        fences: 栅栏（只读，血量不影响可通行性）
        map_size: 地图边长
        clearance_radius: 安全间隙半径
        reject_blocked_start: 起点位于安全间隙内时是否直接判定失败。
            默认不检查起点，直接从起点开始扩展

    Returns:
        SearchOutcome，path 顺序为 终点 -> ... -> 起点
    """
    obstacles = [wall.position for wall in walls] + [fence.position for fence in fences]

    # 终点被占据则永远无法到达
    if goal in obstacles:
        logger.debug(f"[PathFinding] 终点与障碍物重合: goal={goal.to_tuple()}")
        return SearchOutcome(path=[], status=PathStatus.GOAL_OCCUPIED)

    if not (start.is_integral() and goal.is_integral()
            and in_bounds(start, map_size) and in_bounds(goal, map_size)):
        logger.debug(
            f"[PathFinding] 起点或终点不是地图内的栅格: start={start.to_tuple()}, "
            f"goal={goal.to_tuple()}, map_size={map_size}"
        )
        return SearchOutcome(path=[], status=PathStatus.OUT_OF_BOUNDS)

    start = Position(int(start.x), int(start.y))
    goal = Position(int(goal.x), int(goal.y))

    blocked = build_blocked_mask(obstacles, map_size, clearance_radius)

    if reject_blocked_start and blocked[start.y, start.x]:
        logger.debug(f"[PathFinding] 起点位于障碍安全间隙内: start={start.to_tuple()}")
        return SearchOutcome(path=[], status=PathStatus.START_BLOCKED)

    # 优先队列：(到终点的曼哈顿距离, 入队序号, 格子)，同距离按入队顺序出队
    counter = itertools.count()
    frontier = [(manhattan_distance(start, goal), next(counter), start)]
    visited = {start}
    parents = {}
    expanded = 0

    while frontier:
        _, _, current = heapq.heappop(frontier)

        if current == goal:
            path = [goal]
            while path[-1] != start:
                path.append(parents[path[-1]])
            logger.debug(
                f"[PathFinding] 搜索成功: start={start.to_tuple()}, goal={goal.to_tuple()}, "
                f"路径长度={len(path)}, 扩展节点数={expanded}"
            )
            return SearchOutcome(path=path, status=PathStatus.OK, expanded=expanded)

        expanded += 1
        for neighbor in get_neighbors(current, blocked, map_size):
            if neighbor in visited:
                continue
            visited.add(neighbor)
            parents[neighbor] = current
            heapq.heappush(frontier, (manhattan_distance(neighbor, goal), next(counter), neighbor))

    logger.debug(
        f"[PathFinding] 无法到达终点: start={start.to_tuple()}, goal={goal.to_tuple()}, "
        f"扩展节点数={expanded}"
    )
    return SearchOutcome(path=[], status=PathStatus.UNREACHABLE, expanded=expanded)


def find_path(
    start: Position,
    goal: Position,
    walls: Sequence[Wall],
    fences: Sequence[Fence],
    *,
    map_size: int = MAP_SIZE,
    clearance_radius: int = CLEARANCE_RADIUS,
    reject_blocked_start: bool = False,
) -> List[Position]:
    """
    在有界栅格上寻找一条从 start 到 goal 的路径

    Returns:
        路径（终点 -> 起点），找不到则 []
    """
    return search_path(
        start,
        goal,
        walls,
        fences,
        map_size=map_size,
        clearance_radius=clearance_radius,
        reject_blocked_start=reject_blocked_start,
    ).path
