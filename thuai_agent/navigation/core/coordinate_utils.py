#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
坐标转换工具模块

提供连续坐标与栅格坐标之间的转换，以及栅格边界检查。
"""

from typing import Iterable, List, Tuple

from thuai_agent.agent.position import Position


def in_bounds(cell: Position, map_size: int) -> bool:
    """
    判断栅格是否位于 [0, map_size) x [0, map_size) 内

    Args:
        cell: 栅格坐标
        map_size: 地图边长

    Returns:
        是否在地图范围内
    """
    return 0 <= cell.x < map_size and 0 <= cell.y < map_size


def world_to_grid(world_pos: Position) -> Position:
    """
    将连续坐标转换为栅格坐标（逐轴向下取整）

    Args:
        world_pos: 连续坐标

    Returns:
        栅格坐标，可能位于地图范围之外
    """
    return world_pos.to_grid()


def path_to_tuples(path: Iterable[Position]) -> List[Tuple]:
    """将 Position 路径转换为 [(x, y), ...]，供日志与序列化使用"""
    return [p.to_tuple() for p in path]
