#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
智能体数据模块

位置类型与环境快照（墙、栅栏、子弹）。
"""

from .position import Position, manhattan_distance
from .environment_info import Wall, Fence, Bullet, EnvironmentInfo

__all__ = [
    'Position',
    'manhattan_distance',
    'Wall',
    'Fence',
    'Bullet',
    'EnvironmentInfo',
]
