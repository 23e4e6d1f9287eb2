#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
常量定义：集中管理路径搜索相关的常量
"""

# =============================
# 地图相关常量
# =============================

# 地图边长（栅格数），有效范围 [0, MAP_SIZE) x [0, MAP_SIZE)
MAP_SIZE: int = 100

# =============================
# 路径搜索相关常量
# =============================

# 安全间隙半径：可通行格子与任意障碍物的曼哈顿距离必须大于该值
CLEARANCE_RADIUS: int = 2

# 八方向移动（王步邻接），顺序固定以保证结果可复现
DIRECTIONS_8WAY = [
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1), (0, 1),
    (1, -1), (1, 0), (1, 1),
]

# 每隔多少次规划输出一次统计日志
DEFAULT_STATS_LOG_INTERVAL: int = 10
