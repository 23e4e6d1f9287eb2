#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
路径规划模块

提供基于曼哈顿距离优先级的最佳优先栅格搜索，以及面向智能体的规划服务。
"""

from .map_model import PathStatus, PlanRequest, PlanResult, SearchOutcome
from .path_finding import (
    build_blocked_mask,
    find_path,
    get_neighbors,
    is_blocked,
    search_path,
)
from .path_planning_service import PathPlanningService

__all__ = [
    'PathStatus',
    'PlanRequest',
    'PlanResult',
    'SearchOutcome',
    'build_blocked_mask',
    'find_path',
    'get_neighbors',
    'is_blocked',
    'search_path',
    'PathPlanningService',
]
