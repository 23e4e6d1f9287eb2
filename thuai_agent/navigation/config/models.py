#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
智能体配置模型

使用Pydantic定义类型安全的配置模型，所有字段均有默认值。
"""

from typing import Optional
from pydantic import BaseModel, Field, field_validator, AliasChoices

from thuai_agent.navigation.common.constants import (
    CLEARANCE_RADIUS,
    DEFAULT_STATS_LOG_INTERVAL,
    MAP_SIZE,
)

# loguru 内置日志级别
_LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


class PathFindingConfig(BaseModel):
    """路径搜索配置"""
    map_size: int = Field(MAP_SIZE, description="地图边长（栅格数）")
    clearance_radius: int = Field(
        CLEARANCE_RADIUS,
        description="障碍物安全间隙半径（曼哈顿距离）",
        validation_alias=AliasChoices("clearance_radius", "inflation_radius"),
    )
    reject_blocked_start: bool = Field(False, description="起点位于安全间隙内时是否直接判定失败")
    reverse_path: bool = Field(True, description="是否把结果转换为 起点 -> 终点 顺序")
    stats_log_interval: int = Field(DEFAULT_STATS_LOG_INTERVAL, description="统计日志输出间隔（次）")

    @field_validator('map_size', 'stats_log_interval')
    @classmethod
    def validate_positive_int(cls, v: int) -> int:
        """验证正整数"""
        if v <= 0:
            raise ValueError(f"值必须大于0: {v}")
        return v

    @field_validator('clearance_radius')
    @classmethod
    def validate_clearance_radius(cls, v: int) -> int:
        """验证安全间隙半径"""
        if v < 0:
            raise ValueError(f"安全间隙半径不能为负数: {v}")
        return v


class LoggingConfig(BaseModel):
    """日志配置"""
    level: str = Field("INFO", description="日志级别")
    log_dir: Optional[str] = Field(None, description="日志文件目录，为空则只输出到控制台")

    @field_validator('level')
    @classmethod
    def validate_level(cls, v: str) -> str:
        """验证日志级别"""
        level = v.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"日志级别必须是 {', '.join(_LOG_LEVELS)} 之一: {v}")
        return level


class AgentConfig(BaseModel):
    """智能体主配置"""
    path_finding: PathFindingConfig = Field(default_factory=PathFindingConfig, description="路径搜索配置")
    logging: LoggingConfig = Field(default_factory=LoggingConfig, description="日志配置")
