#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
配置模块

提供类型安全的配置管理和验证。
"""

from .models import (
    AgentConfig,
    PathFindingConfig,
    LoggingConfig,
)
from .loader import load_config

__all__ = [
    'AgentConfig',
    'PathFindingConfig',
    'LoggingConfig',
    'load_config'
]
