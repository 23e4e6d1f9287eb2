#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
THUAI 智能体主包
提供环境快照数据结构与栅格路径搜索
"""

__version__ = "0.1.0"

__all__ = []
