#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
自定义异常类：定义导航模块的专用异常
"""


class NavigationError(Exception):
    """导航模块基础异常类"""
    pass


class ConfigurationError(NavigationError):
    """配置错误异常"""
    pass


class SnapshotError(NavigationError):
    """环境快照数据格式错误异常"""
    pass
