#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
导航模块

提供栅格路径搜索、规划服务与配置管理。
"""
