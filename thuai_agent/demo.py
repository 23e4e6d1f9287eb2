#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
栅格路径搜索演示脚本
从快照文件读取墙/栅栏，规划一条路径并以 ASCII 地图输出
"""

import argparse
import json
import math
import sys
from pathlib import Path
from typing import List, Optional, Sequence

import numpy as np
import yaml
from loguru import logger
from pydantic import ValidationError

from thuai_agent.agent.environment_info import EnvironmentInfo
from thuai_agent.agent.position import Position
from thuai_agent.navigation.common.exceptions import NavigationError
from thuai_agent.navigation.config.loader import load_config
from thuai_agent.navigation.config.models import AgentConfig, LoggingConfig, PathFindingConfig
from thuai_agent.navigation.core.coordinate_utils import in_bounds
from thuai_agent.navigation.path_planner.map_model import PlanRequest, PlanResult
from thuai_agent.navigation.path_planner.path_finding import build_blocked_mask
from thuai_agent.navigation.path_planner.path_planning_service import PathPlanningService
from thuai_agent.utils.logger import SetupLogger

EXIT_FOUND = 0
EXIT_NOT_FOUND = 1
EXIT_INPUT_ERROR = 2


def ParseArgs(argv: Optional[Sequence[str]] = None):
    """解析命令行参数"""
    parser = argparse.ArgumentParser(
        description="栅格路径搜索演示",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
示例用法：
  python -m thuai_agent.demo --snapshot snapshot.yaml --start 0 0 --goal 9 9

  # 在 20x20 的小地图上演示，安全间隙为 1
  python -m thuai_agent.demo --snapshot snapshot.json --start 0 0 --goal 19 19 \\
    --size 20 --radius 1
        """
    )

    parser.add_argument("--snapshot", type=str, required=True,
                        help="环境快照文件（YAML 或 JSON，包含 walls / fences / bullets）")
    parser.add_argument("--start", type=float, nargs=2, required=True,
                        metavar=("X", "Y"), help="起点坐标")
    parser.add_argument("--goal", type=float, nargs=2, required=True,
                        metavar=("X", "Y"), help="终点坐标")
    parser.add_argument("--config", type=str, default=None,
                        help="配置文件路径（YAML），不指定则使用默认配置")
    parser.add_argument("--size", type=int, default=None,
                        help="覆盖配置中的地图边长")
    parser.add_argument("--radius", type=int, default=None,
                        help="覆盖配置中的安全间隙半径")
    parser.add_argument("--log-level", type=str, default=None,
                        help="覆盖配置中的日志级别")
    parser.add_argument("--no-map", action="store_true",
                        help="不输出 ASCII 地图")

    return parser.parse_args(argv)


def LoadSnapshot(snapshot_path: str) -> EnvironmentInfo:
    """
    加载环境快照文件

    Raises:
        FileNotFoundError: 文件不存在
        NavigationError: 文件内容无法解析
    """
    path = Path(snapshot_path)
    if not path.exists():
        raise FileNotFoundError(f"快照文件不存在: {path}")

    try:
        with open(path, 'r', encoding='utf-8') as f:
            text = f.read()
    except UnicodeDecodeError as e:
        raise NavigationError(f"快照文件不是有效的 UTF-8 文本: {e}") from e

    try:
        if path.suffix.lower() == ".json":
            payload = json.loads(text)
        else:
            payload = yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise NavigationError(f"快照文件格式错误: {e}") from e

    return EnvironmentInfo.from_dict(payload or {})


def RenderAsciiMap(
    environment: EnvironmentInfo,
    result: PlanResult,
    request: PlanRequest,
    map_size: int,
    clearance_radius: int,
) -> List[str]:
    """
    用 ASCII 可视化地图：
      '#' = 障碍, '+' = 安全间隙, '.' = 空地, '*' = 路径, 'S' = 起点, 'G' = 终点

    第 0 行对应 y = 0。
    """
    blocked = build_blocked_mask(environment.obstacle_positions(), map_size, clearance_radius)
    vis = np.where(blocked, '+', '.').astype('<U1')

    for pos in environment.obstacle_positions():
        cell = pos.to_grid()
        if in_bounds(cell, map_size):
            vis[cell.y, cell.x] = '#'

    for pos in result.path:
        vis[pos.y, pos.x] = '*'

    for mark, pos in (('S', request.start), ('G', request.goal)):
        cell = pos.to_grid()
        if in_bounds(cell, map_size):
            vis[cell.y, cell.x] = mark

    return ["".join(row) for row in vis]


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = ParseArgs(argv)

    try:
        config = load_config(Path(args.config)) if args.config else AgentConfig()
    except (FileNotFoundError, NavigationError) as e:
        print(f"配置加载失败: {e}", file=sys.stderr)
        return EXIT_INPUT_ERROR

    overrides = {}
    if args.size is not None:
        overrides['map_size'] = args.size
    if args.radius is not None:
        overrides['clearance_radius'] = args.radius
    try:
        path_cfg = PathFindingConfig(**{**config.path_finding.model_dump(), **overrides})
        log_cfg = LoggingConfig(
            level=args.log_level or config.logging.level,
            log_dir=config.logging.log_dir,
        )
    except ValidationError as e:
        print(f"命令行参数无效: {e}", file=sys.stderr)
        return EXIT_INPUT_ERROR

    SetupLogger(level=log_cfg.level, log_dir=log_cfg.log_dir)

    try:
        environment = LoadSnapshot(args.snapshot)
    except (FileNotFoundError, NavigationError) as e:
        logger.error(f"快照加载失败: {e}")
        return EXIT_INPUT_ERROR

    if not all(math.isfinite(v) for v in (*args.start, *args.goal)):
        logger.error(f"起点/终点坐标必须是有限值: start={args.start}, goal={args.goal}")
        return EXIT_INPUT_ERROR

    request = PlanRequest(start=Position(*args.start), goal=Position(*args.goal))
    service = PathPlanningService(path_cfg)
    result = service.plan(request, environment)

    print("规划结果 PlanResult:")
    print(f"ok: {result.ok}")
    print(f"reason: {result.reason.value}")
    print(f"path: {[p.to_tuple() for p in result.path]}")

    if not args.no_map:
        print("\nASCII 地图：")
        for line in RenderAsciiMap(environment, result, request, path_cfg.map_size, path_cfg.clearance_radius):
            print(line)

    return EXIT_FOUND if result.ok else EXIT_NOT_FOUND


if __name__ == "__main__":
    sys.exit(main())
