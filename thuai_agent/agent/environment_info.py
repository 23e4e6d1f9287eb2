#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
环境快照：某一时刻的墙、栅栏与子弹

快照由调用方持有，路径搜索只读访问，不做任何修改。
"""

import math
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, Mapping, Tuple

from thuai_agent.agent.position import Number, Position
from thuai_agent.navigation.common.exceptions import SnapshotError


@dataclass(frozen=True)
class Wall:
    """静态障碍物，不可通行，也不会被摧毁"""
    position: Position = field(default_factory=Position)


@dataclass(frozen=True)
class Fence:
    """
    可破坏栅栏

    health 仅供参考：对路径搜索而言，栅栏无论血量多少都不可通行。
    """
    position: Position = field(default_factory=Position)
    health: int = 0

    def __post_init__(self):
        if self.health < 0:
            raise ValueError(f"栅栏血量不能为负数: {self.health}")


@dataclass(frozen=True)
class Bullet:
    """飞行中的子弹（路径搜索不使用）"""
    position: Position = field(default_factory=Position)
    speed: float = 0.0
    damage: float = 0.0
    traveled_distance: float = 0.0  # 子弹已经过路程


@dataclass(frozen=True)
class EnvironmentInfo:
    """环境快照：墙、栅栏、子弹三个有序集合"""
    walls: Tuple[Wall, ...] = ()
    fences: Tuple[Fence, ...] = ()
    bullets: Tuple[Bullet, ...] = ()

    def __post_init__(self):
        # 统一转为元组，快照不可变
        object.__setattr__(self, 'walls', tuple(self.walls))
        object.__setattr__(self, 'fences', tuple(self.fences))
        object.__setattr__(self, 'bullets', tuple(self.bullets))

    def obstacle_positions(self) -> Iterator[Position]:
        """按顺序产出所有障碍物位置（先墙后栅栏）"""
        for wall in self.walls:
            yield wall.position
        for fence in self.fences:
            yield fence.position

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "EnvironmentInfo":
        """
        从数据采集层的消息字典构造快照

        Args:
            payload: 形如 {"walls": [...], "fences": [...], "bullets": [...]}，
                缺失的集合视为空

        Returns:
            EnvironmentInfo

        Raises:
            SnapshotError: 字段缺失或类型错误
        """
        if not isinstance(payload, Mapping):
            raise SnapshotError(f"环境快照必须是字典: {type(payload).__name__}")

        try:
            walls = [
                Wall(position=_parse_position(item))
                for item in payload.get('walls') or []
            ]
            fences = [
                Fence(
                    position=_parse_position(item),
                    health=int(item.get('health', 0)),
                )
                for item in payload.get('fences') or []
            ]
            bullets = [
                Bullet(
                    position=_parse_position(item),
                    speed=float(item.get('speed', 0.0)),
                    damage=float(item.get('damage', 0.0)),
                    traveled_distance=float(
                        item.get('traveledDistance', item.get('traveled_distance', 0.0))
                    ),
                )
                for item in payload.get('bullets') or []
            ]
        except SnapshotError:
            raise
        except (AttributeError, TypeError, ValueError) as e:
            raise SnapshotError(f"环境快照格式错误: {e}") from e

        return cls(walls=walls, fences=fences, bullets=bullets)


def _parse_position(item: Dict[str, Any]) -> Position:
    """解析 {"position": {"x": .., "y": ..}} 或 {"position": [x, y]}"""
    raw = item.get('position')
    if raw is None:
        raise SnapshotError(f"缺少 position 字段: {item}")
    if isinstance(raw, Mapping):
        if 'x' not in raw or 'y' not in raw:
            raise SnapshotError(f"position 缺少 x/y: {raw}")
        x, y = raw['x'], raw['y']
    else:
        try:
            x, y = Position.from_tuple(raw).to_tuple()
        except (TypeError, ValueError) as e:
            raise SnapshotError(f"无法解析 position: {raw}") from e

    return Position(_parse_coordinate(x, raw), _parse_coordinate(y, raw))


def _parse_coordinate(value: Any, raw: Any) -> Number:
    """坐标必须是有限的 int / float（bool 不算数字）"""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise SnapshotError(f"坐标必须是数字: {raw}")
    if not math.isfinite(value):
        raise SnapshotError(f"坐标必须是有限值: {raw}")
    return value
