#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
位置类型：二维坐标 (x, y)

既用作栅格坐标（整数），也用作连续空间中的点（浮点）。
"""

import math
from dataclasses import dataclass
from typing import Sequence, Union

Number = Union[int, float]


@dataclass(frozen=True)
class Position:
    """
    二维坐标值类型

    按值比较、可哈希，可直接作为 dict / set 的键。
    """
    x: Number = 0
    y: Number = 0

    def to_tuple(self) -> tuple:
        return (self.x, self.y)

    @classmethod
    def from_tuple(cls, value: Sequence[Number]) -> "Position":
        """
        从 (x, y) 序列构造

        Raises:
            ValueError: 序列长度不是2
        """
        if len(value) != 2:
            raise ValueError(f"坐标必须包含两个分量: {value}")
        return cls(value[0], value[1])

    def to_grid(self) -> "Position":
        """返回包含该点的整数栅格（逐轴向下取整）"""
        return Position(int(math.floor(self.x)), int(math.floor(self.y)))

    def is_integral(self) -> bool:
        return float(self.x).is_integer() and float(self.y).is_integer()


def manhattan_distance(a: Position, b: Position) -> Number:
    """曼哈顿距离 |dx| + |dy|"""
    return abs(a.x - b.x) + abs(a.y - b.y)
