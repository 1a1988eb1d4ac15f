# src/collision/geometry.py
import math
from typing import Sequence

from src.types import Point, Rectangle


def distance(p1: Point, p2: Point) -> float:
    """两点欧氏距离"""
    return math.hypot(p1.x - p2.x, p1.y - p2.y)


def point_in_rectangle(p: Point, rect: Rectangle) -> bool:
    """
    点是否在矩形内
    四条边都是闭区间，角点也算在内
    """
    return (rect.x <= p.x <= rect.x + rect.width and
            rect.y <= p.y <= rect.y + rect.height)


def path_length(path: Sequence[Point]) -> float:
    """计算路径的累积欧氏距离"""
    if not path or len(path) < 2:
        return 0.0
    length = 0.0
    for i in range(len(path) - 1):
        length += distance(path[i], path[i + 1])
    return length
