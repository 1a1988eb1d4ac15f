# src/planning/steering.py
import math

from src.types import Point
from src.collision.geometry import distance


def extend(from_point: Point, to_point: Point, step_size: float) -> Point:
    """
    从树上的点朝采样点生长一步
    距离不超过 step_size 时直接返回采样点，
    否则沿 atan2 方向前进恰好 step_size
    """
    d = distance(from_point, to_point)
    if d <= step_size:
        return to_point

    theta = math.atan2(to_point.y - from_point.y, to_point.x - from_point.x)
    return Point(from_point.x + step_size * math.cos(theta),
                 from_point.y + step_size * math.sin(theta))
