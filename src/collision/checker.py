# src/collision/checker.py
from typing import Iterable, Sequence, Tuple

from src.types import Point, Rectangle
from .geometry import point_in_rectangle


def collides(point: Point, obstacles: Iterable[Rectangle]) -> bool:
    """
    点是否落在任意一个障碍物内 O(m)
    只检查点本身，不做线段扫掠检测
    """
    for obstacle in obstacles:
        if point_in_rectangle(point, obstacle):
            return True
    return False


class CollisionChecker:
    """
    绑定一组固定障碍物的碰撞检测器
    规划期间障碍物集合不变，这里只保存一个只读快照
    """
    def __init__(self, obstacles: Sequence[Rectangle] = ()):
        self._obstacles: Tuple[Rectangle, ...] = tuple(obstacles)

    @property
    def obstacles(self) -> Tuple[Rectangle, ...]:
        return self._obstacles

    def check(self, point: Point) -> bool:
        """
        :return: True 表示碰撞 (不安全), False 表示安全
        """
        return collides(point, self._obstacles)

    def __len__(self):
        return len(self._obstacles)
