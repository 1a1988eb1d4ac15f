# src/map/workspace.py
from dataclasses import dataclass, field
from typing import Tuple

from src.types import Point, Rectangle


@dataclass(frozen=True)
class Workspace:
    """
    二维工作空间：采样边界 + 一组固定的矩形障碍物
    """
    width: float
    height: float
    obstacles: Tuple[Rectangle, ...] = field(default_factory=tuple)

    def is_inside(self, p: Point) -> bool:
        """判断点是否在工作空间范围内 (闭区间)"""
        return 0 <= p.x <= self.width and 0 <= p.y <= self.height

    def __str__(self):
        return f"Workspace({self.width}x{self.height}, obstacles={len(self.obstacles)})"
