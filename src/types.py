# src/types.py
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

# 根节点的父索引哨兵
ROOT_PARENT = None


@dataclass(frozen=True)
class Point:
    """
    工作空间中的二维点 (值对象，不可变)
    """
    x: float
    y: float


@dataclass(frozen=True)
class Rectangle:
    """
    轴对齐矩形障碍物，四条边均为闭区间 (包含边界)
    """
    x: float             # 左下角 x
    y: float             # 左下角 y
    width: float         # >= 0
    height: float        # >= 0


@dataclass(frozen=True)
class Node:
    """搜索树节点 (只追加，创建后不再修改)"""
    point: Point
    parent_index: Optional[int] = ROOT_PARENT

    @property
    def x(self): return self.point.x

    @property
    def y(self): return self.point.y

    @property
    def is_root(self) -> bool:
        return self.parent_index is ROOT_PARENT


class PlanOutcome(Enum):
    # 找到路径
    FOUND = "found"

    # 迭代预算耗尽仍未到达目标 (正常终态，不是异常)
    EXHAUSTED = "exhausted"

    # 配置非法，规划没有开始
    INVALID = "invalid"


@dataclass
class PlanResult:
    """
    一次规划的完整结果快照
    渲染和统计只读取它，不会回写规划器状态
    """
    outcome: PlanOutcome
    tree: List[Node] = field(default_factory=list)
    path: List[Point] = field(default_factory=list)
    iterations: int = 0      # 实际执行的迭代次数
    rejected: int = 0        # 因碰撞被丢弃的采样数
    message: str = ""

    @property
    def success(self) -> bool:
        return self.outcome is PlanOutcome.FOUND

    @property
    def accepted(self) -> int:
        """加入树的新节点数 (不含根节点)"""
        return max(len(self.tree) - 1, 0)
