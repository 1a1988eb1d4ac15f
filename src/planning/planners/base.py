# src/planning/planners/base.py
from abc import ABC, abstractmethod
from typing import Optional, Sequence
from src.types import Point, Rectangle, PlanResult
from src.planning.interfaces import IPlannerObserver

class PlannerBase(ABC):
    """
    所有路径规划器的抽象基类
    """

    @abstractmethod
    def plan(self,
             start: Point,
             goal: Point,
             obstacles: Sequence[Rectangle],
             observer: Optional[IPlannerObserver] = None) -> PlanResult:
        """
        执行路径规划
        :param start: 起点
        :param goal: 目标点
        :param obstacles: 障碍物集合 (规划期间不变)
        :param observer: 观察者钩子 (用于记录/可视化搜索过程)
        :return: PlanResult，失败通过 outcome 显式给出，而不是返回空列表
        """
        pass
