# src/planners/__init__.py

from .base import PlannerBase
from .rrt import RRTPlanner



__all__ = [
    "PlannerBase",
    "RRTPlanner",
]
