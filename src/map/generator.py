# src/map/generator.py
from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np

from src.config import ConfigError, is_integer
from src.types import Point, Rectangle
from .workspace import Workspace


@dataclass(frozen=True)
class Scenario:
    """一次实验的输入：工作空间 + 起终点"""
    workspace: Workspace
    start: Point
    goal: Point

    @property
    def obstacles(self) -> Tuple[Rectangle, ...]:
        return self.workspace.obstacles


class ScenarioGenerator:
    """
    随机场景生成器 (演示用)
    起点、终点在工作空间内均匀分布；
    障碍物左下角在工作空间内均匀分布，宽高在 [min_size, max_size] 内均匀分布。
    不保证起终点不在障碍物内，规划器本身可以处理这种退化情况。
    """

    def __init__(
        self,
        width: float = 800.0,
        height: float = 600.0,
        min_size: float = 10.0,
        max_size: float = 50.0,
        seed: int = None
    ):
        if width <= 0 or height <= 0:
            raise ConfigError(f"Workspace must have positive size, got {width}x{height}")
        if min_size < 0 or max_size < min_size:
            raise ConfigError(f"Invalid obstacle size range [{min_size}, {max_size}]")

        self.width = width
        self.height = height
        self.min_size = min_size
        self.max_size = max_size
        self.seed = seed
        self._rng = np.random.default_rng(seed)

    def generate(self, num_obstacles: int,
                 start: Optional[Point] = None,
                 goal: Optional[Point] = None) -> Scenario:
        """
        :param num_obstacles: 障碍物数量，必须是非负整数
        :param start: 指定起点 (None 则随机)
        :param goal: 指定终点 (None 则随机)
        """
        num_obstacles = validate_obstacle_count(num_obstacles)

        # 与原始演示一致：先起终点，后障碍物
        if start is None:
            start = self._random_point()
        if goal is None:
            goal = self._random_point()

        obstacles = tuple(self._random_rectangle() for _ in range(num_obstacles))
        return Scenario(Workspace(self.width, self.height, obstacles), start, goal)

    def _random_point(self) -> Point:
        rx, ry = self._rng.uniform((0.0, 0.0), (self.width, self.height))
        return Point(float(rx), float(ry))

    def _random_rectangle(self) -> Rectangle:
        x, y = self._rng.uniform((0.0, 0.0), (self.width, self.height))
        w, h = self._rng.uniform(self.min_size, self.max_size, size=2)
        return Rectangle(float(x), float(y), float(w), float(h))


def validate_obstacle_count(value) -> int:
    """
    检查障碍物数量 (来自命令行或用户输入)
    接受非负整数或其字符串形式，其余情况抛出 ConfigError
    """
    if isinstance(value, str):
        try:
            value = int(value.strip())
        except ValueError:
            raise ConfigError(f"Obstacle count must be an integer, got {value!r}") from None
    if is_integer(value):
        value = int(value)
    else:
        raise ConfigError(f"Obstacle count must be an integer, got {value!r}")
    if value < 0:
        raise ConfigError(f"Obstacle count must be >= 0, got {value}")
    return value
