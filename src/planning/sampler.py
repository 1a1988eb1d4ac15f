# src/planning/sampler.py
import random
from typing import Optional

from src.types import Point


class UniformSampler:
    """
    在工作空间 [0, width] x [0, height] 内均匀撒点
    随机源由采样器自己持有，不使用进程全局的 random 状态，
    相同 seed 得到完全相同的采样序列
    """
    def __init__(self,
                 width: float,
                 height: float,
                 seed: Optional[int] = None,
                 rng: Optional[random.Random] = None):
        self.width = width
        self.height = height
        self.seed = seed
        self._rng = rng if rng is not None else random.Random(seed)

    def sample(self) -> Point:
        rx = self._rng.uniform(0, self.width)
        ry = self._rng.uniform(0, self.height)
        return Point(rx, ry)

    def reseed(self, seed: Optional[int]):
        """重置随机源，用于同一个采样器复现一次规划"""
        self.seed = seed
        self._rng.seed(seed)
