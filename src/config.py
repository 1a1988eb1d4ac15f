# src/config.py
import math
import numbers
from dataclasses import dataclass
from typing import Optional


class ConfigError(ValueError):
    """非法配置，在规划开始之前被拒绝"""


@dataclass
class PlannerConfig:
    step_size: float = 20.0          # 单次生长最大距离
    max_iterations: int = 5000       # 最大采样次数
    workspace_width: float = 800.0   # 采样范围 [0, width]
    workspace_height: float = 600.0  # 采样范围 [0, height]
    seed: Optional[int] = None       # 采样器随机种子 (None 表示不可复现)

    def validate(self):
        """
        检查配置，非法时抛出 ConfigError
        max_iterations == 0 是合法的，规划会立即以 EXHAUSTED 结束
        """
        if not _is_real(self.step_size) or not math.isfinite(self.step_size) or self.step_size <= 0:
            raise ConfigError(f"step_size must be a finite number > 0, got {self.step_size!r}")

        if not is_integer(self.max_iterations):
            raise ConfigError(f"max_iterations must be an integer, got {self.max_iterations!r}")
        if self.max_iterations < 0:
            raise ConfigError(f"max_iterations must be >= 0, got {self.max_iterations}")

        for name in ("workspace_width", "workspace_height"):
            value = getattr(self, name)
            if not _is_real(value) or not math.isfinite(value) or value <= 0:
                raise ConfigError(f"{name} must be a finite number > 0, got {value!r}")

        if self.seed is not None and not is_integer(self.seed):
            raise ConfigError(f"seed must be an integer or None, got {self.seed!r}")
        return self


def _is_real(value) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def is_integer(value) -> bool:
    """整数 (含 numpy 整数)，不含 bool"""
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)
