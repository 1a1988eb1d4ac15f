# src/planning/planners/rrt.py
from typing import Optional, Sequence

from src.types import Point, Rectangle, PlanOutcome, PlanResult
from src.config import ConfigError, PlannerConfig
from src.collision import CollisionChecker, distance
from src.map.workspace import Workspace
from src.planning.planners.base import PlannerBase
from src.planning.interfaces import IPlannerObserver
from src.planning.path import extract_path
from src.planning.sampler import UniformSampler
from src.planning.steering import extend
from src.planning.tree import RRTTree
from src.visualization.observers import EfficientObserver

class RRTPlanner(PlannerBase):
    """
    基础 RRT 规划器 (二维质点，轴对齐矩形障碍)

    每次迭代: 采样 -> 最近邻 -> 生长 -> 碰撞检测 -> 加入树 -> 目标判定
    状态: Growing -> Found / Exhausted
    """
    def __init__(self,
                 config: Optional[PlannerConfig] = None,
                 sampler: Optional[UniformSampler] = None):
        self.config = config if config is not None else PlannerConfig()
        # 未注入采样器时，每次 plan 都按 config.seed 和 config 中的工作空间尺寸新建一个，
        # 保证同一配置可复现；注入时 config 的工作空间尺寸不参与采样
        self.sampler = sampler

        self.tree = RRTTree()

    def plan(self,
             start: Point,
             goal: Point,
             obstacles: Sequence[Rectangle],
             observer: IPlannerObserver = None) -> PlanResult:

        if observer is None:
            observer = EfficientObserver()

        # 0. 边界处校验配置，非法配置以 INVALID 结果返回
        try:
            self.config.validate()
        except ConfigError as e:
            observer.log(f"Invalid planner configuration: {e}", level='ERROR')
            self.tree = RRTTree()
            return PlanResult(outcome=PlanOutcome.INVALID, message=str(e))

        cfg = self.config
        checker = CollisionChecker(obstacles)
        sampler = self.sampler
        if sampler is None:
            seed = None if cfg.seed is None else int(cfg.seed)
            sampler = UniformSampler(cfg.workspace_width, cfg.workspace_height, seed=seed)

        # 注入的采样器自带采样范围，此时以它为准
        width = getattr(sampler, 'width', cfg.workspace_width)
        height = getattr(sampler, 'height', cfg.workspace_height)
        observer.set_map_info(Workspace(width, height, checker.obstacles))

        # 1. 初始化树
        self.tree = RRTTree(start)
        rejected = 0

        observer.log(f"Start planning... Max Iter: {cfg.max_iterations}, Step: {cfg.step_size}", level='INFO',
                     payload={'max_iter': cfg.max_iterations, 'step_size': cfg.step_size, 'seed': cfg.seed})

        for i in range(cfg.max_iterations):
            # 2. 采样 (Sample)
            rnd_point = sampler.sample()
            observer.record_sample(rnd_point)

            # 3. 寻找最近邻 (Nearest)
            nearest_index = self.tree.nearest(rnd_point)
            nearest_point = self.tree[nearest_index].point

            # 4. 生长 (Steer)
            new_point = extend(nearest_point, rnd_point, cfg.step_size)

            # 5. 碰撞检测 (Collision Check)，树保持不变
            if checker.check(new_point):
                rejected += 1
                observer.record_rejection(new_point)
                continue

            # 6. 添加到树
            new_index = self.tree.insert(new_point, nearest_index)

            observer.record_current_expansion(new_point)
            observer.record_edge(nearest_point, new_point)

            # 7. 判断是否到达目标
            if distance(new_point, goal) < cfg.step_size:
                path = extract_path(self.tree, new_index, goal, cfg.step_size)
                observer.log("Path found!", level='INFO',
                             payload={'iterations': i + 1, 'tree_size': len(self.tree),
                                      'path_points': len(path), 'rejected': rejected})
                return PlanResult(outcome=PlanOutcome.FOUND,
                                  tree=self.tree.snapshot(),
                                  path=path,
                                  iterations=i + 1,
                                  rejected=rejected)

        observer.log("Max iterations reached, path not found.", level='WARN',
                     payload={'tree_size': len(self.tree), 'rejected': rejected})
        return PlanResult(outcome=PlanOutcome.EXHAUSTED,
                          tree=self.tree.snapshot(),
                          path=[],
                          iterations=int(cfg.max_iterations),
                          rejected=rejected)
