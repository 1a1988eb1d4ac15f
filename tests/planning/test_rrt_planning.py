import sys
import os
import math
import pytest

# --- 路径设置 ---
sys.path.append(os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))

from src.types import Point, Rectangle, PlanOutcome, ROOT_PARENT
from src.config import PlannerConfig
from src.collision import collides, distance
from src.map.generator import ScenarioGenerator
from src.planning.planners import RRTPlanner
from src.planning.sampler import UniformSampler


class ScriptedSampler:
    """按顺序返回预先给定的采样点"""
    def __init__(self, points):
        self.points = list(points)

    def sample(self):
        return self.points.pop(0)


def test_found_on_first_insert():
    # 工作空间 10x10，任何采样点离起点都不超过 14.2 < 20，离目标也不超过 14.2
    config = PlannerConfig(step_size=20.0, max_iterations=1, workspace_width=10.0, workspace_height=10.0, seed=0)
    start, goal = Point(0.0, 0.0), Point(10.0, 0.0)

    result = RRTPlanner(config).plan(start, goal, [])

    assert result.outcome is PlanOutcome.FOUND
    assert result.success
    assert result.iterations == 1
    assert len(result.tree) == 2
    assert result.accepted == 1
    assert result.path == [start, result.tree[1].point]


def test_zero_iterations_is_exhausted_immediately():
    config = PlannerConfig(max_iterations=0, seed=0)
    start = Point(10.0, 10.0)
    result = RRTPlanner(config).plan(start, Point(700.0, 500.0), [])

    assert result.outcome is PlanOutcome.EXHAUSTED
    assert not result.success
    assert len(result.tree) == 1
    assert result.tree[0].point == start
    assert result.path == []
    assert result.iterations == 0


def test_goal_enclosed_by_obstacle_is_exhausted():
    # 障碍物四周都比 step_size 大得多，10 次迭代内树最远只能长到 200
    obstacle = Rectangle(300.0, 200.0, 200.0, 200.0)
    config = PlannerConfig(step_size=20.0, max_iterations=10, seed=3)
    start, goal = Point(0.0, 0.0), Point(400.0, 300.0)

    result = RRTPlanner(config).plan(start, goal, [obstacle])

    assert result.outcome is PlanOutcome.EXHAUSTED
    assert result.path == []
    assert len(result.tree) == 1 + result.iterations - result.rejected


def test_start_inside_obstacle_rejects_everything():
    config = PlannerConfig(step_size=20.0, max_iterations=50, seed=11)
    start = Point(100.0, 100.0)
    obstacle = Rectangle(50.0, 50.0, 100.0, 100.0)

    result = RRTPlanner(config).plan(start, Point(700.0, 500.0), [obstacle])

    assert result.outcome is PlanOutcome.EXHAUSTED
    assert len(result.tree) == 1
    assert result.rejected == 50


def test_collision_leaves_tree_unchanged():
    start, goal = Point(0.0, 0.0), Point(0.0, 100.0)
    obstacle = Rectangle(15.0, -5.0, 10.0, 10.0)
    sampler = ScriptedSampler([
        Point(30.0, 0.0),    # -> (20, 0) 在障碍物内，丢弃
        Point(0.0, 30.0),    # -> (0, 20)
        Point(0.0, 50.0),    # -> (0, 40)
    ])
    config = PlannerConfig(step_size=20.0, max_iterations=3)
    planner = RRTPlanner(config, sampler=sampler)

    result = planner.plan(start, goal, [obstacle])

    assert result.outcome is PlanOutcome.EXHAUSTED
    assert result.rejected == 1
    assert [n.point for n in result.tree] == [start, Point(0.0, 20.0), Point(0.0, 40.0)]
    assert [n.parent_index for n in result.tree] == [None, 0, 1]


def test_found_path_backtracks_to_start():
    start, goal = Point(0.0, 0.0), Point(55.0, 0.0)
    sampler = ScriptedSampler([
        Point(0.0, 15.0),    # 分支 -> 1
        Point(15.0, 0.0),    # -> 2
        Point(30.0, 0.0),    # -> 3 (parent 2)
        Point(45.0, 0.0),    # -> 4 (parent 3), 离目标 10 < 15
    ])
    config = PlannerConfig(step_size=15.0, max_iterations=10)

    result = RRTPlanner(config, sampler=sampler).plan(start, goal, [])

    assert result.outcome is PlanOutcome.FOUND
    assert result.iterations == 4
    assert result.path == [start, Point(15.0, 0.0), Point(30.0, 0.0), Point(45.0, 0.0)]


@pytest.mark.parametrize("seed", range(8))
def test_random_scenarios_hold_invariants(seed):
    scenario = ScenarioGenerator(seed=seed).generate(30)
    config = PlannerConfig(step_size=20.0, max_iterations=3000, seed=seed)

    result = RRTPlanner(config).plan(scenario.start, scenario.goal, scenario.obstacles)

    tree = result.tree
    assert tree[0].point == scenario.start
    assert tree[0].parent_index is ROOT_PARENT
    for i, node in enumerate(tree[1:], start=1):
        assert 0 <= node.parent_index < i
        assert distance(node.point, tree[node.parent_index].point) <= config.step_size + 1e-9
        assert not collides(node.point, scenario.obstacles)

    # 每次被接受的采样恰好增加一个节点
    assert len(tree) == 1 + result.iterations - result.rejected

    if result.outcome is PlanOutcome.FOUND:
        assert result.path
        assert result.path[0] == scenario.start
        assert distance(result.path[-1], scenario.goal) < config.step_size
        for a, b in zip(result.path, result.path[1:]):
            assert distance(a, b) <= config.step_size + 1e-9
    else:
        assert result.outcome is PlanOutcome.EXHAUSTED
        assert result.path == []
        assert result.iterations == config.max_iterations


def test_open_workspace_finds_path():
    config = PlannerConfig(step_size=20.0, max_iterations=5000, seed=1)
    start, goal = Point(50.0, 50.0), Point(750.0, 550.0)

    result = RRTPlanner(config).plan(start, goal, [])

    assert result.success
    assert result.path[0] == start
    assert distance(result.path[-1], goal) < config.step_size
    # 路径至少要覆盖起终点之间的直线距离
    assert len(result.path) >= math.ceil((distance(start, goal) - config.step_size) / config.step_size)


def test_same_seed_is_deterministic():
    scenario = ScenarioGenerator(seed=5).generate(40)
    config = PlannerConfig(step_size=20.0, max_iterations=2000, seed=77)

    planner = RRTPlanner(config)
    r1 = planner.plan(scenario.start, scenario.goal, scenario.obstacles)
    r2 = planner.plan(scenario.start, scenario.goal, scenario.obstacles)
    r3 = RRTPlanner(PlannerConfig(step_size=20.0, max_iterations=2000, seed=77)).plan(
        scenario.start, scenario.goal, scenario.obstacles)

    assert r1.tree == r2.tree == r3.tree
    assert r1.outcome is r2.outcome is r3.outcome
    assert r1.path == r3.path


def test_injected_sampler_is_used():
    sampler = UniformSampler(800.0, 600.0, seed=9)
    reference = UniformSampler(800.0, 600.0, seed=9)
    config = PlannerConfig(step_size=1000.0, max_iterations=1)
    start, goal = Point(0.0, 0.0), Point(5000.0, 5000.0)

    result = RRTPlanner(config, sampler=sampler).plan(start, goal, [])

    # step 足够大，第一个采样点原样加入树
    assert result.tree[1].point == reference.sample()


@pytest.mark.parametrize("config", [
    PlannerConfig(step_size=0.0),
    PlannerConfig(step_size=-5.0),
    PlannerConfig(step_size=float('nan')),
    PlannerConfig(max_iterations=-1),
    PlannerConfig(max_iterations=2.5),
    PlannerConfig(workspace_width=0.0),
    PlannerConfig(workspace_height=-600.0),
])
def test_invalid_config_is_reported_not_raised(config):
    result = RRTPlanner(config).plan(Point(0.0, 0.0), Point(10.0, 10.0), [])

    assert result.outcome is PlanOutcome.INVALID
    assert not result.success
    assert result.message
    assert result.tree == []
    assert result.path == []


def test_numpy_integer_config_matches_plain_ints():
    import numpy as np
    scenario = ScenarioGenerator(seed=8).generate(20)
    plain = RRTPlanner(PlannerConfig(max_iterations=400, seed=12)).plan(
        scenario.start, scenario.goal, scenario.obstacles)
    numpy_cfg = RRTPlanner(PlannerConfig(max_iterations=np.int64(400), seed=np.int64(12))).plan(
        scenario.start, scenario.goal, scenario.obstacles)

    assert numpy_cfg.outcome is plain.outcome
    assert numpy_cfg.tree == plain.tree
    assert numpy_cfg.iterations == plain.iterations
    assert type(numpy_cfg.iterations) is int
