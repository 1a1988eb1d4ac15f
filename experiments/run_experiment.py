import os
import sys
import time
import argparse

# --- Path Setup ---
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from src.config import ConfigError
from src.types import PlanOutcome
from src.collision import path_length
from src.map.generator import ScenarioGenerator, validate_obstacle_count
from src.planning.planners import RRTPlanner
from src.visualization.observers import DebugObserver, ExperimentObserver
from src.visualization.plotter import Visualizer
from experiments.benchmark_config import BenchmarkConfig as cfg

def ensure_log_dir(log_dir):
    os.makedirs(log_dir, exist_ok=True)

def run_experiment(num_obstacles=10, seed=42, step_size=None, max_iterations=None,
                   debug=False, show_plot=False, save_plot=True):
    num_obstacles = validate_obstacle_count(num_obstacles)
    print(f"=== Running Experiment (Obstacles={num_obstacles}, Seed={seed}) ===")

    # 1. Setup Scenario
    generator = ScenarioGenerator(
        width=cfg.WORKSPACE_WIDTH, height=cfg.WORKSPACE_HEIGHT,
        min_size=cfg.OBSTACLE_MIN_SIZE, max_size=cfg.OBSTACLE_MAX_SIZE,
        seed=seed
    )
    scenario = generator.generate(num_obstacles)
    print(f"Start: ({scenario.start.x:.1f}, {scenario.start.y:.1f}) -> "
          f"Goal: ({scenario.goal.x:.1f}, {scenario.goal.y:.1f})")

    # 2. Setup Planner
    overrides = {}
    if step_size is not None:
        overrides['step_size'] = step_size
    if max_iterations is not None:
        overrides['max_iterations'] = max_iterations
    planner = RRTPlanner(cfg.planner_config(seed=seed, **overrides))

    observer = DebugObserver(log_dir="logs/planning_debug") if debug else ExperimentObserver()
    if debug:
        print(f"Debug Log initialized: {observer.log_file}")

    # 3. Plan (runs to completion before anything is drawn)
    try:
        t0 = time.perf_counter()
        result = planner.plan(scenario.start, scenario.goal, scenario.obstacles, observer=observer)
        t1 = time.perf_counter()
    finally:
        if debug:
            observer.close()

    if result.outcome is PlanOutcome.INVALID:
        print(f"Invalid configuration: {result.message}")
        return result

    duration_ms = (t1 - t0) * 1000
    print(f"Planning Finished. Outcome: {result.outcome.name}, Time: {duration_ms:.2f} ms")
    print(f"Tree nodes: {len(result.tree)}, Iterations: {result.iterations}, "
          f"Accepted: {result.accepted}, Rejected: {result.rejected}")
    if result.success:
        print(f"Path found! {len(result.path)} points, length {path_length(result.path):.2f}")
        print("Path points:")
        for p in result.path:
            print(f"  ({p.x:.2f}, {p.y:.2f})")

    # 4. Render the finished snapshot
    if save_plot or show_plot:
        viz = Visualizer(scenario.workspace, scenario.start, scenario.goal)
        if save_plot:
            ensure_log_dir(cfg.LOG_DIR)
            outfile = os.path.join(cfg.LOG_DIR, f"rrt_viz_n{num_obstacles}_s{seed}_{result.outcome.value}.png")
            viz.save(result, outfile, observer=observer)
        if show_plot:
            print("Close the window to exit.")
            viz.show(result, observer=observer)
        viz.close()

    return result

if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Run a single RRT planning experiment")
    parser.add_argument("--obstacles", type=str, default="10", help="Number of random obstacles")
    parser.add_argument("--seed", type=int, default=42, help="Random seed")
    parser.add_argument("--step-size", type=float, default=None, help="RRT step size")
    parser.add_argument("--max-iter", type=int, default=None, help="RRT iteration budget")
    parser.add_argument("--debug", action="store_true", help="Write a detailed planning log")
    parser.add_argument("--show", action="store_true", help="Show plot")
    parser.add_argument("--no-save", action="store_true", help="Do not save the figure")
    args = parser.parse_args()

    try:
        result = run_experiment(args.obstacles, args.seed, args.step_size, args.max_iter,
                                args.debug, args.show, not args.no_save)
    except ConfigError as e:
        print(f"Invalid configuration: {e}")
        sys.exit(2)

    if result.outcome is PlanOutcome.INVALID:
        sys.exit(2)
    if not result.success:
        print("No path found within the iteration budget.")
        sys.exit(1)
