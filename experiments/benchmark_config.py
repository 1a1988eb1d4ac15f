import sys
import os

# Ensure src can be imported if this config is used standalone or imported from elsewhere
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from src.config import PlannerConfig

class BenchmarkConfig:
    # --- Experiment Settings ---
    OBSTACLE_COUNTS = [0, 50, 100, 200]   # Obstacle counts to test
    NUM_TRIALS = 10                       # Number of trials per obstacle count
    RANDOM_SEED_BASE = 1000               # Base seed for reproducibility

    # --- Output Paths ---
    _BASE_DIR = os.path.dirname(os.path.abspath(__file__))
    _PROJECT_DIR = os.path.dirname(_BASE_DIR)
    LOG_DIR = os.path.join(_PROJECT_DIR, "logs", "experiments_rrt")

    # --- Workspace (800x600 window) ---
    WORKSPACE_WIDTH = 800.0
    WORKSPACE_HEIGHT = 600.0

    # --- Random obstacles ---
    OBSTACLE_MIN_SIZE = 10.0
    OBSTACLE_MAX_SIZE = 50.0

    # --- Algorithm Parameters ---
    RRT_PARAMS = {
        'step_size': 20.0,
        'max_iterations': 5000,
    }

    @classmethod
    def planner_config(cls, seed=None, **overrides) -> PlannerConfig:
        params = dict(cls.RRT_PARAMS)
        params.update(overrides)
        return PlannerConfig(
            workspace_width=cls.WORKSPACE_WIDTH,
            workspace_height=cls.WORKSPACE_HEIGHT,
            seed=seed,
            **params
        )
