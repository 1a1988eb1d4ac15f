import sys
import os
import time
import numpy as np
import pandas as pd
import matplotlib.pyplot as plt

# --- 路径设置 ---
# 确保能找到 src 包
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from src.collision import path_length
from src.map.generator import ScenarioGenerator
from src.planning.planners import RRTPlanner
from experiments.benchmark_config import BenchmarkConfig as cfg

def run_benchmark(obstacle_counts=None, num_trials=None, seed_base=None, **planner_overrides) -> pd.DataFrame:
    """
    对每个障碍物数量跑 num_trials 次规划，返回逐次结果
    同一个 seed 同时决定场景和采样序列，结果可复现
    """
    obstacle_counts = cfg.OBSTACLE_COUNTS if obstacle_counts is None else obstacle_counts
    num_trials = cfg.NUM_TRIALS if num_trials is None else num_trials
    seed_base = cfg.RANDOM_SEED_BASE if seed_base is None else seed_base

    records = []
    for num_obstacles in obstacle_counts:
        for i in range(num_trials):
            seed = seed_base + i
            generator = ScenarioGenerator(
                width=cfg.WORKSPACE_WIDTH, height=cfg.WORKSPACE_HEIGHT,
                min_size=cfg.OBSTACLE_MIN_SIZE, max_size=cfg.OBSTACLE_MAX_SIZE,
                seed=seed
            )
            scenario = generator.generate(num_obstacles)
            planner = RRTPlanner(cfg.planner_config(seed=seed, **planner_overrides))

            t0 = time.perf_counter()
            result = planner.plan(scenario.start, scenario.goal, scenario.obstacles)
            t1 = time.perf_counter()

            records.append({
                'Obstacles': num_obstacles,
                'Seed': seed,
                'Outcome': result.outcome.name,
                'Success': result.success,
                'TimeMs': (t1 - t0) * 1000,
                'Iterations': result.iterations,
                'TreeSize': len(result.tree),
                'Rejected': result.rejected,
                'PathPoints': len(result.path),
                'PathLength': path_length(result.path) if result.success else np.nan,
            })

    return pd.DataFrame(records)

def summarize(df: pd.DataFrame) -> pd.DataFrame:
    """按障碍物数量汇总 (成功率为百分比，路径长度只统计成功的样本)"""
    summary = df.groupby('Obstacles').agg(
        SuccessRate=('Success', 'mean'),
        TimeMean=('TimeMs', 'mean'),
        IterMean=('Iterations', 'mean'),
        TreeSizeMean=('TreeSize', 'mean'),
        RejectedMean=('Rejected', 'mean'),
        LengthMean=('PathLength', 'mean'),
    ).reset_index()
    summary['SuccessRate'] *= 100
    return summary

def plot_summary(summary: pd.DataFrame, outfile: str = None):
    """可视化对比图表"""
    fig, axes = plt.subplots(1, 4, figsize=(24, 5))

    metrics = [
        ('SuccessRate', 'Success Rate (%)', 'Reliability'),
        ('TimeMean', 'Computation Time (ms)', 'Time Complexity'),
        ('TreeSizeMean', 'Tree Nodes', 'Space Complexity'),
        ('LengthMean', 'Path Length', 'Path Quality')
    ]

    for ax, (metric, ylabel, title) in zip(axes, metrics):
        ax.plot(summary['Obstacles'], summary[metric], 's-', color='orange', label='RRT')
        ax.set_xlabel('Obstacle Count')
        ax.set_ylabel(ylabel)
        ax.set_title(title)
        ax.grid(True, linestyle=':', alpha=0.6)

    axes[0].legend()
    plt.tight_layout()

    if outfile:
        fig.savefig(outfile)
        print(f"Summary plot saved to: {outfile}")
        plt.close(fig)
    else:
        plt.show()

if __name__ == "__main__":
    print("=== 开始 RRT 障碍物数量对比实验 ===")
    df_results = run_benchmark()

    summary = summarize(df_results)
    print(summary.to_string(index=False, float_format=lambda v: f"{v:.2f}"))

    os.makedirs(cfg.LOG_DIR, exist_ok=True)
    csv_file = os.path.join(cfg.LOG_DIR, "benchmark_results.csv")
    df_results.to_csv(csv_file, index=False)
    print(f"Raw results saved to: {csv_file}")

    print("\n实验结束，正在绘图...")
    plot_summary(summary, os.path.join(cfg.LOG_DIR, "benchmark_summary.png"))
