# 绘图逻辑 (Matplotlib)
# 只读取规划结束后的 PlanResult 快照，不会回写规划器状态

from typing import Optional

import matplotlib.pyplot as plt
from matplotlib.collections import LineCollection
from matplotlib.patches import Rectangle as RectPatch

from src.types import PlanResult, Point
from src.map.workspace import Workspace
from src.planning.interfaces import IPlannerObserver

class Visualizer:
    def __init__(self, workspace: Workspace, start: Point, goal: Point, title: str = "RRT Visualization"):
        self.workspace = workspace
        self.start = start
        self.goal = goal
        self.title = title
        self.fig, self.ax = plt.subplots(figsize=(10, 10 * workspace.height / workspace.width))

    def draw(self, result: PlanResult, observer: Optional[IPlannerObserver] = None):
        """observer 记录了被拒绝的点时 (ExperimentObserver / DebugObserver)，一并画出"""
        ax = self.ax
        ax.clear()

        # 1. 障碍物 (红色实心矩形)
        for obs in self.workspace.obstacles:
            ax.add_patch(RectPatch((obs.x, obs.y), obs.width, obs.height,
                                   facecolor='red', edgecolor='none', alpha=0.8))

        # 2. 树枝: 每个节点连到父节点
        segments = [[(node.x, node.y), (result.tree[node.parent_index].x, result.tree[node.parent_index].y)]
                    for node in result.tree if not node.is_root]
        if segments:
            ax.add_collection(LineCollection(segments, colors='gray', linewidths=0.6, alpha=0.7))

        # 2.5 碰撞被丢弃的生长点 (淡色叉号)
        rejected = getattr(observer, 'rejected_points', None)
        if rejected:
            ax.scatter([p.x for p in rejected], [p.y for p in rejected], marker='x', c='black',
                       s=8, alpha=0.3, linewidths=0.6, label='Rejected', gid='rejected')

        # 3. 路径 (高亮折线)
        if result.path:
            px = [p.x for p in result.path]
            py = [p.y for p in result.path]
            ax.plot(px, py, 'r-', linewidth=2.5, label='Path')

        # 4. 起终点
        ax.plot(self.start.x, self.start.y, 'go', markersize=8, label='Start')
        ax.plot(self.goal.x, self.goal.y, 'bo', markersize=8, label='Goal')

        ax.set_xlim(0, self.workspace.width)
        ax.set_ylim(0, self.workspace.height)
        ax.set_aspect('equal')
        ax.set_title(f"{self.title} | {result.outcome.name} | Nodes: {len(result.tree)} | Iter: {result.iterations}")
        ax.legend(loc='upper left')
        return self.fig

    def save(self, result: PlanResult, outfile: str, observer: Optional[IPlannerObserver] = None):
        self.draw(result, observer)
        self.fig.savefig(outfile)
        print(f"Visualization saved to: {outfile}")

    def show(self, result: PlanResult, observer: Optional[IPlannerObserver] = None):
        """阻塞直到窗口被关闭"""
        self.draw(result, observer)
        plt.show()

    def close(self):
        plt.close(self.fig)
