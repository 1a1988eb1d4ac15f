# src/planning/tree.py
from typing import Iterator, List, Optional, Tuple

import numpy as np

from src.types import Node, Point, ROOT_PARENT
from src.collision.geometry import distance


class RRTTree:
    """
    只追加的节点数组 (arena)
    节点之间通过整数父索引相连，index 0 永远是根节点 (起点)。
    不变量：对任意 i > 0，parent_index < i，因此树天然无环。
    """
    def __init__(self, root: Optional[Point] = None):
        self._nodes: List[Node] = []
        if root is not None:
            self.insert(root, ROOT_PARENT)

    def insert(self, point: Point, parent_index: Optional[int]) -> int:
        """追加一个节点，返回它的索引 O(1)"""
        size = len(self._nodes)
        if size == 0:
            if parent_index is not ROOT_PARENT:
                raise ValueError("The first node of the tree must be the root (no parent)")
        elif parent_index is ROOT_PARENT:
            raise ValueError("Only index 0 may be the root")
        elif not 0 <= parent_index < size:
            raise ValueError(f"Parent index {parent_index} out of range for tree of size {size}")

        self._nodes.append(Node(point, parent_index))
        return size

    def nearest(self, point: Point) -> Optional[int]:
        """
        线性扫描寻找最近节点 O(n)
        严格小于才替换，距离相同时先插入的节点胜出。
        空树返回 None。
        """
        nearest_index = None
        min_dist = float('inf')

        for i, node in enumerate(self._nodes):
            d = distance(node.point, point)
            if d < min_dist:
                min_dist = d
                nearest_index = i

        return nearest_index

    @property
    def root(self) -> Node:
        return self._nodes[0]

    def parent_of(self, index: int) -> Optional[int]:
        return self._nodes[index].parent_index

    def points(self) -> List[Point]:
        return [node.point for node in self._nodes]

    def edges(self) -> List[Tuple[Point, Point]]:
        """所有树边 (child, parent)，用于绘图"""
        return [(node.point, self._nodes[node.parent_index].point)
                for node in self._nodes if not node.is_root]

    def as_array(self) -> np.ndarray:
        """节点坐标 (N, 2) 数组"""
        if not self._nodes:
            return np.empty((0, 2))
        return np.array([[node.x, node.y] for node in self._nodes], dtype=float)

    def snapshot(self) -> List[Node]:
        # Node 本身不可变，浅拷贝列表即可
        return list(self._nodes)

    def __len__(self):
        return len(self._nodes)

    def __getitem__(self, index: int) -> Node:
        return self._nodes[index]

    def __iter__(self) -> Iterator[Node]:
        return iter(self._nodes)
