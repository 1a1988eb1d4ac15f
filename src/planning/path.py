# src/planning/path.py
from typing import List

from src.types import Point, ROOT_PARENT
from src.collision.geometry import distance
from src.planning.tree import RRTTree


def extract_path(tree: RRTTree, last_index: int, goal: Point, step_size: float) -> List[Point]:
    """
    从触发 Found 的节点沿父索引回溯

    终止条件：到达根节点，或者某个祖先节点离目标不超过 step_size (先满足者为准)。
    触发节点本身必然满足距离条件，所以只对祖先做判断。
    回溯得到的是 Goal -> Start 顺序，最后翻转。
    """
    path = [tree[last_index].point]
    curr = tree.parent_of(last_index)

    while curr is not ROOT_PARENT:
        node = tree[curr]
        path.append(node.point)
        if distance(node.point, goal) <= step_size:
            break
        curr = node.parent_index

    return list(reversed(path))
