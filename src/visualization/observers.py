import logging
import time
import os
from typing import Any, List, Tuple, Dict, Optional
from src.planning.interfaces import IPlannerObserver

class EfficientObserver(IPlannerObserver):
    """
    高效运行模式
    除了必要的流程不额外进行信息记录。
    相当于 NoOp。
    """
    def set_map_info(self, map_info: Any): pass
    def record_sample(self, point: Any): pass
    def record_current_expansion(self, node: Any): pass
    def record_edge(self, start_node: Any, end_node: Any): pass
    def record_rejection(self, point: Any): pass
    def log(self, message: str, level: str = 'INFO', payload: Optional[Dict] = None):
        # 仅在 ERROR 级别打印
        if level == 'ERROR':
            print(f"[ERROR] {message}")


class ExperimentObserver(IPlannerObserver):
    """
    实验模式
    记录采样点、拓展节点、树边和被拒绝的点。
    这些信息主要用于算法的比较和可视化 (Replay)。
    """
    def __init__(self):
        self.samples: List[Any] = []
        # 存储格式: List[Point]
        self.expanded_nodes: List[Any] = []
        # 存储格式: List[Tuple[parent, child]]
        self.edges: List[Tuple[Any, Any]] = []
        self.rejected_points: List[Any] = []
        self.map_info = None

    def set_map_info(self, map_info: Any):
        self.map_info = map_info

    def record_sample(self, point: Any):
        self.samples.append(point)

    def record_current_expansion(self, node: Any):
        self.expanded_nodes.append(node)

    def record_edge(self, start_node: Any, end_node: Any):
        self.edges.append((start_node, end_node))

    def record_rejection(self, point: Any):
        self.rejected_points.append(point)

    def log(self, message: str, level: str = 'INFO', payload: Optional[Dict] = None):
        # 实验模式只关心结果和可视化，控制台保持安静
        pass


class DebugObserver(IPlannerObserver):
    """
    Debug 模式
    用于详细分析一次规划为什么失败。
    将详细日志写入文件，同时保留可视化数据以便对照。
    """
    def __init__(self, log_dir: str = "logs/planning_debug"):
        # 复用 ExperimentObserver 的存储，以便 Debug 时也能画图
        self.viz_observer = ExperimentObserver()

        self.log_dir = log_dir
        os.makedirs(self.log_dir, exist_ok=True)

        # 配置 Logger
        timestamp = time.strftime("%Y%m%d_%H%M%S")
        self.log_file = os.path.join(self.log_dir, f"plan_debug_{timestamp}.log")

        # 同一秒内创建的多个 observer 各自写自己的文件
        self.logger = logging.getLogger(f"PlannerDebug_{timestamp}_{id(self)}")
        self.logger.setLevel(logging.DEBUG)
        self.logger.propagate = False

        # 避免添加重复 Handler
        if not self.logger.handlers:
            fh = logging.FileHandler(self.log_file, encoding='utf-8')
            fh.setLevel(logging.DEBUG)
            formatter = logging.Formatter('%(asctime)s - %(levelname)s - %(message)s')
            fh.setFormatter(formatter)
            self.logger.addHandler(fh)

        self.logger.info("=== Debug Session Started ===")

    def set_map_info(self, map_info: Any):
        self.viz_observer.set_map_info(map_info)
        self.logger.info(f"Map Info set: {map_info}")

    def record_sample(self, point: Any):
        self.viz_observer.record_sample(point)

    def record_current_expansion(self, node: Any):
        self.viz_observer.record_current_expansion(node)
        self.logger.debug(f"Expanding: {node}")

    def record_edge(self, start_node: Any, end_node: Any):
        self.viz_observer.record_edge(start_node, end_node)

    def record_rejection(self, point: Any):
        self.viz_observer.record_rejection(point)
        self.logger.debug(f"Rejected (collision): {point}")

    def log(self, message: str, level: str = 'INFO', payload: Optional[Dict] = None):
        if payload:
            message = f"{message} | Payload: {payload}"

        if level == 'DEBUG':
            self.logger.debug(message)
        elif level == 'WARN':
            self.logger.warning(message)
        elif level == 'ERROR':
            self.logger.error(message)
        else:
            self.logger.info(message)

    def close(self):
        """释放文件句柄，并把一次性的 logger 从 logging 注册表里移除"""
        for handler in list(self.logger.handlers):
            handler.close()
            self.logger.removeHandler(handler)
        logging.Logger.manager.loggerDict.pop(self.logger.name, None)

    # Proxy properties for ExperimentObserver compatibility
    @property
    def samples(self): return self.viz_observer.samples
    @property
    def expanded_nodes(self): return self.viz_observer.expanded_nodes
    @property
    def edges(self): return self.viz_observer.edges
    @property
    def rejected_points(self): return self.viz_observer.rejected_points
    @property
    def map_info(self): return self.viz_observer.map_info
