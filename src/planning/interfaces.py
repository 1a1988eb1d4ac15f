from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

class IPlannerObserver(ABC):
    """
    规划器观察者接口
    用于解耦规划算法与 记录/调试/可视化 逻辑。
    支持三种模式：
    1. Efficient: 空实现，无开销
    2. Experiment: 记录关键数据用于可视化
    3. Debug: 详细日志记录用于问题排查
    """

    @abstractmethod
    def set_map_info(self, map_info: Any):
        """设置地图信息 (工作空间尺寸、障碍物等)"""
        pass

    @abstractmethod
    def record_sample(self, point: Any):
        """记录一次随机采样"""
        pass

    @abstractmethod
    def record_current_expansion(self, node: Any):
        """记录新加入树的节点"""
        pass

    @abstractmethod
    def record_edge(self, start_node: Any, end_node: Any):
        """记录树的一条边 (parent -> child)"""
        pass

    @abstractmethod
    def record_rejection(self, point: Any):
        """记录因碰撞被丢弃的生长点"""
        pass

    @abstractmethod
    def log(self, message: str, level: str = 'INFO', payload: Optional[Dict] = None):
        """
        结构化日志记录
        :param message: 日志消息
        :param level: 日志级别 'INFO', 'WARN', 'ERROR', 'DEBUG'
        :param payload: 额外的结构化数据 (如配置参数、统计信息等)
        """
        pass
