"""
IMU采集节点：与拓扑无关，不连接其他节点
"""

from typing import Any, Dict, Optional

from ..core.link import ChannelType
from ..core.node import BaseNode, NodeType


class InertialNode(BaseNode):
    """惯性测量采集节点"""

    def __init__(self, node_name: str = "imu", config: Optional[Dict[str, Any]] = None):
        super().__init__(node_name, NodeType.IMU, config)

    def _set_default_config(self):
        self.config.setdefault("accel_freq", 400)
        self.config.setdefault("gyro_freq", 400)
        self.config.setdefault("batch_report_threshold", 5)
        self.config.setdefault("max_batch_reports", 10)

    def _validate_config(self):
        for key in ("accel_freq", "gyro_freq", "batch_report_threshold", "max_batch_reports"):
            if self.config[key] <= 0:
                raise ValueError(f"{key}必须大于0")

    def _setup_ports(self):
        self._add_output("imu", ChannelType.IMU)
