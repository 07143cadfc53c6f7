"""
双目深度节点：持有左右两个采集子节点，输出深度图
"""

from typing import Any, Dict, Optional

import numpy as np

from ..core.link import ChannelType
from ..core.node import BaseNode, NodeType
from ..core.sensor import CameraBoardSocket, SensorInfo, socket_name
from .sensors.sensor_wrapper import SensorCaptureNode


class StereoDepthNode(BaseNode):
    """双目深度估计节点"""

    def __init__(
        self,
        node_name: str,
        left_sensor: SensorInfo,
        right_sensor: SensorInfo,
        left_name: str = "left",
        right_name: str = "right",
        config: Optional[Dict[str, Any]] = None,
        left_config: Optional[Dict[str, Any]] = None,
        right_config: Optional[Dict[str, Any]] = None
    ):
        """
        初始化双目深度节点

        Args:
            node_name: 节点名称
            left_sensor: 左相机传感器信息
            right_sensor: 右相机传感器信息
            left_name: 左相机子节点名称
            right_name: 右相机子节点名称
            config: 深度节点配置
            left_config: 左相机子节点配置
            right_config: 右相机子节点配置
        """
        self.left = SensorCaptureNode(left_name, left_sensor, left_config)
        self.right = SensorCaptureNode(right_name, right_sensor, right_config)
        self._baseline = self._compute_baseline(left_sensor, right_sensor)
        super().__init__(node_name, NodeType.STEREO, config)

        self.sub_nodes = [self.left, self.right]
        self.left.link(self.get_input("left"), "raw")
        self.right.link(self.get_input("right"), "raw")

    @staticmethod
    def _compute_baseline(left: SensorInfo, right: SensorInfo) -> Optional[float]:
        """根据标定平移计算基线长度(cm)"""
        if left.translation is None or right.translation is None:
            return None
        return round(float(np.linalg.norm(left.translation - right.translation)), 3)

    @property
    def baseline(self) -> Optional[float]:
        return self._baseline

    def _set_default_config(self):
        self.config.setdefault("subpixel", False)
        self.config.setdefault("lr_check", True)
        self.config.setdefault("extended_disparity", False)
        self.config.setdefault("align_socket", CameraBoardSocket.CAM_A.name)
        if self._baseline is not None:
            self.config.setdefault("baseline_cm", self._baseline)

    def _validate_config(self):
        try:
            CameraBoardSocket.parse(self.config["align_socket"])
        except ValueError:
            raise ValueError(
                f"节点{self.node_name}: 未知的对齐插槽 {self.config['align_socket']}"
            ) from None

        if self.config["subpixel"] and self.config["extended_disparity"]:
            raise ValueError(f"节点{self.node_name}: subpixel与extended_disparity不能同时启用")

    def _setup_ports(self):
        self._add_input("left", ChannelType.RAW)
        self._add_input("right", ChannelType.RAW)
        self._add_output("depth", ChannelType.DEPTH)
        self._add_output("rectified_left", ChannelType.RAW)
        self._add_output("rectified_right", ChannelType.RAW)

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["sockets"] = [socket_name(self.left.socket), socket_name(self.right.socket)]
        return data
