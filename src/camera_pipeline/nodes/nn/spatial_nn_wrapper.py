"""
空间神经网络节点：彩色图像加深度图，输出带3D坐标的检测结果
"""

from typing import Any, Dict, Optional

from ...core.link import ChannelType
from ...core.node import NodeType
from .nn_wrapper import NeuralNetworkNode


class SpatialNeuralNetworkNode(NeuralNetworkNode):
    """空间神经网络推理节点"""

    def __init__(self, node_name: str = "nn", config: Optional[Dict[str, Any]] = None):
        super().__init__(node_name, config, node_type=NodeType.SPATIAL_NN)

    def _set_default_config(self):
        super()._set_default_config()
        # 深度ROI的缩放系数与有效深度范围(mm)
        self.config.setdefault("bounding_box_scale_factor", 0.5)
        self.config.setdefault("depth_lower_threshold", 100)
        self.config.setdefault("depth_upper_threshold", 10000)

    def _validate_config(self):
        super()._validate_config()
        if self.config["depth_lower_threshold"] >= self.config["depth_upper_threshold"]:
            raise ValueError("depth_lower_threshold必须小于depth_upper_threshold")

    def _setup_ports(self):
        self._add_input("input", ChannelType.PREVIEW)
        self._add_input("input_depth", ChannelType.DEPTH)
        self._add_output("detections", ChannelType.SPATIAL_DETECTIONS)
        self._add_output("passthrough", ChannelType.PREVIEW)
        self._add_output("passthrough_depth", ChannelType.DEPTH)
