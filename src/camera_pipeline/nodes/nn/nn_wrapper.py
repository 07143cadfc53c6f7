"""
神经网络推理节点：在彩色preview流上运行检测模型
"""

from typing import Any, Dict, Optional

from ...core.link import ChannelType
from ...core.node import BaseNode, NodeType

NN_FAMILIES = ("mobilenet", "yolo", "segmentation")


class NeuralNetworkNode(BaseNode):
    """神经网络推理节点"""

    def __init__(
        self,
        node_name: str = "nn",
        config: Optional[Dict[str, Any]] = None,
        node_type: NodeType = NodeType.NN
    ):
        super().__init__(node_name, node_type, config)

    def _set_default_config(self):
        self.config.setdefault("nn_family", "mobilenet")
        self.config.setdefault("blob_path", "")
        self.config.setdefault("confidence_threshold", 0.5)
        self.config.setdefault("num_inference_threads", 2)

    def _validate_config(self):
        if self.config["nn_family"] not in NN_FAMILIES:
            raise ValueError(f"不支持的网络类型: {self.config['nn_family']}")

        if not 0.0 <= self.config["confidence_threshold"] <= 1.0:
            raise ValueError("confidence_threshold必须在[0, 1]范围内")

    def _setup_ports(self):
        self._add_input("input", ChannelType.PREVIEW)
        self._add_output("detections", ChannelType.DETECTIONS)
        self._add_output("passthrough", ChannelType.PREVIEW)
