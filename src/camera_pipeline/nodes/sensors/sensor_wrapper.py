"""
传感器采集节点：根据传感器型号创建彩色或单色采集
所有传感器输出raw，彩色传感器额外输出preview/video/isp
"""

from typing import Any, Dict, Hashable, Optional

from ...core.link import ChannelType
from ...core.node import BaseNode, NodeType
from ...core.sensor import SensorInfo, socket_name
from .sensor_helpers import SensorSpec, get_sensor_spec


class SensorCaptureNode(BaseNode):
    """绑定到单个插槽的采集节点"""

    def __init__(
        self,
        node_name: str,
        sensor: SensorInfo,
        config: Optional[Dict[str, Any]] = None
    ):
        """
        初始化采集节点

        Args:
            node_name: 节点名称
            sensor: 插槽上的传感器信息
            config: 配置参数 (fps, resolution, preview_size)
        """
        self.sensor = sensor
        self.spec: SensorSpec = get_sensor_spec(sensor.name)
        super().__init__(node_name, NodeType.SENSOR, config)

    @property
    def socket(self) -> Hashable:
        return self.sensor.socket

    @property
    def is_color(self) -> bool:
        return self.spec.color

    def _set_default_config(self):
        self.config.setdefault("fps", 30.0)
        self.config.setdefault("resolution", self.spec.default_resolution)
        if self.spec.color:
            self.config.setdefault("preview_size", 416)

    def _validate_config(self):
        if self.config["fps"] <= 0:
            raise ValueError(f"节点{self.node_name}: fps必须大于0")

        self.config["resolution"] = str(self.config["resolution"]).upper()

        if self.config["resolution"] not in self.spec.resolutions:
            raise ValueError(
                f"节点{self.node_name}: 传感器{self.spec.name}不支持分辨率"
                f"{self.config['resolution']}，可选: {', '.join(self.spec.resolutions)}"
            )

        if self.spec.color and self.config["preview_size"] <= 0:
            raise ValueError(f"节点{self.node_name}: preview_size必须大于0")

    def _setup_ports(self):
        if self.spec.color:
            self._add_output("preview", ChannelType.PREVIEW)
            self._add_output("video", ChannelType.VIDEO)
            self._add_output("isp", ChannelType.ISP)
        self._add_output("raw", ChannelType.RAW)

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["socket"] = socket_name(self.socket)
        data["sensor"] = self.spec.name
        return data
