"""
节点基类：定义所有设备端处理节点的通用接口
每个节点有稳定的名称、带类型的输入输出端口，以及可选的子节点
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Dict, List, Optional

from .errors import PortNotFound
from .link import ChannelType, InputPort, Link, OutputPort, connect


class NodeType(Enum):
    """节点角色枚举"""
    SENSOR = "sensor"
    STEREO = "stereo"
    NN = "nn"
    SPATIAL_NN = "spatial_nn"
    IMU = "imu"


class BaseNode(ABC):
    """设备端处理节点基类"""

    def __init__(
        self,
        node_name: str,
        node_type: NodeType,
        config: Optional[Dict[str, Any]] = None
    ):
        """
        初始化节点

        Args:
            node_name: 节点名称，用于后续注册和话题命名
            node_type: 节点角色
            config: 配置参数
        """
        self.node_name = node_name
        self.node_type = node_type
        self.config = dict(config or {})

        # 输入输出端口
        self.input_ports: Dict[str, InputPort] = {}
        self.output_ports: Dict[str, OutputPort] = {}

        # 节点内部持有的子节点 (例如双目深度节点的左右相机)
        self.sub_nodes: List["BaseNode"] = []

        self._set_default_config()
        self._validate_config()
        self._setup_ports()

    def _set_default_config(self):
        """设置默认配置"""
        pass

    def _validate_config(self):
        """验证配置参数"""
        pass

    @abstractmethod
    def _setup_ports(self):
        """声明输入输出端口"""
        pass

    def _add_input(self, name: str, channel: ChannelType) -> InputPort:
        port = InputPort(name, channel, self)
        self.input_ports[name] = port
        return port

    def _add_output(self, name: str, channel: ChannelType) -> OutputPort:
        port = OutputPort(name, channel, self)
        self.output_ports[name] = port
        return port

    def get_input(self, port_name: Optional[str] = None) -> InputPort:
        """
        获取输入端口

        Args:
            port_name: 端口名，为空时返回唯一的输入端口

        Returns:
            输入端口
        """
        if port_name is None:
            if len(self.input_ports) != 1:
                raise PortNotFound(self.node_name, "<default>", "input")
            return next(iter(self.input_ports.values()))
        if port_name not in self.input_ports:
            raise PortNotFound(self.node_name, port_name, "input")
        return self.input_ports[port_name]

    def get_output(self, port_name: str) -> OutputPort:
        """获取输出端口"""
        if port_name not in self.output_ports:
            raise PortNotFound(self.node_name, port_name, "output")
        return self.output_ports[port_name]

    def link(self, target: InputPort, output_name: Optional[str] = None) -> Link:
        """
        把本节点的输出端口连接到另一个节点的输入端口

        Args:
            target: 目标输入端口
            output_name: 输出端口名，为空时按目标端口的通道类型选择

        Returns:
            建立的Link
        """
        if output_name is None:
            candidates = [p for p in self.output_ports.values() if p.channel == target.channel]
            if not candidates:
                raise PortNotFound(self.node_name, target.channel.value, "output")
            source = candidates[0]
        else:
            source = self.get_output(output_name)
        return connect(source, target)

    def list_input_ports(self) -> List[InputPort]:
        return list(self.input_ports.values())

    def list_output_ports(self) -> List[OutputPort]:
        return list(self.output_ports.values())

    def get_links(self) -> List[Link]:
        """本节点输入端口上的所有连接"""
        return [port.link for port in self.input_ports.values() if port.link is not None]

    def is_wired(self) -> bool:
        """所有输入端口都已连接"""
        return all(port.is_linked for port in self.input_ports.values())

    def to_dict(self) -> Dict[str, Any]:
        """转换为字典格式"""
        return {
            "type": self.node_type.value,
            "class": self.__class__.__name__,
            "config": self.config,
            "inputs": {name: port.channel.value for name, port in self.input_ports.items()},
            "outputs": {name: port.channel.value for name, port in self.output_ports.items()},
            "sub_nodes": [node.node_name for node in self.sub_nodes],
        }

    def __repr__(self) -> str:
        return (f"{self.__class__.__name__}(name={self.node_name}, "
                f"type={self.node_type.value})")
