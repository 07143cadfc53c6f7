"""
核心模块
包含节点基类、端口与连接、传感器清单、节点图和错误类型
"""

from .errors import (
    PipelineConfigError, UnknownConfigurationValue, UnsupportedTopology,
    MissingSensor, UnsupportedSensor, LinkError, PortNotFound, LinkTypeMismatch,
    PortAlreadyLinked, PipelineWarning, TopologyCorrected, NeuralNetworkModeMismatch
)
from .link import ChannelType, Port, InputPort, OutputPort, Link, connect
from .node import BaseNode, NodeType
from .sensor import CameraBoardSocket, SensorInfo, SensorInventory, socket_key, socket_name
from .graph import PipelineGraph

__all__ = [
    'PipelineConfigError', 'UnknownConfigurationValue', 'UnsupportedTopology',
    'MissingSensor', 'UnsupportedSensor', 'LinkError', 'PortNotFound', 'LinkTypeMismatch',
    'PortAlreadyLinked', 'PipelineWarning', 'TopologyCorrected', 'NeuralNetworkModeMismatch',
    'ChannelType', 'Port', 'InputPort', 'OutputPort', 'Link', 'connect',
    'BaseNode', 'NodeType',
    'CameraBoardSocket', 'SensorInfo', 'SensorInventory', 'socket_key', 'socket_name',
    'PipelineGraph'
]
