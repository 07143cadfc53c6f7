"""
Camera Pipeline Generator
根据传感器清单和配置选择设备端处理拓扑，创建节点并连接
"""

from .core import (
    BaseNode, NodeType, ChannelType, Link, PipelineGraph,
    CameraBoardSocket, SensorInfo, SensorInventory,
    PipelineConfigError, UnknownConfigurationValue, UnsupportedTopology
)
from .pipeline import Topology, NeuralNetworkMode, PipelineGenerator, create_pipeline

__version__ = "0.1.0"

__all__ = [
    'BaseNode', 'NodeType', 'ChannelType', 'Link', 'PipelineGraph',
    'CameraBoardSocket', 'SensorInfo', 'SensorInventory',
    'PipelineConfigError', 'UnknownConfigurationValue', 'UnsupportedTopology',
    'Topology', 'NeuralNetworkMode', 'PipelineGenerator', 'create_pipeline'
]
