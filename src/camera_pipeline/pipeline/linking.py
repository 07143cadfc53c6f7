"""
神经网络节点的创建与连接
"""

from typing import Any, Dict, Optional

from ..core.node import BaseNode
from ..nodes.nn.nn_wrapper import NeuralNetworkNode
from ..nodes.nn.spatial_nn_wrapper import SpatialNeuralNetworkNode


def attach_inference(
    color_node: BaseNode,
    node_name: str = "nn",
    config: Optional[Dict[str, Any]] = None
) -> NeuralNetworkNode:
    """
    创建推理节点并连接到彩色节点的preview输出

    Args:
        color_node: 彩色采集节点
        node_name: 推理节点名称
        config: 推理节点配置

    Returns:
        已连接的推理节点
    """
    nn = NeuralNetworkNode(node_name, config)
    color_node.link(nn.get_input(), "preview")
    return nn


def attach_spatial_inference(
    color_node: BaseNode,
    depth_node: BaseNode,
    node_name: str = "nn",
    config: Optional[Dict[str, Any]] = None
) -> SpatialNeuralNetworkNode:
    """
    创建空间推理节点，image输入连接彩色preview，depth输入连接深度输出

    两个输入都连接成功后才返回节点
    """
    nn = SpatialNeuralNetworkNode(node_name, config)
    color_node.link(nn.get_input("input"), "preview")
    depth_node.link(nn.get_input("input_depth"), "depth")
    return nn
