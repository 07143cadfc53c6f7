"""
神经网络节点
"""

from .nn_wrapper import NeuralNetworkNode, NN_FAMILIES
from .spatial_nn_wrapper import SpatialNeuralNetworkNode

__all__ = [
    "NeuralNetworkNode",
    "SpatialNeuralNetworkNode",
    "NN_FAMILIES"
]
