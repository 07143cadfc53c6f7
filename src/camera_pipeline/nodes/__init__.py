"""
设备端处理节点模块
包含采集、双目深度、神经网络和IMU节点
"""

# 采集节点
from .sensors.sensor_wrapper import SensorCaptureNode

# 派生节点
from .stereo import StereoDepthNode
from .nn.nn_wrapper import NeuralNetworkNode
from .nn.spatial_nn_wrapper import SpatialNeuralNetworkNode

# 辅助节点
from .imu import InertialNode

__all__ = [
    'SensorCaptureNode',
    'StereoDepthNode',
    'NeuralNetworkNode',
    'SpatialNeuralNetworkNode',
    'InertialNode'
]
