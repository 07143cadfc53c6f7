"""
Pipeline配置枚举
"""

from enum import Enum


class Topology(Enum):
    """支持的相机拓扑"""
    RGB = "rgb"                 # 仅彩色
    RGBD = "rgbd"               # 彩色 + 双目深度
    RGB_STEREO = "rgb_stereo"   # 彩色 + 原始双目
    STEREO = "stereo"           # 仅原始双目
    DEPTH = "depth"             # 仅双目深度
    CAM_ARRAY = "cam_array"     # 每个传感器一个采集节点
    RAE = "rae"                 # 固定5传感器平台: 彩色 + 前后双目


class NeuralNetworkMode(Enum):
    """神经网络附加模式"""
    NONE = "none"
    RGB = "rgb"
    SPATIAL = "spatial"
