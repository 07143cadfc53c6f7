"""
错误与诊断类型
致命错误直接抛出并中止pipeline构建；可恢复的诊断以WARNING日志输出
"""

from typing import Any, Optional


class PipelineConfigError(RuntimeError):
    """pipeline构建致命错误基类"""


class UnknownConfigurationValue(PipelineConfigError, ValueError):
    """配置字符串不在查找表中"""

    def __init__(self, value: Any, known_keys=None):
        self.value = value
        self.known_keys = sorted(known_keys) if known_keys else []
        message = f"未知的配置值: {value!r}"
        if self.known_keys:
            message += f" (可选: {', '.join(self.known_keys)})"
        super().__init__(message)


class UnsupportedTopology(PipelineConfigError):
    """拓扑无法构建：未知的pipeline类型或相机不支持"""

    def __init__(self, configuration: Optional[str], reason: str = ""):
        self.configuration = configuration
        message = ("UNKNOWN PIPELINE TYPE SPECIFIED/CAMERA DOESN'T SUPPORT GIVEN PIPELINE. "
                   f"Configuration: {configuration}")
        if reason:
            message += f" ({reason})"
        super().__init__(message)


class MissingSensor(PipelineConfigError):
    """拓扑需要的插槽不在传感器清单中"""

    def __init__(self, socket, node_name: str):
        self.socket = socket
        self.node_name = node_name
        super().__init__(f"节点{node_name}需要插槽{socket}，但设备上没有该传感器")


class UnsupportedSensor(PipelineConfigError):
    """传感器型号不在已知列表中"""

    def __init__(self, sensor_name: str):
        self.sensor_name = sensor_name
        super().__init__(f"不支持的传感器: {sensor_name}")


class LinkError(PipelineConfigError):
    """连接错误基类"""


class PortNotFound(LinkError):
    """节点没有指定端口"""

    def __init__(self, node_name: str, port_name: str, direction: str):
        self.node_name = node_name
        self.port_name = port_name
        self.direction = direction
        super().__init__(f"节点{node_name}没有{direction}端口{port_name}")


class LinkTypeMismatch(LinkError):
    """输出端口与输入端口的通道类型不一致"""

    def __init__(self, source, target):
        self.source = source
        self.target = target
        super().__init__(
            f"通道类型不匹配: {source} ({source.channel.value}) -> "
            f"{target} ({target.channel.value})"
        )


class PortAlreadyLinked(LinkError):
    """输入端口已被连接"""

    def __init__(self, target):
        self.target = target
        super().__init__(f"输入端口{target}已连接到{target.link.source}")


class PipelineWarning(UserWarning):
    """可恢复诊断基类，作为日志记录的extra字段输出"""


class TopologyCorrected(PipelineWarning):
    """请求的拓扑与传感器数量不匹配，已自动替换"""

    def __init__(self, requested, effective, sensor_count: int):
        self.requested = requested
        self.effective = effective
        self.sensor_count = sensor_count
        super().__init__(
            f"Wrong pipeline {requested.name} chosen for camera with {sensor_count} "
            f"sensor(s). Switching to {effective.name}."
        )


class NeuralNetworkModeMismatch(PipelineWarning):
    """请求了空间NN但拓扑中没有深度节点"""

    def __init__(self, topology, nn_mode, fallback=None):
        self.topology = topology
        self.nn_mode = nn_mode
        self.fallback = fallback
        message = f"{nn_mode.name} NN selected, but configuration is {topology.name}."
        if fallback is not None:
            message += f" Using {fallback.name} NN instead."
        super().__init__(message)
