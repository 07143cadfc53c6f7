"""
端口与连接：节点之间的有向、带类型的数据连接
连接在构建时建立，之后不可修改
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, TYPE_CHECKING

from .errors import LinkTypeMismatch, PortAlreadyLinked

if TYPE_CHECKING:
    from .node import BaseNode


class ChannelType(Enum):
    """数据通道类型枚举"""
    PREVIEW = "preview"
    VIDEO = "video"
    ISP = "isp"
    RAW = "raw"
    DEPTH = "depth"
    DETECTIONS = "detections"
    SPATIAL_DETECTIONS = "spatial_detections"
    IMU = "imu"


class Port:
    """端口基类"""

    direction = ""

    def __init__(self, name: str, channel: ChannelType, owner: "BaseNode"):
        self.name = name
        self.channel = channel
        self.owner = owner

    @property
    def key(self) -> str:
        return f"{self.owner.node_name}:{self.name}"

    def __str__(self) -> str:
        return self.key

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.key}, channel={self.channel.value})"


class OutputPort(Port):
    """输出端口，可以连接任意多个输入端口"""

    direction = "output"


class InputPort(Port):
    """输入端口，只接受一个同类型的连接"""

    direction = "input"

    def __init__(self, name: str, channel: ChannelType, owner: "BaseNode"):
        super().__init__(name, channel, owner)
        self.link: Optional["Link"] = None

    @property
    def is_linked(self) -> bool:
        return self.link is not None


@dataclass(frozen=True)
class Link:
    """有向连接: source输出端口 -> target输入端口"""
    source: OutputPort
    target: InputPort

    @property
    def channel(self) -> ChannelType:
        return self.source.channel

    def as_tuple(self):
        return (self.source.key, self.target.key)

    def __str__(self) -> str:
        return f"{self.source.key} -> {self.target.key} [{self.channel.value}]"


def connect(source: OutputPort, target: InputPort) -> Link:
    """
    建立连接

    Args:
        source: 源节点输出端口
        target: 目标节点输入端口

    Returns:
        新建立的Link
    """
    if source.channel != target.channel:
        raise LinkTypeMismatch(source, target)
    if target.is_linked:
        raise PortAlreadyLinked(target)

    link = Link(source=source, target=target)
    target.link = link
    return link
