"""
传感器清单：设备枚举得到的插槽与传感器元数据
清单由调用方提供，核心逻辑只读取
插槽是不透明的标识：板载插槽解析为CameraBoardSocket，其他值原样保留
"""

from collections import OrderedDict
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Hashable, Iterable, Iterator, Mapping, Optional, Tuple, Union

import numpy as np


class CameraBoardSocket(Enum):
    """板载相机插槽枚举"""
    CAM_A = 0
    CAM_B = 1
    CAM_C = 2
    CAM_D = 3
    CAM_E = 4
    CAM_F = 5
    CAM_G = 6
    CAM_H = 7

    # 别名
    RGB = 0
    LEFT = 1
    RIGHT = 2

    @classmethod
    def parse(cls, value: Union[str, int, "CameraBoardSocket"]) -> "CameraBoardSocket":
        """从名称或编号解析板载插槽，未知值报错"""
        if isinstance(value, cls):
            return value
        if isinstance(value, int):
            return cls(value)
        try:
            return cls[str(value).strip().upper()]
        except KeyError:
            raise ValueError(f"未知的插槽: {value}") from None


def socket_key(value: Any) -> Hashable:
    """
    规范化插槽标识

    Args:
        value: CameraBoardSocket、名称、编号或其他可哈希的标识

    Returns:
        板载插槽返回CameraBoardSocket，其他标识原样返回
    """
    if isinstance(value, CameraBoardSocket):
        return value
    if isinstance(value, bool) or value is None:
        raise ValueError(f"无效的插槽: {value!r}")
    if isinstance(value, int):
        try:
            return CameraBoardSocket(value)
        except ValueError:
            return value
    if isinstance(value, str):
        key = value.strip()
        if not key:
            raise ValueError("插槽名称不能为空")
        try:
            return CameraBoardSocket[key.upper()]
        except KeyError:
            return key
    try:
        hash(value)
    except TypeError:
        raise ValueError(f"插槽标识必须可哈希: {value!r}") from None
    return value


def socket_name(socket: Hashable) -> str:
    """插槽的显示名称"""
    if isinstance(socket, CameraBoardSocket):
        return socket.name
    return str(socket)


@dataclass
class SensorInfo:
    """单个传感器的元数据"""
    socket: Hashable
    name: str
    # 相对CAM_A的平移(cm)，来自标定数据
    translation: Optional[np.ndarray] = None
    metadata: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        self.socket = socket_key(self.socket)
        self.name = str(self.name).upper()
        if self.translation is not None:
            self.translation = np.asarray(self.translation, dtype=float)
            if self.translation.shape != (3,):
                raise ValueError(f"translation必须是3维向量: {self.translation.shape}")


class SensorInventory:
    """有序的插槽 -> 传感器映射，顺序即设备枚举顺序"""

    def __init__(self, sensors: Union[Mapping, Iterable, None] = None):
        self._sensors: "OrderedDict[Hashable, SensorInfo]" = OrderedDict()
        if sensors is None:
            return
        items = sensors.items() if isinstance(sensors, Mapping) else sensors
        for item in items:
            if isinstance(item, SensorInfo):
                info = item
            else:
                socket, value = item
                info = value if isinstance(value, SensorInfo) else SensorInfo(socket, value)
            if info.socket in self._sensors:
                raise ValueError(f"重复的插槽: {socket_name(info.socket)}")
            self._sensors[info.socket] = info

    @classmethod
    def from_config(cls, sensors_config: Iterable[Dict[str, Any]]) -> "SensorInventory":
        """从配置列表创建，每项包含socket, name, 可选translation"""
        sensors = []
        for entry in sensors_config:
            sensors.append(SensorInfo(
                socket=entry["socket"],
                name=entry["name"],
                translation=entry.get("translation"),
                metadata={k: v for k, v in entry.items() if k not in ("socket", "name", "translation")}
            ))
        return cls(sensors)

    def get(self, socket: Any) -> Optional[SensorInfo]:
        try:
            return self._sensors.get(socket_key(socket))
        except ValueError:
            return None

    def sockets(self):
        return list(self._sensors.keys())

    def items(self) -> Iterator[Tuple[Hashable, SensorInfo]]:
        return iter(self._sensors.items())

    def __contains__(self, socket) -> bool:
        return self.get(socket) is not None

    def __iter__(self) -> Iterator[SensorInfo]:
        return iter(self._sensors.values())

    def __len__(self) -> int:
        return len(self._sensors)

    def __repr__(self) -> str:
        sensors = ", ".join(f"{socket_name(s)}: {info.name}" for s, info in self._sensors.items())
        return f"SensorInventory({sensors})"
