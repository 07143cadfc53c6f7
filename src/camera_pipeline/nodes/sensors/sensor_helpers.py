"""
传感器列表：已知的传感器型号及支持的分辨率
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Tuple

from ...core.errors import UnsupportedSensor


@dataclass(frozen=True)
class SensorSpec:
    """传感器型号描述"""
    name: str
    color: bool
    resolutions: Tuple[str, ...]

    @property
    def default_resolution(self) -> str:
        return self.resolutions[0]


_SENSORS = [
    SensorSpec("IMX378", True, ("1080P", "4K", "12MP")),
    SensorSpec("IMX214", True, ("1080P", "4K", "13MP")),
    SensorSpec("IMX412", True, ("1080P", "4K", "12MP")),
    SensorSpec("IMX477", True, ("1080P", "4K", "12MP")),
    SensorSpec("IMX577", True, ("1080P", "4K", "12MP")),
    SensorSpec("IMX582", True, ("1080P", "4K", "12MP", "48MP")),
    SensorSpec("LCM48", True, ("1080P", "4K", "12MP", "48MP")),
    SensorSpec("AR0234", True, ("1200P",)),
    SensorSpec("OV9782", True, ("800P", "720P")),
    SensorSpec("OV9282", False, ("800P", "720P", "400P")),
    SensorSpec("OV9281", False, ("800P", "720P", "400P")),
    SensorSpec("OV7251", False, ("480P", "400P")),
    SensorSpec("OV7750", False, ("480P", "400P")),
]

# 导入后只读
AVAILABLE_SENSORS = MappingProxyType({spec.name: spec for spec in _SENSORS})


def get_sensor_spec(sensor_name: str) -> SensorSpec:
    """按名称查找传感器型号 (大小写不敏感)"""
    key = str(sensor_name).upper()
    if key not in AVAILABLE_SENSORS:
        raise UnsupportedSensor(sensor_name)
    return AVAILABLE_SENSORS[key]
