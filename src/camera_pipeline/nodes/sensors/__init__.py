"""
传感器采集节点
"""

from .sensor_helpers import SensorSpec, AVAILABLE_SENSORS, get_sensor_spec
from .sensor_wrapper import SensorCaptureNode

__all__ = [
    "SensorSpec",
    "AVAILABLE_SENSORS",
    "get_sensor_spec",
    "SensorCaptureNode"
]
