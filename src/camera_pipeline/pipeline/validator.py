"""
拓扑验证：根据传感器数量检查拓扑是否可实现，不可实现时替换为安全的默认拓扑
"""

import logging
from typing import Optional, Tuple

from ..core.errors import TopologyCorrected, UnsupportedTopology
from .types import Topology

logger = logging.getLogger(__name__)

# 传感器数量 -> (允许的拓扑, 替换拓扑)
_SINGLE_SENSOR = ((Topology.RGB,), Topology.RGB)
_STEREO_PAIR = ((Topology.STEREO, Topology.DEPTH), Topology.STEREO)
_MULTI_SENSOR = ((Topology.CAM_ARRAY, Topology.RAE), Topology.CAM_ARRAY)


def _rule_for(sensor_count: int):
    if sensor_count == 1:
        return _SINGLE_SENSOR
    if sensor_count == 2:
        return _STEREO_PAIR
    if sensor_count == 3:
        return None
    return _MULTI_SENSOR


def validate_topology(
    requested: Topology,
    sensor_count: int,
    log: Optional[logging.Logger] = None
) -> Tuple[Topology, bool]:
    """
    验证拓扑

    Args:
        requested: 请求的拓扑
        sensor_count: 设备上的传感器数量
        log: 日志对象

    Returns:
        (实际使用的拓扑, 是否被替换)
    """
    log = log or logger

    if sensor_count < 1:
        raise UnsupportedTopology(requested.name, "device reports no camera sensors")

    rule = _rule_for(sensor_count)
    if rule is None:
        return requested, False

    allowed, fallback = rule
    if requested in allowed:
        return requested, False

    diagnostic = TopologyCorrected(requested, fallback, sensor_count)
    log.warning(str(diagnostic), extra={"diagnostic": diagnostic})
    return fallback, True
