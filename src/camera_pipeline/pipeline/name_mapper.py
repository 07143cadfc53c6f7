"""
配置字符串到枚举的映射
查找表在导入时创建，之后只读
"""

from types import MappingProxyType
from typing import Any, Mapping, TypeVar

from ..core.errors import UnknownConfigurationValue
from .types import NeuralNetworkMode, Topology

E = TypeVar("E")

PIPELINE_TYPE_MAP: Mapping[str, Topology] = MappingProxyType({
    "RGB": Topology.RGB,
    "RGBD": Topology.RGBD,
    "RGBSTEREO": Topology.RGB_STEREO,
    "STEREO": Topology.STEREO,
    "DEPTH": Topology.DEPTH,
    "CAMARRAY": Topology.CAM_ARRAY,
    "RAE": Topology.RAE,
})

NN_TYPE_MAP: Mapping[str, NeuralNetworkMode] = MappingProxyType({
    "NONE": NeuralNetworkMode.NONE,
    "RGB": NeuralNetworkMode.RGB,
    "SPATIAL": NeuralNetworkMode.SPATIAL,
})


def resolve(raw: Any, table: Mapping[str, E]) -> E:
    """
    大小写不敏感地解析配置值

    Args:
        raw: 配置字符串
        table: 大写键 -> 枚举值的查找表

    Returns:
        对应的枚举值
    """
    if not isinstance(raw, str):
        raise UnknownConfigurationValue(raw, table.keys())

    key = raw.upper()
    if key not in table:
        raise UnknownConfigurationValue(raw, table.keys())
    return table[key]


def resolve_topology(raw: Any) -> Topology:
    return resolve(raw, PIPELINE_TYPE_MAP)


def resolve_nn_mode(raw: Any) -> NeuralNetworkMode:
    return resolve(raw, NN_TYPE_MAP)
