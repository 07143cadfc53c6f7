"""
配置加载：YAML文件中的camera段、传感器清单和节点配置
"""

import copy
import logging
from pathlib import Path
from typing import Any, Dict, Union

import yaml

from .core.errors import PipelineConfigError
from .core.sensor import SensorInventory

logger = logging.getLogger(__name__)

DEFAULT_CONFIG: Dict[str, Any] = {
    "camera": {
        "pipeline_type": "RGBD",
        "nn_type": "none",
        "enable_imu": True,
    },
    "sensors": [],
    "nodes": {},
}


def merge_config(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """递归合并配置，override优先"""
    merged = copy.deepcopy(base)
    for key, value in (override or {}).items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = merge_config(merged[key], value)
        else:
            merged[key] = copy.deepcopy(value)
    return merged


def load_config(config_path: Union[str, Path]) -> Dict[str, Any]:
    """
    加载配置文件

    Args:
        config_path: YAML文件路径

    Returns:
        与默认配置合并后的配置字典
    """
    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise PipelineConfigError(f"加载配置文件失败: {config_path}: {e}") from e

    if not isinstance(data, dict):
        raise PipelineConfigError(f"配置文件格式错误: {config_path}")

    config = merge_config(DEFAULT_CONFIG, data)
    check_config(config, config_path)
    logger.debug(f"加载配置: {config_path}")
    return config


def check_config(config: Dict[str, Any], source: Union[str, Path] = "<config>"):
    """检查各配置段的类型"""
    for section, expected in (("camera", dict), ("sensors", list), ("nodes", dict)):
        if not isinstance(config.get(section), expected):
            raise PipelineConfigError(
                f"配置文件格式错误: {source}: {section}必须是{expected.__name__}"
            )

    for node_name, node_config in config["nodes"].items():
        if not isinstance(node_config, dict):
            raise PipelineConfigError(f"配置文件格式错误: {source}: nodes.{node_name}必须是dict")


def inventory_from_config(config: Dict[str, Any]) -> SensorInventory:
    """从配置的sensors列表创建传感器清单"""
    sensors = config.get("sensors") or []
    try:
        return SensorInventory.from_config(sensors)
    except (KeyError, TypeError, ValueError) as e:
        raise PipelineConfigError(f"传感器配置错误: {e}") from e
