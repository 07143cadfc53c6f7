"""
PipelineGenerator：解析配置、验证拓扑、构建节点并附加IMU
"""

import logging
from typing import Any, Dict, List, Optional

from ..core.errors import PipelineConfigError
from ..core.node import BaseNode
from ..core.sensor import SensorInventory
from ..nodes.imu import InertialNode
from . import builder
from .name_mapper import resolve_nn_mode, resolve_topology
from .validator import validate_topology


class PipelineGenerator:
    """设备端pipeline生成器"""

    def __init__(
        self,
        logger: Optional[logging.Logger] = None,
        node_configs: Optional[Dict[str, Dict[str, Any]]] = None
    ):
        """
        Args:
            logger: 诊断输出使用的日志对象
            node_configs: 节点名 -> 配置覆盖
        """
        self.logger = logger or logging.getLogger(__name__)
        self.node_configs = node_configs or {}

    def create_pipeline(
        self,
        inventory: SensorInventory,
        pipeline_type: str,
        nn_type: str = "none",
        enable_imu: bool = False
    ) -> List[BaseNode]:
        """
        创建pipeline节点

        Args:
            inventory: 设备传感器清单
            pipeline_type: 拓扑配置字符串 (大小写不敏感)
            nn_type: NN模式配置字符串 (大小写不敏感)
            enable_imu: 是否附加IMU节点

        Returns:
            有序的节点列表，所有权交给调用方
        """
        self.logger.info(f"Pipeline type: {pipeline_type}")
        try:
            if not isinstance(inventory, SensorInventory):
                inventory = SensorInventory(inventory)

            requested = resolve_topology(pipeline_type)
            topology, _ = validate_topology(requested, len(inventory), self.logger)
            self.logger.info(f"Topology: {topology.name} ({len(inventory)} sensor(s))")
            nn_mode = resolve_nn_mode(nn_type)

            nodes = builder.build(
                topology,
                nn_mode,
                inventory,
                raw_topology=pipeline_type,
                log=self.logger,
                node_configs=self.node_configs
            )

            if enable_imu:
                nodes.append(InertialNode("imu", self.node_configs.get("imu")))

        except (PipelineConfigError, ValueError) as e:
            self.logger.error(f"Pipeline创建失败: {e}")
            raise

        self.logger.info(f"Finished setting up pipeline: {', '.join(n.node_name for n in nodes)}")
        return nodes


def create_pipeline(
    inventory,
    pipeline_type: str,
    nn_type: str = "none",
    enable_imu: bool = False,
    logger: Optional[logging.Logger] = None
) -> List[BaseNode]:
    """便捷函数，见PipelineGenerator.create_pipeline"""
    return PipelineGenerator(logger).create_pipeline(inventory, pipeline_type, nn_type, enable_imu)
