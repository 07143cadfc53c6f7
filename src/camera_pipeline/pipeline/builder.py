"""
拓扑构建：按(拓扑, NN模式)查表得到构建函数，创建节点并连接
构建过程中出错时直接抛出，不返回部分节点
"""

import logging
import string
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple

from ..core.errors import MissingSensor, NeuralNetworkModeMismatch, UnsupportedTopology
from ..core.node import BaseNode
from ..core.sensor import CameraBoardSocket, SensorInfo, SensorInventory, socket_name
from ..nodes.sensors.sensor_wrapper import SensorCaptureNode
from ..nodes.stereo import StereoDepthNode
from .linking import attach_inference, attach_spatial_inference
from .types import NeuralNetworkMode, Topology

logger = logging.getLogger(__name__)

ALPHABET = string.ascii_lowercase


@dataclass
class BuildContext:
    """单次构建的输入"""
    topology: Topology
    nn_mode: NeuralNetworkMode
    inventory: SensorInventory
    logger: logging.Logger = logger
    # 节点名 -> 配置覆盖
    node_configs: Dict[str, Dict[str, Any]] = field(default_factory=dict)

    def sensor(self, socket: CameraBoardSocket, node_name: str) -> SensorInfo:
        info = self.inventory.get(socket)
        if info is None:
            raise MissingSensor(socket_name(socket), node_name)
        return info

    def config_for(self, node_name: str) -> Dict[str, Any]:
        return dict(self.node_configs.get(node_name, {}))


BuildFn = Callable[[BuildContext], List[BaseNode]]


def array_node_name(index: int) -> str:
    """
    相机阵列节点命名：a..z, aa..zz, aaa..

    Args:
        index: 从0开始的传感器序号
    """
    if index < 0:
        raise ValueError(f"序号不能为负: {index}")
    return ALPHABET[index % len(ALPHABET)] * (index // len(ALPHABET) + 1)


def _capture(ctx: BuildContext, node_name: str, socket: CameraBoardSocket) -> SensorCaptureNode:
    return SensorCaptureNode(node_name, ctx.sensor(socket, node_name), ctx.config_for(node_name))


def _stereo(
    ctx: BuildContext,
    node_name: str = "stereo",
    left_name: str = "left",
    right_name: str = "right",
    left_socket: CameraBoardSocket = CameraBoardSocket.CAM_B,
    right_socket: CameraBoardSocket = CameraBoardSocket.CAM_C
) -> StereoDepthNode:
    return StereoDepthNode(
        node_name,
        ctx.sensor(left_socket, left_name),
        ctx.sensor(right_socket, right_name),
        left_name=left_name,
        right_name=right_name,
        config=ctx.config_for(node_name),
        left_config=ctx.config_for(left_name),
        right_config=ctx.config_for(right_name)
    )


def _find(nodes: List[BaseNode], node_name: str) -> BaseNode:
    for node in nodes:
        if node.node_name == node_name:
            return node
    raise KeyError(node_name)


# 各拓扑的基础节点集合

def _build_rgb(ctx: BuildContext) -> List[BaseNode]:
    return [_capture(ctx, "rgb", CameraBoardSocket.CAM_A)]


def _build_rgbd(ctx: BuildContext) -> List[BaseNode]:
    return [_capture(ctx, "rgb", CameraBoardSocket.CAM_A), _stereo(ctx)]


def _build_rgb_stereo(ctx: BuildContext) -> List[BaseNode]:
    return [
        _capture(ctx, "rgb", CameraBoardSocket.CAM_A),
        _capture(ctx, "left", CameraBoardSocket.CAM_B),
        _capture(ctx, "right", CameraBoardSocket.CAM_C),
    ]


def _build_stereo(ctx: BuildContext) -> List[BaseNode]:
    return [
        _capture(ctx, "left", CameraBoardSocket.CAM_B),
        _capture(ctx, "right", CameraBoardSocket.CAM_C),
    ]


def _build_depth(ctx: BuildContext) -> List[BaseNode]:
    return [_stereo(ctx)]


def _build_cam_array(ctx: BuildContext) -> List[BaseNode]:
    nodes = []
    for index, info in enumerate(ctx.inventory):
        name = array_node_name(index)
        nodes.append(SensorCaptureNode(name, info, ctx.config_for(name)))
    return nodes


def _build_rae(ctx: BuildContext) -> List[BaseNode]:
    return [
        _capture(ctx, "rgb", CameraBoardSocket.CAM_A),
        _stereo(ctx, "stereo_front", "left_front", "right_front",
                CameraBoardSocket.CAM_B, CameraBoardSocket.CAM_C),
        _stereo(ctx, "stereo_back", "left_back", "right_back",
                CameraBoardSocket.CAM_D, CameraBoardSocket.CAM_E),
    ]


# NN附加方式

def _with_nn(base: BuildFn) -> BuildFn:
    def build(ctx: BuildContext) -> List[BaseNode]:
        nodes = base(ctx)
        nodes.append(attach_inference(_find(nodes, "rgb"), config=ctx.config_for("nn")))
        return nodes
    return build


def _with_spatial_nn(base: BuildFn) -> BuildFn:
    def build(ctx: BuildContext) -> List[BaseNode]:
        nodes = base(ctx)
        nodes.append(attach_spatial_inference(
            _find(nodes, "rgb"), _find(nodes, "stereo"), config=ctx.config_for("nn")
        ))
        return nodes
    return build


def _with_degraded_nn(base: BuildFn) -> BuildFn:
    """没有深度节点时，空间NN降级为普通NN"""
    plain = _with_nn(base)

    def build(ctx: BuildContext) -> List[BaseNode]:
        diagnostic = NeuralNetworkModeMismatch(ctx.topology, ctx.nn_mode, NeuralNetworkMode.RGB)
        ctx.logger.warning(str(diagnostic), extra={"diagnostic": diagnostic})
        return plain(ctx)
    return build


def _without_nn(base: BuildFn) -> BuildFn:
    def build(ctx: BuildContext) -> List[BaseNode]:
        if ctx.nn_mode != NeuralNetworkMode.NONE:
            ctx.logger.info(f"{ctx.topology.name}不支持NN，忽略NN模式{ctx.nn_mode.name}")
        return base(ctx)
    return build


def _make_table() -> Mapping[Tuple[Topology, NeuralNetworkMode], BuildFn]:
    table: Dict[Tuple[Topology, NeuralNetworkMode], BuildFn] = {
        (Topology.RGB, NeuralNetworkMode.NONE): _build_rgb,
        (Topology.RGB, NeuralNetworkMode.RGB): _with_nn(_build_rgb),
        (Topology.RGB, NeuralNetworkMode.SPATIAL): _with_degraded_nn(_build_rgb),

        (Topology.RGBD, NeuralNetworkMode.NONE): _build_rgbd,
        (Topology.RGBD, NeuralNetworkMode.RGB): _with_nn(_build_rgbd),
        (Topology.RGBD, NeuralNetworkMode.SPATIAL): _with_spatial_nn(_build_rgbd),

        (Topology.RGB_STEREO, NeuralNetworkMode.NONE): _build_rgb_stereo,
        (Topology.RGB_STEREO, NeuralNetworkMode.RGB): _with_nn(_build_rgb_stereo),
        (Topology.RGB_STEREO, NeuralNetworkMode.SPATIAL): _with_degraded_nn(_build_rgb_stereo),
    }

    for topology, base in ((Topology.STEREO, _build_stereo),
                           (Topology.DEPTH, _build_depth),
                           (Topology.CAM_ARRAY, _build_cam_array),
                           (Topology.RAE, _build_rae)):
        for mode in NeuralNetworkMode:
            table[(topology, mode)] = _without_nn(base)

    return MappingProxyType(table)


BUILDERS = _make_table()


def build(
    topology: Topology,
    nn_mode: NeuralNetworkMode,
    inventory: SensorInventory,
    raw_topology: Optional[str] = None,
    log: Optional[logging.Logger] = None,
    node_configs: Optional[Dict[str, Dict[str, Any]]] = None,
    builders: Mapping[Tuple[Topology, NeuralNetworkMode], BuildFn] = BUILDERS
) -> List[BaseNode]:
    """
    构建拓扑对应的节点集合

    Args:
        topology: 已验证的拓扑
        nn_mode: NN模式
        inventory: 传感器清单
        raw_topology: 原始配置字符串，用于错误信息
        log: 日志对象
        node_configs: 节点名 -> 配置覆盖
        builders: 构建函数表

    Returns:
        有序的节点列表，源节点在前
    """
    build_fn = builders.get((topology, nn_mode))
    if build_fn is None:
        configuration = raw_topology if raw_topology is not None else getattr(topology, "name", topology)
        raise UnsupportedTopology(configuration)

    ctx = BuildContext(
        topology=topology,
        nn_mode=nn_mode,
        inventory=inventory,
        logger=log or logger,
        node_configs=node_configs or {}
    )
    return build_fn(ctx)
