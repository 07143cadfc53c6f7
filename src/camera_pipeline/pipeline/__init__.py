"""
Pipeline生成：配置映射、拓扑验证、节点构建与连接
"""

from .types import Topology, NeuralNetworkMode
from .name_mapper import PIPELINE_TYPE_MAP, NN_TYPE_MAP, resolve, resolve_topology, resolve_nn_mode
from .validator import validate_topology
from .linking import attach_inference, attach_spatial_inference
from .builder import BUILDERS, BuildContext, array_node_name, build
from .generator import PipelineGenerator, create_pipeline

__all__ = [
    "Topology",
    "NeuralNetworkMode",
    "PIPELINE_TYPE_MAP",
    "NN_TYPE_MAP",
    "resolve",
    "resolve_topology",
    "resolve_nn_mode",
    "validate_topology",
    "attach_inference",
    "attach_spatial_inference",
    "BUILDERS",
    "BuildContext",
    "array_node_name",
    "build",
    "PipelineGenerator",
    "create_pipeline"
]
