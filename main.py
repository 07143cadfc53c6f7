#!/usr/bin/env python3
"""
Camera Pipeline Generator 主程序
读取配置，生成设备端pipeline，注册并验证节点图
"""

import sys
import argparse
import logging
import yaml
from pathlib import Path

# 添加src目录到Python路径
sys.path.insert(0, str(Path(__file__).parent / "src"))

from camera_pipeline.config import check_config, load_config, inventory_from_config, merge_config, DEFAULT_CONFIG
from camera_pipeline.core.errors import PipelineConfigError
from camera_pipeline.core.graph import PipelineGraph
from camera_pipeline.pipeline.generator import PipelineGenerator


def setup_logging(level: str = "INFO"):
    """设置日志"""
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


def build_graph(config, logger: logging.Logger) -> PipelineGraph:
    """根据配置生成节点并注册到Graph"""
    check_config(config)
    camera = config["camera"]
    inventory = inventory_from_config(config)
    logger.info(f"设备传感器: {inventory}")

    generator = PipelineGenerator(logger, config.get("nodes") or {})
    nodes = generator.create_pipeline(
        inventory,
        camera["pipeline_type"],
        camera["nn_type"],
        camera["enable_imu"]
    )

    graph = PipelineGraph(str(camera["pipeline_type"]).lower(), logger)
    graph.add_nodes(nodes)
    if not graph.validate():
        raise PipelineConfigError("Graph验证失败")
    return graph


def print_summary(graph: PipelineGraph):
    """打印节点与连接"""
    print(f"=== {graph.graph_id} ===")
    for node_name in graph.node_order:
        node = graph.get_node(node_name)
        outputs = ", ".join(port.name for port in node.list_output_ports())
        print(f"  {node_name:<16} {node.node_type.value:<12} outputs: {outputs}")
    for source, target in graph.get_connections():
        print(f"  {source} -> {target}")


def main(argv=None) -> int:
    """主函数"""
    parser = argparse.ArgumentParser(description="Camera Pipeline Generator")
    parser.add_argument(
        "--config",
        type=str,
        help="配置文件路径"
    )
    parser.add_argument("--pipeline-type", type=str, help="覆盖camera.pipeline_type")
    parser.add_argument("--nn-type", type=str, help="覆盖camera.nn_type")
    parser.add_argument(
        "--imu",
        dest="enable_imu",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="覆盖camera.enable_imu"
    )
    parser.add_argument(
        "--dump",
        type=str,
        help="把Graph导出为YAML文件"
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="INFO",
        help="日志级别"
    )

    args = parser.parse_args(argv)

    setup_logging(args.log_level)
    logger = logging.getLogger("camera_pipeline")

    # 确定配置文件路径
    if args.config:
        config_path = Path(args.config)
    else:
        config_path = Path(__file__).parent / "configs" / "pipelines" / "oak_d.yaml"

    try:
        config = load_config(config_path) if config_path.exists() else merge_config(DEFAULT_CONFIG, {})
        if not config_path.exists():
            logger.warning(f"配置文件不存在: {config_path}，使用默认配置")

        if args.pipeline_type:
            config["camera"]["pipeline_type"] = args.pipeline_type
        if args.nn_type:
            config["camera"]["nn_type"] = args.nn_type
        if args.enable_imu is not None:
            config["camera"]["enable_imu"] = args.enable_imu

        graph = build_graph(config, logger)

    except (PipelineConfigError, ValueError) as e:
        logger.error(f"程序异常: {e}")
        return 1

    print_summary(graph)

    if args.dump:
        with open(args.dump, 'w', encoding='utf-8') as f:
            yaml.safe_dump(graph.to_dict(), f, sort_keys=False, allow_unicode=True)
        logger.info(f"Graph已导出: {args.dump}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
