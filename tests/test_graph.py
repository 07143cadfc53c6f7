#!/usr/bin/env python3
"""
PipelineGraph测试
"""

import sys
import unittest
from pathlib import Path

# 添加src目录到Python路径
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from camera_pipeline.core.graph import PipelineGraph
from camera_pipeline.core.node import NodeType
from camera_pipeline.core.sensor import SensorInventory
from camera_pipeline.nodes import NeuralNetworkNode
from camera_pipeline.pipeline.generator import create_pipeline


def oak_d_nodes(nn_type="spatial", enable_imu=True):
    inventory = SensorInventory([("CAM_A", "IMX378"), ("CAM_B", "OV9282"), ("CAM_C", "OV9282")])
    return create_pipeline(inventory, "RGBD", nn_type, enable_imu)


class TestPipelineGraph(unittest.TestCase):
    """测试PipelineGraph"""

    def setUp(self):
        self.graph = PipelineGraph("test_graph")

    def test_graph_creation(self):
        self.assertEqual(self.graph.graph_id, "test_graph")
        self.assertEqual(len(self.graph.nodes), 0)
        self.assertFalse(self.graph._is_validated)

    def test_register_with_sub_nodes(self):
        """子节点一起注册"""
        self.assertEqual(self.graph.add_nodes(oak_d_nodes()), 4)
        self.assertEqual(set(self.graph.nodes), {"rgb", "left", "right", "stereo", "nn", "imu"})
        self.assertEqual(len(self.graph.get_nodes_by_type(NodeType.SENSOR)), 3)

    def test_duplicate_node(self):
        nodes = oak_d_nodes()
        self.assertTrue(self.graph.add_node(nodes[0]))
        self.assertFalse(self.graph.add_node(nodes[0]))

    def test_validate(self):
        self.graph.add_nodes(oak_d_nodes())
        self.assertTrue(self.graph.validate())
        self.assertTrue(self.graph._is_validated)

        self.assertEqual(sorted(self.graph.get_connections()), [
            ("left:raw", "stereo:left"),
            ("rgb:preview", "nn:input"),
            ("right:raw", "stereo:right"),
            ("stereo:depth", "nn:input_depth"),
        ])

        order = self.graph.node_order
        self.assertLess(order.index("left"), order.index("stereo"))
        self.assertLess(order.index("right"), order.index("stereo"))
        self.assertLess(order.index("stereo"), order.index("nn"))
        self.assertLess(order.index("rgb"), order.index("nn"))

    def test_unwired_input(self):
        self.graph.add_node(NeuralNetworkNode("nn"))
        self.assertFalse(self.graph.validate())

    def test_unregistered_source(self):
        """连接的源节点必须注册"""
        nodes = oak_d_nodes(nn_type="rgb", enable_imu=False)
        nn = nodes[-1]
        self.graph.add_node(nn)
        self.assertFalse(self.graph.validate())

    def test_cycle(self):
        first = NeuralNetworkNode("first")
        second = NeuralNetworkNode("second")
        first.link(second.get_input(), "passthrough")
        second.link(first.get_input(), "passthrough")

        self.graph.add_nodes([first, second])
        self.assertFalse(self.graph.validate())

    def test_to_dict(self):
        self.graph.add_nodes(oak_d_nodes())
        self.graph.validate()
        data = self.graph.to_dict()

        self.assertEqual(data["graph_id"], "test_graph")
        self.assertEqual(len(data["connections"]), 4)
        self.assertEqual(data["nodes"]["stereo"]["sub_nodes"], ["left", "right"])
        self.assertEqual(data["nodes"]["rgb"]["socket"], "CAM_A")
        self.assertEqual(data["nodes"]["nn"]["inputs"], {"input": "preview", "input_depth": "depth"})
        self.assertEqual(data["node_order"][-1], "nn")

    def test_to_dict_without_validate(self):
        self.graph.add_nodes(oak_d_nodes())
        data = self.graph.to_dict()
        self.assertEqual(len(data["connections"]), 4)
        self.assertEqual(data["node_order"][-1], "nn")


if __name__ == "__main__":
    unittest.main()
