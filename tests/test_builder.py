#!/usr/bin/env python3
"""
拓扑构建与NN连接测试
"""

import sys
import logging
import unittest
from pathlib import Path

# 添加src目录到Python路径
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from camera_pipeline.core.errors import (
    MissingSensor, NeuralNetworkModeMismatch, PortNotFound, UnsupportedTopology
)
from camera_pipeline.core.node import NodeType
from camera_pipeline.core.sensor import CameraBoardSocket, SensorInventory
from camera_pipeline.nodes import (
    SensorCaptureNode, StereoDepthNode, NeuralNetworkNode, SpatialNeuralNetworkNode
)
from camera_pipeline.pipeline.builder import BUILDERS, array_node_name, build
from camera_pipeline.pipeline.linking import attach_inference, attach_spatial_inference
from camera_pipeline.pipeline.types import NeuralNetworkMode, Topology


def oak_d_inventory():
    return SensorInventory([
        ("CAM_A", "IMX378"),
        ("CAM_B", "OV9282"),
        ("CAM_C", "OV9282"),
    ])


def rae_inventory():
    return SensorInventory([
        ("CAM_A", "IMX214"),
        ("CAM_B", "OV9782"),
        ("CAM_C", "OV9782"),
        ("CAM_D", "OV9782"),
        ("CAM_E", "OV9782"),
    ])


def names(nodes):
    return [node.node_name for node in nodes]


class TestArrayNodeName(unittest.TestCase):
    """测试相机阵列命名"""

    def test_first_names(self):
        self.assertEqual(array_node_name(0), "a")
        self.assertEqual(array_node_name(25), "z")
        self.assertEqual(array_node_name(26), "aa")
        self.assertEqual(array_node_name(27), "bb")
        self.assertEqual(array_node_name(51), "zz")
        self.assertEqual(array_node_name(52), "aaa")

    def test_names_unique(self):
        generated = [array_node_name(i) for i in range(10000)]
        self.assertEqual(len(set(generated)), 10000)
        # 同一序号的名称稳定
        self.assertEqual(generated, [array_node_name(i) for i in range(10000)])

    def test_negative_index(self):
        with self.assertRaises(ValueError):
            array_node_name(-1)


class TestBuildTable(unittest.TestCase):
    """测试构建函数表"""

    def test_table_exhaustive(self):
        for topology in Topology:
            for mode in NeuralNetworkMode:
                self.assertIn((topology, mode), BUILDERS)

    def test_missing_entry(self):
        with self.assertRaises(UnsupportedTopology) as ctx:
            build(Topology.RGB, NeuralNetworkMode.NONE, oak_d_inventory(),
                  raw_topology="rgb", builders={})
        self.assertIn("Configuration: rgb", str(ctx.exception))
        self.assertEqual(ctx.exception.configuration, "rgb")


class TestBuildTopologies(unittest.TestCase):
    """测试各拓扑的节点集合"""

    def setUp(self):
        self.logger = logging.getLogger("test_builder")
        self.inventory = oak_d_inventory()

    def _build(self, topology, mode=NeuralNetworkMode.NONE, inventory=None):
        return build(topology, mode, inventory or self.inventory, log=self.logger)

    def test_rgb(self):
        nodes = self._build(Topology.RGB)
        self.assertEqual(names(nodes), ["rgb"])
        self.assertEqual(nodes[0].socket, CameraBoardSocket.CAM_A)

    def test_rgb_with_nn(self):
        rgb, nn = self._build(Topology.RGB, NeuralNetworkMode.RGB)
        self.assertIsInstance(nn, NeuralNetworkNode)
        self.assertIs(nn.get_input().link.source, rgb.get_output("preview"))

    def test_rgb_spatial_degrades(self):
        """RGB拓扑请求空间NN时降级为普通NN"""
        with self.assertLogs(self.logger, level="WARNING") as logs:
            nodes = self._build(Topology.RGB, NeuralNetworkMode.SPATIAL)

        self.assertEqual(names(nodes), ["rgb", "nn"])
        rgb, nn = nodes
        self.assertNotIsInstance(nn, SpatialNeuralNetworkNode)
        self.assertEqual(nn.node_type, NodeType.NN)
        self.assertIs(nn.get_input().link.source, rgb.get_output("preview"))

        diagnostic = logs.records[0].diagnostic
        self.assertIsInstance(diagnostic, NeuralNetworkModeMismatch)
        self.assertEqual(diagnostic.topology, Topology.RGB)
        self.assertEqual(diagnostic.fallback, NeuralNetworkMode.RGB)

    def test_rgbd(self):
        nodes = self._build(Topology.RGBD)
        self.assertEqual(names(nodes), ["rgb", "stereo"])
        self.assertIsInstance(nodes[1], StereoDepthNode)
        self.assertEqual(names(nodes[1].sub_nodes), ["left", "right"])

    def test_rgbd_with_nn(self):
        rgb, stereo, nn = self._build(Topology.RGBD, NeuralNetworkMode.RGB)
        self.assertEqual(nn.node_type, NodeType.NN)
        self.assertIs(nn.get_input().link.source.owner, rgb)

    def test_rgbd_spatial(self):
        """RGBD拓扑的空间NN连接彩色和深度"""
        nodes = self._build(Topology.RGBD, NeuralNetworkMode.SPATIAL)
        self.assertEqual(len(nodes), 3)
        rgb, stereo, nn = nodes
        self.assertIsInstance(nn, SpatialNeuralNetworkNode)
        self.assertTrue(nn.is_wired())
        self.assertIs(nn.get_input("input").link.source, rgb.get_output("preview"))
        self.assertIs(nn.get_input("input_depth").link.source, stereo.get_output("depth"))

    def test_rgb_stereo(self):
        nodes = self._build(Topology.RGB_STEREO)
        self.assertEqual(names(nodes), ["rgb", "left", "right"])
        self.assertTrue(all(isinstance(n, SensorCaptureNode) for n in nodes))
        self.assertEqual([n.socket for n in nodes],
                         [CameraBoardSocket.CAM_A, CameraBoardSocket.CAM_B, CameraBoardSocket.CAM_C])

    def test_rgb_stereo_spatial_degrades(self):
        with self.assertLogs(self.logger, level="WARNING"):
            nodes = self._build(Topology.RGB_STEREO, NeuralNetworkMode.SPATIAL)
        self.assertEqual(names(nodes), ["rgb", "left", "right", "nn"])
        self.assertEqual(nodes[-1].node_type, NodeType.NN)
        self.assertIs(nodes[-1].get_input().link.source.owner, nodes[0])

    def test_stereo(self):
        for mode in NeuralNetworkMode:
            nodes = self._build(Topology.STEREO, mode)
            self.assertEqual(names(nodes), ["left", "right"])

    def test_depth(self):
        for mode in NeuralNetworkMode:
            nodes = self._build(Topology.DEPTH, mode)
            self.assertEqual(names(nodes), ["stereo"])

    def test_cam_array(self):
        inventory = SensorInventory([
            (CameraBoardSocket(i), "OV9282") for i in range(8)
        ])
        nodes = self._build(Topology.CAM_ARRAY, inventory=inventory)
        self.assertEqual(names(nodes), ["a", "b", "c", "d", "e", "f", "g", "h"])
        self.assertEqual([n.socket for n in nodes], inventory.sockets())

    def test_cam_array_enumeration_order(self):
        inventory = SensorInventory([
            ("CAM_D", "OV9282"), ("CAM_A", "IMX378"), ("CAM_C", "OV9282"), ("CAM_B", "OV9282"),
        ])
        nodes = self._build(Topology.CAM_ARRAY, inventory=inventory)
        self.assertEqual(names(nodes), ["a", "b", "c", "d"])
        self.assertEqual(nodes[0].socket, CameraBoardSocket.CAM_D)

    def test_cam_array_beyond_board_sockets(self):
        """超过26个传感器时名称继续为aa, bb, ..."""
        inventory = SensorInventory([(f"CAM_{i}", "OV9282") for i in range(30)])
        nodes = self._build(Topology.CAM_ARRAY, inventory=inventory)
        self.assertEqual(len(nodes), 30)
        self.assertEqual(nodes[25].node_name, "z")
        self.assertEqual(nodes[26].node_name, "aa")
        self.assertEqual(nodes[29].node_name, "dd")
        self.assertEqual(len(set(names(nodes))), 30)
        self.assertEqual([n.socket for n in nodes], inventory.sockets())

    def test_rae(self):
        """固定平台总是3个节点"""
        for mode in NeuralNetworkMode:
            nodes = self._build(Topology.RAE, mode, inventory=rae_inventory())
            self.assertEqual(names(nodes), ["rgb", "stereo_front", "stereo_back"])
            front, back = nodes[1], nodes[2]
            self.assertEqual([n.socket for n in front.sub_nodes],
                             [CameraBoardSocket.CAM_B, CameraBoardSocket.CAM_C])
            self.assertEqual([n.socket for n in back.sub_nodes],
                             [CameraBoardSocket.CAM_D, CameraBoardSocket.CAM_E])
            self.assertEqual(names(back.sub_nodes), ["left_back", "right_back"])

    def test_node_configs(self):
        nodes = build(Topology.RGBD, NeuralNetworkMode.RGB, self.inventory, log=self.logger,
                      node_configs={"rgb": {"fps": 15}, "left": {"resolution": "400P"},
                                    "nn": {"nn_family": "yolo"}})
        rgb, stereo, nn = nodes
        self.assertEqual(rgb.config["fps"], 15)
        self.assertEqual(stereo.left.config["resolution"], "400P")
        self.assertEqual(stereo.right.config["resolution"], "800P")
        self.assertEqual(nn.config["nn_family"], "yolo")

    def test_missing_sensor(self):
        inventory = SensorInventory([("CAM_A", "IMX378"), ("CAM_B", "OV9282"), ("CAM_D", "OV9282")])
        with self.assertRaises(MissingSensor) as ctx:
            self._build(Topology.RGBD, inventory=inventory)
        self.assertEqual(ctx.exception.node_name, "right")

    def test_nn_on_mono_sensor(self):
        """CAM_A上是单色传感器时无法连接NN"""
        inventory = SensorInventory([("CAM_A", "OV9282")])
        with self.assertRaises(PortNotFound):
            self._build(Topology.RGB, NeuralNetworkMode.RGB, inventory=inventory)


class TestLinking(unittest.TestCase):
    """测试NN节点连接"""

    def setUp(self):
        self.rgb, self.stereo = build(Topology.RGBD, NeuralNetworkMode.NONE, oak_d_inventory())

    def test_attach_inference(self):
        nn = attach_inference(self.rgb, node_name="detector", config={"nn_family": "yolo"})
        self.assertEqual(nn.node_name, "detector")
        self.assertEqual(nn.get_links()[0].as_tuple(), ("rgb:preview", "detector:input"))

    def test_attach_spatial_inference(self):
        nn = attach_spatial_inference(self.rgb, self.stereo)
        self.assertEqual(
            sorted(link.as_tuple() for link in nn.get_links()),
            [("rgb:preview", "nn:input"), ("stereo:depth", "nn:input_depth")]
        )

    def test_spatial_requires_depth_source(self):
        """深度源错误时不返回节点"""
        with self.assertRaises(PortNotFound):
            attach_spatial_inference(self.rgb, self.rgb)


if __name__ == "__main__":
    unittest.main()
