"""
PipelineGraph：注册生成的节点并验证连接关系
收集所有节点(含子节点)上的连接，检查环、未连接的输入和悬空的源节点
"""

import logging
from collections import defaultdict, deque
from typing import Any, Dict, Iterable, List, Optional, Tuple

from .link import Link
from .node import BaseNode, NodeType


class PipelineGraph:
    """设备端pipeline的节点图"""

    def __init__(self, graph_id: str, logger: Optional[logging.Logger] = None):
        """
        初始化Graph

        Args:
            graph_id: Graph唯一标识
            logger: 日志对象，为空时使用模块日志
        """
        self.graph_id = graph_id

        # 节点管理 (按注册顺序)
        self.nodes: Dict[str, BaseNode] = {}
        self.node_order: List[str] = []

        # 连接管理
        self.connections: Dict[str, List[str]] = defaultdict(list)  # 源节点 -> 目标节点列表
        self.reverse_connections: Dict[str, List[str]] = defaultdict(list)  # 目标节点 -> 源节点列表
        self.links: List[Link] = []

        self.logger = logger or logging.getLogger(f"{__name__}.{graph_id}")

        self._is_validated = False

    def add_node(self, node: BaseNode) -> bool:
        """
        注册节点及其子节点

        Args:
            node: 要注册的节点

        Returns:
            是否注册成功
        """
        if node.node_name in self.nodes:
            self.logger.warning(f"节点{node.node_name}已存在")
            return False

        for sub_node in node.sub_nodes:
            self.add_node(sub_node)

        self.nodes[node.node_name] = node
        self.node_order.append(node.node_name)
        self._is_validated = False

        self.logger.debug(f"注册节点: {node.node_name}")
        return True

    def add_nodes(self, nodes: Iterable[BaseNode]) -> int:
        """批量注册节点，返回成功注册的数量"""
        return sum(1 for node in nodes if self.add_node(node))

    def _collect_links(self):
        """从各节点的输入端口收集连接"""
        self.connections.clear()
        self.reverse_connections.clear()
        self.links = []

        for node_name in self.node_order:
            for link in self.nodes[node_name].get_links():
                self.links.append(link)
                source_name = link.source.owner.node_name
                self.connections[source_name].append(node_name)
                self.reverse_connections[node_name].append(source_name)

    def validate(self) -> bool:
        """
        验证Graph的有效性

        Returns:
            是否有效
        """
        self._collect_links()

        for link in self.links:
            source_name = link.source.owner.node_name
            if self.nodes.get(source_name) is not link.source.owner:
                self.logger.error(f"连接的源节点未注册: {link}")
                return False

        unwired = [
            port.key
            for node in self.nodes.values()
            for port in node.list_input_ports()
            if not port.is_linked
        ]
        if unwired:
            self.logger.error(f"存在未连接的输入端口: {', '.join(unwired)}")
            return False

        if self._has_cycle():
            self.logger.error("Graph中存在环")
            return False

        self._topological_sort()

        self._is_validated = True
        self.logger.info(f"Graph验证通过: {len(self.nodes)}个节点, {len(self.links)}条连接")
        return True

    def _has_cycle(self) -> bool:
        """检查是否有环（使用DFS）"""
        visited = set()
        rec_stack = set()

        def dfs(node_name: str) -> bool:
            if node_name in rec_stack:
                return True
            if node_name in visited:
                return False

            visited.add(node_name)
            rec_stack.add(node_name)

            for target in self.connections.get(node_name, []):
                if dfs(target):
                    return True

            rec_stack.remove(node_name)
            return False

        for node_name in self.nodes:
            if node_name not in visited:
                if dfs(node_name):
                    return True

        return False

    def _topological_sort(self):
        """拓扑排序，入度相同的节点保持注册顺序"""
        in_degree = defaultdict(int)
        for node_name in self.nodes:
            in_degree[node_name] = len(self.reverse_connections.get(node_name, []))

        queue = deque([name for name in self.node_order if in_degree[name] == 0])
        sorted_nodes = []

        while queue:
            node_name = queue.popleft()
            sorted_nodes.append(node_name)

            for target in self.connections.get(node_name, []):
                in_degree[target] -= 1
                if in_degree[target] == 0:
                    queue.append(target)

        if len(sorted_nodes) != len(self.nodes):
            raise ValueError("Graph中存在环，无法进行拓扑排序")

        self.node_order = sorted_nodes

    def get_node(self, node_name: str) -> Optional[BaseNode]:
        """获取指定节点"""
        return self.nodes.get(node_name)

    def get_nodes_by_type(self, node_type: NodeType) -> List[BaseNode]:
        """获取指定类型的节点"""
        return [node for node in self.nodes.values() if node.node_type == node_type]

    def get_connections(self) -> List[Tuple[str, str]]:
        """获取所有连接 (源端口, 目标端口)"""
        if not self.links:
            self._collect_links()
        return [link.as_tuple() for link in self.links]

    def to_dict(self) -> Dict[str, Any]:
        """转换为字典格式"""
        if not self.links:
            self._collect_links()
        return {
            "graph_id": self.graph_id,
            "nodes": {name: node.to_dict() for name, node in self.nodes.items()},
            "connections": [
                {"from": link.source.key, "to": link.target.key, "channel": link.channel.value}
                for link in self.links
            ],
            "node_order": list(self.node_order),
        }

    def __repr__(self) -> str:
        return (f"PipelineGraph(id={self.graph_id}, nodes={len(self.nodes)}, "
                f"validated={self._is_validated})")
