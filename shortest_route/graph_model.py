"""Undirected weighted graph stored as an indexed node arena."""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from shortest_route.errors import DuplicateNode, GraphFrozenError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Edge:
    target: int  # index of the neighbour in Graph.list_nodes()
    weight: float


@dataclass
class GraphNode:
    name: str
    index: int
    _edges: List[Edge] = field(default_factory=list, init=False, repr=False)

    @property
    def edges(self):
        return tuple(self._edges)


class Graph:
    """
    Nodes are kept in insertion order, edges point to neighbours by index.
    Every undirected edge is stored as two adjacency records with the same weight.
    """

    def __init__(self):
        self._nodes: List[GraphNode] = []
        self._index: Dict[str, int] = {}
        self._edge_count = 0
        self._frozen = False

    def __len__(self):
        return len(self._nodes)

    def __contains__(self, name):
        return name in self._index

    def __repr__(self):
        return f"Graph(nodes={self.node_count}, edges={self.edge_count}, frozen={self._frozen})"

    @property
    def node_count(self):
        return len(self._nodes)

    @property
    def edge_count(self):
        return self._edge_count

    @property
    def frozen(self):
        return self._frozen

    def freeze(self):
        self._frozen = True

    def add_node(self, name) -> GraphNode:
        self._check_mutable()
        if name in self._index:
            raise DuplicateNode(name)
        node = GraphNode(name=name, index=len(self._nodes))
        self._nodes.append(node)
        self._index[name] = node.index
        return node

    def list_nodes(self) -> Tuple[GraphNode, ...]:
        return tuple(self._nodes)

    def node(self, index) -> GraphNode:
        return self._nodes[index]

    def find_node_by_name(self, name) -> Optional[GraphNode]:
        index = self._index.get(name)
        return None if index is None else self._nodes[index]

    def add_edge(self, node_a, node_b, weight):
        # weight is validated by the loader
        self._check_mutable()
        node_a._edges.append(Edge(target=node_b.index, weight=weight))
        node_b._edges.append(Edge(target=node_a.index, weight=weight))
        self._edge_count += 1

    def neighbours(self, node):
        for edge in node._edges:
            yield self._nodes[edge.target], edge.weight

    def _check_mutable(self):
        if self._frozen:
            raise GraphFrozenError("The graph is frozen and can no longer be modified.")
