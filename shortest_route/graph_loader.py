"""
Build a validated Graph from parsed node / edge records.

The loader does not know about file formats. A DocumentReader turns a parsed
document into NodeRecord and EdgeRecord lists; load_graph validates them in a
fixed order and stops at the first violation.
"""

import json
import logging
import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Any, List, Optional

from shortest_route.errors import (
    DocumentParseError,
    DuplicateNode,
    InsufficientNodes,
    InvalidWeight,
    MalformedEdge,
    MalformedNode,
    MissingEdges,
    MissingGraphSection,
    MissingWeightData,
    UnknownEdgeEndpoint,
)
from shortest_route.graph_model import Graph

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NodeRecord:
    id: Optional[str]


@dataclass(frozen=True)
class EdgeRecord:
    source: Optional[str]
    target: Optional[str]
    weight: Any = None  # raw payload, string or number


class DocumentReader(ABC):
    @abstractmethod
    def has_graph_section(self, document) -> bool:
        raise NotImplementedError

    @abstractmethod
    def list_node_records(self, document) -> List[NodeRecord]:
        raise NotImplementedError

    @abstractmethod
    def list_edge_records(self, document) -> List[EdgeRecord]:
        raise NotImplementedError


class MappingReader(DocumentReader):
    """
    Reads plain dicts (e.g. decoded JSON):

        {"graph": {"nodes": [{"id": "A"}, ...],
                   "edges": [{"source": "A", "target": "B", "weight": 4}, ...]}}
    """

    def has_graph_section(self, document):
        return isinstance(document, dict) and isinstance(document.get("graph"), dict)

    def list_node_records(self, document):
        items = self._section(document, "nodes", MalformedNode)
        return [NodeRecord(id=_name(item.get("id"))) for item in items]

    def list_edge_records(self, document):
        items = self._section(document, "edges", MalformedEdge)
        return [
            EdgeRecord(source=_name(item.get("source")), target=_name(item.get("target")), weight=item.get("weight"))
            for item in items
        ]

    @staticmethod
    def _section(document, key, error):
        items = document["graph"].get(key, [])
        if not isinstance(items, list):
            raise error(f"The '{key}' section must be a list, got {type(items).__name__}.")
        for item in items:
            if not isinstance(item, dict):
                raise error(f"Every entry of '{key}' must be an object, got {item!r}.")
        return items


def _name(value):
    # JSON ids may be numbers; node names are always strings
    return None if value is None else str(value)


def parse_weight(payload):
    if payload is None:
        raise MissingWeightData("The edge has no weight data attached.")
    if isinstance(payload, bool):
        raise InvalidWeight(payload)
    try:
        weight = float(payload)
    except (TypeError, ValueError):
        raise InvalidWeight(payload) from None
    if not math.isfinite(weight) or weight <= 0:
        raise InvalidWeight(payload)
    return weight


def load_graph(document, reader) -> Graph:
    if not reader.has_graph_section(document):
        raise MissingGraphSection("There is no graph section in the document.")

    node_records = reader.list_node_records(document)
    if len(node_records) < 2:
        raise InsufficientNodes(len(node_records))

    graph = Graph()
    for record in node_records:
        if record.id is None or record.id == "":
            raise MalformedNode("A node record has no id.")
        if record.id in graph:
            raise DuplicateNode(record.id)
        graph.add_node(record.id)

    edge_records = reader.list_edge_records(document)
    if not edge_records:
        raise MissingEdges("There must be at least one edge in the graph.")

    for record in edge_records:
        if record.source in (None, "") or record.target in (None, ""):
            raise MalformedEdge("The edge has either no source or no target.")
        weight = parse_weight(record.weight)
        source = graph.find_node_by_name(record.source)
        if source is None:
            raise UnknownEdgeEndpoint(record.source)
        target = graph.find_node_by_name(record.target)
        if target is None:
            raise UnknownEdgeEndpoint(record.target)
        graph.add_edge(source, target, weight)

    graph.freeze()
    logger.debug("Loaded graph with %d nodes and %d edges", graph.node_count, graph.edge_count)
    return graph


def load_graph_from_records(nodes, edges) -> Graph:
    """Build a graph from node names and (source, target, weight) triples."""
    document = {
        "graph": {
            "nodes": [{"id": node} for node in nodes],
            "edges": [{"source": s, "target": t, "weight": w} for s, t, w in edges],
        }
    }
    return load_graph(document, MappingReader())


def load_json(path) -> Graph:
    try:
        document = json.loads(Path(path).read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise DocumentParseError(f"Cannot parse JSON graph document {path}: {e}") from e
    return load_graph(document, MappingReader())
