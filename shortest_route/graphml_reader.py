"""
GraphML support for the graph loader.

Only the parts of GraphML the loader needs are read: the first <graph> under the
root, its <node id> children and its <edge source target> children with a
<data> child carrying the weight. Tags are matched on their local name so
documents with or without the GraphML namespace both work.
"""

import logging
import xml.etree.ElementTree as ET

from shortest_route.errors import DocumentParseError
from shortest_route.graph_loader import DocumentReader, EdgeRecord, NodeRecord, load_graph

logger = logging.getLogger(__name__)

GRAPHML_NS = "http://graphml.graphdrawing.org/xmlns"


def _local_name(tag):
    return tag.rsplit("}", 1)[-1]


def _children_named(element, name):
    return [child for child in element if _local_name(child.tag) == name]


class GraphMLReader(DocumentReader):
    """Reads an ElementTree root element of a GraphML document."""

    def has_graph_section(self, document):
        return self._graph_element(document) is not None

    def list_node_records(self, document):
        graph = self._graph_element(document)
        return [NodeRecord(id=node.get("id")) for node in _children_named(graph, "node")]

    def list_edge_records(self, document):
        graph = self._graph_element(document)
        weight_keys = self._weight_key_ids(document)
        records = []
        for edge in _children_named(graph, "edge"):
            records.append(
                EdgeRecord(
                    source=edge.get("source"),
                    target=edge.get("target"),
                    weight=self._weight_payload(edge, weight_keys),
                )
            )
        return records

    @staticmethod
    def _graph_element(document):
        graphs = _children_named(document, "graph")
        return graphs[0] if graphs else None

    @staticmethod
    def _weight_key_ids(document):
        # <key id="d0" for="edge" attr.name="weight" .../>
        return {
            key.get("id")
            for key in _children_named(document, "key")
            if key.get("attr.name") == "weight" and key.get("for", "all") in ("edge", "all")
        }

    @staticmethod
    def _weight_payload(edge, weight_keys):
        data = _children_named(edge, "data")
        if not data:
            return None
        chosen = next((d for d in data if d.get("key") in weight_keys), data[0])
        return chosen.text or ""


def parse_graphml(path):
    try:
        return ET.parse(path).getroot()
    except ET.ParseError as e:
        raise DocumentParseError(f"Cannot parse GraphML file {path}: {e}") from e


def parse_graphml_string(text):
    try:
        return ET.fromstring(text)
    except ET.ParseError as e:
        raise DocumentParseError(f"Cannot parse GraphML document: {e}") from e


def load_graphml(path):
    logger.debug("Reading GraphML file %s", path)
    return load_graph(parse_graphml(path), GraphMLReader())
