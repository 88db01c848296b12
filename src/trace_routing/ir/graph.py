"""Diagram IR: the routing inputs held in a networkx MultiDiGraph.

Built from the JSON document produced by the node-placement step
(``nodePositions``, ``clusters``, ``edges``). Node attributes carry the
position; each edge records its input index, and edges() returns them in
that order, which the routing pass relies on for stable offsets.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import networkx as nx

from trace_routing.errors import DiagramInputError
from trace_routing.types import Cluster, Edge, Position


class DiagramIR:
    """Positions, clusters and edges of one diagram.

    Wraps a networkx MultiDiGraph and exposes the views the router needs.
    """

    def __init__(self, digraph: nx.MultiDiGraph, clusters: list[Cluster]) -> None:
        self.digraph = digraph
        self.clusters = clusters

    @classmethod
    def from_parts(
        cls,
        node_positions: Mapping[str, Position],
        clusters: list[Cluster],
        edges: list[Edge],
    ) -> DiagramIR:
        digraph: nx.MultiDiGraph = nx.MultiDiGraph()
        for node_id, pos in node_positions.items():
            digraph.add_node(node_id, position=pos)
        for order, edge in enumerate(edges):
            # endpoints without a position become bare nodes and are dropped at routing time
            digraph.add_edge(edge.source, edge.target, data=edge, order=order)
        return cls(digraph=digraph, clusters=list(clusters))

    @classmethod
    def from_dict(cls, doc: Mapping[str, Any]) -> DiagramIR:
        """Build a DiagramIR from a decoded JSON document.

        Raises:
            DiagramInputError: If a required key is missing or a value has the wrong type.
        """
        if not isinstance(doc, Mapping):
            raise DiagramInputError("diagram document must be a JSON object")
        positions = {str(k): _position(v, f"nodePositions.{k}") for k, v in _get(doc, "nodePositions", {}).items()}
        clusters = [_cluster(c, i) for i, c in enumerate(_get(doc, "clusters", []))]
        edges = [_edge(e, i) for i, e in enumerate(_get(doc, "edges", []))]
        return cls.from_parts(positions, clusters, edges)

    def node_positions(self) -> dict[str, Position]:
        return {n: attrs["position"] for n, attrs in self.digraph.nodes(data=True) if "position" in attrs}

    def edges(self) -> list[Edge]:
        ordered = sorted(self.digraph.edges(data=True), key=lambda e: e[2]["order"])
        return [attrs["data"] for _, _, attrs in ordered]

    def node_count(self) -> int:
        return self.digraph.number_of_nodes()

    def edge_count(self) -> int:
        return self.digraph.number_of_edges()

    def unpositioned_nodes(self) -> list[str]:
        return [n for n, attrs in self.digraph.nodes(data=True) if "position" not in attrs]


def _get(doc: Mapping[str, Any], key: str, default: Any) -> Any:
    value = doc.get(key, default)
    expected = dict if isinstance(default, dict) else list
    if not isinstance(value, expected):
        raise DiagramInputError(f"'{key}' must be a JSON {'object' if expected is dict else 'array'}")
    return value


def _number(value: Any, where: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise DiagramInputError(f"{where}: expected a number, got {value!r}")
    return value


def _field(obj: Any, key: str, where: str) -> Any:
    if not isinstance(obj, Mapping):
        raise DiagramInputError(f"{where}: expected an object")
    if key not in obj:
        raise DiagramInputError(f"{where}: missing '{key}'")
    return obj[key]


def _position(obj: Any, where: str) -> Position:
    return Position(_number(_field(obj, "x", where), f"{where}.x"), _number(_field(obj, "y", where), f"{where}.y"))


def _cluster(obj: Any, i: int) -> Cluster:
    where = f"clusters[{i}]"
    node_ids = _field(obj, "nodeIds", where)
    if not isinstance(node_ids, list):
        raise DiagramInputError(f"{where}.nodeIds: expected an array")
    return Cluster(
        id=str(_field(obj, "id", where)),
        center_x=_number(_field(obj, "centerX", where), f"{where}.centerX"),
        center_y=_number(_field(obj, "centerY", where), f"{where}.centerY"),
        width=_number(_field(obj, "width", where), f"{where}.width"),
        height=_number(_field(obj, "height", where), f"{where}.height"),
        node_ids=frozenset(str(n) for n in node_ids),
    )


def _edge(obj: Any, i: int) -> Edge:
    where = f"edges[{i}]"
    return Edge(
        id=str(_field(obj, "id", where)),
        source=str(_field(obj, "source", where)),
        target=str(_field(obj, "target", where)),
    )
