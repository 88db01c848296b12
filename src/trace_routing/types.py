"""Shared type definitions for trace-routing.

Value types used across the cluster index, routing strategies, the
serializer, and the routing pass.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum, auto


class CurveStyle(Enum):
    Smooth = auto()  # curvature 0.4
    Tight = auto()  # curvature 0.25


class RouteKind(Enum):
    Bezier = auto()
    Orthogonal = auto()


class MembershipPolicy(Enum):
    """How to resolve a node listed by more than one cluster."""

    FirstWins = auto()
    LastWins = auto()
    Strict = auto()


@dataclass(frozen=True)
class Position:
    """A point in diagram space."""

    x: float
    y: float

    def distance_to(self, other: Position) -> float:
        return math.hypot(self.x - other.x, self.y - other.y)

    def to_dict(self) -> dict[str, float]:
        return {"x": self.x, "y": self.y}


@dataclass(frozen=True)
class Cluster:
    """A rectangular group of semantically related nodes."""

    id: str
    center_x: float
    center_y: float
    width: float
    height: float
    node_ids: frozenset[str] = field(default_factory=frozenset)

    @property
    def left(self) -> float:
        return self.center_x - self.width / 2

    @property
    def right(self) -> float:
        return self.center_x + self.width / 2


@dataclass(frozen=True)
class Edge:
    id: str
    source: str
    target: str


@dataclass(frozen=True)
class EdgePath:
    """A routed edge: SVG path data plus the waypoints it was built from."""

    id: str
    path: str
    waypoints: tuple[Position, ...]
    kind: RouteKind = RouteKind.Bezier
    offset: float = 0

    def to_dict(self) -> dict[str, object]:
        return {
            "id": self.id,
            "path": self.path,
            "waypoints": [p.to_dict() for p in self.waypoints],
        }


@dataclass
class RoutingResult:
    """Output of one routing pass."""

    paths: dict[str, EdgePath] = field(default_factory=dict)
    dropped_edges: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, object]:
        return {
            "edgePaths": {edge_id: p.to_dict() for edge_id, p in self.paths.items()},
            "droppedEdges": list(self.dropped_edges),
        }
