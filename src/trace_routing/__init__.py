"""trace-routing: cluster-aware edge path geometry for origin-tracing diagrams."""

from __future__ import annotations

from dataclasses import replace

from trace_routing.config import RoutingConfig
from trace_routing.ir.graph import DiagramIR
from trace_routing.routing.engine import calculate_edge_paths
from trace_routing.types import Cluster, CurveStyle, Edge, EdgePath, MembershipPolicy, Position, RoutingResult

_STYLE_MAP: dict[str, CurveStyle] = {
    "smooth": CurveStyle.Smooth,
    "tight": CurveStyle.Tight,
}

_MEMBERSHIP_MAP: dict[str, MembershipPolicy] = {
    "first": MembershipPolicy.FirstWins,
    "last": MembershipPolicy.LastWins,
    "strict": MembershipPolicy.Strict,
}

__all__ = [
    "Cluster",
    "CurveStyle",
    "DiagramIR",
    "Edge",
    "EdgePath",
    "MembershipPolicy",
    "Position",
    "RoutingConfig",
    "RoutingResult",
    "calculate_edge_paths",
    "parse_membership",
    "parse_style",
    "route_diagram",
]


def parse_style(name: str) -> CurveStyle:
    key = name.lower()
    if key not in _STYLE_MAP:
        raise ValueError(f"Unknown curve style '{name}'; use smooth or tight")
    return _STYLE_MAP[key]


def parse_membership(name: str) -> MembershipPolicy:
    key = name.lower()
    if key not in _MEMBERSHIP_MAP:
        raise ValueError(f"Unknown membership policy '{name}'; use first, last, or strict")
    return _MEMBERSHIP_MAP[key]


def route_diagram(
    diagram: DiagramIR,
    style: CurveStyle = CurveStyle.Smooth,
    membership: MembershipPolicy | None = None,
    config: RoutingConfig | None = None,
) -> RoutingResult:
    """Route every edge of a DiagramIR in input order.

    Args:
        diagram: Positions, clusters and edges to route.
        style: Curvature for same-cluster edges.
        membership: Overrides the config's membership policy when given.
        config: Routing constants; defaults to RoutingConfig().

    Returns:
        RoutingResult with paths keyed by edge id and the ids of dropped edges.

    Raises:
        AmbiguousMembershipError: If membership is Strict and a node has two clusters.
    """
    cfg = config or RoutingConfig()
    if membership is not None:
        cfg = replace(cfg, membership=membership)
    return calculate_edge_paths(diagram.edges(), diagram.node_positions(), diagram.clusters, style, cfg)
