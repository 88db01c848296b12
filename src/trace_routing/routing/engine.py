"""The routing pass: a fold over edges in input order.

Each step resolves clusters, computes the parallel-edge offset from the
paths emitted so far, routes, and returns the new path together with the
extended state. No state outlives a pass, so independent diagrams can be
routed concurrently.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from functools import reduce

from trace_routing.config import DEFAULT_CONFIG, RoutingConfig
from trace_routing.routing.cluster_index import build_index
from trace_routing.routing.offsets import compute_offset
from trace_routing.routing.strategy import route
from trace_routing.types import Cluster, CurveStyle, Edge, EdgePath, Position, RoutingResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RoutingState:
    """Paths emitted so far in the current pass, oldest first."""

    emitted: tuple[EdgePath, ...] = ()

    def with_path(self, path: EdgePath) -> RoutingState:
        return RoutingState(self.emitted + (path,))


def route_edge(
    edge: Edge,
    positions: Mapping[str, Position],
    index: Mapping[str, Cluster],
    state: RoutingState,
    style: CurveStyle = CurveStyle.Smooth,
    config: RoutingConfig = DEFAULT_CONFIG,
) -> tuple[EdgePath | None, RoutingState]:
    """Route a single edge against ``state``.

    Returns (None, state) unchanged when an endpoint has no position.
    """
    source = positions.get(edge.source)
    target = positions.get(edge.target)
    if source is None or target is None:
        return None, state

    offset = compute_offset(edge.id, state.emitted, source, target, config)
    path, waypoints, kind = route(
        source,
        target,
        index.get(edge.source),
        index.get(edge.target),
        offset=offset,
        style=style,
        config=config,
    )
    edge_path = EdgePath(id=edge.id, path=path, waypoints=tuple(waypoints), kind=kind, offset=offset)
    return edge_path, state.with_path(edge_path)


def calculate_edge_paths(
    edges: Iterable[Edge],
    node_positions: Mapping[str, Position],
    clusters: Iterable[Cluster],
    style: CurveStyle = CurveStyle.Smooth,
    config: RoutingConfig | None = None,
) -> RoutingResult:
    """Route every edge of one diagram.

    Args:
        edges: Edges in the order they should claim offsets.
        node_positions: Resolved position per node id.
        clusters: Cluster rectangles with their member node ids.
        style: Curvature for same-cluster Bézier edges.
        config: Routing constants; defaults to RoutingConfig().

    Returns:
        RoutingResult with a path per routed edge id and the ids of edges
        dropped because an endpoint has no position.

    Raises:
        AmbiguousMembershipError: Under the Strict membership policy only.
    """
    cfg = config or DEFAULT_CONFIG
    index = build_index(clusters, cfg.membership)

    def step(acc: tuple[tuple[str, ...], RoutingState], edge: Edge) -> tuple[tuple[str, ...], RoutingState]:
        dropped, state = acc
        edge_path, state = route_edge(edge, node_positions, index, state, style, cfg)
        if edge_path is None:
            logger.debug("dropping edge %r: no position for %r or %r", edge.id, edge.source, edge.target)
            return dropped + (edge.id,), state
        return dropped, state

    dropped, state = reduce(step, edges, ((), RoutingState()))
    logger.debug("routed %d edge(s), dropped %d", len(state.emitted), len(dropped))
    # a later path with a repeated id replaces the earlier one
    return RoutingResult(paths={p.id: p for p in state.emitted}, dropped_edges=list(dropped))
