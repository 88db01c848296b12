"""Routing strategies: Bézier inside a cluster, orthogonal between clusters.

Edges within one cluster are drawn as a single cubic curve with horizontal
control handles. Edges that cross clusters leave the source cluster
horizontally, change level at the midpoint between the two clusters and
enter the target cluster horizontally, so they do not cut through cluster
bodies. The perpendicular ``offset`` separates parallel routes.
"""

from __future__ import annotations

import logging

from trace_routing.config import DEFAULT_CONFIG, RoutingConfig
from trace_routing.routing.serializer import fmt_point, to_path
from trace_routing.types import Cluster, CurveStyle, Position, RouteKind

logger = logging.getLogger(__name__)


def same_cluster(source_cluster: Cluster | None, target_cluster: Cluster | None) -> bool:
    """True when an edge should be drawn as a Bézier curve.

    An endpoint outside every cluster has no boundary to route around.
    """
    if source_cluster is None or target_cluster is None:
        return True
    return source_cluster.id == target_cluster.id


def bezier_path(
    source: Position,
    target: Position,
    style: CurveStyle = CurveStyle.Smooth,
    config: RoutingConfig = DEFAULT_CONFIG,
) -> str:
    if source == target:
        return ""
    curvature = config.curvature(style)
    dx = target.x - source.x
    cp1 = fmt_point(source.x + dx * curvature, source.y)
    cp2 = fmt_point(target.x - dx * curvature, target.y)
    return f"M {fmt_point(source.x, source.y)} C {cp1} {cp2} {fmt_point(target.x, target.y)}"


def orthogonal_waypoints(
    source: Position,
    target: Position,
    source_cluster: Cluster | None,
    target_cluster: Cluster | None,
    offset: float = 0,
    config: RoutingConfig = DEFAULT_CONFIG,
) -> list[Position]:
    """Waypoint chain that exits and enters clusters past their side walls."""
    waypoints = [source]
    cur_x = source.x
    cur_y = source.y

    if source_cluster is not None:
        exit_x = source_cluster.right + config.cluster_clearance
        cur_x = exit_x
        cur_y = cur_y + offset
        waypoints.append(Position(cur_x, cur_y))

    if target_cluster is not None:
        enter_x = target_cluster.left - config.cluster_clearance
        mid_x = (cur_x + enter_x) / 2
        level_y = target.y + offset
        waypoints.append(Position(mid_x, cur_y))
        waypoints.append(Position(mid_x, level_y))
        waypoints.append(Position(enter_x, level_y))

    waypoints.append(target)
    return waypoints


def route(
    source: Position,
    target: Position,
    source_cluster: Cluster | None = None,
    target_cluster: Cluster | None = None,
    offset: float = 0,
    style: CurveStyle = CurveStyle.Smooth,
    config: RoutingConfig = DEFAULT_CONFIG,
) -> tuple[str, list[Position], RouteKind]:
    """Pick a strategy for one edge and compute its path.

    Returns:
        (path data, waypoints, kind). Bézier routes always carry exactly
        ``[source, target]`` as waypoints; the curve lives in the path data.
    """
    if same_cluster(source_cluster, target_cluster):
        return bezier_path(source, target, style, config), [source, target], RouteKind.Bezier

    waypoints = orthogonal_waypoints(source, target, source_cluster, target_cluster, offset, config)
    logger.debug(
        "orthogonal route %s -> %s with offset %s (%d waypoints)",
        source_cluster.id if source_cluster else None,
        target_cluster.id if target_cluster else None,
        offset,
        len(waypoints),
    )
    return to_path(waypoints), waypoints, RouteKind.Orthogonal
