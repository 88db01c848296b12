"""Edge routing: cluster lookup, strategies, offsets, serialization, diagnostics."""

from trace_routing.routing.cluster_index import build_index
from trace_routing.routing.engine import RoutingState, calculate_edge_paths, route_edge
from trace_routing.routing.intersection import crossing_graph, find_intersections, paths_intersect, segments_intersect
from trace_routing.routing.offsets import compute_offset, is_parallel
from trace_routing.routing.serializer import to_path
from trace_routing.routing.strategy import bezier_path, orthogonal_waypoints, route, same_cluster

__all__ = [
    "RoutingState",
    "bezier_path",
    "build_index",
    "calculate_edge_paths",
    "compute_offset",
    "crossing_graph",
    "find_intersections",
    "is_parallel",
    "orthogonal_waypoints",
    "paths_intersect",
    "route",
    "route_edge",
    "same_cluster",
    "segments_intersect",
    "to_path",
]
