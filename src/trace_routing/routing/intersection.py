"""Segment intersection tests over routed waypoints.

Diagnostic only: nothing here reroutes edges. Endpoint contact and
collinear overlap do not count as crossings.
"""

from __future__ import annotations

from collections.abc import Iterable
from itertools import combinations

import networkx as nx

from trace_routing.types import EdgePath, Position


def segments_intersect(a1: Position, a2: Position, b1: Position, b2: Position) -> bool:
    """Proper crossing of segments a1-a2 and b1-b2 (both parameters in (0, 1))."""
    det = (a2.x - a1.x) * (b2.y - b1.y) - (b2.x - b1.x) * (a2.y - a1.y)
    if det == 0:
        return False
    lam = ((b2.y - b1.y) * (b2.x - a1.x) + (b1.x - b2.x) * (b2.y - a1.y)) / det
    gamma = ((a1.y - a2.y) * (b2.x - a1.x) + (a2.x - a1.x) * (b2.y - a1.y)) / det
    return 0 < lam < 1 and 0 < gamma < 1


def paths_intersect(path_a: EdgePath, path_b: EdgePath) -> bool:
    """True if any waypoint segment of one path crosses one of the other."""
    a_pts = path_a.waypoints
    b_pts = path_b.waypoints
    for i in range(len(a_pts) - 1):
        for j in range(len(b_pts) - 1):
            if segments_intersect(a_pts[i], a_pts[i + 1], b_pts[j], b_pts[j + 1]):
                return True
    return False


def find_intersections(paths: Iterable[EdgePath]) -> list[tuple[str, str]]:
    """All crossing pairs, as (earlier id, later id) in input order."""
    return [(a.id, b.id) for a, b in combinations(list(paths), 2) if paths_intersect(a, b)]


def crossing_graph(paths: Iterable[EdgePath]) -> nx.Graph:
    """Undirected graph with a node per path and an edge per crossing pair."""
    path_list = list(paths)
    g: nx.Graph = nx.Graph()
    g.add_nodes_from(p.id for p in path_list)
    g.add_edges_from(find_intersections(path_list))
    return g
