"""Tests for routing.strategy: Bézier and orthogonal routes."""

from __future__ import annotations

import pytest

from trace_routing.config import RoutingConfig
from trace_routing.routing.strategy import bezier_path, orthogonal_waypoints, route, same_cluster
from trace_routing.types import Cluster, CurveStyle, Position, RouteKind

# ─── Helpers ──────────────────────────────────────────────────────────────────


def P(x: float, y: float) -> Position:
    return Position(x, y)


def cluster(id: str, cx: float, cy: float, w: float = 100, h: float = 100, *nodes: str) -> Cluster:
    return Cluster(id=id, center_x=cx, center_y=cy, width=w, height=h, node_ids=frozenset(nodes))


A = cluster("A", 0, 0, 100, 100, "a")
B = cluster("B", 400, 0, 100, 100, "b")


# ─── Strategy Choice ──────────────────────────────────────────────────────────


class TestSameCluster:
    def test_same_id(self):
        assert same_cluster(A, cluster("A", 999, 999))

    def test_different_ids(self):
        assert not same_cluster(A, B)

    @pytest.mark.parametrize("src,tgt", [(None, B), (A, None), (None, None)])
    def test_missing_cluster_counts_as_same(self, src, tgt):
        assert same_cluster(src, tgt)


# ─── Bézier ───────────────────────────────────────────────────────────────────


class TestBezier:
    def test_smooth_control_points(self):
        assert bezier_path(P(0, 0), P(100, 50)) == "M 0,0 C 40,0 60,50 100,50"

    def test_tight_control_points(self):
        assert bezier_path(P(0, 0), P(100, 50), CurveStyle.Tight) == "M 0,0 C 25,0 75,50 100,50"

    def test_right_to_left(self):
        assert bezier_path(P(100, 0), P(0, 0)) == "M 100,0 C 60,0 40,0 0,0"

    def test_coincident_endpoints_are_empty(self):
        assert bezier_path(P(5, 5), P(5, 5)) == ""

    def test_custom_curvature(self):
        cfg = RoutingConfig(smooth_curvature=0.5)
        assert bezier_path(P(0, 0), P(10, 0), config=cfg) == "M 0,0 C 5,0 5,0 10,0"


# ─── Orthogonal ───────────────────────────────────────────────────────────────


class TestOrthogonalWaypoints:
    def test_two_cluster_scenario(self):
        """Exit at 0+50+40=90, enter at 400-50-40=310, level change at x=200."""
        wps = orthogonal_waypoints(P(50, 0), P(350, 0), A, B, offset=0)
        assert wps == [P(50, 0), P(90, 0), P(200, 0), P(200, 0), P(310, 0), P(350, 0)]

    def test_offset_shifts_travel_level(self):
        wps = orthogonal_waypoints(P(50, 0), P(350, 0), A, B, offset=25)
        assert wps == [P(50, 0), P(90, 25), P(200, 25), P(200, 25), P(310, 25), P(350, 0)]

    def test_level_change_between_rows(self):
        wps = orthogonal_waypoints(P(20, -30), P(380, 40), A, B)
        assert wps[1] == P(90, -30)
        assert wps[2] == P(200, -30)
        assert wps[3] == P(200, 40)
        assert wps[4] == P(310, 40)
        assert wps[-1] == P(380, 40)

    def test_second_point_is_exit_x(self):
        src = cluster("S", 13.5, 7, 61, 10)
        wps = orthogonal_waypoints(P(0, 0), P(500, 0), src, B)
        assert wps[1].x == src.center_x + src.width / 2 + 40

    def test_without_source_cluster(self):
        wps = orthogonal_waypoints(P(50, 0), P(350, 0), None, B)
        assert wps == [P(50, 0), P(180, 0), P(180, 0), P(310, 0), P(350, 0)]

    def test_without_target_cluster(self):
        wps = orthogonal_waypoints(P(50, 0), P(350, 10), A, None, offset=5)
        assert wps == [P(50, 0), P(90, 5), P(350, 10)]

    def test_custom_clearance(self):
        cfg = RoutingConfig(cluster_clearance=10)
        wps = orthogonal_waypoints(P(50, 0), P(350, 0), A, B, config=cfg)
        assert wps[1] == P(60, 0)
        assert wps[4] == P(340, 0)


# ─── route() ──────────────────────────────────────────────────────────────────


class TestRoute:
    def test_same_cluster_is_bezier(self):
        src, tgt = P(10, 20), P(-30, 45)
        path, wps, kind = route(src, tgt, A, A)
        assert kind is RouteKind.Bezier
        assert wps == [src, tgt]
        assert path.startswith("M 10,20")
        assert path.split().count("C") == 1

    def test_same_cluster_ignores_offset(self):
        assert route(P(0, 0), P(50, 50), A, A, offset=75)[0] == route(P(0, 0), P(50, 50), A, A)[0]

    def test_unclustered_endpoint_falls_back_to_bezier(self):
        _, wps, kind = route(P(50, 0), P(350, 0), A, None)
        assert kind is RouteKind.Bezier
        assert len(wps) == 2

    def test_cross_cluster_is_orthogonal(self):
        path, wps, kind = route(P(50, 0), P(350, 0), A, B)
        assert kind is RouteKind.Orthogonal
        assert wps[1].x == 90
        assert path == (
            "M 50,0 L 90,0 Q 90,0 90,0 L 200,0 Q 200,0 200,0 L 200,0 Q 200,0 200,0 "
            "L 310,0 Q 310,0 310,0 C 330,0 350,0 350,0"
        )

    def test_tight_style(self):
        path, _, _ = route(P(0, 0), P(100, 0), A, A, style=CurveStyle.Tight)
        assert path == "M 0,0 C 25,0 75,0 100,0"
