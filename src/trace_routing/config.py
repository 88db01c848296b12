"""Centralized configuration for trace-routing."""

from __future__ import annotations

from dataclasses import dataclass

from trace_routing.types import CurveStyle, MembershipPolicy


@dataclass(frozen=True)
class RoutingConfig:
    """Constants for one routing pass."""

    smooth_curvature: float = 0.4
    tight_curvature: float = 0.25
    cluster_clearance: float = 40  # gap kept between a cluster edge and the route
    parallel_threshold: float = 100
    offset_increment: float = 25
    membership: MembershipPolicy = MembershipPolicy.FirstWins

    def curvature(self, style: CurveStyle) -> float:
        if style is CurveStyle.Tight:
            return self.tight_curvature
        return self.smooth_curvature


@dataclass(frozen=True)
class OverlapConfig:
    """Node box size and spacing used by overlap resolution."""

    node_width: float = 320
    node_height: float = 140
    min_h_spacing: float = 380
    min_v_spacing: float = 260
    near_band: float = 150
    overlap_margin: float = 60
    spacing_margin: float = 80
    grid_size: float = 20
    passes: int = 5


DEFAULT_CONFIG = RoutingConfig()
DEFAULT_OVERLAP_CONFIG = OverlapConfig()
