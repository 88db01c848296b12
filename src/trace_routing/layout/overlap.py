"""Node overlap resolution for supplied positions.

An optional pre-pass before routing: nodes whose boxes overlap, or that sit
too close in one axis while nearly aligned in the other, are pushed apart,
then every coordinate is snapped to the grid. Only existing positions are
adjusted; nothing here places nodes from scratch.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping

from trace_routing.config import DEFAULT_OVERLAP_CONFIG, OverlapConfig
from trace_routing.types import Position

logger = logging.getLogger(__name__)


def snap(value: float, grid: float) -> float:
    """Round to the nearest grid line, halves rounding up."""
    return math.floor(value / grid + 0.5) * grid


def _push(coords: list[list[float]], i: int, j: int, axis: int, amount: float) -> None:
    # the node further along the axis moves; ties move the first node
    if coords[i][axis] < coords[j][axis]:
        coords[j][axis] += amount
    else:
        coords[i][axis] += amount


def resolve_overlaps(
    positions: Mapping[str, Position],
    config: OverlapConfig = DEFAULT_OVERLAP_CONFIG,
) -> dict[str, Position]:
    """Return new positions with overlapping nodes pushed apart and grid-snapped.

    Pairs are visited in input order for ``config.passes`` passes, so the
    result is deterministic for a given mapping order.
    """
    ids = list(positions)
    coords = [[positions[n].x, positions[n].y] for n in ids]
    moves = 0

    for _ in range(config.passes):
        for i in range(len(ids)):
            for j in range(i + 1, len(ids)):
                h_dist = abs(coords[i][0] - coords[j][0])
                v_dist = abs(coords[i][1] - coords[j][1])

                overlap_x = config.node_width - h_dist
                overlap_y = config.node_height - v_dist
                if overlap_x > 0 and overlap_y > 0:
                    if overlap_x < overlap_y:
                        _push(coords, i, j, 0, overlap_x + config.overlap_margin)
                    else:
                        _push(coords, i, j, 1, overlap_y + config.overlap_margin)
                    moves += 1

                # distances are from before this pair's first push
                if v_dist < config.near_band and h_dist < config.min_h_spacing:
                    _push(coords, i, j, 0, config.min_h_spacing - h_dist + config.spacing_margin)
                    moves += 1
                if h_dist < config.near_band and v_dist < config.min_v_spacing:
                    _push(coords, i, j, 1, config.min_v_spacing - v_dist + config.spacing_margin)
                    moves += 1

    logger.debug("overlap resolution moved nodes %d time(s) across %d node(s)", moves, len(ids))
    return {
        node_id: Position(snap(x, config.grid_size), snap(y, config.grid_size))
        for node_id, (x, y) in zip(ids, coords)
    }
