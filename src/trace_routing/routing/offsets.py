"""Perpendicular offsets for parallel edges."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from trace_routing.config import DEFAULT_CONFIG, RoutingConfig
from trace_routing.types import EdgePath, Position

logger = logging.getLogger(__name__)


def is_parallel(path: EdgePath, source: Position, target: Position, threshold: float) -> bool:
    """Whether ``path`` starts near ``source`` and ends near ``target``."""
    if len(path.waypoints) < 2:
        return False
    return path.waypoints[0].distance_to(source) < threshold and path.waypoints[-1].distance_to(target) < threshold


def compute_offset(
    edge_id: str,
    existing_paths: Iterable[EdgePath],
    source: Position,
    target: Position,
    config: RoutingConfig = DEFAULT_CONFIG,
) -> float:
    """Offset for a new edge: one increment per parallel edge already routed.

    The result depends on which edges were routed before this one, so a
    pass must visit edges in a stable order.
    """
    count = sum(1 for path in existing_paths if is_parallel(path, source, target, config.parallel_threshold))
    if count:
        logger.debug("edge %r runs parallel to %d routed edge(s)", edge_id, count)
    return count * config.offset_increment
