"""Position adjustments applied before routing."""

from trace_routing.layout.overlap import resolve_overlaps, snap

__all__ = [
    "resolve_overlaps",
    "snap",
]
