"""Exceptions raised by trace-routing."""

from __future__ import annotations


class RoutingError(ValueError):
    """Base class for all trace-routing errors."""


class AmbiguousMembershipError(RoutingError):
    def __init__(self, node_id: str, first: str, second: str) -> None:
        super().__init__(f"node '{node_id}' belongs to clusters '{first}' and '{second}'")
        self.node_id = node_id
        self.clusters = (first, second)


class DiagramInputError(RoutingError):
    """Malformed diagram document."""
