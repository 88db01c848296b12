"""Intermediate representation of a diagram to route."""

from trace_routing.ir.graph import DiagramIR

__all__ = [
    "DiagramIR",
]
