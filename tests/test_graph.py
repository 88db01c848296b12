"""Tests for ir.graph: DiagramIR construction from parts and from JSON documents."""

from __future__ import annotations

import pytest

from trace_routing.errors import DiagramInputError
from trace_routing.ir.graph import DiagramIR
from trace_routing.types import Cluster, Edge, Position


def _doc(**overrides):
    doc = {
        "nodePositions": {
            "claim": {"x": 1400, "y": 500},
            "src1": {"x": 1000, "y": 950},
            "driver1": {"x": 1200, "y": 50.5},
        },
        "clusters": [
            {"id": "claim", "centerX": 1400, "centerY": 500, "width": 400, "height": 200, "nodeIds": ["claim"]},
            {"id": "sources", "centerX": 1400, "centerY": 950, "width": 1200, "height": 300, "nodeIds": ["src1"]},
        ],
        "edges": [
            {"id": "e-src1", "source": "src1", "target": "claim"},
            {"id": "e-driver1", "source": "driver1", "target": "claim"},
        ],
    }
    doc.update(overrides)
    return doc


class TestFromDict:
    def test_positions(self):
        d = DiagramIR.from_dict(_doc())
        assert d.node_positions() == {
            "claim": Position(1400, 500),
            "src1": Position(1000, 950),
            "driver1": Position(1200, 50.5),
        }

    def test_clusters(self):
        d = DiagramIR.from_dict(_doc())
        assert d.clusters[0] == Cluster("claim", 1400, 500, 400, 200, frozenset({"claim"}))
        assert d.clusters[1].node_ids == frozenset({"src1"})

    def test_edges_in_input_order(self):
        d = DiagramIR.from_dict(_doc())
        assert d.edges() == [Edge("e-src1", "src1", "claim"), Edge("e-driver1", "driver1", "claim")]

    def test_edge_order_independent_of_node_order(self):
        edges = [
            {"id": "late", "source": "driver1", "target": "claim"},
            {"id": "early", "source": "claim", "target": "src1"},
        ]
        d = DiagramIR.from_dict(_doc(edges=edges))
        assert [e.id for e in d.edges()] == ["late", "early"]

    def test_duplicate_edges_kept(self):
        edges = [{"id": "dup", "source": "src1", "target": "claim"}] * 2
        d = DiagramIR.from_dict(_doc(edges=edges))
        assert d.edge_count() == 2

    def test_missing_sections_default_empty(self):
        d = DiagramIR.from_dict({})
        assert d.node_count() == 0
        assert d.edges() == []
        assert d.clusters == []

    def test_unpositioned_endpoint(self):
        edges = [{"id": "e1", "source": "ghost", "target": "claim"}]
        d = DiagramIR.from_dict(_doc(edges=edges))
        assert d.unpositioned_nodes() == ["ghost"]
        assert "ghost" not in d.node_positions()


class TestInvalidInput:
    def test_not_an_object(self):
        with pytest.raises(DiagramInputError, match="JSON object"):
            DiagramIR.from_dict([])

    def test_missing_coordinate(self):
        with pytest.raises(DiagramInputError, match="missing 'y'"):
            DiagramIR.from_dict(_doc(nodePositions={"a": {"x": 1}}))

    def test_non_numeric_coordinate(self):
        with pytest.raises(DiagramInputError, match="expected a number"):
            DiagramIR.from_dict(_doc(nodePositions={"a": {"x": "1", "y": 2}}))

    def test_bool_is_not_a_number(self):
        with pytest.raises(DiagramInputError):
            DiagramIR.from_dict(_doc(nodePositions={"a": {"x": True, "y": 2}}))

    def test_cluster_missing_field(self):
        with pytest.raises(DiagramInputError, match=r"clusters\[0\]: missing 'width'"):
            DiagramIR.from_dict(_doc(clusters=[{"id": "c", "centerX": 0, "centerY": 0, "height": 1, "nodeIds": []}]))

    def test_node_ids_must_be_array(self):
        bad = {"id": "c", "centerX": 0, "centerY": 0, "width": 1, "height": 1, "nodeIds": "a"}
        with pytest.raises(DiagramInputError, match="nodeIds"):
            DiagramIR.from_dict(_doc(clusters=[bad]))

    def test_edge_missing_target(self):
        with pytest.raises(DiagramInputError, match=r"edges\[0\]: missing 'target'"):
            DiagramIR.from_dict(_doc(edges=[{"id": "e", "source": "a"}]))

    def test_edges_must_be_array(self):
        with pytest.raises(DiagramInputError, match="'edges' must be a JSON array"):
            DiagramIR.from_dict(_doc(edges={}))

    def test_input_error_is_value_error(self):
        assert issubclass(DiagramInputError, ValueError)
