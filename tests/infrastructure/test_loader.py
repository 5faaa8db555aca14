"""Tests for graph document models and JSON loading."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from graphreach.infrastructure.loader import GraphDocument, GraphLoadError, NodeSpec, load_document


class TestNodeSpec:
    def test_value_defaults_to_id(self) -> None:
        assert NodeSpec(id=5).resolved_value == 5

    def test_explicit_value(self) -> None:
        assert NodeSpec(id="a", value=3).resolved_value == 3

    def test_falsy_value_kept(self) -> None:
        assert NodeSpec(id=5, value=0).resolved_value == 0


class TestGraphDocument:
    def test_empty_document(self) -> None:
        doc = GraphDocument()
        assert doc.nodes == []
        assert doc.edges == []
        assert doc.adjacency is None

    def test_adjacency_keys_coerced_from_json(self) -> None:
        doc = GraphDocument.model_validate_json('{"adjacency": {"5": [8], "8": [2]}}')
        assert doc.adjacency == {5: [8], 8: [2]}

    def test_duplicate_node_rejected(self) -> None:
        with pytest.raises(ValueError, match="duplicate node id"):
            GraphDocument.model_validate({"nodes": [{"id": 1}, {"id": 1}]})

    def test_unknown_edge_endpoint_rejected(self) -> None:
        with pytest.raises(ValueError, match="unknown node 2"):
            GraphDocument.model_validate(
                {"nodes": [{"id": 1}], "edges": [{"source": 1, "target": 2}]}
            )

    def test_string_and_int_ids_are_distinct(self) -> None:
        with pytest.raises(ValueError, match="unknown node"):
            GraphDocument.model_validate(
                {"nodes": [{"id": 1}], "edges": [{"source": 1, "target": "1"}]}
            )


class TestLoadDocument:
    def test_loads_valid_document(
        self,
        write_graph: Callable[..., Path],
        scenario_document: dict[str, Any],
    ) -> None:
        doc = load_document(write_graph(scenario_document))
        assert [n.id for n in doc.nodes] == [5, 4, 8, 7, 9, 1]
        assert len(doc.edges) == 6

    def test_missing_file(self, tmp_path: Path) -> None:
        path = tmp_path / "missing.json"
        with pytest.raises(GraphLoadError, match="cannot read file") as excinfo:
            load_document(path)
        assert excinfo.value.path == path

    def test_invalid_json(self, tmp_path: Path) -> None:
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(GraphLoadError, match="invalid graph document"):
            load_document(path)

    def test_validation_error_reports_location(self, write_graph: Callable[..., Path]) -> None:
        path = write_graph({"nodes": [{"value": 3}]})
        with pytest.raises(GraphLoadError, match=r"nodes\.0\.id"):
            load_document(path)
