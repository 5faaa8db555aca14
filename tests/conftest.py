"""Shared pytest fixtures and test helpers for graphreach tests."""

from __future__ import annotations

import json
from collections.abc import Callable, Hashable, Iterable, Mapping
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner

from graphreach.domain.entities import Professional, Vertex

# 5 → 4, 5 → 8, 4 → 7, 8 → 7, 8 → 9, 1 → 7 (values equal ids)
SCENARIO_EDGES: list[tuple[int, int]] = [(5, 4), (5, 8), (4, 7), (8, 7), (8, 9), (1, 7)]


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def write_graph(tmp_path: Path) -> Callable[..., Path]:
    """Factory writing a graph document to ``tmp_path`` and returning its path."""

    def _write(document: Mapping[str, Any], name: str = "graph.json") -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(document), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def scenario_document() -> dict[str, Any]:
    """The example graph (values equal ids) as a graph document."""
    return {
        "nodes": [{"id": n} for n in (5, 4, 8, 7, 9, 1)],
        "edges": [{"source": s, "target": t} for s, t in SCENARIO_EDGES],
    }


@pytest.fixture
def people_document() -> dict[str, Any]:
    """alice → bob → carol → alice (cycle), dave isolated."""
    return {
        "nodes": [
            {"id": "alice", "company": "Initech"},
            {"id": "bob", "company": "Globex"},
            {"id": "carol", "company": "Acme"},
            {"id": "dave", "company": "Hooli"},
        ],
        "edges": [
            {"source": "alice", "target": "bob"},
            {"source": "bob", "target": "carol"},
            {"source": "carol", "target": "alice"},
        ],
    }


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


def build_vertices(
    edges: Iterable[tuple[Hashable, Hashable]],
    *,
    values: Mapping[Hashable, Any] | None = None,
    isolated: Iterable[Hashable] = (),
) -> dict[Hashable, Vertex[Any]]:
    """Build an object graph from ``(source, target)`` labels.

    Vertex data defaults to the label; *values* overrides it, which lets
    distinct vertices share a value (e.g. ``{"8a": 8, "8b": 8}``).
    """
    values = values or {}
    arena: dict[Hashable, Vertex[Any]] = {}

    def vertex(label: Hashable) -> Vertex[Any]:
        if label not in arena:
            arena[label] = Vertex(values.get(label, label))
        return arena[label]

    for label in isolated:
        vertex(label)
    for source, target in edges:
        vertex(source).neighbors.append(vertex(target))
    return arena


def build_network(
    companies: Mapping[str, str],
    links: Iterable[tuple[str, str]],
) -> dict[str, Professional]:
    """Build a contact network: name → company, plus directed connections."""
    people = {name: Professional(company=company, name=name) for name, company in companies.items()}
    for source, target in links:
        people[source].connections.append(people[target])
    return people
