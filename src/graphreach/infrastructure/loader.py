"""Graph document models and JSON loading.

A graph document declares nodes and ordered edges, plus an optional
explicit adjacency map::

    {
      "nodes": [{"id": 5}, {"id": 4, "value": 4, "company": "Acme"}],
      "edges": [{"source": 5, "target": 4}],
      "adjacency": {"5": [8], "8": [2]}
    }

Edge order is neighbor order. A node's ``value`` defaults to its id.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, ValidationError, model_validator

type NodeId = int | str


class GraphLoadError(Exception):
    """A graph document could not be read or failed validation."""

    def __init__(self, path: Path, message: str) -> None:
        super().__init__(f"{path}: {message}")
        self.path = path
        self.message = message


class NodeSpec(BaseModel):
    """One entry of the ``nodes`` list."""

    model_config = {"frozen": True}

    id: int | str
    value: Any = None
    company: str = ""
    name: str = ""

    @property
    def resolved_value(self) -> Any:
        """The vertex value (falls back to the node id)."""
        return self.id if self.value is None else self.value


class EdgeSpec(BaseModel):
    """A directed edge ``source -> target``."""

    model_config = {"frozen": True}

    source: int | str
    target: int | str


class GraphDocument(BaseModel):
    """Root of a graph document."""

    model_config = {"frozen": True}

    nodes: list[NodeSpec] = Field(default_factory=list)
    edges: list[EdgeSpec] = Field(default_factory=list)
    adjacency: dict[int, list[int]] | None = None

    @model_validator(mode="after")
    def _check_references(self) -> GraphDocument:
        seen: set[NodeId] = set()
        for node in self.nodes:
            if node.id in seen:
                msg = f"duplicate node id {node.id!r}"
                raise ValueError(msg)
            seen.add(node.id)
        for edge in self.edges:
            for end in (edge.source, edge.target):
                if end not in seen:
                    msg = f"edge {edge.source!r} -> {edge.target!r} references unknown node {end!r}"
                    raise ValueError(msg)
        return self


def load_document(path: Path) -> GraphDocument:
    """Read and validate a JSON graph document.

    Raises:
        GraphLoadError: The file is unreadable, not JSON, or not a valid
            graph document.
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise GraphLoadError(path, f"cannot read file ({exc.strerror or exc})") from exc

    try:
        return GraphDocument.model_validate_json(raw)
    except ValidationError as exc:
        first = exc.errors()[0]
        loc = ".".join(str(part) for part in first["loc"]) or "document"
        raise GraphLoadError(path, f"invalid graph document at {loc}: {first['msg']}") from exc
