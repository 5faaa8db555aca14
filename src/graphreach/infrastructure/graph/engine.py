"""GraphEngine — lazy-built NetworkX graph over a graph document.

The DiGraph is built on first access and never shared across engines.
Materialized views (vertex arena, professional arena, adjacency map) are
rebuilt per call so each traversal gets its own, unshared objects.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import networkx as nx

from graphreach.domain.entities import Professional, Vertex

if TYPE_CHECKING:
    from graphreach.infrastructure.loader import GraphDocument, NodeId

logger = logging.getLogger(__name__)

type _Graph = nx.DiGraph


class GraphViewError(Exception):
    """The requested view cannot be built from this document."""


class GraphEngine:
    """Lazy-loading graph engine backed by a validated graph document."""

    def __init__(self, document: GraphDocument) -> None:
        self._document = document
        self._graph: _Graph | None = None

    @property
    def graph(self) -> _Graph:
        """Return the graph, building it from the document on first access."""
        if self._graph is None:
            self._graph = self._build_from_document()
        return self._graph

    def _build_from_document(self) -> _Graph:
        """Build a DiGraph: all nodes first, then edges in document order.

        Successor order in a DiGraph follows edge insertion order, which
        becomes the neighbor order of the materialized vertices.
        """
        g: _Graph = nx.DiGraph()
        for node in self._document.nodes:
            g.add_node(node.id, value=node.resolved_value, company=node.company, name=node.name)
        for edge in self._document.edges:
            g.add_edge(edge.source, edge.target)
        logger.debug(
            "Built graph: %d nodes, %d edges", g.number_of_nodes(), g.number_of_edges()
        )
        return g

    def resolve(self, raw: str) -> NodeId | None:
        """Map a command-line token to a node id, or None if absent.

        Tries the token as a string id first, then as an integer id.
        """
        g = self.graph
        if raw in g:
            return raw
        try:
            as_int = int(raw)
        except ValueError:
            return None
        return as_int if as_int in g else None

    def vertices(self) -> dict[NodeId, Vertex[Any]]:
        """Materialize the object graph as an arena keyed by node id."""
        g = self.graph
        arena: dict[NodeId, Vertex[Any]] = {
            node_id: Vertex(attrs["value"]) for node_id, attrs in g.nodes(data=True)
        }
        for node_id, vertex in arena.items():
            vertex.neighbors = [arena[succ] for succ in g.successors(node_id)]
        return arena

    def professionals(self) -> dict[NodeId, Professional]:
        """Materialize the contact network as an arena keyed by node id."""
        g = self.graph
        arena: dict[NodeId, Professional] = {
            node_id: Professional(company=attrs["company"], name=attrs["name"] or str(node_id))
            for node_id, attrs in g.nodes(data=True)
        }
        for node_id, person in arena.items():
            person.connections = [arena[succ] for succ in g.successors(node_id)]
        return arena

    def adjacency(self) -> dict[int, set[int]]:
        """Return the adjacency map: the explicit one if declared, else derived.

        Raises:
            GraphViewError: The map must be derived but some node ids are
                not integers.
        """
        if self._document.adjacency is not None:
            return {node: set(targets) for node, targets in self._document.adjacency.items()}

        g = self.graph
        non_int = [n for n in g if not isinstance(n, int)]
        if non_int:
            msg = f"adjacency view needs integer node ids, got {non_int[0]!r}"
            raise GraphViewError(msg)
        return {node: set(g.successors(node)) for node in g}
