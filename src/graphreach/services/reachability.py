"""ReachabilityService — the traversal operations behind the CLI.

Each method materializes one view of the graph from the engine, resolves
its command-line tokens, and delegates to the pure functions in
:mod:`graphreach.domain.traversal`.
"""

from __future__ import annotations

import logging

from graphreach.domain import traversal
from graphreach.infrastructure.graph.engine import GraphViewError
from graphreach.services.base import BaseService
from graphreach.services.result import ErrorCode, ServiceResult
from graphreach.services.telemetry import trace_span, traced

logger = logging.getLogger(__name__)


class ReachabilityService(BaseService):
    """Runs reachability queries against one loaded graph."""

    # ------------------------------------------------------------------
    # Object graph
    # ------------------------------------------------------------------

    @traced
    def odd_vertices(self, start: str) -> ServiceResult:
        """Count odd-valued vertices reachable from *start*."""
        warnings: list[str] = []
        with trace_span("materialize_vertices") as span:
            arena = self._engine.vertices()
            if span:
                span.annotate("vertices", len(arena))
        vertex = self._lookup(arena, start, warnings)

        try:
            count = traversal.odd_vertices(vertex)
        except TypeError as exc:
            return ServiceResult.failure(
                "odd_vertices",
                ErrorCode.INVALID_VALUES,
                f"Vertex values must be integers: {exc}",
            )

        return ServiceResult(
            ok=True,
            op="odd_vertices",
            data={"start": start, "count": count},
            warnings=warnings,
        )

    @traced
    def sorted_reachable(self, start: str) -> ServiceResult:
        """Sorted values of every vertex reachable from *start*."""
        warnings: list[str] = []
        arena = self._engine.vertices()
        vertex = self._lookup(arena, start, warnings)

        try:
            values = traversal.sorted_reachable(vertex)
        except TypeError as exc:
            return ServiceResult.failure(
                "sorted_reachable",
                ErrorCode.INVALID_VALUES,
                f"Reachable vertex values cannot be ordered: {exc}",
            )

        return ServiceResult(
            ok=True,
            op="sorted_reachable",
            data={"start": start, "count": len(values), "values": values},
            warnings=warnings,
        )

    @traced
    def two_way(self, first: str, second: str) -> ServiceResult:
        """Whether *first* and *second* can each reach the other."""
        warnings: list[str] = []
        arena = self._engine.vertices()
        v1 = self._lookup(arena, first, warnings)
        v2 = self._lookup(arena, second, warnings)

        with trace_span("walk"):
            mutual = traversal.two_way(v1, v2)

        return ServiceResult(
            ok=True,
            op="two_way",
            data={
                "first": first,
                "second": second,
                "two_way": mutual,
            },
            warnings=warnings,
        )

    # ------------------------------------------------------------------
    # Adjacency map
    # ------------------------------------------------------------------

    @traced
    def sorted_reachable_in_map(self, start: int) -> ServiceResult:
        """Sorted ids reachable from *start* through the adjacency map."""
        op = "sorted_reachable_map"
        try:
            graph = self._engine.adjacency()
        except GraphViewError as exc:
            return ServiceResult.failure(op, ErrorCode.UNSUPPORTED_VIEW, str(exc))

        warnings: list[str] = []
        if start not in graph:
            warnings.append(f"Vertex {start} is not a key of the adjacency map")

        values = traversal.sorted_reachable_in_map(graph, start)
        return ServiceResult(
            ok=True,
            op=op,
            data={"start": start, "count": len(values), "values": values},
            warnings=warnings,
        )

    @traced
    def positive_path(self, start: int, end: int) -> ServiceResult:
        """Whether a strictly increasing positive path joins *start* to *end*."""
        op = "positive_path"
        try:
            graph = self._engine.adjacency()
        except GraphViewError as exc:
            return ServiceResult.failure(op, ErrorCode.UNSUPPORTED_VIEW, str(exc))

        exists = traversal.positive_path_exists(graph, start, end)
        logger.debug("positive_path %d -> %d: %s", start, end, exists)
        return ServiceResult(
            ok=True,
            op=op,
            data={"start": start, "end": end, "exists": exists},
        )

    # ------------------------------------------------------------------
    # Professional network
    # ------------------------------------------------------------------

    @traced
    def network_search(self, start: str, company: str) -> ServiceResult:
        """Whether anyone in *start*'s extended network works at *company*."""
        warnings: list[str] = []
        arena = self._engine.professionals()
        person = self._lookup(arena, start, warnings)

        found = traversal.has_extended_connection_at_company(person, company)
        return ServiceResult(
            ok=True,
            op="network_search",
            data={"start": start, "company": company, "found": found},
            warnings=warnings,
        )
