"""BaseService — foundation for graphreach services.

Every service receives a :class:`GraphEngine` at construction time and
materializes the view it needs (vertex arena, contact network, adjacency
map) per call, so no traversal state survives between calls.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from graphreach.infrastructure.graph.engine import GraphEngine
    from graphreach.infrastructure.loader import NodeId

logger = logging.getLogger(__name__)


class BaseService:
    """Base for service-layer classes.

    Usage::

        class ReachabilityService(BaseService):
            def odd_vertices(self, start: str) -> ServiceResult:
                arena = self._engine.vertices()
                ...
    """

    def __init__(self, engine: GraphEngine) -> None:
        self._engine = engine

    def _lookup[V](
        self,
        arena: dict[NodeId, V],
        raw: str,
        warnings: list[str],
    ) -> V | None:
        """Resolve a command-line token against *arena*.

        Unknown tokens resolve to None (the absent start) and add a warning.
        """
        node_id = self._engine.resolve(raw)
        if node_id is None:
            logger.debug("Unknown vertex %r, treating as absent", raw)
            warnings.append(f"Vertex '{raw}' not found in graph; treated as absent")
            return None
        return arena[node_id]
