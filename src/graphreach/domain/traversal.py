"""Depth-first reachability over object graphs and adjacency maps.

Pure functions, no infrastructure dependencies. Every public operation is a
thin wrapper around :func:`depth_first`, instantiated with a different
neighbor function, visited key, accumulator or stopping condition.

INVARIANT: each vertex is yielded at most once per top-level call, so every
operation terminates on finite cyclic graphs. The visited set lives inside
the walk and is discarded when the walk ends.

Absent inputs never raise: a ``None`` start gives ``0``, ``[]`` or ``False``.
"""

from __future__ import annotations

from collections.abc import Callable, Hashable, Iterable, Iterator, Mapping, Set
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from graphreach.domain.entities import Comparable, ProfessionalLike, VertexLike

type AdjacencyMap = Mapping[int, Set[int]]


# ── Traversal engine ─────────────────────────────────────────────────


def depth_first[N](
    start: N,
    neighbors: Callable[[N], Iterable[N]],
    *,
    key: Callable[[N], Hashable] | None = None,
) -> Iterator[N]:
    """Yield every node reachable from *start* in depth-first pre-order.

    Uses an explicit stack instead of recursion. Neighbors are pushed in
    reverse and the visited check happens on pop, which reproduces the
    recursive visit order (neighbor iteration order = insertion order).

    Args:
        start: The first node yielded.
        neighbors: Returns the successors of a node.
        key: Maps a node to its visited-set key. ``None`` uses the node
            itself (value equality); pass ``id`` for identity tracking.
    """
    visited: set[Hashable] = set()
    stack: list[N] = [start]
    while stack:
        node = stack.pop()
        marker = node if key is None else key(node)
        if marker in visited:
            continue
        visited.add(marker)
        yield node
        stack.extend(reversed(list(neighbors(node))))


def _vertex_neighbors[T](vertex: VertexLike[T]) -> list[VertexLike[T]]:
    return [n for n in vertex.neighbors if n is not None]


def _walk_vertices[T](start: VertexLike[T]) -> Iterator[VertexLike[T]]:
    """Identity-tracked walk over an object graph."""
    return depth_first(start, _vertex_neighbors, key=id)


def _walk_map(graph: AdjacencyMap, start: int) -> Iterator[int]:
    """Id-tracked walk over an adjacency map. Non-key neighbors are sinks."""
    return depth_first(start, lambda node: graph.get(node, ()))


# ── Object-graph operations ──────────────────────────────────────────


def odd_vertices(start: VertexLike[int] | None) -> int:
    """Count reachable vertices (start included) whose value is odd.

    Example graph ``5→4, 5→8, 4→7, 8→7, 8→9, 1→7``: from 5 the odd
    vertices are 5, 7 and 9, so the count is 3.

    Raises:
        TypeError: A reachable vertex holds a non-integer value (``bool``
            included).
    """
    if start is None:
        return 0
    count = 0
    for vertex in _walk_vertices(start):
        value = vertex.data
        if isinstance(value, bool) or not isinstance(value, int):
            msg = f"vertex value {value!r} is not an integer"
            raise TypeError(msg)
        if value % 2 != 0:
            count += 1
    return count


def sorted_reachable[C: Comparable](start: VertexLike[C] | None) -> list[C]:
    """Return the values of all reachable vertices, sorted ascending.

    One entry per distinct vertex, so equal values held by different
    vertices all appear in the output.
    """
    if start is None:
        return []
    return sorted(vertex.data for vertex in _walk_vertices(start))


def reaches[T](source: VertexLike[T] | None, target: VertexLike[T] | None) -> bool:
    """Whether *target* is reachable from *source* (a vertex reaches itself)."""
    if source is None or target is None:
        return False
    return any(vertex is target for vertex in _walk_vertices(source))


def two_way[T](v1: VertexLike[T] | None, v2: VertexLike[T] | None) -> bool:
    """Whether *v1* and *v2* can each reach the other.

    Runs two independent one-direction searches, each with its own
    visited set.
    """
    return reaches(v1, v2) and reaches(v2, v1)


# ── Adjacency-map operations ─────────────────────────────────────────


def sorted_reachable_in_map(graph: AdjacencyMap, start: int) -> list[int]:
    """Return all ids reachable from *start* through *graph*, sorted ascending.

    Returns ``[]`` when *start* is not a key of *graph*.
    """
    if start not in graph:
        return []
    return sorted(_walk_map(graph, start))


def positive_path_exists(graph: AdjacencyMap, start: int, end: int) -> bool:
    """Whether a strictly increasing path of positive ids leads from *start* to *end*.

    Only neighbors greater than both zero and the current id are explored.
    Ids can only grow along a path, which is what makes the search
    terminate; the walk's visited set merely prunes repeated sub-searches.
    """
    if start < 0 or end < 0:
        return False
    if start == end:
        return True
    if start not in graph:
        return False

    def increasing(node: int) -> list[int]:
        return [n for n in graph.get(node, ()) if n > 0 and n > node]

    return any(node == end for node in depth_first(start, increasing))


# ── Professional network ─────────────────────────────────────────────


def has_extended_connection_at_company(
    person: ProfessionalLike | None,
    company_name: str,
) -> bool:
    """Whether anyone in *person*'s extended network works at *company_name*.

    The network includes *person* and everyone reachable through any number
    of connections. Company names compare exactly (case-sensitive).
    """
    if person is None:
        return False

    def contacts(p: ProfessionalLike) -> list[ProfessionalLike]:
        return [c for c in p.connections if c is not None]

    return any(p.company == company_name for p in depth_first(person, contacts, key=id))
