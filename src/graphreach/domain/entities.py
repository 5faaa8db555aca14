"""Graph entities — the vertex and professional collaborators.

The traversal functions only rely on the ``VertexLike`` and
``ProfessionalLike`` protocols. The dataclasses here are the concrete
collaborators produced by the graph document loader and used in tests.

INVARIANT: entity identity is reference identity. Both dataclasses use
``eq=False`` so two vertices holding equal data stay distinct.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from typing import Any, Protocol


class Comparable(Protocol):
    """Anything that supports ``<`` (enough for ``sorted``)."""

    def __lt__(self, other: Any, /) -> bool: ...


class VertexLike[T](Protocol):
    """A vertex exposing its value and an ordered sequence of neighbors."""

    @property
    def data(self) -> T: ...

    @property
    def neighbors(self) -> Sequence[VertexLike[T]]: ...


class ProfessionalLike(Protocol):
    """A person in a contact network."""

    @property
    def company(self) -> str: ...

    @property
    def connections(self) -> Iterable[ProfessionalLike]: ...


@dataclass(eq=False)
class Vertex[T]:
    """A graph vertex holding ``data`` and shared neighbor references."""

    data: T
    neighbors: list[Vertex[T]] = field(default_factory=list)

    def __repr__(self) -> str:
        # Neighbors may be cyclic; the default dataclass repr would recurse.
        return f"Vertex(data={self.data!r}, neighbors={len(self.neighbors)})"


@dataclass(eq=False)
class Professional:
    """A professional with a company and a (possibly cyclic) contact list."""

    company: str
    connections: list[Professional] = field(default_factory=list)
    name: str = ""

    def __repr__(self) -> str:
        return (
            f"Professional(name={self.name!r}, company={self.company!r}, "
            f"connections={len(self.connections)})"
        )
