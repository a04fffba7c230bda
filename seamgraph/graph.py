"""
Directed, weighted graph abstraction.

A graph is anything with a `neighbors(vertex)` method returning the
outgoing edges of that vertex. Vertices only need to be hashable. There is
no incoming-edge index and no requirement to enumerate all vertices up
front, which lets graphs synthesize their edges on demand.
"""

from dataclasses import dataclass
from typing import Dict, Generic, Hashable, Iterable, List, Protocol, TypeVar, runtime_checkable

V = TypeVar('V', bound=Hashable)


@dataclass(frozen=True)
class Edge(Generic[V]):
    """Directed edge src -> dst with a float weight."""
    src: V
    dst: V
    weight: float


@runtime_checkable
class Graph(Protocol[V]):
    """Anything exposing the outgoing edges of a vertex."""

    def neighbors(self, vertex: V) -> List[Edge[V]]:
        ...


class AdjacencyListGraph(Generic[V]):
    """
    Materialized graph backed by a vertex -> [Edge] mapping.

    Edges keep their insertion order. Adding an edge also registers both of
    its endpoints, so sinks with no outgoing edges still show up in
    `vertices()`.
    """

    def __init__(self, edges: Iterable[Edge[V]] = ()):
        self._adj: Dict[V, List[Edge[V]]] = {}
        for edge in edges:
            self.add_edge(edge)

    def add_vertex(self, vertex: V) -> None:
        self._adj.setdefault(vertex, [])

    def add_edge(self, edge: Edge[V]) -> None:
        self.add_vertex(edge.src)
        self.add_vertex(edge.dst)
        self._adj[edge.src].append(edge)

    def vertices(self) -> Iterable[V]:
        return self._adj.keys()

    def neighbors(self, vertex: V) -> List[Edge[V]]:
        return list(self._adj.get(vertex, ()))

    def __len__(self) -> int:
        return len(self._adj)
