"""
Single-source shortest-path solvers.

Both solvers do all their work in the constructor and leave behind two
read-only maps:
- edge_to: vertex -> predecessor Edge (None for the start vertex)
- dist_to: vertex -> shortest known distance from the start

Vertices missing from dist_to were never reached. Solver classes are
themselves the constructor-like factory `(graph, start) -> solver`, so
callers can swap algorithms by passing a different class.
"""

import logging
import math
from abc import ABC
from types import MappingProxyType
from typing import Callable, Dict, Generic, Hashable, List, Mapping, Optional, TypeVar

from .errors import UnreachableGoalError
from .graph import Edge, Graph
from .minpq import ExtrinsicMinPQ, OptimizedHeapMinPQ

logger = logging.getLogger(__name__)

V = TypeVar('V', bound=Hashable)


class ShortestPathSolver(ABC, Generic[V]):
    """Shortest paths from one start vertex to everything reachable from it."""

    def __init__(self, graph: Graph[V], start: V):
        self.start = start
        self._edge_to: Dict[V, Optional[Edge[V]]] = {start: None}
        self._dist_to: Dict[V, float] = {start: 0.0}

    @property
    def edge_to(self) -> Mapping[V, Optional[Edge[V]]]:
        return MappingProxyType(self._edge_to)

    @property
    def dist_to(self) -> Mapping[V, float]:
        return MappingProxyType(self._dist_to)

    def distance(self, goal: V) -> float:
        """Shortest distance to goal, or inf if it was never reached."""
        return self._dist_to.get(goal, math.inf)

    def solution(self, goal: V) -> List[V]:
        """
        Vertices on the shortest path from the start to goal, both inclusive.

        Args:
            goal: Vertex to reach

        Returns:
            [start, ..., goal]

        Raises:
            UnreachableGoalError: if goal is not reachable from the start
        """
        if goal not in self._dist_to:
            raise UnreachableGoalError(f"{goal!r} is not reachable from {self.start!r}")
        path = [goal]
        edge = self._edge_to[goal]
        while edge is not None:
            path.append(edge.src)
            edge = self._edge_to[edge.src]
        path.reverse()
        return path

    def _relax(self, edge: Edge[V]) -> bool:
        """Record edge as the predecessor of edge.dst if it strictly improves it."""
        new_dist = self._dist_to[edge.src] + edge.weight
        if new_dist < self._dist_to.get(edge.dst, math.inf):
            self._dist_to[edge.dst] = new_dist
            self._edge_to[edge.dst] = edge
            return True
        return False


class DijkstraSolver(ShortestPathSolver[V]):
    """
    Priority-queue relaxation.

    A vertex is re-queued whenever one of its incoming edges improves its
    distance, including after it has already been removed, so negative
    edge weights are handled as long as no negative cycle is reachable.

    Args:
        graph: Graph to search
        start: Start vertex
        pq_factory: Zero-argument callable building an empty ExtrinsicMinPQ
    """

    def __init__(self, graph: Graph[V], start: V,
                 pq_factory: Callable[[], ExtrinsicMinPQ] = OptimizedHeapMinPQ):
        super().__init__(graph, start)
        pq = pq_factory()
        pq.add(start, 0.0)
        settled = 0

        while not pq.is_empty():
            vertex = pq.remove_min()
            settled += 1
            for edge in graph.neighbors(vertex):
                if self._relax(edge):
                    if pq.contains(edge.dst):
                        pq.change_priority(edge.dst, self._dist_to[edge.dst])
                    else:
                        pq.add(edge.dst, self._dist_to[edge.dst])

        logger.debug("Dijkstra from %r settled %d vertices (%d reached)",
                     start, settled, len(self._dist_to))


class ToposortDAGSolver(ShortestPathSolver[V]):
    """
    Topological-order relaxation for directed acyclic graphs.

    One depth-first traversal records vertices in post-order; reversed,
    that is a topological order, and relaxing every vertex's outgoing
    edges once in that order fixes each distance before the vertex is
    used. The result is undefined if a cycle is reachable from start.
    """

    def __init__(self, graph: Graph[V], start: V):
        super().__init__(graph, start)
        order = self._reverse_postorder(graph, start)
        for vertex in order:
            for edge in graph.neighbors(vertex):
                self._relax(edge)

        logger.debug("Toposort from %r ordered %d vertices", start, len(order))

    @staticmethod
    def _reverse_postorder(graph: Graph[V], start: V) -> List[V]:
        # Explicit stack of (vertex, remaining outgoing edges) instead of
        # recursion; pixel graphs are as deep as the picture is wide.
        visited = {start}
        postorder: List[V] = []
        stack = [(start, iter(graph.neighbors(start)))]

        while stack:
            vertex, edges = stack[-1]
            for edge in edges:
                if edge.dst not in visited:
                    visited.add(edge.dst)
                    stack.append((edge.dst, iter(graph.neighbors(edge.dst))))
                    break
            else:
                stack.pop()
                postorder.append(vertex)

        postorder.reverse()
        return postorder


SolverFactory = Callable[[Graph, Hashable], ShortestPathSolver]
