"""
Name-based selection of seam finders, solvers and priority queues.

Lets callers (and benchmarks) pick an implementation with keyword strings,
e.g. make_seam_finder(method='generative', solver='toposort').
"""

from functools import partial
from typing import Dict, Type

from .minpq import ExtrinsicMinPQ, HeapMinPQ, OptimizedHeapMinPQ, UnsortedArrayMinPQ
from .seam import AdjacencyListSeamFinder, DynamicProgrammingSeamFinder, GenerativeSeamFinder, SeamFinder
from .solvers import DijkstraSolver, ShortestPathSolver, SolverFactory, ToposortDAGSolver

PRIORITY_QUEUES: Dict[str, Type[ExtrinsicMinPQ]] = {
    'optimized': OptimizedHeapMinPQ,
    'heap': HeapMinPQ,
    'unsorted': UnsortedArrayMinPQ,
}

SOLVERS: Dict[str, Type[ShortestPathSolver]] = {
    'dijkstra': DijkstraSolver,
    'toposort': ToposortDAGSolver,
}

SEAM_FINDERS: Dict[str, Type[SeamFinder]] = {
    'dp': DynamicProgrammingSeamFinder,
    'generative': GenerativeSeamFinder,
    'adjacency': AdjacencyListSeamFinder,
}


def _lookup(registry: Dict[str, type], kind: str, name: str) -> type:
    try:
        return registry[name]
    except KeyError:
        raise ValueError(f"Invalid {kind}: {name!r}. Must be one of {sorted(registry)}.") from None


def make_solver(name: str = 'dijkstra', pq: str = 'optimized') -> SolverFactory:
    """
    Solver factory (graph, start) -> ShortestPathSolver.

    Args:
        name: 'dijkstra' or 'toposort'
        pq: Priority queue for 'dijkstra': 'optimized', 'heap' or 'unsorted'.
            Ignored by 'toposort'.
    """
    solver = _lookup(SOLVERS, 'solver', name)
    pq_class = _lookup(PRIORITY_QUEUES, 'priority queue', pq)
    if solver is DijkstraSolver:
        return partial(DijkstraSolver, pq_factory=pq_class)
    return solver


def make_seam_finder(method: str = 'dp', solver: str = 'dijkstra',
                     pq: str = 'optimized') -> SeamFinder:
    """
    Build a seam finder.

    Args:
        method: 'dp' (table, no graph), 'generative' (on-demand pixel graph)
                or 'adjacency' (materialized pixel graph)
        solver: Shortest-path solver for the graph methods
        pq: Priority queue for the 'dijkstra' solver

    Returns:
        SeamFinder instance
    """
    finder = _lookup(SEAM_FINDERS, 'method', method)
    factory = make_solver(solver, pq)
    if finder is DynamicProgrammingSeamFinder:
        return finder()
    return finder(factory)
