"""
Minimum-cost seam finding for content-aware image resizing.

Vertical seams are found either by dynamic programming over the pixel grid
or as shortest paths through a pixel graph, using an indexed binary heap
priority queue and two interchangeable single-source shortest-path
solvers (priority-queue relaxation and DAG topological order).
"""

__version__ = "0.1.0"

from .errors import (SeamGraphError, DuplicateItemError, NotFoundError,
                     EmptyQueueError, UnreachableGoalError)
from .minpq import (PriorityNode, ExtrinsicMinPQ, OptimizedHeapMinPQ,
                    HeapMinPQ, UnsortedArrayMinPQ)
from .graph import Edge, Graph, AdjacencyListGraph
from .solvers import ShortestPathSolver, DijkstraSolver, ToposortDAGSolver
from .picture import Picture
from .energy import (EnergyFunction, GradientEnergyFunction, gradient_magnitude_energy,
                     normalize_energy, intensity_energy)
from .seam import (SeamFinder, DynamicProgrammingSeamFinder, GenerativeSeamFinder,
                   AdjacencyListSeamFinder, PixelGraph, Pixel, Source, Sink,
                   SOURCE, SINK, seam_cost)
from .finders import make_seam_finder, make_solver
from .benchmark import compare_seam_finders, time_seam_finder

__all__ = [
    'SeamGraphError',
    'DuplicateItemError',
    'NotFoundError',
    'EmptyQueueError',
    'UnreachableGoalError',
    'PriorityNode',
    'ExtrinsicMinPQ',
    'OptimizedHeapMinPQ',
    'HeapMinPQ',
    'UnsortedArrayMinPQ',
    'Edge',
    'Graph',
    'AdjacencyListGraph',
    'ShortestPathSolver',
    'DijkstraSolver',
    'ToposortDAGSolver',
    'Picture',
    'EnergyFunction',
    'GradientEnergyFunction',
    'gradient_magnitude_energy',
    'normalize_energy',
    'intensity_energy',
    'SeamFinder',
    'DynamicProgrammingSeamFinder',
    'GenerativeSeamFinder',
    'AdjacencyListSeamFinder',
    'PixelGraph',
    'Pixel',
    'Source',
    'Sink',
    'SOURCE',
    'SINK',
    'seam_cost',
    'make_seam_finder',
    'make_solver',
    'compare_seam_finders',
    'time_seam_finder',
]
