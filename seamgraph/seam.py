"""
Vertical seam finders.

A vertical seam here runs left to right, one pixel per column, and is
returned as the row index chosen in each column. Three approaches:
1. Dynamic programming over the pixel grid (no graph at all)
2. Shortest path over a generative pixel graph (edges built on demand)
3. Shortest path over a materialized adjacency-list pixel graph

All three return a minimum-cost seam; with tied costs they may pick
different rows.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Union

import torch

from .energy import EnergyFunction
from .graph import AdjacencyListGraph, Edge
from .picture import Picture
from .solvers import DijkstraSolver, SolverFactory

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Source:
    """Virtual vertex with an edge to every pixel in the first column."""


@dataclass(frozen=True)
class Sink:
    """Virtual vertex reached from every pixel in the last column."""


@dataclass(frozen=True)
class Pixel:
    x: int
    y: int


Vertex = Union[Source, Sink, Pixel]

SOURCE = Source()
SINK = Sink()


def _check_picture(picture: Picture) -> None:
    if picture.width() == 0 or picture.height() == 0:
        raise ValueError(f"Cannot find a seam in an empty picture: {picture!r}")


def seam_cost(picture: Picture, f: EnergyFunction, seam: List[int]) -> float:
    """Total energy of the pixels on a seam."""
    return sum(f(picture, x, y) for x, y in enumerate(seam))


class SeamFinder(ABC):
    @abstractmethod
    def find_seam(self, picture: Picture, f: EnergyFunction) -> List[int]:
        """
        Find a minimum-energy vertical seam.

        Args:
            picture: Input picture
            f: Energy function (picture, x, y) -> float

        Returns:
            Row index per column, left to right; length picture.width()
        """
        raise NotImplementedError


class DynamicProgrammingSeamFinder(SeamFinder):
    """
    Cumulative minimum energy table, one column at a time.

    table[x, y] = f(x, y) + min(table[x - 1, y - 1 .. y + 1]), clipped to the
    picture's rows. The seam ends at the smallest cell of the last column
    and is traced back by picking the smallest of the (at most three)
    predecessor cells.
    """

    def find_seam(self, picture: Picture, f: EnergyFunction) -> List[int]:
        _check_picture(picture)
        W, H = picture.width(), picture.height()
        logger.debug("DP seam over %dx%d picture", W, H)

        table = torch.empty(W, H, dtype=torch.float64)
        inf = torch.full((1,), float('inf'), dtype=torch.float64)

        for x in range(W):
            energy = torch.tensor([f(picture, x, y) for y in range(H)], dtype=torch.float64)
            if x == 0:
                table[0] = energy
                continue
            prev = table[x - 1]
            # Row y can come from rows y - 1 (up), y (mid), y + 1 (down)
            up = torch.cat([inf, prev[:-1]])
            down = torch.cat([prev[1:], inf])
            table[x] = energy + torch.min(torch.min(up, prev), down)

        y = int(torch.argmin(table[W - 1]))
        seam = [y]
        for x in range(W - 1, 0, -1):
            lo, hi = max(0, y - 1), min(H - 1, y + 1)
            y = lo + int(torch.argmin(table[x - 1, lo:hi + 1]))
            seam.append(y)
        seam.reverse()
        return seam


class PixelGraph:
    """
    Generative graph over a picture's pixels.

    Nothing is stored beyond the picture and energy function: every call to
    neighbors() builds fresh Pixel vertices and energy-weighted edges.
    - SOURCE -> Pixel(0, y), weight f(0, y)
    - Pixel(x, y) -> Pixel(x + 1, y - 1 .. y + 1), weight of the destination
    - Pixel(width - 1, y) -> SINK, weight 0
    - SINK has no outgoing edges
    """

    def __init__(self, picture: Picture, f: EnergyFunction):
        self.picture = picture
        self.f = f
        self.source = SOURCE
        self.sink = SINK

    def neighbors(self, vertex: Vertex) -> List[Edge[Vertex]]:
        picture, f = self.picture, self.f
        if isinstance(vertex, Pixel):
            if vertex.x == picture.width() - 1:
                return [Edge(vertex, SINK, 0.0)]
            x = vertex.x + 1
            return [Edge(vertex, Pixel(x, y), f(picture, x, y))
                    for y in range(vertex.y - 1, vertex.y + 2)
                    if 0 <= y < picture.height()]
        if isinstance(vertex, Source):
            return [Edge(vertex, Pixel(0, y), f(picture, 0, y))
                    for y in range(picture.height())]
        if isinstance(vertex, Sink):
            return []
        raise TypeError(f"Not a pixel graph vertex: {vertex!r}")


def _rows(path: List[Vertex]) -> List[int]:
    """Drop the source and sink and keep each pixel's row."""
    return [pixel.y for pixel in path[1:-1]]


class GenerativeSeamFinder(SeamFinder):
    """
    Shortest SOURCE -> SINK path over a PixelGraph.

    Args:
        solver: Shortest-path solver factory (graph, start) -> solver
    """

    def __init__(self, solver: SolverFactory = DijkstraSolver):
        self.solver = solver

    def find_seam(self, picture: Picture, f: EnergyFunction) -> List[int]:
        _check_picture(picture)
        logger.debug("Generative seam over %dx%d picture with %s",
                     picture.width(), picture.height(), getattr(self.solver, '__name__', self.solver))
        graph = PixelGraph(picture, f)
        return _rows(self.solver(graph, graph.source).solution(graph.sink))


class AdjacencyListSeamFinder(SeamFinder):
    """
    Same topology as PixelGraph, but every vertex and edge is built up front.

    Each pixel's energy is evaluated exactly once while building the graph.

    Args:
        solver: Shortest-path solver factory (graph, start) -> solver
    """

    def __init__(self, solver: SolverFactory = DijkstraSolver):
        self.solver = solver

    @staticmethod
    def build_graph(picture: Picture, f: EnergyFunction) -> AdjacencyListGraph:
        W, H = picture.width(), picture.height()
        energy = [[f(picture, x, y) for y in range(H)] for x in range(W)]

        graph = AdjacencyListGraph()
        for y in range(H):
            graph.add_edge(Edge(SOURCE, Pixel(0, y), energy[0][y]))
        for x in range(W - 1):
            for y in range(H):
                for z in range(max(0, y - 1), min(H, y + 2)):
                    graph.add_edge(Edge(Pixel(x, y), Pixel(x + 1, z), energy[x + 1][z]))
        for y in range(H):
            graph.add_edge(Edge(Pixel(W - 1, y), SINK, 0.0))
        return graph

    def find_seam(self, picture: Picture, f: EnergyFunction) -> List[int]:
        _check_picture(picture)
        logger.debug("Adjacency-list seam over %dx%d picture with %s",
                     picture.width(), picture.height(), getattr(self.solver, '__name__', self.solver))
        graph = self.build_graph(picture, f)
        return _rows(self.solver(graph, SOURCE).solution(SINK))
