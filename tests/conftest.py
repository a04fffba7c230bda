"""Shared fixtures for the seamgraph test suite."""

import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import torch
import pytest
from seamgraph.graph import AdjacencyListGraph, Edge
from seamgraph.picture import Picture


def make_picture(columns):
    """Grayscale picture from per-column pixel values: columns[x][y]."""
    return Picture(torch.tensor(columns, dtype=torch.float64).T.contiguous())


def make_random_dag(n, edge_prob=0.3, low=-5.0, high=10.0, seed=0):
    """DAG on vertices 0..n-1 with edges only from lower to higher ids.

    Vertex 0 has an edge to vertex 1 and every vertex i > 0 has an edge from
    some lower vertex, so everything is reachable from 0.
    """
    gen = torch.Generator().manual_seed(seed)

    def weight():
        return low + (high - low) * torch.rand(1, generator=gen).item()

    graph = AdjacencyListGraph()
    graph.add_vertex(0)
    for j in range(1, n):
        parent = int(torch.randint(0, j, (1,), generator=gen))
        graph.add_edge(Edge(parent, j, weight()))
        for i in range(j):
            if i != parent and torch.rand(1, generator=gen).item() < edge_prob:
                graph.add_edge(Edge(i, j, weight()))
    return graph


@pytest.fixture
def diamond_graph():
    """A -> B (1), A -> C (4), B -> C (2), C -> D (1), plus isolated E."""
    graph = AdjacencyListGraph([
        Edge('A', 'B', 1.0),
        Edge('A', 'C', 4.0),
        Edge('B', 'C', 2.0),
        Edge('C', 'D', 1.0),
    ])
    graph.add_vertex('E')
    return graph
