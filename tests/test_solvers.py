"""Tests for the shortest-path solvers."""

import sys
import os
import math
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import pytest
from functools import partial
from seamgraph.graph import AdjacencyListGraph, Edge
from seamgraph.minpq import HeapMinPQ, UnsortedArrayMinPQ
from seamgraph.solvers import DijkstraSolver, ToposortDAGSolver
from seamgraph.errors import UnreachableGoalError

from conftest import make_random_dag


ALL_SOLVERS = [
    DijkstraSolver,
    ToposortDAGSolver,
    partial(DijkstraSolver, pq_factory=HeapMinPQ),
    partial(DijkstraSolver, pq_factory=UnsortedArrayMinPQ),
]


def path_weight(solver, path):
    return sum(solver.edge_to[v].weight for v in path[1:])


@pytest.mark.parametrize('solver_class', ALL_SOLVERS)
class TestSolverContract:
    def test_basic_distances(self, solver_class, diamond_graph):
        solver = solver_class(diamond_graph, 'A')
        assert solver.dist_to['A'] == 0.0
        assert solver.dist_to['B'] == 1.0
        # A -> B -> C beats A -> C
        assert solver.dist_to['C'] == 3.0
        assert solver.dist_to['D'] == 4.0

    def test_solution_path(self, solver_class, diamond_graph):
        solver = solver_class(diamond_graph, 'A')
        assert solver.solution('D') == ['A', 'B', 'C', 'D']
        assert solver.solution('A') == ['A']

    def test_start_has_no_predecessor(self, solver_class, diamond_graph):
        solver = solver_class(diamond_graph, 'A')
        assert solver.edge_to['A'] is None
        assert solver.edge_to['C'] == Edge('B', 'C', 2.0)

    def test_unreachable_goal_raises(self, solver_class, diamond_graph):
        solver = solver_class(diamond_graph, 'A')
        assert 'E' not in solver.dist_to
        assert solver.distance('E') == math.inf
        with pytest.raises(UnreachableGoalError):
            solver.solution('E')
        with pytest.raises(KeyError):
            solver.solution('not-a-vertex')

    def test_only_reachable_vertices_recorded(self, solver_class, diamond_graph):
        solver = solver_class(diamond_graph, 'C')
        assert set(solver.dist_to) == {'C', 'D'}

    def test_result_maps_are_read_only(self, solver_class, diamond_graph):
        solver = solver_class(diamond_graph, 'A')
        with pytest.raises(TypeError):
            solver.dist_to['A'] = 5.0
        with pytest.raises(TypeError):
            solver.edge_to['A'] = Edge('A', 'A', 0.0)

    def test_negative_edge_on_dag(self, solver_class):
        g = AdjacencyListGraph([
            Edge('s', 'a', 2.0),
            Edge('s', 'b', 5.0),
            Edge('b', 'a', -4.0),
            Edge('a', 't', 1.0),
        ])
        solver = solver_class(g, 's')
        assert solver.dist_to['a'] == 1.0
        assert solver.dist_to['t'] == 2.0
        assert solver.solution('t') == ['s', 'b', 'a', 't']

    def test_round_trip_on_random_dag(self, solver_class):
        g = make_random_dag(40, seed=5)
        solver = solver_class(g, 0)
        for goal in g.vertices():
            path = solver.solution(goal)
            assert path[0] == 0
            assert path[-1] == goal
            assert path_weight(solver, path) == pytest.approx(solver.dist_to[goal])
            for u, v in zip(path, path[1:]):
                assert solver.edge_to[v].src == u


class TestCrossValidation:
    @pytest.mark.parametrize('seed', [0, 1, 2, 3])
    def test_toposort_matches_dijkstra_on_dags(self, seed):
        g = make_random_dag(60, edge_prob=0.2, seed=seed)
        dijkstra = DijkstraSolver(g, 0)
        toposort = ToposortDAGSolver(g, 0)
        assert set(dijkstra.dist_to) == set(toposort.dist_to)
        for v, d in dijkstra.dist_to.items():
            assert toposort.dist_to[v] == pytest.approx(d)

    def test_non_negative_dag_from_interior_vertex(self):
        g = make_random_dag(50, low=0.0, high=3.0, seed=9)
        start = 10
        dijkstra = DijkstraSolver(g, start)
        toposort = ToposortDAGSolver(g, start)
        assert dijkstra.dist_to.keys() == toposort.dist_to.keys()
        for v in dijkstra.dist_to:
            assert toposort.dist_to[v] == pytest.approx(dijkstra.dist_to[v])


class TestDijkstra:
    def test_handles_cycles(self):
        g = AdjacencyListGraph([
            Edge('a', 'b', 1.0),
            Edge('b', 'c', 1.0),
            Edge('c', 'a', 1.0),
            Edge('c', 'd', 5.0),
            Edge('a', 'd', 10.0),
        ])
        solver = DijkstraSolver(g, 'a')
        assert solver.dist_to['d'] == 7.0
        assert solver.solution('d') == ['a', 'b', 'c', 'd']

    def test_priority_queue_choice_does_not_change_distances(self):
        g = make_random_dag(40, low=0.0, high=4.0, seed=4)
        reference = DijkstraSolver(g, 0).dist_to
        for pq in (HeapMinPQ, UnsortedArrayMinPQ):
            other = DijkstraSolver(g, 0, pq_factory=pq).dist_to
            assert dict(other) == pytest.approx(dict(reference))


class TestToposort:
    def test_long_chain_does_not_hit_recursion_limit(self):
        n = sys.getrecursionlimit() * 3
        g = AdjacencyListGraph(Edge(i, i + 1, 1.0) for i in range(n))
        solver = ToposortDAGSolver(g, 0)
        assert solver.dist_to[n] == float(n)
        assert len(solver.solution(n)) == n + 1

    def test_reverse_postorder_is_topological(self):
        g = make_random_dag(30, seed=2)
        order = ToposortDAGSolver._reverse_postorder(g, 0)
        position = {v: i for i, v in enumerate(order)}
        assert len(order) == len(position) == 30
        for u in order:
            for edge in g.neighbors(u):
                assert position[edge.src] < position[edge.dst]

    def test_diamond_visits_shared_vertex_once(self):
        g = AdjacencyListGraph([
            Edge('s', 'a', 1.0),
            Edge('s', 'b', 1.0),
            Edge('a', 't', 1.0),
            Edge('b', 't', 1.0),
        ])
        order = ToposortDAGSolver._reverse_postorder(g, 's')
        assert order[0] == 's'
        assert order[-1] == 't'
        assert sorted(order) == ['a', 'b', 's', 't']
