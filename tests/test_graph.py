"""
Tests for the networkx strand graph.
"""

import networkx as nx
import pytest

from counting_components.core.permutation import SignedPermutation
from counting_components.core.strand import Strand
from counting_components.topology.graph import transition_graph, orbit_parities
from counting_components.topology.orbits import orbit_decomposition


class TestTransitionGraph:
    def test_identity(self):
        g = transition_graph(SignedPermutation([0, 1]), 1, 1)

        assert g.number_of_nodes() == 3
        assert g.has_edge(Strand.transverse(0), Strand.permutation_direction(0, 0))
        assert g.nodes[Strand.transverse(0)]["transverse"]
        assert nx.number_weakly_connected_components(g) == 1

    def test_flip_attribute(self):
        g = transition_graph(SignedPermutation([0, 1], [0]), 1, 1)

        edge = g.edges[Strand.permutation_direction(0, 0), Strand.permutation_direction(1, 0)]
        assert edge["flip"] == 1
        assert orbit_parities(g) == [1]

    def test_self_loop(self):
        g = transition_graph(SignedPermutation([1, 0]), 1, 1)
        assert g.has_edge(Strand.permutation_direction(1, 0), Strand.permutation_direction(1, 0))

    @pytest.mark.parametrize("m,n", [(1, 2), (2, 3), (3, 1), (4, 3)])
    def test_degrees_and_components(self, m, n):
        perm = SignedPermutation([2, 0, 3, 1], [1, 2])
        g = transition_graph(perm, m, n)

        assert all(d == 1 for _, d in g.out_degree())
        assert all(d == 1 for _, d in g.in_degree())

        orbits = orbit_decomposition(perm, m, n)
        assert nx.number_weakly_connected_components(g) == len(orbits)
        assert sorted(orbit_parities(g)) == sorted(o.parity for o in orbits)
