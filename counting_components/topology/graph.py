"""
counting_components/topology/graph.py

NetworkX view of the transition rule.
"""

from __future__ import annotations

import networkx as nx

from counting_components.core.permutation import SignedPermutation
from counting_components.core.strand import strand_space
from counting_components.topology.transition import check_parameters, step


def transition_graph(perm: SignedPermutation, m: int, n: int) -> nx.DiGraph:
    """
    Build the directed strand graph.

    Nodes are strands; each strand has one outgoing edge to its successor
    with a `flip` attribute. Orbits are the weakly connected components.
    """
    check_parameters(m, n)
    g = nx.DiGraph()
    for strand in strand_space(len(perm), m, n):
        g.add_node(strand, transverse=strand.is_transverse)
    for strand in list(g.nodes):
        nxt, flipped = step(perm, m, n, strand)
        g.add_edge(strand, nxt, flip=flipped)
    return g


def orbit_parities(g: nx.DiGraph) -> list:
    """Flip parity of every weakly connected component of a strand graph."""
    out = []
    for comp in nx.weakly_connected_components(g):
        flips = sum(d["flip"] for _, _, d in g.subgraph(comp).edges(data=True))
        out.append(flips % 2)
    return out
