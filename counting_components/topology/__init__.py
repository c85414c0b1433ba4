"""
Topology module: transition rule, orbit decomposition and strand graphs.
"""

from counting_components.topology.transition import (
    get_next_major_strand,
    successor_table,
    is_bijective,
)
from counting_components.topology.orbits import (
    Orbit,
    has_one_component,
    orbit_strands,
    orbit_decomposition,
    count_components_with_orientability,
)
from counting_components.topology.sparse import component_labels, count_components_sparse
from counting_components.topology.graph import transition_graph, orbit_parities

__all__ = [
    "get_next_major_strand",
    "successor_table",
    "is_bijective",
    "Orbit",
    "has_one_component",
    "orbit_strands",
    "orbit_decomposition",
    "count_components_with_orientability",
    "component_labels",
    "count_components_sparse",
    "transition_graph",
    "orbit_parities",
]
