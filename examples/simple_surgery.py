"""
Example: a single surgery

Walks the orbit of Transverse(0) for the identity on two strands and shows
how flipping index 0 turns the one component one-sided.
"""

from counting_components import SignedPermutation, Strand, has_one_component, count_components_with_orientability
from counting_components.topology.orbits import orbit_strands


def main():
    for flips in ([], [0]):
        perm = SignedPermutation([0, 1], flips)
        print(f"Permutation: {perm}")

        path = orbit_strands(perm, 1, 1, Strand.transverse(0))
        print("  Orbit: " + " -> ".join(repr(s) for s in path))

        single, parity = has_one_component(perm, 1, 1)
        print(f"  Single component: {single}, parity: {parity}")

        two, one = count_components_with_orientability(perm, 1, 1)
        print(f"  Two-sided: {two}, one-sided: {one}")
        print()


if __name__ == "__main__":
    main()
