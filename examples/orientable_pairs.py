"""
Example: enumerating orientable multicurves

Lists the coprime (m, n) pairs up to a complexity whose multicurve has no
one-sided component, and those that are connected.
"""

import numpy as np

from counting_components import SignedPermutation, enumerate_components


def main():
    perm = SignedPermutation([2, 0, 3, 1], flips=[1, 2])
    print(f"Permutation: {perm}")

    result = enumerate_components(perm, 25)

    totals = np.array([two + one for two, one in result.components.values()])
    print(f"Pairs enumerated: {len(totals)}")
    print(f"Mean number of components: {totals.mean():.3f}")

    print("\nAll two-sided:")
    for m, n in result.two_sided_pairs():
        print(f"  ({m}, {n})")

    print("\nConnected:")
    for m, n in result.connected_pairs():
        two, one = result.components[(m, n)]
        print(f"  ({m}, {n}) {'two-sided' if two else 'one-sided'}")


if __name__ == "__main__":
    main()
