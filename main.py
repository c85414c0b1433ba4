#!/usr/bin/env python3
"""
Counting Components: surgery of signed permutations with transverse strands

Counts the components of the multicurve built from m parallel copies of a
signed permutation and n transverse strands, and classifies each component
as two-sided or one-sided.

Usage:
    # Count components for one (m, n)
    python main.py components --perm "1,2,0" --flips "0" -m 2 -n 1

    # Enumerate all coprime (m, n) with m + n < 20
    python main.py enumerate --perm "1,2,0" --complexity 20 --output result.json

    # Run demos
    python main.py demo --example identity

    # Run tests
    python main.py test
"""

from __future__ import annotations

import argparse
import json
import sys
import time
from pathlib import Path
from typing import List

import numpy as np

# Handle imports whether running as package or directly
try:
    from counting_components import (
        PermutationError,
        SignedPermutation,
        Strand,
        get_next_major_strand,
        has_one_component,
        count_components_with_orientability,
        orbit_decomposition,
        enumerate_components,
        __version__,
    )
except ImportError:
    sys.path.insert(0, str(Path(__file__).parent))
    from counting_components import (
        PermutationError,
        SignedPermutation,
        Strand,
        get_next_major_strand,
        has_one_component,
        count_components_with_orientability,
        orbit_decomposition,
        enumerate_components,
        __version__,
    )
from counting_components.runtime.enumeration import METHODS
from counting_components.topology.orbits import orbit_strands
from counting_components.topology.graph import transition_graph


def parse_int_list(text: str) -> List[int]:
    """Parse '1,2,0' into [1, 2, 0]; an empty string gives []."""
    return [int(part) for part in text.split(",") if part.strip()]


def build_permutation(args) -> SignedPermutation:
    return SignedPermutation(parse_int_list(args.perm), parse_int_list(args.flips))


def save_enumeration_to_json(filepath: str, perm: SignedPermutation, result) -> None:
    """Save enumeration result to JSON file."""
    output = {
        "permutation": list(perm.sequence),
        "flips": sorted(perm.flip_set),
        "complexity": result.complexity,
        "components": [
            {"m": m, "n": n, "two_sided": two, "one_sided": one}
            for (m, n), (two, one) in result.items()
        ],
        "two_sided_pairs": [list(p) for p in result.two_sided_pairs()],
    }

    with open(filepath, 'w') as f:
        json.dump(output, f, indent=2)


def cmd_step(args):
    """Execute the step command."""
    perm = build_permutation(args)
    strand = Strand.from_tag(args.type, args.i, args.j)
    nxt, flipped = get_next_major_strand(perm, args.m, args.n, strand)
    print(f"{strand} -> {nxt} (flip={flipped})")
    return 0


def cmd_one(args):
    """Execute the one command."""
    perm = build_permutation(args)
    single, parity = has_one_component(perm, args.m, args.n)
    print(f"Permutation: {perm}")
    print(f"  (m, n) = ({args.m}, {args.n})")
    print(f"  Single component: {single}")
    print(f"  Orbit of Transverse(0): {'one-sided' if parity else 'two-sided'}")
    return 0


def cmd_components(args):
    """Execute the components command."""
    perm = build_permutation(args)
    two, one = count_components_with_orientability(perm, args.m, args.n)
    print(f"Permutation: {perm}")
    print(f"  (m, n) = ({args.m}, {args.n})")
    print(f"  Two-sided components: {two}")
    print(f"  One-sided components: {one}")
    return 0


def cmd_orbits(args):
    """Execute the orbits command."""
    perm = build_permutation(args)
    print(f"Permutation: {perm}")
    for orbit in orbit_decomposition(perm, args.m, args.n):
        kind = "two-sided" if orbit.two_sided else "one-sided"
        print(f"  {kind}, length {orbit.length}:")
        strands = orbit_strands(perm, args.m, args.n, orbit.origin)
        print("    " + " -> ".join(repr(s) for s in strands))
    return 0


def cmd_enumerate(args):
    """Execute the enumerate command."""
    perm = build_permutation(args)

    def progress(k, done):
        print(f"  k={k} done, {done} pairs so far")

    if args.verbose:
        print(f"Permutation: {perm}")
        print(f"Complexity: {args.complexity}")
        print(f"Method:     {args.method}")
        print(f"Workers:    {args.workers or 'auto'}")
        print()

    start = time.time()
    result = enumerate_components(
        perm,
        args.complexity,
        workers=args.workers,
        method=args.method,
        progress=progress if args.verbose else None,
    )
    elapsed = time.time() - start

    if args.two_sided:
        for m, n in result.two_sided_pairs():
            print(f"({m}, {n})")
    else:
        for (m, n), (two, one) in result.items():
            print(f"({m}, {n}): two-sided={two}, one-sided={one}")

    if args.verbose:
        print(f"\n{len(result.components)} pairs in {elapsed:.2f}s")

    if args.output:
        save_enumeration_to_json(args.output, perm, result)
        print(f"\nResults saved to: {args.output}")

    return 0


def cmd_graph(args):
    """Execute the graph command."""
    perm = build_permutation(args)
    g = transition_graph(perm, args.m, args.n)
    for u, v, data in sorted(g.edges(data=True)):
        print(f"{u} -> {v} flip={data['flip']}")
    return 0


def demo_identity():
    """Demo: identity on two strands, one copy, one transverse strand"""
    print("=" * 60)
    print("Demo: Identity [0, 1] with (m, n) = (1, 1)")
    print("=" * 60)

    perm = SignedPermutation([0, 1])
    print(f"\nPermutation: {perm}")

    single, parity = has_one_component(perm, 1, 1)
    print(f"Single component: {single}, parity {parity}")
    print("Orbit: " + " -> ".join(repr(s) for s in orbit_strands(perm, 1, 1, Strand.transverse(0))))

    match = (single, parity) == (True, 0)
    print(f"Match: {match}")
    return match


def demo_flipped():
    """Demo: flipping index 0 makes the single component one-sided"""
    print("=" * 60)
    print("Demo: Identity with flip at 0, (m, n) = (1, 1)")
    print("=" * 60)

    perm = SignedPermutation([0, 1], [0])
    print(f"\nPermutation: {perm}")

    single, parity = has_one_component(perm, 1, 1)
    print(f"Single component: {single}, parity {parity}")

    match = (single, parity) == (True, 1)
    print(f"Match: {match}")
    return match


def demo_enumerate():
    """Demo: traversal and sparse engines agree over an enumeration"""
    print("=" * 60)
    print("Demo: Enumeration of [1, 2, 0] with flips {1} up to complexity 12")
    print("=" * 60)

    perm = SignedPermutation([1, 2, 0], [1])
    traverse = enumerate_components(perm, 12, workers=1, method="traverse")
    sparse = enumerate_components(perm, 12, workers=1, method="sparse")

    counts = np.array([two + one for two, one in traverse.components.values()])
    print(f"\n{len(counts)} pairs, components min {counts.min()}, max {counts.max()}")
    print(f"Two-sided pairs: {traverse.two_sided_pairs()}")
    print(f"Connected pairs: {traverse.connected_pairs()}")

    match = traverse.components == sparse.components
    print(f"Engines agree: {match}")
    return match


def cmd_demo(args):
    """Execute the demo command."""
    demos = {
        "identity": demo_identity,
        "flipped": demo_flipped,
        "enumerate": demo_enumerate,
    }

    if args.example == "all":
        results = []
        for name, func in demos.items():
            results.append((name, func()))
            print()

        print("=" * 60)
        print("Summary")
        print("=" * 60)
        all_passed = True
        for name, passed in results:
            status = "✓ PASS" if passed else "✗ FAIL"
            print(f"  {name}: {status}")
            if not passed:
                all_passed = False

        return 0 if all_passed else 1

    return 0 if demos[args.example]() else 1


def cmd_test(args):
    """Execute the test command."""
    import subprocess

    test_dir = Path(__file__).parent / "tests"
    if not test_dir.exists():
        print(f"Test directory not found: {test_dir}")
        return 1

    cmd = [sys.executable, "-m", "pytest", str(test_dir)]
    if args.verbose:
        cmd.append("-v")
    if args.coverage:
        cmd.extend(["--cov=counting_components", "--cov-report=term-missing"])

    print(f"Running: {' '.join(cmd)}")
    result = subprocess.run(cmd, cwd=Path(__file__).parent)
    return result.returncode


def cmd_info(args):
    """Display system information."""
    print(f"Counting Components v{__version__}")
    print("Components and orientability of surgered multicurves")
    print()
    print("Available methods:")
    print("  traverse - walk every orbit of the transition rule")
    print("  sparse   - connected components of the successor matrix")
    print()
    print("Python:", sys.version.split()[0])
    print("NumPy:", np.__version__)

    import scipy
    import networkx
    print("SciPy:", scipy.__version__)
    print("NetworkX:", networkx.__version__)

    return 0


def add_permutation_args(p):
    p.add_argument("--perm", "-p", type=str, required=True, help="Permutation: '1,2,0'")
    p.add_argument("--flips", "-f", type=str, default="", help="Flipped indices: '0,2'")


def add_mn_args(p):
    p.add_argument("-m", type=int, required=True, help="Number of parallel copies")
    p.add_argument("-n", type=int, required=True, help="Number of transverse strands")


def main():
    parser = argparse.ArgumentParser(
        prog="counting-components",
        description="Counting Components: surgery of signed permutations",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Next strand after PermutationDirection(0, 1)
  counting-components step --perm "1,0" -m 2 -n 1 --type p -i 0 -j 1

  # Count components
  counting-components components --perm "1,2,0" --flips "1" -m 2 -n 3

  # Enumerate, only all-two-sided pairs
  counting-components enumerate --perm "1,2,0" --complexity 30 --two-sided

  # Run demos
  counting-components demo --example all
"""
    )

    parser.add_argument(
        "--version", "-V",
        action="version",
        version=f"Counting Components {__version__}"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Step command
    step_parser = subparsers.add_parser("step", help="Apply the transition rule once")
    add_permutation_args(step_parser)
    add_mn_args(step_parser)
    step_parser.add_argument("--type", "-t", type=str, default="t", help="Strand type: 't' or 'p'")
    step_parser.add_argument("-i", type=int, default=0, help="First strand index")
    step_parser.add_argument("-j", type=int, default=0, help="Second strand index ('p' only)")

    # One command
    one_parser = subparsers.add_parser("one", help="Check for a single component")
    add_permutation_args(one_parser)
    add_mn_args(one_parser)

    # Components command
    comp_parser = subparsers.add_parser("components", help="Count components by orientability")
    add_permutation_args(comp_parser)
    add_mn_args(comp_parser)

    # Orbits command
    orbits_parser = subparsers.add_parser("orbits", help="List every orbit")
    add_permutation_args(orbits_parser)
    add_mn_args(orbits_parser)

    # Enumerate command
    enum_parser = subparsers.add_parser("enumerate", help="Enumerate coprime (m, n) pairs")
    add_permutation_args(enum_parser)
    enum_parser.add_argument("--complexity", "-c", type=int, required=True, help="Exclusive bound on m + n")
    enum_parser.add_argument("--two-sided", action="store_true", help="Only list all-two-sided pairs")
    enum_parser.add_argument("--workers", "-w", type=int, default=None, help="Worker processes (default: CPU count)")
    enum_parser.add_argument(
        "--method",
        choices=sorted(METHODS),
        default="traverse",
        help="Decomposition engine (default: traverse)"
    )
    enum_parser.add_argument("--output", "-o", type=str, help="Output JSON file")
    enum_parser.add_argument("--verbose", "-v", action="store_true", help="Print progress")

    # Graph command
    graph_parser = subparsers.add_parser("graph", help="Print the strand transition graph")
    add_permutation_args(graph_parser)
    add_mn_args(graph_parser)

    # Demo command
    demo_parser = subparsers.add_parser("demo", help="Run demonstration examples")
    demo_parser.add_argument(
        "--example", "-e",
        choices=["identity", "flipped", "enumerate", "all"],
        default="all",
        help="Which example to run (default: all)"
    )

    # Test command
    test_parser = subparsers.add_parser("test", help="Run test suite")
    test_parser.add_argument("--verbose", "-v", action="store_true", help="Verbose output")
    test_parser.add_argument("--coverage", "-c", action="store_true", help="With coverage")

    # Info command
    subparsers.add_parser("info", help="Show system information")

    args = parser.parse_args()

    if args.command is None:
        parser.print_help()
        return 0

    commands = {
        "step": cmd_step,
        "one": cmd_one,
        "components": cmd_components,
        "orbits": cmd_orbits,
        "enumerate": cmd_enumerate,
        "graph": cmd_graph,
        "demo": cmd_demo,
        "test": cmd_test,
        "info": cmd_info,
    }

    try:
        return commands[args.command](args)
    except (PermutationError, ValueError) as e:
        print(f"Error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
