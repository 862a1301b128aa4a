"""Subgroups of Z/n: which residues generate the whole group."""

from __future__ import annotations

import argparse

from hsp.groups import CyclicGroup


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("n", type=int, nargs="?", default=12)
    args = parser.parse_args()

    group = CyclicGroup(args.n)
    print(f"Subgroups generated by single elements of {group}:")
    for g in group.element_sequence():
        sub = group.span({g})
        tag = "  (generator)" if len(sub) == args.n else ""
        print(f"  <{g}> = {sorted(sub)}{tag}")

    print(f"reduce(1, 2, 3) in {group} = {group.reduce(1, 2, 3)}")


if __name__ == "__main__":
    main()
