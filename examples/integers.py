"""Bounded span over the infinite group Z."""

from __future__ import annotations

from hsp import ClosureBoundExceeded, ClosureLimits
from hsp.groups import IntegerGroup


def main() -> None:
    z = IntegerGroup()
    try:
        z.span({3}, limits=ClosureLimits(max_size=100))
    except ClosureBoundExceeded as exc:
        reach = max(exc.partial)
        print(f"span of 3 in {z} stopped after {exc.rounds} rounds: {exc}")
        print(f"partial subgroup holds {len(exc.partial)} multiples of 3, up to +/-{reach}")


if __name__ == "__main__":
    main()
