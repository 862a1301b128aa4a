"""Generate permutation groups from cycles, with closure tracing."""

from __future__ import annotations

import logging

from hsp import Trace, assert_group_laws
from hsp.groups import SymmetricGroup

logging.basicConfig(level=logging.DEBUG, format="%(name)s %(levelname)s %(message)s")


def main() -> None:
    s4 = SymmetricGroup(4)
    assert_group_laws(s4, s4.element_sequence())

    cases = {
        "rotation": [s4.cycle(0, 1, 2, 3)],
        "rotation + flip": [s4.cycle(0, 1, 2, 3), s4.cycle(1, 3)],
        "3-cycles": [s4.cycle(0, 1, 2), s4.cycle(1, 2, 3)],
        "adjacent swaps": [s4.cycle(0, 1), s4.cycle(1, 2), s4.cycle(2, 3)],
    }

    for label, gens in cases.items():
        trace = Trace()
        sub = s4.span(gens, trace=trace)
        rounds = trace.rounds()
        described = ", ".join(s4.describe(g) for g in gens)
        print(f"{label}: <{described}> has order {len(sub)} ({len(rounds)} rounds)")

    a, b = s4.cycle(0, 1), s4.cycle(1, 2)
    print(f"(0 1)(1 2) = {s4.describe(s4.reduce(a, b))}")
    print(f"(1 2)(0 1) = {s4.describe(s4.reduce(b, a))}")


if __name__ == "__main__":
    main()
