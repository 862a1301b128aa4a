"""Symmetric groups: permutations of range(n) under composition."""

from __future__ import annotations

import itertools
from collections.abc import Iterator
from dataclasses import dataclass, field

from hsp.kernel.group import Group

Permutation = tuple[int, ...]


@dataclass(frozen=True)
class SymmetricGroup(Group[Permutation]):
    """
    S_n, the permutations of range(n).

    A permutation p is stored as the tuple of images, p[i] being where i
    goes. operate(a, b) applies b first, then a. The group is non-abelian
    for n >= 3.

    element_sequence() yields all n! permutations in lexicographic order
    and is restartable.
    """

    n: int
    _identity: Permutation = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if self.n < 1:
            raise ValueError(f"symmetric group degree must be positive, got {self.n}")
        object.__setattr__(self, "_identity", tuple(range(self.n)))

    @property
    def name(self) -> str:
        return f"S{self.n}"

    @property
    def identity(self) -> Permutation:
        return self._identity

    def inverse(self, g: Permutation) -> Permutation:
        inv = [0] * self.n
        for i, image in enumerate(g):
            inv[image] = i
        return tuple(inv)

    def operate(self, a: Permutation, b: Permutation) -> Permutation:
        return tuple(a[i] for i in b)

    def element_sequence(self) -> Iterator[Permutation]:
        return itertools.permutations(range(self.n))

    def cycle(self, *points: int) -> Permutation:
        """Permutation sending points[0] -> points[1] -> ... -> points[0]."""
        if len(set(points)) != len(points):
            raise ValueError(f"cycle points must be distinct: {points}")
        if any(not 0 <= p < self.n for p in points):
            raise ValueError(f"cycle points must lie in range({self.n}): {points}")
        images = list(range(self.n))
        for src, dst in zip(points, points[1:] + points[:1]):
            images[src] = dst
        return tuple(images)

    def describe(self, g: Permutation) -> str:
        """Cycle notation, e.g. "(0 1 2)(3 4)"; "()" for the identity."""
        seen: set[int] = set()
        cycles = []
        for start in range(self.n):
            if start in seen:
                continue
            cyc = [start]
            seen.add(start)
            nxt = g[start]
            while nxt != start:
                cyc.append(nxt)
                seen.add(nxt)
                nxt = g[nxt]
            if len(cyc) > 1:
                cycles.append("(" + " ".join(map(str, cyc)) + ")")
        return "".join(cycles) or "()"
