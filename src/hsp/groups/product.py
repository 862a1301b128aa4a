"""Direct products of two groups."""

from __future__ import annotations

from collections.abc import Hashable, Iterator
from dataclasses import dataclass
from typing import Generic, TypeVar

from hsp.kernel.group import Group

A = TypeVar("A", bound=Hashable)
B = TypeVar("B", bound=Hashable)

_EXHAUSTED = object()


@dataclass(frozen=True)
class DirectProduct(Group[tuple[A, B]], Generic[A, B]):
    """left x right, with componentwise operations on pairs.

    element_sequence() walks both factors' sequences in step, pairing each
    newly drawn element with every element already drawn from the other
    factor. Every pair is yielded exactly once, at a finite position, even
    when one or both factors are infinite. It is restartable because each
    factor's sequence is.
    """

    left: Group[A]
    right: Group[B]

    @property
    def name(self) -> str:
        return f"{self.left.name} x {self.right.name}"

    @property
    def identity(self) -> tuple[A, B]:
        return (self.left.identity, self.right.identity)

    def inverse(self, g: tuple[A, B]) -> tuple[A, B]:
        return (self.left.inverse(g[0]), self.right.inverse(g[1]))

    def operate(self, a: tuple[A, B], b: tuple[A, B]) -> tuple[A, B]:
        return (self.left.operate(a[0], b[0]), self.right.operate(a[1], b[1]))

    def element_sequence(self) -> Iterator[tuple[A, B]]:
        lefts: list[A] = []
        rights: list[B] = []
        left_iter = self.left.element_sequence()
        right_iter = self.right.element_sequence()
        left_open = right_open = True

        while left_open or right_open:
            if left_open:
                a = next(left_iter, _EXHAUSTED)
                if a is _EXHAUSTED:
                    left_open = False
                else:
                    lefts.append(a)
                    for b in rights:
                        yield (a, b)
            if right_open:
                b = next(right_iter, _EXHAUSTED)
                if b is _EXHAUSTED:
                    right_open = False
                else:
                    rights.append(b)
                    for a in lefts:
                        yield (a, b)

    def describe(self, g: tuple[A, B]) -> str:
        return f"({self.left.describe(g[0])}, {self.right.describe(g[1])})"
