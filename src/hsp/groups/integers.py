"""The integers under addition - an infinite group."""

from __future__ import annotations

import itertools
from collections.abc import Iterator
from dataclasses import dataclass

from hsp.kernel.group import Group


@dataclass(frozen=True)
class IntegerGroup(Group[int]):
    """Z under addition.

    Every non-zero element has infinite order, so span() over it only
    returns when given ClosureLimits or a cancel token.
    element_sequence() yields 0, 1, -1, 2, -2, ... forever.
    """

    @property
    def name(self) -> str:
        return "Z"

    @property
    def identity(self) -> int:
        return 0

    def inverse(self, g: int) -> int:
        return -g

    def operate(self, a: int, b: int) -> int:
        return a + b

    def element_sequence(self) -> Iterator[int]:
        yield 0
        for k in itertools.count(1):
            yield k
            yield -k
