"""Cyclic groups: integers modulo n under addition."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from hsp.kernel.group import Group


@dataclass(frozen=True)
class CyclicGroup(Group[int]):
    """Z/n under addition, elements 0..n-1.

    element_sequence() yields 0, 1, ..., n-1 and is restartable.
    """

    n: int

    def __post_init__(self) -> None:
        if self.n < 1:
            raise ValueError(f"cyclic group order must be positive, got {self.n}")

    @property
    def name(self) -> str:
        return f"Z/{self.n}"

    @property
    def identity(self) -> int:
        return 0

    def inverse(self, g: int) -> int:
        return (self.n - g) % self.n

    def operate(self, a: int, b: int) -> int:
        return (a + b) % self.n

    def element_sequence(self) -> Iterator[int]:
        return iter(range(self.n))
