from __future__ import annotations

from collections.abc import Hashable, Iterator
from dataclasses import dataclass, field
from typing import Any

from hsp import Group


@dataclass(eq=False)
class CountingGroup(Group[Hashable]):
    """Wraps a group and counts calls to operate and inverse."""

    inner: Group[Any]
    operate_calls: int = field(default=0)
    inverse_calls: int = field(default=0)

    @property
    def name(self) -> str:
        return f"counting({self.inner.name})"

    @property
    def identity(self) -> Hashable:
        return self.inner.identity

    def inverse(self, g: Hashable) -> Hashable:
        self.inverse_calls += 1
        return self.inner.inverse(g)

    def operate(self, a: Hashable, b: Hashable) -> Hashable:
        self.operate_calls += 1
        return self.inner.operate(a, b)

    def element_sequence(self) -> Iterator[Hashable]:
        return self.inner.element_sequence()


@dataclass(frozen=True)
class BrokenGroup(Group[int]):
    """Subtraction mod n: has an identity on the right only and is not associative."""

    n: int = 5

    @property
    def name(self) -> str:
        return f"broken({self.n})"

    @property
    def identity(self) -> int:
        return 0

    def inverse(self, g: int) -> int:
        return g

    def operate(self, a: int, b: int) -> int:
        return (a - b) % self.n

    def element_sequence(self) -> Iterator[int]:
        return iter(range(self.n))


class SetAfter:
    """Cancel token that becomes set after a given number of is_set() checks."""

    def __init__(self, checks: int) -> None:
        self.remaining = checks

    def is_set(self) -> bool:
        if self.remaining <= 0:
            return True
        self.remaining -= 1
        return False
