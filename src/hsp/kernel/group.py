"""Group capability contract."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Hashable, Iterable, Iterator
from typing import TYPE_CHECKING, Generic, TypeVar

if TYPE_CHECKING:
    from hsp.kernel.closure import CancelToken
    from hsp.kernel.limits import ClosureLimits
    from hsp.kernel.trace import Trace

E = TypeVar("E", bound=Hashable)


class Group(ABC, Generic[E]):
    """
    A named group over hashable elements.

    Implementations supply identity, inverse, operate and element_sequence.
    reduce() and span() are built only on those primitives and never look
    inside an element.

    Implementations must satisfy the group axioms (identity, inverses,
    associativity, closure). They are not checked at runtime: a broken
    implementation silently produces wrong results. Use hsp.laws in tests.

    Instances must be immutable and stateless, so one group can be shared
    by any number of callers.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Name of the group."""

    @property
    @abstractmethod
    def identity(self) -> E:
        """Identity element of the group."""

    @abstractmethod
    def inverse(self, g: E) -> E:
        """Inverse of a group element."""

    @abstractmethod
    def operate(self, a: E, b: E) -> E:
        """Group operation, a composed with b."""

    @abstractmethod
    def element_sequence(self) -> Iterator[E]:
        """Enumerate the group's elements.

        Every call returns a fresh iterator, so enumeration is restarted by
        calling again. Each element is yielded exactly once. The iterator is
        finite for finite groups; for infinite groups every element appears
        at some finite position.
        """

    def describe(self, g: E) -> str:
        """Human-readable description of an element."""
        return str(g)

    def reduce(self, *operands: E) -> E:
        """Apply the group operation to operands, left to right."""
        from hsp.ops import reduce

        return reduce(self, operands)

    def span(
        self,
        generators: Iterable[E],
        *,
        limits: ClosureLimits | None = None,
        trace: Trace | None = None,
        cancel: CancelToken | None = None,
    ) -> frozenset[E]:
        """Subgroup generated by generators. See hsp.ops.span."""
        from hsp.ops import span

        return span(self, generators, limits=limits, trace=trace, cancel=cancel)

    def __str__(self) -> str:
        return self.name
