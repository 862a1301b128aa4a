"""Group axiom checks for implementations of Group.

The core never verifies the axioms; a broken group just gives wrong
answers. These checks are meant for test suites and debugging:

1. Identity: operate(identity, x) == x == operate(x, identity)
2. Inverse: operate(x, inverse(x)) == identity == operate(inverse(x), x)
3. Associativity: operate(operate(a, b), c) == operate(a, operate(b, c))
4. Closure: a subgroup contains identity and is closed under
   operate and inverse
"""

from __future__ import annotations

import itertools
from collections.abc import Hashable, Iterable
from typing import Any, Literal, TypeVar

from pydantic import BaseModel, ConfigDict

from hsp.kernel.group import Group

E = TypeVar("E", bound=Hashable)


class LawViolation(BaseModel):
    """A single failed axiom check."""

    model_config = ConfigDict(frozen=True)

    law: Literal["identity", "inverse", "associativity", "closure"]
    operands: tuple[Any, ...]
    expected: Any
    actual: Any

    def __str__(self) -> str:
        return f"{self.law} fails for {self.operands!r}: expected {self.expected!r}, got {self.actual!r}"


class GroupLawError(AssertionError):
    """Raised by assert_group_laws(); carries every violation found."""

    def __init__(self, group_name: str, violations: tuple[LawViolation, ...]) -> None:
        self.violations = violations
        lines = "\n".join(f"  - {v}" for v in violations)
        super().__init__(f"{group_name}: {len(violations)} group law violation(s)\n{lines}")


def check_identity(group: Group[E], elements: Iterable[E]) -> tuple[LawViolation, ...]:
    e = group.identity
    violations = []
    for x in elements:
        for actual in (group.operate(e, x), group.operate(x, e)):
            if actual != x:
                violations.append(LawViolation(law="identity", operands=(x,), expected=x, actual=actual))
                break
    return tuple(violations)


def check_inverse(group: Group[E], elements: Iterable[E]) -> tuple[LawViolation, ...]:
    e = group.identity
    violations = []
    for x in elements:
        inv = group.inverse(x)
        for actual in (group.operate(x, inv), group.operate(inv, x)):
            if actual != e:
                violations.append(LawViolation(law="inverse", operands=(x,), expected=e, actual=actual))
                break
    return tuple(violations)


def check_associativity(group: Group[E], elements: Iterable[E]) -> tuple[LawViolation, ...]:
    """Check every ordered triple drawn from elements (cubic in the sample size)."""
    sample = list(elements)
    violations = []
    for a, b, c in itertools.product(sample, repeat=3):
        left = group.operate(group.operate(a, b), c)
        right = group.operate(a, group.operate(b, c))
        if left != right:
            violations.append(
                LawViolation(law="associativity", operands=(a, b, c), expected=left, actual=right)
            )
    return tuple(violations)


def check_closed(group: Group[E], subset: Iterable[E]) -> tuple[LawViolation, ...]:
    """Check that subset is a subgroup: identity, products and inverses stay inside."""
    members = frozenset(subset)
    violations = []
    if group.identity not in members:
        violations.append(
            LawViolation(law="closure", operands=(), expected=group.identity, actual=None)
        )
    for x in members:
        inv = group.inverse(x)
        if inv not in members:
            violations.append(LawViolation(law="closure", operands=(x,), expected=inv, actual=None))
    for a, b in itertools.product(members, repeat=2):
        product = group.operate(a, b)
        if product not in members:
            violations.append(LawViolation(law="closure", operands=(a, b), expected=product, actual=None))
    return tuple(violations)


def is_subgroup(group: Group[E], subset: Iterable[E]) -> bool:
    return not check_closed(group, subset)


def check_group_laws(group: Group[E], elements: Iterable[E]) -> tuple[LawViolation, ...]:
    """Run the identity, inverse and associativity checks on a sample."""
    sample = list(elements)
    return (
        check_identity(group, sample)
        + check_inverse(group, sample)
        + check_associativity(group, sample)
    )


def assert_group_laws(group: Group[E], elements: Iterable[E]) -> None:
    """Raise GroupLawError if any axiom fails on the sample."""
    violations = check_group_laws(group, elements)
    if violations:
        raise GroupLawError(group.name, violations)
