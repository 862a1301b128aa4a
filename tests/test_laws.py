"""Tests for the group axiom checks."""

import pytest

from hsp import GroupLawError, LawViolation, assert_group_laws, check_group_laws, is_subgroup
from hsp.groups import CyclicGroup, SymmetricGroup
from hsp.laws import check_associativity, check_closed, check_identity, check_inverse
from fakes import BrokenGroup


def test_lawful_group_has_no_violations() -> None:
    s3 = SymmetricGroup(3)
    assert check_group_laws(s3, s3.element_sequence()) == ()
    assert_group_laws(s3, s3.element_sequence())


def test_broken_group_identity_violations() -> None:
    g = BrokenGroup(5)
    violations = check_identity(g, g.element_sequence())
    assert [v.operands for v in violations] == [(1,), (2,), (3,), (4,)]
    assert all(v.law == "identity" for v in violations)
    assert violations[0].actual == 4


def test_broken_group_inverses_hold() -> None:
    g = BrokenGroup(5)
    assert check_inverse(g, g.element_sequence()) == ()


def test_broken_group_not_associative() -> None:
    g = BrokenGroup(5)
    violations = check_associativity(g, [1, 2])
    assert violations
    assert all(v.law == "associativity" for v in violations)
    assert (1, 1, 1) in [v.operands for v in violations]


def test_assert_group_laws_raises_with_violations() -> None:
    g = BrokenGroup(5)
    with pytest.raises(GroupLawError) as excinfo:
        assert_group_laws(g, g.element_sequence())

    err = excinfo.value
    assert isinstance(err, AssertionError)
    assert "broken(5)" in str(err)
    assert {v.law for v in err.violations} == {"identity", "associativity"}


def test_check_closed_reports_missing_elements() -> None:
    z5 = CyclicGroup(5)
    violations = check_closed(z5, {0, 1})
    missing = {v.expected for v in violations}
    assert 4 in missing
    assert 2 in missing


def test_check_closed_reports_missing_identity() -> None:
    z5 = CyclicGroup(5)
    violations = check_closed(z5, set())
    assert violations == (LawViolation(law="closure", operands=(), expected=0, actual=None),)


def test_is_subgroup() -> None:
    z6 = CyclicGroup(6)
    assert is_subgroup(z6, {0, 2, 4})
    assert is_subgroup(z6, {0, 3})
    assert not is_subgroup(z6, {1, 2})
    assert not is_subgroup(z6, {2, 4})


def test_violation_str() -> None:
    v = LawViolation(law="inverse", operands=(3,), expected=0, actual=1)
    assert str(v) == "inverse fails for (3,): expected 0, got 1"
