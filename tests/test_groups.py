"""Tests for the reference group implementations."""

import itertools

import pytest

from hsp import Group, assert_group_laws
from hsp.groups import CyclicGroup, DirectProduct, IntegerGroup, SymmetricGroup


@pytest.mark.parametrize(
    "group",
    [
        CyclicGroup(1),
        CyclicGroup(5),
        CyclicGroup(6),
        SymmetricGroup(3),
        DirectProduct(CyclicGroup(2), CyclicGroup(3)),
        DirectProduct(SymmetricGroup(3), CyclicGroup(2)),
    ],
    ids=str,
)
def test_finite_groups_satisfy_laws(group: Group) -> None:
    assert_group_laws(group, group.element_sequence())


def test_integer_group_satisfies_laws_on_sample() -> None:
    z = IntegerGroup()
    assert_group_laws(z, range(-3, 4))


@pytest.mark.parametrize(
    "group,order",
    [
        (CyclicGroup(7), 7),
        (SymmetricGroup(4), 24),
        (DirectProduct(CyclicGroup(2), CyclicGroup(2)), 4),
    ],
    ids=str,
)
def test_element_sequence_enumerates_each_element_once(group: Group, order: int) -> None:
    elements = list(group.element_sequence())
    assert len(elements) == order
    assert len(set(elements)) == order


def test_element_sequence_is_restartable() -> None:
    s3 = SymmetricGroup(3)
    assert list(s3.element_sequence()) == list(s3.element_sequence())

    v4 = DirectProduct(CyclicGroup(2), CyclicGroup(2))
    assert list(v4.element_sequence()) == [(0, 0), (1, 0), (0, 1), (1, 1)]
    assert list(v4.element_sequence()) == list(v4.element_sequence())


def test_integer_group_sequence_alternates_signs() -> None:
    z = IntegerGroup()
    assert list(itertools.islice(z.element_sequence(), 7)) == [0, 1, -1, 2, -2, 3, -3]


def test_cyclic_group_operations() -> None:
    z5 = CyclicGroup(5)
    assert z5.identity == 0
    assert z5.inverse(2) == 3
    assert z5.inverse(0) == 0
    assert z5.operate(3, 4) == 2


def test_symmetric_group_composition_applies_right_first() -> None:
    s3 = SymmetricGroup(3)
    a, b = s3.cycle(0, 1), s3.cycle(1, 2)
    ab = s3.operate(a, b)
    # b sends 1 -> 2, a leaves 2 alone
    assert ab[1] == 2
    assert s3.describe(ab) == "(0 1 2)"


def test_symmetric_group_inverse() -> None:
    s4 = SymmetricGroup(4)
    r = s4.cycle(0, 1, 2, 3)
    assert s4.inverse(r) == s4.cycle(3, 2, 1, 0)


def test_cycle_validation() -> None:
    s3 = SymmetricGroup(3)
    with pytest.raises(ValueError):
        s3.cycle(0, 0)
    with pytest.raises(ValueError):
        s3.cycle(0, 3)
    assert s3.cycle() == s3.identity
    assert s3.cycle(2) == s3.identity


def test_describe() -> None:
    s5 = SymmetricGroup(5)
    g = s5.operate(s5.cycle(0, 1, 2), s5.cycle(3, 4))
    assert s5.describe(g) == "(0 1 2)(3 4)"
    assert s5.describe(s5.identity) == "()"
    assert CyclicGroup(5).describe(3) == "3"

    product = DirectProduct(SymmetricGroup(3), CyclicGroup(2))
    assert product.describe(((1, 0, 2), 1)) == "((0 1), 1)"


def test_names() -> None:
    assert CyclicGroup(5).name == "Z/5"
    assert SymmetricGroup(3).name == "S3"
    assert IntegerGroup().name == "Z"
    assert DirectProduct(CyclicGroup(2), SymmetricGroup(3)).name == "Z/2 x S3"
    assert str(CyclicGroup(4)) == "Z/4"


@pytest.mark.parametrize("factory", [CyclicGroup, SymmetricGroup])
def test_non_positive_order_rejected(factory) -> None:
    with pytest.raises(ValueError):
        factory(0)


def test_groups_are_immutable_and_hashable() -> None:
    z5 = CyclicGroup(5)
    with pytest.raises(AttributeError):
        z5.n = 6
    assert {CyclicGroup(5), CyclicGroup(5), SymmetricGroup(3)} == {z5, SymmetricGroup(3)}


def test_product_with_infinite_right_factor_is_lazy() -> None:
    g = DirectProduct(CyclicGroup(2), IntegerGroup())
    assert list(itertools.islice(g.element_sequence(), 4)) == [(0, 0), (1, 0), (0, 1), (1, 1)]

    first = list(itertools.islice(g.element_sequence(), 14))
    assert len(set(first)) == 14
    assert (1, -3) in first


def test_product_with_infinite_left_factor_is_lazy() -> None:
    g = DirectProduct(IntegerGroup(), CyclicGroup(3))
    assert list(itertools.islice(g.element_sequence(), 6)) == [
        (0, 0), (1, 0), (0, 1), (1, 1), (-1, 0), (-1, 1),
    ]


def test_product_of_infinite_groups_reaches_every_pair() -> None:
    g = DirectProduct(IntegerGroup(), IntegerGroup())
    prefix = list(itertools.islice(g.element_sequence(), 100))
    assert len(set(prefix)) == 100
    assert {(a, b) for a in range(-2, 3) for b in range(-2, 3)} <= set(prefix)


def test_symmetric_identity_is_computed_once() -> None:
    s4 = SymmetricGroup(4)
    assert s4.identity is s4.identity
    assert s4.identity == (0, 1, 2, 3)
    assert repr(s4) == "SymmetricGroup(n=4)"
    assert SymmetricGroup(4) == s4
    assert hash(SymmetricGroup(4)) == hash(s4)
