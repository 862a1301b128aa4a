"""Reference group implementations."""

from hsp.groups.cyclic import CyclicGroup
from hsp.groups.integers import IntegerGroup
from hsp.groups.product import DirectProduct
from hsp.groups.symmetric import Permutation, SymmetricGroup

__all__ = [
    "CyclicGroup",
    "SymmetricGroup",
    "Permutation",
    "DirectProduct",
    "IntegerGroup",
]
