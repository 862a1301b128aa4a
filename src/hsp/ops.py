"""Algorithms derived from the group contract: reduce and span."""

from __future__ import annotations

import functools
from collections.abc import Hashable, Iterable
from typing import TYPE_CHECKING, TypeVar

from hsp.kernel.closure import CancelToken, expand_until_stable, set_map, union
from hsp.kernel.limits import ClosureLimits
from hsp.kernel.trace import Trace

if TYPE_CHECKING:
    from hsp.kernel.group import Group

E = TypeVar("E", bound=Hashable)


def reduce(group: Group[E], operands: Iterable[E]) -> E:
    """Fold operands through the group operation, left to right.

    Args:
        group: The group supplying identity and operate
        operands: Ordered elements, possibly empty

    Returns:
        operate(...operate(operate(identity, x0), x1)..., xn), or identity
        when operands is empty
    """
    return functools.reduce(group.operate, operands, group.identity)


def span(
    group: Group[E],
    generators: Iterable[E],
    *,
    limits: ClosureLimits | None = None,
    trace: Trace | None = None,
    cancel: CancelToken | None = None,
) -> frozenset[E]:
    """Smallest subgroup of group containing every generator.

    The seed is the generators, their inverses and the identity; the seed
    is then closed under operate. Once every generator's inverse is present,
    closing under the operation also closes under inverse, because
    inverse(ab) = inverse(b) inverse(a).

    Args:
        group: The ambient group
        generators: Generating set; duplicates are harmless
        limits: Optional round/size caps
        trace: Optional runtime trace of the closure rounds
        cancel: Optional cancellation token

    Returns:
        The generated subgroup as a new frozenset

    Raises:
        ClosureBoundExceeded: A cap in limits was hit
        ClosureCancelled: cancel was set before the closure finished

    Without limits or cancel this never returns for a generator of
    infinite order.
    """
    gens = frozenset(generators)
    seed = union(gens, set_map(gens, group.inverse)) | {group.identity}
    return expand_until_stable(seed, group.operate, limits=limits, trace=trace, cancel=cancel)
