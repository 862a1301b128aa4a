"""Finite-set closure utilities.

expand_until_stable() grows a set by a binary operation until it stops
changing. Each round only combines the frontier (the elements added in the
previous round) against the accumulated set: pairs made only of older
elements were already combined in an earlier round, so the result equals
taking every pairwise product of the whole set each round.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Hashable, Iterable
from typing import Protocol, TypeVar

from hsp.kernel.errors import ClosureBoundExceeded, ClosureCancelled, ClosureError
from hsp.kernel.limits import ClosureLimits
from hsp.kernel.trace import Trace

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=Hashable)
R = TypeVar("R", bound=Hashable)


class CancelToken(Protocol):
    """Anything with an is_set() flag, e.g. threading.Event."""

    def is_set(self) -> bool: ...


def union(a: Iterable[E], b: Iterable[E]) -> frozenset[E]:
    """Union of two finite collections."""
    return frozenset(a).union(b)


def set_map(s: Iterable[E], fn: Callable[[E], R]) -> frozenset[R]:
    """Image of a finite collection under fn."""
    return frozenset(fn(x) for x in s)


def expand_until_stable(
    seed: Iterable[E],
    combine: Callable[[E, E], E],
    *,
    limits: ClosureLimits | None = None,
    trace: Trace | None = None,
    cancel: CancelToken | None = None,
) -> frozenset[E]:
    """Close seed under combine.

    Args:
        seed: Initial elements
        combine: Binary operation; both combine(a, b) and combine(b, a)
            are taken, so it need not be commutative
        limits: Optional round/size caps
        trace: Optional runtime trace receiving one event per round
        cancel: Optional token checked before every round

    Returns:
        The smallest superset of seed closed under combine

    Raises:
        ClosureBoundExceeded: A cap in limits was hit
        ClosureCancelled: cancel was set before the fixed point was reached

    Termination is only guaranteed when the closure is finite. Pass limits
    or cancel when that is not known in advance.
    """
    limits = limits or ClosureLimits()
    closed: set[E] = set(seed)
    frontier: set[E] = set(closed)
    rounds = 0

    begin_id: int | None = None
    if trace is not None:
        begin_id = trace.begin_closure(len(closed))

    try:
        _check_size(closed, limits, rounds)

        while frontier:
            if cancel is not None and cancel.is_set():
                raise ClosureCancelled(frozenset(closed), rounds)
            if limits.max_rounds is not None and rounds >= limits.max_rounds:
                raise ClosureBoundExceeded("max_rounds", limits.max_rounds, frozenset(closed), rounds)

            start_time = time.perf_counter()
            added: set[E] = set()
            for a in frontier:
                for b in closed:
                    for product in (combine(a, b), combine(b, a)):
                        if product not in closed:
                            added.add(product)
            duration_ms = (time.perf_counter() - start_time) * 1000

            closed |= added
            frontier_size = len(frontier)
            frontier = added
            rounds += 1

            logger.debug(
                "closure round %d: size=%d frontier=%d added=%d",
                rounds, len(closed), frontier_size, len(added),
            )
            if trace is not None:
                trace.record(
                    "closure_round",
                    info={
                        "round": rounds,
                        "size": len(closed),
                        "frontier": frontier_size,
                        "added": len(added),
                    },
                    duration_ms=duration_ms,
                )

            _check_size(closed, limits, rounds)

        if trace is not None:
            trace.record("closure_end", info={"size": len(closed), "rounds": rounds})
    except ClosureError as exc:
        logger.warning("closure aborted: %s", exc)
        if trace is not None:
            trace.record("closure_abort", info={"reason": str(exc), "rounds": exc.rounds})
        raise
    finally:
        if trace is not None:
            trace.finish_closure(begin_id)

    return frozenset(closed)


def _check_size(closed: set[E], limits: ClosureLimits, rounds: int) -> None:
    if limits.max_size is not None and len(closed) > limits.max_size:
        raise ClosureBoundExceeded("max_size", limits.max_size, frozenset(closed), rounds)
