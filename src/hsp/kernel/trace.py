"""Runtime trace infrastructure for closure computations.

This module records what a closure did, round by round, for profiling and
debugging. Trace is runtime infrastructure - it never influences the set
being computed.

Each closure opens a "closure_begin" event; its rounds and its final
"closure_end" or "closure_abort" event are recorded as children of it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any


@dataclass(frozen=True)
class Evidence:
    """A single recorded event.

    Attributes:
        action: What happened (e.g., "closure_round")
        id: Sequential event id within its Trace
        parent_id: Id of the enclosing closure_begin event, if any
        timestamp: When the event was recorded
        info: Event details (sizes, round numbers, abort reasons)
        duration_ms: Time spent in the event, when measured
    """

    action: str
    id: int = 0
    parent_id: int | None = None
    timestamp: datetime = field(default_factory=lambda: datetime.now(UTC))
    info: dict[str, Any] = field(default_factory=dict)
    duration_ms: float | None = None

    def matches(self, **criteria: Any) -> bool:
        """Check every criterion against info, then attributes.

        A criterion naming neither an info key nor an attribute never matches.
        """
        return all(
            (k in self.info and self.info[k] == v)
            or (hasattr(self, k) and getattr(self, k) == v)
            for k, v in criteria.items()
        )


class Trace:
    """Event log for one or more closure computations.

    A Trace is mutable and meant to be owned by a single call site; do not
    share one between concurrent span() calls. A disabled trace records
    nothing and costs one flag check per event.
    """

    def __init__(self, enabled: bool = True) -> None:
        self.enabled = enabled
        self._events: list[Evidence] = []
        self._open: list[int] = []

    def begin_closure(self, seed_size: int) -> int | None:
        """Record a closure_begin event and nest later events under it."""
        event_id = self.record("closure_begin", info={"seed": seed_size})
        if event_id is not None:
            self._open.append(event_id)
        return event_id

    def finish_closure(self, begin_id: int | None) -> None:
        """Stop nesting events under begin_id."""
        if begin_id is not None and self._open and self._open[-1] == begin_id:
            self._open.pop()

    def record(
        self,
        action: str,
        info: dict[str, Any] | None = None,
        duration_ms: float | None = None,
    ) -> int | None:
        """Record an event under the innermost open closure.

        Returns:
            Event id, or None if tracing is disabled
        """
        if not self.enabled:
            return None

        event_id = len(self._events)
        self._events.append(
            Evidence(
                action=action,
                id=event_id,
                parent_id=self._open[-1] if self._open else None,
                info=info or {},
                duration_ms=duration_ms,
            )
        )
        return event_id

    def get_events(self) -> list[Evidence]:
        """All recorded events in recording order."""
        return list(self._events)

    def find_all(self, **criteria: Any) -> list[Evidence]:
        """Events matching every criterion, e.g. find_all(action="closure_round", round=2)."""
        return [ev for ev in self._events if ev.matches(**criteria)]

    def closures(self) -> list[Evidence]:
        """The closure_begin event of every traced closure."""
        return self.find_all(action="closure_begin")

    def rounds(self, closure_id: int | None = None) -> list[Evidence]:
        """closure_round events, optionally only those of one closure."""
        found = self.find_all(action="closure_round")
        if closure_id is None:
            return found
        return [ev for ev in found if ev.parent_id == closure_id]

    def outcome(self, closure_id: int) -> Evidence | None:
        """The closure_end or closure_abort event of a closure, if recorded."""
        for ev in self._events:
            if ev.parent_id == closure_id and ev.action in ("closure_end", "closure_abort"):
                return ev
        return None

    def as_tree(self) -> dict[int | None, list[int]]:
        """Map each parent id to the ids of its children."""
        tree: dict[int | None, list[int]] = {}
        for ev in self._events:
            tree.setdefault(ev.parent_id, []).append(ev.id)
        return tree

    def __len__(self) -> int:
        return len(self._events)

    def clear(self) -> None:
        """Drop all events so the trace can be reused."""
        self._events.clear()
        self._open.clear()
