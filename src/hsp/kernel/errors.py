"""Error types for aborted set closures."""

from __future__ import annotations

from typing import Any, Literal


class ClosureError(Exception):
    """Error raised when a closure stops before reaching its fixed point.

    This error preserves the partially closed set and the number of
    completed rounds so callers can inspect how far the closure got.
    """

    def __init__(self, message: str, partial: frozenset[Any], rounds: int) -> None:
        self.partial = partial
        self.rounds = rounds
        super().__init__(message)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({super().__str__()!r}, "
            f"partial=<{len(self.partial)} elements>, rounds={self.rounds})"
        )


class ClosureBoundExceeded(ClosureError):
    """Error raised when a closure grows past one of its ClosureLimits."""

    def __init__(
        self,
        bound: Literal["max_rounds", "max_size"],
        limit: int,
        partial: frozenset[Any],
        rounds: int,
    ) -> None:
        self.bound = bound
        self.limit = limit
        super().__init__(f"closure exceeded {bound}={limit}", partial, rounds)


class ClosureCancelled(ClosureError):
    """Error raised when a closure is cancelled between rounds."""

    def __init__(self, partial: frozenset[Any], rounds: int) -> None:
        super().__init__(f"closure cancelled after {rounds} rounds", partial, rounds)
