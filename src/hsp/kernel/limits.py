"""Bounds for fixed-point closures."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, PositiveInt


class ClosureLimits(BaseModel):
    """Optional caps on a closure computation.

    Attributes:
        max_rounds: Maximum number of expansion rounds, None for unbounded
        max_size: Maximum size of the accumulated set, None for unbounded
    """

    model_config = ConfigDict(frozen=True)

    max_rounds: PositiveInt | None = None
    max_size: PositiveInt | None = None

    @property
    def unbounded(self) -> bool:
        return self.max_rounds is None and self.max_size is None
