from .kernel import (
    ClosureBoundExceeded,
    ClosureCancelled,
    ClosureError,
    ClosureLimits,
    Evidence,
    Group,
    Trace,
    expand_until_stable,
    set_map,
    union,
)
from .laws import GroupLawError, LawViolation, assert_group_laws, check_group_laws, is_subgroup
from .ops import reduce, span

__all__ = [
    # Contract
    "Group",
    # Algorithms
    "reduce",
    "span",
    "expand_until_stable",
    "union",
    "set_map",
    "ClosureLimits",
    # Errors
    "ClosureError",
    "ClosureBoundExceeded",
    "ClosureCancelled",
    # Laws
    "LawViolation",
    "GroupLawError",
    "check_group_laws",
    "assert_group_laws",
    "is_subgroup",
    # Tracing
    "Trace",
    "Evidence",
]
