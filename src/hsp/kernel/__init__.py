"""Kernel layer - the group contract and the closure machinery under span()."""

from hsp.kernel.closure import CancelToken, expand_until_stable, set_map, union
from hsp.kernel.errors import ClosureBoundExceeded, ClosureCancelled, ClosureError
from hsp.kernel.group import Group
from hsp.kernel.limits import ClosureLimits
from hsp.kernel.trace import Evidence, Trace

__all__ = [
    "Group",
    # Closure
    "union",
    "set_map",
    "expand_until_stable",
    "CancelToken",
    "ClosureLimits",
    # Errors
    "ClosureError",
    "ClosureBoundExceeded",
    "ClosureCancelled",
    # Tracing
    "Evidence",
    "Trace",
]
