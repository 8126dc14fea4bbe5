"""Override policy: status enum, copy result, and write gates."""

from recordcopy.core.policy.models import CopyResult, OverrideStatus
from recordcopy.core.policy.operations import write_always, write_if_none, write_if_not_none

__all__ = [
    "OverrideStatus",
    "CopyResult",
    "write_always",
    "write_if_none",
    "write_if_not_none",
]
