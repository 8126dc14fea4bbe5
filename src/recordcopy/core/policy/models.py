"""Policy models: override status and copy results."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Generic, TypeVar

T = TypeVar("T")


class OverrideStatus(Enum):
    """When a caller-supplied target's values may be overwritten."""

    OVERRIDE_ONLY_IF_TARGET_IS_NEW = auto()
    """Copy only if the target still equals a new instance. Default."""

    OVERRIDE_ONLY_IF_TARGET_PROPERTY_VALUE_IS_NULL = auto()
    """Copy an attribute only if the target currently holds None."""

    OVERRIDE_ALL_TARGET_VALUES = auto()
    """Copy an attribute only if the target currently holds a value.

    Despite the name, attributes that are None on the target are NOT written.
    Kept as-is for behavioral parity with existing callers.
    """

    @property
    def checks_freshness(self) -> bool:
        """Whether the whole copy is gated on the target being new."""
        return self is OverrideStatus.OVERRIDE_ONLY_IF_TARGET_IS_NEW

    def get_gate(self) -> Callable[[Any], bool]:
        """Get the per-attribute write gate for this status.

        Returns:
            Pure function taking the target's current value.
        """
        # Late import to avoid circular dependency
        from recordcopy.core.policy import operations

        gates = {
            OverrideStatus.OVERRIDE_ONLY_IF_TARGET_IS_NEW: operations.write_always,
            OverrideStatus.OVERRIDE_ONLY_IF_TARGET_PROPERTY_VALUE_IS_NULL: (
                operations.write_if_none
            ),
            OverrideStatus.OVERRIDE_ALL_TARGET_VALUES: operations.write_if_not_none,
        }
        return gates[self]


@dataclass(slots=True)
class CopyResult(Generic[T]):
    """Target of a copy plus whether any attribute was written."""

    target: T
    changed: bool = False
