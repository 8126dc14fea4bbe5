"""Observable collection models: change events and listener protocol."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Protocol, runtime_checkable


class ChangeAction(Enum):
    """Kind of mutation applied to an observable collection."""

    ADD = "add"
    REMOVE = "remove"
    REPLACE = "replace"
    MOVE = "move"
    RESET = "reset"


@dataclass(slots=True, frozen=True)
class CollectionChange:
    """Single mutation of an observable collection.

    Attributes:
        action: What happened.
        index: Position the change applies to (new position for MOVE, -1 for RESET).
        new_items: Items added or written.
        old_items: Items removed or overwritten.
        old_index: Previous position for MOVE, -1 otherwise.
    """

    action: ChangeAction
    index: int
    new_items: tuple[Any, ...] = field(default_factory=tuple)
    old_items: tuple[Any, ...] = field(default_factory=tuple)
    old_index: int = -1


@runtime_checkable
class ChangeListener(Protocol):
    """Callable notified after every mutation."""

    def __call__(self, change: CollectionChange) -> None: ...
