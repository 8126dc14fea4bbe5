"""List that notifies listeners about every mutation.

Usage:
    items = ObservableList([1, 2])
    unsubscribe = items.subscribe(lambda change: print(change.action))
    items.append(3)   # prints ChangeAction.ADD
    items[0] = 10     # prints ChangeAction.REPLACE
    unsubscribe()
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, MutableSequence, Sequence
from typing import TypeVar, overload

from recordcopy.observable.models import ChangeAction, ChangeListener, CollectionChange


T = TypeVar("T")


class ObservableList(MutableSequence[T]):
    """Mutable sequence that emits a CollectionChange per mutation.

    Listeners run synchronously, in subscription order, after the mutation
    has been applied. A listener that raises aborts notification and the
    exception reaches the caller; the mutation itself stays applied.
    """

    def __init__(self, items: Iterable[T] | None = None) -> None:
        self._items: list[T] = list(items) if items is not None else []
        self._listeners: list[ChangeListener] = []

    # --- Subscriptions ---

    def subscribe(self, listener: ChangeListener) -> Callable[[], None]:
        """Register a listener for future changes.

        Args:
            listener: Called with each CollectionChange.

        Returns:
            Function that removes the listener again. Calling it twice is a no-op.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self, change: CollectionChange) -> None:
        for listener in list(self._listeners):
            listener(change)

    # --- Sequence protocol ---

    @overload
    def __getitem__(self, index: int) -> T: ...

    @overload
    def __getitem__(self, index: slice) -> list[T]: ...

    def __getitem__(self, index: int | slice) -> T | list[T]:
        return self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __contains__(self, value: object) -> bool:
        return value in self._items

    # --- Mutations ---

    def __setitem__(self, index: int, value: T) -> None:  # type: ignore[override]
        if isinstance(index, slice):
            raise TypeError("ObservableList does not support slice assignment")
        position = range(len(self._items))[index]
        old = self._items[position]
        self._items[position] = value
        self._notify(
            CollectionChange(ChangeAction.REPLACE, position, new_items=(value,), old_items=(old,))
        )

    def __delitem__(self, index: int) -> None:  # type: ignore[override]
        if isinstance(index, slice):
            raise TypeError("ObservableList does not support slice deletion")
        position = range(len(self._items))[index]
        old = self._items.pop(position)
        self._notify(CollectionChange(ChangeAction.REMOVE, position, old_items=(old,)))

    def insert(self, index: int, value: T) -> None:
        """Insert value before index, clamped like list.insert."""
        position = max(0, min(index if index >= 0 else len(self._items) + index, len(self._items)))
        self._items.insert(position, value)
        self._notify(CollectionChange(ChangeAction.ADD, position, new_items=(value,)))

    def move(self, old_index: int, new_index: int) -> None:
        """Move the item at old_index so it ends up at new_index.

        Raises:
            IndexError: If either index is out of range.
        """
        source = range(len(self._items))[old_index]
        destination = range(len(self._items))[new_index]
        item = self._items.pop(source)
        self._items.insert(destination, item)
        self._notify(
            CollectionChange(
                ChangeAction.MOVE,
                destination,
                new_items=(item,),
                old_items=(item,),
                old_index=source,
            )
        )

    def clear(self) -> None:
        """Remove every item with a single RESET notification."""
        old = tuple(self._items)
        self._items.clear()
        self._notify(CollectionChange(ChangeAction.RESET, -1, old_items=old))

    # --- Comparison ---

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ObservableList):
            return self._items == other._items
        if isinstance(other, Sequence) and not isinstance(other, (str, bytes)):
            return self._items == list(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r})"

    def to_list(self) -> list[T]:
        """Return a plain list copy of the items."""
        return list(self._items)

