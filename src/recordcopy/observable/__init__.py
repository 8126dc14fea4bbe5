"""Observable sequence used as a bulk-copy output container."""

from recordcopy.observable.core import ObservableList
from recordcopy.observable.models import ChangeAction, ChangeListener, CollectionChange

__all__ = [
    "ObservableList",
    "ChangeAction",
    "ChangeListener",
    "CollectionChange",
]
