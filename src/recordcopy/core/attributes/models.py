"""Attribute models: descriptors and record protocols.

A record type is described by an ordered tuple of AttributeInfo. Types may
supply that tuple themselves (the RecordShape protocol) or have it discovered
from their dataclass fields, Pydantic fields, annotations and properties.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Protocol, runtime_checkable


@dataclass(slots=True, frozen=True)
class AttributeInfo:
    """Public attribute of a record type.

    Attributes:
        name: Attribute name, used with getattr/setattr.
        declared_type: Resolved annotation. Compared with == for matching.
        writable: False for frozen fields and properties without a setter.
    """

    name: str
    declared_type: Any
    writable: bool = True


@runtime_checkable
class RecordShape(Protocol):
    """Record type that declares its own attributes.

    Set by the @record decorator, or written by hand when discovery is not
    enough. Order and duplicates are used verbatim.
    """

    __record_attributes__: ClassVar[tuple[AttributeInfo, ...]]


@runtime_checkable
class Defaultable(Protocol):
    """Record that knows whether it still holds its default values."""

    def __is_default__(self) -> bool: ...
