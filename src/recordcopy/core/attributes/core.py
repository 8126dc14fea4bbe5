"""Attribute discovery, shape registry, and record decorator.

Usage:
    @record
    @dataclass
    class Person:
        name: str | None = None
        age: int | None = None

    get_registry().describe(Person)
    # (AttributeInfo(name='name', declared_type=str | None, writable=True), ...)

Plain classes, dataclasses and Pydantic models can also be described without
the decorator; their shape is discovered on first use and cached.
"""

from __future__ import annotations

import dataclasses
import logging
import typing
from collections.abc import Callable
from typing import Any, ClassVar, get_type_hints, overload

from recordcopy.core.attributes.models import AttributeInfo

logger = logging.getLogger(__name__)

RECORD_ATTRIBUTES = "__record_attributes__"


def _is_pydantic_module(module: str) -> bool:
    return module == "pydantic" or module.startswith("pydantic.")


def _is_pydantic(cls: type) -> bool:
    """Check if class is a Pydantic model without importing pydantic.

    Args:
        cls: Class to check.

    Returns:
        True if class inherits from pydantic.BaseModel, False otherwise.
    """
    for base in cls.__mro__:
        if _is_pydantic_module(base.__module__) and base.__name__ == "BaseModel":
            return True
    return False


def _is_public(name: str) -> bool:
    return not name.startswith("_")


def _is_class_var(annotation: Any) -> bool:
    return annotation is ClassVar or typing.get_origin(annotation) is ClassVar


def _dataclass_attributes(cls: type) -> list[AttributeInfo]:
    hints = get_type_hints(cls)
    frozen = cls.__dataclass_params__.frozen  # type: ignore[attr-defined]
    return [
        AttributeInfo(f.name, hints.get(f.name, f.type), writable=not frozen)
        for f in dataclasses.fields(cls)
        if _is_public(f.name)
    ]


def _pydantic_attributes(cls: type) -> list[AttributeInfo]:
    model_frozen = bool(cls.model_config.get("frozen", False))  # type: ignore[attr-defined]
    return [
        AttributeInfo(
            name,
            info.annotation,
            writable=not (model_frozen or bool(info.frozen)),
        )
        for name, info in cls.model_fields.items()  # type: ignore[attr-defined]
        if _is_public(name)
    ]


def _annotated_attributes(cls: type) -> list[AttributeInfo]:
    return [
        AttributeInfo(name, annotation)
        for name, annotation in get_type_hints(cls).items()
        if _is_public(name) and not _is_class_var(annotation)
    ]


def _property_attributes(cls: type, taken: set[str]) -> list[AttributeInfo]:
    """Collect properties from the class and its bases, base classes first.

    Properties defined by object or by pydantic itself are not record
    attributes.
    """
    found: dict[str, property] = {}
    for klass in reversed(cls.__mro__):
        if klass is object or _is_pydantic_module(klass.__module__):
            continue
        for name, value in vars(klass).items():
            if isinstance(value, property) and _is_public(name) and name not in taken:
                found[name] = value

    attributes = []
    for name, prop in found.items():
        declared: Any = Any
        if prop.fget is not None:
            declared = get_type_hints(prop.fget).get("return", Any)
        attributes.append(AttributeInfo(name, declared, writable=prop.fset is not None))
    return attributes


def discover_attributes(cls: type) -> tuple[AttributeInfo, ...]:
    """Describe the public attributes of a record type.

    An explicit ``__record_attributes__`` declared on the class itself wins.
    Otherwise fields come first (dataclass fields, Pydantic fields, or plain
    annotations), followed by properties.

    Plain classes are described by their class-level annotations only;
    attributes assigned solely in ``__init__`` are not discovered. A class
    yielding no attributes is logged at debug level.

    Args:
        cls: Record class to describe.

    Returns:
        Ordered attribute descriptors.

    Raises:
        TypeError: If cls is not a class.
        NameError: If an annotation cannot be resolved.
    """
    if not isinstance(cls, type):
        raise TypeError(f"Expected a record class, got {cls!r}")

    declared = vars(cls).get(RECORD_ATTRIBUTES)
    if declared is not None:
        return tuple(declared)

    if dataclasses.is_dataclass(cls):
        fields = _dataclass_attributes(cls)
    elif _is_pydantic(cls):
        fields = _pydantic_attributes(cls)
    else:
        fields = _annotated_attributes(cls)

    taken = {attribute.name for attribute in fields}
    shape = tuple(fields + _property_attributes(cls, taken))
    if not shape:
        logger.debug("Record %s has no discoverable attributes", cls.__qualname__)
    return shape


class RecordRegistry:
    """Process-local cache of record shapes.

    Shapes are derived deterministically from the class, so concurrent
    discovery of the same class only ever stores equal values.
    """

    def __init__(self) -> None:
        """Initialize empty record registry."""
        self._shapes: dict[type, tuple[AttributeInfo, ...]] = {}

    def register(self, cls: type) -> tuple[AttributeInfo, ...]:
        """Discover and cache the shape of a record type.

        Args:
            cls: Record class to register.

        Returns:
            The cached attribute descriptors.
        """
        if cls in self._shapes:
            return self._shapes[cls]

        shape = discover_attributes(cls)
        logger.debug("Registered record %s with %d attributes", cls.__qualname__, len(shape))
        self._shapes[cls] = shape
        return shape

    def describe(self, cls: type, *, cache: bool = True) -> tuple[AttributeInfo, ...]:
        """Get the attribute descriptors of a record type.

        Args:
            cls: Record class to describe.
            cache: If False, discover again without touching the cache.

        Returns:
            Ordered attribute descriptors.
        """
        if not cache:
            return discover_attributes(cls)
        return self.register(cls)

    def is_registered(self, cls: type) -> bool:
        """Check if a record type's shape is cached.

        Args:
            cls: Class to check.

        Returns:
            True if the shape is cached, False otherwise.
        """
        return cls in self._shapes

    def clear(self) -> None:
        """Drop every cached shape."""
        self._shapes.clear()


# Module-level registry instance
_registry = RecordRegistry()


def get_registry() -> RecordRegistry:
    """Access the global record registry.

    Returns:
        The process-local RecordRegistry instance.
    """
    return _registry


@overload
def record(cls: type) -> type: ...


@overload
def record(cls: None = None) -> Callable[[type], type]: ...


def record(cls: type | None = None) -> type | Callable[[type], type]:
    """Describe a record type once, at class definition time.

    Supports both forms:
        @record       # bare decorator
        @record()     # parenthesized

    The discovered shape is stored as ``__record_attributes__`` on the class
    and in the global registry.

    Args:
        cls: The class to describe, or None if called with parentheses.

    Returns:
        Decorated class or decorator function.

    Note:
        Apply @record AFTER @dataclass so the fields already exist.
    """

    def decorator(c: type) -> type:
        shape = _registry.register(c)
        setattr(c, RECORD_ATTRIBUTES, shape)
        return c

    if cls is None:
        return decorator
    return decorator(cls)
