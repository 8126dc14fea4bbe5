"""Pure functions for matching attributes and checking record freshness.

These are stateless queries: they read attribute descriptors and values but
never write to a record.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import Any

from recordcopy.core.attributes.models import AttributeInfo, Defaultable

logger = logging.getLogger(__name__)


def types_match(source: AttributeInfo, target: AttributeInfo) -> bool:
    """Check that two attributes declare exactly the same type.

    Args:
        source: Source attribute descriptor.
        target: Target attribute descriptor.

    Returns:
        True if the declared types compare equal.
    """
    return bool(source.declared_type == target.declared_type)


def find_eligible(
    source: AttributeInfo,
    targets: Sequence[AttributeInfo],
) -> AttributeInfo | None:
    """Find the target attribute a source attribute may be copied into.

    Target attributes are scanned in order. Other names are skipped. A
    same-name attribute that is not writable ends the scan with no match,
    even if a writable one with the same name follows it. A same-name
    attribute with a different declared type is passed over.

    Args:
        source: Source attribute descriptor.
        targets: Ordered target attribute descriptors.

    Returns:
        The first eligible target attribute, or None.
    """
    for target in targets:
        if target.name != source.name:
            continue
        if not target.writable:
            logger.debug("Target attribute %r is read-only, skipping", target.name)
            return None
        if types_match(source, target):
            return target
    return None


def values_equal_defaults(
    record: Any,
    attributes: Sequence[AttributeInfo],
    default: Any,
    default_attributes: Sequence[AttributeInfo],
) -> bool:
    """Compare a record's values against a default instance, by name only.

    Attributes present on only one side are ignored.

    Args:
        record: Record to inspect.
        attributes: Descriptors of the record's type.
        default: Freshly constructed instance to compare against.
        default_attributes: Descriptors of the default instance's type.

    Returns:
        True if no shared attribute differs.
    """
    names = {attribute.name for attribute in attributes}
    for attribute in default_attributes:
        if attribute.name not in names:
            continue
        if getattr(default, attribute.name) != getattr(record, attribute.name):
            return False
    return True


def is_fresh(
    record: Any,
    factory: Callable[[], Any],
    describe: Callable[[type], Sequence[AttributeInfo]],
) -> bool:
    """Check whether a record still holds the values of a new instance.

    Records implementing Defaultable answer for themselves. Otherwise one
    throwaway instance is built with ``factory`` and compared attribute by
    attribute with ``==``.

    Args:
        record: Record to inspect.
        factory: Zero-argument constructor of the record's declared type.
        describe: Returns the attribute descriptors of a class.

    Returns:
        True if the record is indistinguishable from a new instance.
    """
    if isinstance(record, Defaultable):
        return record.__is_default__()

    default = factory()
    return values_equal_defaults(
        record,
        describe(type(record)),
        default,
        describe(type(default)),
    )
