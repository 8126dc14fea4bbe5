"""Attribute functionality: models, discovery, registry, and matching."""

from recordcopy.core.attributes.core import (
    RecordRegistry,
    discover_attributes,
    get_registry,
    record,
)
from recordcopy.core.attributes.models import AttributeInfo, Defaultable, RecordShape
from recordcopy.core.attributes.operations import (
    find_eligible,
    is_fresh,
    types_match,
    values_equal_defaults,
)

__all__ = [
    # Models
    "AttributeInfo",
    "RecordShape",
    "Defaultable",
    # Core
    "record",
    "discover_attributes",
    "get_registry",
    "RecordRegistry",
    # Operations
    "find_eligible",
    "is_fresh",
    "types_match",
    "values_equal_defaults",
]
