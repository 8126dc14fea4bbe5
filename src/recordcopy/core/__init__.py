"""Core functionalities: stateless protocols and primitives.

Architecture Note:
    core/ contains pure, stateless building blocks: attribute descriptors,
    discovery, matching, freshness and override policies. The copy engine in
    copier/ composes them; observable/ holds the bulk output container.
"""

from recordcopy.core.attributes import (
    AttributeInfo,
    Defaultable,
    RecordRegistry,
    RecordShape,
    discover_attributes,
    find_eligible,
    get_registry,
    is_fresh,
    record,
    types_match,
)
from recordcopy.core.policy import CopyResult, OverrideStatus

__all__ = [
    # Attributes
    "AttributeInfo",
    "RecordShape",
    "Defaultable",
    "record",
    "discover_attributes",
    "get_registry",
    "RecordRegistry",
    "find_eligible",
    "is_fresh",
    "types_match",
    # Policy
    "OverrideStatus",
    "CopyResult",
]
