"""recordcopy: shallow attribute copying between independently defined records.

Usage:
    from recordcopy import OverrideStatus, PropertyCopier

    @dataclass
    class Source:
        name: str | None = None
        age: int | None = None

    @dataclass
    class Target:
        name: str | None = None
        age: int | None = None

    copier = PropertyCopier(Source, Target)
    target = copier.copy(Source(name="Ann", age=30))

    result = copier.copy_into_with_changes(
        Source(name="Ann", age=30),
        Target(name="Bob"),
        OverrideStatus.OVERRIDE_ONLY_IF_TARGET_PROPERTY_VALUE_IS_NULL,
    )
    result.target.name  # "Bob"
    result.target.age   # 30
    result.changed      # True
"""

__version__ = "0.1.0"

# Core primitives
from recordcopy.core import (
    AttributeInfo,
    CopyResult,
    Defaultable,
    OverrideStatus,
    RecordRegistry,
    RecordShape,
    discover_attributes,
    get_registry,
    record,
)

# Copy engine
from recordcopy.copier import PropertyCopier

# Observable output container
from recordcopy.observable import (
    ChangeAction,
    CollectionChange,
    ObservableList,
)

__all__ = [
    # Version
    "__version__",
    # Core
    "AttributeInfo",
    "RecordShape",
    "Defaultable",
    "record",
    "discover_attributes",
    "get_registry",
    "RecordRegistry",
    "OverrideStatus",
    "CopyResult",
    # Engine
    "PropertyCopier",
    # Observable
    "ObservableList",
    "ChangeAction",
    "CollectionChange",
]
