"""Copy engine."""

from recordcopy.copier.copier import PropertyCopier

__all__ = [
    "PropertyCopier",
]
