"""Pure functions for per-attribute write gates.

Each gate receives the target attribute's current value and decides whether
an eligible source value may be written over it.
"""

from __future__ import annotations

from typing import Any


def write_always(current: Any) -> bool:
    """Write regardless of the current value.

    Args:
        current: Current target value (ignored).

    Returns:
        Always True.
    """
    return True


def write_if_none(current: Any) -> bool:
    """Write only into attributes that are still None.

    Args:
        current: Current target value.

    Returns:
        True if current is None.
    """
    return current is None


def write_if_not_none(current: Any) -> bool:
    """Write only over attributes that already hold a value.

    Args:
        current: Current target value.

    Returns:
        True if current is not None.
    """
    return current is not None
