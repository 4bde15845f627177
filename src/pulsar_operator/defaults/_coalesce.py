"""Scalar coalescing helpers.

Presence is decided by ``is None`` only. ``False``, ``0`` and ``""`` are
values, never gaps to fill.
"""

from collections.abc import Callable
from typing import TypeVar

from pulsar_operator.crds._base import SpecModel

T = TypeVar("T")


def first_non_null(*values: T | None) -> T | None:
    """Return the first value that is not None, or None if all are."""
    for value in values:
        if value is not None:
            return value
    return None


def get_first_non_null(*suppliers: Callable[[], T | None]) -> T | None:
    """Call suppliers in order and return the first result that is not None.

    Suppliers after the first non-None result are not called.
    """
    for supplier in suppliers:
        value = supplier()
        if value is not None:
            return value
    return None


def coalesce_field(node: SpecModel, name: str, default: object) -> bool:
    """Fill a field with ``default`` if it is absent.

    Args:
        node: Node owning the field.
        name: Python attribute name of the field.
        default: Value to use when the field is absent.

    Returns:
        True if the field was filled in, False if it already had a value.
    """
    current = getattr(node, name)
    value = first_non_null(current, default)
    if value is current:
        return False
    setattr(node, name, value)
    node.mark_defaulted(name)
    return True
