"""Enumeration types for the pulsar operator."""

from enum import StrEnum


class ImagePullPolicy(StrEnum):
    """Kubernetes container image pull policies."""

    ALWAYS = "Always"
    IF_NOT_PRESENT = "IfNotPresent"
    NEVER = "Never"


class ReclaimPolicy(StrEnum):
    """Kubernetes persistent volume reclaim policies."""

    RETAIN = "Retain"
    DELETE = "Delete"
    RECYCLE = "Recycle"


class FieldPresence(StrEnum):
    """Presence state of a single spec field.

    ABSENT fields were never supplied (or supplied as null). EXPLICIT fields
    carry a caller value, even a zero value like ``False`` or ``""``.
    DEFAULTED fields were filled in while applying defaults.
    """

    ABSENT = "absent"
    EXPLICIT = "explicit"
    DEFAULTED = "defaulted"
