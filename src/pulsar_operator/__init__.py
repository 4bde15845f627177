"""Pulsar operator cluster spec defaulting."""

from pulsar_operator.crds import GlobalSpec, global_spec_from_dict, load_global_spec
from pulsar_operator.defaults import apply_global_spec_defaults
from pulsar_operator.enums import FieldPresence

__all__ = [
    "FieldPresence",
    "GlobalSpec",
    "apply_global_spec_defaults",
    "global_spec_from_dict",
    "load_global_spec",
]
