"""Cluster spec models.

This module provides the public API for the spec tree of a PulsarCluster
resource: the Pydantic models, presence tracking, document loading and
validation support.

Example:
    >>> from pulsar_operator.crds import global_spec_from_dict
    >>> spec = global_spec_from_dict({"persistence": False})
    >>> spec.apply_defaults()
    >>> spec.kubernetes_cluster_domain
    'cluster.local'
"""

from pulsar_operator.exceptions import (
    SpecError,
    SpecLoadError,
    SpecValidationError,
)

from ._auth import AuthConfig, RbacConfig, TokenAuthProvisionerConfig, TokenConfig
from ._base import SpecModel, ValidableSpec, WithDefaults, iter_defaulted_paths
from ._dns import PodDNSConfig, PodDNSConfigOption
from ._global import (
    Components,
    GlobalSpec,
    GlobalStorageConfig,
    TlsConfig,
    TlsEntryConfig,
)
from ._loader import (
    dump_global_spec,
    extract_global_section,
    get_global_spec_schema,
    global_spec_from_dict,
    load_global_spec,
    read_spec_file,
)
from ._storage_class import StorageClassConfig
from ._validation import (
    ValidationContext,
    ValidationIssue,
    issues_from_validation_error,
    raise_if_validation_errors,
)

__all__ = [
    "AuthConfig",
    "Components",
    "GlobalSpec",
    "GlobalStorageConfig",
    "PodDNSConfig",
    "PodDNSConfigOption",
    "RbacConfig",
    "SpecError",
    "SpecLoadError",
    "SpecModel",
    "SpecValidationError",
    "StorageClassConfig",
    "TlsConfig",
    "TlsEntryConfig",
    "TokenAuthProvisionerConfig",
    "TokenConfig",
    "ValidableSpec",
    "ValidationContext",
    "ValidationIssue",
    "WithDefaults",
    "dump_global_spec",
    "extract_global_section",
    "get_global_spec_schema",
    "global_spec_from_dict",
    "issues_from_validation_error",
    "iter_defaulted_paths",
    "load_global_spec",
    "raise_if_validation_errors",
    "read_spec_file",
]
