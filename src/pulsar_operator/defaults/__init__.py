"""Default values for the cluster spec.

This module provides the defaulting engine: template factories, the
generic template merge and the global spec resolver.

Example:
    >>> from pulsar_operator.crds import GlobalSpec
    >>> from pulsar_operator.defaults import apply_global_spec_defaults
    >>> spec = GlobalSpec(persistence=False)
    >>> apply_global_spec_defaults(spec)
    >>> spec.persistence, spec.tls.default_secret_name
    (False, 'pulsar-tls')
"""

from ._coalesce import coalesce_field, first_non_null, get_first_non_null
from ._merge import apply_defaults_from_template
from ._resolver import apply_global_spec_defaults
from ._templates import (
    DEFAULT_EXISTING_STORAGE_CLASS_NAME,
    DEFAULT_IMAGE_PULL_POLICY,
    DEFAULT_KUBERNETES_CLUSTER_DOMAIN,
    DEFAULT_PERSISTENCE,
    DEFAULT_PROVISIONER_IMAGE,
    DEFAULT_PROXY_ROLES,
    DEFAULT_RESTART_ON_CONFIG_MAP_CHANGE,
    DEFAULT_STORAGE_CLASS_RECLAIM_POLICY,
    DEFAULT_SUPER_USER_ROLES,
    DEFAULT_TLS_SECRET_NAME,
    DEFAULT_TOKEN_PRIVATE_KEY_FILE,
    DEFAULT_TOKEN_PUBLIC_KEY_FILE,
    default_auth_config,
    default_components,
    default_rbac_config,
    default_tls_config,
    default_token_config,
    default_token_provisioner_config,
)

__all__ = [
    "DEFAULT_EXISTING_STORAGE_CLASS_NAME",
    "DEFAULT_IMAGE_PULL_POLICY",
    "DEFAULT_KUBERNETES_CLUSTER_DOMAIN",
    "DEFAULT_PERSISTENCE",
    "DEFAULT_PROVISIONER_IMAGE",
    "DEFAULT_PROXY_ROLES",
    "DEFAULT_RESTART_ON_CONFIG_MAP_CHANGE",
    "DEFAULT_STORAGE_CLASS_RECLAIM_POLICY",
    "DEFAULT_SUPER_USER_ROLES",
    "DEFAULT_TLS_SECRET_NAME",
    "DEFAULT_TOKEN_PRIVATE_KEY_FILE",
    "DEFAULT_TOKEN_PUBLIC_KEY_FILE",
    "apply_defaults_from_template",
    "apply_global_spec_defaults",
    "coalesce_field",
    "default_auth_config",
    "default_components",
    "default_rbac_config",
    "default_tls_config",
    "default_token_config",
    "default_token_provisioner_config",
    "first_non_null",
    "get_first_non_null",
]
