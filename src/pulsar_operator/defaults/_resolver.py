"""Defaulting of the global cluster spec.

The rules run in a fixed order: component names, scalar literals, storage,
TLS, then auth. Every rule only fills absent fields, so applying the
defaults twice gives the same tree as applying them once.
"""

from typing import TYPE_CHECKING

from pulsar_operator.crds._base import iter_defaulted_paths
from pulsar_operator.crds._global import (
    Components,
    GlobalSpec,
    GlobalStorageConfig,
)

from ._coalesce import coalesce_field, get_first_non_null
from ._merge import apply_defaults_from_template
from ._templates import (
    DEFAULT_EXISTING_STORAGE_CLASS_NAME,
    DEFAULT_IMAGE_PULL_POLICY,
    DEFAULT_KUBERNETES_CLUSTER_DOMAIN,
    DEFAULT_PERSISTENCE,
    DEFAULT_RESTART_ON_CONFIG_MAP_CHANGE,
    DEFAULT_STORAGE_CLASS_RECLAIM_POLICY,
    default_auth_config,
    default_components,
    default_rbac_config,
    default_tls_config,
    default_token_config,
    default_token_provisioner_config,
)

if TYPE_CHECKING:
    from structlog.typing import FilteringBoundLogger


def _apply_components_defaults(spec: GlobalSpec) -> None:
    if spec.components is None:
        spec.components = Components()
        spec.mark_defaulted("components")
    components = spec.components
    template = default_components()
    for name in type(components).model_fields:
        coalesce_field(components, name, getattr(template, name))


def _apply_scalar_defaults(spec: GlobalSpec) -> None:
    coalesce_field(spec, "kubernetes_cluster_domain", DEFAULT_KUBERNETES_CLUSTER_DOMAIN)
    coalesce_field(spec, "image_pull_policy", DEFAULT_IMAGE_PULL_POLICY)
    coalesce_field(spec, "persistence", DEFAULT_PERSISTENCE)
    coalesce_field(
        spec, "restart_on_config_map_change", DEFAULT_RESTART_ON_CONFIG_MAP_CHANGE
    )


def _apply_storage_defaults(spec: GlobalSpec) -> None:
    if spec.storage is None:
        spec.storage = GlobalStorageConfig()
        spec.mark_defaulted("storage")
    storage = spec.storage
    storage_class = storage.storage_class

    if storage_class is None and storage.existing_storage_class_name is None:
        coalesce_field(
            storage, "existing_storage_class_name", DEFAULT_EXISTING_STORAGE_CLASS_NAME
        )
    elif storage_class is not None:
        coalesce_field(
            storage_class, "reclaim_policy", DEFAULT_STORAGE_CLASS_RECLAIM_POLICY
        )


def _apply_tls_defaults(spec: GlobalSpec) -> None:
    tls = spec.tls
    if tls is None:
        spec.tls = default_tls_config()
        spec.mark_defaulted("tls")
        return

    # Per-component entries are left as supplied.
    if tls.enabled is None:
        tls.enabled = get_first_non_null(
            lambda: tls.enabled,
            lambda: default_tls_config().enabled,
        )
        tls.mark_defaulted("enabled")
    if tls.default_secret_name is None:
        tls.default_secret_name = get_first_non_null(
            lambda: tls.default_secret_name,
            lambda: default_tls_config().default_secret_name,
        )
        tls.mark_defaulted("default_secret_name")


def _apply_auth_defaults(spec: GlobalSpec) -> None:
    auth = spec.auth
    if auth is None:
        spec.auth = default_auth_config()
        spec.mark_defaulted("auth")
        return

    apply_defaults_from_template(auth, default_auth_config)

    token = auth.token
    if token is None:
        auth.token = default_token_config()
        auth.mark_defaulted("token")
        return
    apply_defaults_from_template(token, default_token_config)

    provisioner = token.provisioner
    if provisioner is None:
        token.provisioner = default_token_provisioner_config()
        token.mark_defaulted("provisioner")
        return
    apply_defaults_from_template(provisioner, default_token_provisioner_config)

    if provisioner.rbac is None:
        provisioner.rbac = default_rbac_config()
        provisioner.mark_defaulted("rbac")
    else:
        apply_defaults_from_template(provisioner.rbac, default_rbac_config)


def apply_global_spec_defaults(
    spec: GlobalSpec,
    *,
    logger: "FilteringBoundLogger | None" = None,  # noqa: UP037
) -> None:
    """Fill every absent field of a global spec with its default, in place.

    Fields the caller set, including ``False`` and ``""``, are never
    overwritten. Per-component TLS entries and the DNS config are not
    defaulted.

    Args:
        spec: Spec to complete.
        logger: Optional logger; receives one debug event listing the paths
            that were filled in.
    """
    _apply_components_defaults(spec)
    _apply_scalar_defaults(spec)
    _apply_storage_defaults(spec)
    _apply_tls_defaults(spec)
    _apply_auth_defaults(spec)

    if logger is not None:
        logger.debug(
            "global_spec_defaults_applied",
            cluster=spec.name,
            defaulted=sorted(iter_defaulted_paths(spec)),
        )
