"""Global cluster spec models.

This module provides the GlobalSpec model, the section of a PulsarCluster
resource shared by every component, and its nested sections.
"""

from pydantic import Field

from pulsar_operator.crds._auth import AuthConfig
from pulsar_operator.crds._base import SpecModel, ValidableSpec
from pulsar_operator.crds._dns import PodDNSConfig
from pulsar_operator.crds._storage_class import StorageClassConfig
from pulsar_operator.crds._validation import ValidationContext
from pulsar_operator.enums import ImagePullPolicy


class Components(SpecModel):
    """Base names of the cluster components."""

    zookeeper_base_name: str | None = Field(
        default=None,
        description="Zookeeper base name. Default value is 'zookeeper'.",
    )
    bookkeeper_base_name: str | None = Field(
        default=None,
        description="BookKeeper base name. Default value is 'bookkeeper'.",
    )
    broker_base_name: str | None = Field(
        default=None,
        description="Broker base name. Default value is 'broker'.",
    )
    proxy_base_name: str | None = Field(
        default=None,
        description="Proxy base name. Default value is 'proxy'.",
    )
    autorecovery_base_name: str | None = Field(
        default=None,
        description="Autorecovery base name. Default value is 'autorecovery'.",
    )
    bastion_base_name: str | None = Field(
        default=None,
        description="Bastion base name. Default value is 'bastion'.",
    )
    functions_worker_base_name: str | None = Field(
        default=None,
        description="Functions Worker base name. Default value is 'function'.",
    )


class TlsEntryConfig(SpecModel):
    """TLS settings of a single component."""

    enabled: bool = Field(default=False, description="Enable tls for this component.")
    tls_secret_name: str | None = Field(
        default=None,
        description="Secret holding the certificates for this component.",
    )


class TlsConfig(SpecModel):
    """Cluster TLS settings.

    Only ``enabled`` and ``default_secret_name`` receive defaults; the
    per-component entries are left as supplied.
    """

    enabled: bool | None = Field(
        default=None,
        description="Global switch to turn on or off the TLS configurations.",
    )
    default_secret_name: str | None = Field(
        default=None,
        description="Default secret name.",
    )
    zookeeper: TlsEntryConfig | None = Field(
        default=None,
        description="TLS configurations related to the ZooKeeper component.",
    )
    bookkeeper: TlsEntryConfig | None = Field(
        default=None,
        description="TLS configurations related to the BookKeeper component.",
    )
    broker: TlsEntryConfig | None = Field(
        default=None,
        description="TLS configurations related to the broker component.",
    )
    proxy: TlsEntryConfig | None = Field(
        default=None,
        description="TLS configurations related to the proxy component.",
    )


class GlobalStorageConfig(SpecModel):
    """Storage used by stateful components."""

    storage_class: StorageClassConfig | None = Field(
        default=None,
        description=(
            "Indicates if a StorageClass is used. "
            "The operator will create the StorageClass if needed."
        ),
    )
    existing_storage_class_name: str | None = Field(
        default=None,
        description="Indicates if an already existing storage class should be used.",
    )


class GlobalSpec(ValidableSpec):
    """Settings shared by every component of a Pulsar cluster.

    Attributes:
        name: Pulsar cluster base name.
        components: Component base names.
        dns_config: Additional DNS config for every pod.
        kubernetes_cluster_domain: Kubernetes cluster DNS domain.
        node_selectors: Node selector applied to every component.
        tls: TLS settings.
        persistence: Deploy stateful components with PersistentVolumeClaims.
        restart_on_config_map_change: Restart pods when their ConfigMap changes.
        auth: Authentication settings.
        image: Default Pulsar image.
        image_pull_policy: Default Pulsar image pull policy.
        storage: Storage settings.
    """

    name: str | None = Field(default=None, description="Pulsar cluster base name.")
    components: Components | None = Field(
        default=None,
        description="Pulsar cluster components names.",
    )
    dns_config: PodDNSConfig | None = Field(
        default=None,
        description="Additional DNS config for each pod created by the operator.",
    )
    kubernetes_cluster_domain: str | None = Field(
        default=None,
        description=(
            "The domain name for your kubernetes cluster. "
            "It's used to fully qualify service names when configuring Pulsar. "
            "The default value is 'cluster.local'."
        ),
    )
    node_selectors: dict[str, str] | None = Field(
        default=None,
        description="Global node selector. If set, this will apply to all components.",
    )
    tls: TlsConfig | None = Field(
        default=None,
        description="TLS configuration for the cluster.",
    )
    persistence: bool | None = Field(
        default=None,
        description=(
            "If persistence is enabled, components that have state will be "
            "deployed with PersistentVolumeClaims, otherwise, for test purposes, "
            "they will be deployed with emptyDir."
        ),
    )
    restart_on_config_map_change: bool | None = Field(
        default=None,
        description=(
            "Restart pods when their configmap is changed, using an annotation "
            "that holds the checksum of the configmap."
        ),
    )
    auth: AuthConfig | None = Field(default=None, description="Auth configuration.")
    image: str | None = Field(
        default=None,
        description=(
            "Default Pulsar image to use. "
            "Any components can be configured to use a different image."
        ),
    )
    image_pull_policy: ImagePullPolicy | None = Field(
        default=None,
        description=(
            "Default Pulsar image pull policy to use. "
            "Default value is 'IfNotPresent'."
        ),
    )
    storage: GlobalStorageConfig | None = Field(
        default=None,
        description="Storage configuration.",
    )

    def apply_defaults(self) -> None:
        """Fill in every absent field with its default, in place."""
        # Deferred import to avoid circular dependency
        from pulsar_operator.defaults import apply_global_spec_defaults  # noqa: PLC0415

        apply_global_spec_defaults(self)

    def is_valid(self, context: ValidationContext) -> bool:  # noqa: ARG002
        """Accept every global spec."""
        return True
