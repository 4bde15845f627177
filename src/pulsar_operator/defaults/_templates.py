"""Default templates for spec sections.

Each factory returns a new, fully populated instance on every call, so
nothing built here is ever shared between two spec trees.
"""

from pulsar_operator.crds._auth import (
    AuthConfig,
    RbacConfig,
    TokenAuthProvisionerConfig,
    TokenConfig,
)
from pulsar_operator.crds._global import Components, TlsConfig
from pulsar_operator.enums import ImagePullPolicy, ReclaimPolicy

DEFAULT_KUBERNETES_CLUSTER_DOMAIN = "cluster.local"
DEFAULT_IMAGE_PULL_POLICY = ImagePullPolicy.IF_NOT_PRESENT
DEFAULT_PERSISTENCE = True
DEFAULT_RESTART_ON_CONFIG_MAP_CHANGE = False

DEFAULT_EXISTING_STORAGE_CLASS_NAME = "default"
DEFAULT_STORAGE_CLASS_RECLAIM_POLICY = ReclaimPolicy.RETAIN

DEFAULT_TLS_SECRET_NAME = "pulsar-tls"

DEFAULT_TOKEN_PUBLIC_KEY_FILE = "my-public.key"
DEFAULT_TOKEN_PRIVATE_KEY_FILE = "my-private.key"
DEFAULT_SUPER_USER_ROLES = ("superuser", "admin", "websocket", "proxy")
DEFAULT_PROXY_ROLES = ("proxy",)
DEFAULT_PROVISIONER_IMAGE = "datastax/burnell:latest"


def default_components() -> Components:
    """Return the default component base names."""
    return Components(
        zookeeper_base_name="zookeeper",
        bookkeeper_base_name="bookkeeper",
        broker_base_name="broker",
        proxy_base_name="proxy",
        autorecovery_base_name="autorecovery",
        bastion_base_name="bastion",
        functions_worker_base_name="function",
    )


def default_tls_config() -> TlsConfig:
    """Return the default TLS section: disabled, with the default secret name."""
    return TlsConfig(enabled=False, default_secret_name=DEFAULT_TLS_SECRET_NAME)


def default_rbac_config() -> RbacConfig:
    return RbacConfig(create=True, namespaced=True)


def default_token_provisioner_config() -> TokenAuthProvisionerConfig:
    return TokenAuthProvisionerConfig(
        initialize=True,
        image=DEFAULT_PROVISIONER_IMAGE,
        image_pull_policy=ImagePullPolicy.IF_NOT_PRESENT,
        rbac=default_rbac_config(),
    )


def default_token_config() -> TokenConfig:
    return TokenConfig(
        public_key_file=DEFAULT_TOKEN_PUBLIC_KEY_FILE,
        private_key_file=DEFAULT_TOKEN_PRIVATE_KEY_FILE,
        super_user_roles=list(DEFAULT_SUPER_USER_ROLES),
        proxy_roles=list(DEFAULT_PROXY_ROLES),
        provisioner=default_token_provisioner_config(),
    )


def default_auth_config() -> AuthConfig:
    """Return the default auth section.

    Auth is disabled; the token section carries the key file names, the
    super-user and proxy roles, and an enabled provisioner with namespaced
    RBAC.
    """
    return AuthConfig(enabled=False, token=default_token_config())
