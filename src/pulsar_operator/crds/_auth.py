"""Authentication configuration models.

This module provides the AuthConfig model and its nested token, provisioner
and RBAC sections.
"""

from pydantic import Field

from pulsar_operator.crds._base import SpecModel
from pulsar_operator.enums import ImagePullPolicy


class RbacConfig(SpecModel):
    """RBAC resources for the token provisioner.

    Attributes:
        create: Create the Role/ClusterRole and bindings.
        namespaced: Use a namespaced Role instead of a ClusterRole.
    """

    create: bool | None = Field(
        default=None,
        description="Create needed RBAC to run the provisioner.",
    )
    namespaced: bool | None = Field(
        default=None,
        description="Whether to create the RBAC at namespace level or cluster level.",
    )


class TokenAuthProvisionerConfig(SpecModel):
    """Job that generates token keys and super-user tokens.

    Attributes:
        initialize: Generate the key pair and tokens if missing.
        image: Container image of the provisioner job.
        image_pull_policy: Image pull policy of the provisioner job.
        rbac: RBAC resources for the provisioner.
    """

    initialize: bool | None = Field(
        default=None,
        description="Initialize Secrets with new pair of keys and tokens.",
    )
    image: str | None = Field(default=None, description="Container image.")
    image_pull_policy: ImagePullPolicy | None = Field(
        default=None,
        description="Container image pull policy.",
    )
    rbac: RbacConfig | None = Field(
        default=None,
        description="RBAC configuration for the provisioner.",
    )


class TokenConfig(SpecModel):
    """JWT token authentication settings.

    Attributes:
        public_key_file: File name of the public key in the keys Secret.
        private_key_file: File name of the private key in the keys Secret.
        super_user_roles: Roles granted super-user permissions.
        proxy_roles: Roles used by proxies to connect to brokers.
        provisioner: Provisioner for keys and tokens.
    """

    public_key_file: str | None = Field(
        default=None,
        description="Public key file name stored in the Secret.",
    )
    private_key_file: str | None = Field(
        default=None,
        description="Private key file name stored in the Secret.",
    )
    super_user_roles: list[str] | None = Field(
        default=None,
        description="Super user roles.",
    )
    proxy_roles: list[str] | None = Field(default=None, description="Proxy roles.")
    provisioner: TokenAuthProvisionerConfig | None = Field(
        default=None,
        description="Configuration for the token provisioner.",
    )


class AuthConfig(SpecModel):
    """Cluster authentication settings.

    Attributes:
        enabled: Enable authentication across the cluster.
        token: Token authentication settings.
    """

    enabled: bool | None = Field(
        default=None,
        description="Enable authentication in the cluster.",
    )
    token: TokenConfig | None = Field(
        default=None,
        description="Token-based authentication configuration.",
    )
