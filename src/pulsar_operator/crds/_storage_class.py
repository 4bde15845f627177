"""Storage class model.

This module provides the StorageClassConfig model describing a StorageClass
the operator creates on behalf of the cluster.
"""

from pydantic import Field

from pulsar_operator.crds._base import SpecModel
from pulsar_operator.enums import ReclaimPolicy


class StorageClassConfig(SpecModel):
    """StorageClass definition used for persistent volume claims.

    Attributes:
        reclaim_policy: Reclaim policy of the created volumes.
        type: Storage type passed to the provisioner, e.g. ``gp2``.
        fs_type: Filesystem type of the created volumes.
        provisioner: StorageClass provisioner.
        extra_params: Additional provisioner parameters.
    """

    reclaim_policy: ReclaimPolicy | None = Field(
        default=None,
        description="Reclaim policy for the StorageClass. Default value is 'Retain'.",
    )
    type: str | None = Field(default=None, description="Storage type.")
    fs_type: str | None = Field(default=None, description="Filesystem type.")
    provisioner: str | None = Field(
        default=None,
        description="Provisioner of the StorageClass.",
    )
    extra_params: dict[str, str] | None = Field(
        default=None,
        description="Additional parameters for the StorageClass.",
    )
