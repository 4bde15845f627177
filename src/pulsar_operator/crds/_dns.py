"""Pod DNS configuration models.

These mirror the Kubernetes PodDNSConfig type. The operator passes them
through to every pod unchanged and never fills in defaults.
"""

from pulsar_operator.crds._base import SpecModel


class PodDNSConfigOption(SpecModel):
    """A single resolver option."""

    name: str | None = None
    value: str | None = None


class PodDNSConfig(SpecModel):
    """Additional DNS parameters for pods."""

    nameservers: list[str] | None = None
    options: list[PodDNSConfigOption] | None = None
    searches: list[str] | None = None
