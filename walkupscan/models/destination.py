"""WalkupScan Destination Models."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from walkupscan.const import LINK_TYPE_NETWORK

if TYPE_CHECKING:
    from collections.abc import Iterable


@dataclass(frozen=True)
class WalkupScanDestination:
    """
    A scan destination as registered on the device.

    Attributes:
        name: The display name shown on the printer panel.
        resource_uri: The device resource for this destination; also its identity.
        hostname: The network name the destination advertised, if the device
            reports it.
        link_type: How the device reaches the destination, usually "Network".

    """

    name: str
    resource_uri: str
    hostname: str | None = None
    link_type: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Return a dictionary representation of the destination."""
        return {
            "name": self.name,
            "resource_uri": self.resource_uri,
            "hostname": self.hostname,
            "link_type": self.link_type,
        }


@dataclass(frozen=True)
class RegistrationRequest:
    """A request asking the device to create a destination for this host."""

    name: str
    hostname: str
    link_type: str = LINK_TYPE_NETWORK


def find_destination(
    destinations: Iterable[WalkupScanDestination], name: str
) -> WalkupScanDestination | None:
    """Return the first destination whose name matches exactly, or None."""
    for destination in destinations:
        if destination.name == name:
            return destination
    return None
