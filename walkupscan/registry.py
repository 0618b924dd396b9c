"""Registration of this host as a WalkupScan destination."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from .const import LOGGER
from .exceptions import RegistrationFailedError, WalkupScanError
from .models.destination import RegistrationRequest, find_destination

if TYPE_CHECKING:
    from .client import WalkupScanClient


class DestinationRegistry:
    """
    Find or create the destination the printer uses for this host.

    The printer's list is authoritative: a destination whose name matches the
    identity is reused as is, so resolving twice registers at most once.
    """

    def __init__(self, client: WalkupScanClient, logger: Any = LOGGER) -> None:
        """Initialize the registry on top of a WalkupScanClient."""
        self.client = client
        self.logger = logger

    async def resolve_own_destination(self, identity_name: str) -> str:
        """
        Return the resource URI of the destination named `identity_name`.

        Registers a new destination when the printer has none by that name.
        A single registration attempt is made; it is not retried here.

        Raises:
            RegistrationFailedError: If the registered destinations cannot be listed.
            RegistrationRejectedError: If the printer refuses the registration.

        """
        try:
            destinations = await self.client.list_destinations()
        except WalkupScanError as e:
            msg = f"Unable to list destinations: {e}"
            raise RegistrationFailedError(msg) from e

        if destination := find_destination(destinations, identity_name):
            self.logger.debug(
                f"Destination {identity_name} already registered at "
                f"{destination.resource_uri}"
            )
            return destination.resource_uri

        self.logger.info(f"Registering {identity_name} as a scan destination")
        request = RegistrationRequest(name=identity_name, hostname=identity_name)
        try:
            return await self.client.register_destination(request)
        except WalkupScanError as e:
            self.logger.error(f"Registration of {identity_name} failed: {e}")
            raise

    async def unregister_own_destination(self, identity_name: str) -> bool:
        """
        Remove every destination named `identity_name` from the printer.

        Returns:
            True if at least one destination was removed.

        """
        destinations = await self.client.list_destinations()
        removed = False
        for destination in destinations:
            if destination.name != identity_name:
                continue
            await self.client.remove_destination(destination)
            removed = True
        if not removed:
            self.logger.info(f"No destination named {identity_name} to remove")
        return removed
