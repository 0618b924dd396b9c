"""WalkupScan Event Table Models."""

from __future__ import annotations

from dataclasses import dataclass, field
from urllib.parse import urlsplit

from walkupscan.const import SCAN_EVENT_CATEGORY


@dataclass(frozen=True)
class Event:
    """
    A single entry of the device event table.

    Attributes:
        category: The unqualified event category, e.g. "ScanEvent".
        resource_uri: The resource the event concerns, taken from the payload.
            Events without a payload have no resource.
        resource_type: The type of that resource, when reported.
        aging_stamp: The device's ordering stamp for the event, when reported.

    """

    category: str
    resource_uri: str | None = None
    resource_type: str | None = None
    aging_stamp: str | None = None

    @property
    def is_scan_event(self) -> bool:
        """Return True if the event was raised by a scan at the device."""
        return self.category == SCAN_EVENT_CATEGORY

    def is_for(self, resource_uri: str) -> bool:
        """
        Return True if this is a scan event addressed to the given destination.

        Only the paths are compared: the printer may give a Location as an
        absolute URL and the same resource as a relative URI in its events.
        """
        if not self.is_scan_event or self.resource_uri is None:
            return False
        return urlsplit(self.resource_uri).path == urlsplit(resource_uri).path


@dataclass(frozen=True)
class EventTable:
    """
    A snapshot of the device event table.

    The etag comes from the response headers of the same fetch as the events,
    so the two always describe the same device state.
    """

    events: tuple[Event, ...] = field(default_factory=tuple)
    etag: str | None = None

    def first_scan_event(self) -> Event | None:
        """Return the first scan event in the table, or None."""
        return next((event for event in self.events if event.is_scan_event), None)
