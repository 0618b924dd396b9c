"""WalkupScan models."""

from .destination import (
    RegistrationRequest,
    WalkupScanDestination,
    find_destination,
)
from .event import Event, EventTable

__all__ = [
    "Event",
    "EventTable",
    "RegistrationRequest",
    "WalkupScanDestination",
    "find_destination",
]
