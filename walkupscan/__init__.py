"""WalkupScan destination client for HP printers."""

from .client import WalkupScanClient
from .config import WalkupScanConfig
from .const import DEBUG, LOGGER
from .exceptions import (
    DecodeError,
    RegistrationFailedError,
    RegistrationRejectedError,
    TransportError,
    UnexpectedStatusError,
    WalkupScanConfigurationError,
    WalkupScanError,
    WatchCancelledError,
)
from .orchestrator import WalkupScanOrchestrator
from .registry import DestinationRegistry
from .retry import RetryPolicy
from .watcher import EventWatcher, WatchSession

__all__ = [
    "DEBUG",
    "LOGGER",
    "DecodeError",
    "DestinationRegistry",
    "EventWatcher",
    "RegistrationFailedError",
    "RegistrationRejectedError",
    "RetryPolicy",
    "TransportError",
    "UnexpectedStatusError",
    "WalkupScanClient",
    "WalkupScanConfig",
    "WalkupScanConfigurationError",
    "WalkupScanError",
    "WalkupScanOrchestrator",
    "WatchCancelledError",
    "WatchSession",
]
