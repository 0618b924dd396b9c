"""Custom exceptions for walkupscan."""

from __future__ import annotations


class WalkupScanError(Exception):
    """Base class for other exceptions."""


class WalkupScanConfigurationError(WalkupScanError):
    """Exception raised when the client configuration is invalid."""


class TransportError(WalkupScanError):
    """Exception raised when the device cannot be reached or the request times out."""


class UnexpectedStatusError(WalkupScanError):
    """Exception raised when the device answers with a status we do not accept."""

    def __init__(self, status: int, method: str, url: str) -> None:
        """Store the rejected status together with the request that produced it."""
        super().__init__(f"{method} {url} returned unexpected status {status}")
        self.status = status
        self.method = method
        self.url = url


class DecodeError(WalkupScanError):
    """Exception raised when a response body does not match the expected schema."""


class RegistrationRejectedError(WalkupScanError):
    """Exception raised when the device refuses to create a destination."""

    def __init__(self, status: int, reason: str | None = None) -> None:
        """Store the status the device answered the registration with."""
        msg = f"Destination registration rejected with status {status}"
        if reason:
            msg = f"{msg}: {reason}"
        super().__init__(msg)
        self.status = status


class RegistrationFailedError(WalkupScanError):
    """Exception raised when the registered destinations cannot be resolved."""


class WatchCancelledError(WalkupScanError):
    """Exception raised when a running event watch is cancelled."""
