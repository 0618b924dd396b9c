"""Configuration for the WalkupScan watcher."""

from __future__ import annotations

import os
import socket
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from .const import (
    DEFAULT_EVENT_TIMEOUT,
    DEFAULT_RETRY_DELAY,
    ENV_MAX_ATTEMPTS,
    ENV_NAME,
    ENV_POLL_TIMEOUT,
    ENV_PRINTER_IP,
    ENV_RETRY_DELAY,
)
from .exceptions import WalkupScanConfigurationError
from .retry import RetryPolicy

if TYPE_CHECKING:
    from collections.abc import Mapping


def _parse_number(name: str, value: str, kind: type) -> Any:
    try:
        return kind(value)
    except ValueError as e:
        msg = f"{name} must be a number, got {value!r}"
        raise WalkupScanConfigurationError(msg) from e


@dataclass(frozen=True)
class WalkupScanConfig:
    """
    Settings for one watcher process.

    Attributes:
        printer_address: Host, host:port or base URL of the printer.
        identity: Name this host registers under; defaults to the hostname.
        poll_timeout: Seconds the printer may hold each event poll.
        retry_delay: Seconds to wait before retrying a failed registration.
        max_attempts: Registration attempts before giving up, None for no limit.

    """

    printer_address: str
    identity: str
    poll_timeout: int = DEFAULT_EVENT_TIMEOUT
    retry_delay: float = DEFAULT_RETRY_DELAY
    max_attempts: int | None = None

    def __post_init__(self) -> None:
        """Validate the settings."""
        if not self.printer_address:
            msg = f"Printer address is required, set {ENV_PRINTER_IP}"
            raise WalkupScanConfigurationError(msg)
        if not self.identity:
            msg = "Destination name must not be empty"
            raise WalkupScanConfigurationError(msg)
        if self.poll_timeout <= 0:
            msg = f"Poll timeout must be positive, got {self.poll_timeout}"
            raise WalkupScanConfigurationError(msg)
        if self.retry_delay < 0:
            msg = f"Retry delay must not be negative, got {self.retry_delay}"
            raise WalkupScanConfigurationError(msg)
        if self.max_attempts is not None and self.max_attempts < 1:
            msg = f"Max attempts must be at least 1, got {self.max_attempts}"
            raise WalkupScanConfigurationError(msg)

    @classmethod
    def from_env(
        cls, environ: Mapping[str, str] | None = None, **overrides: Any
    ) -> WalkupScanConfig:
        """
        Build the configuration from environment variables.

        Keyword arguments that are not None take precedence over the environment.
        """
        environ = os.environ if environ is None else environ
        max_attempts = environ.get(ENV_MAX_ATTEMPTS)
        settings = dict(
            printer_address=environ.get(ENV_PRINTER_IP, ""),
            identity=environ.get(ENV_NAME) or socket.gethostname(),
            poll_timeout=_parse_number(
                ENV_POLL_TIMEOUT,
                environ.get(ENV_POLL_TIMEOUT, str(DEFAULT_EVENT_TIMEOUT)),
                int,
            ),
            retry_delay=_parse_number(
                ENV_RETRY_DELAY,
                environ.get(ENV_RETRY_DELAY, str(DEFAULT_RETRY_DELAY)),
                float,
            ),
            max_attempts=(
                _parse_number(ENV_MAX_ATTEMPTS, max_attempts, int)
                if max_attempts
                else None
            ),
        )
        settings.update(
            {key: value for key, value in overrides.items() if value is not None}
        )
        return cls(**settings)

    @property
    def base_url(self) -> str:
        """Return the base URL of the printer."""
        if "://" in self.printer_address:
            return self.printer_address.rstrip("/")
        return f"http://{self.printer_address}"

    @property
    def retry_policy(self) -> RetryPolicy:
        """Return the registration retry policy these settings describe."""
        return RetryPolicy.fixed(self.retry_delay, max_attempts=self.max_attempts)
