"""Tests for WalkupScanConfig."""

from unittest.mock import patch

import pytest

from walkupscan.config import WalkupScanConfig
from walkupscan.exceptions import WalkupScanConfigurationError


def test_from_env_defaults() -> None:
    """Only the printer address is required; the rest has defaults."""
    with patch("walkupscan.config.socket.gethostname", return_value="host-1"):
        config = WalkupScanConfig.from_env({"PRINTER_IP": "192.168.1.7"})

    assert config.printer_address == "192.168.1.7"
    assert config.identity == "host-1"
    assert config.poll_timeout == 1200
    assert config.retry_delay == 1.0
    assert config.max_attempts is None
    assert config.base_url == "http://192.168.1.7"


def test_from_env_values() -> None:
    """Every setting can come from the environment."""
    config = WalkupScanConfig.from_env(
        {
            "PRINTER_IP": "http://printer.lan/",
            "WALKUPSCAN_NAME": "scanner-pc",
            "WALKUPSCAN_POLL_TIMEOUT": "300",
            "WALKUPSCAN_RETRY_DELAY": "2.5",
            "WALKUPSCAN_MAX_ATTEMPTS": "4",
        }
    )

    assert config.identity == "scanner-pc"
    assert config.poll_timeout == 300
    assert config.retry_delay == 2.5
    assert config.max_attempts == 4
    assert config.base_url == "http://printer.lan"
    assert config.retry_policy.max_attempts == 4
    assert config.retry_policy.delay_for(1) == 2.5


def test_overrides_win_over_environment() -> None:
    """Explicit values replace the environment, None values do not."""
    config = WalkupScanConfig.from_env(
        {"PRINTER_IP": "192.168.1.7", "WALKUPSCAN_NAME": "env-name"},
        printer_address="10.0.0.2",
        identity=None,
        poll_timeout=60,
    )

    assert config.printer_address == "10.0.0.2"
    assert config.identity == "env-name"
    assert config.poll_timeout == 60


def test_missing_printer_address() -> None:
    """Without a printer there is nothing to watch."""
    with pytest.raises(WalkupScanConfigurationError, match="PRINTER_IP"):
        WalkupScanConfig.from_env({})


@pytest.mark.parametrize(
    ("variable", "value"),
    [
        ("WALKUPSCAN_POLL_TIMEOUT", "soon"),
        ("WALKUPSCAN_POLL_TIMEOUT", "0"),
        ("WALKUPSCAN_RETRY_DELAY", "-1"),
        ("WALKUPSCAN_MAX_ATTEMPTS", "0"),
    ],
)
def test_invalid_values(variable: str, value: str) -> None:
    """Invalid settings are reported as configuration errors."""
    with pytest.raises(WalkupScanConfigurationError):
        WalkupScanConfig.from_env({"PRINTER_IP": "192.168.1.7", variable: value})


def test_override_supplies_missing_printer() -> None:
    """A command line printer address is enough without PRINTER_IP."""
    config = WalkupScanConfig.from_env(
        {"WALKUPSCAN_NAME": "host-1"}, printer_address="10.0.0.2", max_attempts=None
    )

    assert config.base_url == "http://10.0.0.2"
    assert config.max_attempts is None
