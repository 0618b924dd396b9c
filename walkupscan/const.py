"""Constants for walkupscan."""

import os
from logging import Logger, getLogger

DEBUG = os.environ.get("DEBUG", "false").lower() == "true"
LOGGER: Logger = getLogger(__package__)

# Device resources
DESTINATIONS_PATH = "/WalkupScan/WalkupScanDestinations"
EVENT_TABLE_PATH = "/EventMgmt/EventTable"

# XML namespaces
NS_WALKUPSCAN = "http://www.hp.com/schemas/imaging/con/rest/walkupscan/2009/09/21"
NS_DICTIONARIES = "http://www.hp.com/schemas/imaging/con/dictionaries/1.0/"
NS_DICTIONARIES_2009 = "http://www.hp.com/schemas/imaging/con/dictionaries/2009/04/06"
NS_EVENTS = "http://www.hp.com/schemas/imaging/con/ledm/events/2007/09/16"
NS_XSI = "http://www.w3.org/2001/XMLSchema-instance"

SCHEMA_LOCATION = f"{NS_WALKUPSCAN} WalkupScanDestinations.xsd"

# Event categories
SCAN_EVENT_CATEGORY = "ScanEvent"
LINK_TYPE_NETWORK = "Network"

# Long polling
DEFAULT_EVENT_TIMEOUT = 1200  # seconds the device may hold an event request
LONG_POLL_DEADLINE_MARGIN = 30  # seconds on top of the device hold time
DEFAULT_REQUEST_TIMEOUT = 10

# Startup retry
DEFAULT_RETRY_DELAY = 1.0

# Environment variables
ENV_PRINTER_IP = "PRINTER_IP"
ENV_NAME = "WALKUPSCAN_NAME"
ENV_POLL_TIMEOUT = "WALKUPSCAN_POLL_TIMEOUT"
ENV_RETRY_DELAY = "WALKUPSCAN_RETRY_DELAY"
ENV_MAX_ATTEMPTS = "WALKUPSCAN_MAX_ATTEMPTS"
