"""
XML codec for the WalkupScan and event management resources.

Each wire shape is decoded into its model explicitly: the root element must
be the expected one and every required field must be present, otherwise a
DecodeError is raised. Untrusted device responses are parsed with defusedxml.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from typing import TYPE_CHECKING

import defusedxml
import defusedxml.ElementTree as dET

from .const import (
    NS_DICTIONARIES,
    NS_DICTIONARIES_2009,
    NS_EVENTS,
    NS_WALKUPSCAN,
    NS_XSI,
    SCHEMA_LOCATION,
)
from .exceptions import DecodeError
from .models.destination import RegistrationRequest, WalkupScanDestination
from .models.event import Event, EventTable

if TYPE_CHECKING:
    from xml.etree.ElementTree import Element

ET.register_namespace("wus", NS_WALKUPSCAN)
ET.register_namespace("dd", NS_DICTIONARIES)
ET.register_namespace("dd3", NS_DICTIONARIES_2009)
ET.register_namespace("ev", NS_EVENTS)
ET.register_namespace("xsi", NS_XSI)


def _qname(namespace: str, tag: str) -> str:
    return f"{{{namespace}}}{tag}"


WUS_DESTINATIONS = _qname(NS_WALKUPSCAN, "WalkupScanDestinations")
WUS_DESTINATION = _qname(NS_WALKUPSCAN, "WalkupScanDestination")
WUS_LINK_TYPE = _qname(NS_WALKUPSCAN, "LinkType")
DD_NAME = _qname(NS_DICTIONARIES, "Name")
DD_RESOURCE_URI = _qname(NS_DICTIONARIES, "ResourceURI")
DD_RESOURCE_TYPE = _qname(NS_DICTIONARIES, "ResourceType")
DD_HOSTNAME = _qname(NS_DICTIONARIES, "Hostname")
DD_CATEGORY = _qname(NS_DICTIONARIES, "UnqualifiedEventCategory")
DD_AGING_STAMP = _qname(NS_DICTIONARIES, "AgingStamp")
DD3_HOSTNAME = _qname(NS_DICTIONARIES_2009, "Hostname")
EV_EVENT_TABLE = _qname(NS_EVENTS, "EventTable")
EV_EVENT = _qname(NS_EVENTS, "Event")
EV_PAYLOAD = _qname(NS_EVENTS, "Payload")


def _parse(body: bytes | str, root_tag: str) -> Element:
    """Parse a document and check its root element."""
    try:
        root = dET.fromstring(body)
    except (ET.ParseError, defusedxml.DefusedXmlException) as e:
        msg = f"Malformed XML document: {e}"
        raise DecodeError(msg) from e
    if root.tag != root_tag:
        msg = f"Expected root element {root_tag}, got {root.tag}"
        raise DecodeError(msg)
    return root


def _optional_text(element: Element, *tags: str) -> str | None:
    for tag in tags:
        child = element.find(tag)
        if child is not None and child.text is not None:
            return child.text.strip()
    return None


def _required_text(element: Element, tag: str) -> str:
    text = _optional_text(element, tag)
    if not text:
        msg = f"Missing required field {tag} in {element.tag}"
        raise DecodeError(msg)
    return text


def _destination_from_element(element: Element) -> WalkupScanDestination:
    return WalkupScanDestination(
        name=_required_text(element, DD_NAME),
        resource_uri=_required_text(element, DD_RESOURCE_URI),
        hostname=_optional_text(element, DD3_HOSTNAME, DD_HOSTNAME),
        link_type=_optional_text(element, WUS_LINK_TYPE),
    )


def _event_from_element(element: Element) -> Event:
    payload = element.find(EV_PAYLOAD)
    resource_uri = resource_type = None
    if payload is not None:
        resource_uri = _optional_text(payload, DD_RESOURCE_URI)
        resource_type = _optional_text(payload, DD_RESOURCE_TYPE)
    return Event(
        category=_required_text(element, DD_CATEGORY),
        resource_uri=resource_uri,
        resource_type=resource_type,
        aging_stamp=_optional_text(element, DD_AGING_STAMP),
    )


def decode_destinations(body: bytes | str) -> list[WalkupScanDestination]:
    """Decode a WalkupScanDestinations document; an empty registry is allowed."""
    root = _parse(body, WUS_DESTINATIONS)
    return [_destination_from_element(el) for el in root.findall(WUS_DESTINATION)]


def decode_destination(body: bytes | str) -> WalkupScanDestination:
    """Decode a single WalkupScanDestination document."""
    return _destination_from_element(_parse(body, WUS_DESTINATION))


def decode_event_table(body: bytes | str, etag: str | None = None) -> EventTable:
    """
    Decode an EventTable document.

    Arguments:
        body: The response body.
        etag: The ETag header of the response the body came from.

    """
    root = _parse(body, EV_EVENT_TABLE)
    events = tuple(_event_from_element(el) for el in root.findall(EV_EVENT))
    return EventTable(events=events, etag=etag)


def encode_registration(request: RegistrationRequest) -> bytes:
    """Encode a registration request as a WalkupScanDestination document."""
    root = ET.Element(
        WUS_DESTINATION, {_qname(NS_XSI, "schemaLocation"): SCHEMA_LOCATION}
    )
    ET.SubElement(root, DD3_HOSTNAME).text = request.hostname
    ET.SubElement(root, DD_NAME).text = request.name
    ET.SubElement(root, WUS_LINK_TYPE).text = request.link_type
    return ET.tostring(
        root,
        encoding="UTF-8",
        xml_declaration=True,
        default_namespace=NS_WALKUPSCAN,
    )


def decode_registration(body: bytes | str) -> RegistrationRequest:
    """Decode a WalkupScanDestination document in its registration form."""
    root = _parse(body, WUS_DESTINATION)
    return RegistrationRequest(
        name=_required_text(root, DD_NAME),
        hostname=_required_text(root, DD3_HOSTNAME),
        link_type=_required_text(root, WUS_LINK_TYPE),
    )
