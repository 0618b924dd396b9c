"""Shared pytest fixtures."""

import pytest

DESTINATIONS_XML = """<?xml version="1.0" encoding="UTF-8"?>
<wus:WalkupScanDestinations
    xmlns:wus="http://www.hp.com/schemas/imaging/con/rest/walkupscan/2009/09/21"
    xmlns:dd="http://www.hp.com/schemas/imaging/con/dictionaries/1.0/"
    xmlns:dd3="http://www.hp.com/schemas/imaging/con/dictionaries/2009/04/06">
  <wus:WalkupScanDestination>
    <dd:ResourceURI>/WalkupScan/WalkupScanDestinations/1</dd:ResourceURI>
    <dd:Name>office-pc</dd:Name>
    <dd3:Hostname>office-pc</dd3:Hostname>
    <wus:LinkType>Network</wus:LinkType>
  </wus:WalkupScanDestination>
  <wus:WalkupScanDestination>
    <dd:ResourceURI>/WalkupScan/WalkupScanDestinations/3</dd:ResourceURI>
    <dd:Name>host-1</dd:Name>
    <dd3:Hostname>host-1.local</dd3:Hostname>
    <wus:LinkType>Network</wus:LinkType>
  </wus:WalkupScanDestination>
</wus:WalkupScanDestinations>
"""

EMPTY_DESTINATIONS_XML = """<?xml version="1.0" encoding="UTF-8"?>
<wus:WalkupScanDestinations
    xmlns:wus="http://www.hp.com/schemas/imaging/con/rest/walkupscan/2009/09/21"/>
"""

DESTINATION_XML = """<?xml version="1.0" encoding="UTF-8"?>
<wus:WalkupScanDestination
    xmlns:wus="http://www.hp.com/schemas/imaging/con/rest/walkupscan/2009/09/21"
    xmlns:dd="http://www.hp.com/schemas/imaging/con/dictionaries/1.0/"
    xmlns:dd3="http://www.hp.com/schemas/imaging/con/dictionaries/2009/04/06">
  <dd:ResourceURI>/WalkupScan/WalkupScanDestinations/3</dd:ResourceURI>
  <dd:Name>host-1</dd:Name>
  <dd3:Hostname>host-1.local</dd3:Hostname>
  <wus:LinkType>Network</wus:LinkType>
</wus:WalkupScanDestination>
"""

EVENT_TABLE_XML = """<?xml version="1.0" encoding="UTF-8"?>
<ev:EventTable
    xmlns:ev="http://www.hp.com/schemas/imaging/con/ledm/events/2007/09/16"
    xmlns:dd="http://www.hp.com/schemas/imaging/con/dictionaries/1.0/">
  <ev:Event>
    <dd:UnqualifiedEventCategory>PoweredOn</dd:UnqualifiedEventCategory>
    <dd:AgingStamp>1-1</dd:AgingStamp>
  </ev:Event>
  <ev:Event>
    <dd:UnqualifiedEventCategory>ScanEvent</dd:UnqualifiedEventCategory>
    <dd:AgingStamp>1-7</dd:AgingStamp>
    <ev:Payload>
      <dd:ResourceURI>/WalkupScan/WalkupScanDestinations/3</dd:ResourceURI>
      <dd:ResourceType>wus:WalkupScanDestination</dd:ResourceType>
    </ev:Payload>
  </ev:Event>
</ev:EventTable>
"""

EMPTY_EVENT_TABLE_XML = """<?xml version="1.0" encoding="UTF-8"?>
<ev:EventTable
    xmlns:ev="http://www.hp.com/schemas/imaging/con/ledm/events/2007/09/16"/>
"""


@pytest.fixture
def anyio_backend() -> str:
    """Run anyio-marked tests on asyncio only."""
    return "asyncio"


@pytest.fixture
def destinations_xml() -> str:
    """A destination list with two registered hosts."""
    return DESTINATIONS_XML


@pytest.fixture
def empty_destinations_xml() -> str:
    """A destination list with no registered hosts."""
    return EMPTY_DESTINATIONS_XML


@pytest.fixture
def destination_xml() -> str:
    """A single destination document."""
    return DESTINATION_XML


@pytest.fixture
def event_table_xml() -> str:
    """An event table holding one unrelated event and one scan event."""
    return EVENT_TABLE_XML


@pytest.fixture
def empty_event_table_xml() -> str:
    """An event table without events."""
    return EMPTY_EVENT_TABLE_XML
