"""
Event watch for WalkupScan destinations.

The printer keeps a single event table shared by every registered
destination. Watching for a scan addressed to one destination works as a
conditional long poll:

1. A baseline fetch without timeout gives the current etag. Its events are
   not looked at.
2. Each poll sends the last etag with a timeout. The printer holds the request
   until its table changes or the timeout passes.
3. The etag of every answer replaces the previous one, whatever the answer
   contains. The first scan event is compared to the target destination; the
   watch stops only when they match.

Errors from the client are raised to the caller unchanged. Running watches
can be aborted with EventWatcher.cancel(). Every watch keeps its poll task in
its own WatchSession, so one watcher may run several watches at once.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from .const import DEFAULT_EVENT_TIMEOUT, LOGGER
from .exceptions import WalkupScanConfigurationError, WatchCancelledError

if TYPE_CHECKING:
    from collections.abc import Callable

    from .client import WalkupScanClient
    from .models.event import Event, EventTable


@dataclass(eq=False)
class WatchSession:
    """State carried from one poll to the next within a single watch."""

    target_resource_uri: str
    etag: str | None = None
    polls: int = 0
    cancelled: bool = False
    poll_task: asyncio.Task[EventTable] | None = field(default=None, repr=False)

    @property
    def is_polling(self) -> bool:
        """Return True while this watch has a request in flight."""
        return self.poll_task is not None and not self.poll_task.done()

    def cancel(self) -> None:
        """Abort this watch, including a poll the printer is holding."""
        self.cancelled = True
        if self.is_polling:
            self.poll_task.cancel()


class EventWatcher:
    """Wait for a scan event addressed to a given destination."""

    def __init__(
        self,
        client: WalkupScanClient,
        logger: Any = LOGGER,
        poll_timeout: int = DEFAULT_EVENT_TIMEOUT,
        on_poll: Callable[[WatchSession, EventTable], None] | None = None,
    ) -> None:
        """
        Initialize an EventWatcher.

        Arguments:
            client: The client used to fetch the event table.
            logger: The logger to use.
            poll_timeout: Seconds the printer may hold each poll.
            on_poll: Called with the session and table after every poll.

        """
        if poll_timeout <= 0:
            msg = f"Poll timeout must be positive, got {poll_timeout}"
            raise WalkupScanConfigurationError(msg)
        self.client = client
        self.logger = logger
        self.poll_timeout = poll_timeout
        self.on_poll = on_poll
        self._sessions: list[WatchSession] = []

    @property
    def is_polling(self) -> bool:
        """Return True while any watch has a request to the printer in flight."""
        return any(session.is_polling for session in self._sessions)

    def cancel(self) -> None:
        """Abort every running watch, including polls the printer is holding."""
        for session in self._sessions:
            session.cancel()

    async def watch(self, target_resource_uri: str) -> Event:
        """
        Block until the printer reports a scan event for the target destination.

        Arguments:
            target_resource_uri: The resource URI of the destination to wait for.

        Returns:
            The matching scan event.

        Raises:
            WatchCancelledError: If cancel() was called during the watch.
            TransportError, UnexpectedStatusError, DecodeError: From the client.

        """
        session = WatchSession(target_resource_uri)
        self._sessions.append(session)
        try:
            return await self._watch(session)
        finally:
            self._sessions.remove(session)

    async def _watch(self, session: WatchSession) -> Event:
        target_resource_uri = session.target_resource_uri
        baseline = await self._fetch(session, etag=None, timeout=0)
        session.etag = baseline.etag
        self.logger.debug(
            f"Watching events for {target_resource_uri} from etag {session.etag}"
        )

        while True:
            table = await self._fetch(
                session, etag=session.etag, timeout=self.poll_timeout
            )
            session.polls += 1
            if table.etag is not None:
                session.etag = table.etag
            if self.on_poll is not None:
                self.on_poll(session, table)

            scan_event = table.first_scan_event()
            if scan_event is None:
                self.logger.debug(f"No scan event right now: {session.etag}")
                continue
            if not scan_event.is_for(target_resource_uri):
                self.logger.debug(
                    f"Scan event for another destination {scan_event.resource_uri}: "
                    f"{session.etag}"
                )
                continue

            self.logger.info(
                f"Scan event for {target_resource_uri} after {session.polls} poll(s)"
            )
            return scan_event

    async def _fetch(
        self, session: WatchSession, etag: str | None, timeout: int
    ) -> EventTable:
        """Fetch the event table as a task that cancel() can abort."""
        if session.cancelled:
            msg = "Event watch cancelled"
            raise WatchCancelledError(msg)
        session.poll_task = asyncio.create_task(
            self.client.fetch_event_table(etag=etag, timeout=timeout)
        )
        try:
            return await session.poll_task
        except asyncio.CancelledError:
            if session.cancelled:
                msg = "Event watch cancelled"
                raise WatchCancelledError(msg) from None
            raise
        finally:
            session.poll_task = None
