"""Register this host, wait for its scan event and resolve the destination."""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING, Any

from .const import DEFAULT_EVENT_TIMEOUT, LOGGER
from .exceptions import WalkupScanError, WatchCancelledError
from .registry import DestinationRegistry
from .retry import RetryPolicy
from .watcher import EventWatcher

if TYPE_CHECKING:
    from collections.abc import Callable

    from .client import WalkupScanClient
    from .models.destination import WalkupScanDestination
    from .models.event import EventTable
    from .watcher import WatchSession


class WalkupScanOrchestrator:
    """
    Run the destination watch once, from registration to resolution.

    1. Resolve (or register) the destination for `identity`, retrying
       according to `retry_policy` on failure.
    2. Watch the event table until a scan event for it arrives.
    3. Fetch the destination the event refers to and hand it to
       `on_destination`.

    Only step 1 is retried. Errors during the watch or the final fetch are
    raised to the caller. cancel() stops the run at any step with
    WatchCancelledError, and a cancelled orchestrator stays cancelled.
    """

    def __init__(  # noqa: PLR0913
        self,
        client: WalkupScanClient,
        identity: str,
        *,
        logger: Any = LOGGER,
        retry_policy: RetryPolicy | None = None,
        poll_timeout: int = DEFAULT_EVENT_TIMEOUT,
        on_destination: Callable[[WalkupScanDestination], None] | None = None,
        on_poll: Callable[[WatchSession, EventTable], None] | None = None,
    ) -> None:
        """Initialize the orchestrator for one printer and one identity."""
        self.client = client
        self.identity = identity
        self.logger = logger
        self.retry_policy = retry_policy or RetryPolicy.fixed()
        self.on_destination = on_destination
        self.registry = DestinationRegistry(client, logger=logger)
        self.watcher = EventWatcher(
            client, logger=logger, poll_timeout=poll_timeout, on_poll=on_poll
        )
        self._cancelled = False
        self._backoff_task: asyncio.Task[None] | None = None

    def _raise_if_cancelled(self) -> None:
        if self._cancelled:
            msg = f"WalkupScan run for {self.identity} cancelled"
            raise WatchCancelledError(msg)

    async def _backoff(self, delay: float) -> None:
        """Sleep before the next attempt, as a task that cancel() can abort."""
        self._raise_if_cancelled()
        self._backoff_task = asyncio.create_task(asyncio.sleep(delay))
        try:
            await self._backoff_task
        except asyncio.CancelledError:
            if self._cancelled:
                msg = f"WalkupScan run for {self.identity} cancelled"
                raise WatchCancelledError(msg) from None
            raise
        finally:
            self._backoff_task = None

    async def resolve_destination(self) -> str:
        """Resolve the own destination, retrying failures per the retry policy."""
        attempt = 0
        while True:
            self._raise_if_cancelled()
            try:
                return await self.registry.resolve_own_destination(self.identity)
            except WalkupScanError as e:
                attempt += 1
                delay = self.retry_policy.delay_for(attempt)
                if delay is None:
                    self.logger.error(
                        f"Giving up on destination {self.identity} "
                        f"after {attempt} attempt(s): {e}"
                    )
                    raise
                self.logger.warning(
                    f"Resolving destination {self.identity} failed ({e}), "
                    f"retrying in {delay}s"
                )
                await self._backoff(delay)

    async def run(self) -> WalkupScanDestination:
        """
        Wait for one scan addressed to this host.

        Returns:
            The destination the scan event refers to.

        """
        resource_uri = await self.resolve_destination()
        self._raise_if_cancelled()
        self.logger.info(f"Waiting for scan events on {resource_uri}")
        event = await self.watcher.watch(resource_uri)
        destination = await self.client.fetch_destination(event.resource_uri)
        if self.on_destination is not None:
            self.on_destination(destination)
        else:
            self.logger.info(f"Scan requested for destination {destination}")
        return destination

    def cancel(self) -> None:
        """Abort the run, whether it is resolving, backing off or watching."""
        self._cancelled = True
        if self._backoff_task is not None and not self._backoff_task.done():
            self._backoff_task.cancel()
        self.watcher.cancel()
