"""Retry policies for recovering from startup failures."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from .const import DEFAULT_RETRY_DELAY

if TYPE_CHECKING:
    from collections.abc import Callable


@dataclass(frozen=True)
class RetryPolicy:
    """
    How often, and after how long, a failed operation is tried again.

    Attributes:
        backoff: Maps the number of failed attempts so far (1, 2, ...) to the
            delay in seconds before the next one.
        max_attempts: Total number of attempts allowed, or None for no limit.

    """

    backoff: Callable[[int], float]
    max_attempts: int | None = None

    @classmethod
    def fixed(
        cls, delay: float = DEFAULT_RETRY_DELAY, max_attempts: int | None = None
    ) -> RetryPolicy:
        """Retry after the same delay every time."""
        return cls(backoff=lambda _attempt: delay, max_attempts=max_attempts)

    @classmethod
    def exponential(
        cls,
        base: float = DEFAULT_RETRY_DELAY,
        factor: float = 2,
        maximum: float = 60,
        max_attempts: int | None = None,
    ) -> RetryPolicy:
        """Retry after base, base * factor, base * factor**2 ... capped at maximum."""
        return cls(
            backoff=lambda attempt: min(maximum, base * factor ** (attempt - 1)),
            max_attempts=max_attempts,
        )

    def delay_for(self, attempt: int) -> float | None:
        """
        Return the delay before the attempt following `attempt` failures.

        Returns:
            The delay in seconds, or None once no attempts are left.

        """
        if self.max_attempts is not None and attempt >= self.max_attempts:
            return None
        return max(0.0, self.backoff(attempt))
