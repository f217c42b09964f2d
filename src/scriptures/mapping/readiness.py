"""Wait for the mapping widget with capped exponential backoff.

The widget loads independently of chapter content. Each failed readiness
check schedules another one after ``delay_ms`` and doubles the delay; once
the delay passes ``ceiling_ms`` polling stops for good.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, replace
from typing import Any, Protocol

logger = logging.getLogger(__name__)

INITIAL_DELAY_MS = 500
CEILING_MS = 5000


@dataclass(frozen=True)
class RetryState:
    delay_ms: int = INITIAL_DELAY_MS
    ceiling_ms: int = CEILING_MS

    def __post_init__(self):
        # Doubling from zero (or below) would never pass the ceiling
        if not self.delay_ms > 0:
            raise ValueError(f"Invalid delay_ms={self.delay_ms!r}. Must be positive.")

    @property
    def exhausted(self) -> bool:
        return self.delay_ms > self.ceiling_ms

    def next(self) -> "RetryState":
        return replace(self, delay_ms=self.delay_ms * 2)


class Scheduler(Protocol):
    """Anything with asyncio's ``call_later`` shape (an event loop qualifies)."""

    def call_later(self, delay: float, callback: Callable[..., Any], *args: Any) -> Any: ...


class ReadinessPoller:
    """Runs a callback once ``is_ready()`` holds, retrying on a schedule.

    Each ``poll()`` starts a fresh chain from *initial* and cancels any
    attempt still pending from the previous chain.
    """

    def __init__(
        self,
        is_ready: Callable[[], bool],
        scheduler: Scheduler | Callable[[], Scheduler],
        initial: RetryState | None = None,
    ):
        self._is_ready = is_ready
        self._scheduler = scheduler
        self.initial = initial or RetryState()
        self._pending = None

    def _get_scheduler(self) -> Scheduler:
        # A factory lets callers bind to the running event loop lazily
        if hasattr(self._scheduler, "call_later"):
            return self._scheduler
        return self._scheduler()

    def poll(self, on_ready: Callable[[], None]) -> bool:
        """Run *on_ready* now if possible, else schedule retries.

        Returns True if *on_ready* ran synchronously.
        """
        self.cancel()
        return self._attempt(on_ready, self.initial)

    def cancel(self) -> None:
        if self._pending is not None:
            self._pending.cancel()
            self._pending = None

    @property
    def pending(self) -> bool:
        return self._pending is not None

    def _attempt(self, on_ready: Callable[[], None], state: RetryState) -> bool:
        self._pending = None

        if self._is_ready():
            on_ready()
            return True

        if state.exhausted:
            logger.info(
                "Map widget not ready after backoff reached %d ms; giving up",
                state.ceiling_ms,
            )
            return False

        logger.debug("Map widget not ready, retrying in %d ms", state.delay_ms)
        self._pending = self._get_scheduler().call_later(
            state.delay_ms / 1000, self._attempt, on_ready, state.next(),
        )
        return False
