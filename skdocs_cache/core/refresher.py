"""
skdocs_cache/core/refresher.py
═══════════════════════════════════════════════════════════════════════════════
One-shot cache warmer with strict guarantees:

  1. ONE task per Refresher (second start() returns the running task)
  2. Fetch → write → stop. The cache is never refreshed after success
  3. Failed fetch → log, wait RETRY_DELAY_S (fixed, no jitter), retry forever
  4. Nothing that goes wrong upstream ever reaches a request handler

Lifecycle:
  pending ──start()──▶ running ──fetch ok──▶ succeeded
                          │
                          └──stop() / shutdown──▶ cancelled
═══════════════════════════════════════════════════════════════════════════════
"""

import asyncio
import enum
import logging
from typing import Any, Awaitable, Callable, Optional

from skdocs_cache.core.cache import CacheCell
from skdocs_cache.core.config import RETRY_DELAY_S, UPSTREAM_URL
from skdocs_cache.core.http_client import UpstreamError, fetch_json

log = logging.getLogger("refresher")

Fetcher = Callable[[str], Awaitable[Any]]
Sleeper = Callable[[float], Awaitable[Any]]


class RefresherState(str, enum.Enum):
    PENDING   = "pending"
    RUNNING   = "running"
    SUCCEEDED = "succeeded"
    CANCELLED = "cancelled"


class Refresher:
    def __init__(
        self,
        cache: CacheCell,
        url: str = UPSTREAM_URL,
        fetch: Fetcher = fetch_json,
        sleep: Sleeper = asyncio.sleep,
        retry_delay: float = RETRY_DELAY_S,
    ) -> None:
        self.cache       = cache
        self.url         = url
        self.retry_delay = retry_delay
        self._fetch      = fetch
        self._sleep      = sleep
        self._task: Optional[asyncio.Task] = None

        self.state      = RefresherState.PENDING
        self.attempts   = 0
        self.last_error: Optional[str] = None

    @property
    def done(self) -> bool:
        return self.state in (RefresherState.SUCCEEDED, RefresherState.CANCELLED)

    async def _attempt(self) -> bool:
        self.attempts += 1
        try:
            doc = await self._fetch(self.url)
        except UpstreamError as ex:
            self.last_error = str(ex)
            log.warning(f"Fetch attempt {self.attempts} failed: {ex}")
            return False
        except Exception as ex:
            self.last_error = repr(ex)
            log.exception(f"Fetch attempt {self.attempts} crashed: {ex!r}")
            return False

        self.cache.write(doc)
        self.last_error = None
        log.info(f"Cache populated after {self.attempts} attempt(s)")
        return True

    async def run(self) -> RefresherState:
        """
        Loop until one fetch succeeds. Returns the terminal state.
        Cancellation (shutdown) moves the refresher to CANCELLED and re-raises.
        """
        self.state = RefresherState.RUNNING
        log.info(f"Refresher started → {self.url}")
        try:
            while not await self._attempt():
                log.info(f"Retrying in {self.retry_delay:g}s...")
                await self._sleep(self.retry_delay)
        except asyncio.CancelledError:
            self.state = RefresherState.CANCELLED
            log.info(f"Refresher cancelled after {self.attempts} attempt(s)")
            raise

        self.state = RefresherState.SUCCEEDED
        return self.state

    def start(self) -> asyncio.Task:
        """Schedule run() on the current loop. Never starts a second task."""
        if self._task is not None:
            log.warning("Refresher already started — ignoring duplicate start")
            return self._task
        self._task = asyncio.create_task(self.run(), name="skdocs-refresher")
        return self._task

    async def stop(self) -> None:
        """Cancel the task if it has not reached a terminal state yet."""
        task = self._task
        if task is None or task.done():
            return
        task.cancel()
        try:
            await task
        except asyncio.CancelledError:
            pass
        # cancelled before run() got its first step
        if not self.done:
            self.state = RefresherState.CANCELLED

    def status(self) -> dict:
        """Metadata only — safe to expose in /health."""
        return {
            "state":      self.state.value,
            "attempts":   self.attempts,
            "last_error": self.last_error,
        }
