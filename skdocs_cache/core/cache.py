"""
skdocs_cache/core/cache.py
═══════════════════════════════════════════════════════════════════════════
Single-slot in-memory cache.
  • Only the refresher calls write()
  • Only routers call read()
  • Readers share the lock, the writer holds it alone → never a torn read
  • The slot goes empty → filled once and stays that way
═══════════════════════════════════════════════════════════════════════════
"""

import logging
import threading
import time
from typing import Any, Optional

log = logging.getLogger("cache")


class _ReadWriteLock:
    """Many readers or one writer. Waiting writers block new readers."""

    def __init__(self) -> None:
        self._cond    = threading.Condition(threading.Lock())
        self._readers = 0
        self._writing = False
        self._waiting_writers = 0

    def acquire_read(self) -> None:
        with self._cond:
            while self._writing or self._waiting_writers:
                self._cond.wait()
            self._readers += 1

    def release_read(self) -> None:
        with self._cond:
            self._readers -= 1
            if not self._readers:
                self._cond.notify_all()

    def acquire_write(self) -> None:
        with self._cond:
            self._waiting_writers += 1
            try:
                while self._writing or self._readers:
                    self._cond.wait()
            finally:
                self._waiting_writers -= 1
            self._writing = True

    def release_write(self) -> None:
        with self._cond:
            self._writing = False
            self._cond.notify_all()


class CacheCell:
    """Holds the upstream document. Created empty, written at most once."""

    def __init__(self) -> None:
        self._lock = _ReadWriteLock()
        self._doc: Optional[Any] = None
        self._ready = False
        self._ts: Optional[float] = None

    def snapshot(self) -> tuple[bool, Any]:
        """(ready, document) taken under one lock. A ready cell may hold None (JSON null)."""
        self._lock.acquire_read()
        try:
            return self._ready, self._doc
        finally:
            self._lock.release_read()

    def read(self) -> Optional[Any]:
        """Return the cached document, or None if nothing was fetched yet."""
        return self.snapshot()[1]

    def write(self, doc: Any) -> bool:
        """Store the document. Returns False if the cell is already filled."""
        self._lock.acquire_write()
        try:
            if self._ready:
                log.warning("Cache already populated — ignoring second write")
                return False
            self._doc   = doc
            self._ts    = time.time()
            self._ready = True
            return True
        finally:
            self._lock.release_write()

    @property
    def is_ready(self) -> bool:
        self._lock.acquire_read()
        try:
            return self._ready
        finally:
            self._lock.release_read()

    def age_s(self) -> Optional[float]:
        """Seconds since the document was stored, or None."""
        self._lock.acquire_read()
        try:
            return round(time.time() - self._ts, 1) if self._ts is not None else None
        finally:
            self._lock.release_read()

    def summary(self) -> dict:
        """Metadata only — safe to expose in /health."""
        self._lock.acquire_read()
        try:
            ready, doc, ts = self._ready, self._doc, self._ts
        finally:
            self._lock.release_read()
        results = doc.get("results") if isinstance(doc, dict) else None
        return {
            "ready":        ready,
            "age_s":        round(time.time() - ts, 1) if ts is not None else None,
            "result_count": len(results) if isinstance(results, list) else None,
        }
