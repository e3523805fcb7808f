"""In-memory snapshot of the campaign document."""
from __future__ import annotations

import copy
import threading

from campaign_api.models import Document


class SnapshotCache:
    """
    Last-loaded document plus the time it was captured.

    The snapshot is a private deep copy; `get` hands out copies so callers
    cannot change what later reads see.

    Every clear bumps a generation counter. A loader captures the generation
    before reading the store and passes it to `set`; if a write cleared the
    cache in the meantime the load is stale and is not installed.
    """

    __slots__ = ("ttl", "_document", "_captured_at", "_generation", "_lock")

    def __init__(self, ttl: float):
        self.ttl = ttl
        self._document: Document | None = None
        self._captured_at: float | None = None
        self._generation = 0
        self._lock = threading.Lock()

    @property
    def generation(self) -> int:
        with self._lock:
            return self._generation

    @property
    def exists(self) -> bool:
        with self._lock:
            return self._document is not None

    def get(self, now: float) -> Document | None:
        """Return the snapshot if it is younger than the TTL."""
        with self._lock:
            if self._document is None or self._captured_at is None:
                return None
            if now - self._captured_at < self.ttl:
                return copy.deepcopy(self._document)
            return None

    def set(self, document: Document, now: float, generation: int) -> bool:
        """Install a snapshot unless a write happened since `generation`."""
        with self._lock:
            if generation != self._generation:
                return False
            self._document = copy.deepcopy(document)
            self._captured_at = now
            return True

    def clear(self) -> None:
        with self._lock:
            self._document = None
            self._captured_at = None
            self._generation += 1

    def age(self, now: float) -> float | None:
        """Seconds since the snapshot was captured, None if there is none."""
        with self._lock:
            if self._document is None or self._captured_at is None:
                return None
            return now - self._captured_at
