"""
Cache and mutation coordinator for the campaign document.

Reads are served from an in-memory snapshot while it is younger than the
TTL and reloaded from disk otherwise. Every successful write clears the
snapshot, so the next read after a write always goes to disk.

Writes are serialized with a single lock, so two concurrent upserts cannot
interleave their load-modify-save steps. Separate processes sharing the
data file are still last-write-wins.
"""
from __future__ import annotations

import asyncio
import logging
import time
from functools import lru_cache
from typing import Callable

from campaign_api.config import get_settings
from campaign_api.constants import REPORT_ID_FIELD
from campaign_api.errors import NotFoundError, ValidationError
from campaign_api.models import Document, Report, UpsertOutcome
from campaign_api.storage.cache import SnapshotCache
from campaign_api.storage.persistence import DocumentStore, is_document

logger = logging.getLogger(__name__)


def find_report_index(document: Document, report_id: str) -> int | None:
    """Index of the first report with a matching id."""
    for i, report in enumerate(document["reports"]):
        if isinstance(report, dict) and report.get(REPORT_ID_FIELD) == report_id:
            return i
    return None


class CampaignCoordinator:
    """Owns the snapshot cache and routes every read and write through the store."""

    __slots__ = ("_store", "_cache", "_clock", "_write_lock")

    def __init__(
        self,
        store: DocumentStore,
        ttl: float = 300.0,
        clock: Callable[[], float] = time.monotonic,
    ):
        self._store = store
        self._cache = SnapshotCache(ttl)
        self._clock = clock
        self._write_lock = asyncio.Lock()

    @property
    def store(self) -> DocumentStore:
        return self._store

    async def get_all(self) -> Document:
        """Return the cached document if fresh, otherwise reload it."""
        if (document := self._cache.get(self._clock())) is not None:
            logger.info("Returning cached campaign data")
            return document
        return await self._reload()

    async def refresh(self) -> Document:
        """Reload from disk regardless of cache state."""
        logger.info("Refreshing campaign cache")
        return await self._reload()

    async def get_report(self, report_id: str) -> Report:
        """Look up one report straight from disk. Not cached."""
        document = await asyncio.to_thread(self._store.load)
        index = find_report_index(document, report_id)
        if index is None:
            raise NotFoundError(report_id)
        return document["reports"][index]

    async def replace_all(self, document) -> Document:
        """Persist a whole new document and invalidate the cache."""
        if not is_document(document):
            raise ValidationError("Invalid data structure")

        async with self._write_lock:
            await asyncio.to_thread(self._store.save, document)
            self._cache.clear()

        logger.info(f"Updated {len(document['reports'])} reports")
        return document

    async def upsert_report(self, report_id: str, report: Report) -> UpsertOutcome:
        """Replace the first report with `report_id` in place, or append `report`."""
        async with self._write_lock:
            document = await asyncio.to_thread(self._store.load)
            index = find_report_index(document, report_id)
            if index is None:
                document["reports"].append(report)
                outcome = UpsertOutcome.INSERTED
            else:
                document["reports"][index] = report
                outcome = UpsertOutcome.UPDATED

            await asyncio.to_thread(self._store.save, document)
            self._cache.clear()

        logger.info(f"Report {report_id} {outcome.value}")
        return outcome

    def cache_status(self) -> dict:
        """Snapshot presence and age in milliseconds, for health checks."""
        age = self._cache.age(self._clock())
        return {
            "exists": age is not None,
            "age": int(age * 1000) if age is not None else None,
        }

    async def _reload(self) -> Document:
        generation = self._cache.generation
        document = await asyncio.to_thread(self._store.load)
        if self._cache.set(document, self._clock(), generation):
            logger.info(f"Loaded {len(document['reports'])} reports from disk")
        else:
            logger.info("Campaign data changed during reload; snapshot not cached")
        return document


@lru_cache(maxsize=1)
def get_coordinator() -> CampaignCoordinator:
    """Get or create the process-wide coordinator."""
    settings = get_settings()
    return CampaignCoordinator(
        DocumentStore(settings.data_path),
        ttl=settings.cache_ttl_seconds,
    )
