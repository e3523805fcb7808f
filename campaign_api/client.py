"""Campaign API Client, for automation scripts pushing report updates."""
from __future__ import annotations

import logging
from typing import Any
from urllib.parse import quote

import httpx

from campaign_api.config import get_settings

logger = logging.getLogger(__name__)


def _report_path(report_id: str) -> str:
    return f"/campaigns/reports/{quote(report_id, safe='')}"


class CampaignClient:
    """Async client for the campaign API."""

    __slots__ = ("_base_url", "_timeout", "_transport")

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._base_url = (base_url or get_settings().api_url).rstrip("/")
        self._timeout = timeout
        self._transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self._base_url,
            timeout=self._timeout,
            transport=self._transport,
        )

    async def get_campaigns(self) -> dict:
        """Fetch the whole campaign document."""
        async with self._client() as client:
            response = await client.get("/campaigns")
            response.raise_for_status()
            return response.json()

    async def get_report(self, report_id: str) -> dict | None:
        """Fetch one report, None if it does not exist."""
        async with self._client() as client:
            response = await client.get(_report_path(report_id))
            if response.status_code == 404:
                return None
            response.raise_for_status()
            return response.json()

    async def push_document(self, document: dict[str, Any]) -> dict:
        """Replace all campaign data."""
        async with self._client() as client:
            response = await client.post("/campaigns/update", json=document)
            response.raise_for_status()
            result = response.json()
            logger.info(f"Pushed {result.get('reports', 0)} reports")
            return result

    async def push_report(self, report_id: str, report: dict[str, Any]) -> dict:
        """Insert or replace a single report."""
        async with self._client() as client:
            response = await client.post(f"{_report_path(report_id)}/update", json=report)
            response.raise_for_status()
            return response.json()

    async def refresh(self) -> dict:
        """Force the server to reload from disk."""
        async with self._client() as client:
            response = await client.post("/campaigns/refresh")
            response.raise_for_status()
            return response.json()

    async def health(self) -> dict:
        async with self._client() as client:
            response = await client.get("/health")
            response.raise_for_status()
            return response.json()
