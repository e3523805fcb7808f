"""Health and API info endpoints."""
import time
from datetime import datetime, timezone

from fastapi import APIRouter

from campaign_api.constants import API_NAME, API_VERSION, ENDPOINTS
from campaign_api.models import HealthResponse
from campaign_api.state import STARTED_AT
from campaign_api.storage import get_coordinator

router = APIRouter(tags=["system"])


@router.get("/health", response_model=HealthResponse)
async def health():
    """Health check endpoint."""
    return HealthResponse(
        uptime=time.monotonic() - STARTED_AT,
        timestamp=datetime.now(timezone.utc).isoformat(),
        cache=get_coordinator().cache_status(),
    )


@router.get("/")
async def api_info():
    """List the available endpoints."""
    return {
        "name": API_NAME,
        "version": API_VERSION,
        "endpoints": ENDPOINTS,
        "documentation": "See /docs for the interactive API reference",
    }
