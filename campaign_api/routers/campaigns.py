"""Campaign data endpoints.

GET endpoints are called by the dashboard frontend; the POST endpoints are
called by automation tools (n8n, Zapier, Make.com) pushing fresh reports.
"""
import logging
from datetime import datetime, timezone
from typing import Any

from fastapi import APIRouter, Body, HTTPException

from campaign_api.constants import EXPECTED_DOCUMENT_SHAPE
from campaign_api.errors import NotFoundError, StorageError, ValidationError
from campaign_api.models import DocumentUpdateResponse, ReportUpdateResponse, UpsertOutcome
from campaign_api.storage import get_coordinator

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/campaigns", tags=["campaigns"])


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


@router.get("")
async def get_campaigns():
    """Get all campaign data."""
    logger.info("GET /campaigns - Fetching all campaign data")
    try:
        return await get_coordinator().get_all()
    except Exception as e:
        logger.error(f"Error fetching campaigns: {e}")
        raise HTTPException(
            status_code=500,
            detail={"error": "Failed to load campaign data", "message": str(e)},
        )


@router.get("/reports/{report_id}")
async def get_report(report_id: str):
    """Get a single report by id."""
    try:
        return await get_coordinator().get_report(report_id)
    except NotFoundError:
        raise HTTPException(status_code=404, detail={"error": "Report not found"})
    except Exception as e:
        logger.error(f"Error loading report {report_id}: {e}")
        raise HTTPException(
            status_code=500,
            detail={"error": "Failed to load report", "message": str(e)},
        )


@router.post("/update", response_model=DocumentUpdateResponse)
async def update_campaigns(payload: Any = Body(None)):
    """Replace all campaign data."""
    logger.info("POST /campaigns/update - Receiving data update")
    try:
        document = await get_coordinator().replace_all(payload)
    except ValidationError as e:
        logger.warning(f"Rejected campaign update: {e}")
        raise HTTPException(
            status_code=400,
            detail={"error": str(e), "expected": EXPECTED_DOCUMENT_SHAPE},
        )
    except StorageError as e:
        raise HTTPException(
            status_code=500,
            detail={"error": "Failed to update campaign data", "message": str(e)},
        )

    return DocumentUpdateResponse(
        message="Campaign data updated successfully",
        reports=len(document["reports"]),
        timestamp=_now_iso(),
    )


@router.post("/reports/{report_id}/update", response_model=ReportUpdateResponse)
async def update_report(report_id: str, report: dict[str, Any]):
    """Insert or replace a single report."""
    logger.info(f"POST /campaigns/reports/{report_id}/update")
    try:
        outcome = await get_coordinator().upsert_report(report_id, report)
    except StorageError as e:
        raise HTTPException(
            status_code=500,
            detail={"error": "Failed to update report", "message": str(e)},
        )

    verb = "added" if outcome is UpsertOutcome.INSERTED else "updated"
    return ReportUpdateResponse(
        message=f"Report {report_id} {verb} successfully",
        outcome=outcome,
        timestamp=_now_iso(),
    )


@router.post("/refresh", response_model=DocumentUpdateResponse)
async def refresh_campaigns():
    """Reload campaign data from disk, bypassing the cache."""
    try:
        document = await get_coordinator().refresh()
    except Exception as e:
        logger.error(f"Error refreshing cache: {e}")
        raise HTTPException(
            status_code=500,
            detail={"error": "Failed to refresh cache", "message": str(e)},
        )

    return DocumentUpdateResponse(
        message="Cache refreshed successfully",
        reports=len(document["reports"]),
        timestamp=_now_iso(),
    )
