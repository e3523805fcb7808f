"""Pydantic models for the API."""
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel


# Documents and reports are opaque JSON passed through as-is
Document = dict[str, Any]
Report = Any


class UpsertOutcome(str, Enum):
    """Result of an insert-or-replace by report id."""
    INSERTED = "inserted"
    UPDATED = "updated"


# --- Response Models ---

class DocumentUpdateResponse(BaseModel):
    """Response to a full document replace or a cache refresh."""
    success: bool = True
    message: str
    reports: int
    timestamp: str


class ReportUpdateResponse(BaseModel):
    """Response to a single report upsert."""
    success: bool = True
    message: str
    outcome: UpsertOutcome
    timestamp: str


class CacheStatus(BaseModel):
    """Snapshot presence and age in milliseconds."""
    exists: bool
    age: Optional[int] = None


class HealthResponse(BaseModel):
    status: str = "healthy"
    uptime: float
    timestamp: str
    cache: CacheStatus
