"""API routers."""
from campaign_api.routers.campaigns import router as campaigns_router
from campaign_api.routers.system import router as system_router

__all__ = ["campaigns_router", "system_router"]
