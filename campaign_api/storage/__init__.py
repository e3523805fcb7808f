"""Storage module - campaign document persistence and snapshot cache."""
from campaign_api.storage.coordinator import CampaignCoordinator, get_coordinator
from campaign_api.storage.persistence import DocumentStore, LoadResult, LoadStatus

__all__ = [
    "CampaignCoordinator",
    "get_coordinator",
    "DocumentStore",
    "LoadResult",
    "LoadStatus",
]
