"""Error taxonomy for the campaign store."""


class CampaignError(Exception):
    """Base class for campaign store errors."""


class ValidationError(CampaignError):
    """Request body does not carry a `reports` list."""


class NotFoundError(CampaignError):
    """No report matches the requested identifier."""

    def __init__(self, report_id: str):
        super().__init__(f"Report not found: {report_id}")
        self.report_id = report_id


class StorageError(CampaignError):
    """Writing the campaign document to disk failed."""
