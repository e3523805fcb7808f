"""Application constants."""

API_NAME = "Campaign Architecture API"
API_VERSION = "1.0.0"

# Body shapes echoed back on 400
EXPECTED_DOCUMENT_SHAPE = "{ reports: [...] }"
REPORT_SHAPE = '{ id: "...", ... }'

# Field used to match reports on lookup and upsert
REPORT_ID_FIELD = "id"

ENDPOINTS = {
    "get": {
        "/campaigns": "Get all campaign data",
        "/campaigns/reports/{report_id}": "Get specific report",
        "/health": "Health check",
    },
    "post": {
        "/campaigns/update": "Update all campaign data (from n8n/Zapier/Make)",
        "/campaigns/reports/{report_id}/update": "Update specific report",
        "/campaigns/refresh": "Refresh cache manually",
    },
}

# Listed in the 404 body for unknown routes
AVAILABLE_ENDPOINTS = (
    "GET /campaigns",
    "GET /campaigns/reports/{report_id}",
    "POST /campaigns/update",
    "POST /campaigns/reports/{report_id}/update",
    "POST /campaigns/refresh",
    "GET /health",
)
