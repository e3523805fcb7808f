"""Campaign Architecture API"""
import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from campaign_api.config import get_settings
from campaign_api.constants import (
    API_NAME,
    API_VERSION,
    AVAILABLE_ENDPOINTS,
    EXPECTED_DOCUMENT_SHAPE,
    REPORT_SHAPE,
)
from campaign_api.routers import campaigns_router, system_router

settings = get_settings()

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    Path(settings.data_dir).mkdir(parents=True, exist_ok=True)
    logger.info(f"{API_NAME} serving {settings.data_path} on port {settings.port}")
    yield
    logger.info("Shutting down")


app = FastAPI(
    title=API_NAME,
    description="Campaign report store fed by automation webhooks",
    version=API_VERSION,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["*"],
)

app.include_router(campaigns_router)
app.include_router(system_router)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Render HTTP errors as flat JSON bodies; unknown routes get the endpoint list."""
    if isinstance(exc.detail, dict):
        return JSONResponse(status_code=exc.status_code, content=exc.detail)
    if exc.status_code in (404, 405):
        return JSONResponse(
            status_code=404,
            content={"error": "Endpoint not found", "available": list(AVAILABLE_ENDPOINTS)},
        )
    return JSONResponse(status_code=exc.status_code, content={"error": exc.detail})


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Malformed request bodies are client errors."""
    logger.warning(f"Invalid request body for {request.url.path}")
    expected = REPORT_SHAPE if "/reports/" in request.url.path else EXPECTED_DOCUMENT_SHAPE
    return JSONResponse(
        status_code=400,
        content={"error": "Invalid data structure", "expected": expected},
    )


def run() -> None:
    import uvicorn
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
