"""
app.py

Responsibility: Builds the FastAPI application: lifespan-managed shared
resources, routers, and the mapping from exceptions to JSON error responses.
Also the process entry point for running under uvicorn.
Does NOT: contain DNS logic or talk to the Porkbun API.
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import httpx
import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from config import load_settings
from exceptions import DnsProviderError, ValidationError
from logger import configure_logging
from routes.health_routes import router as health_router
from routes.update_routes import router as update_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """
    Loads settings and opens the shared HTTP client for the app's lifetime.

    Args:
        app: The FastAPI application.

    Yields:
        None while the application is serving requests.
    """
    settings = load_settings()
    configure_logging(settings.log_level)
    app.state.settings = settings

    async with httpx.AsyncClient(timeout=settings.http_timeout) as http_client:
        app.state.http_client = http_client
        logger.info("Porkbun DDNS updater started (API %s)", settings.api_base_url)
        yield

    logger.info("Porkbun DDNS updater stopped")


app = FastAPI(title="Porkbun DDNS", lifespan=lifespan)
app.include_router(health_router)
app.include_router(update_router)


# ---------------------------------------------------------------------------
# Exception → response mapping
# ---------------------------------------------------------------------------


def json_response(status_code: int, message: str) -> JSONResponse:
    """Builds the {"message": ...} body every endpoint error uses."""
    return JSONResponse(status_code=status_code, content={"message": message})


@app.exception_handler(ValidationError)
async def handle_validation_error(request: Request, exc: ValidationError) -> JSONResponse:
    logger.warning("Rejected request to %s: %s", request.url.path, exc)
    return json_response(400, str(exc))


@app.exception_handler(RequestValidationError)
async def handle_request_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    logger.warning("Malformed request to %s: %s", request.url.path, exc.errors())
    return json_response(400, "Malformed request")


@app.exception_handler(DnsProviderError)
async def handle_provider_error(request: Request, exc: DnsProviderError) -> JSONResponse:
    # NOTE: str(exc) may include the provider's response body; log it, never return it.
    logger.error("DNS provider failure: %s", exc)
    return json_response(500, exc.public_message)


def main() -> None:
    """Runs the app under uvicorn using HOST / PORT from the environment."""
    settings = load_settings()
    configure_logging(settings.log_level)
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    main()
