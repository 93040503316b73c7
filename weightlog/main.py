from __future__ import annotations

import logging
from typing import Any, Dict

import httpx
from fastapi import Depends, FastAPI, Request
from fastapi.responses import JSONResponse

from .platform.config import Settings, get_settings
from .platform.security import verify_api_key
from .routes.entries import router as entries_router
from .routes.profile import router as profile_router
from .routes.sharing import public_router as public_share_router
from .routes.sharing import router as sharing_router
from .routes.statistics import router as statistics_router

logger = logging.getLogger(__name__)

app: FastAPI = FastAPI(
    title="Weight Log",
    version="2.0.0",
    description="Logs body weight to Notion and reports trends, forecasts and BMI",
)


@app.exception_handler(httpx.ConnectError)
async def upstream_connection_error(request: Request, exc: httpx.ConnectError) -> JSONResponse:
    """Answer with a friendly 503 when Notion or Redis cannot be reached."""
    host = None
    try:
        host = exc.request.url.host
    except RuntimeError:
        # ``request`` is unset when the error was raised outside an httpx client.
        pass
    logger.error("Upstream connection to %s failed on %s: %s", host, request.url.path, exc)
    return JSONResponse(
        status_code=503,
        content={
            "error": "UPSTREAM_CONNECTION_FAILED",
            "message": (
                "Could not connect to an upstream dependency service. "
                "Please try again shortly."
            ),
            "upstream_host": host,
        },
    )


@app.api_route("/", methods=["GET", "HEAD"], include_in_schema=False)
@app.api_route("/healthz", methods=["GET", "HEAD"], include_in_schema=False)
async def healthz() -> dict[str, str]:
    """Lightweight endpoint used for health checks."""
    return {"status": "ok"}


@app.get("/v2/api-schema")
async def get_api_schema(
    request: Request,
    _: Any = Depends(verify_api_key),
    settings: Settings = Depends(get_settings),
) -> JSONResponse:
    """Return the OpenAPI schema for this API version."""
    openapi_schema: Dict[str, Any] = request.app.openapi()
    server = settings.public_base_url or str(request.base_url)
    openapi_schema["servers"] = [{"url": server.rstrip("/")}]
    return JSONResponse(openapi_schema)


for router in (
    entries_router,
    statistics_router,
    profile_router,
    sharing_router,
):
    app.include_router(router, prefix="/v2", dependencies=[Depends(verify_api_key)])

# Share links are public (no API key security)
app.include_router(public_share_router)
