"""FastAPI application exposing the on-demand publish trigger."""
import asyncio
import json
import logging
from concurrent.futures import ThreadPoolExecutor
from datetime import datetime, timezone

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse, Response
from pydantic import BaseModel

from ingest.errors import AuthGuardError
from jobs.publish_events import publish_events
from publish.config import WebhookConfig

VERSION = "1.0.0"
TRIGGER_HEADER = "X-Clippy"

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Clippy Events Publisher",
    description="Announces upcoming events on a Discord webhook",
    version=VERSION,
)

# The pipeline uses blocking requests calls
executor = ThreadPoolExecutor(max_workers=1)


class HealthResponse(BaseModel):
    """Health check response model."""
    status: str
    timestamp: str
    version: str


def require_trigger_header(request: Request) -> None:
    """Raise ``AuthGuardError`` unless the request carries ``X-Clippy: true``."""
    if request.headers.get(TRIGGER_HEADER) != "true":
        raise AuthGuardError("Missing header")


@app.exception_handler(AuthGuardError)
async def auth_guard_handler(request: Request, exc: AuthGuardError):
    logger.warning("Rejected %s %s: %s", request.method, request.url.path, exc)
    return PlainTextResponse("Internal Server Error", status_code=500)


@app.get("/health", response_model=HealthResponse)
async def health_check():
    """Health check endpoint."""
    return HealthResponse(
        status="healthy",
        timestamp=datetime.now(timezone.utc).isoformat(),
        version=VERSION,
    )


# Every standard method except CONNECT.
TRIGGER_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS", "TRACE"]


@app.api_route("/", methods=TRIGGER_METHODS)
async def trigger_publish(request: Request):
    """
    Publish this week's events on demand.

    Requires ``X-Clippy: true``. Responds with the webhook replies serialised
    as JSON; ``ok`` is only sent if serialising produced an empty string.
    """
    require_trigger_header(request)
    config = WebhookConfig.from_env()

    loop = asyncio.get_event_loop()
    results = await loop.run_in_executor(executor, publish_events, config)

    body = json.dumps(results)
    if not body:
        return PlainTextResponse("ok")
    return Response(content=body, media_type="application/json")


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8001)
