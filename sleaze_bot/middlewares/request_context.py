# sleaze_bot/middlewares/request_context.py
import time
import uuid

import structlog
from aiohttp import web

from .errors import Handler

logger = structlog.get_logger(__name__)


@web.middleware
async def request_context_middleware(request: web.Request, handler: Handler) -> web.StreamResponse:
    """Binds a per-request id to every log line emitted while handling it."""
    request_id = request.headers.get("X-Request-ID") or uuid.uuid4().hex
    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(
        request_id=request_id,
        method=request.method,
        path=request.path,
    )
    start_time = time.monotonic()
    try:
        response = await handler(request)
    finally:
        structlog.contextvars.unbind_contextvars("method", "path")
    response.headers["X-Request-ID"] = request_id
    logger.debug(
        "Request handled",
        status=response.status,
        duration_ms=int((time.monotonic() - start_time) * 1000),
    )
    return response
