# sleaze_bot/middlewares/errors.py
from collections.abc import Awaitable, Callable

import structlog
from aiohttp import web

from sleaze_bot.data.constants import ErrorCategory
from sleaze_bot.services.errors import PipelineError, UploadTooLarge
from sleaze_bot.utils.logging import orjson_dumps

logger = structlog.get_logger(__name__)

Handler = Callable[[web.Request], Awaitable[web.StreamResponse]]


def error_response(error: PipelineError) -> web.Response:
    return web.json_response(error.to_dict(), status=error.status, dumps=orjson_dumps)


@web.middleware
async def error_middleware(request: web.Request, handler: Handler) -> web.StreamResponse:
    """Renders pipeline errors as `{"error", "category", "details"}` JSON."""
    try:
        return await handler(request)
    except PipelineError as e:
        log = logger.bind(category=e.category.value, status=e.status)
        if e.status >= 500:
            log.error("Request failed", details=e.detail)
        else:
            log.info("Request rejected", details=e.detail)
        return error_response(e)
    except web.HTTPRequestEntityTooLarge as e:
        return error_response(UploadTooLarge(e.text))
    except web.HTTPException:
        raise
    except Exception as e:
        logger.exception("An unhandled exception occurred")
        return web.json_response(
            {
                "error": "Internal server error",
                "category": ErrorCategory.INTERNAL_ERROR.value,
                "details": str(e),
            },
            status=500,
            dumps=orjson_dumps,
        )
