# sleaze_bot/middlewares/cors.py
from aiohttp import web

from .errors import Handler

_ALLOWED_METHODS = "GET, POST, OPTIONS"


def cors_middleware(allow_origin: str = "*"):
    @web.middleware
    async def middleware(request: web.Request, handler: Handler) -> web.StreamResponse:
        if request.method == "OPTIONS" and "Access-Control-Request-Method" in request.headers:
            response: web.StreamResponse = web.Response(status=204)
            response.headers["Access-Control-Allow-Methods"] = _ALLOWED_METHODS
            response.headers["Access-Control-Allow-Headers"] = request.headers.get(
                "Access-Control-Request-Headers", "*"
            )
        else:
            response = await handler(request)
        response.headers["Access-Control-Allow-Origin"] = allow_origin
        return response

    return middleware
