# sleaze_bot/web_handlers/health.py
import datetime as dt

from aiohttp import web

from sleaze_bot.data.settings import Settings
from sleaze_bot.services.transform_pipeline import TransformPipeline
from sleaze_bot.utils.logging import orjson_dumps


async def health(req: web.Request) -> web.Response:
    settings: Settings = req.app["settings"]
    pipeline: TransformPipeline = req.app["pipeline"]
    return web.json_response(
        {
            "status": "healthy",
            "timestamp": dt.datetime.now(dt.timezone.utc).isoformat(),
            "styles": pipeline.catalog.style_ids,
            "api_key_configured": settings.credentials_configured,
        },
        dumps=orjson_dumps,
    )


routes = [
    web.get("/health", health),
]
