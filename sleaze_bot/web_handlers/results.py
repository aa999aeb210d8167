# sleaze_bot/web_handlers/results.py
import asyncio

from aiohttp import web

from sleaze_bot.data.constants import CANONICAL_MIME_TYPE
from sleaze_bot.services.result_store import ResultStore


async def serve_result(req: web.Request) -> web.Response:
    """
    Serve a previously generated image.

    Raises:
        ImageNotFound: If no result exists under the id (rendered as 404).
    """
    image_id = req.match_info["image_id"]
    result_store: ResultStore = req.app["pipeline"].result_store
    loop = asyncio.get_running_loop()
    image_bytes = await loop.run_in_executor(None, result_store.retrieve, image_id)
    return web.Response(body=image_bytes, content_type=CANONICAL_MIME_TYPE)


routes = [
    web.get("/result/{image_id}", serve_result, name="result"),
]
