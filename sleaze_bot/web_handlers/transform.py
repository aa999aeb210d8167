# sleaze_bot/web_handlers/transform.py
import structlog
from aiohttp import BodyPartReader, hdrs, web

from sleaze_bot.data.settings import Settings, UploadConfig
from sleaze_bot.dto import UploadedAsset
from sleaze_bot.services.errors import InvalidUpload, UploadTooLarge
from sleaze_bot.services.temp_store import TemporaryStore
from sleaze_bot.services.transform_pipeline import TransformPipeline
from sleaze_bot.utils.logging import orjson_dumps

logger = structlog.get_logger(__name__)


async def _save_image_part(
    part: BodyPartReader,
    temp_store: TemporaryStore,
    max_bytes: int,
) -> UploadedAsset:
    content_type = part.headers.get(hdrs.CONTENT_TYPE, "").split(";")[0].strip().lower()
    if not content_type.startswith("image/"):
        raise InvalidUpload(f"Unsupported content type: {content_type or 'unknown'}")

    path = temp_store.new_upload_path(part.filename)
    size = 0
    try:
        with path.open("wb") as fh:
            while chunk := await part.read_chunk():
                size += len(chunk)
                if size > max_bytes:
                    raise UploadTooLarge(f"File exceeds the {max_bytes} byte limit")
                fh.write(chunk)
    except BaseException:
        temp_store.discard(path)
        raise

    return UploadedAsset(
        path=path,
        content_type=content_type,
        size_bytes=size,
        original_filename=part.filename,
    )


async def read_transform_form(
    req: web.Request,
    temp_store: TemporaryStore,
    upload_config: UploadConfig,
) -> tuple[UploadedAsset | None, str | None]:
    """
    Reads the multipart form of a transform request.

    The image part is streamed to the temporary store. Returns
    (None, style) when the request carries no file.
    """
    if not req.content_type.startswith("multipart/"):
        return None, None

    asset: UploadedAsset | None = None
    style: str | None = None
    try:
        reader = await req.multipart()
        while (part := await reader.next()) is not None:
            if not isinstance(part, BodyPartReader):
                continue
            if part.name == upload_config.field_name and part.filename and asset is None:
                asset = await _save_image_part(part, temp_store, upload_config.max_bytes)
            elif part.name == upload_config.style_field_name:
                style = (await part.text()).strip() or None
            else:
                await part.release()
    except BaseException:
        if asset is not None:
            temp_store.discard(asset.path)
        raise
    return asset, style


async def transform_image(req: web.Request) -> web.Response:
    settings: Settings = req.app["settings"]
    pipeline: TransformPipeline = req.app["pipeline"]

    logger.info("Transform request received")
    asset, style = await read_transform_form(req, pipeline.temp_store, settings.upload)
    style = style or settings.default_style
    structlog.contextvars.bind_contextvars(style=style)

    stored = await pipeline.run(asset, style)

    return web.json_response(
        {
            "success": True,
            "image_id": stored.image_id,
            "style": style,
            "message": "Sleaze transformation complete!",
            "result_url": str(req.app.router["result"].url_for(image_id=stored.image_id)),
        },
        dumps=orjson_dumps,
    )


routes = [
    web.post("/transform", transform_image),
]
