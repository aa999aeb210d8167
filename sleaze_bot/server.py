# sleaze_bot/server.py
import sys

import structlog
from aiohttp import web
from dotenv import load_dotenv

from sleaze_bot.data.settings import Settings
from sleaze_bot.middlewares import (
    cors_middleware,
    error_middleware,
    request_context_middleware,
)
from sleaze_bot.services.clients import ImageGenerationClient, get_generation_client
from sleaze_bot.services.transform_pipeline import TransformPipeline
from sleaze_bot.utils.logging import setup_logger
from sleaze_bot.web_handlers import routes

logger = structlog.get_logger(__name__)

# Multipart overhead on top of the file cap.
_FORM_OVERHEAD_BYTES = 1024 * 1024


def create_app(
    settings: Settings,
    client: ImageGenerationClient | None = None,
) -> web.Application:
    if client is None and settings.credentials_configured:
        client = get_generation_client(settings)

    app = web.Application(
        middlewares=[
            cors_middleware(settings.cors_allow_origin),
            request_context_middleware,
            error_middleware,
        ],
        client_max_size=settings.upload.max_bytes + _FORM_OVERHEAD_BYTES,
    )
    app["settings"] = settings
    app["pipeline"] = TransformPipeline.from_settings(settings, client)
    app.add_routes(routes)
    app.on_startup.append(on_startup)
    app.on_cleanup.append(on_cleanup)
    return app


async def on_startup(app: web.Application) -> None:
    settings: Settings = app["settings"]
    pipeline: TransformPipeline = app["pipeline"]
    pipeline.temp_store.ensure()
    pipeline.result_store.ensure()
    logger.info(
        "Sleaze Bot Web Server started successfully!",
        url=f"http://localhost:{settings.port}",
        transform_endpoint=f"http://localhost:{settings.port}/transform",
        styles=pipeline.catalog.style_ids,
        api_key_configured=settings.credentials_configured,
        generation_client=settings.generation.client,
    )


async def on_cleanup(app: web.Application) -> None:
    pipeline: TransformPipeline = app["pipeline"]
    if pipeline.client is not None:
        await pipeline.client.close()
        logger.info("Generation client closed")


def main() -> None:
    load_dotenv()
    settings = Settings()
    log = setup_logger(settings.logging_level)

    if not settings.credentials_configured:
        log.critical(
            "CRITICAL ERROR: OPENAI_API_KEY environment variable is missing! "
            "Please set OPENAI_API_KEY in your environment variables"
        )
        sys.exit(1)

    log.info("OpenAI API key found, initializing server...")
    web.run_app(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        print=None,
    )


if __name__ == "__main__":
    main()
