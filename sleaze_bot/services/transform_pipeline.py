# sleaze_bot/services/transform_pipeline.py
"""
Request-scoped orchestration of a single photo transformation.

Steps, strictly in order:
    1. validate     - an upload is present and the service is usable
    2. normalize    - canonical PNG or passthrough, never fails
    3. resolve      - style key to instruction text, never fails
    4. encode       - read normalized bytes and pick the declared MIME type
    5. generate     - call the generation client
    6. persist      - write the result to the result store
    7. cleanup      - delete the upload and the normalized copy

Cleanup runs on every exit path, including validation errors raised after
the upload reached disk. Errors from steps 2-6 are wrapped in
`TransformFailure`.
"""
import asyncio
from pathlib import Path

import structlog

from sleaze_bot.data.settings import Settings
from sleaze_bot.dto import NormalizedAsset, StoredImage, UploadedAsset
from sleaze_bot.services.clients import ImageGenerationClient
from sleaze_bot.services.errors import (
    ConfigurationError,
    NoFileProvided,
    TransformFailure,
)
from sleaze_bot.services.normalizer import ImageNormalizer
from sleaze_bot.services.prompting import StyleCatalog
from sleaze_bot.services.result_store import ResultStore
from sleaze_bot.services.temp_store import TemporaryStore

logger = structlog.get_logger(__name__)


class TransformPipeline:
    def __init__(
        self,
        *,
        credentials_configured: bool,
        temp_store: TemporaryStore,
        normalizer: ImageNormalizer,
        catalog: StyleCatalog,
        client: ImageGenerationClient | None,
        result_store: ResultStore,
    ) -> None:
        self.credentials_configured = credentials_configured
        self.temp_store = temp_store
        self.normalizer = normalizer
        self.catalog = catalog
        self.client = client
        self.result_store = result_store

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        client: ImageGenerationClient | None,
    ) -> "TransformPipeline":
        temp_store = TemporaryStore(settings.storage.uploads_dir)
        return cls(
            credentials_configured=settings.credentials_configured,
            temp_store=temp_store,
            normalizer=ImageNormalizer(temp_store, settings.normalizer.canonical_size),
            catalog=StyleCatalog(default_style=settings.default_style),
            client=client,
            result_store=ResultStore(settings.storage.results_dir),
        )

    def _validate(self) -> ImageGenerationClient:
        if not self.credentials_configured or self.client is None:
            logger.error("OpenAI API key missing during request!")
            raise ConfigurationError()
        return self.client

    @staticmethod
    def _encode_for_transport(normalized: NormalizedAsset) -> tuple[bytes, str]:
        return Path(normalized.path).read_bytes(), normalized.mime_type

    def _cleanup(self, asset: UploadedAsset, normalized: NormalizedAsset | None) -> None:
        removed = [str(asset.path)] if self.temp_store.discard(asset.path) else []
        if (
            normalized is not None
            and normalized.converted
            and not normalized.is_passthrough
            and self.temp_store.discard(normalized.path)
        ):
            removed.append(str(normalized.path))
        logger.debug("Temporary files cleaned up", removed=removed)

    async def run(self, asset: UploadedAsset | None, style_key: str | None = None) -> StoredImage:
        if asset is None:
            raise NoFileProvided()

        loop = asyncio.get_running_loop()
        log = logger.bind(style=style_key, upload=asset.path.name)
        normalized: NormalizedAsset | None = None
        step = "validate"
        try:
            client = self._validate()
            try:
                step = "normalize"
                normalized = await loop.run_in_executor(None, self.normalizer.normalize, asset)

                step = "resolve"
                request = self.catalog.resolve(style_key)
                log = log.bind(resolved_style=request.resolved_key)

                step = "encode"
                image_bytes, mime_type = await loop.run_in_executor(
                    None, self._encode_for_transport, normalized
                )
                log.info(
                    "Processing image",
                    mime_type=mime_type,
                    converted=normalized.converted,
                )

                step = "generate"
                result = await client.generate(request.instruction, image_bytes, mime_type)

                step = "persist"
                stored = await loop.run_in_executor(None, self.result_store.store, result.image_bytes)
            except Exception as e:
                log.exception("Transform error", step=step)
                raise TransformFailure(str(e) or type(e).__name__, cause=e) from e

            log.info("Transformation complete", image_id=stored.image_id)
            return stored
        finally:
            self._cleanup(asset, normalized)
