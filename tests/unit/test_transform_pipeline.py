"""Tests for the transform pipeline orchestration and its cleanup guarantee."""

import asyncio
import io
from pathlib import Path

import pytest
from PIL import Image

from sleaze_bot.data.constants import ErrorCategory
from sleaze_bot.data.settings import Settings, StorageConfig
from sleaze_bot.dto import UploadedAsset
from sleaze_bot.services.errors import (
    ConfigurationError,
    GenerationFailure,
    NoFileProvided,
    TransformFailure,
)
from sleaze_bot.services.prompting import STYLES
from sleaze_bot.services.transform_pipeline import TransformPipeline
from tests.conftest import FakeGenerationClient, make_image_bytes


def _files(directory: Path) -> list[Path]:
    return sorted(directory.iterdir())


class TestTransformPipeline:
    @pytest.mark.asyncio
    async def test_shadow_scenario(self, pipeline, fake_client, jpeg_upload, result_store, uploads_dir):
        fake_client.image_bytes = b"X-generated"

        stored = await pipeline.run(jpeg_upload, "shadow")

        call = fake_client.calls[0]
        assert call["instruction"] == STYLES["shadow"]
        assert call["mime_type"] == "image/png"
        # The generator saw the canonical 1024x1024 PNG.
        with Image.open(io.BytesIO(call["image_bytes"])) as img:
            assert img.format == "PNG"
            assert img.size == (1024, 1024)

        assert result_store.retrieve(stored.image_id) == b"X-generated"
        assert _files(uploads_dir) == []

    @pytest.mark.asyncio
    async def test_unknown_style_uses_default_instruction(self, pipeline, fake_client, jpeg_upload):
        await pipeline.run(jpeg_upload, "doesnotexist")
        assert fake_client.calls[0]["instruction"] == STYLES["sleaze1"]

    @pytest.mark.asyncio
    async def test_passthrough_declares_original_mime_type(
        self, pipeline, fake_client, corrupt_upload, uploads_dir
    ):
        original_bytes = corrupt_upload.path.read_bytes()

        stored = await pipeline.run(corrupt_upload, "flex")

        call = fake_client.calls[0]
        assert call["mime_type"] == "image/jpeg"
        assert call["image_bytes"] == original_bytes
        assert stored.image_id
        assert _files(uploads_dir) == []

    @pytest.mark.asyncio
    async def test_missing_upload(self, pipeline, fake_client, uploads_dir):
        with pytest.raises(NoFileProvided) as exc_info:
            await pipeline.run(None, "shadow")

        assert exc_info.value.category is ErrorCategory.NO_FILE_PROVIDED
        assert exc_info.value.status == 400
        assert fake_client.calls == []
        assert _files(uploads_dir) == []

    @pytest.mark.asyncio
    async def test_missing_credentials_still_cleans_upload(
        self, temp_store, result_store, jpeg_upload, uploads_dir
    ):
        pipeline = TransformPipeline.from_settings(
            Settings(
                openai_api_key=None,
                storage=StorageConfig(uploads_dir=uploads_dir, results_dir=result_store.base_dir),
            ),
            client=None,
        )

        with pytest.raises(ConfigurationError):
            await pipeline.run(jpeg_upload, "shadow")

        assert _files(uploads_dir) == []
        assert _files(result_store.base_dir) == []

    @pytest.mark.asyncio
    async def test_generation_failure_is_wrapped_and_cleaned_up(
        self, pipeline, fake_client, jpeg_upload, uploads_dir, results_dir
    ):
        fake_client.error = GenerationFailure("No image generated in response")

        with pytest.raises(TransformFailure) as exc_info:
            await pipeline.run(jpeg_upload, "shadow")

        error = exc_info.value
        assert isinstance(error.cause, GenerationFailure)
        assert error.cause_category is ErrorCategory.GENERATION_FAILURE
        assert error.to_dict()["cause"] == "generation_failure"
        assert error.to_dict()["category"] == "transform_failure"
        assert "No image generated" in error.detail
        assert _files(uploads_dir) == []
        assert _files(results_dir) == []

    @pytest.mark.asyncio
    async def test_unexpected_error_is_wrapped(self, pipeline, fake_client, jpeg_upload, uploads_dir):
        fake_client.error = ConnectionError("upstream reset")

        with pytest.raises(TransformFailure) as exc_info:
            await pipeline.run(jpeg_upload, "shadow")

        assert exc_info.value.cause_category is ErrorCategory.INTERNAL_ERROR
        assert "upstream reset" in exc_info.value.detail
        assert _files(uploads_dir) == []

    @pytest.mark.asyncio
    async def test_persist_failure_cleans_up(self, pipeline, jpeg_upload, uploads_dir, monkeypatch):
        def broken_store(image_bytes):
            raise OSError("disk full")

        monkeypatch.setattr(pipeline.result_store, "store", broken_store)

        with pytest.raises(TransformFailure, match="disk full"):
            await pipeline.run(jpeg_upload, "shadow")

        assert _files(uploads_dir) == []

    @pytest.mark.asyncio
    async def test_cleanup_tolerates_files_already_gone(self, pipeline, jpeg_upload, uploads_dir, fake_client):
        async def generate_and_delete(instruction, image_bytes, mime_type):
            jpeg_upload.path.unlink()
            return await FakeGenerationClient.generate(fake_client, instruction, image_bytes, mime_type)

        fake_client.generate = generate_and_delete

        stored = await pipeline.run(jpeg_upload, "sleaze2")

        assert stored.image_id
        assert _files(uploads_dir) == []

    @pytest.mark.asyncio
    async def test_concurrent_requests_do_not_collide(self, pipeline, temp_store, uploads_dir, result_store):
        assets = []
        for color in ("red", "green", "blue"):
            data = make_image_bytes((300, 200), "PNG", color)
            path = temp_store.new_upload_path("x.png")
            path.write_bytes(data)
            assets.append(UploadedAsset(path=path, content_type="image/png", size_bytes=len(data)))

        stored = await asyncio.gather(*(pipeline.run(asset, "group") for asset in assets))

        assert len({s.image_id for s in stored}) == 3
        assert _files(uploads_dir) == []
        assert len(_files(result_store.base_dir)) == 3
