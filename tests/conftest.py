"""Shared pytest fixtures for sleaze_bot tests."""

from __future__ import annotations

import io
from pathlib import Path

import pytest
from PIL import Image

from sleaze_bot.data.settings import Settings, StorageConfig
from sleaze_bot.dto import GenerationResult, UploadedAsset
from sleaze_bot.services.clients import ImageGenerationClient
from sleaze_bot.services.normalizer import ImageNormalizer
from sleaze_bot.services.prompting import StyleCatalog
from sleaze_bot.services.result_store import ResultStore
from sleaze_bot.services.temp_store import TemporaryStore
from sleaze_bot.services.transform_pipeline import TransformPipeline


def make_image_bytes(size: tuple[int, int] = (64, 48), fmt: str = "JPEG", color: str = "red") -> bytes:
    buffer = io.BytesIO()
    Image.new("RGB", size, color).save(buffer, format=fmt)
    return buffer.getvalue()


class FakeGenerationClient(ImageGenerationClient):
    """Records calls and answers with fixed bytes or a fixed error."""

    def __init__(self, image_bytes: bytes = b"generated-image", error: Exception | None = None) -> None:
        self.image_bytes = image_bytes
        self.error = error
        self.calls: list[dict] = []
        self.closed = False

    async def generate(self, instruction: str, image_bytes: bytes, mime_type: str) -> GenerationResult:
        self.calls.append(
            {"instruction": instruction, "image_bytes": image_bytes, "mime_type": mime_type}
        )
        if self.error is not None:
            raise self.error
        return GenerationResult(image_bytes=self.image_bytes, model="fake")

    async def close(self) -> None:
        self.closed = True


# ============================================================================
# Path / Store Fixtures
# ============================================================================


@pytest.fixture
def uploads_dir(tmp_path: Path) -> Path:
    path = tmp_path / "uploads"
    path.mkdir()
    return path


@pytest.fixture
def results_dir(tmp_path: Path) -> Path:
    path = tmp_path / "results"
    path.mkdir()
    return path


@pytest.fixture
def temp_store(uploads_dir: Path) -> TemporaryStore:
    return TemporaryStore(uploads_dir)


@pytest.fixture
def result_store(results_dir: Path) -> ResultStore:
    return ResultStore(results_dir)


@pytest.fixture
def settings(uploads_dir: Path, results_dir: Path) -> Settings:
    return Settings(
        openai_api_key="sk-test",
        storage=StorageConfig(uploads_dir=uploads_dir, results_dir=results_dir),
    )


# ============================================================================
# Upload Fixtures
# ============================================================================


@pytest.fixture
def jpeg_upload(temp_store: TemporaryStore) -> UploadedAsset:
    """A 2000x1500 JPEG written to the temporary store."""
    data = make_image_bytes((2000, 1500), "JPEG")
    path = temp_store.new_upload_path("photo.jpg")
    path.write_bytes(data)
    return UploadedAsset(path=path, content_type="image/jpeg", size_bytes=len(data))


@pytest.fixture
def corrupt_upload(temp_store: TemporaryStore) -> UploadedAsset:
    data = b"\xff\xd8\xff\xe0 definitely not a jpeg"
    path = temp_store.new_upload_path("broken.jpg")
    path.write_bytes(data)
    return UploadedAsset(path=path, content_type="image/jpeg", size_bytes=len(data))


# ============================================================================
# Pipeline Fixtures
# ============================================================================


@pytest.fixture
def fake_client() -> FakeGenerationClient:
    return FakeGenerationClient()


@pytest.fixture
def pipeline(
    temp_store: TemporaryStore,
    result_store: ResultStore,
    fake_client: FakeGenerationClient,
) -> TransformPipeline:
    return TransformPipeline(
        credentials_configured=True,
        temp_store=temp_store,
        normalizer=ImageNormalizer(temp_store, canonical_size=1024),
        catalog=StyleCatalog(),
        client=fake_client,
        result_store=result_store,
    )
