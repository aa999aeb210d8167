# File: sleaze_bot/dto/assets.py
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, model_validator

from sleaze_bot.data.constants import ConversionStatus


class UploadedAsset(BaseModel):
    """The raw upload as written to the temporary store by the intake layer."""
    path: Path
    content_type: str
    size_bytes: int
    original_filename: str | None = None


class NormalizedAsset(BaseModel):
    """
    What the normalizer hands to the orchestrator.

    For a passthrough the path and MIME type are the ones of the original
    upload; `resolution` is only known after a successful conversion.
    """
    path: Path
    mime_type: str
    source_path: Path
    status: ConversionStatus
    resolution: tuple[int, int] | None = None
    degraded_reason: str | None = None

    @property
    def converted(self) -> bool:
        return self.status is ConversionStatus.CONVERTED

    @property
    def is_passthrough(self) -> bool:
        return self.path == self.source_path

    @model_validator(mode="after")
    def _check_passthrough_consistency(self) -> "NormalizedAsset":
        if self.status is ConversionStatus.PASSTHROUGH and self.path != self.source_path:
            raise ValueError("A passthrough asset must reference the original upload.")
        return self


class TransformRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    style_key: str
    resolved_key: str
    instruction: str

    @property
    def used_fallback(self) -> bool:
        return self.style_key != self.resolved_key


class GenerationResult(BaseModel):
    image_bytes: bytes = Field(min_length=1)
    model: str | None = None
    generation_time_ms: int | None = None


class StoredImage(BaseModel):
    image_id: str
    path: Path
