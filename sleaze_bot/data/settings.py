# sleaze_bot/data/settings.py
from pathlib import Path

from pydantic import BaseModel, Field, SecretStr, AnyHttpUrl, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict


class GenerationConfig(BaseModel):
    client: str = "openai"
    model: str = "gpt-4.1-mini"
    image_detail: str = "high"
    base_url: AnyHttpUrl = "https://api.openai.com/v1"


class StorageConfig(BaseModel):
    uploads_dir: Path = Path("uploads")
    results_dir: Path = Path("results")


class NormalizerConfig(BaseModel):
    """Canonical output of the normalization step (square PNG)."""
    canonical_size: int = 1024


class UploadConfig(BaseModel):
    max_bytes: int = 10 * 1024 * 1024
    field_name: str = "image"
    style_field_name: str = "style"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_nested_delimiter="__",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    openai_api_key: SecretStr | None = None
    host: str = "0.0.0.0"
    port: int = 3000

    generation: GenerationConfig = Field(default_factory=GenerationConfig)
    storage: StorageConfig = Field(default_factory=StorageConfig)
    normalizer: NormalizerConfig = Field(default_factory=NormalizerConfig)
    upload: UploadConfig = Field(default_factory=UploadConfig)

    default_style: str = "sleaze1"
    cors_allow_origin: str = "*"
    logging_level: int = 20

    @computed_field
    @property
    def credentials_configured(self) -> bool:
        if self.generation.client.lower() == "mock":
            return True
        return bool(self.openai_api_key and self.openai_api_key.get_secret_value())
