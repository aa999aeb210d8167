# sleaze_bot/services/normalizer.py
"""
Brings an uploaded photo into the canonical shape sent to the generator:
a square PNG of `canonical_size` pixels.

Normalization is an ordered list of strategies tried one after another:

1. decode straight from the file path,
2. read the file into memory and decode from the buffer,
3. passthrough: hand back the original file untouched.

The last strategy cannot fail, so `ImageNormalizer.normalize` never raises.
A passthrough result still lets the request reach the generator with the
original bytes and MIME type.
"""
import io
from abc import ABC, abstractmethod
from pathlib import Path

import structlog
from PIL import Image, ImageOps

from sleaze_bot.data.constants import (
    CANONICAL_FORMAT,
    CANONICAL_MIME_TYPE,
    ConversionStatus,
)
from sleaze_bot.dto import NormalizedAsset, UploadedAsset
from sleaze_bot.services.errors import NormalizationDegraded
from sleaze_bot.services.temp_store import TemporaryStore

logger = structlog.get_logger(__name__)


def _encode_canonical(img: Image.Image, target: Path, size: int) -> tuple[int, int]:
    """Resizes to a `size` x `size` square and writes it to `target` as PNG."""
    img = ImageOps.exif_transpose(img)
    if img.mode not in ("RGB", "RGBA"):
        has_alpha = "A" in img.getbands() or "transparency" in img.info
        img = img.convert("RGBA" if has_alpha else "RGB")
    resized = img.resize((size, size), Image.Resampling.LANCZOS)
    resized.save(target, format=CANONICAL_FORMAT)
    return resized.size


class NormalizationStrategy(ABC):
    name: str = "base"

    @abstractmethod
    def apply(self, asset: UploadedAsset, target: Path, size: int) -> NormalizedAsset:
        raise NotImplementedError


class PathDecodeStrategy(NormalizationStrategy):
    name = "path_decode"

    def apply(self, asset: UploadedAsset, target: Path, size: int) -> NormalizedAsset:
        with Image.open(asset.path) as img:
            img.load()
            resolution = _encode_canonical(img, target, size)
        return NormalizedAsset(
            path=target,
            mime_type=CANONICAL_MIME_TYPE,
            source_path=asset.path,
            status=ConversionStatus.CONVERTED,
            resolution=resolution,
        )


class BufferDecodeStrategy(NormalizationStrategy):
    """Decodes from an in-memory copy; covers path and streaming decode issues."""
    name = "buffer_decode"

    def apply(self, asset: UploadedAsset, target: Path, size: int) -> NormalizedAsset:
        buffer = io.BytesIO(Path(asset.path).read_bytes())
        with Image.open(buffer) as img:
            img.load()
            resolution = _encode_canonical(img, target, size)
        return NormalizedAsset(
            path=target,
            mime_type=CANONICAL_MIME_TYPE,
            source_path=asset.path,
            status=ConversionStatus.CONVERTED,
            resolution=resolution,
        )


class PassthroughStrategy(NormalizationStrategy):
    name = "passthrough"

    def apply(self, asset: UploadedAsset, target: Path, size: int) -> NormalizedAsset:
        return NormalizedAsset(
            path=asset.path,
            mime_type=asset.content_type,
            source_path=asset.path,
            status=ConversionStatus.PASSTHROUGH,
        )


def default_strategies() -> list[NormalizationStrategy]:
    return [PathDecodeStrategy(), BufferDecodeStrategy(), PassthroughStrategy()]


class ImageNormalizer:
    def __init__(
        self,
        temp_store: TemporaryStore,
        canonical_size: int = 1024,
        strategies: list[NormalizationStrategy] | None = None,
    ) -> None:
        self.temp_store = temp_store
        self.canonical_size = canonical_size
        self.strategies = strategies if strategies is not None else default_strategies()
        if not self.strategies or not isinstance(self.strategies[-1], PassthroughStrategy):
            self.strategies.append(PassthroughStrategy())

    def normalize(self, asset: UploadedAsset) -> NormalizedAsset:
        log = logger.bind(source=str(asset.path), content_type=asset.content_type)
        failures: list[str] = []

        for strategy in self.strategies:
            target = self.temp_store.new_converted_path()
            try:
                result = strategy.apply(asset, target, self.canonical_size)
            except Exception as e:
                # A half-written target must not outlive the failed attempt.
                self.temp_store.discard(target)
                failures.append(f"{strategy.name}: {e}")
                log.info("Normalization strategy failed", strategy=strategy.name, error=str(e))
                continue

            if result.converted:
                log.info(
                    "Image converted",
                    strategy=strategy.name,
                    attempts=len(failures) + 1,
                    resolution=result.resolution,
                )
                return result

            degraded = NormalizationDegraded("; ".join(failures) or None)
            log.warning(
                "All conversion attempts failed, using original file",
                reason=degraded.detail,
                category=degraded.category.value,
            )
            return result.model_copy(update={"degraded_reason": degraded.detail})

        # Unreachable while PassthroughStrategy closes the list.
        return PassthroughStrategy().apply(asset, asset.path, self.canonical_size)
