# sleaze_bot/services/clients/mock_ai_client.py
from __future__ import annotations

import asyncio
import io

import structlog
from PIL import Image, ImageOps

from sleaze_bot.dto import GenerationResult

from .base import ImageGenerationClient

logger = structlog.get_logger(__name__)


class MockAIClient(ImageGenerationClient):
    """
    Offline stand-in for the generation service.

    Returns the input image with a blue-purple tint, or a flat placeholder
    when the input cannot be decoded. Useful for local runs without a key.
    """

    def __init__(self, delay: float = 0.0, fallback_color: str = "purple") -> None:
        self.delay = delay
        self.fallback_color = fallback_color

    async def generate(
        self,
        instruction: str,
        image_bytes: bytes,
        mime_type: str,
    ) -> GenerationResult:
        logger.info("MOCK Images: Simulating image generation...", mime_type=mime_type)
        if self.delay:
            await asyncio.sleep(self.delay)

        try:
            with Image.open(io.BytesIO(image_bytes)) as src:
                img = ImageOps.colorize(src.convert("L"), black="#120a2a", white="#9fb4ff")
        except Exception:
            logger.warning("MOCK Images: Input not decodable, using placeholder.")
            img = Image.new("RGB", (1024, 1024), self.fallback_color)

        buffer = io.BytesIO()
        img.save(buffer, format="PNG")
        return GenerationResult(image_bytes=buffer.getvalue(), model="mock", generation_time_ms=0)
