# File: sleaze_bot/services/clients/openai_responses_client.py
from __future__ import annotations

import base64
import binascii
import time
from typing import Any

import structlog
from openai import AsyncOpenAI

from sleaze_bot.dto import GenerationResult
from sleaze_bot.services.errors import GenerationFailure

from .base import ImageGenerationClient, to_data_url

logger = structlog.get_logger(__name__)

IMAGE_GENERATION_TOOL = {"type": "image_generation"}
IMAGE_RESULT_TYPE = "image_generation_call"


def _field(item: Any, name: str) -> Any:
    """Reads a field from an SDK model or a plain dict."""
    if isinstance(item, dict):
        return item.get(name)
    return getattr(item, name, None)


def extract_image_payloads(output: Any) -> list[str | None]:
    """Returns the payloads of all image-generation items, in response order."""
    return [
        _field(item, "result")
        for item in output or []
        if _field(item, "type") == IMAGE_RESULT_TYPE
    ]


def build_input(instruction: str, data_url: str, detail: str) -> list[dict[str, Any]]:
    return [
        {
            "role": "user",
            "content": [
                {"type": "input_text", "text": instruction},
                {"type": "input_image", "image_url": data_url, "detail": detail},
            ],
        }
    ]


class OpenAIResponsesClient(ImageGenerationClient):
    """Image-to-image generation through the Responses API image tool."""

    def __init__(
        self,
        api_key: str,
        model: str = "gpt-4.1-mini",
        image_detail: str = "high",
        base_url: str | None = None,
        client: AsyncOpenAI | None = None,
    ) -> None:
        if not api_key and client is None:
            raise ValueError("An OpenAI API key is required.")
        self.model = model
        self.image_detail = image_detail
        self._client = client or AsyncOpenAI(api_key=api_key, base_url=base_url)
        logger.info("OpenAI Responses client initialized.", model=model)

    async def generate(
        self,
        instruction: str,
        image_bytes: bytes,
        mime_type: str,
    ) -> GenerationResult:
        log = logger.bind(model=self.model, mime_type=mime_type, image_size=len(image_bytes))
        start_time = time.monotonic()

        log.info("Sending request to OpenAI Responses API")
        response = await self._client.responses.create(
            model=self.model,
            input=build_input(instruction, to_data_url(image_bytes, mime_type), self.image_detail),
            tools=[IMAGE_GENERATION_TOOL],
        )
        elapsed_ms = int((time.monotonic() - start_time) * 1000)

        output = _field(response, "output")
        payloads = extract_image_payloads(output)
        if not payloads:
            log.error(
                "No image generation item in response.",
                output_types=[_field(item, "type") for item in output or []],
                generation_time_ms=elapsed_ms,
            )
            raise GenerationFailure("No image generated in response")

        payload = payloads[0]
        if not payload:
            log.error("Image generation item carries no result.", generation_time_ms=elapsed_ms)
            raise GenerationFailure("Image generation returned an empty result")

        try:
            generated = base64.b64decode(payload, validate=True)
        except (binascii.Error, ValueError) as e:
            log.error("Image generation result is not valid base64.", error=str(e))
            raise GenerationFailure("Image generation returned an undecodable result") from e

        if not generated:
            raise GenerationFailure("Image generation returned an empty result")

        log.info("Image processed with OpenAI", generation_time_ms=elapsed_ms, result_size=len(generated))
        return GenerationResult(
            image_bytes=generated,
            model=self.model,
            generation_time_ms=elapsed_ms,
        )

    async def close(self) -> None:
        await self._client.close()
