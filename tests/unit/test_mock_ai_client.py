"""Tests for the offline mock generation client."""

import io

import pytest
from PIL import Image

from sleaze_bot.services.clients import MockAIClient
from tests.conftest import make_image_bytes


@pytest.mark.asyncio
async def test_tints_input_image():
    result = await MockAIClient().generate("x", make_image_bytes((40, 20), "PNG"), "image/png")

    with Image.open(io.BytesIO(result.image_bytes)) as img:
        assert img.format == "PNG"
        assert img.size == (40, 20)
    assert result.model == "mock"


@pytest.mark.asyncio
async def test_undecodable_input_gives_placeholder():
    result = await MockAIClient().generate("x", b"garbage", "image/jpeg")

    with Image.open(io.BytesIO(result.image_bytes)) as img:
        assert img.size == (1024, 1024)
