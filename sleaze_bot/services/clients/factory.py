# sleaze_bot/services/clients/factory.py
from __future__ import annotations

from sleaze_bot.data.settings import Settings
from sleaze_bot.services.errors import ConfigurationError

from .base import ImageGenerationClient
from .mock_ai_client import MockAIClient
from .openai_responses_client import OpenAIResponsesClient

_CLIENT_CLASSES: dict[str, type[ImageGenerationClient]] = {
    "mock": MockAIClient,
    "openai": OpenAIResponsesClient,
}


def get_generation_client(settings: Settings) -> ImageGenerationClient:
    """Creates the generation client selected in the settings."""
    client_name = settings.generation.client.lower()
    client_class = _CLIENT_CLASSES.get(client_name)
    if not client_class:
        raise ValueError(f"Unknown client type specified in config: '{client_name}'")

    if client_class is MockAIClient:
        return MockAIClient()

    if not settings.openai_api_key or not settings.openai_api_key.get_secret_value():
        raise ConfigurationError("Missing API key for OpenAI. Set env var OPENAI_API_KEY.")

    return OpenAIResponsesClient(
        api_key=settings.openai_api_key.get_secret_value(),
        model=settings.generation.model,
        image_detail=settings.generation.image_detail,
        base_url=str(settings.generation.base_url),
    )
