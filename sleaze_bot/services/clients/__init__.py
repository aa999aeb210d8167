from .base import ImageGenerationClient
from .factory import get_generation_client
from .mock_ai_client import MockAIClient
from .openai_responses_client import OpenAIResponsesClient

__all__ = [
    "ImageGenerationClient",
    "MockAIClient",
    "OpenAIResponsesClient",
    "get_generation_client",
]
