# sleaze_bot/services/clients/base.py
import base64
from abc import ABC, abstractmethod

from sleaze_bot.dto import GenerationResult


def to_data_url(image_bytes: bytes, mime_type: str) -> str:
    """Encodes image bytes as an inline `data:` reference."""
    encoded = base64.b64encode(image_bytes).decode("ascii")
    return f"data:{mime_type};base64,{encoded}"


class ImageGenerationClient(ABC):
    """
    Turns (instruction, image) into a generated image.

    Implementations raise `GenerationFailure` when the service answers without
    a usable image. The call is made once; retrying is up to the caller.
    """

    @abstractmethod
    async def generate(
        self,
        instruction: str,
        image_bytes: bytes,
        mime_type: str,
    ) -> GenerationResult:
        raise NotImplementedError

    async def close(self) -> None:
        return None
