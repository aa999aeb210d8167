# sleaze_bot/services/result_store.py
import uuid
from pathlib import Path

import structlog

from sleaze_bot.data.constants import RESULT_EXTENSION
from sleaze_bot.dto import StoredImage
from sleaze_bot.services.errors import ImageNotFound

logger = structlog.get_logger(__name__)


class ResultStore:
    """Durable storage of generated images, one PNG file per identifier."""

    def __init__(self, base_dir: Path) -> None:
        self.base_dir = Path(base_dir)

    def ensure(self) -> None:
        self.base_dir.mkdir(parents=True, exist_ok=True)

    def _path_for(self, image_id: str) -> Path:
        # Only canonical UUIDs map to files; anything else cannot name a result.
        try:
            canonical = str(uuid.UUID(image_id))
        except (ValueError, TypeError, AttributeError):
            raise ImageNotFound(f"Unknown image id: {image_id!r}") from None
        if canonical != image_id:
            raise ImageNotFound(f"Unknown image id: {image_id!r}")
        return self.base_dir / f"{canonical}{RESULT_EXTENSION}"

    def store(self, image_bytes: bytes) -> StoredImage:
        image_id = str(uuid.uuid4())
        path = self._path_for(image_id)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(image_bytes)
        logger.info("Result stored", image_id=image_id, size=len(image_bytes))
        return StoredImage(image_id=image_id, path=path)

    def retrieve(self, image_id: str) -> bytes:
        path = self._path_for(image_id)
        try:
            return path.read_bytes()
        except FileNotFoundError:
            raise ImageNotFound(f"Unknown image id: {image_id!r}") from None

