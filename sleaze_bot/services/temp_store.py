# sleaze_bot/services/temp_store.py
import uuid
from pathlib import Path

import structlog

from sleaze_bot.data.constants import RESULT_EXTENSION

logger = structlog.get_logger(__name__)


class TemporaryStore:
    """
    Scratch directory for raw uploads and their normalized copies.

    Names are random UUIDs, so concurrent requests never share a file.
    Deleting is idempotent: a file that is already gone is not an error.
    """

    def __init__(self, base_dir: Path) -> None:
        self.base_dir = Path(base_dir)

    def ensure(self) -> None:
        self.base_dir.mkdir(parents=True, exist_ok=True)

    def new_upload_path(self, original_filename: str | None = None) -> Path:
        suffix = Path(original_filename).suffix.lower() if original_filename else ""
        return self.base_dir / f"{uuid.uuid4()}{suffix}"

    def new_converted_path(self) -> Path:
        return self.base_dir / f"{uuid.uuid4()}_converted{RESULT_EXTENSION}"

    def discard(self, path: Path | None) -> bool:
        """Removes a temporary file. Returns True if something was deleted."""
        if path is None:
            return False
        path = Path(path)
        try:
            path.unlink()
        except FileNotFoundError:
            return False
        except OSError:
            logger.exception("Failed to delete temporary file", path=str(path))
            return False
        logger.debug("Temporary file deleted", path=str(path))
        return True
