"""On-disk storage for ticket attachments."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import BinaryIO, Iterable
from uuid import uuid4

from helpdesk.core.config import Settings
from helpdesk.core.exceptions import UploadRejectedError

logger = logging.getLogger(__name__)

CHUNK_SIZE = 1024 * 1024


class AttachmentStorage:
    """Stores uploaded files under generated names in a single directory."""

    def __init__(
        self,
        upload_dir: Path | str,
        max_size: int,
        allowed_types: Iterable[str],
    ):
        self.upload_dir = Path(upload_dir)
        self.max_size = max_size
        self.allowed_types = frozenset(allowed_types)

    @classmethod
    def from_settings(cls, settings: Settings) -> "AttachmentStorage":
        return cls(
            upload_dir=settings.UPLOAD_DIR,
            max_size=settings.MAX_UPLOAD_SIZE,
            allowed_types=settings.ALLOWED_MIME_TYPES,
        )

    def ensure_dir(self) -> None:
        self.upload_dir.mkdir(parents=True, exist_ok=True)

    def path_for(self, filename: str) -> Path:
        return self.upload_dir / filename

    def is_allowed(self, mimetype: str) -> bool:
        base_type = mimetype.split(";", 1)[0].strip().lower()
        return base_type in self.allowed_types or base_type.startswith("text/")

    def save(self, source: BinaryIO, original_name: str, mimetype: str) -> tuple[str, int]:
        """Write an upload to disk and return ``(stored filename, size)``.

        The file is streamed in chunks; once the size cap is exceeded the
        partial file is removed and the upload is rejected.
        """
        if not self.is_allowed(mimetype):
            raise UploadRejectedError("File type not allowed")

        filename = f"{uuid4().hex}{Path(original_name).suffix}"
        file_path = self.path_for(filename)
        self.ensure_dir()

        size = 0
        try:
            with open(file_path, "wb") as f:
                while True:
                    chunk = source.read(CHUNK_SIZE)
                    if not chunk:
                        break
                    size += len(chunk)
                    if size > self.max_size:
                        raise UploadRejectedError(
                            f"File size exceeds maximum allowed size of "
                            f"{self.max_size / (1024 * 1024):.0f} MB"
                        )
                    f.write(chunk)
        except Exception:
            self.delete(filename)
            raise

        logger.debug(f"Stored upload {original_name!r} as {filename} ({size} bytes)")
        return filename, size

    def delete(self, filename: str) -> bool:
        """Remove a stored file; a file that is already gone is not an error."""
        file_path = self.path_for(filename)
        try:
            file_path.unlink()
        except FileNotFoundError:
            return False
        return True

    def exists(self, filename: str) -> bool:
        return self.path_for(filename).is_file()
