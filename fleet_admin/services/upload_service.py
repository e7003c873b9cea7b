import logging
import secrets
import time
from pathlib import Path

from fastapi import UploadFile

from fleet_admin.utils.exceptions import ValidationException

logger = logging.getLogger(__name__)


class UploadService:
    """Stores admin image uploads under generated names in a single directory."""

    def __init__(self, upload_dir: Path, max_bytes: int = 5 * 1024 * 1024, url_prefix: str = "/uploads"):
        self.upload_dir = Path(upload_dir)
        self.max_bytes = max_bytes
        self.url_prefix = url_prefix.rstrip("/")

    def ensure(self) -> None:
        self.upload_dir.mkdir(parents=True, exist_ok=True)

    @staticmethod
    def make_filename(original_name: str | None) -> str:
        ext = Path(original_name or "").suffix.lower()
        return f"{int(time.time() * 1000)}-{secrets.token_hex(6)}{ext}"

    async def store(self, file: UploadFile | None) -> str:
        if file is None:
            raise ValidationException("No file")

        content_type = (file.content_type or "").split(";", 1)[0].strip().lower()
        if not content_type.startswith("image/"):
            logger.warning(f"Rejected upload {file.filename!r} with type {content_type!r}")
            raise ValidationException("Only images are allowed")

        raw = await file.read(self.max_bytes + 1)
        if len(raw) > self.max_bytes:
            logger.warning(f"Rejected upload {file.filename!r}: larger than {self.max_bytes} bytes")
            raise ValidationException("File too large")

        name = self.make_filename(file.filename)
        self.ensure()
        (self.upload_dir / name).write_bytes(raw)
        logger.info(f"Stored upload {name} ({len(raw)} bytes)")
        return f"{self.url_prefix}/{name}"
