"""Local file storage for todo attachments.

Bytes are written under a single managed directory using generated names.
Deletion only ever touches files inside that directory.
"""

import base64
import binascii
import enum
import logging
import re
import uuid
from dataclasses import dataclass
from pathlib import Path, PurePath

from app.core.config import settings
from app.exceptions.file import InvalidFileError

logger = logging.getLogger(__name__)

DATA_URL_PATTERN = re.compile(r"^data:([A-Za-z\-+/]+);base64,(.+)$")
_EXTENSION_PATTERN = re.compile(r"^[A-Za-z0-9]+$")
DEFAULT_EXTENSION = "bin"


@dataclass(frozen=True)
class DataURL:
    mimetype: str
    data: bytes


@dataclass(frozen=True)
class StoredFile:
    """Where an upload ended up."""

    path: str
    url: str
    size: int
    mimetype: str


class DeleteResult(str, enum.Enum):
    REMOVED = "removed"
    MISSING = "missing"
    REFUSED = "refused"
    FAILED = "failed"


def parse_data_url(data_url: str) -> DataURL:
    """Split a ``data:<mimetype>;base64,<payload>`` string and decode the payload."""
    match = DATA_URL_PATTERN.match(data_url or "")
    if not match:
        raise InvalidFileError("Invalid base64 data URL")

    mimetype, payload = match.groups()
    try:
        data = base64.b64decode(payload, validate=True)
    except (binascii.Error, ValueError) as e:
        raise InvalidFileError("Invalid base64 payload") from e
    return DataURL(mimetype=mimetype, data=data)


def extension_for(filename: str, mimetype: str | None) -> str:
    """Pick a storage extension: filename suffix, then mimetype subtype, then ``bin``."""
    suffix = PurePath(filename or "").suffix.lstrip(".")
    if _EXTENSION_PATTERN.match(suffix):
        return suffix

    subtype = (mimetype or "").partition("/")[2]
    if _EXTENSION_PATTERN.match(subtype):
        return subtype

    return DEFAULT_EXTENSION


class FileStorage:
    """Reads and writes attachment bytes inside the managed upload directory."""

    def __init__(self, upload_dir: str | Path, upload_url: str):
        self.upload_dir = Path(upload_dir).resolve()
        self.upload_url = "/" + upload_url.strip("/")

    def ensure_upload_dir(self) -> None:
        self.upload_dir.mkdir(parents=True, exist_ok=True)

    def url_for(self, path: str | Path) -> str:
        return f"{self.upload_url}/{PurePath(path).name}"

    def save_data_url(self, data_url: str, filename: str, max_size: int | None = None) -> StoredFile:
        """Decode ``data_url`` and write it under a freshly generated name.

        Raises:
            InvalidFileError: malformed envelope or payload over ``max_size``.
        """
        parsed = parse_data_url(data_url)
        if max_size is not None and len(parsed.data) > max_size:
            raise InvalidFileError(f"File exceeds the maximum size of {max_size} bytes")

        self.ensure_upload_dir()

        stored_name = f"{uuid.uuid4().hex}.{extension_for(filename, parsed.mimetype)}"
        target = self.upload_dir / stored_name
        target.write_bytes(parsed.data)

        logger.info("Stored %d bytes for %r as %s", len(parsed.data), filename, stored_name)
        return StoredFile(
            path=str(target),
            url=self.url_for(target),
            size=len(parsed.data),
            mimetype=parsed.mimetype,
        )

    def is_managed(self, path: str | Path) -> bool:
        """True if ``path`` resolves to a location strictly inside the upload directory."""
        try:
            resolved = Path(path).resolve()
        except (OSError, RuntimeError):
            return False
        return resolved != self.upload_dir and resolved.is_relative_to(self.upload_dir)

    def delete(self, path: str | Path) -> DeleteResult:
        """Remove a stored file. Never raises."""
        if not path or not self.is_managed(path):
            logger.error("Refusing to delete file outside of upload directory: %s", path)
            return DeleteResult.REFUSED

        try:
            Path(path).resolve().unlink()
        except FileNotFoundError:
            logger.warning("File already absent from upload directory: %s", path)
            return DeleteResult.MISSING
        except OSError:
            logger.exception("Error deleting file %s", path)
            return DeleteResult.FAILED

        logger.info("Deleted stored file %s", path)
        return DeleteResult.REMOVED


def get_file_storage() -> FileStorage:
    """Storage bound to the configured upload directory."""
    return FileStorage(settings.upload_dir, settings.upload_url)
