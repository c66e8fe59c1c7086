from __future__ import annotations

import secrets
import time
from pathlib import Path
from typing import Optional

from werkzeug.datastructures import FileStorage
from werkzeug.utils import secure_filename

from ..core.constants import DEFAULT_PHOTO_EXTENSION, PHOTO_EXTENSIONS, UPLOADS_URL_PREFIX
from ..core.exceptions import ValidationError


class PhotoStorage:
    """Saves check-in / check-out photos to a local directory.

    Returns the public reference (``/uploads/<name>``) that is stored on the
    attendance record.
    """

    def __init__(self, upload_dir: str | Path):
        self._dir = Path(upload_dir)

    @property
    def directory(self) -> Path:
        return self._dir

    def _unique_name(self, original: str) -> str:
        # only image types are kept; anything else is served back as a jpeg
        ext = Path(secure_filename(original or "")).suffix.lower()
        if ext not in PHOTO_EXTENSIONS:
            ext = DEFAULT_PHOTO_EXTENSION
        return f"{int(time.time() * 1000)}-{secrets.randbelow(10**9)}{ext}"

    def save(self, upload: Optional[FileStorage]) -> str:
        if upload is None or not upload.filename:
            raise ValidationError("Photo is required")

        self._dir.mkdir(parents=True, exist_ok=True)
        name = self._unique_name(upload.filename)
        upload.save(str(self._dir / name))
        return UPLOADS_URL_PREFIX + name

    def discard(self, photo_ref: str) -> None:
        """Delete a stored photo by its public reference; unknown references are ignored."""
        if not photo_ref or not photo_ref.startswith(UPLOADS_URL_PREFIX):
            return
        name = secure_filename(photo_ref[len(UPLOADS_URL_PREFIX):])
        if name:
            (self._dir / name).unlink(missing_ok=True)
