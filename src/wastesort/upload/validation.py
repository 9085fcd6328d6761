"""Validation of a user-selected file before any classification is attempted."""

import logging
import mimetypes
import os
from pathlib import Path
from typing import Optional, Union

from wastesort.config.settings import UploadSettings
from wastesort.domain.exceptions import (
    FileTooLargeError,
    UnsupportedMediaTypeError,
    UploadFileNotFoundError,
)

logger = logging.getLogger(__name__)

# mimetypes does not know webp on every platform
mimetypes.add_type("image/webp", ".webp")

class UploadValidator:
    """Checks media type and size against fixed limits."""

    def __init__(self, settings: Optional[UploadSettings] = None):
        self.settings = settings or UploadSettings()

    @staticmethod
    def guess_media_type(path: Union[str, Path]) -> Optional[str]:
        media_type, _ = mimetypes.guess_type(str(path))
        return media_type

    def validate_media_type(self, path: Union[str, Path], media_type: Optional[str] = None) -> str:
        media_type = media_type or self.guess_media_type(path)
        if not media_type or not media_type.startswith(self.settings.media_type_prefix):
            raise UnsupportedMediaTypeError(str(path), media_type)
        return media_type

    def validate_size(self, path: Union[str, Path], size_bytes: int) -> int:
        if size_bytes > self.settings.max_bytes:
            raise FileTooLargeError(str(path), size_bytes, self.settings.max_bytes)
        return size_bytes

    def validate(self, path: Union[str, Path]) -> Path:
        """
        Validate a file on disk.

        Returns the resolved path; raises a FileValidationError subclass.
        """
        p = Path(path).expanduser()
        if not p.is_file():
            raise UploadFileNotFoundError(str(path))

        self.validate_media_type(p)
        self.validate_size(p, os.path.getsize(p))
        logger.debug("Upload accepted: %s", p)
        return p.resolve()
