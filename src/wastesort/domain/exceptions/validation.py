"""Input validation exceptions."""

from typing import Optional
from .base import WastesortError

class ValidationError(WastesortError):
    """Base class for validation errors."""

    def _get_default_error_code(self) -> str:
        return "VALIDATION_ERROR"


class FileValidationError(ValidationError):
    """Raised when an uploaded file fails validation."""

    def __init__(
        self,
        message: str,
        *,
        file_path: Optional[str] = None,
        validation_type: Optional[str] = None,
        **kwargs
    ):
        super().__init__(message, **kwargs)
        if file_path:
            self.add_context('file_path', file_path)
        if validation_type:
            self.add_context('validation_type', validation_type)

    def _get_default_error_code(self) -> str:
        return "FILE_VALIDATION_FAILED"


class UploadFileNotFoundError(FileValidationError):
    """Raised when the selected file doesn't exist."""
    def __init__(self, file_path: str, **kwargs):
        message = f"File not found: {file_path}"
        super().__init__(message, file_path=file_path, validation_type="existence_check", **kwargs)
        self.add_suggestion("Check if the file path is correct and accessible")

    def _get_default_error_code(self) -> str:
        return "FILE_NOT_FOUND"


class UnsupportedMediaTypeError(FileValidationError):
    """Raised when the selected file is not an image."""
    def __init__(self, file_path: str, media_type: Optional[str] = None, **kwargs):
        message = f"Invalid file type for {file_path}: {media_type or 'unknown'}"
        super().__init__(message, file_path=file_path, validation_type="type_check", **kwargs)
        self.add_context('media_type', media_type)
        self.add_suggestion("Please upload an image file (JPEG, PNG, etc.)")

    def _get_default_error_code(self) -> str:
        return "INVALID_FILE_TYPE"


class FileTooLargeError(FileValidationError):
    """Raised when the selected file exceeds the size cap."""
    def __init__(self, file_path: str, size_bytes: int, max_bytes: int, **kwargs):
        limit_mb = max_bytes / (1024 * 1024)
        message = f"File too large: {file_path} is {size_bytes} bytes (limit {limit_mb:g}MB)"
        super().__init__(message, file_path=file_path, validation_type="size_check", **kwargs)
        self.add_context('size_bytes', size_bytes)
        self.add_context('max_bytes', max_bytes)
        self.add_suggestion(f"Please upload an image smaller than {limit_mb:g}MB")

    def _get_default_error_code(self) -> str:
        return "FILE_TOO_LARGE"


class ImageDecodeError(ValidationError):
    """Raised when image bytes cannot be decoded into a raster."""
    def __init__(self, message: str, *, size_bytes: Optional[int] = None, **kwargs):
        super().__init__(message, **kwargs)
        if size_bytes is not None:
            self.add_context('size_bytes', size_bytes)

    def _get_default_error_code(self) -> str:
        return "IMAGE_DECODE_FAILED"
