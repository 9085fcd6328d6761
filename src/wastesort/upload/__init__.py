"""Upload validation and decoding."""

from .decode import decode_image
from .validation import UploadValidator

__all__ = [
    "decode_image",
    "UploadValidator",
]
