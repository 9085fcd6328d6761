"""Decode uploaded bytes into an in-memory RGB raster."""

import io
import logging

from PIL import Image, UnidentifiedImageError

from wastesort.domain.exceptions import ImageDecodeError
from wastesort.utils.timing import timeit

logger = logging.getLogger(__name__)

@timeit(logger, "decode image")
def decode_image(data: bytes) -> Image.Image:
    """Decode image bytes with Pillow; raises ImageDecodeError on empty or corrupt data."""
    if not data:
        raise ImageDecodeError("Image data is empty", size_bytes=0)

    try:
        with Image.open(io.BytesIO(data)) as img:
            img.load()
            return img.convert("RGB")
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError, ValueError) as e:
        raise ImageDecodeError(
            f"Could not decode image: {e}",
            size_bytes=len(data)
        ).add_suggestion("Upload a JPEG, PNG, GIF, BMP or WebP image") from e
