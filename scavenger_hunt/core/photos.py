"""
Photo encoding for found items.
"""
import io

from PIL import Image, UnidentifiedImageError


DEFAULT_JPEG_QUALITY = 70


class PhotoEncodingError(ValueError):
    """Raised when captured image bytes cannot be decoded."""


def encode_photo(image_bytes: bytes, quality: int = DEFAULT_JPEG_QUALITY) -> bytes:
    """Re-encode any readable image as a JPEG at ``quality``."""
    if not image_bytes:
        raise PhotoEncodingError("No image data")

    try:
        with Image.open(io.BytesIO(image_bytes)) as img:
            img = img.convert("RGB")
            buf = io.BytesIO()
            img.save(buf, format="JPEG", quality=quality)
    except (UnidentifiedImageError, OSError) as e:
        raise PhotoEncodingError(f"Could not decode image: {e}") from e

    return buf.getvalue()
