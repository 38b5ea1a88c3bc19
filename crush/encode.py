"""
In-memory JPEG encoding at a given quality.
"""

import io

from PIL import Image

from crush.errors import EncodeError


def encode_jpeg(image: Image.Image, quality: int) -> bytes:
    """
    Encode the image as a baseline RGB JPEG and return the file bytes.

    Alpha is dropped. No timestamps, EXIF or comments are written, so the same
    image and quality always give the same bytes.
    """
    if isinstance(quality, bool) or not isinstance(quality, int):
        raise ValueError(f"quality must be an int, got {quality!r}")
    if not 0 <= quality <= 100:
        raise ValueError(f"quality must be in 0..100, got {quality}")
    if image.width <= 0 or image.height <= 0:
        raise EncodeError(f"Cannot encode a {image.width}x{image.height} image")

    # convert() always returns a new image, so its info can be trimmed freely
    rgb = image.convert("RGB")
    rgb.info.pop("comment", None)

    buf = io.BytesIO()
    try:
        rgb.save(buf, format="JPEG", quality=quality, optimize=True)
    except (OSError, ValueError) as exc:
        raise EncodeError(f"JPEG encoding failed at quality {quality}: {exc}") from exc
    return buf.getvalue()
