"""
Downscale images so neither side exceeds a bound, keeping the aspect ratio.
"""

from typing import Tuple

from PIL import Image

from crush.errors import DimensionError


def fit_dimensions(width: int, height: int, max_dimension: int) -> Tuple[int, int]:
    """
    Return the (width, height) an image should have to fit inside a
    max_dimension x max_dimension box. Never enlarges.
    """
    if max_dimension <= 0:
        raise ValueError(f"max_dimension must be positive, got {max_dimension}")
    if width <= 0 or height <= 0:
        raise DimensionError(f"Image has a zero-area size: {width}x{height}")

    if width <= max_dimension and height <= max_dimension:
        return width, height

    aspect_ratio = width / height
    if aspect_ratio > 1.0:
        new_width = max_dimension
        new_height = round(max_dimension / aspect_ratio)
    else:
        new_height = max_dimension
        new_width = round(max_dimension * aspect_ratio)

    # very thin strips would otherwise round down to 0 px
    return max(1, new_width), max(1, new_height)


def rescale(image: Image.Image, max_dimension: int) -> Image.Image:
    """
    Scale the image down with a Lanczos filter so that both sides are at most
    max_dimension. An image that already fits is returned as is.
    """
    new_size = fit_dimensions(image.width, image.height, max_dimension)
    if new_size == image.size:
        return image
    # Pillow resizes "1" and "P" images with nearest-neighbour whatever filter is asked for
    if image.mode in ("1", "P", "PA"):
        has_alpha = image.mode == "PA" or "transparency" in image.info
        image = image.convert("RGBA" if has_alpha else "RGB")
    return image.resize(new_size, Image.Resampling.LANCZOS)
