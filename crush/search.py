"""
Binary search over JPEG quality for a byte-size target.

The search starts at a high quality (90 by default) rather than the middle of
the 0..100 range and halves the window after every encode. It returns the
buffer produced by the last encode, which may be slightly larger than the
target: the search does not fall back to an earlier under-budget buffer.

Encoded size is assumed to grow with quality. An image for which that does not
hold can make the search settle on a suboptimal quality; this is not detected.
"""

import logging
from typing import Callable, List, NamedTuple, Optional

from PIL import Image

from crush.config import INITIAL_QUALITY
from crush.encode import encode_jpeg

log = logging.getLogger(__name__)

MIN_QUALITY = 0
MAX_QUALITY = 100


class SearchAttempt(NamedTuple):
    quality: int
    size: int


def encode_for_size_target(
    image: Image.Image,
    size_target: int,
    initial_quality: int = INITIAL_QUALITY,
    encoder: Optional[Callable[[Image.Image, int], bytes]] = None,
    attempts: Optional[List[SearchAttempt]] = None,
) -> bytes:
    """
    Encode the image as a JPEG whose size is close to size_target bytes.

    Args:
        image: Image to encode; it is only read, never modified.
        size_target: Desired size in bytes.
        initial_quality: First quality to try.
        encoder: Function (image, quality) -> JPEG bytes, encode_jpeg if None.
        attempts: If given, every (quality, size) tried is appended to it.

    Returns:
        JPEG bytes from the last encode. May exceed size_target, by a lot
        when even the lowest quality does not fit.
    """
    if isinstance(size_target, bool) or not isinstance(size_target, int) or size_target <= 0:
        raise ValueError(f"size_target must be a positive int, got {size_target!r}")
    if not MIN_QUALITY <= initial_quality <= MAX_QUALITY:
        raise ValueError(f"initial_quality must be in 0..100, got {initial_quality}")
    if encoder is None:
        encoder = encode_jpeg

    max_quality = MAX_QUALITY
    min_quality = MIN_QUALITY
    test_quality = initial_quality
    buffer = b""

    while max_quality - min_quality > 1:
        buffer = encoder(image, test_quality)
        test_size = len(buffer)
        log.info("Image file size is: %d at %d%% quality.", test_size, test_quality)
        if attempts is not None:
            attempts.append(SearchAttempt(test_quality, test_size))

        if test_size > size_target:
            max_quality = test_quality
        else:
            min_quality = test_quality
        test_quality = (max_quality + min_quality) // 2

    return buffer
