"""
Decode -> rescale -> size-target search -> write.
"""

import logging
from pathlib import Path
from typing import Optional, Union

from crush.config import Settings
from crush.files import decode_image, write_result_file
from crush.rescale import rescale
from crush.search import encode_for_size_target

log = logging.getLogger(__name__)


def crush_image(
    input_path: Union[str, Path],
    output_path: Union[str, Path],
    size_target: int,
    settings: Optional[Settings] = None,
) -> Path:
    """
    Re-encode input_path as a JPEG of about size_target bytes at output_path.

    Nothing is written unless every earlier step succeeded.
    """
    settings = settings or Settings()

    img = decode_image(input_path)
    log.debug("Decoded %s: %dx%d %s", input_path, img.width, img.height, img.mode)

    resized = rescale(img, settings.max_dimension)
    if resized.size != img.size:
        log.info(
            "Scaled %dx%d down to %dx%d", img.width, img.height, resized.width, resized.height
        )

    buffer = encode_for_size_target(
        resized, size_target, initial_quality=settings.initial_quality
    )
    if len(buffer) > size_target:
        log.warning(
            "Result is %d bytes, %d over the %d byte target",
            len(buffer), len(buffer) - size_target, size_target,
        )

    return write_result_file(buffer, output_path)
