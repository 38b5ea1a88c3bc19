"""
Reading input images and writing the resulting JPEG.
"""

import logging
import os
import stat
import tempfile
from pathlib import Path
from typing import Union

from PIL import Image

from crush.errors import DecodeError, WriteError

log = logging.getLogger(__name__)

PathLike = Union[str, Path]


def decode_image(path: PathLike) -> Image.Image:
    """
    Open and fully decode an image file.

    Raises:
        DecodeError: missing file, unsupported format or corrupt data.
    """
    path = Path(path)
    if not path.is_file():
        raise DecodeError(f"Input file does not exist: {path}")

    try:
        with Image.open(path) as img:
            # load() reads the pixel data now, so truncated files fail here
            img.load()
            # detach from the file handle closed by the with block
            return img.copy()
    except Image.DecompressionBombError as exc:
        raise DecodeError(f"Image is too large to decode safely: {path}") from exc
    except OSError as exc:
        raise DecodeError(f"Cannot decode image {path}: {exc}") from exc


def _output_mode(path: Path) -> int:
    """Mode a plain open(path, "wb") would leave the file with."""
    if path.exists():
        return stat.S_IMODE(path.stat().st_mode)
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


def write_result_file(buffer: bytes, path: PathLike) -> Path:
    """
    Write the JPEG bytes to path, replacing any existing file.

    The data goes to a temporary file next to the destination first and is
    moved into place only once fully written.
    """
    path = Path(path)
    tmp_name = None
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{path.name}.", suffix=".tmp", dir=path.parent
        )
        with os.fdopen(fd, "wb") as f:
            f.write(buffer)
        os.chmod(tmp_name, _output_mode(path))
        os.replace(tmp_name, path)
        tmp_name = None
    except OSError as exc:
        raise WriteError(f"Cannot write {path}: {exc}") from exc
    finally:
        if tmp_name is not None and os.path.exists(tmp_name):
            os.unlink(tmp_name)

    log.info("Resized image saved to %s", path)
    return path
