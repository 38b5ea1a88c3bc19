"""
crush: re-encode an image as a JPEG that fits a byte budget.
"""

from crush.encode import encode_jpeg
from crush.errors import (
    CrushError,
    DecodeError,
    DimensionError,
    EncodeError,
    SizeTargetParseError,
    WriteError,
)
from crush.pipeline import crush_image
from crush.rescale import rescale
from crush.search import encode_for_size_target
from crush.sizes import parse_size_target

__version__ = "1.0.0"

__all__ = [
    "CrushError",
    "DecodeError",
    "DimensionError",
    "EncodeError",
    "SizeTargetParseError",
    "WriteError",
    "crush_image",
    "encode_for_size_target",
    "encode_jpeg",
    "parse_size_target",
    "rescale",
]
