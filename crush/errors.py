"""
Exceptions raised by crush. The CLI catches CrushError and exits non-zero.
"""


class CrushError(Exception):
    """Base class for every failure that aborts a crush run."""


class DecodeError(CrushError):
    """Input file is missing, unreadable or not a supported image."""


class DimensionError(CrushError):
    """Image has (or would end up with) a zero-area size."""


class EncodeError(CrushError):
    """The JPEG codec could not encode the image."""


class SizeTargetParseError(CrushError):
    """Size string such as "200k" could not be parsed."""


class WriteError(CrushError):
    """Output file could not be written."""
