"""
Parse human-friendly byte counts such as "200000", "200k" or "1M".
"""

import re

from crush.errors import SizeTargetParseError

_SIZE_RE = re.compile(r"^\s*([0-9]+)\s*([km]?)\s*$", re.IGNORECASE)

_MULTIPLIERS = {
    "": 1,
    "k": 1000,
    "m": 1000000,
}


def parse_size_target(text: str) -> int:
    """
    Convert "<integer><optional unit>" into a byte count. Units are decimal:
    k = 1,000 and m = 1,000,000, case-insensitive.
    """
    match = _SIZE_RE.match(text or "")
    if match is None:
        raise SizeTargetParseError(
            f"Invalid size target {text!r}; expected e.g. 200000, 200k or 1M"
        )

    size = int(match.group(1)) * _MULTIPLIERS[match.group(2).lower()]
    if size <= 0:
        raise SizeTargetParseError(f"Size target must be positive, got {text!r}")
    return size
