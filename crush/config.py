"""
Runtime settings for crush.

Defaults can be overridden through the environment:

    CRUSH_MAX_DIMENSION    largest allowed width/height in pixels (2000)
    CRUSH_INITIAL_QUALITY  first JPEG quality the search tries (90)
    CRUSH_LOG_LEVEL        logging level name (INFO)
"""

import os
from dataclasses import dataclass

MAX_DIMENSION = 2000
INITIAL_QUALITY = 90
DEFAULT_SIZE_TARGET = "200000"
DEFAULT_OUTPUT = "output.jpg"


def _int_from_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


@dataclass(frozen=True)
class Settings:
    max_dimension: int = MAX_DIMENSION
    initial_quality: int = INITIAL_QUALITY
    default_size_target: str = DEFAULT_SIZE_TARGET
    default_output: str = DEFAULT_OUTPUT
    log_level: str = "INFO"

    def __post_init__(self):
        if self.max_dimension <= 0:
            raise ValueError(f"max_dimension must be positive, got {self.max_dimension}")
        if not 0 <= self.initial_quality <= 100:
            raise ValueError(f"initial_quality must be in 0..100, got {self.initial_quality}")

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from CRUSH_* environment variables."""
        return cls(
            max_dimension=_int_from_env("CRUSH_MAX_DIMENSION", MAX_DIMENSION),
            initial_quality=_int_from_env("CRUSH_INITIAL_QUALITY", INITIAL_QUALITY),
            log_level=os.getenv("CRUSH_LOG_LEVEL", "INFO").upper(),
        )
