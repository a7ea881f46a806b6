"""Cache item configuration."""

import tomllib
from pathlib import Path

from pydantic import BaseModel, Field

from standard_cache.utils import get_logger

logger = get_logger("config")


class CacheItemSettings(BaseModel):
    """Settings shared by the cache items a pool creates."""

    default_ttl: int | None = Field(
        default=None,
        ge=0,
        description="Seconds used when expires_after() is given None (None = never expire)",
    )

    @classmethod
    def get_default(cls) -> "CacheItemSettings":
        """Get default settings."""
        return cls()


def load_settings(path: Path) -> CacheItemSettings:
    """Load settings from the [cache] table of a TOML file.

    Args:
        path: Path to the TOML file

    Returns:
        Parsed settings, or the defaults if the file does not exist
    """
    if not path.exists():
        logger.debug("Settings file %s not found, using defaults", path)
        return CacheItemSettings.get_default()

    with open(path, "rb") as f:
        data = tomllib.load(f)

    return CacheItemSettings.model_validate(data.get("cache", {}))
