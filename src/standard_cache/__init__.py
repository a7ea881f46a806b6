"""standard-cache: a PSR-6 style cache item for cache pool implementations."""

from standard_cache.config import CacheItemSettings, load_settings
from standard_cache.exceptions import CacheError, ImmutableObjectError, InvalidArgumentError
from standard_cache.immutable import ImmutableObject
from standard_cache.interfaces import CacheItemInterface
from standard_cache.item import CacheItem

__version__ = "0.1.0"

__all__ = [
    "CacheError",
    "CacheItem",
    "CacheItemInterface",
    "CacheItemSettings",
    "ImmutableObject",
    "ImmutableObjectError",
    "InvalidArgumentError",
    "load_settings",
]
