"""Cache item contract shared with cache pool implementations."""

from abc import ABC, abstractmethod
from datetime import datetime, timedelta
from typing import Any


class CacheItemInterface(ABC):
    """Interface for an item stored in and returned by a cache pool.

    Items are created by the pool. Callers read and update them, then hand
    them back to the pool to be saved.
    """

    @abstractmethod
    def get_key(self) -> str:
        """Return the key for the current cache item."""
        pass

    @abstractmethod
    def get(self) -> Any:
        """Return the value of the item, or None on a cache miss."""
        pass

    @abstractmethod
    def set(self, value: Any) -> "CacheItemInterface":
        """Set the value represented by this cache item.

        Args:
            value: The value to be stored

        Returns:
            The item itself
        """
        pass

    @abstractmethod
    def is_hit(self) -> bool:
        """Confirm if the cache item lookup resulted in a cache hit."""
        pass

    @abstractmethod
    def expires_at(self, expiration: datetime | None) -> "CacheItemInterface":
        """Set the point in time after which the item is considered expired.

        Args:
            expiration: Expiration instant, or None for now

        Returns:
            The item itself
        """
        pass

    @abstractmethod
    def expires_after(self, time: int | timedelta | None) -> "CacheItemInterface":
        """Set the period of time from now after which the item is expired.

        Args:
            time: Seconds as an int, a timedelta, or None for the default

        Returns:
            The item itself
        """
        pass
