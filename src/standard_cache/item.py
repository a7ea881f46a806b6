"""Cache item value object.

A CacheItem is created by a cache pool, handed to a caller and given back to
the pool. Whether it is a hit is decided once, at the first call to
``is_hit()``, and that answer is kept for the life of the item.
"""

import threading
from datetime import datetime, timedelta
from typing import Any

from standard_cache.config import CacheItemSettings
from standard_cache.exceptions import InvalidArgumentError
from standard_cache.immutable import ImmutableObject
from standard_cache.interfaces import CacheItemInterface
from standard_cache.utils import (
    MAX_UTC,
    MIN_UTC,
    Clock,
    add_period,
    get_logger,
    to_utc,
    utc_now,
)

logger = get_logger("item")


class CacheItem(ImmutableObject, CacheItemInterface):
    """Standard cache item.

    Args:
        key: Unique key identifier of the item
        value: Content to store
        hit: Pass False if the pool lookup was a miss; any other value leaves
            the hit to be decided from the expiration
        clock: Zero-argument callable returning the current datetime
        settings: Settings used by ``expires_after(None)``

    Items can be pickled and deep-copied as long as the clock can; the
    internal lock is recreated on unpickling.
    """

    def __init__(
        self,
        key: str,
        value: Any,
        hit: bool | None = None,
        *,
        clock: Clock | None = None,
        settings: CacheItemSettings | None = None,
    ) -> None:
        self._mutate("_key", key)
        self._mutate("_value", value)
        self._mutate("_hit", False if hit is False else None)
        self._mutate("_expires", None)
        self._mutate("_clock", clock or utc_now)
        self._mutate("_settings", settings or CacheItemSettings.get_default())
        self._mutate("_lock", threading.Lock())

    def __getstate__(self) -> dict[str, Any]:
        state = self.__dict__.copy()
        del state["_lock"]
        return state

    def __setstate__(self, state: dict[str, Any]) -> None:
        for name, value in state.items():
            self._mutate(name, value)
        self._mutate("_lock", threading.Lock())

    def __repr__(self) -> str:
        return f"CacheItem(key={self._key!r}, expires={self._expires!r}, hit={self._hit!r})"

    @property
    def key(self) -> str:
        """The key for this cache item."""
        return self._key

    @property
    def expiration(self) -> datetime | None:
        """The expiration instant in UTC, or None if the item never expires."""
        return self._expires

    def get_key(self) -> str:
        return self._key

    def get(self) -> Any:
        return self._value if self.is_hit() else None

    def set(self, value: Any) -> "CacheItem":
        self._mutate("_value", value)
        return self

    def is_hit(self) -> bool:
        """Confirm if the cache item lookup resulted in a cache hit.

        The first call compares the expiration with the current time and
        memoizes the result; later calls return the memoized value.
        """
        with self._lock:
            if self._hit is not None:
                return self._hit

            if self._expires is None:
                hit = True
            else:
                hit = self._expires >= to_utc(self._clock())

            self._mutate("_hit", hit)
            logger.debug("Cache item %r resolved as %s", self._key, "hit" if hit else "miss")
            return hit

    def expires_at(self, expiration: datetime | None) -> "CacheItem":
        """Set the expiration time for this cache item.

        Args:
            expiration: The point in time after which the item must be
                considered expired. None means now.

        Returns:
            The item itself

        Raises:
            InvalidArgumentError: If expiration is not None or a datetime
        """
        if expiration is None:
            expiration = self._clock()

        if not isinstance(expiration, datetime):
            received = type(expiration).__name__
            logger.warning("Rejected expiration for %r: %s", self._key, received)
            raise InvalidArgumentError(
                f'Value passed must be None or a datetime, "{received}" passed instead',
                received=received,
            )

        self._mutate("_expires", to_utc(expiration))
        logger.debug("Cache item %r expires at %s", self._key, self._expires)
        return self

    def expires_after(self, time: int | timedelta | None) -> "CacheItem":
        """Set the expiration time for this cache item relative to now.

        Args:
            time: Period after which the item must be considered expired.
                An int is a number of seconds. None uses the configured
                default TTL, or removes the expiration if there is none.
                Periods reaching outside the datetime range are clamped.

        Returns:
            The item itself

        Raises:
            InvalidArgumentError: If time is not None, an int or a timedelta
        """
        if time is None:
            if self._settings.default_ttl is None:
                self._mutate("_expires", None)
                logger.debug("Cache item %r has no expiration", self._key)
                return self
            time = self._settings.default_ttl

        # bool is an int subclass but never a number of seconds
        if isinstance(time, int) and not isinstance(time, bool):
            try:
                time = timedelta(seconds=time)
            except OverflowError:
                return self.expires_at(MAX_UTC if time > 0 else MIN_UTC)

        if not isinstance(time, timedelta):
            received = type(time).__name__
            logger.warning("Rejected expiration period for %r: %s", self._key, received)
            raise InvalidArgumentError(
                f'Value passed must be None, an int or a timedelta, "{received}" passed instead',
                received=received,
            )

        return self.expires_at(add_period(self._clock(), time))

    @classmethod
    def get_type(cls) -> str:
        """Return the name of the object type."""
        return "CACHE_ITEM"
