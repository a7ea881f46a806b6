"""Exceptions raised by standard-cache."""


class CacheError(Exception):
    """Base class for all cache errors."""


class InvalidArgumentError(CacheError, ValueError):
    """An argument of the wrong kind was passed to a cache item.

    Args:
        message: Human readable description
        received: Name of the type that was actually passed
    """

    def __init__(self, message: str, received: str | None = None):
        super().__init__(message)
        self.received = received


class ImmutableObjectError(CacheError, AttributeError):
    """An attempt was made to change an immutable object from outside."""

    def __init__(self, attribute: str, type_name: str):
        super().__init__(f"Cannot modify attribute '{attribute}' of immutable {type_name}")
        self.attribute = attribute
