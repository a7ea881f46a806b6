"""Base class for objects that only change through their own mutators."""

from abc import ABC, abstractmethod
from typing import Any, NoReturn

from standard_cache.exceptions import ImmutableObjectError


class ImmutableObject(ABC):
    """Object whose attributes cannot be assigned or deleted from outside.

    Subclasses update their own state with ``_mutate`` from inside the
    methods they declare as setters.
    """

    def __setattr__(self, name: str, value: Any) -> NoReturn:
        raise ImmutableObjectError(name, type(self).__name__)

    def __delattr__(self, name: str) -> NoReturn:
        raise ImmutableObjectError(name, type(self).__name__)

    def _mutate(self, name: str, value: Any) -> None:
        object.__setattr__(self, name, value)

    @classmethod
    @abstractmethod
    def get_type(cls) -> str:
        """Return the name of the object type."""
