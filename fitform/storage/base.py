"""
Abstract key-value store.

The session state is persisted as a flat set of keys.  Values are
JSON-compatible (primitives, lists, dicts).  A missing key yields the
caller's default, never an error.
"""

from abc import ABC, abstractmethod
from typing import Any, Iterable, Mapping


class KeyValueStore(ABC):
    """Interface every store backend implements."""

    @abstractmethod
    def get(self, key: str, default: Any = None) -> Any:
        """Return the decoded value for *key*, or *default*."""
        ...

    @abstractmethod
    def set_many(self, values: Mapping[str, Any]) -> None:
        """Write all *values* together."""
        ...

    @abstractmethod
    def remove_many(self, keys: Iterable[str]) -> None:
        """Remove all *keys* together.  Unknown keys are ignored."""
        ...

    def set(self, key: str, value: Any) -> None:
        self.set_many({key: value})

    def remove(self, key: str) -> None:
        self.remove_many([key])
