"""In-process key-value store."""

import copy
from typing import Any, Iterable, Mapping

from fitform.storage.base import KeyValueStore


class InMemoryStore(KeyValueStore):
    """Dict-backed store.  Values are deep-copied on the way in and out."""

    def __init__(self, initial: Mapping[str, Any] | None = None):
        self._data: dict[str, Any] = copy.deepcopy(dict(initial or {}))

    def get(self, key: str, default: Any = None) -> Any:
        if key not in self._data:
            return default
        return copy.deepcopy(self._data[key])

    def set_many(self, values: Mapping[str, Any]) -> None:
        self._data.update(copy.deepcopy(dict(values)))

    def remove_many(self, keys: Iterable[str]) -> None:
        for key in keys:
            self._data.pop(key, None)

    def keys(self) -> list[str]:
        return sorted(self._data)
