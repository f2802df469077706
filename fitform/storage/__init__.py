"""Key-value stores for local session state."""

from fitform.storage.base import KeyValueStore
from fitform.storage.memory import InMemoryStore
from fitform.storage.sql import SQLModelStore

__all__ = ["KeyValueStore", "InMemoryStore", "SQLModelStore"]
