"""SQLModel table models."""

from fitform.models.kv_entry import KVEntry

__all__ = ["KVEntry"]
