"""Database repositories."""

from fitform.db.repositories.kv_entry import KVEntryRepository

__all__ = ["KVEntryRepository"]
