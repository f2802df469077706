"""Key-value entry repository."""

from typing import Iterable, Optional

from sqlmodel import Session, select

from fitform.models.kv_entry import KVEntry, utcnow


class KVEntryRepository:
    """Repository for KVEntry database operations."""

    def __init__(self, session: Session):
        self.session = session

    def get(self, key: str) -> Optional[KVEntry]:
        return self.session.get(KVEntry, key)

    def get_all(self) -> list[KVEntry]:
        return list(self.session.exec(select(KVEntry)).all())

    def upsert_many(self, values: dict[str, str]) -> None:
        """Write every ``key -> json`` pair in a single commit."""
        now = utcnow()
        for key, value in values.items():
            entry = self.session.get(KVEntry, key)
            if entry is None:
                entry = KVEntry(key=key, value=value, updated_at=now)
            else:
                entry.value = value
                entry.updated_at = now
            self.session.add(entry)
        self.session.commit()

    def delete_many(self, keys: Iterable[str]) -> int:
        """Delete the given keys in a single commit.  Returns rows removed."""
        removed = 0
        for key in keys:
            entry = self.session.get(KVEntry, key)
            if entry is not None:
                self.session.delete(entry)
                removed += 1
        self.session.commit()
        return removed
