"""
SQLModel-backed key-value store.

Values are JSON-encoded into the ``kv_entries`` table.  Reads never raise:
a row holding undecodable JSON, or a database error, yields the default.
Batch writes commit once so the fields of one state transition land
together.
"""

import json
import logging
from typing import Any, Iterable, Mapping

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from fitform.db.repositories.kv_entry import KVEntryRepository
from fitform.storage.base import KeyValueStore

logger = logging.getLogger(__name__)


class SQLModelStore(KeyValueStore):
    """Key-value store over a SQLModel session."""

    def __init__(self, session: Session):
        self.session = session
        self.repository = KVEntryRepository(session)

    def get(self, key: str, default: Any = None) -> Any:
        try:
            entry = self.repository.get(key)
        except SQLAlchemyError:
            logger.exception("Failed to read key %r", key)
            self.session.rollback()
            return default
        if entry is None:
            return default
        try:
            return json.loads(entry.value)
        except (TypeError, ValueError):
            logger.warning("Discarding malformed value for key %r", key)
            return default

    def set_many(self, values: Mapping[str, Any]) -> None:
        encoded = {key: json.dumps(value) for key, value in values.items()}
        try:
            self.repository.upsert_many(encoded)
        except SQLAlchemyError:
            logger.exception("Failed to persist keys %s", sorted(encoded))
            self.session.rollback()

    def remove_many(self, keys: Iterable[str]) -> None:
        keys = list(keys)
        try:
            self.repository.delete_many(keys)
        except SQLAlchemyError:
            logger.exception("Failed to remove keys %s", sorted(keys))
            self.session.rollback()
