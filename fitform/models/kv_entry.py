"""
Key-value entry database model.

The session state is a flat set of independently readable keys.  Each
value is stored as JSON text so primitives and structured blobs (plans,
profiles) share one table.
"""

import datetime

from sqlalchemy import DateTime
from sqlmodel import Field, SQLModel


def utcnow() -> datetime.datetime:
    return datetime.datetime.now(datetime.timezone.utc)


class KVEntry(SQLModel, table=True):
    """A single persisted key."""

    __tablename__ = "kv_entries"

    key: str = Field(primary_key=True, max_length=100)
    value: str = Field(nullable=False)

    updated_at: datetime.datetime = Field(
        default_factory=utcnow, sa_type=DateTime(timezone=True), nullable=False
    )
