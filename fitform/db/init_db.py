"""
Database initialization.

Creates the key-value table backing the local session state.
"""

import logging

from sqlmodel import SQLModel

from fitform.db.session import engine

logger = logging.getLogger(__name__)


def init_db() -> None:
    """Create all SQLModel tables that do not exist yet."""

    # Import all models so SQLModel.metadata has them
    from fitform.models.kv_entry import KVEntry  # noqa: F401

    logger.info("Creating database tables...")
    SQLModel.metadata.create_all(engine)
    logger.info("Database initialization complete")


if __name__ == "__main__":
    init_db()
