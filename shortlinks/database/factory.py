"""Select a store implementation from a connection string."""

import logging
from typing import Optional

from .base import ShortLinkStoreBase
from .sqlite import SQLiteShortLinkStore
from .postgres import PostgresShortLinkStore


POSTGRES_SCHEMES = ("postgres://", "postgresql://")


def create_store(
    database_url: str,
    pool_max_size: int = 10,
    logger: Optional[logging.Logger] = None,
) -> ShortLinkStoreBase:
    """Create the store for ``database_url``.
    
    ``postgres://`` and ``postgresql://`` URLs get the asyncpg store; anything
    else is treated as a SQLite file location.
    
    Args:
        database_url: Connection string
        pool_max_size: Maximum connection pool size (PostgreSQL only)
        logger: Optional logger instance
        
    Returns:
        Store instance (tables are created by ``initialize()``)
    """
    if database_url.startswith(POSTGRES_SCHEMES):
        return PostgresShortLinkStore(
            db_config=database_url,
            pool_max_size=pool_max_size,
            logger=logger,
        )
    return SQLiteShortLinkStore(db_config=database_url, logger=logger)
