"""Persistence layer for short links."""

from .base import ShortLinkStoreBase
from .sqlite import SQLiteShortLinkStore
from .postgres import PostgresShortLinkStore
from .factory import create_store
from .models import ShortLink

__all__ = [
    "ShortLinkStoreBase",
    "SQLiteShortLinkStore",
    "PostgresShortLinkStore",
    "create_store",
    "ShortLink",
]
