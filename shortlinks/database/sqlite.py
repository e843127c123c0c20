"""SQLite implementation of the short link store."""

import os
import asyncio
import logging
import sqlite3
from contextlib import contextmanager
from typing import Optional, List, Callable, TypeVar

from .base import ShortLinkStoreBase
from .models import ShortLink
from ..errors import CodeConflictError, StorageError


T = TypeVar("T")

SQLITE_PREFIX = "sqlite:"


def parse_sqlite_path(db_config: str) -> str:
    """Extract the database file path from a connection string.

    Accepts ``sqlite:short_url.db``, ``sqlite://short_url.db``,
    ``sqlite:///abs/path.db`` and bare file paths. Query parameters such as
    ``?mode=rwc`` are dropped.

    Raises:
        ValueError: For in-memory databases, which cannot be shared across
            the per-operation connections this store opens
    """
    path = db_config
    if path.startswith(SQLITE_PREFIX):
        path = path[len(SQLITE_PREFIX):]
        if path.startswith("//"):
            path = path[2:]
    path = path.split("?", 1)[0]

    if not path or path == ":memory:":
        raise ValueError("SQLite store requires a file path")
    return path


class SQLiteShortLinkStore(ShortLinkStoreBase):
    """File-backed SQLite store.

    ``sqlite3`` calls run in a worker thread via ``asyncio.to_thread`` so the
    event loop is never blocked; each operation opens its own connection.
    """

    CREATE_TABLE_SQL = """
    CREATE TABLE IF NOT EXISTS short_urls (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        long_url TEXT NOT NULL,
        short_code TEXT NOT NULL UNIQUE,
        created_at TEXT NOT NULL,
        expires_at TEXT,
        user_id TEXT NOT NULL
    );
    CREATE INDEX IF NOT EXISTS idx_short_code ON short_urls(short_code);
    CREATE INDEX IF NOT EXISTS idx_user_id ON short_urls(user_id);
    """

    SELECT_COLUMNS = "id, long_url, short_code, created_at, expires_at, user_id"

    def __init__(
        self,
        db_config: str,
        connection_timeout_seconds: int = 30,
        logger: Optional[logging.Logger] = None,
    ):
        """Initialize SQLite store.

        Args:
            db_config: Connection string (sqlite:path/to/file.db)
            connection_timeout_seconds: How long to wait on a locked database
            logger: Optional logger instance
        """
        super().__init__(db_config)

        self.logger = logger or logging.getLogger(__name__)
        self.path = parse_sqlite_path(db_config)
        self.connection_timeout_seconds = connection_timeout_seconds

    @contextmanager
    def _get_connection(self):
        conn = sqlite3.connect(self.path, timeout=self.connection_timeout_seconds)
        conn.row_factory = sqlite3.Row
        try:
            yield conn
        finally:
            conn.close()

    async def _run(self, operation: str, func: Callable[..., T], *args) -> T:
        """Run a blocking call off the loop, wrapping driver errors."""
        try:
            return await asyncio.to_thread(func, *args)
        except sqlite3.Error as e:
            self.logger.error(f"Error {operation}: {e}")
            raise StorageError(cause=e) from e

    def _initialize_sync(self) -> None:
        directory = os.path.dirname(os.path.abspath(self.path))
        os.makedirs(directory, exist_ok=True)
        with self._get_connection() as conn:
            conn.executescript(self.CREATE_TABLE_SQL)
            conn.commit()

    async def initialize(self) -> None:
        self.logger.info(f"Creating short_urls table if not exists at {self.path}")
        await self._run("creating tables", self._initialize_sync)

    def _insert_sync(
        self,
        long_url: str,
        short_code: str,
        created_at: str,
        expires_at: Optional[str],
        user_id: str,
    ) -> ShortLink:
        with self._get_connection() as conn:
            try:
                cur = conn.execute(
                    """
                    INSERT INTO short_urls (long_url, short_code, created_at, expires_at, user_id)
                    VALUES (?, ?, ?, ?, ?)
                    """,
                    (long_url, short_code, created_at, expires_at, user_id),
                )
                conn.commit()
            except sqlite3.IntegrityError as e:
                if "short_code" in str(e):
                    raise CodeConflictError(short_code) from e
                raise

            row = conn.execute(
                f"SELECT {self.SELECT_COLUMNS} FROM short_urls WHERE id = ?",
                (cur.lastrowid,),
            ).fetchone()
        return ShortLink.from_row(row)

    async def insert_link(
        self,
        long_url: str,
        short_code: str,
        created_at: str,
        expires_at: Optional[str],
        user_id: str,
    ) -> ShortLink:
        link = await self._run(
            "creating short URL",
            self._insert_sync,
            long_url,
            short_code,
            created_at,
            expires_at,
            user_id,
        )
        self.logger.debug(f"Inserted short URL {link.id}: {short_code} -> {long_url}")
        return link

    def _fetch_one_sync(self, sql: str, params: tuple) -> Optional[sqlite3.Row]:
        with self._get_connection() as conn:
            return conn.execute(sql, params).fetchone()

    def _fetch_all_sync(self, sql: str, params: tuple) -> List[sqlite3.Row]:
        with self._get_connection() as conn:
            return conn.execute(sql, params).fetchall()

    async def short_code_exists(self, short_code: str) -> bool:
        row = await self._run(
            "checking short code existence",
            self._fetch_one_sync,
            "SELECT 1 FROM short_urls WHERE short_code = ? LIMIT 1",
            (short_code,),
        )
        return row is not None

    async def get_live_long_url(self, short_code: str, now: str) -> Optional[str]:
        row = await self._run(
            "getting long URL",
            self._fetch_one_sync,
            """
            SELECT long_url FROM short_urls
            WHERE short_code = ? AND (expires_at IS NULL OR expires_at > ?)
            """,
            (short_code, now),
        )
        return row["long_url"] if row else None

    async def list_links_for_user(self, user_id: str) -> List[ShortLink]:
        rows = await self._run(
            "listing user URLs",
            self._fetch_all_sync,
            f"""
            SELECT {self.SELECT_COLUMNS} FROM short_urls
            WHERE user_id = ?
            ORDER BY created_at DESC, id DESC
            """,
            (user_id,),
        )
        return [ShortLink.from_row(row) for row in rows]

    def _delete_sync(self, link_id: int, user_id: str) -> bool:
        with self._get_connection() as conn:
            cur = conn.execute(
                "DELETE FROM short_urls WHERE id = ? AND user_id = ?",
                (link_id, user_id),
            )
            conn.commit()
            return cur.rowcount > 0

    async def delete_link(self, link_id: int, user_id: str) -> bool:
        return await self._run("deleting short URL", self._delete_sync, link_id, user_id)

    async def health_check(self) -> bool:
        try:
            await self._run("running health check", self._fetch_one_sync, "SELECT 1", ())
            return True
        except StorageError:
            return False

    async def close(self) -> None:
        # Connections are per-operation; nothing is held open.
        pass
