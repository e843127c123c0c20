"""Data models for short links."""

from dataclasses import dataclass
from typing import Optional, Mapping, Any


@dataclass(frozen=True)
class ShortLink:
    """Represents a stored short link.
    
    Timestamps are RFC3339 strings; ``expires_at`` is None for links that
    never expire.
    """
    
    id: int
    long_url: str
    short_code: str
    created_at: str
    expires_at: Optional[str]
    user_id: str
    
    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "ShortLink":
        """Create from a database row (sqlite3.Row or asyncpg.Record)."""
        return cls(
            id=int(row["id"]),
            long_url=row["long_url"],
            short_code=row["short_code"],
            created_at=row["created_at"],
            expires_at=row["expires_at"],
            user_id=row["user_id"],
        )
