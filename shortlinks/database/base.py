"""Abstract base class for short link store implementations."""

from abc import ABC, abstractmethod
from typing import Optional, List

from .models import ShortLink


class ShortLinkStoreBase(ABC):
    """Abstract base class for short link persistence.
    
    Implementations enforce short code uniqueness themselves; a unique
    constraint violation on insert must surface as ``CodeConflictError`` and
    every other driver failure as ``StorageError``.
    """
    
    def __init__(self, db_config: str):
        """Initialize store.
        
        Args:
            db_config: Database connection string
        """
        self.db_config = db_config
    
    @abstractmethod
    async def initialize(self) -> None:
        """Create the table and its indexes if they don't exist."""
        pass
    
    @abstractmethod
    async def insert_link(
        self,
        long_url: str,
        short_code: str,
        created_at: str,
        expires_at: Optional[str],
        user_id: str,
    ) -> ShortLink:
        """Persist a new short link.
        
        Args:
            long_url: Normalized target URL
            short_code: The short code to use
            created_at: RFC3339 creation timestamp
            expires_at: RFC3339 expiration timestamp, or None for no expiry
            user_id: Owner tag
            
        Returns:
            The stored record, including its assigned id
            
        Raises:
            CodeConflictError: If short_code already exists
            StorageError: On any other database failure
        """
        pass
    
    @abstractmethod
    async def short_code_exists(self, short_code: str) -> bool:
        """Check if a short code already exists (live or expired)."""
        pass
    
    @abstractmethod
    async def get_live_long_url(self, short_code: str, now: str) -> Optional[str]:
        """Get the long URL for a short code that has not expired at ``now``.
        
        Args:
            short_code: Exact (case-sensitive) short code
            now: RFC3339 timestamp to evaluate expiration against
            
        Returns:
            The long URL, or None when absent or expired
        """
        pass
    
    @abstractmethod
    async def list_links_for_user(self, user_id: str) -> List[ShortLink]:
        """List all records owned by user_id, newest first."""
        pass
    
    @abstractmethod
    async def delete_link(self, link_id: int, user_id: str) -> bool:
        """Delete a record if both id and owner match.
        
        Returns:
            True if a row was removed
        """
        pass
    
    @abstractmethod
    async def health_check(self) -> bool:
        """Check if the database is reachable."""
        pass
    
    @abstractmethod
    async def close(self) -> None:
        """Release connections."""
        pass
