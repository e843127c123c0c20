"""Business logic service for short links."""

import logging
from datetime import datetime, timedelta
from typing import Optional, Dict, List, Callable

from .codes import ShortCodeGenerator
from .database.base import ShortLinkStoreBase
from .database.models import ShortLink
from .errors import (
    CodeConflictError,
    InvalidShortCodeError,
    InvalidTimeoutError,
    InvalidURLError,
    LinkNotFoundError,
)
from .common.timestamps import format_timestamp, utc_now
from .common.validators import normalize_url, is_valid_long_url, is_valid_short_code

# Ids are signed 64-bit integers in every store
MIN_LINK_ID = -(2 ** 63)
MAX_LINK_ID = 2 ** 63 - 1


class ShortLinkService:
    """Service layer for short link creation, lookup, listing and deletion."""

    def __init__(
        self,
        store: ShortLinkStoreBase,
        short_code_generator: Optional[ShortCodeGenerator] = None,
        logger: Optional[logging.Logger] = None,
        enable_custom_codes: bool = True,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        """Initialize short link service.

        Args:
            store: Persistence store, shared across requests
            short_code_generator: Optional short code generator
            logger: Optional logger
            enable_custom_codes: Whether to allow custom short codes
            clock: Returns the current aware UTC datetime (defaults to now)
        """
        self.store = store
        self.generator = short_code_generator or ShortCodeGenerator()
        self.logger = logger or logging.getLogger(__name__)
        self.enable_custom_codes = enable_custom_codes
        self.clock = clock or utc_now

    async def create_short_url(
        self,
        long_url: str,
        user_id: str,
        custom_code: Optional[str] = None,
        timeout: Optional[int] = None,
    ) -> ShortLink:
        """Create a new short link.

        Args:
            long_url: The target URL; scheme-less input gets ``http://``
            user_id: Owner tag
            custom_code: Optional caller-chosen short code
            timeout: Optional lifetime in seconds

        Returns:
            The persisted record

        Raises:
            InvalidURLError: If the URL fails validation
            InvalidShortCodeError: If the custom code is malformed or custom
                codes are disabled
            InvalidTimeoutError: If timeout is not a positive number of seconds,
                or pushes the expiration past the largest representable date
            CodeConflictError: If the custom code is already taken
            StorageError: On database failure
        """
        if not is_valid_long_url(long_url):
            raise InvalidURLError()
        normalized_url = normalize_url(long_url)

        if custom_code is not None:
            custom_code = custom_code.strip() or None

        if custom_code:
            if not self.enable_custom_codes:
                raise InvalidShortCodeError("Custom short codes are not enabled")

            is_valid, error = is_valid_short_code(custom_code)
            if not is_valid:
                raise InvalidShortCodeError(f"Invalid short code: {error}")

        if timeout is not None and timeout <= 0:
            raise InvalidTimeoutError("Timeout must be a positive number of seconds")

        now = self.clock()
        created_at = format_timestamp(now)
        expires_at = None
        if timeout is not None:
            try:
                expires_at = format_timestamp(now + timedelta(seconds=timeout))
            except OverflowError as e:
                raise InvalidTimeoutError("Timeout is too large") from e

        if custom_code:
            # Fast path only; the unique constraint decides races
            if await self.store.short_code_exists(custom_code):
                raise CodeConflictError(custom_code)

            link = await self.store.insert_link(
                normalized_url, custom_code, created_at, expires_at, user_id
            )
        else:
            link = await self._insert_with_generated_code(
                normalized_url, created_at, expires_at, user_id
            )

        self.logger.info(f"Created short URL: {link.short_code} -> {link.long_url} (user={user_id})")
        return link

    async def _generate_unique_short_code(self) -> str:
        """Sample random codes until one is not in the store."""
        attempts = 1
        code = self.generator.generate_random()

        while await self.store.short_code_exists(code):
            attempts += 1
            code = self.generator.generate_random()

        if attempts > 1:
            self.logger.debug(f"Generated code after {attempts} attempts: {code}")
        return code

    async def _insert_with_generated_code(
        self,
        long_url: str,
        created_at: str,
        expires_at: Optional[str],
        user_id: str,
    ) -> ShortLink:
        while True:
            code = await self._generate_unique_short_code()
            try:
                return await self.store.insert_link(long_url, code, created_at, expires_at, user_id)
            except CodeConflictError:
                # Lost a race with a concurrent insert of the same code
                self.logger.debug(f"Generated code {code} taken concurrently, resampling")

    async def get_long_url(self, short_code: str) -> Optional[str]:
        """Get the long URL for a live short code.

        Returns:
            Long URL, or None if the code is absent or expired
        """
        long_url = await self.store.get_live_long_url(short_code, format_timestamp(self.clock()))

        if long_url:
            self.logger.debug(f"Retrieved URL: {short_code} -> {long_url}")
            return long_url

        self.logger.warning(f"Short code not found or expired: {short_code}")
        return None

    async def resolve(self, short_code: str) -> str:
        """Like get_long_url, but raises LinkNotFoundError on a miss."""
        long_url = await self.get_long_url(short_code)
        if long_url is None:
            raise LinkNotFoundError(short_code)
        return long_url

    async def list_user_urls(self, user_id: str) -> List[ShortLink]:
        """List every link owned by user_id, expired ones included, newest first."""
        return await self.store.list_links_for_user(user_id)

    async def delete_short_url(self, link_id: int, user_id: str) -> bool:
        """Delete a link if user_id owns it.

        A wrong owner is indistinguishable from a missing id.

        Returns:
            True if a row was removed
        """
        if not MIN_LINK_ID <= link_id <= MAX_LINK_ID:
            return False

        deleted = await self.store.delete_link(link_id, user_id)

        if deleted:
            self.logger.info(f"Deleted short URL {link_id} (user={user_id})")

        return deleted

    async def health_check(self) -> Dict[str, bool]:
        db_healthy = await self.store.health_check()

        return {
            "database": db_healthy,
            "overall": db_healthy,
        }

    async def close(self) -> None:
        """Close store connections."""
        await self.store.close()
