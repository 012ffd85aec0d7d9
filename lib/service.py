"""Business logic service for the link shortener."""

import asyncio
import logging
from typing import Optional, Dict, Any

from .shortcode import ShortCodeGenerator
from .database.base import LinkStoreBase
from .common.validators import is_valid_short_code
from .errors import MissingURLError, InvalidShortCodeError, ShortCodeExistsError


class LinkShortenerService:
    """Service layer for URL shortening business logic."""

    def __init__(
        self,
        store: LinkStoreBase,
        short_code_generator: Optional[ShortCodeGenerator] = None,
        logger: Optional[logging.Logger] = None,
        strict_short_codes: bool = False,
        max_collision_retries: int = 0,
    ):
        """Initialize link shortener service.

        Args:
            store: Link store instance
            short_code_generator: Optional short code generator
            logger: Optional logger
            strict_short_codes: Whether to validate user supplied short codes
            max_collision_retries: Extra attempts when a generated code collides
        """
        self.store = store
        self.generator = short_code_generator or ShortCodeGenerator()
        self.logger = logger or logging.getLogger(__name__)
        self.strict_short_codes = strict_short_codes
        self.max_collision_retries = max(0, max_collision_retries)
        # Serializes load -> insert -> save within this process
        self._write_lock = asyncio.Lock()

    async def create_short_url(
        self,
        original_url: Optional[str],
        short_code: Optional[str] = None,
    ) -> Dict[str, Any]:
        """Create a new short URL.

        Args:
            original_url: The original long URL (stored as given)
            short_code: Optional caller supplied short code

        Returns:
            Dictionary with short_code and original_url

        Raises:
            MissingURLError: If no URL is given
            InvalidShortCodeError: If strict codes are on and the code is rejected
            ShortCodeExistsError: If the code (supplied or generated) is taken
        """
        if not original_url:
            raise MissingURLError()

        if short_code and self.strict_short_codes:
            is_valid, error = is_valid_short_code(short_code)
            if not is_valid:
                raise InvalidShortCodeError(f"Invalid short code: {error}")

        async with self._write_lock:
            links = await self.store.load()

            if short_code:
                if short_code in links:
                    self.logger.warning(f"Short code already exists: {short_code}")
                    raise ShortCodeExistsError(short_code)
            else:
                short_code = self._generate_short_code(links)

            links[short_code] = original_url
            await self.store.save(links)

        self.logger.info(f"Created short URL: {short_code} -> {original_url}")

        return {
            "short_code": short_code,
            "original_url": original_url,
        }

    async def get_original_url(self, short_code: str) -> Optional[str]:
        """Get the original URL for a short code.

        Args:
            short_code: The short code to lookup

        Returns:
            Original URL or None if not found
        """
        links = await self.store.load()
        original_url = links.get(short_code)

        # Hand-edited files may hold non-string values; those never redirect
        if isinstance(original_url, str) and original_url:
            self.logger.debug(f"Retrieved URL: {short_code} -> {original_url}")
            return original_url

        self.logger.warning(f"Short code not found: {short_code}")
        return None

    async def list_links(self) -> Dict[str, str]:
        """Return the full short code -> URL mapping."""
        return await self.store.load()

    async def url_exists(self, short_code: str) -> bool:
        """Check if a short code exists.

        Args:
            short_code: The short code to check

        Returns:
            True if exists
        """
        links = await self.store.load()
        return short_code in links

    def _generate_short_code(self, links: Dict[str, str]) -> str:
        """Generate a short code not present in ``links``.

        A collision is reported as a conflict unless retries are configured.

        Args:
            links: The mapping loaded under the write lock

        Returns:
            Unused short code

        Raises:
            ShortCodeExistsError: If every attempt collided
        """
        code = self.generator.generate_random()

        for attempt in range(self.max_collision_retries):
            if code not in links:
                break
            self.logger.debug(f"Generated code {code} collided, retry {attempt + 1}")
            code = self.generator.generate_random()

        if code in links:
            self.logger.warning(f"Generated short code already exists: {code}")
            raise ShortCodeExistsError(code)

        return code

    async def close(self) -> None:
        """Close service connections."""
        await self.store.close()
