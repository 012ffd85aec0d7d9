"""JSON file backed link store."""

import asyncio
import json
import logging
import os
from typing import Dict, Optional

from .base import LinkStoreBase


class CorruptStoreError(ValueError):
    """Raised when the mapping file does not hold a JSON object."""


class JSONFileLinkStore(LinkStoreBase):
    """Link store persisted as a single pretty-printed JSON object.

    The file is read in full on every load and rewritten in full on every
    save. Nothing is cached between calls, so the file stays the only
    source of truth. Blocking file I/O runs in a worker thread.
    """

    def __init__(self, path: str, logger: Optional[logging.Logger] = None):
        """Initialize the store.

        Args:
            path: Path to the JSON mapping file
            logger: Optional logger instance
        """
        self.path = os.path.abspath(path)
        self.directory = os.path.dirname(self.path)
        self.logger = logger or logging.getLogger(__name__)

    async def ensure(self) -> None:
        """Create the data directory and an empty mapping file if missing."""
        await asyncio.to_thread(self._ensure_sync)

    async def load(self) -> Dict[str, str]:
        """Load the mapping, creating an empty file first if none exists.

        Returns:
            Dictionary of short code -> original URL

        Raises:
            CorruptStoreError: If the file holds something other than an object
            OSError: On read failures other than the file being absent
            json.JSONDecodeError: If the file is not valid JSON
        """
        try:
            return await asyncio.to_thread(self._read_sync)
        except FileNotFoundError:
            self.logger.info(f"Link file {self.path} not found, creating it")
            await self.ensure()
            return {}

    async def save(self, links: Dict[str, str]) -> None:
        """Write the full mapping to disk.

        Args:
            links: Full mapping of short code -> original URL
        """
        try:
            await asyncio.to_thread(self._write_sync, links)
        except Exception as e:
            self.logger.error(f"Error saving links to {self.path}: {e}")
            raise
        self.logger.debug(f"Saved {len(links)} links to {self.path}")

    def _ensure_sync(self) -> None:
        os.makedirs(self.directory, exist_ok=True)
        try:
            # "x" fails if the file exists, so a populated store is never clobbered
            with open(self.path, "x", encoding="utf-8") as f:
                json.dump({}, f)
            self.logger.info(f"Created empty link file at {self.path}")
        except FileExistsError:
            pass

    def _read_sync(self) -> Dict[str, str]:
        with open(self.path, "r", encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise CorruptStoreError(
                f"Link file {self.path} must contain a JSON object, got {type(data).__name__}"
            )
        return data

    def _write_sync(self, links: Dict[str, str]) -> None:
        os.makedirs(self.directory, exist_ok=True)
        tmp_path = f"{self.path}.tmp"
        with open(tmp_path, "w", encoding="utf-8") as f:
            json.dump(links, f, ensure_ascii=False, indent=2)
        os.replace(tmp_path, self.path)
