"""Abstract base class for link store implementations."""

from abc import ABC, abstractmethod
from typing import Dict


class LinkStoreBase(ABC):
    """Abstract base class for short code -> URL mapping storage.

    A store always hands out and accepts the full mapping. Callers load,
    mutate and save; there are no partial updates.
    """

    @abstractmethod
    async def ensure(self) -> None:
        """Create the backing storage with an empty mapping if it is absent.

        Must be idempotent and must never overwrite existing data.
        """
        pass

    @abstractmethod
    async def load(self) -> Dict[str, str]:
        """Load the full mapping.

        Returns:
            Dictionary of short code -> original URL (empty if nothing stored)
        """
        pass

    @abstractmethod
    async def save(self, links: Dict[str, str]) -> None:
        """Replace the stored mapping with ``links``.

        Args:
            links: Full mapping of short code -> original URL
        """
        pass

    async def close(self) -> None:
        """Release any resources held by the store."""
        return None
