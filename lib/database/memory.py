"""In-memory link store, used by tests and one-off tooling."""

from typing import Dict, Optional

from .base import LinkStoreBase


class InMemoryLinkStore(LinkStoreBase):
    """Link store that keeps the mapping in a dictionary.

    Copies on load and save so callers mutating their mapping never touch
    the stored one, the same way re-reading a file would behave.
    """

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._links: Optional[Dict[str, str]] = dict(initial) if initial is not None else None
        self.save_count = 0

    async def ensure(self) -> None:
        if self._links is None:
            self._links = {}

    async def load(self) -> Dict[str, str]:
        if self._links is None:
            await self.ensure()
        return dict(self._links)

    async def save(self, links: Dict[str, str]) -> None:
        self._links = dict(links)
        self.save_count += 1
