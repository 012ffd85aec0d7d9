"""Storage layer for the link shortener."""

from .base import LinkStoreBase
from .json_store import JSONFileLinkStore, CorruptStoreError
from .memory import InMemoryLinkStore

__all__ = ["LinkStoreBase", "JSONFileLinkStore", "CorruptStoreError", "InMemoryLinkStore"]
