"""Per-user Firecrawl API key storage.

Keys live in process memory only and are lost on restart. The router receives
the store at construction, so a persistent implementation only has to satisfy
`KeyStore`.
"""

from __future__ import annotations

import logging
from typing import Optional, Protocol, runtime_checkable

from firecrawl_bot.errors import CredentialAlreadySet, CredentialMissing
from firecrawl_bot.utils import mask_key

logger = logging.getLogger(__name__)


@runtime_checkable
class KeyStore(Protocol):
    def get(self, user_id: str) -> Optional[str]:
        ...

    def set(self, user_id: str, api_key: str) -> None:
        """Store a first key. Raises CredentialAlreadySet if one exists."""
        ...

    def update(self, user_id: str, api_key: str) -> None:
        """Replace an existing key. Raises CredentialMissing if none exists."""
        ...


class InMemoryKeyStore:
    def __init__(self) -> None:
        self._keys: dict[str, str] = {}

    def get(self, user_id: str) -> Optional[str]:
        return self._keys.get(user_id)

    def set(self, user_id: str, api_key: str) -> None:
        if user_id in self._keys:
            raise CredentialAlreadySet(user_id)
        self._keys[user_id] = api_key
        logger.info("API key set for user %s (%s)", user_id, mask_key(api_key))

    def update(self, user_id: str, api_key: str) -> None:
        if user_id not in self._keys:
            raise CredentialMissing(user_id)
        self._keys[user_id] = api_key
        logger.info("API key updated for user %s (%s)", user_id, mask_key(api_key))
