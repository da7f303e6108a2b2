"""Session token storage.

Backed by any mutable mapping: Streamlit's session state in the app, a plain
dict in tests. Only the login view writes; other views read.
"""
from typing import MutableMapping, Any, Optional

from domain.constants import TOKEN_STORAGE_KEY


class TokenStore:
    def __init__(self, backend: MutableMapping[str, Any], key: str = TOKEN_STORAGE_KEY):
        self._backend = backend
        self._key = key

    def get(self) -> Optional[str]:
        return self._backend.get(self._key)

    def set(self, token: str):
        self._backend[self._key] = token

    def remove(self):
        self._backend.pop(self._key, None)
