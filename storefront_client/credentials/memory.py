"""
In-memory credential store for tests and local development.

Holds tokens for the lifetime of the process only.
"""

from __future__ import annotations

from typing import Dict, Optional

from .interfaces import CredentialStore


class InMemoryCredentialStore(CredentialStore):
    def __init__(self, initial: Optional[Dict[str, str]] = None) -> None:
        self._values: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._values.get(key)

    def set(self, key: str, value: str) -> None:
        self._values[key] = value

    def delete(self, key: str) -> None:
        self._values.pop(key, None)

    def __contains__(self, key: str) -> bool:
        return key in self._values
