"""
Credential store contract.

The gateway only ever talks to a store through these three calls against a
single fixed key. Implementations must treat `delete` of an absent key as a
no-op so that concurrent invalidations stay harmless.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

# Key the login flow writes the bearer token under.
TOKEN_KEY = "token"


class CredentialStore(ABC):
    """Every credential backend must implement this interface."""

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """Return the stored value, or None when absent."""

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Store or overwrite a value."""

    @abstractmethod
    def delete(self, key: str) -> None:
        """Remove a value. Absent keys are ignored."""
