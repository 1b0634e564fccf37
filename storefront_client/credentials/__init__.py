"""
Credential stores.

The gateway reads the bearer token from one of these before every request and
deletes it when the server answers 401. Pick the backend in
`storefront_client.factory` only.
"""

from .file_store import FileCredentialStore
from .interfaces import TOKEN_KEY, CredentialStore
from .memory import InMemoryCredentialStore

__all__ = [
    "TOKEN_KEY",
    "CredentialStore",
    "FileCredentialStore",
    "InMemoryCredentialStore",
]
