"""
Wiring for the storefront client.

Choosing the credential backend (memory / file / redis) happens here only.
"""

from __future__ import annotations

import logging
from typing import Optional

import httpx

from .config import ClientSettings, load_client_settings
from .credentials import CredentialStore, FileCredentialStore, InMemoryCredentialStore
from .gateway import AuthenticatedGateway
from .transport import HttpxTransport

logger = logging.getLogger(__name__)


def create_credential_store(settings: ClientSettings) -> CredentialStore:
    if settings.credential_backend == "redis":
        if not settings.redis_url:
            raise ValueError("REDIS_URL is not configured.")
        from .credentials.redis_real import RedisCredentialStore

        store = RedisCredentialStore(url=settings.redis_url)
        if not store.ping():
            logger.warning("Redis at REDIS_URL is unreachable; stored credentials are unavailable until it recovers")
        return store
    if settings.credential_backend == "file":
        return FileCredentialStore(settings.credential_file)
    return InMemoryCredentialStore()


def create_gateway(
    settings: Optional[ClientSettings] = None,
    credential_store: Optional[CredentialStore] = None,
    client: Optional[httpx.AsyncClient] = None,
) -> AuthenticatedGateway:
    settings = settings or load_client_settings()
    store = credential_store or create_credential_store(settings)
    transport = HttpxTransport(
        base_url=settings.base_url,
        timeout_seconds=settings.timeout_seconds,
        client=client,
    )
    logger.debug("Gateway using %s credential store", type(store).__name__)
    return AuthenticatedGateway(transport, store, credential_key=settings.credential_key)
