"""
Authenticated request gateway.

Every call to the storefront API goes through `AuthenticatedGateway.dispatch`:

1. read the bearer token from the credential store (once per call)
2. attach it as `Authorization: Bearer <token>`
3. run the request through the transport
4. on a 401, delete the stored token, then re-raise the original error

Nothing is retried and nothing redirects. Applications that want to send the
user back to a login screen catch the error and check `is_unauthorized`.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import httpx

from .credentials.interfaces import TOKEN_KEY, CredentialStore
from .transport import RequestDescriptor

logger = logging.getLogger(__name__)

AUTHORIZATION_HEADER = "Authorization"


def status_code_of(exc: BaseException) -> Optional[int]:
    """Return the HTTP status carried by a failure, or None if no response was received."""
    response = getattr(exc, "response", None)
    status = getattr(response, "status_code", None)
    return status if isinstance(status, int) else None


def is_unauthorized(exc: BaseException) -> bool:
    return status_code_of(exc) == 401


class AuthenticatedGateway:
    def __init__(self, transport: Any, credential_store: CredentialStore, credential_key: str = TOKEN_KEY) -> None:
        self.transport = transport
        self.credential_store = credential_store
        self.credential_key = credential_key

    def _attach_credential(self, request: RequestDescriptor) -> None:
        token = self.credential_store.get(self.credential_key)
        if not token:
            return
        for name in [h for h in request.headers if h.lower() == AUTHORIZATION_HEADER.lower()]:
            del request.headers[name]
        request.headers[AUTHORIZATION_HEADER] = f"Bearer {token}"

    def _handle_failure(self, exc: Exception) -> None:
        if not is_unauthorized(exc):
            return
        logger.error("Token expired or unauthorized")
        try:
            self.credential_store.delete(self.credential_key)
        except Exception:
            # The caller must still see the 401, not the store failure.
            logger.warning("Could not clear stored credential after 401", exc_info=True)
        # Redirecting to the login page is left to the calling application.

    async def dispatch(self, request: RequestDescriptor) -> httpx.Response:
        self._attach_credential(request)
        try:
            return await self.transport.send(request)
        except Exception as exc:
            self._handle_failure(exc)
            raise

    # --- Convenience verbs ---------------------------------------------------

    async def get(self, path: str, params: Optional[Dict[str, Any]] = None, **kwargs: Any) -> httpx.Response:
        return await self.dispatch(RequestDescriptor("GET", path, params=params, **kwargs))

    async def post(self, path: str, json: Any = None, **kwargs: Any) -> httpx.Response:
        return await self.dispatch(RequestDescriptor("POST", path, json=json, **kwargs))

    async def put(self, path: str, json: Any = None, **kwargs: Any) -> httpx.Response:
        return await self.dispatch(RequestDescriptor("PUT", path, json=json, **kwargs))

    async def patch(self, path: str, json: Any = None, **kwargs: Any) -> httpx.Response:
        return await self.dispatch(RequestDescriptor("PATCH", path, json=json, **kwargs))

    async def delete(self, path: str, **kwargs: Any) -> httpx.Response:
        return await self.dispatch(RequestDescriptor("DELETE", path, **kwargs))
