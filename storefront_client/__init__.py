"""
Storefront client.

Async client for the storefront JSON API (catalog, shops, presentation content
and the admin CMS endpoints).

Key rule:
- Every request goes through AuthenticatedGateway, which attaches the stored
  bearer token and clears it when the server answers 401.
- Application code talks to StorefrontAPI; only the gateway touches the
  credential store on the request path.
"""

from .catalog import StorefrontAPI
from .config import ClientSettings, load_client_settings
from .credentials import TOKEN_KEY, CredentialStore, FileCredentialStore, InMemoryCredentialStore
from .errors import StorefrontAPIError
from .factory import create_credential_store, create_gateway
from .gateway import AuthenticatedGateway, is_unauthorized, status_code_of
from .transport import DEFAULT_BASE_URL, HttpxTransport, RequestDescriptor

__all__ = [
    "AuthenticatedGateway", "is_unauthorized", "status_code_of",
    "HttpxTransport", "RequestDescriptor", "DEFAULT_BASE_URL",
    "CredentialStore", "InMemoryCredentialStore", "FileCredentialStore", "TOKEN_KEY",
    "ClientSettings", "load_client_settings",
    "create_credential_store", "create_gateway",
    "StorefrontAPI", "StorefrontAPIError",
]
