"""Pytest fixtures for the storefront client tests."""

import httpx
import pytest

from storefront_client.credentials import InMemoryCredentialStore
from storefront_client.gateway import AuthenticatedGateway
from storefront_client.transport import DEFAULT_BASE_URL, HttpxTransport


class RecordingServer:
    """Answers every request with a canned response and remembers what it saw."""

    def __init__(self, status_code=200, json=None):
        self.status_code = status_code
        self.json = json if json is not None else []
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status_code, json=self.json)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def store():
    """Empty in-memory credential store."""
    return InMemoryCredentialStore()


@pytest.fixture
def server():
    return RecordingServer()


@pytest.fixture
def make_gateway(store):
    """Build a gateway whose transport is served by the given handler."""

    def _make(handler, credential_store=None):
        client = httpx.AsyncClient(base_url=DEFAULT_BASE_URL, transport=httpx.MockTransport(handler))
        transport = HttpxTransport(client=client)
        return AuthenticatedGateway(transport, credential_store if credential_store is not None else store)

    return _make
