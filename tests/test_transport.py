import json

import httpx
import pytest

import storefront_client.transport as transport_module
from storefront_client.transport import DEFAULT_BASE_URL, HttpxTransport, RequestDescriptor


def _transport(handler, base_url=DEFAULT_BASE_URL):
    client = httpx.AsyncClient(base_url=base_url, transport=httpx.MockTransport(handler))
    return HttpxTransport(base_url=base_url, client=client)


@pytest.mark.asyncio
async def test_relative_path_joins_base_url_and_sends_defaults(server):
    transport = _transport(server, base_url="https://api.example.test/v1/")

    await transport.send(RequestDescriptor("get", "/api/faq", params={"category": "livraison"}))

    request = server.last
    assert request.method == "GET"
    assert str(request.url) == "https://api.example.test/v1/api/faq?category=livraison"
    assert request.headers["Accept"] == "application/json"


@pytest.mark.asyncio
async def test_request_headers_and_json_body(server):
    transport = _transport(server)

    await transport.send(
        RequestDescriptor("PUT", "/api/shops/3", headers={"Accept": "text/plain"}, json={"name": "Gombe"})
    )

    request = server.last
    assert request.headers["Accept"] == "text/plain"
    assert request.headers["Content-Type"] == "application/json"
    assert json.loads(request.content) == {"name": "Gombe"}


@pytest.mark.asyncio
async def test_multipart_upload(server):
    transport = _transport(server)

    await transport.send(
        RequestDescriptor("POST", "/api/upload", files={"file": ("logo.png", b"\x89PNG", "image/png")})
    )

    request = server.last
    assert request.headers["Content-Type"].startswith("multipart/form-data")
    assert b'filename="logo.png"' in request.content


@pytest.mark.asyncio
async def test_non_2xx_raises_status_error():
    transport = _transport(lambda request: httpx.Response(404, json={"error": "Shop not found"}))

    with pytest.raises(httpx.HTTPStatusError) as exc_info:
        await transport.send(RequestDescriptor("GET", "/api/shops/99"))

    assert exc_info.value.response.status_code == 404
    assert exc_info.value.response.json() == {"error": "Shop not found"}


@pytest.mark.asyncio
async def test_per_call_client_uses_configured_base_url(monkeypatch, server):
    real_client = httpx.AsyncClient
    opened = []

    def fake_client(**kwargs):
        opened.append(kwargs)
        return real_client(transport=httpx.MockTransport(server), **kwargs)

    monkeypatch.setattr(transport_module.httpx, "AsyncClient", fake_client)
    transport = HttpxTransport(timeout_seconds=5.0)

    response = await transport.send(RequestDescriptor("GET", "/shops"))

    assert response.status_code == 200
    assert opened == [{"base_url": DEFAULT_BASE_URL, "timeout": 5.0}]
    assert str(server.last.url) == "http://127.0.0.1:3001/shops"


def test_empty_base_url_falls_back_to_loopback():
    assert HttpxTransport(base_url="").base_url == DEFAULT_BASE_URL


@pytest.mark.asyncio
async def test_injected_client_stays_open_after_send(server):
    client = httpx.AsyncClient(base_url=DEFAULT_BASE_URL, transport=httpx.MockTransport(server))
    transport = HttpxTransport(client=client)

    await transport.send(RequestDescriptor("GET", "/shops"))
    await transport.send(RequestDescriptor("GET", "/products"))

    assert not client.is_closed
    assert len(server.requests) == 2
    await client.aclose()
