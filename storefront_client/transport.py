"""
HTTP transport for the storefront API.

Purpose:
- Executes a RequestDescriptor against the configured base URL with httpx
- Raises for non-2xx answers so callers see one failure type per outcome

Implementation notes:
- A fresh AsyncClient is opened per call unless one is injected (tests inject
  one built on httpx.MockTransport)
- Timeouts are left to httpx; nothing here retries
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

import httpx

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://127.0.0.1:3001/"


@dataclass
class RequestDescriptor:
    method: str
    path: str                                   # relative to the transport base URL
    headers: Dict[str, str] = field(default_factory=dict)
    params: Optional[Dict[str, Any]] = None
    json: Any = None
    data: Optional[Dict[str, Any]] = None
    files: Optional[Dict[str, Any]] = None


class HttpxTransport:
    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout_seconds: float = 20.0,
        default_headers: Optional[Dict[str, str]] = None,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self.base_url = base_url or DEFAULT_BASE_URL
        self.timeout_seconds = timeout_seconds
        self.default_headers = dict(default_headers or {"Accept": "application/json"})
        self._client = client

    async def send(self, request: RequestDescriptor) -> httpx.Response:
        headers = {**self.default_headers, **request.headers}
        kwargs: Dict[str, Any] = {"headers": headers, "params": request.params}
        if request.json is not None:
            kwargs["json"] = request.json
        if request.data is not None:
            kwargs["data"] = request.data
        if request.files is not None:
            kwargs["files"] = request.files

        logger.debug("%s %s", request.method.upper(), request.path)
        if self._client is not None:
            response = await self._client.request(request.method.upper(), request.path, **kwargs)
        else:
            async with httpx.AsyncClient(base_url=self.base_url, timeout=self.timeout_seconds) as client:
                response = await client.request(request.method.upper(), request.path, **kwargs)
        response.raise_for_status()
        return response
