"""Errors raised by the storefront API helpers."""

from typing import Optional


class StorefrontAPIError(Exception):
    """A storefront API call failed. `status_code` is None when no response arrived."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code

    @property
    def unauthorized(self) -> bool:
        return self.status_code == 401
