"""HTTP client for reading the user table from a running service."""

from __future__ import annotations

from typing import List, Optional

import httpx

from .models import UserRecord
from .serialization import SerializationError, decode_users


class UsersClientError(Exception):
    """Raised when the user list cannot be retrieved from the service."""


def _normalize_base_url(base_url: str) -> str:
    cleaned = (base_url or "").strip()
    if not cleaned:
        raise ValueError("Service base URL must not be empty")
    return cleaned.rstrip("/")


class UsersClient:
    """Fetch user records from the ``/api/users`` endpoint."""

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = 10.0,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self._base_url = _normalize_base_url(base_url)
        self._timeout = timeout
        self._transport = transport

    @property
    def endpoint(self) -> str:
        return f"{self._base_url}/api/users"

    def fetch_users(self) -> List[UserRecord]:
        try:
            with httpx.Client(timeout=self._timeout, transport=self._transport) as client:
                response = client.get(self.endpoint)
        except httpx.HTTPError as exc:
            raise UsersClientError(f"Failed to contact user service: {exc}") from exc

        if response.status_code != 200:
            detail = response.text.strip() or response.reason_phrase
            raise UsersClientError(
                f"User service responded with {response.status_code}: {detail}"
            )

        try:
            return decode_users(response.content)
        except SerializationError as exc:
            raise UsersClientError("User service returned an unexpected response format") from exc


__all__ = ["UsersClient", "UsersClientError"]
