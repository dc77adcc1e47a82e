"""Bearer-token credential plumbing.

Any object with a ``get_token(*scopes)`` method returning something with a
``token`` attribute works, which includes the credentials shipped by
``azure-identity``.  The static credentials below cover pre-acquired tokens
(CI, ``az account get-access-token``, tests).
"""

from __future__ import annotations

import time
from typing import Any, NamedTuple

DEFAULT_STATIC_TOKEN_LIFETIME_SECONDS = 3600


class AccessToken(NamedTuple):
    token: str
    expires_on: int


def default_scopes(endpoint: str) -> list[str]:
    return [f"{endpoint.rstrip('/')}/"]


def bearer_header(token: Any) -> str:
    value = getattr(token, "token", token)
    if not isinstance(value, str) or not value:
        raise ValueError("credential returned an empty bearer token")
    return f"Bearer {value}"


class StaticTokenCredential:
    def __init__(self, token: str, *, expires_on: int | None = None) -> None:
        if not token or not token.strip():
            raise ValueError("token must be a non-empty string")
        self._token = token.strip()
        self._expires_on = expires_on

    def get_token(self, *scopes: str, **kwargs: Any) -> AccessToken:
        expires_on = self._expires_on or int(time.time()) + DEFAULT_STATIC_TOKEN_LIFETIME_SECONDS
        return AccessToken(self._token, expires_on)


class AsyncStaticTokenCredential:
    def __init__(self, token: str, *, expires_on: int | None = None) -> None:
        self._inner = StaticTokenCredential(token, expires_on=expires_on)

    async def get_token(self, *scopes: str, **kwargs: Any) -> AccessToken:
        return self._inner.get_token(*scopes, **kwargs)

    async def close(self) -> None:
        return None
