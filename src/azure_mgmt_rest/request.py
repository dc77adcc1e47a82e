"""Typed request values and URL construction."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any
from urllib.parse import quote

import httpx

API_VERSION_PARAM = "api-version"


def encode_query(params: Mapping[str, Any] | None) -> dict[str, str]:
    if not params:
        return {}

    encoded: dict[str, str] = {}
    for key, value in params.items():
        if value is None:
            continue
        if isinstance(value, bool):
            encoded[key] = "true" if value else "false"
            continue
        encoded[key] = str(value)
    return encoded


def has_api_version(url: httpx.URL) -> bool:
    return API_VERSION_PARAM in url.params


def ensure_api_version(url: httpx.URL, api_version: str) -> httpx.URL:
    # Continuation links usually carry api-version already; adding it twice
    # produces a request the service rejects.
    if has_api_version(url):
        return url
    # Skip tokens are opaque: append to the raw query bytes rather than
    # re-encoding the existing pairs.
    pair = f"{API_VERSION_PARAM}={quote(api_version, safe='')}".encode("ascii")
    query = url.query + b"&" + pair if url.query else pair
    return url.copy_with(query=query)


def resolve_next_link(endpoint: str, next_link: str) -> httpx.URL:
    """Resolve ``next_link`` against the root of ``endpoint``.

    Absolute links are used as-is; relative references are joined to the
    endpoint's scheme and host, not to the path of the original request.
    """
    root = httpx.URL(endpoint).join("/")
    return root.join(next_link)


@dataclass(frozen=True, slots=True)
class OperationRequest:
    operation: str
    method: str
    path: str
    api_version: str
    path_params: Mapping[str, str] = field(default_factory=dict)
    query: Mapping[str, Any] | None = None
    body: Any | None = None
    headers: Mapping[str, str] | None = None
    responses: Mapping[int, Any] = field(default_factory=lambda: {200: None})

    @property
    def success_statuses(self) -> tuple[int, ...]:
        return tuple(self.responses)

    def render_path(self) -> str:
        values: dict[str, str] = {}
        for name, value in self.path_params.items():
            if value is None or str(value) == "":
                raise ValueError(f"{self.operation}: path parameter {name!r} is required")
            values[name] = quote(str(value), safe="")
        return self.path.format(**values)

    def initial_url(self, endpoint: str) -> httpx.URL:
        url = httpx.URL(endpoint.rstrip("/") + self.render_path())
        params = encode_query(self.query)
        params[API_VERSION_PARAM] = self.api_version
        return url.copy_merge_params(params)

    def continuation_url(self, endpoint: str, next_link: str) -> httpx.URL:
        return ensure_api_version(resolve_next_link(endpoint, next_link), self.api_version)
