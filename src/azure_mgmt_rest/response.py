"""Typed response metadata shared by every operation."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime
from email.utils import parsedate_to_datetime
from typing import Any, Generic, TypeVar

T = TypeVar("T")


def _header(headers: Mapping[str, str], name: str) -> str | None:
    # httpx.Headers is case-insensitive; plain dicts from fakes may not be.
    value = headers.get(name)
    if value is None:
        value = headers.get(name.lower())
    if value is None or not str(value).strip():
        return None
    return str(value).strip()


def _parse_http_date(value: str | None) -> datetime | None:
    if value is None:
        return None
    try:
        return parsedate_to_datetime(value)
    except (TypeError, ValueError):
        return None


def _parse_seconds(value: str | None) -> int | None:
    if value is None:
        return None
    try:
        parsed = int(value)
    except ValueError:
        return None
    return parsed if parsed >= 0 else None


@dataclass(frozen=True, slots=True)
class ResponseHeaders:
    request_id: str | None = None
    correlation_request_id: str | None = None
    location: str | None = None
    azure_async_operation: str | None = None
    retry_after: int | None = None
    date: datetime | None = None
    error_code: str | None = None

    @classmethod
    def from_headers(cls, headers: Mapping[str, str] | None) -> ResponseHeaders:
        if not headers:
            return cls()
        return cls(
            request_id=_header(headers, "x-ms-request-id"),
            correlation_request_id=_header(headers, "x-ms-correlation-request-id"),
            location=_header(headers, "Location"),
            azure_async_operation=_header(headers, "Azure-AsyncOperation"),
            retry_after=_parse_seconds(_header(headers, "Retry-After")),
            date=_parse_http_date(_header(headers, "Date")),
            error_code=_header(headers, "x-ms-error-code"),
        )


@dataclass(slots=True)
class RawResponse:
    status_code: int
    headers: Mapping[str, str] = field(default_factory=dict)
    body: Any | None = None


@dataclass(frozen=True, slots=True)
class OperationResponse(Generic[T]):
    """Result of an operation that documents more than one success status."""

    status_code: int
    value: T | None
    headers: ResponseHeaders = field(default_factory=ResponseHeaders)

    @property
    def accepted(self) -> bool:
        return self.status_code == 202
