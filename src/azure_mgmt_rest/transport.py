"""HTTP transport for azure-mgmt-rest clients."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from json import JSONDecodeError
from typing import Any

import httpx
from pydantic import ValidationError as PydanticValidationError

from .errors import ClientTimeoutError, RequestDetails, TransportError, classify_http_error
from .models import ErrorDetail, ErrorResponse
from .response import RawResponse


@dataclass(slots=True)
class HttpRequest:
    operation: str
    method: str
    url: str
    headers: dict[str, str] = field(default_factory=dict)
    json_body: Any | None = None


def parse_response_body(response: httpx.Response) -> Any:
    if not response.content:
        return None

    content_type = response.headers.get("content-type", "")
    if "json" not in content_type:
        return response.text

    try:
        return response.json()
    except JSONDecodeError:
        return response.text


def extract_error_detail(response: RawResponse) -> ErrorDetail | None:
    """Read the ARM error envelope from a failed response, if it has one.

    Most providers wrap the detail as ``{"error": {...}}``; a few return the
    detail object bare. Bodies of any other shape yield ``None`` and the
    error is still raised from the status code alone.
    """
    body = response.body
    if not isinstance(body, dict):
        return None

    try:
        if isinstance(body.get("error"), dict):
            return ErrorResponse.model_validate(body).error
        if "code" in body or "message" in body:
            return ErrorDetail.model_validate(body)
    except PydanticValidationError:
        return None
    return None


def extract_error_code(response: RawResponse, detail: ErrorDetail | None = None) -> str | None:
    header_code = response.headers.get("x-ms-error-code") if response.headers else None
    if isinstance(header_code, str) and header_code.strip():
        return header_code.strip()

    if detail is None:
        detail = extract_error_detail(response)
    if detail is not None and detail.code:
        return detail.code
    return None


def validate_status(response: RawResponse, request: HttpRequest, success_statuses: Iterable[int]) -> None:
    # Success is whatever the operation documents, not the whole 2xx range:
    # an undocumented 202 means the client would misread the body.
    if response.status_code in set(success_statuses):
        return

    detail = extract_error_detail(response)
    details = RequestDetails(
        operation=request.operation,
        method=request.method,
        url=request.url,
        status_code=response.status_code,
        error_code=extract_error_code(response, detail),
        error_message=detail.message if detail is not None else None,
        error=detail,
        response_body=response.body,
    )
    raise classify_http_error(details)


def _to_raw_response(response: httpx.Response) -> RawResponse:
    return RawResponse(
        status_code=response.status_code,
        headers=response.headers,
        body=parse_response_body(response),
    )


class SyncTransport:
    def __init__(self, client: httpx.Client) -> None:
        self._client = client

    def send(self, request: HttpRequest) -> RawResponse:
        try:
            response = self._client.request(
                request.method,
                request.url,
                json=request.json_body,
                headers=request.headers,
            )
        except httpx.TimeoutException as error:
            raise ClientTimeoutError(str(error)) from error
        except httpx.HTTPError as error:
            raise TransportError(str(error)) from error

        return _to_raw_response(response)


class AsyncTransport:
    def __init__(self, client: httpx.AsyncClient) -> None:
        self._client = client

    async def send(self, request: HttpRequest) -> RawResponse:
        try:
            response = await self._client.request(
                request.method,
                request.url,
                json=request.json_body,
                headers=request.headers,
            )
        except httpx.TimeoutException as error:
            raise ClientTimeoutError(str(error)) from error
        except httpx.HTTPError as error:
            raise TransportError(str(error)) from error

        return _to_raw_response(response)
