"""Error hierarchy for azure-mgmt-rest clients."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(slots=True)
class RequestDetails:
    operation: str
    method: str
    url: str
    status_code: int | None = None
    error_code: str | None = None
    error_message: str | None = None
    # parsed ErrorDetail when the body carried an ARM error envelope
    error: Any | None = None
    response_body: Any | None = None


class AzureRestError(Exception):
    """Base class for all client errors."""


class TransportError(AzureRestError):
    """Raised on network/transport failures."""


class ClientTimeoutError(TransportError):
    """Raised when request times out."""


class HttpResponseError(AzureRestError):
    """Raised when the service answers with a status outside the operation's success set."""

    def __init__(self, message: str, *, details: RequestDetails) -> None:
        super().__init__(message)
        self.details = details

    @property
    def status_code(self) -> int | None:
        return self.details.status_code

    @property
    def error_code(self) -> str | None:
        return self.details.error_code

    @property
    def error_message(self) -> str | None:
        return self.details.error_message

    @property
    def error(self) -> Any | None:
        return self.details.error


class AuthError(HttpResponseError):
    """Raised for authentication/authorization failures."""


class ValidationError(HttpResponseError):
    """Raised for invalid request payloads."""


class NotFoundError(HttpResponseError):
    """Raised when requested resource does not exist."""


class ConflictError(HttpResponseError):
    """Raised when request conflicts with current state."""


class GoneError(HttpResponseError):
    """Raised when resource is gone/purged."""


class ThrottledError(HttpResponseError):
    """Raised when the service rejects the request with 429."""


class ServerError(HttpResponseError):
    """Raised for server-side failures."""


class DeserializationError(AzureRestError):
    """Raised when a response body does not match the expected model."""

    def __init__(
        self,
        message: str,
        *,
        model_name: str,
        errors: Any = None,
        operation: str | None = None,
        status_code: int | None = None,
        raw_sample: Any | None = None,
    ) -> None:
        super().__init__(message)
        self.model_name = model_name
        self.errors = errors
        self.operation = operation
        self.status_code = status_code
        self.raw_sample = raw_sample


class EnumShapeError(DeserializationError):
    """Raised when an open-enum wire value is not a JSON string."""

    def __init__(self, *, enum_name: str, value: Any) -> None:
        super().__init__(
            f"{enum_name} expects a string wire value, got {type(value).__name__}",
            model_name=enum_name,
            errors=[{"type": "enum_shape", "input_type": type(value).__name__}],
            raw_sample=value if isinstance(value, (int, float, bool)) or value is None else repr(value),
        )
        self.enum_name = enum_name


def classify_http_error(details: RequestDetails) -> HttpResponseError:
    status = details.status_code or 0
    message = f"{details.operation} failed with status {status}"
    if details.error_code:
        message += f" ({details.error_code})"

    if status in (401, 403):
        return AuthError(message, details=details)
    if status == 400:
        return ValidationError(message, details=details)
    if status == 404:
        return NotFoundError(message, details=details)
    if status == 409:
        return ConflictError(message, details=details)
    if status == 410:
        return GoneError(message, details=details)
    if status == 429:
        return ThrottledError(message, details=details)
    if status >= 500:
        return ServerError(message, details=details)

    return HttpResponseError(message, details=details)
