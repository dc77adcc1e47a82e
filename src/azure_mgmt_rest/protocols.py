"""Protocol contracts for azure-mgmt-rest extension points."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from .hooks import RequestCall
    from .response import RawResponse
    from .transport import HttpRequest


@runtime_checkable
class SyncRequestExecutor(Protocol):
    def send(self, request: HttpRequest) -> RawResponse: ...


@runtime_checkable
class AsyncRequestExecutor(Protocol):
    async def send(self, request: HttpRequest) -> RawResponse: ...


@runtime_checkable
class TokenCredential(Protocol):
    def get_token(self, *scopes: str, **kwargs: Any) -> Any: ...


@runtime_checkable
class AsyncTokenCredential(Protocol):
    async def get_token(self, *scopes: str, **kwargs: Any) -> Any: ...


@runtime_checkable
class RetryPolicy(Protocol):
    def should_retry(
        self,
        *,
        attempt: int,
        error: Exception | None,
        status_code: int | None,
    ) -> bool: ...

    def next_delay_seconds(self, *, attempt: int) -> float: ...


@runtime_checkable
class SyncHookMiddleware(Protocol):
    def before(self, call: RequestCall) -> None: ...

    def after(self, call: RequestCall, response: Any) -> None: ...

    def on_error(self, call: RequestCall, error: Exception) -> None: ...


@runtime_checkable
class AsyncHookMiddleware(Protocol):
    async def before(self, call: RequestCall) -> None: ...

    async def after(self, call: RequestCall, response: Any) -> None: ...

    async def on_error(self, call: RequestCall, error: Exception) -> None: ...
