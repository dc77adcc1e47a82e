from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import pytest

from azure_mgmt_rest.credentials import AccessToken, AsyncStaticTokenCredential, StaticTokenCredential, bearer_header
from azure_mgmt_rest.errors import TransportError
from azure_mgmt_rest.protocols import (
    AsyncRequestExecutor,
    AsyncTokenCredential,
    RetryPolicy,
    SyncRequestExecutor,
    TokenCredential,
)
from azure_mgmt_rest.response import RawResponse
from azure_mgmt_rest.services.search import AsyncSearchManagementClient, SearchManagementClient
from azure_mgmt_rest.transport import HttpRequest


@dataclass
class _SyncExecutor:
    calls: list[HttpRequest] = field(default_factory=list)

    def send(self, request: HttpRequest) -> RawResponse:
        self.calls.append(request)
        return RawResponse(200, {}, {"value": [{"name": "Microsoft.Search/operations/read"}]})


@dataclass
class _AsyncExecutor:
    calls: list[HttpRequest] = field(default_factory=list)

    async def send(self, request: HttpRequest) -> RawResponse:
        self.calls.append(request)
        return RawResponse(200, {}, {"value": [{"name": "Microsoft.Search/operations/read"}]})


class _IdentityStyleCredential:
    """Shaped like azure-identity credentials: returns an object with ``.token``."""

    def get_token(self, *scopes: str, **kwargs: Any) -> Any:
        return AccessToken("identity-token", 0)


def test_fakes_satisfy_runtime_protocols() -> None:
    assert isinstance(_SyncExecutor(), SyncRequestExecutor)
    assert isinstance(_AsyncExecutor(), AsyncRequestExecutor)
    assert isinstance(_IdentityStyleCredential(), TokenCredential)
    assert isinstance(AsyncStaticTokenCredential("t"), AsyncTokenCredential)
    assert not isinstance(object(), RetryPolicy)


def test_sync_executor_injection_uses_protocol_executor() -> None:
    executor = _SyncExecutor()
    client = SearchManagementClient(_IdentityStyleCredential(), request_executor=executor)
    try:
        operations = list(client.operations.list())
    finally:
        client.close()

    assert [operation.name for operation in operations] == ["Microsoft.Search/operations/read"]
    assert executor.calls[0].operation == "search.operations.list"
    assert executor.calls[0].method == "GET"
    assert executor.calls[0].headers["Authorization"] == "Bearer identity-token"


@pytest.mark.asyncio
async def test_async_executor_injection_uses_protocol_executor() -> None:
    executor = _AsyncExecutor()
    client = AsyncSearchManagementClient(AsyncStaticTokenCredential("t"), request_executor=executor)
    try:
        operations = await client.operations.list().to_list()
    finally:
        await client.close()

    assert len(operations) == 1
    assert executor.calls[0].operation == "search.operations.list"


def test_transport_errors_propagate_without_retry_policy() -> None:
    class FailingExecutor(_SyncExecutor):
        def send(self, request: HttpRequest) -> RawResponse:
            self.calls.append(request)
            raise TransportError("connection reset")

    executor = FailingExecutor()
    client = SearchManagementClient(StaticTokenCredential("t"), request_executor=executor)
    try:
        with pytest.raises(TransportError):
            client.operations.list().first_page()
    finally:
        client.close()

    assert len(executor.calls) == 1


def test_retry_policy_sees_transport_errors_without_status() -> None:
    class RetryOnceExecutor(_SyncExecutor):
        def send(self, request: HttpRequest) -> RawResponse:
            if not self.calls:
                self.calls.append(request)
                raise TransportError("temporary")
            return super().send(request)

    class Policy:
        def should_retry(self, *, attempt: int, error: Exception | None, status_code: int | None) -> bool:
            assert isinstance(error, TransportError)
            assert status_code is None
            return attempt == 1

        def next_delay_seconds(self, *, attempt: int) -> float:
            assert attempt == 1
            return 0.0

    executor = RetryOnceExecutor()
    client = SearchManagementClient(StaticTokenCredential("t"), request_executor=executor, retry_policy=Policy())
    try:
        page = client.operations.list().first_page()
    finally:
        client.close()

    assert len(page.value) == 1
    assert len(executor.calls) == 2


def test_static_credential_rejects_blank_tokens() -> None:
    with pytest.raises(ValueError):
        StaticTokenCredential("  ")


def test_bearer_header_accepts_raw_strings_and_token_objects() -> None:
    assert bearer_header("abc") == "Bearer abc"
    assert bearer_header(AccessToken("xyz", 0)) == "Bearer xyz"
    with pytest.raises(ValueError):
        bearer_header(AccessToken("", 0))
