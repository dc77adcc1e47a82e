"""Base class for per-resource operation groups."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from .request import OperationRequest

if TYPE_CHECKING:
    from .client import AsyncManagementClient, ManagementClient


class OperationGroup:
    """Builds typed requests and hands them to the owning client.

    The same group class is attached to the sync and the async client:
    ``_execute`` returns whatever the client's ``execute`` returns, which is a
    value for :class:`ManagementClient` and an awaitable for
    :class:`AsyncManagementClient`.
    """

    def __init__(self, client: ManagementClient | AsyncManagementClient) -> None:
        self._client = client

    @property
    def api_version(self) -> str:
        return self._client.api_version

    def _subscription_id(self, subscription_id: str | None) -> str:
        resolved = subscription_id or self._client.subscription_id
        if not resolved:
            raise ValueError("subscription_id is required (pass it here or to the client)")
        return resolved

    def _request(
        self,
        operation: str,
        method: str,
        path: str,
        *,
        path_params: Mapping[str, str] | None = None,
        query: Mapping[str, Any] | None = None,
        body: Any | None = None,
        headers: Mapping[str, str] | None = None,
        responses: Mapping[int, Any] | None = None,
    ) -> OperationRequest:
        return OperationRequest(
            operation=operation,
            method=method,
            path=path,
            api_version=self.api_version,
            path_params=dict(path_params or {}),
            query=query,
            body=body,
            headers=headers,
            responses=dict(responses) if responses is not None else {200: None},
        )

    def _execute(self, request: OperationRequest) -> Any:
        return self._client.execute(request)

    def _paged(self, request: OperationRequest, page_model: Any) -> Any:
        return self._client.paged(request, page_model)
