"""azure-mgmt-rest: typed Azure Resource Manager clients.

This module uses lazy exports so lightweight utilities (for example config parsing
or the open-enum codec) can be imported without immediately importing httpx.
Service clients live under :mod:`azure_mgmt_rest.services`.
"""

from __future__ import annotations

from importlib import import_module
from typing import TYPE_CHECKING, Any

__all__ = [
    "AccessToken",
    "AsyncHookMiddleware",
    "AsyncManagementClient",
    "AsyncPager",
    "AsyncRequestExecutor",
    "AsyncStaticTokenCredential",
    "AsyncTokenCredential",
    "AuthError",
    "AzureRestError",
    "ClientConfig",
    "ClientTimeoutError",
    "ConflictError",
    "DeserializationError",
    "EnumShapeError",
    "GoneError",
    "HookRegistry",
    "HttpResponseError",
    "ManagementClient",
    "NotFoundError",
    "OperationGroup",
    "OperationRequest",
    "OperationResponse",
    "Pager",
    "ResponseHeaders",
    "RetryPolicy",
    "ServerError",
    "StaticTokenCredential",
    "SyncHookMiddleware",
    "SyncRequestExecutor",
    "ThrottledError",
    "TokenCredential",
    "TransportError",
    "UnknownValue",
    "ValidationError",
    "open_enum",
]

_EXPORTS: dict[str, tuple[str, str]] = {
    "AsyncManagementClient": (".client", "AsyncManagementClient"),
    "ManagementClient": (".client", "ManagementClient"),
    "ClientConfig": (".config", "ClientConfig"),
    "AccessToken": (".credentials", "AccessToken"),
    "AsyncStaticTokenCredential": (".credentials", "AsyncStaticTokenCredential"),
    "StaticTokenCredential": (".credentials", "StaticTokenCredential"),
    "AuthError": (".errors", "AuthError"),
    "AzureRestError": (".errors", "AzureRestError"),
    "ClientTimeoutError": (".errors", "ClientTimeoutError"),
    "ConflictError": (".errors", "ConflictError"),
    "DeserializationError": (".errors", "DeserializationError"),
    "EnumShapeError": (".errors", "EnumShapeError"),
    "GoneError": (".errors", "GoneError"),
    "HttpResponseError": (".errors", "HttpResponseError"),
    "NotFoundError": (".errors", "NotFoundError"),
    "ServerError": (".errors", "ServerError"),
    "ThrottledError": (".errors", "ThrottledError"),
    "TransportError": (".errors", "TransportError"),
    "ValidationError": (".errors", "ValidationError"),
    "HookRegistry": (".hooks", "HookRegistry"),
    "UnknownValue": (".open_enum", "UnknownValue"),
    "open_enum": (".open_enum", "open_enum"),
    "OperationGroup": (".operations", "OperationGroup"),
    "AsyncPager": (".pager", "AsyncPager"),
    "Pager": (".pager", "Pager"),
    "AsyncHookMiddleware": (".protocols", "AsyncHookMiddleware"),
    "AsyncRequestExecutor": (".protocols", "AsyncRequestExecutor"),
    "AsyncTokenCredential": (".protocols", "AsyncTokenCredential"),
    "RetryPolicy": (".protocols", "RetryPolicy"),
    "SyncHookMiddleware": (".protocols", "SyncHookMiddleware"),
    "SyncRequestExecutor": (".protocols", "SyncRequestExecutor"),
    "TokenCredential": (".protocols", "TokenCredential"),
    "OperationRequest": (".request", "OperationRequest"),
    "OperationResponse": (".response", "OperationResponse"),
    "ResponseHeaders": (".response", "ResponseHeaders"),
}

if TYPE_CHECKING:
    from .client import AsyncManagementClient, ManagementClient
    from .config import ClientConfig
    from .credentials import AccessToken, AsyncStaticTokenCredential, StaticTokenCredential
    from .errors import (
        AuthError,
        AzureRestError,
        ClientTimeoutError,
        ConflictError,
        DeserializationError,
        EnumShapeError,
        GoneError,
        HttpResponseError,
        NotFoundError,
        ServerError,
        ThrottledError,
        TransportError,
        ValidationError,
    )
    from .hooks import HookRegistry
    from .open_enum import UnknownValue, open_enum
    from .operations import OperationGroup
    from .pager import AsyncPager, Pager
    from .protocols import (
        AsyncHookMiddleware,
        AsyncRequestExecutor,
        AsyncTokenCredential,
        RetryPolicy,
        SyncHookMiddleware,
        SyncRequestExecutor,
        TokenCredential,
    )
    from .request import OperationRequest
    from .response import OperationResponse, ResponseHeaders


def __getattr__(name: str) -> Any:
    module_info = _EXPORTS.get(name)
    if module_info is None:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

    module_name, attribute = module_info
    module = import_module(module_name, __name__)
    value = getattr(module, attribute)
    globals()[name] = value
    return value
