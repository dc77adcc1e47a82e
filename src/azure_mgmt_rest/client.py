"""Management-plane clients (sync + async) shared by every resource provider."""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Iterable
from typing import Any

import httpx

from .config import DEFAULT_ENDPOINT, DEFAULT_TIMEOUT_SECONDS, ClientConfig, normalize_endpoint
from .credentials import AsyncStaticTokenCredential, StaticTokenCredential, bearer_header, default_scopes
from .errors import HttpResponseError
from .hooks import HookRegistry, RequestCall
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
from .response import OperationResponse, RawResponse, ResponseHeaders
from .serialization import decode_model, encode_body
from .transport import AsyncTransport, HttpRequest, SyncTransport, validate_status

_RETRY_SAFE_METHODS = {"GET", "HEAD", "OPTIONS"}
_REDACTED_HEADERS = {"authorization"}

_logger = logging.getLogger(__name__)


def _extract_status_code(error: Exception) -> int | None:
    if isinstance(error, HttpResponseError):
        return error.status_code
    return None


def _redact(headers: dict[str, str]) -> dict[str, str]:
    return {key: value for key, value in headers.items() if key.lower() not in _REDACTED_HEADERS}


class _PipelineBase:
    api_version: str = ""
    # attribute name -> OperationGroup subclass, instantiated per client
    operation_groups: dict[str, type[OperationGroup]] = {}

    def __init__(
        self,
        *,
        endpoint: str,
        scopes: Iterable[str] | None,
        timeout_seconds: float,
        headers: dict[str, str] | None,
        subscription_id: str | None,
        retry_policy: RetryPolicy | None,
        retryable_operations: Iterable[str] | None,
        hook_registry: HookRegistry | None,
        logger: logging.Logger | None,
    ) -> None:
        self.client_config = ClientConfig(
            endpoint=normalize_endpoint(endpoint),
            scopes=list(scopes) if scopes else None,
            timeout_seconds=timeout_seconds,
            headers=dict(headers or {}),
            subscription_id=subscription_id,
        )
        self.subscription_id = subscription_id
        self._scopes = list(scopes) if scopes else default_scopes(self.client_config.endpoint)
        self._hooks = hook_registry or HookRegistry()
        self._retry_policy = retry_policy
        self._retryable_operations = set(retryable_operations or ())
        self._logger = logger or _logger
        for name, group in self.operation_groups.items():
            setattr(self, name, group(self))

    @property
    def endpoint(self) -> str:
        return self.client_config.endpoint

    @property
    def scopes(self) -> list[str]:
        return list(self._scopes)

    @classmethod
    def _config_options(cls, cfg: ClientConfig, options: dict[str, Any]) -> dict[str, Any]:
        merged: dict[str, Any] = {
            "endpoint": cfg.endpoint,
            "scopes": cfg.resolved_scopes(),
            "timeout_seconds": cfg.timeout_seconds,
            "headers": cfg.headers,
            "subscription_id": cfg.subscription_id,
        }
        merged.update(options)
        return merged

    def before(self, operation: str = "*"):
        def decorator(func):
            self._hooks.add_before(operation, func)
            return func

        return decorator

    def after(self, operation: str = "*"):
        def decorator(func):
            self._hooks.add_after(operation, func)
            return func

        return decorator

    def on_error(self, operation: str = "*"):
        def decorator(func):
            self._hooks.add_error(operation, func)
            return func

        return decorator

    def use_middleware(self, middleware: SyncHookMiddleware | AsyncHookMiddleware, *, operation: str = "*") -> None:
        self._hooks.add_middleware(operation, middleware)

    def _is_retry_allowed(self, *, operation: str, method: str) -> bool:
        if method in _RETRY_SAFE_METHODS:
            return True
        return operation in self._retryable_operations

    def _build_http_request(self, request: OperationRequest, continuation: str | None, token: Any) -> HttpRequest:
        headers = dict(self.client_config.headers)
        if continuation is None:
            url = request.initial_url(self.endpoint)
            headers.update(request.headers or {})
            json_body = encode_body(request.body)
        else:
            # Follow-up pages only need auth and api-version.
            url = request.continuation_url(self.endpoint, continuation)
            json_body = None

        headers["Authorization"] = bearer_header(token)
        if json_body is not None:
            headers["Content-Type"] = "application/json"

        return HttpRequest(
            operation=request.operation,
            method=request.method.upper(),
            url=str(url),
            headers=headers,
            json_body=json_body,
        )

    @staticmethod
    def _call_for(http_request: HttpRequest, continuation: str | None) -> RequestCall:
        return RequestCall(
            operation=http_request.operation,
            method=http_request.method,
            url=http_request.url,
            continuation=continuation,
            json_body=http_request.json_body,
            headers=_redact(http_request.headers),
        )

    @staticmethod
    def _decode(request: OperationRequest, response: RawResponse) -> Any:
        model_type = request.responses.get(response.status_code)
        value = None
        if model_type is not None:
            value = decode_model(
                model_type,
                response.body,
                operation=request.operation,
                status_code=response.status_code,
            )

        if len(request.responses) > 1:
            return OperationResponse(
                status_code=response.status_code,
                value=value,
                headers=ResponseHeaders.from_headers(response.headers),
            )
        return value

    @staticmethod
    def _decode_page(request: OperationRequest, page_model: Any, response: RawResponse) -> Any:
        return decode_model(
            page_model,
            response.body,
            operation=request.operation,
            status_code=response.status_code,
        )


class ManagementClient(_PipelineBase):
    """Synchronous Azure Resource Manager client."""

    def __init__(
        self,
        credential: TokenCredential,
        *,
        endpoint: str = DEFAULT_ENDPOINT,
        scopes: Iterable[str] | None = None,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
        headers: dict[str, str] | None = None,
        subscription_id: str | None = None,
        http_client: httpx.Client | None = None,
        request_executor: SyncRequestExecutor | None = None,
        retry_policy: RetryPolicy | None = None,
        retryable_operations: Iterable[str] | None = None,
        hook_registry: HookRegistry | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        super().__init__(
            endpoint=endpoint,
            scopes=scopes,
            timeout_seconds=timeout_seconds,
            headers=headers,
            subscription_id=subscription_id,
            retry_policy=retry_policy,
            retryable_operations=retryable_operations,
            hook_registry=hook_registry,
            logger=logger,
        )
        if credential is None:
            raise ValueError("credential is required")
        self._credential = credential
        self._owns_client = http_client is None
        self._client = http_client or httpx.Client(timeout=self.client_config.timeout_seconds)
        self._executor = request_executor or SyncTransport(self._client)

    @classmethod
    def from_env(cls, credential: TokenCredential | None = None, **options: Any):
        return cls._from_config(ClientConfig.from_env(), credential, options)

    @classmethod
    def from_profile(cls, profile: str | None = None, credential: TokenCredential | None = None, **options: Any):
        return cls._from_config(ClientConfig.from_profile(profile), credential, options)

    @classmethod
    def _from_config(cls, cfg: ClientConfig, credential: TokenCredential | None, options: dict[str, Any]):
        if credential is None:
            if not cfg.bearer_token:
                raise ValueError("no credential given and no bearer token configured")
            credential = StaticTokenCredential(cfg.bearer_token)
        return cls(credential, **cls._config_options(cfg, options))

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def execute(self, request: OperationRequest) -> Any:
        response = self._send(request)
        return self._decode(request, response)

    def paged(self, request: OperationRequest, page_model: Any) -> Pager[Any]:
        def fetch_page(continuation: str | None) -> Any:
            response = self._send(request, continuation)
            return self._decode_page(request, page_model, response)

        return Pager(fetch_page, logger=self._logger)

    def _send(self, request: OperationRequest, continuation: str | None = None) -> RawResponse:
        attempt = 1
        while True:
            token = self._credential.get_token(*self._scopes)
            http_request = self._build_http_request(request, continuation, token)
            call = self._call_for(http_request, continuation)
            self._hooks.run_before(call)
            try:
                self._logger.debug("%s %s", http_request.method, http_request.url)
                response = self._executor.send(http_request)
                self._logger.debug("%s %s -> %d", http_request.method, http_request.url, response.status_code)
                validate_status(response, http_request, request.success_statuses)
                self._hooks.run_after(call, response)
                return response
            except Exception as error:
                if self._retry_policy is None or not self._is_retry_allowed(
                    operation=call.operation, method=call.method
                ):
                    self._hooks.run_error(call, error)
                    raise

                try:
                    should_retry = self._retry_policy.should_retry(
                        attempt=attempt,
                        error=error,
                        status_code=_extract_status_code(error),
                    )
                except Exception as policy_error:
                    self._hooks.run_error(call, policy_error)
                    raise
                if not should_retry:
                    self._hooks.run_error(call, error)
                    raise

                try:
                    delay = self._retry_policy.next_delay_seconds(attempt=attempt)
                except Exception as policy_error:
                    self._hooks.run_error(call, policy_error)
                    raise
                self._logger.warning("%s attempt %d failed (%s); retrying in %.2fs", call.operation, attempt, error, delay)
                if delay > 0:
                    time.sleep(delay)
                attempt += 1


class AsyncManagementClient(_PipelineBase):
    """Asynchronous Azure Resource Manager client."""

    def __init__(
        self,
        credential: AsyncTokenCredential,
        *,
        endpoint: str = DEFAULT_ENDPOINT,
        scopes: Iterable[str] | None = None,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
        headers: dict[str, str] | None = None,
        subscription_id: str | None = None,
        http_client: httpx.AsyncClient | None = None,
        request_executor: AsyncRequestExecutor | None = None,
        retry_policy: RetryPolicy | None = None,
        retryable_operations: Iterable[str] | None = None,
        hook_registry: HookRegistry | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        super().__init__(
            endpoint=endpoint,
            scopes=scopes,
            timeout_seconds=timeout_seconds,
            headers=headers,
            subscription_id=subscription_id,
            retry_policy=retry_policy,
            retryable_operations=retryable_operations,
            hook_registry=hook_registry,
            logger=logger,
        )
        if credential is None:
            raise ValueError("credential is required")
        self._credential = credential
        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient(timeout=self.client_config.timeout_seconds)
        self._executor = request_executor or AsyncTransport(self._client)

    @classmethod
    def from_env(cls, credential: AsyncTokenCredential | None = None, **options: Any):
        return cls._from_config(ClientConfig.from_env(), credential, options)

    @classmethod
    def from_profile(cls, profile: str | None = None, credential: AsyncTokenCredential | None = None, **options: Any):
        return cls._from_config(ClientConfig.from_profile(profile), credential, options)

    @classmethod
    def _from_config(cls, cfg: ClientConfig, credential: AsyncTokenCredential | None, options: dict[str, Any]):
        if credential is None:
            if not cfg.bearer_token:
                raise ValueError("no credential given and no bearer token configured")
            credential = AsyncStaticTokenCredential(cfg.bearer_token)
        return cls(credential, **cls._config_options(cfg, options))

    async def close(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()

    async def execute(self, request: OperationRequest) -> Any:
        response = await self._send(request)
        return self._decode(request, response)

    def paged(self, request: OperationRequest, page_model: Any) -> AsyncPager[Any]:
        async def fetch_page(continuation: str | None) -> Any:
            response = await self._send(request, continuation)
            return self._decode_page(request, page_model, response)

        return AsyncPager(fetch_page, logger=self._logger)

    async def _send(self, request: OperationRequest, continuation: str | None = None) -> RawResponse:
        attempt = 1
        while True:
            token = await self._credential.get_token(*self._scopes)
            http_request = self._build_http_request(request, continuation, token)
            call = self._call_for(http_request, continuation)
            await self._hooks.run_before_async(call)
            try:
                self._logger.debug("%s %s", http_request.method, http_request.url)
                response = await self._executor.send(http_request)
                self._logger.debug("%s %s -> %d", http_request.method, http_request.url, response.status_code)
                validate_status(response, http_request, request.success_statuses)
                await self._hooks.run_after_async(call, response)
                return response
            except Exception as error:
                if self._retry_policy is None or not self._is_retry_allowed(
                    operation=call.operation, method=call.method
                ):
                    await self._hooks.run_error_async(call, error)
                    raise

                try:
                    should_retry = self._retry_policy.should_retry(
                        attempt=attempt,
                        error=error,
                        status_code=_extract_status_code(error),
                    )
                except Exception as policy_error:
                    await self._hooks.run_error_async(call, policy_error)
                    raise
                if not should_retry:
                    await self._hooks.run_error_async(call, error)
                    raise

                try:
                    delay = self._retry_policy.next_delay_seconds(attempt=attempt)
                except Exception as policy_error:
                    await self._hooks.run_error_async(call, policy_error)
                    raise
                self._logger.warning("%s attempt %d failed (%s); retrying in %.2fs", call.operation, attempt, error, delay)
                if delay > 0:
                    await asyncio.sleep(delay)
                attempt += 1
