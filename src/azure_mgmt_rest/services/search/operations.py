"""Operation groups for Microsoft.Search."""

from __future__ import annotations

from typing import Any

from ...models import Operation, SinglePageResult
from ...operations import OperationGroup
from .models import (
    AdminKeyKind,
    AdminKeyResult,
    CheckNameAvailabilityInput,
    CheckNameAvailabilityOutput,
    ListQueryKeysResult,
    PrivateEndpointConnection,
    PrivateEndpointConnectionListResult,
    PrivateLinkResourcesResult,
    QueryKey,
    SearchService,
    SearchServiceListResult,
    SearchServiceUpdate,
    SharedPrivateLinkResource,
    SharedPrivateLinkResourceListResult,
)

_SUBSCRIPTION = "/subscriptions/{subscriptionId}"
_SERVICES = _SUBSCRIPTION + "/resourceGroups/{resourceGroupName}/providers/Microsoft.Search/searchServices"
_SERVICE = _SERVICES + "/{searchServiceName}"

# This API version returns the operation catalogue without a nextLink.
_OperationList = SinglePageResult[Operation]


def _client_request_headers(client_request_id: str | None) -> dict[str, str] | None:
    if client_request_id is None:
        return None
    return {"x-ms-client-request-id": client_request_id}


class _SearchGroup(OperationGroup):
    def _service_params(
        self, resource_group_name: str, search_service_name: str, subscription_id: str | None
    ) -> dict[str, str]:
        return {
            "subscriptionId": self._subscription_id(subscription_id),
            "resourceGroupName": resource_group_name,
            "searchServiceName": search_service_name,
        }


class Operations(OperationGroup):
    def list(self) -> Any:
        """List the REST operations of the provider (single page)."""
        request = self._request(
            "search.operations.list",
            "GET",
            "/providers/Microsoft.Search/operations",
            responses={200: _OperationList},
        )
        return self._paged(request, _OperationList)


class AdminKeysOperations(_SearchGroup):
    def get(
        self,
        resource_group_name: str,
        search_service_name: str,
        *,
        subscription_id: str | None = None,
        client_request_id: str | None = None,
    ) -> Any:
        request = self._request(
            "search.admin_keys.get",
            "POST",
            _SERVICE + "/listAdminKeys",
            path_params=self._service_params(resource_group_name, search_service_name, subscription_id),
            headers=_client_request_headers(client_request_id),
            responses={200: AdminKeyResult},
        )
        return self._execute(request)

    def regenerate(
        self,
        resource_group_name: str,
        search_service_name: str,
        key_kind: AdminKeyKind | str,
        *,
        subscription_id: str | None = None,
        client_request_id: str | None = None,
    ) -> Any:
        params = self._service_params(resource_group_name, search_service_name, subscription_id)
        params["keyKind"] = key_kind.value if isinstance(key_kind, AdminKeyKind) else key_kind
        request = self._request(
            "search.admin_keys.regenerate",
            "POST",
            _SERVICE + "/regenerateAdminKey/{keyKind}",
            path_params=params,
            headers=_client_request_headers(client_request_id),
            responses={200: AdminKeyResult},
        )
        return self._execute(request)


class QueryKeysOperations(_SearchGroup):
    def create(
        self,
        resource_group_name: str,
        search_service_name: str,
        name: str,
        *,
        subscription_id: str | None = None,
        client_request_id: str | None = None,
    ) -> Any:
        params = self._service_params(resource_group_name, search_service_name, subscription_id)
        params["name"] = name
        request = self._request(
            "search.query_keys.create",
            "POST",
            _SERVICE + "/createQueryKey/{name}",
            path_params=params,
            headers=_client_request_headers(client_request_id),
            responses={200: QueryKey},
        )
        return self._execute(request)

    def list_by_search_service(
        self,
        resource_group_name: str,
        search_service_name: str,
        *,
        subscription_id: str | None = None,
        client_request_id: str | None = None,
    ) -> Any:
        # A POST list: follow-up pages are requested with POST as well.
        request = self._request(
            "search.query_keys.list_by_search_service",
            "POST",
            _SERVICE + "/listQueryKeys",
            path_params=self._service_params(resource_group_name, search_service_name, subscription_id),
            headers=_client_request_headers(client_request_id),
            responses={200: ListQueryKeysResult},
        )
        return self._paged(request, ListQueryKeysResult)

    def delete(
        self,
        resource_group_name: str,
        search_service_name: str,
        key: str,
        *,
        subscription_id: str | None = None,
        client_request_id: str | None = None,
    ) -> Any:
        params = self._service_params(resource_group_name, search_service_name, subscription_id)
        params["key"] = key
        request = self._request(
            "search.query_keys.delete",
            "DELETE",
            _SERVICE + "/deleteQueryKey/{key}",
            path_params=params,
            headers=_client_request_headers(client_request_id),
            responses={200: None, 204: None},
        )
        return self._execute(request)


class ServicesOperations(_SearchGroup):
    def get(
        self,
        resource_group_name: str,
        search_service_name: str,
        *,
        subscription_id: str | None = None,
        client_request_id: str | None = None,
    ) -> Any:
        request = self._request(
            "search.services.get",
            "GET",
            _SERVICE,
            path_params=self._service_params(resource_group_name, search_service_name, subscription_id),
            headers=_client_request_headers(client_request_id),
            responses={200: SearchService},
        )
        return self._execute(request)

    def create_or_update(
        self,
        resource_group_name: str,
        search_service_name: str,
        service: SearchService,
        *,
        subscription_id: str | None = None,
        client_request_id: str | None = None,
    ) -> Any:
        request = self._request(
            "search.services.create_or_update",
            "PUT",
            _SERVICE,
            path_params=self._service_params(resource_group_name, search_service_name, subscription_id),
            body=service,
            headers=_client_request_headers(client_request_id),
            responses={200: SearchService, 201: SearchService},
        )
        return self._execute(request)

    def update(
        self,
        resource_group_name: str,
        search_service_name: str,
        service: SearchServiceUpdate,
        *,
        subscription_id: str | None = None,
        client_request_id: str | None = None,
    ) -> Any:
        request = self._request(
            "search.services.update",
            "PATCH",
            _SERVICE,
            path_params=self._service_params(resource_group_name, search_service_name, subscription_id),
            body=service,
            headers=_client_request_headers(client_request_id),
            responses={200: SearchService},
        )
        return self._execute(request)

    def delete(
        self,
        resource_group_name: str,
        search_service_name: str,
        *,
        subscription_id: str | None = None,
        client_request_id: str | None = None,
    ) -> Any:
        request = self._request(
            "search.services.delete",
            "DELETE",
            _SERVICE,
            path_params=self._service_params(resource_group_name, search_service_name, subscription_id),
            headers=_client_request_headers(client_request_id),
            responses={200: None, 204: None},
        )
        return self._execute(request)

    def list_by_resource_group(
        self,
        resource_group_name: str,
        *,
        subscription_id: str | None = None,
        client_request_id: str | None = None,
    ) -> Any:
        request = self._request(
            "search.services.list_by_resource_group",
            "GET",
            _SERVICES,
            path_params={
                "subscriptionId": self._subscription_id(subscription_id),
                "resourceGroupName": resource_group_name,
            },
            headers=_client_request_headers(client_request_id),
            responses={200: SearchServiceListResult},
        )
        return self._paged(request, SearchServiceListResult)

    def list_by_subscription(
        self,
        *,
        subscription_id: str | None = None,
        client_request_id: str | None = None,
    ) -> Any:
        request = self._request(
            "search.services.list_by_subscription",
            "GET",
            _SUBSCRIPTION + "/providers/Microsoft.Search/searchServices",
            path_params={"subscriptionId": self._subscription_id(subscription_id)},
            headers=_client_request_headers(client_request_id),
            responses={200: SearchServiceListResult},
        )
        return self._paged(request, SearchServiceListResult)

    def check_name_availability(
        self,
        name: str,
        *,
        subscription_id: str | None = None,
        client_request_id: str | None = None,
    ) -> Any:
        request = self._request(
            "search.services.check_name_availability",
            "POST",
            _SUBSCRIPTION + "/providers/Microsoft.Search/checkNameAvailability",
            path_params={"subscriptionId": self._subscription_id(subscription_id)},
            body=CheckNameAvailabilityInput(name=name),
            headers=_client_request_headers(client_request_id),
            responses={200: CheckNameAvailabilityOutput},
        )
        return self._execute(request)


class PrivateLinkResourcesOperations(_SearchGroup):
    def list_supported(
        self,
        resource_group_name: str,
        search_service_name: str,
        *,
        subscription_id: str | None = None,
        client_request_id: str | None = None,
    ) -> Any:
        request = self._request(
            "search.private_link_resources.list_supported",
            "GET",
            _SERVICE + "/privateLinkResources",
            path_params=self._service_params(resource_group_name, search_service_name, subscription_id),
            headers=_client_request_headers(client_request_id),
            responses={200: PrivateLinkResourcesResult},
        )
        return self._paged(request, PrivateLinkResourcesResult)


class PrivateEndpointConnectionsOperations(_SearchGroup):
    _PATH = _SERVICE + "/privateEndpointConnections/{privateEndpointConnectionName}"

    def _connection_params(
        self,
        resource_group_name: str,
        search_service_name: str,
        private_endpoint_connection_name: str,
        subscription_id: str | None,
    ) -> dict[str, str]:
        params = self._service_params(resource_group_name, search_service_name, subscription_id)
        params["privateEndpointConnectionName"] = private_endpoint_connection_name
        return params

    def get(
        self,
        resource_group_name: str,
        search_service_name: str,
        private_endpoint_connection_name: str,
        *,
        subscription_id: str | None = None,
        client_request_id: str | None = None,
    ) -> Any:
        request = self._request(
            "search.private_endpoint_connections.get",
            "GET",
            self._PATH,
            path_params=self._connection_params(
                resource_group_name, search_service_name, private_endpoint_connection_name, subscription_id
            ),
            headers=_client_request_headers(client_request_id),
            responses={200: PrivateEndpointConnection},
        )
        return self._execute(request)

    def update(
        self,
        resource_group_name: str,
        search_service_name: str,
        private_endpoint_connection_name: str,
        connection: PrivateEndpointConnection,
        *,
        subscription_id: str | None = None,
        client_request_id: str | None = None,
    ) -> Any:
        request = self._request(
            "search.private_endpoint_connections.update",
            "PUT",
            self._PATH,
            path_params=self._connection_params(
                resource_group_name, search_service_name, private_endpoint_connection_name, subscription_id
            ),
            body=connection,
            headers=_client_request_headers(client_request_id),
            responses={200: PrivateEndpointConnection},
        )
        return self._execute(request)

    def delete(
        self,
        resource_group_name: str,
        search_service_name: str,
        private_endpoint_connection_name: str,
        *,
        subscription_id: str | None = None,
        client_request_id: str | None = None,
    ) -> Any:
        request = self._request(
            "search.private_endpoint_connections.delete",
            "DELETE",
            self._PATH,
            path_params=self._connection_params(
                resource_group_name, search_service_name, private_endpoint_connection_name, subscription_id
            ),
            headers=_client_request_headers(client_request_id),
            responses={200: PrivateEndpointConnection},
        )
        return self._execute(request)

    def list_by_service(
        self,
        resource_group_name: str,
        search_service_name: str,
        *,
        subscription_id: str | None = None,
        client_request_id: str | None = None,
    ) -> Any:
        request = self._request(
            "search.private_endpoint_connections.list_by_service",
            "GET",
            _SERVICE + "/privateEndpointConnections",
            path_params=self._service_params(resource_group_name, search_service_name, subscription_id),
            headers=_client_request_headers(client_request_id),
            responses={200: PrivateEndpointConnectionListResult},
        )
        return self._paged(request, PrivateEndpointConnectionListResult)


class SharedPrivateLinkResourcesOperations(_SearchGroup):
    _PATH = _SERVICE + "/sharedPrivateLinkResources/{sharedPrivateLinkResourceName}"

    def _resource_params(
        self,
        resource_group_name: str,
        search_service_name: str,
        shared_private_link_resource_name: str,
        subscription_id: str | None,
    ) -> dict[str, str]:
        params = self._service_params(resource_group_name, search_service_name, subscription_id)
        params["sharedPrivateLinkResourceName"] = shared_private_link_resource_name
        return params

    def get(
        self,
        resource_group_name: str,
        search_service_name: str,
        shared_private_link_resource_name: str,
        *,
        subscription_id: str | None = None,
        client_request_id: str | None = None,
    ) -> Any:
        request = self._request(
            "search.shared_private_link_resources.get",
            "GET",
            self._PATH,
            path_params=self._resource_params(
                resource_group_name, search_service_name, shared_private_link_resource_name, subscription_id
            ),
            headers=_client_request_headers(client_request_id),
            responses={200: SharedPrivateLinkResource},
        )
        return self._execute(request)

    def create_or_update(
        self,
        resource_group_name: str,
        search_service_name: str,
        shared_private_link_resource_name: str,
        resource: SharedPrivateLinkResource,
        *,
        subscription_id: str | None = None,
        client_request_id: str | None = None,
    ) -> Any:
        """Create or update; a 202 means provisioning continues server-side."""
        request = self._request(
            "search.shared_private_link_resources.create_or_update",
            "PUT",
            self._PATH,
            path_params=self._resource_params(
                resource_group_name, search_service_name, shared_private_link_resource_name, subscription_id
            ),
            body=resource,
            headers=_client_request_headers(client_request_id),
            responses={200: SharedPrivateLinkResource, 202: None},
        )
        return self._execute(request)

    def delete(
        self,
        resource_group_name: str,
        search_service_name: str,
        shared_private_link_resource_name: str,
        *,
        subscription_id: str | None = None,
        client_request_id: str | None = None,
    ) -> Any:
        request = self._request(
            "search.shared_private_link_resources.delete",
            "DELETE",
            self._PATH,
            path_params=self._resource_params(
                resource_group_name, search_service_name, shared_private_link_resource_name, subscription_id
            ),
            headers=_client_request_headers(client_request_id),
            responses={202: None, 204: None},
        )
        return self._execute(request)

    def list_by_service(
        self,
        resource_group_name: str,
        search_service_name: str,
        *,
        subscription_id: str | None = None,
        client_request_id: str | None = None,
    ) -> Any:
        request = self._request(
            "search.shared_private_link_resources.list_by_service",
            "GET",
            _SERVICE + "/sharedPrivateLinkResources",
            path_params=self._service_params(resource_group_name, search_service_name, subscription_id),
            headers=_client_request_headers(client_request_id),
            responses={200: SharedPrivateLinkResourceListResult},
        )
        return self._paged(request, SharedPrivateLinkResourceListResult)
