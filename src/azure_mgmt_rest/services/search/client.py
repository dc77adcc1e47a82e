"""Clients for the Microsoft.Search management API."""

from __future__ import annotations

from ...client import AsyncManagementClient, ManagementClient
from .operations import (
    AdminKeysOperations,
    Operations,
    PrivateEndpointConnectionsOperations,
    PrivateLinkResourcesOperations,
    QueryKeysOperations,
    ServicesOperations,
    SharedPrivateLinkResourcesOperations,
)

API_VERSION = "2020-08-01-preview"

_GROUPS = {
    "operations": Operations,
    "admin_keys": AdminKeysOperations,
    "query_keys": QueryKeysOperations,
    "services": ServicesOperations,
    "private_link_resources": PrivateLinkResourcesOperations,
    "private_endpoint_connections": PrivateEndpointConnectionsOperations,
    "shared_private_link_resources": SharedPrivateLinkResourcesOperations,
}


class SearchManagementClient(ManagementClient):
    api_version = API_VERSION
    operation_groups = _GROUPS

    operations: Operations
    admin_keys: AdminKeysOperations
    query_keys: QueryKeysOperations
    services: ServicesOperations
    private_link_resources: PrivateLinkResourcesOperations
    private_endpoint_connections: PrivateEndpointConnectionsOperations
    shared_private_link_resources: SharedPrivateLinkResourcesOperations


class AsyncSearchManagementClient(AsyncManagementClient):
    api_version = API_VERSION
    operation_groups = _GROUPS

    operations: Operations
    admin_keys: AdminKeysOperations
    query_keys: QueryKeysOperations
    services: ServicesOperations
    private_link_resources: PrivateLinkResourcesOperations
    private_endpoint_connections: PrivateEndpointConnectionsOperations
    shared_private_link_resources: SharedPrivateLinkResourcesOperations
