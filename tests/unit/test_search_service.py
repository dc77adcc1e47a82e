from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import pytest

from azure_mgmt_rest.credentials import StaticTokenCredential
from azure_mgmt_rest.errors import DeserializationError
from azure_mgmt_rest.open_enum import UnknownValue
from azure_mgmt_rest.response import OperationResponse, RawResponse
from azure_mgmt_rest.services.search import API_VERSION, SearchManagementClient
from azure_mgmt_rest.services.search.models import (
    AdminKeyKind,
    SearchServiceStatus,
    SharedPrivateLinkResource,
    SharedPrivateLinkResourceProperties,
    SkuName,
    UnavailableNameReason,
)
from azure_mgmt_rest.transport import HttpRequest

BASE = "https://management.azure.com/subscriptions/sub-1/resourceGroups/rg/providers/Microsoft.Search/searchServices/svc"


@dataclass
class _Executor:
    responses: list[RawResponse]
    calls: list[HttpRequest] = field(default_factory=list)

    def send(self, request: HttpRequest) -> RawResponse:
        self.calls.append(request)
        return self.responses.pop(0)


def _client(*responses: RawResponse) -> tuple[SearchManagementClient, _Executor]:
    executor = _Executor(list(responses))
    client = SearchManagementClient(StaticTokenCredential("t"), subscription_id="sub-1", request_executor=executor)
    return client, executor


def _ok(body: Any) -> RawResponse:
    return RawResponse(200, {}, body)


def test_get_service_decodes_closed_enums() -> None:
    client, executor = _client(
        _ok(
            {
                "id": "/subscriptions/sub-1/resourceGroups/rg/providers/Microsoft.Search/searchServices/svc",
                "name": "svc",
                "location": "westus",
                "sku": {"name": "standard2"},
                "properties": {"replicaCount": 3, "status": "running", "hostingMode": "default"},
            }
        )
    )

    service = client.services.get("rg", "svc")

    assert service.sku.name is SkuName.STANDARD2
    assert service.properties.replica_count == 3
    assert service.properties.status is SearchServiceStatus.RUNNING
    assert executor.calls[0].url == f"{BASE}?api-version={API_VERSION}"


def test_unlisted_sku_is_rejected() -> None:
    client, _ = _client(_ok({"name": "svc", "sku": {"name": "standard9"}}))

    with pytest.raises(DeserializationError) as excinfo:
        client.services.get("rg", "svc")
    assert excinfo.value.operation == "search.services.get"


def test_client_request_id_is_forwarded() -> None:
    client, executor = _client(_ok({"primaryKey": "p", "secondaryKey": "s"}))

    keys = client.admin_keys.get("rg", "svc", client_request_id="abc-123")

    assert keys.primary_key == "p"
    assert executor.calls[0].method == "POST"
    assert executor.calls[0].url.startswith(f"{BASE}/listAdminKeys?")
    assert executor.calls[0].headers["x-ms-client-request-id"] == "abc-123"


def test_regenerate_admin_key_puts_kind_in_path() -> None:
    client, executor = _client(_ok({"primaryKey": "new"}))

    client.admin_keys.regenerate("rg", "svc", AdminKeyKind.SECONDARY)

    assert executor.calls[0].url.startswith(f"{BASE}/regenerateAdminKey/secondary?")


def test_query_keys_page_with_post() -> None:
    next_link = f"{BASE}/listQueryKeys?api-version={API_VERSION}&$skip=1"
    client, executor = _client(
        _ok({"value": [{"name": "k1", "key": "a"}], "nextLink": next_link}),
        _ok({"value": [{"name": "k2", "key": "b"}], "nextLink": None}),
    )

    names = [key.name for key in client.query_keys.list_by_search_service("rg", "svc")]

    assert names == ["k1", "k2"]
    assert [call.method for call in executor.calls] == ["POST", "POST"]
    assert executor.calls[1].url == next_link


def test_check_name_availability_sends_resource_type() -> None:
    client, executor = _client(_ok({"nameAvailable": False, "reason": "AlreadyExists", "message": "taken"}))

    result = client.services.check_name_availability("svc")

    assert executor.calls[0].json_body == {"name": "svc", "type": "searchServices"}
    assert executor.calls[0].url.startswith(
        "https://management.azure.com/subscriptions/sub-1/providers/Microsoft.Search/checkNameAvailability?"
    )
    assert result.is_name_available is False
    assert result.reason is UnavailableNameReason.ALREADY_EXISTS


def test_unknown_name_reason_is_preserved() -> None:
    client, _ = _client(_ok({"nameAvailable": False, "reason": "Reserved"}))

    assert client.services.check_name_availability("svc").reason == UnknownValue("Reserved")


def test_shared_private_link_accepted_has_no_body() -> None:
    client, executor = _client(RawResponse(202, {"Azure-AsyncOperation": "https://management.azure.com/op/1"}, None))
    resource = SharedPrivateLinkResource(
        properties=SharedPrivateLinkResourceProperties(group_id="blob", request_message="please")
    )

    result = client.shared_private_link_resources.create_or_update("rg", "svc", "link", resource)

    assert isinstance(result, OperationResponse)
    assert result.accepted and result.value is None
    assert result.headers.azure_async_operation == "https://management.azure.com/op/1"
    assert executor.calls[0].method == "PUT"
    assert executor.calls[0].json_body == {"properties": {"groupId": "blob", "requestMessage": "please"}}


def test_private_link_resources_are_a_single_page() -> None:
    client, executor = _client(_ok({"value": [{"name": "searchService"}], "nextLink": "ignored"}))

    resources = list(client.private_link_resources.list_supported("rg", "svc"))

    assert [resource.name for resource in resources] == ["searchService"]
    assert len(executor.calls) == 1


def test_delete_query_key_accepts_no_content() -> None:
    client, _ = _client(RawResponse(204, {}, None))

    result = client.query_keys.delete("rg", "svc", "my key")

    assert result.status_code == 204
