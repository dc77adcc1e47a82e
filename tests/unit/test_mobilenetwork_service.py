from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import pytest

from azure_mgmt_rest.credentials import AsyncStaticTokenCredential, StaticTokenCredential
from azure_mgmt_rest.open_enum import UnknownValue
from azure_mgmt_rest.response import RawResponse
from azure_mgmt_rest.services.mobilenetwork import (
    API_VERSION,
    AsyncMobileNetworkManagementClient,
    MobileNetworkManagementClient,
)
from azure_mgmt_rest.services.mobilenetwork.models import (
    BillingSku,
    CoreNetworkType,
    PlatformType,
    ProvisioningState,
    SiteProvisioningState,
    TagsObject,
)
from azure_mgmt_rest.transport import HttpRequest

RG = "https://management.azure.com/subscriptions/sub-1/resourceGroups/rg/providers/Microsoft.MobileNetwork"

_PLMN = {"publicLandMobileNetworkIdentifier": {"mcc": "001", "mnc": "01"}}

_CONTROL_PLANE = {
    "name": "pccp",
    "location": "eastus",
    "properties": {
        "provisioningState": "Succeeded",
        "sites": [{"id": "/sites/site-1"}],
        "platform": {"type": "3P-AZURE-STACK-HCI"},
        "coreNetworkTechnology": "5GC",
        "controlPlaneAccessInterface": {"name": "n2", "ipv4Address": "10.0.0.1"},
        "sku": "G0",
        "localDiagnosticsAccess": {"authenticationType": "AAD"},
    },
}


@dataclass
class _Executor:
    responses: list[RawResponse]
    calls: list[HttpRequest] = field(default_factory=list)

    def send(self, request: HttpRequest) -> RawResponse:
        self.calls.append(request)
        return self.responses.pop(0)


@dataclass
class _AsyncExecutor:
    responses: list[RawResponse]
    calls: list[HttpRequest] = field(default_factory=list)

    async def send(self, request: HttpRequest) -> RawResponse:
        self.calls.append(request)
        return self.responses.pop(0)


def _client(*responses: RawResponse) -> tuple[MobileNetworkManagementClient, _Executor]:
    executor = _Executor(list(responses))
    client = MobileNetworkManagementClient(
        StaticTokenCredential("t"), subscription_id="sub-1", request_executor=executor
    )
    return client, executor


def _ok(body: Any) -> RawResponse:
    return RawResponse(200, {}, body)


def test_control_plane_decodes_digit_leading_enum_values() -> None:
    client, executor = _client(_ok(_CONTROL_PLANE))

    plane = client.packet_core_control_planes.get("rg", "pccp")

    assert plane.properties.core_network_technology is CoreNetworkType.N5GC
    assert plane.properties.platform.type is PlatformType.N3P_AZURE_STACK_HCI
    assert plane.properties.sku is BillingSku.G0
    assert plane.properties.provisioning_state is ProvisioningState.SUCCEEDED
    assert plane.properties.control_plane_access_interface.ipv4_address == "10.0.0.1"
    assert executor.calls[0].url == f"{RG}/packetCoreControlPlanes/pccp?api-version={API_VERSION}"


def test_control_plane_keeps_future_core_network_type() -> None:
    body = {**_CONTROL_PLANE, "properties": {**_CONTROL_PLANE["properties"], "coreNetworkTechnology": "6GC"}}
    client, _ = _client(_ok(body))

    plane = client.packet_core_control_planes.get("rg", "pccp")

    assert plane.properties.core_network_technology == UnknownValue("6GC")
    assert plane.to_wire()["properties"]["coreNetworkTechnology"] == "6GC"


def test_create_control_plane_serializes_wire_values() -> None:
    client, executor = _client(_ok(_CONTROL_PLANE))
    plane = client.packet_core_control_planes.get("rg", "pccp")
    executor.responses.append(RawResponse(201, {}, _CONTROL_PLANE))

    result = client.packet_core_control_planes.create_or_update("rg", "pccp", plane)

    assert result.status_code == 201
    sent = executor.calls[1].json_body
    assert sent["properties"]["coreNetworkTechnology"] == "5GC"
    assert sent["properties"]["platform"]["type"] == "3P-AZURE-STACK-HCI"
    assert executor.calls[1].method == "PUT"


def test_update_tags_patches_mobile_network() -> None:
    client, executor = _client(_ok({"name": "net", "tags": {"env": "prod"}, "properties": _PLMN}))

    network = client.mobile_networks.update_tags("rg", "net", TagsObject(tags={"env": "prod"}))

    assert network.tags == {"env": "prod"}
    assert executor.calls[0].method == "PATCH"
    assert executor.calls[0].json_body == {"tags": {"env": "prod"}}


def test_collect_diagnostics_package_accepted() -> None:
    client, executor = _client(RawResponse(202, {"Location": "https://management.azure.com/op"}, None))

    result = client.packet_core_control_planes.collect_diagnostics_package("rg", "pccp", "https://blob/x")

    assert result.accepted
    assert executor.calls[0].url.startswith(f"{RG}/packetCoreControlPlanes/pccp/collectDiagnosticsPackage?")
    assert executor.calls[0].json_body == {"storageAccountBlobUrl": "https://blob/x"}


def test_sim_site_provisioning_state_is_a_map_of_open_enums() -> None:
    client, _ = _client(
        _ok(
            {
                "name": "sim-1",
                "properties": {
                    "internationalMobileSubscriberIdentity": "00101000000001",
                    "simState": "Enabled",
                    "siteProvisioningState": {"site-a": "Provisioned", "site-b": "Migrating"},
                },
            }
        )
    )

    sim = client.sims.get("rg", "group", "sim-1")

    assert sim.properties.site_provisioning_state["site-a"] is SiteProvisioningState.PROVISIONED
    assert sim.properties.site_provisioning_state["site-b"] == UnknownValue("Migrating")


def test_list_by_subscription_pages() -> None:
    client, executor = _client(
        _ok({"value": [{"name": "a", "properties": _PLMN}], "nextLink": "/subscriptions/sub-1/mobileNetworks?$skiptoken=2"}),
        _ok({"value": [{"name": "b", "properties": _PLMN}]}),
    )

    names = [network.name for network in client.mobile_networks.list_by_subscription()]

    assert names == ["a", "b"]
    assert executor.calls[1].url == (
        f"https://management.azure.com/subscriptions/sub-1/mobileNetworks?$skiptoken=2&api-version={API_VERSION}"
    )


@pytest.mark.asyncio
async def test_async_client_lists_sites() -> None:
    executor = _AsyncExecutor([_ok({"value": [{"name": "site-1", "properties": {"provisioningState": "Deleting"}}]})])
    client = AsyncMobileNetworkManagementClient(
        AsyncStaticTokenCredential("t"), subscription_id="sub-1", request_executor=executor
    )
    try:
        sites = await client.sites.list_by_mobile_network("rg", "net").to_list()
    finally:
        await client.close()

    assert sites[0].properties.provisioning_state is ProvisioningState.DELETING
    assert executor.calls[0].url.startswith(f"{RG}/mobileNetworks/net/sites?")
