from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from azure_mgmt_rest.credentials import StaticTokenCredential
from azure_mgmt_rest.open_enum import UnknownValue
from azure_mgmt_rest.response import RawResponse
from azure_mgmt_rest.services.reservations import API_VERSION, ReservationsManagementClient
from azure_mgmt_rest.services.reservations.models import (
    AppliedScopeType,
    Patch,
    PatchProperties,
    PurchaseRequest,
    PurchaseRequestProperties,
    ReservationTerm,
    ReservedResourceType,
    SkuName,
)
from azure_mgmt_rest.transport import HttpRequest

CAPACITY = "https://management.azure.com/providers/Microsoft.Capacity"


@dataclass
class _Executor:
    responses: list[RawResponse]
    calls: list[HttpRequest] = field(default_factory=list)

    def send(self, request: HttpRequest) -> RawResponse:
        self.calls.append(request)
        return self.responses.pop(0)


def _client(*responses: RawResponse) -> tuple[ReservationsManagementClient, _Executor]:
    executor = _Executor(list(responses))
    return ReservationsManagementClient(StaticTokenCredential("t"), request_executor=executor), executor


def _ok(body: Any) -> RawResponse:
    return RawResponse(200, {}, body)


def test_tenant_scoped_operations_need_no_subscription() -> None:
    client, executor = _client(_ok({"name": "order-1", "properties": {"term": "P3Y", "originalQuantity": 2}}))

    order = client.reservation_order.get("order-1", expand="schedule")

    assert order.properties.term is ReservationTerm.P3Y
    assert order.properties.original_quantity == 2
    url = executor.calls[0].url
    assert url.startswith(f"{CAPACITY}/reservationOrders/order-1?")
    assert "%24expand=schedule" in url or "$expand=schedule" in url
    assert f"api-version={API_VERSION}" in url


def test_calculate_price_posts_purchase_request() -> None:
    client, executor = _client(_ok({"properties": {"grandTotal": 99.5, "isTaxIncluded": False}}))
    request = PurchaseRequest(
        sku=SkuName(name="Standard_D2s_v3"),
        location="westus",
        properties=PurchaseRequestProperties(
            reserved_resource_type=ReservedResourceType.VIRTUAL_MACHINES,
            term=ReservationTerm.P1Y,
            quantity=1,
            applied_scope_type=AppliedScopeType.SHARED,
        ),
    )

    price = client.reservation_order.calculate(request)

    assert price.properties.grand_total == 99.5
    assert executor.calls[0].method == "POST"
    assert executor.calls[0].url.startswith(f"{CAPACITY}/calculatePrice?")
    assert executor.calls[0].json_body["properties"] == {
        "reservedResourceType": "VirtualMachines",
        "term": "P1Y",
        "quantity": 1,
        "appliedScopeType": "Shared",
    }


def test_purchase_accepted_still_returns_the_order() -> None:
    client, _ = _client(RawResponse(202, {}, {"name": "order-1", "properties": {"provisioningState": "Creating"}}))

    result = client.reservation_order.purchase("order-1", PurchaseRequest(location="westus"))

    assert result.accepted
    assert result.value.name == "order-1"


def test_list_all_sends_filters_and_reads_summary() -> None:
    client, executor = _client(
        _ok(
            {
                "value": [{"name": "r1", "properties": {"reservedResourceType": "QuantumCompute"}}],
                "summary": {"succeededCount": 1},
            }
        )
    )

    pager = client.reservation.list_all(filter="properties/archived eq false", take=10, refresh_summary="true")
    page = pager.first_page()

    assert page.summary.succeeded_count == 1
    assert page.value[0].properties.reserved_resource_type == UnknownValue("QuantumCompute")
    url = executor.calls[0].url
    assert url.startswith(f"{CAPACITY}/reservations?")
    assert "take=10" in url
    assert "refreshSummary=true" in url


def test_update_reservation_patch_may_be_accepted() -> None:
    client, executor = _client(RawResponse(202, {}, None))

    result = client.reservation.update(
        "order-1", "res-1", Patch(properties=PatchProperties(applied_scope_type=AppliedScopeType.SINGLE, renew=True))
    )

    assert result.accepted and result.value is None
    assert executor.calls[0].method == "PATCH"
    assert executor.calls[0].url.startswith(f"{CAPACITY}/reservationOrders/order-1/reservations/res-1?")
    assert executor.calls[0].json_body == {"properties": {"appliedScopeType": "Single", "renew": True}}


def test_list_revisions_follows_next_link() -> None:
    client, executor = _client(
        _ok({"value": [{"name": "rev-1"}], "nextLink": f"{CAPACITY}/reservationOrders/o/reservations/r/revisions?p=2"}),
        _ok({"value": [{"name": "rev-2"}]}),
    )

    names = [item.name for item in client.reservation.list_revisions("o", "r")]

    assert names == ["rev-1", "rev-2"]
    assert executor.calls[1].url == f"{CAPACITY}/reservationOrders/o/reservations/r/revisions?p=2&api-version={API_VERSION}"
