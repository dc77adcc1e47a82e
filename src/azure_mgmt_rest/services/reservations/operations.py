"""Operation groups for Microsoft.Capacity reservations.

Reservation orders live at tenant scope, so none of these operations take a
subscription id.
"""

from __future__ import annotations

from typing import Any

from ...models import OperationListResult
from ...operations import OperationGroup
from .models import (
    CalculatePriceResponse,
    Patch,
    PurchaseRequest,
    ReservationList,
    ReservationOrderList,
    ReservationOrderResponse,
    ReservationResponse,
    ReservationsListResult,
)

_PROVIDER = "/providers/Microsoft.Capacity"
_ORDER = _PROVIDER + "/reservationOrders/{reservationOrderId}"
_RESERVATION = _ORDER + "/reservations/{reservationId}"


class ReservationOrderOperations(OperationGroup):
    def calculate(self, body: PurchaseRequest) -> Any:
        """Price a purchase without placing it."""
        request = self._request(
            "reservations.reservation_order.calculate",
            "POST",
            _PROVIDER + "/calculatePrice",
            body=body,
            responses={200: CalculatePriceResponse},
        )
        return self._execute(request)

    def list(self) -> Any:
        request = self._request(
            "reservations.reservation_order.list",
            "GET",
            _PROVIDER + "/reservationOrders",
            responses={200: ReservationOrderList},
        )
        return self._paged(request, ReservationOrderList)

    def get(self, reservation_order_id: str, *, expand: str | None = None) -> Any:
        request = self._request(
            "reservations.reservation_order.get",
            "GET",
            _ORDER,
            path_params={"reservationOrderId": reservation_order_id},
            query={"$expand": expand},
            responses={200: ReservationOrderResponse},
        )
        return self._execute(request)

    def purchase(self, reservation_order_id: str, body: PurchaseRequest) -> Any:
        request = self._request(
            "reservations.reservation_order.purchase",
            "PUT",
            _ORDER,
            path_params={"reservationOrderId": reservation_order_id},
            body=body,
            responses={200: ReservationOrderResponse, 202: ReservationOrderResponse},
        )
        return self._execute(request)


class ReservationOperations(OperationGroup):
    def list(self, reservation_order_id: str) -> Any:
        request = self._request(
            "reservations.reservation.list",
            "GET",
            _ORDER + "/reservations",
            path_params={"reservationOrderId": reservation_order_id},
            responses={200: ReservationList},
        )
        return self._paged(request, ReservationList)

    def get(self, reservation_order_id: str, reservation_id: str, *, expand: str | None = None) -> Any:
        request = self._request(
            "reservations.reservation.get",
            "GET",
            _RESERVATION,
            path_params={"reservationOrderId": reservation_order_id, "reservationId": reservation_id},
            query={"expand": expand},
            responses={200: ReservationResponse},
        )
        return self._execute(request)

    def update(self, reservation_order_id: str, reservation_id: str, parameters: Patch) -> Any:
        request = self._request(
            "reservations.reservation.update",
            "PATCH",
            _RESERVATION,
            path_params={"reservationOrderId": reservation_order_id, "reservationId": reservation_id},
            body=parameters,
            responses={200: ReservationResponse, 202: None},
        )
        return self._execute(request)

    def list_revisions(self, reservation_order_id: str, reservation_id: str) -> Any:
        request = self._request(
            "reservations.reservation.list_revisions",
            "GET",
            _RESERVATION + "/revisions",
            path_params={"reservationOrderId": reservation_order_id, "reservationId": reservation_id},
            responses={200: ReservationList},
        )
        return self._paged(request, ReservationList)

    def list_all(
        self,
        *,
        filter: str | None = None,
        orderby: str | None = None,
        refresh_summary: str | None = None,
        skiptoken: float | None = None,
        selected_state: str | None = None,
        take: float | None = None,
    ) -> Any:
        """List every reservation the caller can see.

        The query options apply to the first request only; follow-up pages
        are driven by the service's ``nextLink``.
        """
        request = self._request(
            "reservations.reservation.list_all",
            "GET",
            _PROVIDER + "/reservations",
            query={
                "$filter": filter,
                "$orderby": orderby,
                "refreshSummary": refresh_summary,
                "$skiptoken": skiptoken,
                "selectedState": selected_state,
                "take": take,
            },
            responses={200: ReservationsListResult},
        )
        return self._paged(request, ReservationsListResult)


class Operations(OperationGroup):
    def list(self) -> Any:
        request = self._request(
            "reservations.operation.list",
            "GET",
            _PROVIDER + "/operations",
            responses={200: OperationListResult},
        )
        return self._paged(request, OperationListResult)
