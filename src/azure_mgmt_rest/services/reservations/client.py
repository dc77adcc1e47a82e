"""Clients for the Microsoft.Capacity reservations API."""

from __future__ import annotations

from ...client import AsyncManagementClient, ManagementClient
from .operations import Operations, ReservationOperations, ReservationOrderOperations

API_VERSION = "2022-03-01"

_GROUPS = {
    "reservation_order": ReservationOrderOperations,
    "reservation": ReservationOperations,
    "operation": Operations,
}


class ReservationsManagementClient(ManagementClient):
    api_version = API_VERSION
    operation_groups = _GROUPS

    reservation_order: ReservationOrderOperations
    reservation: ReservationOperations
    operation: Operations


class AsyncReservationsManagementClient(AsyncManagementClient):
    api_version = API_VERSION
    operation_groups = _GROUPS

    reservation_order: ReservationOrderOperations
    reservation: ReservationOperations
    operation: Operations
