from .client import API_VERSION, AsyncReservationsManagementClient, ReservationsManagementClient

__all__ = ["API_VERSION", "AsyncReservationsManagementClient", "ReservationsManagementClient"]
