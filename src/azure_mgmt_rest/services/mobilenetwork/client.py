"""Clients for the Microsoft.MobileNetwork management API."""

from __future__ import annotations

from ...client import AsyncManagementClient, ManagementClient
from .operations import (
    MobileNetworksOperations,
    Operations,
    PacketCoreControlPlanesOperations,
    SimsOperations,
    SitesOperations,
)

API_VERSION = "2022-11-01"

_GROUPS = {
    "operations": Operations,
    "mobile_networks": MobileNetworksOperations,
    "sites": SitesOperations,
    "packet_core_control_planes": PacketCoreControlPlanesOperations,
    "sims": SimsOperations,
}


class MobileNetworkManagementClient(ManagementClient):
    api_version = API_VERSION
    operation_groups = _GROUPS

    operations: Operations
    mobile_networks: MobileNetworksOperations
    sites: SitesOperations
    packet_core_control_planes: PacketCoreControlPlanesOperations
    sims: SimsOperations


class AsyncMobileNetworkManagementClient(AsyncManagementClient):
    api_version = API_VERSION
    operation_groups = _GROUPS

    operations: Operations
    mobile_networks: MobileNetworksOperations
    sites: SitesOperations
    packet_core_control_planes: PacketCoreControlPlanesOperations
    sims: SimsOperations
