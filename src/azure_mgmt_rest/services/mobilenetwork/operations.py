"""Operation groups for Microsoft.MobileNetwork."""

from __future__ import annotations

from typing import Any

from ...models import OperationListResult
from ...operations import OperationGroup
from .models import (
    AsyncOperationStatus,
    MobileNetwork,
    MobileNetworkListResult,
    PacketCoreControlPlane,
    PacketCoreControlPlaneCollectDiagnosticsPackage,
    PacketCoreControlPlaneListResult,
    Sim,
    SimListResult,
    Site,
    SiteListResult,
    TagsObject,
)

_SUBSCRIPTION = "/subscriptions/{subscriptionId}"
_RESOURCE_GROUP = _SUBSCRIPTION + "/resourceGroups/{resourceGroupName}"
_PROVIDER = "/providers/Microsoft.MobileNetwork"
_MOBILE_NETWORK = _RESOURCE_GROUP + _PROVIDER + "/mobileNetworks/{mobileNetworkName}"
_CONTROL_PLANE = _RESOURCE_GROUP + _PROVIDER + "/packetCoreControlPlanes/{packetCoreControlPlaneName}"
_SIM_GROUP = _RESOURCE_GROUP + _PROVIDER + "/simGroups/{simGroupName}"


class _MobileNetworkGroup(OperationGroup):
    def _params(self, subscription_id: str | None, resource_group_name: str, **names: str) -> dict[str, str]:
        return {
            "subscriptionId": self._subscription_id(subscription_id),
            "resourceGroupName": resource_group_name,
            **names,
        }


class Operations(OperationGroup):
    def list(self) -> Any:
        request = self._request(
            "mobilenetwork.operations.list",
            "GET",
            _PROVIDER + "/operations",
            responses={200: OperationListResult},
        )
        return self._paged(request, OperationListResult)


class MobileNetworksOperations(_MobileNetworkGroup):
    def get(self, resource_group_name: str, mobile_network_name: str, *, subscription_id: str | None = None) -> Any:
        request = self._request(
            "mobilenetwork.mobile_networks.get",
            "GET",
            _MOBILE_NETWORK,
            path_params=self._params(subscription_id, resource_group_name, mobileNetworkName=mobile_network_name),
            responses={200: MobileNetwork},
        )
        return self._execute(request)

    def create_or_update(
        self,
        resource_group_name: str,
        mobile_network_name: str,
        mobile_network: MobileNetwork,
        *,
        subscription_id: str | None = None,
    ) -> Any:
        request = self._request(
            "mobilenetwork.mobile_networks.create_or_update",
            "PUT",
            _MOBILE_NETWORK,
            path_params=self._params(subscription_id, resource_group_name, mobileNetworkName=mobile_network_name),
            body=mobile_network,
            responses={200: MobileNetwork, 201: MobileNetwork},
        )
        return self._execute(request)

    def update_tags(
        self,
        resource_group_name: str,
        mobile_network_name: str,
        tags: TagsObject,
        *,
        subscription_id: str | None = None,
    ) -> Any:
        request = self._request(
            "mobilenetwork.mobile_networks.update_tags",
            "PATCH",
            _MOBILE_NETWORK,
            path_params=self._params(subscription_id, resource_group_name, mobileNetworkName=mobile_network_name),
            body=tags,
            responses={200: MobileNetwork},
        )
        return self._execute(request)

    def delete(self, resource_group_name: str, mobile_network_name: str, *, subscription_id: str | None = None) -> Any:
        request = self._request(
            "mobilenetwork.mobile_networks.delete",
            "DELETE",
            _MOBILE_NETWORK,
            path_params=self._params(subscription_id, resource_group_name, mobileNetworkName=mobile_network_name),
            responses={200: None, 202: None, 204: None},
        )
        return self._execute(request)

    def list_by_subscription(self, *, subscription_id: str | None = None) -> Any:
        request = self._request(
            "mobilenetwork.mobile_networks.list_by_subscription",
            "GET",
            _SUBSCRIPTION + _PROVIDER + "/mobileNetworks",
            path_params={"subscriptionId": self._subscription_id(subscription_id)},
            responses={200: MobileNetworkListResult},
        )
        return self._paged(request, MobileNetworkListResult)

    def list_by_resource_group(self, resource_group_name: str, *, subscription_id: str | None = None) -> Any:
        request = self._request(
            "mobilenetwork.mobile_networks.list_by_resource_group",
            "GET",
            _RESOURCE_GROUP + _PROVIDER + "/mobileNetworks",
            path_params=self._params(subscription_id, resource_group_name),
            responses={200: MobileNetworkListResult},
        )
        return self._paged(request, MobileNetworkListResult)


class SitesOperations(_MobileNetworkGroup):
    _PATH = _MOBILE_NETWORK + "/sites/{siteName}"

    def get(
        self, resource_group_name: str, mobile_network_name: str, site_name: str, *, subscription_id: str | None = None
    ) -> Any:
        request = self._request(
            "mobilenetwork.sites.get",
            "GET",
            self._PATH,
            path_params=self._params(
                subscription_id, resource_group_name, mobileNetworkName=mobile_network_name, siteName=site_name
            ),
            responses={200: Site},
        )
        return self._execute(request)

    def create_or_update(
        self,
        resource_group_name: str,
        mobile_network_name: str,
        site_name: str,
        site: Site,
        *,
        subscription_id: str | None = None,
    ) -> Any:
        request = self._request(
            "mobilenetwork.sites.create_or_update",
            "PUT",
            self._PATH,
            path_params=self._params(
                subscription_id, resource_group_name, mobileNetworkName=mobile_network_name, siteName=site_name
            ),
            body=site,
            responses={200: Site, 201: Site},
        )
        return self._execute(request)

    def delete(
        self, resource_group_name: str, mobile_network_name: str, site_name: str, *, subscription_id: str | None = None
    ) -> Any:
        request = self._request(
            "mobilenetwork.sites.delete",
            "DELETE",
            self._PATH,
            path_params=self._params(
                subscription_id, resource_group_name, mobileNetworkName=mobile_network_name, siteName=site_name
            ),
            responses={200: None, 202: None, 204: None},
        )
        return self._execute(request)

    def list_by_mobile_network(
        self, resource_group_name: str, mobile_network_name: str, *, subscription_id: str | None = None
    ) -> Any:
        request = self._request(
            "mobilenetwork.sites.list_by_mobile_network",
            "GET",
            _MOBILE_NETWORK + "/sites",
            path_params=self._params(subscription_id, resource_group_name, mobileNetworkName=mobile_network_name),
            responses={200: SiteListResult},
        )
        return self._paged(request, SiteListResult)


class PacketCoreControlPlanesOperations(_MobileNetworkGroup):
    def get(
        self, resource_group_name: str, packet_core_control_plane_name: str, *, subscription_id: str | None = None
    ) -> Any:
        request = self._request(
            "mobilenetwork.packet_core_control_planes.get",
            "GET",
            _CONTROL_PLANE,
            path_params=self._params(
                subscription_id, resource_group_name, packetCoreControlPlaneName=packet_core_control_plane_name
            ),
            responses={200: PacketCoreControlPlane},
        )
        return self._execute(request)

    def create_or_update(
        self,
        resource_group_name: str,
        packet_core_control_plane_name: str,
        control_plane: PacketCoreControlPlane,
        *,
        subscription_id: str | None = None,
    ) -> Any:
        request = self._request(
            "mobilenetwork.packet_core_control_planes.create_or_update",
            "PUT",
            _CONTROL_PLANE,
            path_params=self._params(
                subscription_id, resource_group_name, packetCoreControlPlaneName=packet_core_control_plane_name
            ),
            body=control_plane,
            responses={200: PacketCoreControlPlane, 201: PacketCoreControlPlane},
        )
        return self._execute(request)

    def delete(
        self, resource_group_name: str, packet_core_control_plane_name: str, *, subscription_id: str | None = None
    ) -> Any:
        request = self._request(
            "mobilenetwork.packet_core_control_planes.delete",
            "DELETE",
            _CONTROL_PLANE,
            path_params=self._params(
                subscription_id, resource_group_name, packetCoreControlPlaneName=packet_core_control_plane_name
            ),
            responses={200: None, 202: None, 204: None},
        )
        return self._execute(request)

    def list_by_subscription(self, *, subscription_id: str | None = None) -> Any:
        request = self._request(
            "mobilenetwork.packet_core_control_planes.list_by_subscription",
            "GET",
            _SUBSCRIPTION + _PROVIDER + "/packetCoreControlPlanes",
            path_params={"subscriptionId": self._subscription_id(subscription_id)},
            responses={200: PacketCoreControlPlaneListResult},
        )
        return self._paged(request, PacketCoreControlPlaneListResult)

    def list_by_resource_group(self, resource_group_name: str, *, subscription_id: str | None = None) -> Any:
        request = self._request(
            "mobilenetwork.packet_core_control_planes.list_by_resource_group",
            "GET",
            _RESOURCE_GROUP + _PROVIDER + "/packetCoreControlPlanes",
            path_params=self._params(subscription_id, resource_group_name),
            responses={200: PacketCoreControlPlaneListResult},
        )
        return self._paged(request, PacketCoreControlPlaneListResult)

    def collect_diagnostics_package(
        self,
        resource_group_name: str,
        packet_core_control_plane_name: str,
        storage_account_blob_url: str,
        *,
        subscription_id: str | None = None,
    ) -> Any:
        """Start a diagnostics collection; a 202 carries only the operation headers."""
        request = self._request(
            "mobilenetwork.packet_core_control_planes.collect_diagnostics_package",
            "POST",
            _CONTROL_PLANE + "/collectDiagnosticsPackage",
            path_params=self._params(
                subscription_id, resource_group_name, packetCoreControlPlaneName=packet_core_control_plane_name
            ),
            body=PacketCoreControlPlaneCollectDiagnosticsPackage(storage_account_blob_url=storage_account_blob_url),
            responses={200: AsyncOperationStatus, 202: None},
        )
        return self._execute(request)


class SimsOperations(_MobileNetworkGroup):
    def get(self, resource_group_name: str, sim_group_name: str, sim_name: str, *, subscription_id: str | None = None) -> Any:
        request = self._request(
            "mobilenetwork.sims.get",
            "GET",
            _SIM_GROUP + "/sims/{simName}",
            path_params=self._params(subscription_id, resource_group_name, simGroupName=sim_group_name, simName=sim_name),
            responses={200: Sim},
        )
        return self._execute(request)

    def list_by_group(self, resource_group_name: str, sim_group_name: str, *, subscription_id: str | None = None) -> Any:
        request = self._request(
            "mobilenetwork.sims.list_by_group",
            "GET",
            _SIM_GROUP + "/sims",
            path_params=self._params(subscription_id, resource_group_name, simGroupName=sim_group_name),
            responses={200: SimListResult},
        )
        return self._paged(request, SimListResult)
