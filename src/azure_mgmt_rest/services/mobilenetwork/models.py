"""Microsoft.MobileNetwork wire models (api-version 2022-11-01)."""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Any

from pydantic import Field

from ...models import ArmModel, ErrorDetail, PageResult, ProxyResource, TrackedResource
from ...open_enum import open_enum


class CoreNetworkType(Enum):
    N5GC = "5GC"
    EPC = "EPC"


class BillingSku(Enum):
    G0 = "G0"
    G1 = "G1"
    G2 = "G2"
    G5 = "G5"
    G10 = "G10"


class ProvisioningState(Enum):
    UNKNOWN = "Unknown"
    SUCCEEDED = "Succeeded"
    ACCEPTED = "Accepted"
    DELETING = "Deleting"
    FAILED = "Failed"
    CANCELED = "Canceled"
    DELETED = "Deleted"


class SimState(Enum):
    DISABLED = "Disabled"
    ENABLED = "Enabled"
    INVALID = "Invalid"


class SiteProvisioningState(Enum):
    NOT_APPLICABLE = "NotApplicable"
    ADDING = "Adding"
    UPDATING = "Updating"
    DELETING = "Deleting"
    PROVISIONED = "Provisioned"
    FAILED = "Failed"


class PlatformType(Enum):
    AKS_HCI = "AKS-HCI"
    N3P_AZURE_STACK_HCI = "3P-AZURE-STACK-HCI"


class InstallationState(Enum):
    UNINSTALLED = "Uninstalled"
    INSTALLING = "Installing"
    INSTALLED = "Installed"
    UPDATING = "Updating"
    UPGRADING = "Upgrading"
    UNINSTALLING = "Uninstalling"
    REINSTALLING = "Reinstalling"
    ROLLING_BACK = "RollingBack"
    FAILED = "Failed"


class AuthenticationType(Enum):
    AAD = "AAD"
    PASSWORD = "Password"


class ManagedServiceIdentityType(Enum):
    NONE = "None"
    SYSTEM_ASSIGNED = "SystemAssigned"
    USER_ASSIGNED = "UserAssigned"
    SYSTEM_ASSIGNED_USER_ASSIGNED = "SystemAssigned,UserAssigned"


CoreNetworkTypeValue = open_enum(CoreNetworkType)
BillingSkuValue = open_enum(BillingSku)
ProvisioningStateValue = open_enum(ProvisioningState)
SimStateValue = open_enum(SimState)
SiteProvisioningStateValue = open_enum(SiteProvisioningState)
PlatformTypeValue = open_enum(PlatformType)
InstallationStateValue = open_enum(InstallationState)
AuthenticationTypeValue = open_enum(AuthenticationType)
ManagedServiceIdentityTypeValue = open_enum(ManagedServiceIdentityType)


class ResourceId(ArmModel):
    id: str


class UserAssignedIdentity(ArmModel):
    principal_id: str | None = None
    client_id: str | None = None


class ManagedServiceIdentity(ArmModel):
    principal_id: str | None = None
    tenant_id: str | None = None
    type: ManagedServiceIdentityTypeValue
    user_assigned_identities: dict[str, UserAssignedIdentity] | None = None


class TagsObject(ArmModel):
    tags: dict[str, str] | None = None


class AsyncOperationId(ArmModel):
    id: str


class AsyncOperationStatus(ArmModel):
    id: str | None = None
    name: str | None = None
    status: str
    resource_id: str | None = None
    start_time: datetime | None = None
    end_time: datetime | None = None
    percent_complete: float | None = None
    properties: Any | None = None
    error: ErrorDetail | None = None


class PlmnId(ArmModel):
    mcc: str
    mnc: str


class MobileNetworkPropertiesFormat(ArmModel):
    provisioning_state: ProvisioningStateValue | None = None
    public_land_mobile_network_identifier: PlmnId
    service_key: str | None = None


class MobileNetwork(TrackedResource):
    properties: MobileNetworkPropertiesFormat


MobileNetworkListResult = PageResult[MobileNetwork]


class SitePropertiesFormat(ArmModel):
    provisioning_state: ProvisioningStateValue | None = None
    network_functions: list[ResourceId] = Field(default_factory=list)


class Site(TrackedResource):
    properties: SitePropertiesFormat | None = None


SiteListResult = PageResult[Site]


class InterfaceProperties(ArmModel):
    name: str | None = None
    ipv4_address: str | None = None
    ipv4_subnet: str | None = None
    ipv4_gateway: str | None = None


class HttpsServerCertificate(ArmModel):
    certificate_url: str
    provisioning: Any | None = None


class LocalDiagnosticsAccessConfiguration(ArmModel):
    authentication_type: AuthenticationTypeValue
    https_server_certificate: HttpsServerCertificate | None = None


class PlatformConfiguration(ArmModel):
    type: PlatformTypeValue
    azure_stack_edge_device: ResourceId | None = None
    azure_stack_edge_devices: list[ResourceId] = Field(default_factory=list)
    azure_stack_hci_cluster: ResourceId | None = None
    connected_cluster: ResourceId | None = None
    custom_location: ResourceId | None = None


class Installation(ArmModel):
    state: InstallationStateValue | None = None
    operation: AsyncOperationId | None = None


class PacketCoreControlPlanePropertiesFormat(ArmModel):
    provisioning_state: ProvisioningStateValue | None = None
    installation: Installation | None = None
    sites: list[ResourceId]
    platform: PlatformConfiguration
    core_network_technology: CoreNetworkTypeValue | None = None
    version: str | None = None
    rollback_version: str | None = None
    control_plane_access_interface: InterfaceProperties
    sku: BillingSkuValue
    ue_mtu: int | None = None
    local_diagnostics_access: LocalDiagnosticsAccessConfiguration
    interop_settings: Any | None = None


class PacketCoreControlPlane(TrackedResource):
    properties: PacketCoreControlPlanePropertiesFormat
    identity: ManagedServiceIdentity | None = None


PacketCoreControlPlaneListResult = PageResult[PacketCoreControlPlane]


class PacketCoreControlPlaneCollectDiagnosticsPackage(ArmModel):
    storage_account_blob_url: str


class StaticIp(ArmModel):
    ipv4_address: str | None = None


class SimStaticIpProperties(ArmModel):
    attached_data_network: ResourceId | None = None
    slice: ResourceId | None = None
    static_ip: StaticIp | None = None


class SimPropertiesFormat(ArmModel):
    provisioning_state: ProvisioningStateValue | None = None
    sim_state: SimStateValue | None = None
    # site name -> provisioning state of the SIM on that site
    site_provisioning_state: dict[str, SiteProvisioningStateValue] | None = None
    international_mobile_subscriber_identity: str
    integrated_circuit_card_identifier: str | None = None
    device_type: str | None = None
    sim_policy: ResourceId | None = None
    static_ip_configuration: list[SimStaticIpProperties] = Field(default_factory=list)
    vendor_name: str | None = None
    vendor_key_fingerprint: str | None = None
    authentication_key: str | None = None
    operator_key_code: str | None = None


class Sim(ProxyResource):
    properties: SimPropertiesFormat


SimListResult = PageResult[Sim]
