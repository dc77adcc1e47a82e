"""Microsoft.Search wire models (api-version 2020-08-01-preview).

This API version documents most of its enums as fixed; those fields reject
values outside the table. ``CheckNameAvailabilityOutput.reason`` and the
asynchronous operation status are open.
"""

from __future__ import annotations

from enum import Enum

from pydantic import Field

from ...models import ArmModel, PageResult, Resource, SinglePageResult, TrackedResource
from ...open_enum import open_enum


class AsyncOperationStatus(Enum):
    RUNNING = "Running"
    SUCCEEDED = "Succeeded"
    FAILED = "Failed"


AsyncOperationStatusValue = open_enum(AsyncOperationStatus)


class UnavailableNameReason(Enum):
    INVALID = "Invalid"
    ALREADY_EXISTS = "AlreadyExists"


UnavailableNameReasonValue = open_enum(UnavailableNameReason)


class HostingMode(Enum):
    DEFAULT = "default"
    HIGH_DENSITY = "highDensity"


class PublicNetworkAccess(Enum):
    ENABLED = "enabled"
    DISABLED = "disabled"


class SearchServiceStatus(Enum):
    RUNNING = "running"
    PROVISIONING = "provisioning"
    DELETING = "deleting"
    DEGRADED = "degraded"
    DISABLED = "disabled"
    ERROR = "error"


class ProvisioningState(Enum):
    SUCCEEDED = "succeeded"
    PROVISIONING = "provisioning"
    FAILED = "failed"


class SkuName(Enum):
    FREE = "free"
    BASIC = "basic"
    STANDARD = "standard"
    STANDARD2 = "standard2"
    STANDARD3 = "standard3"
    STORAGE_OPTIMIZED_L1 = "storage_optimized_l1"
    STORAGE_OPTIMIZED_L2 = "storage_optimized_l2"


class IdentityType(Enum):
    NONE = "None"
    SYSTEM_ASSIGNED = "SystemAssigned"


class AdminKeyKind(Enum):
    PRIMARY = "primary"
    SECONDARY = "secondary"


class PrivateLinkServiceConnectionStatus(Enum):
    PENDING = "Pending"
    APPROVED = "Approved"
    REJECTED = "Rejected"
    DISCONNECTED = "Disconnected"


class SharedPrivateLinkResourceStatus(Enum):
    PENDING = "Pending"
    APPROVED = "Approved"
    REJECTED = "Rejected"
    DISCONNECTED = "Disconnected"


class SharedPrivateLinkResourceProvisioningState(Enum):
    UPDATING = "Updating"
    DELETING = "Deleting"
    FAILED = "Failed"
    SUCCEEDED = "Succeeded"
    INCOMPLETE = "Incomplete"


class AdminKeyResult(ArmModel):
    primary_key: str | None = None
    secondary_key: str | None = None


class AsyncOperationResult(ArmModel):
    status: AsyncOperationStatusValue | None = None


class CheckNameAvailabilityInput(ArmModel):
    name: str
    type: str = "searchServices"


class CheckNameAvailabilityOutput(ArmModel):
    is_name_available: bool | None = Field(default=None, alias="nameAvailable")
    reason: UnavailableNameReasonValue | None = None
    message: str | None = None


class Identity(ArmModel):
    principal_id: str | None = None
    tenant_id: str | None = None
    type: IdentityType


class IpRule(ArmModel):
    value: str | None = None


class NetworkRuleSet(ArmModel):
    ip_rules: list[IpRule] = Field(default_factory=list)


class QueryKey(ArmModel):
    name: str | None = None
    key: str | None = None


ListQueryKeysResult = PageResult[QueryKey]


class Sku(ArmModel):
    name: SkuName | None = None


class PrivateEndpoint(ArmModel):
    id: str | None = None


class PrivateLinkServiceConnectionState(ArmModel):
    status: PrivateLinkServiceConnectionStatus | None = None
    description: str | None = None
    actions_required: str | None = None


class PrivateEndpointConnectionProperties(ArmModel):
    private_endpoint: PrivateEndpoint | None = None
    private_link_service_connection_state: PrivateLinkServiceConnectionState | None = None


class PrivateEndpointConnection(Resource):
    properties: PrivateEndpointConnectionProperties | None = None


PrivateEndpointConnectionListResult = PageResult[PrivateEndpointConnection]


class ShareablePrivateLinkResourceProperties(ArmModel):
    type: str | None = None
    group_id: str | None = None
    description: str | None = None


class ShareablePrivateLinkResourceType(ArmModel):
    name: str | None = None
    properties: ShareablePrivateLinkResourceProperties | None = None


class PrivateLinkResourceProperties(ArmModel):
    group_id: str | None = None
    required_members: list[str] = Field(default_factory=list)
    required_zone_names: list[str] = Field(default_factory=list)
    shareable_private_link_resource_types: list[ShareablePrivateLinkResourceType] = Field(default_factory=list)


class PrivateLinkResource(Resource):
    properties: PrivateLinkResourceProperties | None = None


# No nextLink in the schema: the supported resources come back in one page.
PrivateLinkResourcesResult = SinglePageResult[PrivateLinkResource]


class SharedPrivateLinkResourceProperties(ArmModel):
    private_link_resource_id: str | None = None
    group_id: str | None = None
    request_message: str | None = None
    resource_region: str | None = None
    status: SharedPrivateLinkResourceStatus | None = None
    provisioning_state: SharedPrivateLinkResourceProvisioningState | None = None


class SharedPrivateLinkResource(Resource):
    properties: SharedPrivateLinkResourceProperties | None = None


SharedPrivateLinkResourceListResult = PageResult[SharedPrivateLinkResource]


class SearchServiceProperties(ArmModel):
    replica_count: int | None = None
    partition_count: int | None = None
    hosting_mode: HostingMode | None = None
    public_network_access: PublicNetworkAccess | None = None
    status: SearchServiceStatus | None = None
    status_details: str | None = None
    provisioning_state: ProvisioningState | None = None
    network_rule_set: NetworkRuleSet | None = None
    private_endpoint_connections: list[PrivateEndpointConnection] = Field(default_factory=list)
    shared_private_link_resources: list[SharedPrivateLinkResource] = Field(default_factory=list)


class SearchService(TrackedResource):
    properties: SearchServiceProperties | None = None
    sku: Sku | None = None
    identity: Identity | None = None


SearchServiceListResult = PageResult[SearchService]


class SearchServiceUpdate(Resource):
    properties: SearchServiceProperties | None = None
    sku: Sku | None = None
    location: str | None = None
    tags: dict[str, str] | None = None
    identity: Identity | None = None
