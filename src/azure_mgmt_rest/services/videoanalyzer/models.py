"""Microsoft.Media video analyzer wire models (api-version 2021-11-01-preview)."""

from __future__ import annotations

from datetime import datetime
from enum import Enum

from pydantic import Field

from ...models import ArmModel, PageResult, ProxyResource, SinglePageResult, TrackedResource
from ...open_enum import open_enum


class AccountEncryptionKeyType(Enum):
    SYSTEM_KEY = "SystemKey"
    CUSTOMER_KEY = "CustomerKey"


class EndpointType(Enum):
    CLIENT_API = "ClientApi"


class PublicNetworkAccess(Enum):
    ENABLED = "Enabled"
    DISABLED = "Disabled"


class ProvisioningState(Enum):
    FAILED = "Failed"
    IN_PROGRESS = "InProgress"
    SUCCEEDED = "Succeeded"


class VideoType(Enum):
    ARCHIVE = "Archive"
    FILE = "File"


AccountEncryptionKeyTypeValue = open_enum(AccountEncryptionKeyType)
EndpointTypeValue = open_enum(EndpointType)
PublicNetworkAccessValue = open_enum(PublicNetworkAccess)
ProvisioningStateValue = open_enum(ProvisioningState)
VideoTypeValue = open_enum(VideoType)


class ResourceIdentity(ArmModel):
    user_assigned_identity: str


class UserAssignedManagedIdentity(ArmModel):
    client_id: str | None = None
    principal_id: str | None = None


class VideoAnalyzerIdentity(ArmModel):
    type: str
    user_assigned_identities: dict[str, UserAssignedManagedIdentity] | None = None


class KeyVaultProperties(ArmModel):
    key_identifier: str
    current_key_identifier: str | None = None


class AccountEncryption(ArmModel):
    type: AccountEncryptionKeyTypeValue
    key_vault_properties: KeyVaultProperties | None = None
    identity: ResourceIdentity | None = None
    status: str | None = None


class StorageAccount(ArmModel):
    id: str
    identity: ResourceIdentity | None = None
    status: str | None = None


class Endpoint(ArmModel):
    endpoint_url: str | None = None
    type: EndpointTypeValue


class IotHub(ArmModel):
    id: str
    identity: ResourceIdentity
    status: str | None = None


class GroupLevelAccessControl(ArmModel):
    public_network_access: PublicNetworkAccessValue | None = None


class NetworkAccessControl(ArmModel):
    integration: GroupLevelAccessControl | None = None
    ingestion: GroupLevelAccessControl | None = None
    consumption: GroupLevelAccessControl | None = None


class VideoAnalyzerProperties(ArmModel):
    storage_accounts: list[StorageAccount] = Field(default_factory=list)
    endpoints: list[Endpoint] = Field(default_factory=list)
    encryption: AccountEncryption | None = None
    iot_hubs: list[IotHub] = Field(default_factory=list)
    public_network_access: PublicNetworkAccessValue | None = None
    network_access_control: NetworkAccessControl | None = None
    provisioning_state: ProvisioningStateValue | None = None


class VideoAnalyzer(TrackedResource):
    properties: VideoAnalyzerProperties | None = None
    identity: VideoAnalyzerIdentity | None = None


VideoAnalyzerCollection = SinglePageResult[VideoAnalyzer]


class VideoAnalyzerUpdate(ArmModel):
    tags: dict[str, str] | None = None
    properties: VideoAnalyzerProperties | None = None
    identity: VideoAnalyzerIdentity | None = None


class VideoFlags(ArmModel):
    can_stream: bool
    has_data: bool
    is_in_use: bool


class VideoPreviewImageUrls(ArmModel):
    small: str | None = None
    medium: str | None = None
    large: str | None = None


class VideoContentUrls(ArmModel):
    download_url: str | None = None
    archive_base_url: str | None = None
    rtsp_tunnel_url: str | None = None
    preview_image_urls: VideoPreviewImageUrls | None = None


class VideoMediaInfo(ArmModel):
    segment_length: str | None = None


class VideoArchival(ArmModel):
    retention_period: str | None = None


class VideoProperties(ArmModel):
    title: str | None = None
    description: str | None = None
    type: VideoTypeValue | None = None
    flags: VideoFlags | None = None
    content_urls: VideoContentUrls | None = None
    media_info: VideoMediaInfo | None = None
    archival: VideoArchival | None = None


class VideoEntity(ProxyResource):
    properties: VideoProperties | None = None


class VideoEntityCollection(PageResult[VideoEntity]):
    # Media collections spell the continuation link with an OData prefix.
    next_link: str | None = Field(default=None, alias="@nextLink")


class VideoContentToken(ArmModel):
    expiration_date: datetime | None = None
    token: str | None = None


class EdgeModuleProperties(ArmModel):
    edge_module_id: str | None = None


class EdgeModuleEntity(ProxyResource):
    properties: EdgeModuleProperties | None = None


class EdgeModuleEntityCollection(PageResult[EdgeModuleEntity]):
    next_link: str | None = Field(default=None, alias="@nextLink")


class ListProvisioningTokenInput(ArmModel):
    expiration_date: datetime


class EdgeModuleProvisioningToken(ArmModel):
    expiration_date: datetime | None = None
    token: str | None = None
