"""Microsoft.DBforPostgreSQL flexible server wire models (api-version 2021-06-15-privatepreview)."""

from __future__ import annotations

from datetime import datetime
from enum import Enum

from pydantic import Field

from ...models import ArmModel, PageResult, ProxyResource, TrackedResource
from ...open_enum import open_enum


class ServerVersion(Enum):
    N13 = "13"
    N12 = "12"
    N11 = "11"


class ServerState(Enum):
    READY = "Ready"
    DROPPING = "Dropping"
    DISABLED = "Disabled"
    STARTING = "Starting"
    STOPPING = "Stopping"
    STOPPED = "Stopped"
    UPDATING = "Updating"


class CreateMode(Enum):
    DEFAULT = "Default"
    CREATE = "Create"
    UPDATE = "Update"
    POINT_IN_TIME_RESTORE = "PointInTimeRestore"


class SkuTier(Enum):
    BURSTABLE = "Burstable"
    GENERAL_PURPOSE = "GeneralPurpose"
    MEMORY_OPTIMIZED = "MemoryOptimized"


class HighAvailabilityMode(Enum):
    DISABLED = "Disabled"
    ZONE_REDUNDANT = "ZoneRedundant"


class HighAvailabilityState(Enum):
    NOT_ENABLED = "NotEnabled"
    CREATING_STANDBY = "CreatingStandby"
    REPLICATING_DATA = "ReplicatingData"
    FAILING_OVER = "FailingOver"
    HEALTHY = "Healthy"
    REMOVING_STANDBY = "RemovingStandby"


class GeoRedundantBackup(Enum):
    ENABLED = "Enabled"
    DISABLED = "Disabled"


class PublicNetworkAccess(Enum):
    ENABLED = "Enabled"
    DISABLED = "Disabled"


class ConfigurationDataType(Enum):
    BOOLEAN = "Boolean"
    NUMERIC = "Numeric"
    INTEGER = "Integer"
    ENUMERATION = "Enumeration"


class FailoverMode(Enum):
    PLANNED_FAILOVER = "PlannedFailover"
    FORCED_FAILOVER = "ForcedFailover"
    PLANNED_SWITCHOVER = "PlannedSwitchover"
    FORCED_SWITCHOVER = "ForcedSwitchover"


class IdentityType(Enum):
    SYSTEM_ASSIGNED = "SystemAssigned"


ServerVersionValue = open_enum(ServerVersion)
ServerStateValue = open_enum(ServerState)
CreateModeValue = open_enum(CreateMode)
SkuTierValue = open_enum(SkuTier)
HighAvailabilityModeValue = open_enum(HighAvailabilityMode)
HighAvailabilityStateValue = open_enum(HighAvailabilityState)
GeoRedundantBackupValue = open_enum(GeoRedundantBackup)
PublicNetworkAccessValue = open_enum(PublicNetworkAccess)
ConfigurationDataTypeValue = open_enum(ConfigurationDataType)
FailoverModeValue = open_enum(FailoverMode)


class Sku(ArmModel):
    name: str
    tier: SkuTierValue


class Identity(ArmModel):
    principal_id: str | None = None
    tenant_id: str | None = None
    type: IdentityType | None = None


class Storage(ArmModel):
    storage_size_gb: int | None = Field(default=None, alias="storageSizeGB")


class Backup(ArmModel):
    backup_retention_days: int | None = None
    geo_redundant_backup: GeoRedundantBackupValue | None = None
    earliest_restore_date: datetime | None = None


class Network(ArmModel):
    public_network_access: PublicNetworkAccessValue | None = None
    delegated_subnet_resource_id: str | None = None
    private_dns_zone_arm_resource_id: str | None = None


class HighAvailability(ArmModel):
    mode: HighAvailabilityModeValue | None = None
    state: HighAvailabilityStateValue | None = None
    standby_availability_zone: str | None = None


class MaintenanceWindow(ArmModel):
    custom_window: str | None = None
    start_hour: int | None = None
    start_minute: int | None = None
    day_of_week: int | None = None


class ServerProperties(ArmModel):
    administrator_login: str | None = None
    administrator_login_password: str | None = None
    version: ServerVersionValue | None = None
    minor_version: str | None = None
    state: ServerStateValue | None = None
    fully_qualified_domain_name: str | None = None
    storage: Storage | None = None
    backup: Backup | None = None
    network: Network | None = None
    high_availability: HighAvailability | None = None
    maintenance_window: MaintenanceWindow | None = None
    source_server_resource_id: str | None = None
    point_in_time_utc: datetime | None = Field(default=None, alias="pointInTimeUTC")
    availability_zone: str | None = None
    create_mode: CreateModeValue | None = None
    tags: dict[str, str] | None = None


class Server(TrackedResource):
    identity: Identity | None = None
    sku: Sku | None = None
    properties: ServerProperties | None = None


ServerListResult = PageResult[Server]


class ServerPropertiesForUpdate(ArmModel):
    administrator_login_password: str | None = None
    storage: Storage | None = None
    backup: Backup | None = None
    high_availability: HighAvailability | None = None
    maintenance_window: MaintenanceWindow | None = None
    create_mode: CreateModeValue | None = None


class ServerForUpdate(ArmModel):
    location: str | None = None
    sku: Sku | None = None
    properties: ServerPropertiesForUpdate | None = None
    tags: dict[str, str] | None = None


class RestartParameter(ArmModel):
    restart_with_failover: bool | None = None
    failover_mode: FailoverModeValue | None = None


class FirewallRuleProperties(ArmModel):
    start_ip_address: str
    end_ip_address: str


class FirewallRule(ProxyResource):
    properties: FirewallRuleProperties


FirewallRuleListResult = PageResult[FirewallRule]


class ConfigurationProperties(ArmModel):
    value: str | None = None
    description: str | None = None
    default_value: str | None = None
    data_type: ConfigurationDataTypeValue | None = None
    allowed_values: str | None = None
    source: str | None = None


class Configuration(ProxyResource):
    properties: ConfigurationProperties | None = None


ConfigurationListResult = PageResult[Configuration]


class NameAvailabilityRequest(ArmModel):
    name: str
    type: str | None = None


class NameAvailability(ArmModel):
    message: str | None = None
    name_available: bool | None = None
    name: str | None = None
    type: str | None = None
