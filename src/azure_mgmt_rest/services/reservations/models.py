"""Microsoft.Capacity reservation wire models (api-version 2022-03-01)."""

from __future__ import annotations

from datetime import datetime
from enum import Enum

from pydantic import Field

from ...models import ArmModel, PageResult, ProxyResource, SystemData
from ...open_enum import open_enum


class ProvisioningState(Enum):
    CREATING = "Creating"
    PENDING_RESOURCE_HOLD = "PendingResourceHold"
    CONFIRMED_RESOURCE_HOLD = "ConfirmedResourceHold"
    PENDING_BILLING = "PendingBilling"
    CONFIRMED_BILLING = "ConfirmedBilling"
    CREATED = "Created"
    SUCCEEDED = "Succeeded"
    CANCELLED = "Cancelled"
    EXPIRED = "Expired"
    BILLING_FAILED = "BillingFailed"
    FAILED = "Failed"
    SPLIT = "Split"
    MERGED = "Merged"


class ReservationTerm(Enum):
    P1Y = "P1Y"
    P3Y = "P3Y"
    P5Y = "P5Y"


class AppliedScopeType(Enum):
    SINGLE = "Single"
    SHARED = "Shared"
    MANAGEMENT_GROUP = "ManagementGroup"


class ReservedResourceType(Enum):
    VIRTUAL_MACHINES = "VirtualMachines"
    SQL_DATABASES = "SqlDatabases"
    SUSE_LINUX = "SuseLinux"
    COSMOS_DB = "CosmosDb"
    RED_HAT = "RedHat"
    SQL_DATA_WAREHOUSE = "SqlDataWarehouse"
    VMWARE_CLOUD_SIMPLE = "VMwareCloudSimple"
    RED_HAT_OSA = "RedHatOsa"
    DATABRICKS = "Databricks"
    APP_SERVICE = "AppService"
    MANAGED_DISK = "ManagedDisk"
    BLOCK_BLOB = "BlockBlob"
    REDIS_CACHE = "RedisCache"
    AZURE_DATA_EXPLORER = "AzureDataExplorer"
    MYSQL = "MySql"
    MARIADB = "MariaDb"
    POSTGRESQL = "PostgreSql"
    DEDICATED_HOST = "DedicatedHost"
    SAP_HANA = "SapHana"
    SQL_AZURE_HYBRID_BENEFIT = "SqlAzureHybridBenefit"
    AVS = "AVS"
    DATA_FACTORY = "DataFactory"
    NETAPP_STORAGE = "NetAppStorage"
    AZURE_FILES = "AzureFiles"
    SQL_EDGE = "SqlEdge"
    VIRTUAL_MACHINE_SOFTWARE = "VirtualMachineSoftware"


class ReservationStatusCode(Enum):
    NONE = "None"
    PENDING = "Pending"
    PROCESSING = "Processing"
    ACTIVE = "Active"
    PURCHASE_ERROR = "PurchaseError"
    PAYMENT_INSTRUMENT_ERROR = "PaymentInstrumentError"
    SPLIT = "Split"
    MERGED = "Merged"
    EXPIRED = "Expired"
    SUCCEEDED = "Succeeded"


class ReservationBillingPlan(Enum):
    UPFRONT = "Upfront"
    MONTHLY = "Monthly"


class InstanceFlexibility(Enum):
    ON = "On"
    OFF = "Off"


ProvisioningStateValue = open_enum(ProvisioningState)
ReservationTermValue = open_enum(ReservationTerm)
AppliedScopeTypeValue = open_enum(AppliedScopeType)
ReservedResourceTypeValue = open_enum(ReservedResourceType)
ReservationStatusCodeValue = open_enum(ReservationStatusCode)
ReservationBillingPlanValue = open_enum(ReservationBillingPlan)
InstanceFlexibilityValue = open_enum(InstanceFlexibility)


class SkuName(ArmModel):
    name: str | None = None


class ExtendedStatusInfo(ArmModel):
    status_code: ReservationStatusCodeValue | None = None
    message: str | None = None


class ReservationsProperties(ArmModel):
    reserved_resource_type: ReservedResourceTypeValue | None = None
    instance_flexibility: InstanceFlexibilityValue | None = None
    display_name: str | None = None
    applied_scopes: list[str] | None = None
    applied_scope_type: AppliedScopeTypeValue | None = None
    archived: bool | None = None
    capabilities: str | None = None
    quantity: int | None = None
    provisioning_state: ProvisioningStateValue | None = None
    effective_date_time: datetime | None = None
    benefit_start_time: datetime | None = None
    last_updated_date_time: datetime | None = None
    expiry_date: str | None = None
    sku_description: str | None = None
    extended_status_info: ExtendedStatusInfo | None = None
    billing_plan: ReservationBillingPlanValue | None = None
    display_provisioning_state: str | None = None
    provisioning_sub_state: str | None = None
    purchase_date: str | None = None
    billing_scope_id: str | None = None
    renew: bool | None = None
    renew_source: str | None = None
    renew_destination: str | None = None
    term: ReservationTermValue | None = None
    user_friendly_applied_scope_type: str | None = None
    user_friendly_renew_state: str | None = None


class ReservationResponse(ProxyResource):
    location: str | None = None
    etag: int | None = None
    sku: SkuName | None = None
    properties: ReservationsProperties | None = None
    kind: str | None = None


ReservationList = PageResult[ReservationResponse]


class ReservationSummary(ArmModel):
    succeeded_count: float | None = None
    failed_count: float | None = None
    expiring_count: float | None = None
    expired_count: float | None = None
    pending_count: float | None = None
    cancelled_count: float | None = None
    processing_count: float | None = None
    warning_count: float | None = None
    no_benefit_count: float | None = None


class ReservationsListResult(PageResult[ReservationResponse]):
    summary: ReservationSummary | None = None


class ReservationOrderProperties(ArmModel):
    display_name: str | None = None
    request_date_time: datetime | None = None
    created_date_time: datetime | None = None
    expiry_date: str | None = None
    benefit_start_time: datetime | None = None
    original_quantity: int | None = None
    term: ReservationTermValue | None = None
    provisioning_state: ProvisioningStateValue | None = None
    billing_plan: ReservationBillingPlanValue | None = None
    reservations: list[ReservationResponse] = Field(default_factory=list)


class ReservationOrderResponse(ArmModel):
    etag: int | None = None
    id: str | None = None
    name: str | None = None
    properties: ReservationOrderProperties | None = None
    type: str | None = None
    system_data: SystemData | None = None


ReservationOrderList = PageResult[ReservationOrderResponse]


class PurchaseRequestProperties(ArmModel):
    reserved_resource_type: ReservedResourceTypeValue | None = None
    billing_scope_id: str | None = None
    term: ReservationTermValue | None = None
    billing_plan: ReservationBillingPlanValue | None = None
    quantity: int | None = None
    display_name: str | None = None
    applied_scope_type: AppliedScopeTypeValue | None = None
    applied_scopes: list[str] | None = None
    renew: bool | None = None


class PurchaseRequest(ArmModel):
    sku: SkuName | None = None
    location: str | None = None
    properties: PurchaseRequestProperties | None = None


class CurrencyTotal(ArmModel):
    currency_code: str | None = None
    amount: float | None = None


class CalculatePriceResponseProperties(ArmModel):
    billing_currency_total: CurrencyTotal | None = None
    net_total: float | None = None
    tax_total: float | None = None
    grand_total: float | None = None
    is_tax_included: bool | None = None
    is_billing_partner_managed: bool | None = None
    reservation_order_id: str | None = None
    sku_title: str | None = None
    sku_description: str | None = None
    pricing_currency_total: CurrencyTotal | None = None


class CalculatePriceResponse(ArmModel):
    properties: CalculatePriceResponseProperties | None = None


class PatchProperties(ArmModel):
    applied_scope_type: AppliedScopeTypeValue | None = None
    applied_scopes: list[str] | None = None
    instance_flexibility: InstanceFlexibilityValue | None = None
    name: str | None = None
    renew: bool | None = None


class Patch(ArmModel):
    properties: PatchProperties | None = None
