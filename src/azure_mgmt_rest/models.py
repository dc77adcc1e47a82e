"""Wire models shared by every Azure Resource Manager provider."""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from .open_enum import open_enum

ItemT = TypeVar("ItemT")


class ArmModel(BaseModel):
    """Base for wire models: camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    def to_wire(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class PageResult(ArmModel, Generic[ItemT]):
    """One page of a list operation."""

    value: list[ItemT] = Field(default_factory=list)
    next_link: str | None = None

    @field_validator("value", mode="before")
    @classmethod
    def _null_value_is_empty(cls, value: Any) -> Any:
        return [] if value is None else value

    @field_validator("next_link", mode="before")
    @classmethod
    def _blank_link_is_last_page(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value


class SinglePageResult(ArmModel, Generic[ItemT]):
    """List result whose schema has no ``nextLink``; always the only page."""

    value: list[ItemT] = Field(default_factory=list)

    @field_validator("value", mode="before")
    @classmethod
    def _null_value_is_empty(cls, value: Any) -> Any:
        return [] if value is None else value


class CreatedByType(Enum):
    USER = "User"
    APPLICATION = "Application"
    MANAGED_IDENTITY = "ManagedIdentity"
    KEY = "Key"


CreatedByTypeValue = open_enum(CreatedByType)


class SystemData(ArmModel):
    created_by: str | None = None
    created_by_type: CreatedByTypeValue | None = None
    created_at: datetime | None = None
    last_modified_by: str | None = None
    last_modified_by_type: CreatedByTypeValue | None = None
    last_modified_at: datetime | None = None


class Resource(ArmModel):
    id: str | None = None
    name: str | None = None
    type: str | None = None
    system_data: SystemData | None = None


class TrackedResource(Resource):
    location: str | None = None
    tags: dict[str, str] | None = None


class ProxyResource(Resource):
    pass


class ErrorAdditionalInfo(ArmModel):
    type: str | None = None
    info: Any | None = None


class ErrorDetail(ArmModel):
    code: str | None = None
    message: str | None = None
    target: str | None = None
    details: list[ErrorDetail] | None = None
    additional_info: list[ErrorAdditionalInfo] | None = None


class ErrorResponse(ArmModel):
    error: ErrorDetail | None = None


class OperationDisplay(ArmModel):
    provider: str | None = None
    resource: str | None = None
    operation: str | None = None
    description: str | None = None


class Operation(ArmModel):
    name: str | None = None
    is_data_action: bool | None = None
    display: OperationDisplay | None = None
    origin: str | None = None


OperationListResult = PageResult[Operation]


class CheckNameAvailabilityReason(Enum):
    INVALID = "Invalid"
    ALREADY_EXISTS = "AlreadyExists"


CheckNameAvailabilityReasonValue = open_enum(CheckNameAvailabilityReason)


class CheckNameAvailabilityRequest(ArmModel):
    name: str
    type: str


class CheckNameAvailabilityResponse(ArmModel):
    name_available: bool | None = None
    reason: CheckNameAvailabilityReasonValue | None = None
    message: str | None = None
