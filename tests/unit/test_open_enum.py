from __future__ import annotations

from enum import Enum
from typing import Annotated, get_args, get_origin

import pytest

from azure_mgmt_rest.errors import EnumShapeError
from azure_mgmt_rest.models import ArmModel
from azure_mgmt_rest.open_enum import (
    OpenEnumCodec,
    UnknownValue,
    codec_for,
    decode_open_enum,
    encode_open_enum,
    is_known,
    open_enum,
)
from azure_mgmt_rest.serialization import decode_model
from azure_mgmt_rest.services.mobilenetwork import models as mobilenetwork_models
from azure_mgmt_rest.services.mobilenetwork.models import CoreNetworkType, PlatformType
from azure_mgmt_rest.services.postgresql import models as postgresql_models
from azure_mgmt_rest.services.postgresql.models import ServerVersion
from azure_mgmt_rest.services.reservations import models as reservations_models
from azure_mgmt_rest.services.search import models as search_models
from azure_mgmt_rest.services.videoanalyzer import models as videoanalyzer_models


class _Props(ArmModel):
    core_network_technology: open_enum(CoreNetworkType) | None = None
    version: open_enum(ServerVersion) | None = None


def test_known_wire_values_decode_to_members() -> None:
    assert decode_open_enum(CoreNetworkType, "5GC") is CoreNetworkType.N5GC
    assert decode_open_enum(CoreNetworkType, "EPC") is CoreNetworkType.EPC
    assert decode_open_enum(ServerVersion, "13") is ServerVersion.N13
    assert decode_open_enum(PlatformType, "3P-AZURE-STACK-HCI") is PlatformType.N3P_AZURE_STACK_HCI


def test_unknown_wire_value_is_preserved() -> None:
    value = decode_open_enum(CoreNetworkType, "6GC")

    assert value == UnknownValue("6GC")
    assert not is_known(value)
    assert encode_open_enum(value) == "6GC"


def test_matching_is_case_sensitive() -> None:
    assert decode_open_enum(CoreNetworkType, "5gc") == UnknownValue("5gc")


def test_model_round_trip_keeps_unknown_values_verbatim() -> None:
    props = _Props.model_validate({"coreNetworkTechnology": "6GC", "version": "13"})

    assert props.core_network_technology == UnknownValue("6GC")
    assert props.version is ServerVersion.N13
    assert props.to_wire() == {"coreNetworkTechnology": "6GC", "version": "13"}


def test_members_can_be_assigned_in_code() -> None:
    props = _Props(core_network_technology=CoreNetworkType.N5GC)

    assert props.to_wire() == {"coreNetworkTechnology": "5GC"}


def test_non_string_wire_value_is_a_shape_error() -> None:
    with pytest.raises(EnumShapeError) as excinfo:
        decode_model(_Props, {"version": 13}, operation="postgresql.servers.get", status_code=200)

    assert excinfo.value.enum_name == "ServerVersion"
    assert excinfo.value.operation == "postgresql.servers.get"
    assert excinfo.value.status_code == 200


def test_codec_rejects_non_string_members() -> None:
    class Numeric(Enum):
        ONE = 1

    with pytest.raises(TypeError):
        OpenEnumCodec(Numeric)


def test_codec_is_cached_per_enum() -> None:
    assert codec_for(CoreNetworkType) is codec_for(CoreNetworkType)
    assert codec_for(CoreNetworkType).wire_values == ("5GC", "EPC")


def _service_open_enums() -> list[type[Enum]]:
    found: dict[str, type[Enum]] = {}
    for module in (mobilenetwork_models, postgresql_models, reservations_models, search_models, videoanalyzer_models):
        for name, attribute in vars(module).items():
            if get_origin(attribute) is not Annotated:
                continue
            validator = get_args(attribute)[1]
            codec = validator.func.__self__
            found[f"{module.__name__.split('.')[-2]}.{name}"] = codec.enum_type
    return [found[key] for key in sorted(found)]


_SERVICE_OPEN_ENUMS = _service_open_enums()


def test_every_service_exports_open_enums() -> None:
    modules = {enum_type.__module__ for enum_type in _SERVICE_OPEN_ENUMS}

    assert len(modules) == 5


@pytest.mark.parametrize(
    "member",
    [member for enum_type in _SERVICE_OPEN_ENUMS for member in enum_type],
    ids=lambda member: f"{type(member).__module__.split('.')[-2]}.{type(member).__name__}.{member.name}",
)
def test_service_enum_members_survive_a_wire_round_trip(member: Enum) -> None:
    codec = codec_for(type(member))

    assert codec.decode(codec.encode(member)) is member


class _Switch(Enum):
    ON = "On"
    OFF = "Off"


def test_unrecognised_switch_value_is_written_back_literally() -> None:
    value = decode_open_enum(_Switch, "Beta")

    assert value == UnknownValue("Beta")
    assert encode_open_enum(value) == "Beta"
    assert decode_open_enum(_Switch, "On") is _Switch.ON
