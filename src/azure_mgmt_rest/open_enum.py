"""Open (forward-compatible) enum support for wire models.

Services add enum members without bumping the API version, so an enum field
decoded by an older client must not fail on a value it has never seen.  An
open enum is a regular :class:`enum.Enum` whose member *values* are the wire
strings; anything outside that table decodes to :class:`UnknownValue`, which
keeps the raw string and writes it back verbatim.

Usage in a model::

    class CoreNetworkType(Enum):
        N5GC = "5GC"
        EPC = "EPC"

    CoreNetworkTypeValue = open_enum(CoreNetworkType)

    class Properties(ArmModel):
        core_network_technology: CoreNetworkTypeValue | None = None
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from typing import Annotated, Any, Generic, TypeVar, Union

from pydantic import PlainSerializer, PlainValidator

from .errors import EnumShapeError

EnumT = TypeVar("EnumT", bound=Enum)


@dataclass(frozen=True, slots=True)
class UnknownValue:
    """A wire value the client does not know about."""

    raw: str

    def __str__(self) -> str:
        return self.raw


class OpenEnumCodec(Generic[EnumT]):
    def __init__(self, enum_type: type[EnumT]) -> None:
        self.enum_type = enum_type
        self._by_wire: dict[str, EnumT] = {}
        for member in enum_type:
            if not isinstance(member.value, str):
                raise TypeError(f"{enum_type.__name__}.{member.name} must have a string wire value")
            self._by_wire[member.value] = member

    @property
    def wire_values(self) -> tuple[str, ...]:
        return tuple(self._by_wire)

    def decode(self, raw: Any) -> EnumT | UnknownValue:
        # Already-decoded values pass through so models can be built in code.
        if isinstance(raw, (self.enum_type, UnknownValue)):
            return raw
        if not isinstance(raw, str):
            raise EnumShapeError(enum_name=self.enum_type.__name__, value=raw)

        member = self._by_wire.get(raw)
        if member is None:
            return UnknownValue(raw)
        return member

    def encode(self, value: EnumT | UnknownValue) -> str:
        if isinstance(value, UnknownValue):
            return value.raw
        if isinstance(value, self.enum_type):
            return value.value
        raise TypeError(f"cannot encode {value!r} as {self.enum_type.__name__}")


@lru_cache(maxsize=None)
def codec_for(enum_type: type[EnumT]) -> OpenEnumCodec[EnumT]:
    return OpenEnumCodec(enum_type)


def decode_open_enum(enum_type: type[EnumT], raw: Any) -> EnumT | UnknownValue:
    return codec_for(enum_type).decode(raw)


def encode_open_enum(value: Enum | UnknownValue) -> str:
    if isinstance(value, UnknownValue):
        return value.raw
    return codec_for(type(value)).encode(value)


def is_known(value: Enum | UnknownValue) -> bool:
    return not isinstance(value, UnknownValue)


def open_enum(enum_type: type[EnumT]) -> Any:
    """Return the pydantic field type for an open enum over ``enum_type``."""
    codec = codec_for(enum_type)
    return Annotated[
        Union[enum_type, UnknownValue],
        PlainValidator(codec.decode),
        PlainSerializer(codec.encode, return_type=str),
    ]


__all__ = [
    "OpenEnumCodec",
    "UnknownValue",
    "codec_for",
    "decode_open_enum",
    "encode_open_enum",
    "is_known",
    "open_enum",
]
