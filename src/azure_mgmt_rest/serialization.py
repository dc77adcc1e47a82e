"""Decoding and encoding of wire payloads through pydantic models."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from .errors import DeserializationError, EnumShapeError

_adapter_cache: dict[Any, TypeAdapter[Any]] = {}
_MAX_SAMPLE_DEPTH = 2
_MAX_SAMPLE_ITEMS = 5
_MAX_SAMPLE_STRING = 200


def model_name(model_type: Any) -> str:
    return getattr(model_type, "__name__", repr(model_type))


def _adapter_for(model_type: Any) -> TypeAdapter[Any]:
    try:
        adapter = _adapter_cache.get(model_type)
    except TypeError:
        return TypeAdapter(model_type)

    if adapter is None:
        adapter = TypeAdapter(model_type)
        _adapter_cache[model_type] = adapter
    return adapter


def sample_payload(value: Any, depth: int = 0) -> Any:
    if depth > _MAX_SAMPLE_DEPTH:
        return "<trimmed>"

    if isinstance(value, dict):
        sampled: dict[str, Any] = {}
        for index, (key, nested) in enumerate(value.items()):
            if index >= _MAX_SAMPLE_ITEMS:
                sampled["..."] = "<trimmed>"
                break
            sampled[str(key)] = sample_payload(nested, depth + 1)
        return sampled

    if isinstance(value, list):
        sampled_items = [sample_payload(item, depth + 1) for item in value[:_MAX_SAMPLE_ITEMS]]
        if len(value) > _MAX_SAMPLE_ITEMS:
            sampled_items.append("<trimmed>")
        return sampled_items

    if isinstance(value, str):
        return value if len(value) <= _MAX_SAMPLE_STRING else f"{value[:_MAX_SAMPLE_STRING]}..."

    if isinstance(value, (int, float, bool)) or value is None:
        return value

    return repr(value)


def decode_model(
    model_type: Any,
    payload: Any,
    *,
    operation: str | None = None,
    status_code: int | None = None,
) -> Any:
    adapter = _adapter_for(model_type)
    try:
        return adapter.validate_python(payload)
    except EnumShapeError as error:
        error.operation = error.operation or operation
        error.status_code = status_code
        raise
    except PydanticValidationError as error:
        subject = operation or "response"
        raise DeserializationError(
            f"{subject} response did not match {model_name(model_type)}",
            model_name=model_name(model_type),
            errors=error.errors(),
            operation=operation,
            status_code=status_code,
            raw_sample=sample_payload(payload),
        ) from error


def encode_body(body: Any) -> Any:
    if body is None:
        return None
    if isinstance(body, BaseModel):
        return body.model_dump(mode="json", by_alias=True, exclude_none=True)
    if isinstance(body, Mapping):
        return {key: encode_body(value) if isinstance(value, BaseModel) else value for key, value in body.items()}
    return body
