"""Configuration helpers for azure-mgmt-rest clients."""

from __future__ import annotations

import json
import os
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from .credentials import default_scopes

AZURE_PUBLIC_CLOUD = "https://management.azure.com"
AZURE_CHINA_CLOUD = "https://management.chinacloudapi.cn"
AZURE_US_GOVERNMENT = "https://management.usgovcloudapi.net"
AZURE_GERMANY_CLOUD = "https://management.microsoftazure.de"

CLOUD_ENDPOINTS: dict[str, str] = {
    "public": AZURE_PUBLIC_CLOUD,
    "azurecloud": AZURE_PUBLIC_CLOUD,
    "china": AZURE_CHINA_CLOUD,
    "azurechinacloud": AZURE_CHINA_CLOUD,
    "usgov": AZURE_US_GOVERNMENT,
    "azureusgovernment": AZURE_US_GOVERNMENT,
    "germany": AZURE_GERMANY_CLOUD,
    "azuregermancloud": AZURE_GERMANY_CLOUD,
}

DEFAULT_ENDPOINT = AZURE_PUBLIC_CLOUD
DEFAULT_TIMEOUT_SECONDS = 30.0


@dataclass(slots=True)
class ClientConfig:
    endpoint: str = DEFAULT_ENDPOINT
    scopes: list[str] | None = None
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS
    headers: dict[str, str] = field(default_factory=dict)
    bearer_token: str | None = None
    subscription_id: str | None = None

    def resolved_scopes(self) -> list[str]:
        return list(self.scopes) if self.scopes else default_scopes(self.endpoint)

    @classmethod
    def from_env(cls) -> "ClientConfig":
        endpoint = _trim_or_none(os.getenv("AZURE_MGMT_ENDPOINT")) or endpoint_for_cloud(
            os.getenv("AZURE_MGMT_CLOUD")
        )
        timeout_ms = _parse_positive_int(os.getenv("AZURE_MGMT_TIMEOUT_MS"))
        timeout_seconds = (timeout_ms / 1000.0) if timeout_ms else DEFAULT_TIMEOUT_SECONDS

        return cls(
            endpoint=normalize_endpoint(endpoint),
            scopes=parse_scopes(os.getenv("AZURE_MGMT_SCOPES")),
            timeout_seconds=timeout_seconds,
            bearer_token=_trim_or_none(os.getenv("AZURE_MGMT_BEARER_TOKEN")),
            subscription_id=_trim_or_none(os.getenv("AZURE_SUBSCRIPTION_ID")),
        )

    @classmethod
    def from_profile(
        cls,
        profile: str | None = None,
        *,
        config_path: str | Path | None = None,
    ) -> "ClientConfig":
        payload = load_profile_config(config_path=config_path)
        profiles = payload.get("profiles") if isinstance(payload, dict) else None
        current_profile = payload.get("currentProfile") if isinstance(payload, dict) else None

        selected_name = (profile or current_profile or "default").strip() or "default"
        profile_entry: dict[str, Any] = {}
        if isinstance(profiles, dict) and isinstance(profiles.get(selected_name), dict):
            profile_entry = dict(profiles[selected_name])
        elif isinstance(profiles, dict) and isinstance(profiles.get("default"), dict):
            profile_entry = dict(profiles["default"])

        endpoint = _trim_or_none(profile_entry.get("endpoint")) or endpoint_for_cloud(profile_entry.get("cloud"))
        timeout_ms = _parse_positive_int(profile_entry.get("timeoutMs"))
        timeout_seconds = (timeout_ms / 1000.0) if timeout_ms else DEFAULT_TIMEOUT_SECONDS

        headers: dict[str, str] = {}
        raw_headers = profile_entry.get("headers")
        if isinstance(raw_headers, dict):
            for key, value in raw_headers.items():
                if isinstance(key, str) and isinstance(value, str) and key.strip() and value.strip():
                    headers[key] = value

        scopes = profile_entry.get("scopes")
        if isinstance(scopes, list):
            scopes = [scope.strip() for scope in scopes if isinstance(scope, str) and scope.strip()] or None
        else:
            scopes = parse_scopes(scopes)

        bearer = None
        auth = profile_entry.get("auth")
        if isinstance(auth, dict):
            bearer = _trim_or_none(auth.get("bearer"))

        return cls(
            endpoint=normalize_endpoint(endpoint),
            scopes=scopes,
            timeout_seconds=timeout_seconds,
            headers=headers,
            bearer_token=bearer,
            subscription_id=_trim_or_none(profile_entry.get("subscriptionId")),
        )


def endpoint_for_cloud(cloud: Any) -> str:
    if not isinstance(cloud, str) or not cloud.strip():
        return DEFAULT_ENDPOINT
    key = cloud.strip().lower().replace("-", "").replace("_", "")
    endpoint = CLOUD_ENDPOINTS.get(key)
    if endpoint is None:
        raise ValueError(f"unknown Azure cloud {cloud!r}; expected one of: public, china, usgov, germany")
    return endpoint


def normalize_endpoint(value: str | None) -> str:
    trimmed = (value or "").strip()
    if not trimmed:
        return DEFAULT_ENDPOINT
    return trimmed.rstrip("/")


def parse_scopes(value: Any) -> list[str] | None:
    if not isinstance(value, str):
        return None
    scopes = [part for part in re.split(r"[\s,]+", value) if part]
    return scopes or None


def default_config_path() -> Path:
    xdg = os.getenv("XDG_CONFIG_HOME")
    root = Path(xdg) if xdg else Path.home() / ".config"
    return root / "azure-mgmt-rest" / "config.json"


def load_profile_config(*, config_path: str | Path | None = None) -> dict[str, Any]:
    path = Path(config_path) if config_path else default_config_path()
    if not path.exists():
        return {"currentProfile": "default", "profiles": {}}

    try:
        with path.open("r", encoding="utf-8") as handle:
            parsed = json.load(handle)
    except (OSError, json.JSONDecodeError):
        return {"currentProfile": "default", "profiles": {}}

    if not isinstance(parsed, dict):
        return {"currentProfile": "default", "profiles": {}}
    return parsed


def _trim_or_none(value: Any) -> str | None:
    if not isinstance(value, str):
        return None
    trimmed = value.strip()
    return trimmed if trimmed else None


def _parse_positive_int(value: Any) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value if value > 0 else None
    if isinstance(value, str):
        try:
            parsed = int(value)
        except ValueError:
            return None
        return parsed if parsed > 0 else None
    return None
