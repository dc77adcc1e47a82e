from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

from azure_mgmt_rest.credentials import StaticTokenCredential
from azure_mgmt_rest.open_enum import UnknownValue
from azure_mgmt_rest.response import RawResponse
from azure_mgmt_rest.services.videoanalyzer import API_VERSION, VideoAnalyzerManagementClient
from azure_mgmt_rest.services.videoanalyzer.models import (
    AccountEncryptionKeyType,
    ProvisioningState,
    PublicNetworkAccess,
    VideoAnalyzerUpdate,
    VideoType,
)
from azure_mgmt_rest.transport import HttpRequest

ACCOUNT = (
    "https://management.azure.com/subscriptions/sub-1/resourceGroups/rg"
    "/providers/Microsoft.Media/videoAnalyzers/acct"
)


@dataclass
class _Executor:
    responses: list[RawResponse]
    calls: list[HttpRequest] = field(default_factory=list)

    def send(self, request: HttpRequest) -> RawResponse:
        self.calls.append(request)
        return self.responses.pop(0)


def _client(*responses: RawResponse) -> tuple[VideoAnalyzerManagementClient, _Executor]:
    executor = _Executor(list(responses))
    client = VideoAnalyzerManagementClient(
        StaticTokenCredential("t"), subscription_id="sub-1", request_executor=executor
    )
    return client, executor


def _ok(body: Any) -> RawResponse:
    return RawResponse(200, {}, body)


def test_account_decodes_encryption_and_network_settings() -> None:
    client, executor = _client(
        _ok(
            {
                "name": "acct",
                "location": "westus2",
                "properties": {
                    "storageAccounts": [{"id": "/storage/1"}],
                    "encryption": {"type": "SystemKey"},
                    "publicNetworkAccess": "Disabled",
                    "provisioningState": "InProgress",
                },
            }
        )
    )

    account = client.video_analyzers.get("rg", "acct")

    assert account.properties.encryption.type is AccountEncryptionKeyType.SYSTEM_KEY
    assert account.properties.public_network_access is PublicNetworkAccess.DISABLED
    assert account.properties.provisioning_state is ProvisioningState.IN_PROGRESS
    assert executor.calls[0].url == f"{ACCOUNT}?api-version={API_VERSION}"


def test_account_list_is_one_page() -> None:
    client, executor = _client(_ok({"value": [{"name": "a"}, {"name": "b"}]}))

    assert [account.name for account in client.video_analyzers.list("rg")] == ["a", "b"]
    assert len(executor.calls) == 1


def test_account_update_is_acknowledged_with_accepted() -> None:
    client, executor = _client(RawResponse(202, {}, {"name": "acct", "tags": {"team": "vision"}}))

    account = client.video_analyzers.update("rg", "acct", VideoAnalyzerUpdate(tags={"team": "vision"}))

    assert account.tags == {"team": "vision"}
    assert executor.calls[0].method == "PATCH"


def test_videos_follow_odata_next_link() -> None:
    client, executor = _client(
        _ok({"value": [{"name": "cam-1", "properties": {"type": "Archive"}}], "@nextLink": f"{ACCOUNT}/videos?page=2"}),
        _ok({"value": [{"name": "clip-1", "properties": {"type": "Hologram"}}]}),
    )

    videos = list(client.videos.list("rg", "acct", top=1))

    assert [video.name for video in videos] == ["cam-1", "clip-1"]
    assert videos[0].properties.type is VideoType.ARCHIVE
    assert videos[1].properties.type == UnknownValue("Hologram")
    assert "%24top=1" in executor.calls[0].url or "$top=1" in executor.calls[0].url
    assert executor.calls[1].url == f"{ACCOUNT}/videos?page=2&api-version={API_VERSION}"


def test_video_delete_accepts_no_content() -> None:
    client, executor = _client(RawResponse(204, {}, None))

    assert client.videos.delete("rg", "acct", "cam-1").status_code == 204
    assert executor.calls[0].url.startswith(f"{ACCOUNT}/videos/cam-1?")


def test_edge_module_provisioning_token() -> None:
    client, executor = _client(_ok({"token": "abc", "expirationDate": "2030-01-01T00:00:00Z"}))
    expires = datetime(2030, 1, 1, tzinfo=timezone.utc)

    token = client.edge_modules.list_provisioning_token("rg", "acct", "edge-1", expires)

    assert token.token == "abc"
    assert token.expiration_date == expires
    assert executor.calls[0].method == "POST"
    assert executor.calls[0].url.startswith(f"{ACCOUNT}/edgeModules/edge-1/listProvisioningToken?")
    assert executor.calls[0].json_body == {"expirationDate": "2030-01-01T00:00:00Z"}


def test_edge_module_create_sends_empty_object() -> None:
    client, executor = _client(RawResponse(201, {}, {"name": "edge-1", "properties": {"edgeModuleId": "id-1"}}))

    result = client.edge_modules.create_or_update("rg", "acct", "edge-1")

    assert result.value.properties.edge_module_id == "id-1"
    assert executor.calls[0].json_body == {}
