"""Operation groups for Microsoft.Media video analyzers."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from ...models import CheckNameAvailabilityRequest, CheckNameAvailabilityResponse, Operation, SinglePageResult
from ...operations import OperationGroup
from .models import (
    EdgeModuleEntity,
    EdgeModuleEntityCollection,
    EdgeModuleProvisioningToken,
    ListProvisioningTokenInput,
    VideoAnalyzer,
    VideoAnalyzerCollection,
    VideoAnalyzerUpdate,
    VideoContentToken,
    VideoEntity,
    VideoEntityCollection,
)

_SUBSCRIPTION = "/subscriptions/{subscriptionId}"
_PROVIDER = "/providers/Microsoft.Media"
_ACCOUNTS = _SUBSCRIPTION + "/resourceGroups/{resourceGroupName}" + _PROVIDER + "/videoAnalyzers"
_ACCOUNT = _ACCOUNTS + "/{accountName}"
_VIDEO = _ACCOUNT + "/videos/{videoName}"
_EDGE_MODULE = _ACCOUNT + "/edgeModules/{edgeModuleName}"

_OperationCollection = SinglePageResult[Operation]


class _AccountGroup(OperationGroup):
    def _params(self, subscription_id: str | None, resource_group_name: str, **names: str) -> dict[str, str]:
        return {
            "subscriptionId": self._subscription_id(subscription_id),
            "resourceGroupName": resource_group_name,
            **names,
        }


class Operations(OperationGroup):
    def list(self) -> Any:
        request = self._request(
            "videoanalyzer.operations.list",
            "GET",
            _PROVIDER + "/operations",
            responses={200: _OperationCollection},
        )
        return self._paged(request, _OperationCollection)


class LocationsOperations(OperationGroup):
    def check_name_availability(
        self, location_name: str, name: str, *, subscription_id: str | None = None
    ) -> Any:
        request = self._request(
            "videoanalyzer.locations.check_name_availability",
            "POST",
            _SUBSCRIPTION + _PROVIDER + "/locations/{locationName}/checkNameAvailability",
            path_params={"subscriptionId": self._subscription_id(subscription_id), "locationName": location_name},
            body=CheckNameAvailabilityRequest(name=name, type="Microsoft.Media/VideoAnalyzers"),
            responses={200: CheckNameAvailabilityResponse},
        )
        return self._execute(request)


class VideoAnalyzersOperations(_AccountGroup):
    def list(self, resource_group_name: str, *, subscription_id: str | None = None) -> Any:
        """Accounts in a resource group; the service returns them as one page."""
        request = self._request(
            "videoanalyzer.video_analyzers.list",
            "GET",
            _ACCOUNTS,
            path_params=self._params(subscription_id, resource_group_name),
            responses={200: VideoAnalyzerCollection},
        )
        return self._paged(request, VideoAnalyzerCollection)

    def list_by_subscription(self, *, subscription_id: str | None = None) -> Any:
        request = self._request(
            "videoanalyzer.video_analyzers.list_by_subscription",
            "GET",
            _SUBSCRIPTION + _PROVIDER + "/videoAnalyzers",
            path_params={"subscriptionId": self._subscription_id(subscription_id)},
            responses={200: VideoAnalyzerCollection},
        )
        return self._paged(request, VideoAnalyzerCollection)

    def get(self, resource_group_name: str, account_name: str, *, subscription_id: str | None = None) -> Any:
        request = self._request(
            "videoanalyzer.video_analyzers.get",
            "GET",
            _ACCOUNT,
            path_params=self._params(subscription_id, resource_group_name, accountName=account_name),
            responses={200: VideoAnalyzer},
        )
        return self._execute(request)

    def create_or_update(
        self,
        resource_group_name: str,
        account_name: str,
        parameters: VideoAnalyzer,
        *,
        subscription_id: str | None = None,
    ) -> Any:
        request = self._request(
            "videoanalyzer.video_analyzers.create_or_update",
            "PUT",
            _ACCOUNT,
            path_params=self._params(subscription_id, resource_group_name, accountName=account_name),
            body=parameters,
            responses={200: VideoAnalyzer, 201: VideoAnalyzer},
        )
        return self._execute(request)

    def update(
        self,
        resource_group_name: str,
        account_name: str,
        parameters: VideoAnalyzerUpdate,
        *,
        subscription_id: str | None = None,
    ) -> Any:
        # The service acknowledges account updates with 202 and the pending resource.
        request = self._request(
            "videoanalyzer.video_analyzers.update",
            "PATCH",
            _ACCOUNT,
            path_params=self._params(subscription_id, resource_group_name, accountName=account_name),
            body=parameters,
            responses={202: VideoAnalyzer},
        )
        return self._execute(request)

    def delete(self, resource_group_name: str, account_name: str, *, subscription_id: str | None = None) -> Any:
        request = self._request(
            "videoanalyzer.video_analyzers.delete",
            "DELETE",
            _ACCOUNT,
            path_params=self._params(subscription_id, resource_group_name, accountName=account_name),
            responses={200: None, 204: None},
        )
        return self._execute(request)


class VideosOperations(_AccountGroup):
    def _video_params(
        self, subscription_id: str | None, resource_group_name: str, account_name: str, video_name: str
    ) -> dict[str, str]:
        return self._params(subscription_id, resource_group_name, accountName=account_name, videoName=video_name)

    def list(
        self, resource_group_name: str, account_name: str, *, top: int | None = None, subscription_id: str | None = None
    ) -> Any:
        request = self._request(
            "videoanalyzer.videos.list",
            "GET",
            _ACCOUNT + "/videos",
            path_params=self._params(subscription_id, resource_group_name, accountName=account_name),
            query={"$top": top},
            responses={200: VideoEntityCollection},
        )
        return self._paged(request, VideoEntityCollection)

    def get(
        self, resource_group_name: str, account_name: str, video_name: str, *, subscription_id: str | None = None
    ) -> Any:
        request = self._request(
            "videoanalyzer.videos.get",
            "GET",
            _VIDEO,
            path_params=self._video_params(subscription_id, resource_group_name, account_name, video_name),
            responses={200: VideoEntity},
        )
        return self._execute(request)

    def create_or_update(
        self,
        resource_group_name: str,
        account_name: str,
        video_name: str,
        parameters: VideoEntity,
        *,
        subscription_id: str | None = None,
    ) -> Any:
        request = self._request(
            "videoanalyzer.videos.create_or_update",
            "PUT",
            _VIDEO,
            path_params=self._video_params(subscription_id, resource_group_name, account_name, video_name),
            body=parameters,
            responses={200: VideoEntity, 201: VideoEntity},
        )
        return self._execute(request)

    def update(
        self,
        resource_group_name: str,
        account_name: str,
        video_name: str,
        parameters: VideoEntity,
        *,
        subscription_id: str | None = None,
    ) -> Any:
        request = self._request(
            "videoanalyzer.videos.update",
            "PATCH",
            _VIDEO,
            path_params=self._video_params(subscription_id, resource_group_name, account_name, video_name),
            body=parameters,
            responses={200: VideoEntity},
        )
        return self._execute(request)

    def delete(
        self, resource_group_name: str, account_name: str, video_name: str, *, subscription_id: str | None = None
    ) -> Any:
        request = self._request(
            "videoanalyzer.videos.delete",
            "DELETE",
            _VIDEO,
            path_params=self._video_params(subscription_id, resource_group_name, account_name, video_name),
            responses={200: None, 204: None},
        )
        return self._execute(request)

    def list_content_token(
        self, resource_group_name: str, account_name: str, video_name: str, *, subscription_id: str | None = None
    ) -> Any:
        request = self._request(
            "videoanalyzer.videos.list_content_token",
            "POST",
            _VIDEO + "/listContentToken",
            path_params=self._video_params(subscription_id, resource_group_name, account_name, video_name),
            responses={200: VideoContentToken},
        )
        return self._execute(request)


class EdgeModulesOperations(_AccountGroup):
    def _module_params(
        self, subscription_id: str | None, resource_group_name: str, account_name: str, edge_module_name: str
    ) -> dict[str, str]:
        return self._params(
            subscription_id, resource_group_name, accountName=account_name, edgeModuleName=edge_module_name
        )

    def list(
        self, resource_group_name: str, account_name: str, *, top: int | None = None, subscription_id: str | None = None
    ) -> Any:
        request = self._request(
            "videoanalyzer.edge_modules.list",
            "GET",
            _ACCOUNT + "/edgeModules",
            path_params=self._params(subscription_id, resource_group_name, accountName=account_name),
            query={"$top": top},
            responses={200: EdgeModuleEntityCollection},
        )
        return self._paged(request, EdgeModuleEntityCollection)

    def get(
        self, resource_group_name: str, account_name: str, edge_module_name: str, *, subscription_id: str | None = None
    ) -> Any:
        request = self._request(
            "videoanalyzer.edge_modules.get",
            "GET",
            _EDGE_MODULE,
            path_params=self._module_params(subscription_id, resource_group_name, account_name, edge_module_name),
            responses={200: EdgeModuleEntity},
        )
        return self._execute(request)

    def create_or_update(
        self,
        resource_group_name: str,
        account_name: str,
        edge_module_name: str,
        parameters: EdgeModuleEntity | None = None,
        *,
        subscription_id: str | None = None,
    ) -> Any:
        request = self._request(
            "videoanalyzer.edge_modules.create_or_update",
            "PUT",
            _EDGE_MODULE,
            path_params=self._module_params(subscription_id, resource_group_name, account_name, edge_module_name),
            body=parameters if parameters is not None else EdgeModuleEntity(),
            responses={200: EdgeModuleEntity, 201: EdgeModuleEntity},
        )
        return self._execute(request)

    def delete(
        self, resource_group_name: str, account_name: str, edge_module_name: str, *, subscription_id: str | None = None
    ) -> Any:
        request = self._request(
            "videoanalyzer.edge_modules.delete",
            "DELETE",
            _EDGE_MODULE,
            path_params=self._module_params(subscription_id, resource_group_name, account_name, edge_module_name),
            responses={200: None, 204: None},
        )
        return self._execute(request)

    def list_provisioning_token(
        self,
        resource_group_name: str,
        account_name: str,
        edge_module_name: str,
        expiration_date: datetime,
        *,
        subscription_id: str | None = None,
    ) -> Any:
        """Issue a token the edge module uses to register itself with the account."""
        request = self._request(
            "videoanalyzer.edge_modules.list_provisioning_token",
            "POST",
            _EDGE_MODULE + "/listProvisioningToken",
            path_params=self._module_params(subscription_id, resource_group_name, account_name, edge_module_name),
            body=ListProvisioningTokenInput(expiration_date=expiration_date),
            responses={200: EdgeModuleProvisioningToken},
        )
        return self._execute(request)
