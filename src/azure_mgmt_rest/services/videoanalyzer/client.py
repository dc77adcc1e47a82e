"""Clients for the Microsoft.Media video analyzer API."""

from __future__ import annotations

from ...client import AsyncManagementClient, ManagementClient
from .operations import (
    EdgeModulesOperations,
    LocationsOperations,
    Operations,
    VideoAnalyzersOperations,
    VideosOperations,
)

API_VERSION = "2021-11-01-preview"

_GROUPS = {
    "operations": Operations,
    "locations": LocationsOperations,
    "video_analyzers": VideoAnalyzersOperations,
    "videos": VideosOperations,
    "edge_modules": EdgeModulesOperations,
}


class VideoAnalyzerManagementClient(ManagementClient):
    api_version = API_VERSION
    operation_groups = _GROUPS

    operations: Operations
    locations: LocationsOperations
    video_analyzers: VideoAnalyzersOperations
    videos: VideosOperations
    edge_modules: EdgeModulesOperations


class AsyncVideoAnalyzerManagementClient(AsyncManagementClient):
    api_version = API_VERSION
    operation_groups = _GROUPS

    operations: Operations
    locations: LocationsOperations
    video_analyzers: VideoAnalyzersOperations
    videos: VideosOperations
    edge_modules: EdgeModulesOperations
