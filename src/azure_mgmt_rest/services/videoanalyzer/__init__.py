from .client import API_VERSION, AsyncVideoAnalyzerManagementClient, VideoAnalyzerManagementClient

__all__ = ["API_VERSION", "AsyncVideoAnalyzerManagementClient", "VideoAnalyzerManagementClient"]
