from .client import API_VERSION, AsyncSearchManagementClient, SearchManagementClient

__all__ = ["API_VERSION", "AsyncSearchManagementClient", "SearchManagementClient"]
