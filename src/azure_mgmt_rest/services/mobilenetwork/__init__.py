from .client import API_VERSION, AsyncMobileNetworkManagementClient, MobileNetworkManagementClient

__all__ = ["API_VERSION", "AsyncMobileNetworkManagementClient", "MobileNetworkManagementClient"]
