from .client import API_VERSION, AsyncPostgreSQLManagementClient, PostgreSQLManagementClient

__all__ = ["API_VERSION", "AsyncPostgreSQLManagementClient", "PostgreSQLManagementClient"]
