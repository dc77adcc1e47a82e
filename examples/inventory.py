"""Print a quick inventory of search services and PostgreSQL servers.

Reads AZURE_MGMT_BEARER_TOKEN and AZURE_SUBSCRIPTION_ID from the environment,
for example after::

    export AZURE_MGMT_BEARER_TOKEN=$(az account get-access-token --query accessToken -o tsv)
    export AZURE_SUBSCRIPTION_ID=$(az account show --query id -o tsv)
"""

from __future__ import annotations

import asyncio
import logging

from azure_mgmt_rest import UnknownValue
from azure_mgmt_rest.services.postgresql import AsyncPostgreSQLManagementClient
from azure_mgmt_rest.services.search import SearchManagementClient


def _label(value: object) -> str:
    if value is None:
        return "-"
    if isinstance(value, UnknownValue):
        return f"{value.raw} (unrecognised)"
    return str(getattr(value, "value", value))


def list_search_services() -> None:
    with SearchManagementClient.from_env() as client:
        for service in client.services.list_by_subscription():
            sku = service.sku.name if service.sku else None
            status = service.properties.status if service.properties else None
            print(f"search  {service.name:<30} {_label(sku):<12} {_label(status)}")


async def list_postgres_servers() -> None:
    async with AsyncPostgreSQLManagementClient.from_env() as client:
        async for server in client.servers.list():
            version = server.properties.version if server.properties else None
            state = server.properties.state if server.properties else None
            print(f"pg      {server.name:<30} {_label(version):<12} {_label(state)}")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    list_search_services()
    asyncio.run(list_postgres_servers())
