"""Clients for the PostgreSQL flexible server management API."""

from __future__ import annotations

from ...client import AsyncManagementClient, ManagementClient
from .operations import (
    CheckNameAvailabilityOperations,
    ConfigurationsOperations,
    FirewallRulesOperations,
    ServersOperations,
)

API_VERSION = "2021-06-15-privatepreview"

_GROUPS = {
    "servers": ServersOperations,
    "firewall_rules": FirewallRulesOperations,
    "configurations": ConfigurationsOperations,
    "check_name_availability": CheckNameAvailabilityOperations,
}


class PostgreSQLManagementClient(ManagementClient):
    api_version = API_VERSION
    operation_groups = _GROUPS

    servers: ServersOperations
    firewall_rules: FirewallRulesOperations
    configurations: ConfigurationsOperations
    check_name_availability: CheckNameAvailabilityOperations


class AsyncPostgreSQLManagementClient(AsyncManagementClient):
    api_version = API_VERSION
    operation_groups = _GROUPS

    servers: ServersOperations
    firewall_rules: FirewallRulesOperations
    configurations: ConfigurationsOperations
    check_name_availability: CheckNameAvailabilityOperations
