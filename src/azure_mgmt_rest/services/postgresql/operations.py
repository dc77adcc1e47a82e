"""Operation groups for Microsoft.DBforPostgreSQL flexible servers."""

from __future__ import annotations

from typing import Any

from ...operations import OperationGroup
from .models import (
    Configuration,
    ConfigurationListResult,
    FirewallRule,
    FirewallRuleListResult,
    NameAvailability,
    NameAvailabilityRequest,
    RestartParameter,
    Server,
    ServerForUpdate,
    ServerListResult,
)

_SUBSCRIPTION = "/subscriptions/{subscriptionId}"
_PROVIDER = "/providers/Microsoft.DBforPostgreSQL"
_SERVERS = _SUBSCRIPTION + "/resourceGroups/{resourceGroupName}" + _PROVIDER + "/flexibleServers"
_SERVER = _SERVERS + "/{serverName}"


class _ServerScopedGroup(OperationGroup):
    def _server_params(self, resource_group_name: str, server_name: str, subscription_id: str | None) -> dict[str, str]:
        return {
            "subscriptionId": self._subscription_id(subscription_id),
            "resourceGroupName": resource_group_name,
            "serverName": server_name,
        }


class ServersOperations(_ServerScopedGroup):
    def get(self, resource_group_name: str, server_name: str, *, subscription_id: str | None = None) -> Any:
        request = self._request(
            "postgresql.servers.get",
            "GET",
            _SERVER,
            path_params=self._server_params(resource_group_name, server_name, subscription_id),
            responses={200: Server},
        )
        return self._execute(request)

    def create(
        self, resource_group_name: str, server_name: str, server: Server, *, subscription_id: str | None = None
    ) -> Any:
        request = self._request(
            "postgresql.servers.create",
            "PUT",
            _SERVER,
            path_params=self._server_params(resource_group_name, server_name, subscription_id),
            body=server,
            responses={200: Server, 201: Server, 202: None},
        )
        return self._execute(request)

    def update(
        self,
        resource_group_name: str,
        server_name: str,
        parameters: ServerForUpdate,
        *,
        subscription_id: str | None = None,
    ) -> Any:
        request = self._request(
            "postgresql.servers.update",
            "PATCH",
            _SERVER,
            path_params=self._server_params(resource_group_name, server_name, subscription_id),
            body=parameters,
            responses={200: Server, 202: None},
        )
        return self._execute(request)

    def delete(self, resource_group_name: str, server_name: str, *, subscription_id: str | None = None) -> Any:
        request = self._request(
            "postgresql.servers.delete",
            "DELETE",
            _SERVER,
            path_params=self._server_params(resource_group_name, server_name, subscription_id),
            responses={200: None, 202: None, 204: None},
        )
        return self._execute(request)

    def list_by_resource_group(self, resource_group_name: str, *, subscription_id: str | None = None) -> Any:
        request = self._request(
            "postgresql.servers.list_by_resource_group",
            "GET",
            _SERVERS,
            path_params={
                "subscriptionId": self._subscription_id(subscription_id),
                "resourceGroupName": resource_group_name,
            },
            responses={200: ServerListResult},
        )
        return self._paged(request, ServerListResult)

    def list(self, *, subscription_id: str | None = None) -> Any:
        request = self._request(
            "postgresql.servers.list",
            "GET",
            _SUBSCRIPTION + _PROVIDER + "/flexibleServers",
            path_params={"subscriptionId": self._subscription_id(subscription_id)},
            responses={200: ServerListResult},
        )
        return self._paged(request, ServerListResult)

    def restart(
        self,
        resource_group_name: str,
        server_name: str,
        parameters: RestartParameter | None = None,
        *,
        subscription_id: str | None = None,
    ) -> Any:
        request = self._request(
            "postgresql.servers.restart",
            "POST",
            _SERVER + "/restart",
            path_params=self._server_params(resource_group_name, server_name, subscription_id),
            body=parameters,
            responses={200: None, 202: None},
        )
        return self._execute(request)

    def start(self, resource_group_name: str, server_name: str, *, subscription_id: str | None = None) -> Any:
        request = self._request(
            "postgresql.servers.start",
            "POST",
            _SERVER + "/start",
            path_params=self._server_params(resource_group_name, server_name, subscription_id),
            responses={200: None, 202: None},
        )
        return self._execute(request)

    def stop(self, resource_group_name: str, server_name: str, *, subscription_id: str | None = None) -> Any:
        request = self._request(
            "postgresql.servers.stop",
            "POST",
            _SERVER + "/stop",
            path_params=self._server_params(resource_group_name, server_name, subscription_id),
            responses={200: None, 202: None},
        )
        return self._execute(request)


class FirewallRulesOperations(_ServerScopedGroup):
    _PATH = _SERVER + "/firewallRules/{firewallRuleName}"

    def _rule_params(
        self, resource_group_name: str, server_name: str, firewall_rule_name: str, subscription_id: str | None
    ) -> dict[str, str]:
        params = self._server_params(resource_group_name, server_name, subscription_id)
        params["firewallRuleName"] = firewall_rule_name
        return params

    def get(
        self, resource_group_name: str, server_name: str, firewall_rule_name: str, *, subscription_id: str | None = None
    ) -> Any:
        request = self._request(
            "postgresql.firewall_rules.get",
            "GET",
            self._PATH,
            path_params=self._rule_params(resource_group_name, server_name, firewall_rule_name, subscription_id),
            responses={200: FirewallRule},
        )
        return self._execute(request)

    def create_or_update(
        self,
        resource_group_name: str,
        server_name: str,
        firewall_rule_name: str,
        rule: FirewallRule,
        *,
        subscription_id: str | None = None,
    ) -> Any:
        request = self._request(
            "postgresql.firewall_rules.create_or_update",
            "PUT",
            self._PATH,
            path_params=self._rule_params(resource_group_name, server_name, firewall_rule_name, subscription_id),
            body=rule,
            responses={200: FirewallRule, 201: FirewallRule, 202: None},
        )
        return self._execute(request)

    def delete(
        self, resource_group_name: str, server_name: str, firewall_rule_name: str, *, subscription_id: str | None = None
    ) -> Any:
        request = self._request(
            "postgresql.firewall_rules.delete",
            "DELETE",
            self._PATH,
            path_params=self._rule_params(resource_group_name, server_name, firewall_rule_name, subscription_id),
            responses={200: None, 202: None, 204: None},
        )
        return self._execute(request)

    def list_by_server(self, resource_group_name: str, server_name: str, *, subscription_id: str | None = None) -> Any:
        request = self._request(
            "postgresql.firewall_rules.list_by_server",
            "GET",
            _SERVER + "/firewallRules",
            path_params=self._server_params(resource_group_name, server_name, subscription_id),
            responses={200: FirewallRuleListResult},
        )
        return self._paged(request, FirewallRuleListResult)


class ConfigurationsOperations(_ServerScopedGroup):
    _PATH = _SERVER + "/configurations/{configurationName}"

    def _configuration_params(
        self, resource_group_name: str, server_name: str, configuration_name: str, subscription_id: str | None
    ) -> dict[str, str]:
        params = self._server_params(resource_group_name, server_name, subscription_id)
        params["configurationName"] = configuration_name
        return params

    def list_by_server(self, resource_group_name: str, server_name: str, *, subscription_id: str | None = None) -> Any:
        request = self._request(
            "postgresql.configurations.list_by_server",
            "GET",
            _SERVER + "/configurations",
            path_params=self._server_params(resource_group_name, server_name, subscription_id),
            responses={200: ConfigurationListResult},
        )
        return self._paged(request, ConfigurationListResult)

    def get(
        self, resource_group_name: str, server_name: str, configuration_name: str, *, subscription_id: str | None = None
    ) -> Any:
        request = self._request(
            "postgresql.configurations.get",
            "GET",
            self._PATH,
            path_params=self._configuration_params(
                resource_group_name, server_name, configuration_name, subscription_id
            ),
            responses={200: Configuration},
        )
        return self._execute(request)

    def put(
        self,
        resource_group_name: str,
        server_name: str,
        configuration_name: str,
        configuration: Configuration,
        *,
        subscription_id: str | None = None,
    ) -> Any:
        request = self._request(
            "postgresql.configurations.put",
            "PUT",
            self._PATH,
            path_params=self._configuration_params(
                resource_group_name, server_name, configuration_name, subscription_id
            ),
            body=configuration,
            responses={200: Configuration, 202: None},
        )
        return self._execute(request)

    def update(
        self,
        resource_group_name: str,
        server_name: str,
        configuration_name: str,
        configuration: Configuration,
        *,
        subscription_id: str | None = None,
    ) -> Any:
        request = self._request(
            "postgresql.configurations.update",
            "PATCH",
            self._PATH,
            path_params=self._configuration_params(
                resource_group_name, server_name, configuration_name, subscription_id
            ),
            body=configuration,
            responses={200: Configuration, 202: None},
        )
        return self._execute(request)


class CheckNameAvailabilityOperations(OperationGroup):
    def execute(
        self,
        name: str,
        *,
        resource_type: str = "Microsoft.DBforPostgreSQL/flexibleServers",
        subscription_id: str | None = None,
    ) -> Any:
        request = self._request(
            "postgresql.check_name_availability.execute",
            "POST",
            _SUBSCRIPTION + _PROVIDER + "/checkNameAvailability",
            path_params={"subscriptionId": self._subscription_id(subscription_id)},
            body=NameAvailabilityRequest(name=name, type=resource_type),
            responses={200: NameAvailability},
        )
        return self._execute(request)
