"""Ignite: deployments, containers and gateways."""

from __future__ import annotations

from typing import Any

from pydantic import ValidationError

from .. import _endpoints as ep
from .._client import AsyncAPIClient, SyncAPIClient
from .._http import iter_coroutine
from .._ids import assert_id, validate_id
from .._utils import parse_size
from ..errors import InvalidArgumentError
from ..models import (
    Container,
    ContainerLog,
    ContainerState,
    Deployment,
    DeploymentConfig,
    Gateway,
    GatewayProtocol,
    GatewayType,
)
from ._base import _async_client, _BaseSDK, _sync_client

# The runtime needs more than 6MB of memory per container; checked here as well
# as by the API.
MIN_RAM_BYTES = 6 * 1024 * 1024


def _check_resources(config: DeploymentConfig) -> None:
    if parse_size(config.resources.ram) <= MIN_RAM_BYTES:
        raise InvalidArgumentError(
            "Allocated memory must be greater than 6MB when creating a deployment."
        )


class _BaseIgnite(_BaseSDK):
    """Async business logic for the Ignite API."""

    async def _get_deployments(self, team_id: str | None = None) -> list[Deployment]:
        data = await self._client._request(
            "GET", ep.DEPLOYMENTS_LIST, params=self._team_query(team_id)
        )
        return data.deployments

    async def _create_deployment(
        self,
        config: DeploymentConfig | dict[str, Any],
        *,
        team_id: str | None = None,
    ) -> Deployment:
        params = self._team_query(team_id)
        if not isinstance(config, DeploymentConfig):
            try:
                config = DeploymentConfig.model_validate(config)
            except ValidationError as exc:
                raise InvalidArgumentError(f"Invalid deployment config: {exc}") from exc
        _check_resources(config)

        data = await self._client._request(
            "POST", ep.DEPLOYMENTS_CREATE, params=params, body=config
        )
        return data.deployment

    async def _get_deployment(
        self, id_or_name: str, *, team_id: str | None = None
    ) -> Deployment:
        """Fetch by ID when the argument carries the deployment prefix, else by name."""
        params = self._team_query(team_id)
        if validate_id(id_or_name, "deployment"):
            data = await self._client._request(
                "GET", ep.DEPLOYMENT_GET, params={**params, "deployment_id": id_or_name}
            )
        else:
            data = await self._client._request(
                "GET", ep.DEPLOYMENT_SEARCH, params={**params, "name": id_or_name}
            )
        return data.deployment

    async def _delete_deployment(self, deployment_id: str) -> None:
        await self._client._request(
            "DELETE",
            ep.DEPLOYMENT_DELETE,
            params={"deployment_id": assert_id(deployment_id, "deployment")},
        )

    async def _get_containers(self, deployment_id: str) -> list[Container]:
        data = await self._client._request(
            "GET",
            ep.DEPLOYMENT_CONTAINERS_LIST,
            params={"deployment_id": assert_id(deployment_id, "deployment")},
        )
        return data.containers

    async def _create_container(self, deployment_id: str) -> Container:
        data = await self._client._request(
            "POST",
            ep.DEPLOYMENT_CONTAINERS_CREATE,
            params={"deployment_id": assert_id(deployment_id, "deployment")},
        )
        return data.container

    async def _delete_container(self, container_id: str) -> None:
        await self._client._request(
            "DELETE",
            ep.CONTAINER_DELETE,
            params={"container_id": assert_id(container_id, "container")},
        )

    async def _get_logs(self, container_id: str) -> list[ContainerLog]:
        data = await self._client._request(
            "GET",
            ep.CONTAINER_LOGS,
            params={"container_id": assert_id(container_id, "container")},
        )
        return data.logs

    async def _update_container_state(
        self, container_id: str, state: ContainerState | str
    ) -> None:
        await self._client._request(
            "PATCH",
            ep.CONTAINER_STATE_UPDATE,
            params={"container_id": assert_id(container_id, "container")},
            body={"state": state},
        )

    async def _get_gateways(self, deployment_id: str) -> list[Gateway]:
        data = await self._client._request(
            "GET",
            ep.DEPLOYMENT_GATEWAYS_LIST,
            params={"deployment_id": assert_id(deployment_id, "deployment")},
        )
        return data.gateways

    async def _create_gateway(
        self,
        deployment_id: str,
        type: GatewayType | str,
        protocol: GatewayProtocol | str | None = None,
        target_port: int | None = None,
        name: str | None = None,
    ) -> Gateway:
        if type == GatewayType.EXTERNAL and (protocol is None or target_port is None):
            raise InvalidArgumentError(
                "External gateways require both a protocol and a target port"
            )
        body = {
            "type": type,
            "protocol": protocol,
            "target_port": target_port,
            "name": name,
        }
        data = await self._client._request(
            "POST",
            ep.DEPLOYMENT_GATEWAYS_CREATE,
            params={"deployment_id": assert_id(deployment_id, "deployment")},
            body=body,
        )
        return data.gateway

    async def _get_gateway(self, gateway_id: str) -> Gateway:
        data = await self._client._request(
            "GET",
            ep.GATEWAY_GET,
            params={"gateway_id": assert_id(gateway_id, "gateway")},
        )
        return data.gateway

    async def _add_domain_to_gateway(self, gateway_id: str, domain: str) -> None:
        await self._client._request(
            "POST",
            ep.GATEWAY_DOMAINS_ADD,
            params={"gateway_id": assert_id(gateway_id, "gateway")},
            body={"domain": domain},
        )


class Ignite(_BaseIgnite):
    """Synchronous client for the Ignite API."""

    def __init__(
        self,
        authorization: str | None = None,
        base_url: str | None = None,
        *,
        client: SyncAPIClient | None = None,
    ):
        self._client = _sync_client(authorization, base_url, client)

    def get_deployments(self, team_id: str | None = None) -> list[Deployment]:
        """List deployments. ``team_id`` is required for bearer/PAT, forbidden for keys."""
        return iter_coroutine(self._get_deployments(team_id))

    def create_deployment(
        self,
        config: DeploymentConfig | dict[str, Any],
        *,
        team_id: str | None = None,
    ) -> Deployment:
        """Create a deployment."""
        return iter_coroutine(self._create_deployment(config, team_id=team_id))

    def get_deployment(self, id_or_name: str, *, team_id: str | None = None) -> Deployment:
        """Get a deployment by ID or by name."""
        return iter_coroutine(self._get_deployment(id_or_name, team_id=team_id))

    def delete_deployment(self, deployment_id: str) -> None:
        iter_coroutine(self._delete_deployment(deployment_id))

    def get_containers(self, deployment_id: str) -> list[Container]:
        return iter_coroutine(self._get_containers(deployment_id))

    def create_container(self, deployment_id: str) -> Container:
        return iter_coroutine(self._create_container(deployment_id))

    def delete_container(self, container_id: str) -> None:
        iter_coroutine(self._delete_container(container_id))

    def get_logs(self, container_id: str) -> list[ContainerLog]:
        return iter_coroutine(self._get_logs(container_id))

    def update_container_state(self, container_id: str, state: ContainerState | str) -> None:
        iter_coroutine(self._update_container_state(container_id, state))

    def stop_container(self, container_id: str) -> None:
        """Ask the API to stop a container. Does not wait for it to stop."""
        self.update_container_state(container_id, ContainerState.STOPPED)

    def start_container(self, container_id: str) -> None:
        """Ask the API to start a container. Does not wait for it to start."""
        self.update_container_state(container_id, ContainerState.RUNNING)

    def get_gateways(self, deployment_id: str) -> list[Gateway]:
        return iter_coroutine(self._get_gateways(deployment_id))

    def create_gateway(
        self,
        deployment_id: str,
        type: GatewayType | str,
        protocol: GatewayProtocol | str | None = None,
        target_port: int | None = None,
        name: str | None = None,
    ) -> Gateway:
        return iter_coroutine(
            self._create_gateway(deployment_id, type, protocol, target_port, name)
        )

    def get_gateway(self, gateway_id: str) -> Gateway:
        return iter_coroutine(self._get_gateway(gateway_id))

    def add_domain_to_gateway(self, gateway_id: str, domain: str) -> None:
        iter_coroutine(self._add_domain_to_gateway(gateway_id, domain))


class AsyncIgnite(_BaseIgnite):
    """Asynchronous client for the Ignite API."""

    def __init__(
        self,
        authorization: str | None = None,
        base_url: str | None = None,
        *,
        client: AsyncAPIClient | None = None,
    ):
        self._client = _async_client(authorization, base_url, client)

    async def get_deployments(self, team_id: str | None = None) -> list[Deployment]:
        """List deployments. ``team_id`` is required for bearer/PAT, forbidden for keys."""
        return await self._get_deployments(team_id)

    async def create_deployment(
        self,
        config: DeploymentConfig | dict[str, Any],
        *,
        team_id: str | None = None,
    ) -> Deployment:
        """Create a deployment."""
        return await self._create_deployment(config, team_id=team_id)

    async def get_deployment(
        self, id_or_name: str, *, team_id: str | None = None
    ) -> Deployment:
        """Get a deployment by ID or by name."""
        return await self._get_deployment(id_or_name, team_id=team_id)

    async def delete_deployment(self, deployment_id: str) -> None:
        await self._delete_deployment(deployment_id)

    async def get_containers(self, deployment_id: str) -> list[Container]:
        return await self._get_containers(deployment_id)

    async def create_container(self, deployment_id: str) -> Container:
        return await self._create_container(deployment_id)

    async def delete_container(self, container_id: str) -> None:
        await self._delete_container(container_id)

    async def get_logs(self, container_id: str) -> list[ContainerLog]:
        return await self._get_logs(container_id)

    async def update_container_state(
        self, container_id: str, state: ContainerState | str
    ) -> None:
        await self._update_container_state(container_id, state)

    async def stop_container(self, container_id: str) -> None:
        """Ask the API to stop a container. Does not wait for it to stop."""
        await self.update_container_state(container_id, ContainerState.STOPPED)

    async def start_container(self, container_id: str) -> None:
        """Ask the API to start a container. Does not wait for it to start."""
        await self.update_container_state(container_id, ContainerState.RUNNING)

    async def get_gateways(self, deployment_id: str) -> list[Gateway]:
        return await self._get_gateways(deployment_id)

    async def create_gateway(
        self,
        deployment_id: str,
        type: GatewayType | str,
        protocol: GatewayProtocol | str | None = None,
        target_port: int | None = None,
        name: str | None = None,
    ) -> Gateway:
        return await self._create_gateway(deployment_id, type, protocol, target_port, name)

    async def get_gateway(self, gateway_id: str) -> Gateway:
        return await self._get_gateway(gateway_id)

    async def add_domain_to_gateway(self, gateway_id: str, domain: str) -> None:
        await self._add_domain_to_gateway(gateway_id, domain)


__all__ = ["Ignite", "AsyncIgnite", "MIN_RAM_BYTES"]
