"""
Integration tests for the Ignite SDK, sync and async.

These cover the client-side checks that must fail before any request is sent
(credential scope, identifier shape, memory floor) and the request each call
produces.
"""

import json

import httpx
import pytest
import respx

from hop import InvalidArgumentError, InvalidIdentifierError
from hop.models import ContainerState, DeploymentConfig
from hop.sdks import AsyncIgnite, Ignite
from hop.sdks.ignite import MIN_RAM_BYTES

IGNITE = "https://api.hop.io/v1/ignite"


def _ok(data: dict) -> dict:
    return {"success": True, "data": data}


@pytest.fixture
def deployments_mock(deployment_payload):
    with respx.mock(assert_all_called=False) as mock:
        mock.get(f"{IGNITE}/deployments").mock(
            return_value=httpx.Response(200, json=_ok({"deployments": [deployment_payload]}))
        )
        mock.post(f"{IGNITE}/deployments", name="create").mock(
            return_value=httpx.Response(200, json=_ok({"deployment": deployment_payload}))
        )
        mock.get(f"{IGNITE}/deployments/search", name="search").mock(
            return_value=httpx.Response(200, json=_ok({"deployment": deployment_payload}))
        )
        mock.get(f"{IGNITE}/deployments/deployment_abc123", name="by_id").mock(
            return_value=httpx.Response(200, json=_ok({"deployment": deployment_payload}))
        )
        yield mock


class TestTeamScope:
    def test_bearer_requires_team(self, deployments_mock, bearer_token, deployment_config):
        ignite = Ignite(bearer_token)

        with pytest.raises(InvalidArgumentError, match="Team ID is required"):
            ignite.create_deployment(deployment_config)

        assert not deployments_mock["create"].called

    def test_pat_requires_team(self, deployments_mock, pat_token):
        with pytest.raises(InvalidArgumentError, match="Team ID is required"):
            Ignite(pat_token).get_deployments()

    def test_secret_key_forbids_team(
        self, deployments_mock, secret_key, team_id, deployment_config
    ):
        ignite = Ignite(secret_key)

        with pytest.raises(InvalidArgumentError, match="must not be provided"):
            ignite.create_deployment(deployment_config, team_id=team_id)

        assert not deployments_mock["create"].called

    def test_team_must_be_a_team_id(self, deployments_mock, bearer_token):
        with pytest.raises(InvalidIdentifierError):
            Ignite(bearer_token).get_deployments("project_abc")

    def test_bearer_with_team(self, deployments_mock, bearer_token, team_id, deployment_config):
        deployment = Ignite(bearer_token).create_deployment(deployment_config, team_id=team_id)

        assert deployment.id == "deployment_abc123"
        request = deployments_mock["create"].calls.last.request
        assert request.url.params["team"] == team_id
        assert json.loads(request.content) == deployment_config

    def test_secret_key_without_team(self, deployments_mock, secret_key, deployment_config):
        Ignite(secret_key).create_deployment(DeploymentConfig.model_validate(deployment_config))

        request = deployments_mock["create"].calls.last.request
        assert "team" not in request.url.params

    def test_get_deployments(self, deployments_mock, secret_key):
        deployments = Ignite(secret_key).get_deployments()

        assert [d.name for d in deployments] == ["my-app"]


class TestMemoryFloor:
    def _config(self, deployment_config: dict, ram) -> dict:
        return {**deployment_config, "resources": {"vcpu": 0.5, "ram": ram}}

    @pytest.mark.parametrize("ram", [MIN_RAM_BYTES, "6mb", f"{MIN_RAM_BYTES}b", "1kb"])
    def test_at_or_below_floor_raises(self, deployments_mock, secret_key, deployment_config, ram):
        with pytest.raises(InvalidArgumentError, match="greater than 6MB"):
            Ignite(secret_key).create_deployment(self._config(deployment_config, ram))

        assert not deployments_mock["create"].called

    @pytest.mark.parametrize("ram", [MIN_RAM_BYTES + 1, f"{MIN_RAM_BYTES + 1}b", "7mb"])
    def test_above_floor_is_sent(self, deployments_mock, secret_key, deployment_config, ram):
        Ignite(secret_key).create_deployment(self._config(deployment_config, ram))

        assert deployments_mock["create"].called

    def test_invalid_config(self, deployments_mock, secret_key):
        with pytest.raises(InvalidArgumentError, match="Invalid deployment config"):
            Ignite(secret_key).create_deployment({"name": "x"})


class TestGetDeployment:
    def test_id_uses_direct_lookup(self, deployments_mock, bearer_token, team_id):
        Ignite(bearer_token).get_deployment("deployment_abc123", team_id=team_id)

        assert deployments_mock["by_id"].called
        assert not deployments_mock["search"].called
        assert deployments_mock["by_id"].calls.last.request.url.params["team"] == team_id

    def test_name_uses_search(self, deployments_mock, bearer_token, team_id):
        Ignite(bearer_token).get_deployment("my-app-name", team_id=team_id)

        assert deployments_mock["search"].called
        assert not deployments_mock["by_id"].called
        params = deployments_mock["search"].calls.last.request.url.params
        assert params["name"] == "my-app-name"
        assert params["team"] == team_id

    def test_id_shaped_name_is_never_searched(self, deployments_mock, secret_key):
        # A deployment literally named "deployment_abc123" cannot be found by name.
        Ignite(secret_key).get_deployment("deployment_abc123")

        assert deployments_mock["by_id"].called
        assert not deployments_mock["search"].called


class TestContainers:
    @pytest.fixture
    def containers_mock(self):
        with respx.mock(assert_all_called=False) as mock:
            mock.patch(f"{IGNITE}/containers/container_1/state", name="state").mock(
                return_value=httpx.Response(204)
            )
            mock.post(f"{IGNITE}/deployments/deployment_1/containers", name="create").mock(
                return_value=httpx.Response(
                    200, json=_ok({"container": {"id": "container_1", "state": "pending"}})
                )
            )
            mock.get(f"{IGNITE}/containers/container_1/logs", name="logs").mock(
                return_value=httpx.Response(
                    200,
                    json=_ok(
                        {
                            "logs": [
                                {"timestamp": "2022-06-01T12:00:00Z", "message": "listening"}
                            ]
                        }
                    ),
                )
            )
            mock.delete(f"{IGNITE}/containers/container_1", name="delete").mock(
                return_value=httpx.Response(204)
            )
            yield mock

    def test_stop(self, containers_mock, secret_key):
        assert Ignite(secret_key).stop_container("container_1") is None

        request = containers_mock["state"].calls.last.request
        assert json.loads(request.content) == {"state": "stopped"}

    def test_start(self, containers_mock, secret_key):
        Ignite(secret_key).start_container("container_1")

        request = containers_mock["state"].calls.last.request
        assert json.loads(request.content) == {"state": "running"}

    def test_each_call_sends_one_request(self, containers_mock, secret_key):
        ignite = Ignite(secret_key)
        ignite.stop_container("container_1")
        ignite.stop_container("container_1")

        assert containers_mock["state"].call_count == 2

    def test_invalid_state(self, containers_mock, secret_key):
        with pytest.raises(InvalidArgumentError):
            Ignite(secret_key).update_container_state("container_1", "paused")

        assert not containers_mock["state"].called

    def test_container_id_is_checked(self, containers_mock, secret_key):
        with pytest.raises(InvalidIdentifierError):
            Ignite(secret_key).stop_container("deployment_1")

    def test_create_container(self, containers_mock, secret_key):
        container = Ignite(secret_key).create_container("deployment_1")

        assert container.id == "container_1"
        assert container.state == ContainerState.PENDING

    def test_get_logs(self, containers_mock, secret_key):
        logs = Ignite(secret_key).get_logs("container_1")

        assert logs[0].message == "listening"

    def test_delete_container(self, containers_mock, secret_key):
        Ignite(secret_key).delete_container("container_1")

        assert containers_mock["delete"].called


class TestGateways:
    @pytest.fixture
    def gateways_mock(self):
        gateway = {
            "id": "gateway_1",
            "type": "external",
            "protocol": "http",
            "target_port": 8080,
            "deployment_id": "deployment_1",
            "hopsh_domain": "my-app.hop.sh",
        }
        with respx.mock(assert_all_called=False) as mock:
            mock.post(f"{IGNITE}/deployments/deployment_1/gateways", name="create").mock(
                return_value=httpx.Response(200, json=_ok({"gateway": gateway}))
            )
            mock.get(f"{IGNITE}/deployments/deployment_1/gateways", name="list").mock(
                return_value=httpx.Response(200, json=_ok({"gateways": [gateway]}))
            )
            mock.get(f"{IGNITE}/gateways/gateway_1", name="get").mock(
                return_value=httpx.Response(200, json=_ok({"gateway": gateway}))
            )
            mock.post(f"{IGNITE}/gateways/gateway_1/domains", name="domain").mock(
                return_value=httpx.Response(204)
            )
            yield mock

    def test_create_external(self, gateways_mock, secret_key):
        gateway = Ignite(secret_key).create_gateway("deployment_1", "external", "http", 8080)

        assert gateway.hopsh_domain == "my-app.hop.sh"
        assert json.loads(gateways_mock["create"].calls.last.request.content) == {
            "type": "external",
            "protocol": "http",
            "target_port": 8080,
        }

    def test_external_requires_port(self, gateways_mock, secret_key):
        with pytest.raises(InvalidArgumentError, match="target port"):
            Ignite(secret_key).create_gateway("deployment_1", "external")

        assert not gateways_mock["create"].called

    def test_create_internal(self, gateways_mock, secret_key):
        Ignite(secret_key).create_gateway("deployment_1", "internal", name="db")

        assert json.loads(gateways_mock["create"].calls.last.request.content) == {
            "type": "internal",
            "name": "db",
        }

    def test_get_and_list(self, gateways_mock, secret_key):
        ignite = Ignite(secret_key)

        assert ignite.get_gateway("gateway_1").id == "gateway_1"
        assert [g.id for g in ignite.get_gateways("deployment_1")] == ["gateway_1"]

    def test_add_domain(self, gateways_mock, secret_key):
        Ignite(secret_key).add_domain_to_gateway("gateway_1", "example.com")

        assert json.loads(gateways_mock["domain"].calls.last.request.content) == {
            "domain": "example.com"
        }


class TestAsyncIgnite:
    @pytest.mark.asyncio
    async def test_create_deployment(
        self, deployments_mock, bearer_token, team_id, deployment_config
    ):
        deployment = await AsyncIgnite(bearer_token).create_deployment(
            deployment_config, team_id=team_id
        )

        assert deployment.name == "my-app"
        assert deployments_mock["create"].calls.last.request.url.params["team"] == team_id

    @pytest.mark.asyncio
    async def test_scope_checked_before_dispatch(
        self, deployments_mock, secret_key, team_id, deployment_config
    ):
        with pytest.raises(InvalidArgumentError):
            await AsyncIgnite(secret_key).create_deployment(deployment_config, team_id=team_id)

        assert not deployments_mock["create"].called

    @pytest.mark.asyncio
    async def test_memory_floor(self, deployments_mock, secret_key, deployment_config):
        config = {**deployment_config, "resources": {"vcpu": 1, "ram": MIN_RAM_BYTES}}

        with pytest.raises(InvalidArgumentError):
            await AsyncIgnite(secret_key).create_deployment(config)

    @pytest.mark.asyncio
    async def test_dual_mode_lookup(self, deployments_mock, secret_key):
        ignite = AsyncIgnite(secret_key)

        await ignite.get_deployment("my-app-name")
        assert deployments_mock["search"].called
        assert not deployments_mock["by_id"].called

        await ignite.get_deployment("deployment_abc123")
        assert deployments_mock["by_id"].called

    @pytest.mark.asyncio
    async def test_stop_container(self, secret_key):
        with respx.mock() as mock:
            route = mock.patch(f"{IGNITE}/containers/container_9/state").mock(
                return_value=httpx.Response(204)
            )
            await AsyncIgnite(secret_key).stop_container("container_9")

        assert json.loads(route.calls.last.request.content) == {"state": "stopped"}
