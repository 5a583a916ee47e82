"""Hop API clients with namespaced sub-clients."""

from __future__ import annotations

from types import SimpleNamespace
from typing import Any

from ._auth import AuthType
from ._client import AsyncAPIClient, SyncAPIClient
from ._http import DEFAULT_TIMEOUT
from .sdks import (
    AsyncChannels,
    AsyncIgnite,
    AsyncPipe,
    AsyncProjects,
    AsyncRegistry,
    AsyncUsers,
    Channels,
    Ignite,
    Pipe,
    Projects,
    Registry,
    Users,
)
from .sdks.channels import _BaseChannels
from .sdks.ignite import _BaseIgnite
from .sdks.pipe import _BasePipe
from .sdks.projects import _BaseProjects
from .sdks.registry import _BaseRegistry
from .sdks.users import _BaseUsers


def _namespaces(
    target: Any,
    ignite: _BaseIgnite,
    users: _BaseUsers,
    projects: _BaseProjects,
    pipe: _BasePipe,
    registry: _BaseRegistry,
    channels: _BaseChannels,
) -> None:
    """Attach namespaces of bound methods. Each one is bound to its own SDK."""
    target.ignite = SimpleNamespace(
        deployments=SimpleNamespace(
            create=ignite.create_deployment,
            delete=ignite.delete_deployment,
            get_all=ignite.get_deployments,
            get=ignite.get_deployment,
            get_containers=ignite.get_containers,
            gateways=SimpleNamespace(
                get_all=ignite.get_gateways,
                create=ignite.create_gateway,
            ),
        ),
        gateways=SimpleNamespace(
            get=ignite.get_gateway,
            add_domain=ignite.add_domain_to_gateway,
        ),
        containers=SimpleNamespace(
            create=ignite.create_container,
            delete=ignite.delete_container,
            get_logs=ignite.get_logs,
            stop=ignite.stop_container,
            start=ignite.start_container,
        ),
    )
    target.users = SimpleNamespace(
        me=SimpleNamespace(
            get=users.get_me,
            pats=SimpleNamespace(
                create=users.create_pat,
                delete=users.delete_pat,
                get_all=users.get_pats,
            ),
        ),
    )
    target.projects = SimpleNamespace(
        project_tokens=SimpleNamespace(
            get=projects.get_project_tokens,
            create=projects.create_project_token,
            delete=projects.delete_project_token,
        ),
        secrets=SimpleNamespace(
            create=projects.create_secret,
            get_all=projects.get_secrets,
            delete=projects.delete_secret,
        ),
        get_all_members=projects.get_all_members,
        get_current_member=projects.get_current_member,
    )
    target.pipe = SimpleNamespace(
        rooms=SimpleNamespace(get_all=pipe.get_rooms),
    )
    target.registry = SimpleNamespace(
        images=SimpleNamespace(
            get_all=registry.get_images,
            delete=registry.delete_image,
            get_manifests=registry.get_manifests,
        ),
    )
    target.channels = SimpleNamespace(
        create=channels.create,
        get=channels.get,
        get_all=channels.get_all,
        delete=channels.delete,
        get_tokens=channels.get_tokens,
        subscribe_token=channels.subscribe_token,
        publish_message=channels.publish_message,
        get_state=channels.get_state,
        set_state=channels.set_state,
        patch_state=channels.patch_state,
        tokens=SimpleNamespace(
            create=channels.create_token,
            get=channels.get_token,
            set_state=channels.set_token_state,
            delete=channels.delete_token,
            publish_direct_message=channels.publish_direct_message,
        ),
    )


class Hop:
    """
    Synchronous Hop SDK client.

    Example:
        hop = Hop("ptk_...")
        hop.ignite.containers.create("deployment_...")

    Every SDK shares one dispatcher, so the credential is classified once.
    The SDK classes in ``hop.sdks`` can also be used on their own.
    """

    def __init__(
        self,
        authorization: str | None = None,
        base_url: str | None = None,
        *,
        timeout: float | None = DEFAULT_TIMEOUT,
    ):
        self._client = SyncAPIClient(authorization, base_url, timeout)
        self.sdks = SimpleNamespace(
            ignite=Ignite(client=self._client),
            users=Users(client=self._client),
            projects=Projects(client=self._client),
            pipe=Pipe(client=self._client),
            registry=Registry(client=self._client),
            channels=Channels(client=self._client),
        )
        _namespaces(self, **vars(self.sdks))

    @property
    def auth_type(self) -> AuthType:
        return self._client.auth_type

    def close(self) -> None:
        """Close the client."""

    def __enter__(self) -> Hop:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()


class AsyncHop:
    """Asynchronous Hop SDK client."""

    def __init__(
        self,
        authorization: str | None = None,
        base_url: str | None = None,
        *,
        timeout: float | None = DEFAULT_TIMEOUT,
    ):
        self._client = AsyncAPIClient(authorization, base_url, timeout)
        self.sdks = SimpleNamespace(
            ignite=AsyncIgnite(client=self._client),
            users=AsyncUsers(client=self._client),
            projects=AsyncProjects(client=self._client),
            pipe=AsyncPipe(client=self._client),
            registry=AsyncRegistry(client=self._client),
            channels=AsyncChannels(client=self._client),
        )
        _namespaces(self, **vars(self.sdks))

    @property
    def auth_type(self) -> AuthType:
        return self._client.auth_type

    async def close(self) -> None:
        """Close the client."""

    async def __aenter__(self) -> AsyncHop:
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()


__all__ = ["Hop", "AsyncHop"]
