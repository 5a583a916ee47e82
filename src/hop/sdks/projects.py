"""Projects: members, project tokens and secrets."""

from __future__ import annotations

import re

from .. import _endpoints as ep
from .._client import AsyncAPIClient, SyncAPIClient
from .._http import BytesBody, iter_coroutine
from .._ids import assert_id
from ..errors import InvalidArgumentError
from ..models import ProjectMember, ProjectToken, Secret
from ._base import _async_client, _BaseSDK, _sync_client

SECRET_NAME_RE = re.compile(r"^[A-Z0-9_]+$")


def _normalize_secret_name(name: str) -> str:
    upper = name.upper()
    if not SECRET_NAME_RE.match(upper):
        raise InvalidArgumentError(
            f"Invalid secret name {name!r}: use letters, digits and underscores only"
        )
    return upper


class _BaseProjects(_BaseSDK):
    """
    Async business logic for the Projects API.

    Every method takes ``project_id``. It is required with a bearer token or
    PAT and must be omitted with a secret key, which is bound to one project.
    """

    async def _get_all_members(self, project_id: str | None = None) -> list[ProjectMember]:
        data = await self._client._request(
            "GET",
            ep.PROJECT_MEMBERS_LIST,
            params={"project_id": self._project_segment(project_id)},
        )
        return data.members

    async def _get_current_member(self, project_id: str | None = None) -> ProjectMember:
        self._require_user_auth("fetch the current project member")
        data = await self._client._request(
            "GET",
            ep.PROJECT_MEMBER_ME,
            params={"project_id": self._project_segment(project_id)},
        )
        return data.project_member

    async def _get_project_tokens(self, project_id: str | None = None) -> list[ProjectToken]:
        data = await self._client._request(
            "GET",
            ep.PROJECT_TOKENS_LIST,
            params={"project_id": self._project_segment(project_id)},
        )
        return data.project_tokens

    async def _create_project_token(
        self, flags: int, project_id: str | None = None
    ) -> ProjectToken:
        data = await self._client._request(
            "POST",
            ep.PROJECT_TOKENS_CREATE,
            params={"project_id": self._project_segment(project_id)},
            body={"flags": flags},
        )
        return data.project_token

    async def _delete_project_token(
        self, project_token_id: str, project_id: str | None = None
    ) -> None:
        await self._client._request(
            "DELETE",
            ep.PROJECT_TOKEN_DELETE,
            params={
                "project_id": self._project_segment(project_id),
                "project_token_id": assert_id(project_token_id, "ptkid"),
            },
        )

    async def _get_secrets(self, project_id: str | None = None) -> list[Secret]:
        data = await self._client._request(
            "GET",
            ep.PROJECT_SECRETS_LIST,
            params={"project_id": self._project_segment(project_id)},
        )
        return data.secrets

    async def _create_secret(
        self, name: str, value: str, project_id: str | None = None
    ) -> Secret:
        data = await self._client._request(
            "PUT",
            ep.PROJECT_SECRET_PUT,
            params={
                "project_id": self._project_segment(project_id),
                "name": _normalize_secret_name(name),
            },
            body=BytesBody(value.encode("utf-8"), content_type="text/plain"),
        )
        return data.secret

    async def _delete_secret(self, secret_id: str, project_id: str | None = None) -> None:
        await self._client._request(
            "DELETE",
            ep.PROJECT_SECRET_DELETE,
            params={
                "project_id": self._project_segment(project_id),
                "secret_id": assert_id(secret_id, "secret"),
            },
        )


class Projects(_BaseProjects):
    """Synchronous client for the Projects API."""

    def __init__(
        self,
        authorization: str | None = None,
        base_url: str | None = None,
        *,
        client: SyncAPIClient | None = None,
    ):
        self._client = _sync_client(authorization, base_url, client)

    def get_all_members(self, project_id: str | None = None) -> list[ProjectMember]:
        return iter_coroutine(self._get_all_members(project_id))

    def get_current_member(self, project_id: str | None = None) -> ProjectMember:
        return iter_coroutine(self._get_current_member(project_id))

    def get_project_tokens(self, project_id: str | None = None) -> list[ProjectToken]:
        return iter_coroutine(self._get_project_tokens(project_id))

    def create_project_token(self, flags: int, project_id: str | None = None) -> ProjectToken:
        return iter_coroutine(self._create_project_token(flags, project_id))

    def delete_project_token(self, project_token_id: str, project_id: str | None = None) -> None:
        iter_coroutine(self._delete_project_token(project_token_id, project_id))

    def get_secrets(self, project_id: str | None = None) -> list[Secret]:
        return iter_coroutine(self._get_secrets(project_id))

    def create_secret(self, name: str, value: str, project_id: str | None = None) -> Secret:
        """Create or replace a secret. The name is upper-cased."""
        return iter_coroutine(self._create_secret(name, value, project_id))

    def delete_secret(self, secret_id: str, project_id: str | None = None) -> None:
        iter_coroutine(self._delete_secret(secret_id, project_id))


class AsyncProjects(_BaseProjects):
    """Asynchronous client for the Projects API."""

    def __init__(
        self,
        authorization: str | None = None,
        base_url: str | None = None,
        *,
        client: AsyncAPIClient | None = None,
    ):
        self._client = _async_client(authorization, base_url, client)

    async def get_all_members(self, project_id: str | None = None) -> list[ProjectMember]:
        return await self._get_all_members(project_id)

    async def get_current_member(self, project_id: str | None = None) -> ProjectMember:
        return await self._get_current_member(project_id)

    async def get_project_tokens(self, project_id: str | None = None) -> list[ProjectToken]:
        return await self._get_project_tokens(project_id)

    async def create_project_token(
        self, flags: int, project_id: str | None = None
    ) -> ProjectToken:
        return await self._create_project_token(flags, project_id)

    async def delete_project_token(
        self, project_token_id: str, project_id: str | None = None
    ) -> None:
        await self._delete_project_token(project_token_id, project_id)

    async def get_secrets(self, project_id: str | None = None) -> list[Secret]:
        return await self._get_secrets(project_id)

    async def create_secret(
        self, name: str, value: str, project_id: str | None = None
    ) -> Secret:
        """Create or replace a secret. The name is upper-cased."""
        return await self._create_secret(name, value, project_id)

    async def delete_secret(self, secret_id: str, project_id: str | None = None) -> None:
        await self._delete_secret(secret_id, project_id)


__all__ = ["Projects", "AsyncProjects"]
