"""Shared plumbing for the per-product SDK classes."""

from __future__ import annotations

from typing import Any

from .._auth import AuthType
from .._client import AsyncAPIClient, SyncAPIClient, _BaseAPIClient
from .._ids import assert_id
from ..errors import InvalidArgumentError

# Path segment the API resolves to the project of the secret key in use.
THIS_PROJECT = "@this"


class _BaseSDK:
    """
    Base class for SDKs.

    Business logic lives in async methods on subclasses of this class and only
    talks to ``self._client._request``. Scope checks run before anything is
    sent.
    """

    _client: _BaseAPIClient

    @property
    def auth_type(self) -> AuthType:
        return self._client.auth_type

    def _team_query(self, team_id: str | None) -> dict[str, Any]:
        """Query parameters for team-scoped calls."""
        if self.auth_type is AuthType.SK:
            if team_id is not None:
                raise InvalidArgumentError(
                    "Team ID must not be provided when using secret key authorization"
                )
            return {}
        if team_id is None:
            raise InvalidArgumentError("Team ID is required for bearer or PAT authorization")
        return {"team": assert_id(team_id, "team")}

    def _project_segment(self, project_id: str | None) -> str:
        """Project path segment: explicit ID for user credentials, @this for keys."""
        if self.auth_type is AuthType.SK:
            if project_id is not None:
                raise InvalidArgumentError(
                    "Project ID must not be provided when using secret key authorization"
                )
            return THIS_PROJECT
        if project_id is None:
            raise InvalidArgumentError(
                "Project ID is required for bearer or PAT authorization"
            )
        return assert_id(project_id, "project")

    def _project_query(self, project_id: str | None) -> dict[str, Any]:
        segment = self._project_segment(project_id)
        return {} if segment == THIS_PROJECT else {"project": segment}

    def _require_user_auth(self, operation: str) -> None:
        if self.auth_type is AuthType.SK:
            raise InvalidArgumentError(
                f"Cannot {operation} with secret key authorization; "
                "use a bearer token or personal access token"
            )


def _sync_client(
    authorization: str | None,
    base_url: str | None,
    client: SyncAPIClient | None,
) -> SyncAPIClient:
    if client is not None:
        return client
    return SyncAPIClient(authorization, base_url)


def _async_client(
    authorization: str | None,
    base_url: str | None,
    client: AsyncAPIClient | None,
) -> AsyncAPIClient:
    if client is not None:
        return client
    return AsyncAPIClient(authorization, base_url)


__all__ = ["THIS_PROJECT"]
