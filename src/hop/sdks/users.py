"""Users: the authenticated user and their personal access tokens."""

from __future__ import annotations

from .. import _endpoints as ep
from .._client import AsyncAPIClient, SyncAPIClient
from .._http import iter_coroutine
from .._ids import assert_id
from ..models import PAT, MeResponse
from ._base import _async_client, _BaseSDK, _sync_client


class _BaseUsers(_BaseSDK):
    """Async business logic for the Users API. Requires a user credential."""

    async def _get_me(self) -> MeResponse:
        self._require_user_auth("fetch the current user")
        return await self._client._request("GET", ep.ME_GET)

    async def _create_pat(self, name: str) -> PAT:
        self._require_user_auth("create a personal access token")
        data = await self._client._request("POST", ep.PATS_CREATE, body={"name": name})
        return data.pat

    async def _get_pats(self) -> list[PAT]:
        self._require_user_auth("list personal access tokens")
        data = await self._client._request("GET", ep.PATS_LIST)
        return data.pats

    async def _delete_pat(self, pat_id: str) -> None:
        self._require_user_auth("delete a personal access token")
        await self._client._request(
            "DELETE", ep.PAT_DELETE, params={"pat_id": assert_id(pat_id, "pat")}
        )


class Users(_BaseUsers):
    """Synchronous client for the Users API."""

    def __init__(
        self,
        authorization: str | None = None,
        base_url: str | None = None,
        *,
        client: SyncAPIClient | None = None,
    ):
        self._client = _sync_client(authorization, base_url, client)

    def get_me(self) -> MeResponse:
        return iter_coroutine(self._get_me())

    def create_pat(self, name: str) -> PAT:
        return iter_coroutine(self._create_pat(name))

    def get_pats(self) -> list[PAT]:
        return iter_coroutine(self._get_pats())

    def delete_pat(self, pat_id: str) -> None:
        iter_coroutine(self._delete_pat(pat_id))


class AsyncUsers(_BaseUsers):
    """Asynchronous client for the Users API."""

    def __init__(
        self,
        authorization: str | None = None,
        base_url: str | None = None,
        *,
        client: AsyncAPIClient | None = None,
    ):
        self._client = _async_client(authorization, base_url, client)

    async def get_me(self) -> MeResponse:
        return await self._get_me()

    async def create_pat(self, name: str) -> PAT:
        return await self._create_pat(name)

    async def get_pats(self) -> list[PAT]:
        return await self._get_pats()

    async def delete_pat(self, pat_id: str) -> None:
        await self._delete_pat(pat_id)


__all__ = ["Users", "AsyncUsers"]
