"""Pipe: live streaming rooms."""

from __future__ import annotations

from .. import _endpoints as ep
from .._client import AsyncAPIClient, SyncAPIClient
from .._http import iter_coroutine
from ..models import Room
from ._base import _async_client, _BaseSDK, _sync_client


class _BasePipe(_BaseSDK):
    async def _get_rooms(self, project_id: str | None = None) -> list[Room]:
        data = await self._client._request(
            "GET", ep.PIPE_ROOMS_LIST, params=self._project_query(project_id)
        )
        return data.rooms


class Pipe(_BasePipe):
    """Synchronous client for the Pipe API."""

    def __init__(
        self,
        authorization: str | None = None,
        base_url: str | None = None,
        *,
        client: SyncAPIClient | None = None,
    ):
        self._client = _sync_client(authorization, base_url, client)

    def get_rooms(self, project_id: str | None = None) -> list[Room]:
        return iter_coroutine(self._get_rooms(project_id))


class AsyncPipe(_BasePipe):
    """Asynchronous client for the Pipe API."""

    def __init__(
        self,
        authorization: str | None = None,
        base_url: str | None = None,
        *,
        client: AsyncAPIClient | None = None,
    ):
        self._client = _async_client(authorization, base_url, client)

    async def get_rooms(self, project_id: str | None = None) -> list[Room]:
        return await self._get_rooms(project_id)


__all__ = ["Pipe", "AsyncPipe"]
