"""Registry: container images pushed to a project."""

from __future__ import annotations

from .. import _endpoints as ep
from .._client import AsyncAPIClient, SyncAPIClient
from .._http import iter_coroutine
from ..models import Manifest
from ._base import THIS_PROJECT, _async_client, _BaseSDK, _sync_client


class _BaseRegistry(_BaseSDK):
    async def _get_images(self, project_id: str | None = None) -> list[str]:
        segment = self._project_segment(project_id)
        if segment == THIS_PROJECT:
            data = await self._client._request("GET", ep.REGISTRY_IMAGES_THIS)
        else:
            data = await self._client._request(
                "GET", ep.REGISTRY_IMAGES_LIST, params={"project_id": segment}
            )
        return data.images

    async def _delete_image(self, image: str) -> None:
        await self._client._request("DELETE", ep.REGISTRY_IMAGE_DELETE, params={"image": image})

    async def _get_manifests(self, image: str) -> list[Manifest]:
        data = await self._client._request(
            "GET", ep.REGISTRY_MANIFESTS, params={"image": image}
        )
        return data.manifests


class Registry(_BaseRegistry):
    """Synchronous client for the Registry API."""

    def __init__(
        self,
        authorization: str | None = None,
        base_url: str | None = None,
        *,
        client: SyncAPIClient | None = None,
    ):
        self._client = _sync_client(authorization, base_url, client)

    def get_images(self, project_id: str | None = None) -> list[str]:
        """List image names in a project."""
        return iter_coroutine(self._get_images(project_id))

    def delete_image(self, image: str) -> None:
        iter_coroutine(self._delete_image(image))

    def get_manifests(self, image: str) -> list[Manifest]:
        return iter_coroutine(self._get_manifests(image))


class AsyncRegistry(_BaseRegistry):
    """Asynchronous client for the Registry API."""

    def __init__(
        self,
        authorization: str | None = None,
        base_url: str | None = None,
        *,
        client: AsyncAPIClient | None = None,
    ):
        self._client = _async_client(authorization, base_url, client)

    async def get_images(self, project_id: str | None = None) -> list[str]:
        """List image names in a project."""
        return await self._get_images(project_id)

    async def delete_image(self, image: str) -> None:
        await self._delete_image(image)

    async def get_manifests(self, image: str) -> list[Manifest]:
        return await self._get_manifests(image)


__all__ = ["Registry", "AsyncRegistry"]
