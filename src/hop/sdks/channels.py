"""Channels: pub/sub topics, their state, and the tokens that subscribe to them."""

from __future__ import annotations

from typing import Any

from .. import _endpoints as ep
from .._client import AsyncAPIClient, SyncAPIClient
from .._http import iter_coroutine
from .._ids import assert_id
from ..models import Channel, ChannelToken, ChannelType, State
from ._base import _async_client, _BaseSDK, _sync_client


class _BaseChannels(_BaseSDK):
    """
    Async business logic for the Channels API.

    ``project_id`` is sent as the ``project`` query parameter with a bearer
    token or PAT, and must be omitted with a secret key.
    """

    def _channel_params(self, channel_id: str, project_id: str | None) -> dict[str, Any]:
        return {**self._project_query(project_id), "channel_id": channel_id}

    def _token_params(self, token: str, project_id: str | None) -> dict[str, Any]:
        return {**self._project_query(project_id), "token": assert_id(token, "leap_token")}

    async def _create(
        self,
        type: ChannelType | str,
        state: State | None = None,
        *,
        channel_id: str | None = None,
        project_id: str | None = None,
    ) -> Channel:
        body = {"type": type, "state": state}
        if channel_id is None:
            data = await self._client._request(
                "POST", ep.CHANNELS_CREATE, params=self._project_query(project_id), body=body
            )
        else:
            data = await self._client._request(
                "PUT",
                ep.CHANNEL_CREATE_WITH_ID,
                params=self._channel_params(channel_id, project_id),
                body=body,
            )
        return data.channel

    async def _get(self, channel_id: str, *, project_id: str | None = None) -> Channel:
        data = await self._client._request(
            "GET", ep.CHANNEL_GET, params=self._channel_params(channel_id, project_id)
        )
        return data.channel

    async def _get_all(self, *, project_id: str | None = None) -> list[Channel]:
        data = await self._client._request(
            "GET", ep.CHANNELS_LIST, params=self._project_query(project_id)
        )
        return data.channels

    async def _delete(self, channel_id: str, *, project_id: str | None = None) -> None:
        await self._client._request(
            "DELETE", ep.CHANNEL_DELETE, params=self._channel_params(channel_id, project_id)
        )

    async def _get_tokens(
        self, channel_id: str, *, project_id: str | None = None
    ) -> list[ChannelToken]:
        data = await self._client._request(
            "GET", ep.CHANNEL_TOKENS_LIST, params=self._channel_params(channel_id, project_id)
        )
        return data.tokens

    async def _subscribe_token(
        self, channel_id: str, token: str, *, project_id: str | None = None
    ) -> None:
        params = self._channel_params(channel_id, project_id)
        params["token"] = assert_id(token, "leap_token")
        await self._client._request("PUT", ep.CHANNEL_SUBSCRIBE, params=params)

    async def _publish_message(
        self, channel_id: str, event: str, data: Any = None, *, project_id: str | None = None
    ) -> None:
        await self._client._request(
            "POST",
            ep.CHANNEL_MESSAGES_PUBLISH,
            params=self._channel_params(channel_id, project_id),
            body={"e": event, "d": data},
        )

    async def _get_state(self, channel_id: str, *, project_id: str | None = None) -> State:
        data = await self._client._request(
            "GET", ep.CHANNEL_STATE_GET, params=self._channel_params(channel_id, project_id)
        )
        return data.state

    async def _set_state(
        self, channel_id: str, state: State, *, project_id: str | None = None
    ) -> None:
        await self._client._request(
            "PUT",
            ep.CHANNEL_STATE_SET,
            params=self._channel_params(channel_id, project_id),
            body=state,
        )

    async def _patch_state(
        self, channel_id: str, state: State, *, project_id: str | None = None
    ) -> None:
        await self._client._request(
            "PATCH",
            ep.CHANNEL_STATE_PATCH,
            params=self._channel_params(channel_id, project_id),
            body=state,
        )

    async def _create_token(
        self,
        state: State | None = None,
        *,
        expires_at: str | None = None,
        project_id: str | None = None,
    ) -> ChannelToken:
        data = await self._client._request(
            "POST",
            ep.CHANNEL_TOKENS_CREATE,
            params=self._project_query(project_id),
            body={"state": state or {}, "expires_at": expires_at},
        )
        return data.token

    async def _get_token(self, token: str, *, project_id: str | None = None) -> ChannelToken:
        data = await self._client._request(
            "GET", ep.CHANNEL_TOKEN_GET, params=self._token_params(token, project_id)
        )
        return data.token

    async def _set_token_state(
        self,
        token: str,
        state: State,
        *,
        expires_at: str | None = None,
        project_id: str | None = None,
    ) -> ChannelToken:
        data = await self._client._request(
            "PATCH",
            ep.CHANNEL_TOKEN_UPDATE,
            params=self._token_params(token, project_id),
            body={"state": state, "expires_at": expires_at},
        )
        return data.token

    async def _delete_token(self, token: str, *, project_id: str | None = None) -> None:
        await self._client._request(
            "DELETE", ep.CHANNEL_TOKEN_DELETE, params=self._token_params(token, project_id)
        )

    async def _publish_direct_message(
        self, token: str, event: str, data: Any = None, *, project_id: str | None = None
    ) -> None:
        await self._client._request(
            "POST",
            ep.CHANNEL_TOKEN_MESSAGES_PUBLISH,
            params=self._token_params(token, project_id),
            body={"e": event, "d": data},
        )


class Channels(_BaseChannels):
    """Synchronous client for the Channels API."""

    def __init__(
        self,
        authorization: str | None = None,
        base_url: str | None = None,
        *,
        client: SyncAPIClient | None = None,
    ):
        self._client = _sync_client(authorization, base_url, client)

    def create(
        self,
        type: ChannelType | str,
        state: State | None = None,
        *,
        channel_id: str | None = None,
        project_id: str | None = None,
    ) -> Channel:
        """Create a channel. Passing ``channel_id`` creates it under that ID."""
        return iter_coroutine(
            self._create(type, state, channel_id=channel_id, project_id=project_id)
        )

    def get(self, channel_id: str, *, project_id: str | None = None) -> Channel:
        return iter_coroutine(self._get(channel_id, project_id=project_id))

    def get_all(self, *, project_id: str | None = None) -> list[Channel]:
        return iter_coroutine(self._get_all(project_id=project_id))

    def delete(self, channel_id: str, *, project_id: str | None = None) -> None:
        iter_coroutine(self._delete(channel_id, project_id=project_id))

    def get_tokens(self, channel_id: str, *, project_id: str | None = None) -> list[ChannelToken]:
        return iter_coroutine(self._get_tokens(channel_id, project_id=project_id))

    def subscribe_token(
        self, channel_id: str, token: str, *, project_id: str | None = None
    ) -> None:
        iter_coroutine(self._subscribe_token(channel_id, token, project_id=project_id))

    def publish_message(
        self, channel_id: str, event: str, data: Any = None, *, project_id: str | None = None
    ) -> None:
        iter_coroutine(self._publish_message(channel_id, event, data, project_id=project_id))

    def get_state(self, channel_id: str, *, project_id: str | None = None) -> State:
        return iter_coroutine(self._get_state(channel_id, project_id=project_id))

    def set_state(self, channel_id: str, state: State, *, project_id: str | None = None) -> None:
        """Replace the channel state."""
        iter_coroutine(self._set_state(channel_id, state, project_id=project_id))

    def patch_state(
        self, channel_id: str, state: State, *, project_id: str | None = None
    ) -> None:
        """Merge ``state`` into the channel state."""
        iter_coroutine(self._patch_state(channel_id, state, project_id=project_id))

    def create_token(
        self,
        state: State | None = None,
        *,
        expires_at: str | None = None,
        project_id: str | None = None,
    ) -> ChannelToken:
        return iter_coroutine(
            self._create_token(state, expires_at=expires_at, project_id=project_id)
        )

    def get_token(self, token: str, *, project_id: str | None = None) -> ChannelToken:
        return iter_coroutine(self._get_token(token, project_id=project_id))

    def set_token_state(
        self,
        token: str,
        state: State,
        *,
        expires_at: str | None = None,
        project_id: str | None = None,
    ) -> ChannelToken:
        return iter_coroutine(
            self._set_token_state(token, state, expires_at=expires_at, project_id=project_id)
        )

    def delete_token(self, token: str, *, project_id: str | None = None) -> None:
        iter_coroutine(self._delete_token(token, project_id=project_id))

    def publish_direct_message(
        self, token: str, event: str, data: Any = None, *, project_id: str | None = None
    ) -> None:
        iter_coroutine(
            self._publish_direct_message(token, event, data, project_id=project_id)
        )


class AsyncChannels(_BaseChannels):
    """Asynchronous client for the Channels API."""

    def __init__(
        self,
        authorization: str | None = None,
        base_url: str | None = None,
        *,
        client: AsyncAPIClient | None = None,
    ):
        self._client = _async_client(authorization, base_url, client)

    async def create(
        self,
        type: ChannelType | str,
        state: State | None = None,
        *,
        channel_id: str | None = None,
        project_id: str | None = None,
    ) -> Channel:
        """Create a channel. Passing ``channel_id`` creates it under that ID."""
        return await self._create(type, state, channel_id=channel_id, project_id=project_id)

    async def get(self, channel_id: str, *, project_id: str | None = None) -> Channel:
        return await self._get(channel_id, project_id=project_id)

    async def get_all(self, *, project_id: str | None = None) -> list[Channel]:
        return await self._get_all(project_id=project_id)

    async def delete(self, channel_id: str, *, project_id: str | None = None) -> None:
        await self._delete(channel_id, project_id=project_id)

    async def get_tokens(
        self, channel_id: str, *, project_id: str | None = None
    ) -> list[ChannelToken]:
        return await self._get_tokens(channel_id, project_id=project_id)

    async def subscribe_token(
        self, channel_id: str, token: str, *, project_id: str | None = None
    ) -> None:
        await self._subscribe_token(channel_id, token, project_id=project_id)

    async def publish_message(
        self, channel_id: str, event: str, data: Any = None, *, project_id: str | None = None
    ) -> None:
        await self._publish_message(channel_id, event, data, project_id=project_id)

    async def get_state(self, channel_id: str, *, project_id: str | None = None) -> State:
        return await self._get_state(channel_id, project_id=project_id)

    async def set_state(
        self, channel_id: str, state: State, *, project_id: str | None = None
    ) -> None:
        """Replace the channel state."""
        await self._set_state(channel_id, state, project_id=project_id)

    async def patch_state(
        self, channel_id: str, state: State, *, project_id: str | None = None
    ) -> None:
        """Merge ``state`` into the channel state."""
        await self._patch_state(channel_id, state, project_id=project_id)

    async def create_token(
        self,
        state: State | None = None,
        *,
        expires_at: str | None = None,
        project_id: str | None = None,
    ) -> ChannelToken:
        return await self._create_token(state, expires_at=expires_at, project_id=project_id)

    async def get_token(self, token: str, *, project_id: str | None = None) -> ChannelToken:
        return await self._get_token(token, project_id=project_id)

    async def set_token_state(
        self,
        token: str,
        state: State,
        *,
        expires_at: str | None = None,
        project_id: str | None = None,
    ) -> ChannelToken:
        return await self._set_token_state(
            token, state, expires_at=expires_at, project_id=project_id
        )

    async def delete_token(self, token: str, *, project_id: str | None = None) -> None:
        await self._delete_token(token, project_id=project_id)

    async def publish_direct_message(
        self, token: str, event: str, data: Any = None, *, project_id: str | None = None
    ) -> None:
        await self._publish_direct_message(token, event, data, project_id=project_id)


__all__ = ["Channels", "AsyncChannels"]
