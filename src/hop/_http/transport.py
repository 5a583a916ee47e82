"""HTTP transport implementations for sync and async clients."""

from __future__ import annotations

import abc
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

import httpx

from .config import HTTPConfig


@dataclass(frozen=True, slots=True)
class JSONBody:
    """JSON-encoded request body."""

    data: Any


@dataclass(frozen=True, slots=True)
class BytesBody:
    """Raw request body sent as-is under ``content_type``."""

    data: bytes
    content_type: str = "application/octet-stream"


RequestBody = JSONBody | BytesBody | None


class BaseTransport(abc.ABC):
    """Abstract base class for HTTP transports.

    A transport owns the base URL and the authorization header. Both are fixed
    at construction, so one transport can serve concurrent calls.
    """

    def __init__(self, config: HTTPConfig, auth_header: tuple[str, str]) -> None:
        self._config = config
        self._auth_header = auth_header

    @property
    def config(self) -> HTTPConfig:
        return self._config

    def build_request(
        self,
        method: str,
        path: str,
        params: Mapping[str, Any] | None = None,
        body: RequestBody = None,
    ) -> httpx.Request:
        headers = self._config.get_headers(self._auth_header)
        if isinstance(body, BytesBody):
            headers["content-type"] = body.content_type
            payload: dict[str, Any] = {"content": body.data}
        elif isinstance(body, JSONBody):
            payload = {"json": body.data}
        else:
            payload = {}
        return httpx.Request(
            method,
            self._config.build_url(path),
            params=dict(params) if params else None,
            headers=headers,
            extensions={"timeout": httpx.Timeout(self._config.timeout).as_dict()},
            **payload,
        )

    @abc.abstractmethod
    async def send(
        self,
        method: str,
        path: str,
        *,
        params: Mapping[str, Any] | None = None,
        body: RequestBody = None,
    ) -> httpx.Response:
        """Send one request and return the response, whatever its status."""
        ...


class BlockingTransport(BaseTransport):
    """
    Synchronous HTTP transport using httpx.Client.

    ``send`` is declared async but never suspends, allowing it to be
    executed via iter_coroutine().
    """

    async def send(
        self,
        method: str,
        path: str,
        *,
        params: Mapping[str, Any] | None = None,
        body: RequestBody = None,
    ) -> httpx.Response:
        request = self.build_request(method, path, params, body)
        with httpx.Client() as client:
            return client.send(request)


class AsyncTransport(BaseTransport):
    """Asynchronous HTTP transport using httpx.AsyncClient."""

    async def send(
        self,
        method: str,
        path: str,
        *,
        params: Mapping[str, Any] | None = None,
        body: RequestBody = None,
    ) -> httpx.Response:
        request = self.build_request(method, path, params, body)
        async with httpx.AsyncClient() as client:
            return await client.send(request)


__all__ = [
    "BaseTransport",
    "BlockingTransport",
    "AsyncTransport",
    "JSONBody",
    "BytesBody",
    "RequestBody",
]
