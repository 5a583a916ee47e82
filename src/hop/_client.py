"""Request dispatcher shared by every SDK class."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any
from urllib.parse import quote

import httpx
from pydantic import BaseModel, ValidationError

from ._auth import Authorization, AuthType
from ._endpoints import PLACEHOLDER_RE, Endpoint, get_endpoint
from ._http import (
    DEFAULT_TIMEOUT,
    AsyncTransport,
    BaseTransport,
    BlockingTransport,
    BytesBody,
    HTTPConfig,
    JSONBody,
    RequestBody,
    iter_coroutine,
    resolve_base_url,
)
from .errors import APIError, InvalidArgumentError, MissingPathParameterError, NetworkError

logger = logging.getLogger(__name__)

_BODY_METHODS = frozenset({"POST", "PUT", "PATCH"})


def build_path(template: str, params: Mapping[str, Any] | None) -> tuple[str, dict[str, Any]]:
    """Substitute ``:name`` placeholders by name.

    Returns the concrete path and the parameters that were not consumed,
    which become the query string.
    """
    remaining = dict(params or {})
    missing: list[str] = []

    def substitute(match: Any) -> str:
        name = match.group(1)
        value = remaining.pop(name, None)
        if value is None or str(value) == "":
            missing.append(name)
            return match.group(0)
        return quote(str(value), safe="@")

    path = PLACEHOLDER_RE.sub(substitute, template)
    if missing:
        raise MissingPathParameterError(template, missing)
    return path, {k: v for k, v in remaining.items() if v is not None}


def _serialize_body(endpoint: Endpoint, body: Any) -> RequestBody:
    if body is None or isinstance(body, (JSONBody, BytesBody)):
        return body
    if endpoint.body is not None and not isinstance(body, endpoint.body):
        try:
            body = endpoint.body.model_validate(body)
        except ValidationError as exc:
            raise InvalidArgumentError(f"Invalid body for {endpoint}: {exc}") from exc
    if isinstance(body, BaseModel):
        return JSONBody(body.model_dump(mode="json", by_alias=True, exclude_none=True))
    return JSONBody(body)


def _parse_response(endpoint: Endpoint, resp: httpx.Response) -> Any:
    if endpoint.response is None or resp.status_code == 204 or not resp.content:
        return None
    try:
        data = resp.json()
    except ValueError as exc:
        raise APIError(resp, f"HTTP {resp.status_code}: response is not valid JSON") from exc
    # Successful responses are wrapped as {"success": true, "data": {...}}
    if isinstance(data, dict) and "success" in data and "data" in data:
        data = data["data"]
    try:
        return endpoint.response.model_validate(data)
    except ValidationError as exc:
        raise APIError(
            resp,
            f"HTTP {resp.status_code}: unexpected response shape for {endpoint}",
            data=data,
        ) from exc


class _BaseAPIClient:
    """
    Base class containing the dispatch logic.

    All methods are async and use the abstract _transport property for HTTP requests.
    Subclasses must provide a concrete transport implementation.
    """

    _transport: BaseTransport
    authorization: Authorization

    def __init__(
        self,
        authorization: str | None = None,
        base_url: str | None = None,
        timeout: float | None = DEFAULT_TIMEOUT,
    ) -> None:
        self.authorization = Authorization.resolve(authorization)
        config = HTTPConfig(base_url=resolve_base_url(base_url), timeout=timeout)
        self._transport = self._make_transport(config, self.authorization.header)

    def _make_transport(self, config: HTTPConfig, auth_header: tuple[str, str]) -> BaseTransport:
        raise NotImplementedError

    @property
    def auth_type(self) -> AuthType:
        return self.authorization.type

    @property
    def base_url(self) -> str:
        return self._transport.config.base_url

    @staticmethod
    def _resolve(method: str, endpoint: Endpoint | str) -> Endpoint:
        if isinstance(endpoint, str):
            return get_endpoint(method, endpoint)
        if endpoint.method != method:
            raise InvalidArgumentError(f"{endpoint} cannot be sent as {method}")
        return endpoint

    async def _request(
        self,
        method: str,
        endpoint: Endpoint | str,
        *,
        params: Mapping[str, Any] | None = None,
        body: Any = None,
    ) -> Any:
        """Send one request described by ``endpoint`` and parse its response."""
        resolved = self._resolve(method, endpoint)
        path, query = build_path(resolved.path, params)
        request_body = _serialize_body(resolved, body) if method in _BODY_METHODS else None

        logger.debug("%s %s params=%s", method, path, query)
        try:
            resp = await self._transport.send(
                method,
                path,
                params=query,
                body=request_body,
            )
        except httpx.TransportError as exc:
            logger.debug("%s %s failed: %r", method, path, exc)
            raise NetworkError(f"{method} {path} failed: {exc}") from exc

        if not (200 <= resp.status_code < 300):
            error = APIError.from_response(resp)
            logger.debug("%s %s -> %s", method, path, error)
            raise error

        return _parse_response(resolved, resp)


class SyncAPIClient(_BaseAPIClient):
    """Synchronous dispatcher."""

    def _make_transport(self, config: HTTPConfig, auth_header: tuple[str, str]) -> BaseTransport:
        return BlockingTransport(config, auth_header)

    def get(self, endpoint: Endpoint | str, params: Mapping[str, Any] | None = None) -> Any:
        return iter_coroutine(self._request("GET", endpoint, params=params))

    def delete(self, endpoint: Endpoint | str, params: Mapping[str, Any] | None = None) -> Any:
        return iter_coroutine(self._request("DELETE", endpoint, params=params))

    def post(
        self,
        endpoint: Endpoint | str,
        body: Any = None,
        params: Mapping[str, Any] | None = None,
    ) -> Any:
        return iter_coroutine(self._request("POST", endpoint, params=params, body=body))

    def put(
        self,
        endpoint: Endpoint | str,
        body: Any = None,
        params: Mapping[str, Any] | None = None,
    ) -> Any:
        return iter_coroutine(self._request("PUT", endpoint, params=params, body=body))

    def patch(
        self,
        endpoint: Endpoint | str,
        body: Any = None,
        params: Mapping[str, Any] | None = None,
    ) -> Any:
        return iter_coroutine(self._request("PATCH", endpoint, params=params, body=body))


class AsyncAPIClient(_BaseAPIClient):
    """Asynchronous dispatcher."""

    def _make_transport(self, config: HTTPConfig, auth_header: tuple[str, str]) -> BaseTransport:
        return AsyncTransport(config, auth_header)

    async def get(
        self, endpoint: Endpoint | str, params: Mapping[str, Any] | None = None
    ) -> Any:
        return await self._request("GET", endpoint, params=params)

    async def delete(
        self, endpoint: Endpoint | str, params: Mapping[str, Any] | None = None
    ) -> Any:
        return await self._request("DELETE", endpoint, params=params)

    async def post(
        self,
        endpoint: Endpoint | str,
        body: Any = None,
        params: Mapping[str, Any] | None = None,
    ) -> Any:
        return await self._request("POST", endpoint, params=params, body=body)

    async def put(
        self,
        endpoint: Endpoint | str,
        body: Any = None,
        params: Mapping[str, Any] | None = None,
    ) -> Any:
        return await self._request("PUT", endpoint, params=params, body=body)

    async def patch(
        self,
        endpoint: Endpoint | str,
        body: Any = None,
        params: Mapping[str, Any] | None = None,
    ) -> Any:
        return await self._request("PATCH", endpoint, params=params, body=body)


__all__ = ["SyncAPIClient", "AsyncAPIClient", "build_path"]
