"""Catalog of every request the SDK can make.

Each entry pairs an HTTP method and a path template with the pydantic model
of its success response and, where the API defines one, of its request body.
Placeholders are ``:name`` path segments. SDK classes only ever refer to these
constants, so a path string is written exactly once.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Literal

from pydantic import BaseModel

from . import models as m
from .errors import InvalidArgumentError

Method = Literal["GET", "POST", "PUT", "PATCH", "DELETE"]

PLACEHOLDER_RE = re.compile(r":([A-Za-z_][A-Za-z0-9_]*)")


@dataclass(frozen=True, slots=True)
class Endpoint:
    method: Method
    path: str
    response: type[BaseModel] | None = None
    body: type[BaseModel] | None = None
    placeholders: tuple[str, ...] = field(init=False, default=())

    def __post_init__(self) -> None:
        object.__setattr__(self, "placeholders", tuple(PLACEHOLDER_RE.findall(self.path)))

    def __str__(self) -> str:
        return f"{self.method} {self.path}"


# Ignite: deployments
DEPLOYMENTS_LIST = Endpoint("GET", "/v1/ignite/deployments", m.DeploymentsResponse)
DEPLOYMENTS_CREATE = Endpoint(
    "POST", "/v1/ignite/deployments", m.DeploymentResponse, m.DeploymentConfig
)
DEPLOYMENT_GET = Endpoint(
    "GET", "/v1/ignite/deployments/:deployment_id", m.DeploymentResponse
)
DEPLOYMENT_SEARCH = Endpoint("GET", "/v1/ignite/deployments/search", m.DeploymentResponse)
DEPLOYMENT_DELETE = Endpoint("DELETE", "/v1/ignite/deployments/:deployment_id")

# Ignite: containers
DEPLOYMENT_CONTAINERS_LIST = Endpoint(
    "GET", "/v1/ignite/deployments/:deployment_id/containers", m.ContainersResponse
)
DEPLOYMENT_CONTAINERS_CREATE = Endpoint(
    "POST", "/v1/ignite/deployments/:deployment_id/containers", m.ContainerResponse
)
CONTAINER_DELETE = Endpoint("DELETE", "/v1/ignite/containers/:container_id")
CONTAINER_STATE_UPDATE = Endpoint(
    "PATCH",
    "/v1/ignite/containers/:container_id/state",
    None,
    m.UpdateContainerStateBody,
)
CONTAINER_LOGS = Endpoint(
    "GET", "/v1/ignite/containers/:container_id/logs", m.ContainerLogsResponse
)

# Ignite: gateways
DEPLOYMENT_GATEWAYS_LIST = Endpoint(
    "GET", "/v1/ignite/deployments/:deployment_id/gateways", m.GatewaysResponse
)
DEPLOYMENT_GATEWAYS_CREATE = Endpoint(
    "POST",
    "/v1/ignite/deployments/:deployment_id/gateways",
    m.GatewayResponse,
    m.CreateGatewayBody,
)
GATEWAY_GET = Endpoint("GET", "/v1/ignite/gateways/:gateway_id", m.GatewayResponse)
GATEWAY_DOMAINS_ADD = Endpoint(
    "POST", "/v1/ignite/gateways/:gateway_id/domains", None, m.AddDomainBody
)

# Users
ME_GET = Endpoint("GET", "/v1/users/@me", m.MeResponse)
PATS_LIST = Endpoint("GET", "/v1/users/@me/pats", m.PATsResponse)
PATS_CREATE = Endpoint("POST", "/v1/users/@me/pats", m.PATResponse, m.CreatePATBody)
PAT_DELETE = Endpoint("DELETE", "/v1/users/@me/pats/:pat_id")

# Projects
PROJECT_MEMBERS_LIST = Endpoint(
    "GET", "/v1/projects/:project_id/members", m.MembersResponse
)
PROJECT_MEMBER_ME = Endpoint(
    "GET", "/v1/projects/:project_id/members/@me", m.MemberResponse
)
PROJECT_TOKENS_LIST = Endpoint(
    "GET", "/v1/projects/:project_id/tokens", m.ProjectTokensResponse
)
PROJECT_TOKENS_CREATE = Endpoint(
    "POST",
    "/v1/projects/:project_id/tokens",
    m.ProjectTokenResponse,
    m.CreateProjectTokenBody,
)
PROJECT_TOKEN_DELETE = Endpoint(
    "DELETE", "/v1/projects/:project_id/tokens/:project_token_id"
)
PROJECT_SECRETS_LIST = Endpoint(
    "GET", "/v1/projects/:project_id/secrets", m.SecretsResponse
)
# The secret value is sent as a raw text body.
PROJECT_SECRET_PUT = Endpoint(
    "PUT", "/v1/projects/:project_id/secrets/:name", m.SecretResponse
)
PROJECT_SECRET_DELETE = Endpoint(
    "DELETE", "/v1/projects/:project_id/secrets/:secret_id"
)

# Registry
REGISTRY_IMAGE_DELETE = Endpoint("DELETE", "/v1/registry/images/:image")
REGISTRY_IMAGES_THIS = Endpoint("GET", "/v1/registry/@this/images", m.ImagesResponse)
REGISTRY_IMAGES_LIST = Endpoint(
    "GET", "/v1/registry/:project_id/images", m.ImagesResponse
)
REGISTRY_MANIFESTS = Endpoint(
    "GET", "/v1/registry/images/:image/manifests", m.ManifestsResponse
)

# Channels
CHANNELS_CREATE = Endpoint("POST", "/v1/channels", m.ChannelResponse, m.CreateChannelBody)
CHANNEL_CREATE_WITH_ID = Endpoint(
    "PUT", "/v1/channels/:channel_id", m.ChannelResponse, m.CreateChannelBody
)
CHANNELS_LIST = Endpoint("GET", "/v1/channels", m.ChannelsResponse)
CHANNEL_GET = Endpoint("GET", "/v1/channels/:channel_id", m.ChannelResponse)
CHANNEL_DELETE = Endpoint("DELETE", "/v1/channels/:channel_id")
CHANNEL_TOKENS_LIST = Endpoint(
    "GET", "/v1/channels/:channel_id/tokens", m.ChannelTokensResponse
)
CHANNEL_SUBSCRIBE = Endpoint("PUT", "/v1/channels/:channel_id/subscribers/:token")
CHANNEL_MESSAGES_PUBLISH = Endpoint(
    "POST", "/v1/channels/:channel_id/messages", None, m.MessageBody
)
CHANNEL_STATE_GET = Endpoint(
    "GET", "/v1/channels/:channel_id/state", m.ChannelStateResponse
)
CHANNEL_STATE_SET = Endpoint("PUT", "/v1/channels/:channel_id/state")
CHANNEL_STATE_PATCH = Endpoint("PATCH", "/v1/channels/:channel_id/state")
CHANNEL_TOKENS_CREATE = Endpoint(
    "POST", "/v1/channels/tokens", m.ChannelTokenResponse, m.CreateChannelTokenBody
)
CHANNEL_TOKEN_GET = Endpoint("GET", "/v1/channels/tokens/:token", m.ChannelTokenResponse)
CHANNEL_TOKEN_UPDATE = Endpoint(
    "PATCH",
    "/v1/channels/tokens/:token",
    m.ChannelTokenResponse,
    m.UpdateChannelTokenBody,
)
CHANNEL_TOKEN_DELETE = Endpoint("DELETE", "/v1/channels/tokens/:token")
CHANNEL_TOKEN_MESSAGES_PUBLISH = Endpoint(
    "POST", "/v1/channels/tokens/:token/messages", None, m.MessageBody
)

# Pipe
PIPE_ROOMS_LIST = Endpoint("GET", "/v1/pipe/rooms", m.RoomsResponse)


ENDPOINTS: tuple[Endpoint, ...] = tuple(
    value for value in list(globals().values()) if isinstance(value, Endpoint)
)

_BY_KEY: dict[tuple[str, str], Endpoint] = {(e.method, e.path): e for e in ENDPOINTS}


def get_endpoint(method: str, path: str) -> Endpoint:
    """Look up a catalog entry by method and path template."""
    try:
        return _BY_KEY[(method.upper(), path)]
    except KeyError:
        raise InvalidArgumentError(f"Unknown endpoint: {method.upper()} {path}") from None


__all__ = ["Endpoint", "Method", "ENDPOINTS", "PLACEHOLDER_RE", "get_endpoint"]
