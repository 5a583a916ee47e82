"""Request and response shapes for the Hop API."""

from __future__ import annotations

import enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

State = dict[str, Any]


class _Model(BaseModel):
    # Unknown fields are kept so payloads round-trip without loss.
    model_config = ConfigDict(extra="allow", populate_by_name=True)


# Ignite


class RuntimeType(str, enum.Enum):
    EPHEMERAL = "ephemeral"
    PERSISTENT = "persistent"


class ContainerStrategy(str, enum.Enum):
    MANUAL = "manual"


class RestartPolicy(str, enum.Enum):
    NEVER = "never"
    ALWAYS = "always"
    ON_FAILURE = "on-failure"


class ContainerState(str, enum.Enum):
    PENDING = "pending"
    RUNNING = "running"
    STOPPED = "stopped"
    FAILED = "failed"
    TERMINATING = "terminating"
    EXITED = "exited"


class GatewayType(str, enum.Enum):
    EXTERNAL = "external"
    INTERNAL = "internal"


class GatewayProtocol(str, enum.Enum):
    HTTP = "http"


class Resources(_Model):
    """CPU and memory allocated to each container."""

    vcpu: float
    ram: str | int


class Image(_Model):
    name: str | None = None
    auth: dict[str, str] | None = None


class DeploymentConfig(_Model):
    """Configuration used to create a deployment."""

    name: str
    type: RuntimeType = RuntimeType.PERSISTENT
    version: str = "2022-05-17"
    container_strategy: ContainerStrategy = ContainerStrategy.MANUAL
    image: Image
    env: dict[str, str] = Field(default_factory=dict)
    resources: Resources
    restart_policy: RestartPolicy | None = None


class Deployment(_Model):
    id: str
    name: str
    container_count: int = 0
    created_at: str | None = None
    config: DeploymentConfig | None = None


class Container(_Model):
    id: str
    deployment_id: str | None = None
    state: ContainerState | str | None = None
    type: RuntimeType | str | None = None
    region: str | None = None
    internal_ip: str | None = None
    created_at: str | None = None


class ContainerLog(_Model):
    timestamp: str
    message: str
    level: str | None = None
    nonce: str | None = None


class Gateway(_Model):
    id: str
    type: GatewayType | str
    name: str | None = None
    protocol: GatewayProtocol | str | None = None
    deployment_id: str | None = None
    target_port: int | None = None
    hopsh_domain: str | None = None
    internal_domain: str | None = None
    created_at: str | None = None
    domains: list[dict[str, Any]] = Field(default_factory=list)


class DeploymentsResponse(_Model):
    deployments: list[Deployment]


class DeploymentResponse(_Model):
    deployment: Deployment


class ContainersResponse(_Model):
    containers: list[Container]


class ContainerResponse(_Model):
    container: Container


class ContainerLogsResponse(_Model):
    logs: list[ContainerLog]


class GatewaysResponse(_Model):
    gateways: list[Gateway]


class GatewayResponse(_Model):
    gateway: Gateway


class UpdateContainerStateBody(_Model):
    state: ContainerState


class CreateGatewayBody(_Model):
    type: GatewayType
    protocol: GatewayProtocol | None = None
    target_port: int | None = None
    name: str | None = None


class AddDomainBody(_Model):
    domain: str


# Users


class User(_Model):
    id: str
    name: str | None = None
    username: str | None = None
    email: str | None = None


class PAT(_Model):
    id: str
    name: str | None = None
    pat: str | None = None
    created_at: str | None = None


class Project(_Model):
    id: str
    name: str
    namespace: str | None = None
    type: str | None = None
    icon: str | None = None
    created_at: str | None = None


class MeResponse(_Model):
    user: User
    projects: list[Project] = Field(default_factory=list)
    project_member_role_map: dict[str, str] = Field(default_factory=dict)


class PATResponse(_Model):
    pat: PAT


class PATsResponse(_Model):
    pats: list[PAT]


class CreatePATBody(_Model):
    name: str


# Projects


class ProjectMember(_Model):
    id: str
    role: str | None = None
    joined_at: str | None = None
    user: User | None = None


class ProjectToken(_Model):
    id: str
    token: str | None = None
    flags: int | None = None
    created_at: str | None = None


class Secret(_Model):
    id: str
    name: str
    digest: str | None = None
    created_at: str | None = None
    in_use_by: dict[str, Any] | None = None


class MembersResponse(_Model):
    members: list[ProjectMember]


class MemberResponse(_Model):
    project_member: ProjectMember


class ProjectTokensResponse(_Model):
    project_tokens: list[ProjectToken]


class ProjectTokenResponse(_Model):
    project_token: ProjectToken


class CreateProjectTokenBody(_Model):
    flags: int


class SecretsResponse(_Model):
    secrets: list[Secret]


class SecretResponse(_Model):
    secret: Secret


# Registry


class ManifestDigest(_Model):
    digest: str
    size: int
    uploaded: str


class Manifest(_Model):
    digest: ManifestDigest
    tag: str | None = None


class ImagesResponse(_Model):
    images: list[str]


class ManifestsResponse(_Model):
    manifests: list[Manifest]


# Channels


class ChannelType(str, enum.Enum):
    PRIVATE = "private"
    PUBLIC = "public"
    UNPROTECTED = "unprotected"


class Channel(_Model):
    id: str
    project: Project | None = None
    state: State = Field(default_factory=dict)
    capabilities: int = 0
    created_at: str | None = None
    type: ChannelType | str


class ChannelToken(_Model):
    id: str
    state: State = Field(default_factory=dict)
    project_id: str | None = None
    expires_at: str | None = None


class ChannelResponse(_Model):
    channel: Channel


class ChannelsResponse(_Model):
    channels: list[Channel]


class ChannelStateResponse(_Model):
    state: State


class ChannelTokenResponse(_Model):
    token: ChannelToken


class ChannelTokensResponse(_Model):
    tokens: list[ChannelToken]


class CreateChannelBody(_Model):
    type: ChannelType
    state: State | None = None


class CreateChannelTokenBody(_Model):
    state: State = Field(default_factory=dict)
    expires_at: str | None = Field(default=None, alias="expiresAt")


class UpdateChannelTokenBody(_Model):
    state: State
    expires_at: str | None = Field(default=None, alias="expiresAt")


class MessageBody(_Model):
    """A message published to a channel or token: event name plus payload."""

    e: str
    d: Any = None


# Pipe


class Room(_Model):
    id: str
    name: str | None = None
    state: str | None = None
    created_at: str | None = None


class RoomsResponse(_Model):
    rooms: list[Room]
