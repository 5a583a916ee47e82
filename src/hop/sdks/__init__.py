"""Per-product SDK classes."""

from .channels import AsyncChannels, Channels
from .ignite import AsyncIgnite, Ignite
from .pipe import AsyncPipe, Pipe
from .projects import AsyncProjects, Projects
from .registry import AsyncRegistry, Registry
from .users import AsyncUsers, Users

__all__ = [
    "Ignite",
    "AsyncIgnite",
    "Users",
    "AsyncUsers",
    "Projects",
    "AsyncProjects",
    "Registry",
    "AsyncRegistry",
    "Channels",
    "AsyncChannels",
    "Pipe",
    "AsyncPipe",
]
