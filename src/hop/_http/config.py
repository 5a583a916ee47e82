"""HTTP configuration for Hop API clients."""

from __future__ import annotations

import os
import platform
import sys
from dataclasses import dataclass, field

from ..version import __version__

DEFAULT_BASE_URL = "https://api.hop.io"
# None disables the httpx timeout; deadlines belong to the caller.
DEFAULT_TIMEOUT: float | None = None

USER_AGENT = (
    f"hop-py/{__version__} (Python/{sys.version_info.major}.{sys.version_info.minor}; "
    f"{platform.system()}/{platform.machine()})"
)


@dataclass(frozen=True)
class HTTPConfig:
    """Configuration for HTTP requests to the Hop API."""

    base_url: str = DEFAULT_BASE_URL
    timeout: float | None = DEFAULT_TIMEOUT
    default_headers: dict[str, str] = field(default_factory=dict)

    def get_headers(self, auth_header: tuple[str, str]) -> dict[str, str]:
        """Build request headers with the resolved authorization header."""
        name, value = auth_header
        return {
            name: value,
            "accept": "application/json",
            "content-type": "application/json",
            "user-agent": USER_AGENT,
            **self.default_headers,
        }

    def build_url(self, path: str) -> str:
        return self.base_url.rstrip("/") + path


def resolve_base_url(base_url: str | None) -> str:
    """Resolve the API base URL from argument or environment."""
    return base_url or os.getenv("HOP_API_URL") or DEFAULT_BASE_URL


__all__ = [
    "HTTPConfig",
    "DEFAULT_BASE_URL",
    "DEFAULT_TIMEOUT",
    "USER_AGENT",
    "resolve_base_url",
]
