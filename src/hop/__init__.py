"""Python SDK for the Hop platform API."""

from ._auth import Authorization, AuthType, get_auth_header, get_auth_type
from ._client import AsyncAPIClient, SyncAPIClient
from ._endpoints import ENDPOINTS, Endpoint, get_endpoint
from ._http import DEFAULT_BASE_URL
from ._ids import ID_KINDS, IdKind, assert_id, get_id_prefix, validate_id
from ._utils import parse_size
from .client import AsyncHop, Hop
from .errors import (
    APIError,
    HopError,
    InvalidArgumentError,
    InvalidIdentifierError,
    MissingPathParameterError,
    NetworkError,
)
from .version import __version__

__all__ = [
    "__version__",
    "Hop",
    "AsyncHop",
    "SyncAPIClient",
    "AsyncAPIClient",
    "Authorization",
    "AuthType",
    "get_auth_type",
    "get_auth_header",
    "Endpoint",
    "ENDPOINTS",
    "get_endpoint",
    "DEFAULT_BASE_URL",
    "IdKind",
    "ID_KINDS",
    "validate_id",
    "assert_id",
    "get_id_prefix",
    "parse_size",
    "HopError",
    "InvalidArgumentError",
    "InvalidIdentifierError",
    "MissingPathParameterError",
    "APIError",
    "NetworkError",
]
