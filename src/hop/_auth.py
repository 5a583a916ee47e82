"""Authorization resolution.

Three credential kinds are accepted and told apart by prefix:

- ``bearer_...``  interactive user session token
- ``pat_...``     personal access token (user scoped)
- ``sk_...`` / ``ptk_...``  project secret key (project scoped)
"""

from __future__ import annotations

import enum
import os
from dataclasses import dataclass

from .errors import InvalidArgumentError


class AuthType(str, enum.Enum):
    BEARER = "bearer"
    PAT = "pat"
    SK = "sk"


_PREFIX_TO_TYPE: dict[str, AuthType] = {
    "bearer_": AuthType.BEARER,
    "pat_": AuthType.PAT,
    "sk_": AuthType.SK,
    "ptk_": AuthType.SK,
}


def get_auth_type(credential: str) -> AuthType:
    """Classify a credential by its prefix."""
    if isinstance(credential, str):
        for prefix, auth_type in _PREFIX_TO_TYPE.items():
            if credential.startswith(prefix) and len(credential) > len(prefix):
                return auth_type
    raise InvalidArgumentError(
        "Authorization must be a bearer token (bearer_...), a personal access "
        "token (pat_...) or a project secret key (sk_... or ptk_...)"
    )


def get_auth_header(credential: str) -> tuple[str, str]:
    """Return the (name, value) header pair to send with every request."""
    if get_auth_type(credential) is AuthType.SK:
        return "authorization", credential
    return "authorization", f"Bearer {credential}"


def require_credential(credential: str | None) -> str:
    """Resolve credential from argument or environment, raising if not found."""
    resolved = credential or os.getenv("HOP_TOKEN")
    if not resolved:
        raise InvalidArgumentError(
            "Missing Hop credential. Pass authorization=... or set HOP_TOKEN."
        )
    return resolved


@dataclass(frozen=True)
class Authorization:
    """A resolved credential. Immutable for the lifetime of a client."""

    credential: str
    type: AuthType

    @classmethod
    def resolve(cls, credential: str | None = None) -> Authorization:
        resolved = require_credential(credential)
        return cls(credential=resolved, type=get_auth_type(resolved))

    @property
    def header(self) -> tuple[str, str]:
        return get_auth_header(self.credential)

    def __repr__(self) -> str:
        return f"Authorization(type={self.type.value!r})"


__all__ = [
    "AuthType",
    "Authorization",
    "get_auth_type",
    "get_auth_header",
    "require_credential",
]
