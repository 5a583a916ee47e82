"""Prefixed identifiers.

Every ID the API hands out looks like ``<kind>_<opaque>``, e.g.
``deployment_MTIzNDU2``. The client never creates IDs; it only inspects the
prefix to validate arguments and to tell IDs apart from human-readable names.
"""

from __future__ import annotations

from typing import Literal, get_args

from .errors import InvalidIdentifierError

IdKind = Literal[
    "user",
    "team",
    "project",
    "pm",
    "role",
    "pat",
    "ptk",
    "ptkid",
    "deployment",
    "container",
    "gateway",
    "domain",
    "secret",
    "build",
    "pipe_room",
    "leap_token",
    "bearer",
    "sk",
]

ID_KINDS: tuple[str, ...] = get_args(IdKind)

# Longest first so that "leap_token_x" never matches a shorter kind.
_PREFIXES = sorted(ID_KINDS, key=len, reverse=True)


def validate_id(value: object, kind: IdKind) -> bool:
    """Return True when ``value`` is an ID of ``kind``. Never raises."""
    if not isinstance(value, str):
        return False
    prefix = f"{kind}_"
    return value.startswith(prefix) and len(value) > len(prefix)


def assert_id(value: object, kind: IdKind) -> str:
    """Return ``value`` unchanged, or raise InvalidIdentifierError."""
    if not validate_id(value, kind):
        raise InvalidIdentifierError(value, kind)
    return value  # type: ignore[return-value]


def get_id_prefix(value: str) -> IdKind | None:
    """Return the kind tag of ``value``, or None when it is not a known ID."""
    for kind in _PREFIXES:
        if validate_id(value, kind):  # type: ignore[arg-type]
            return kind  # type: ignore[return-value]
    return None


__all__ = ["IdKind", "ID_KINDS", "validate_id", "assert_id", "get_id_prefix"]
