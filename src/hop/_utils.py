"""Small helpers shared by the SDK classes."""

from __future__ import annotations

import re

from .errors import InvalidArgumentError

_SIZE_RE = re.compile(r"^\s*(\d+(?:\.\d+)?)\s*(b|kb|mb|gb)\s*$", re.IGNORECASE)

_UNITS = {
    "b": 1,
    "kb": 1024,
    "mb": 1024**2,
    "gb": 1024**3,
}


def parse_size(size: str | int) -> int:
    """Convert a size such as ``"512mb"`` or ``"1GB"`` to bytes.

    Units are binary (1kb = 1024 bytes). Integers are taken as bytes.
    """
    if isinstance(size, bool):
        raise InvalidArgumentError(f"Invalid size: {size!r}")
    if isinstance(size, int):
        return size
    match = _SIZE_RE.match(size) if isinstance(size, str) else None
    if match is None:
        raise InvalidArgumentError(
            f"Invalid size: {size!r}. Use a number followed by b, kb, mb or gb."
        )
    amount, unit = match.groups()
    return int(float(amount) * _UNITS[unit.lower()])


__all__ = ["parse_size"]
