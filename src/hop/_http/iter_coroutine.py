"""Drive non-suspending coroutines from synchronous code."""

from __future__ import annotations

import typing

_T = typing.TypeVar("_T")


def iter_coroutine(coro: typing.Coroutine[None, None, _T]) -> _T:
    """
    Run ``coro`` to completion without an event loop.

    The sync SDK classes share their request logic with the async ones. Over a
    BlockingTransport that logic never awaits anything that suspends, so a
    single ``send(None)`` finishes it.

    Raises:
        RuntimeError: If the coroutine yields, which means it was handed an
            async transport.
    """
    try:
        coro.send(None)
    except StopIteration as ex:
        return ex.value  # type: ignore [no-any-return]
    else:
        raise RuntimeError(f"coroutine {coro!r} suspended; use the async client instead")
    finally:
        coro.close()


__all__ = ["iter_coroutine"]
