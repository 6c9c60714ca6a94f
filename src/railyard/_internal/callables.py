"""Detection of asynchronous callables.

Sync combinators that skip their transform (``Err.map``, ``Ok.and_then``,
...) still need to know whether the transform would have produced an
awaitable, so they can hand back an AsyncResult instead of a plain Result.
"""

from __future__ import annotations

import functools
import inspect
from typing import Any

__all__ = ["is_async_callable"]


def is_async_callable(f: Any) -> bool:
    """Return True if calling f produces a coroutine.

    Recognizes ``async def`` functions and methods, ``functools.partial``
    wrappers around them, and objects whose ``__call__`` is ``async def``.
    A plain function that returns an awaitable is not recognized; there is
    no way to tell without calling it.

    Examples:
        >>> async def fetch(x): ...
        >>> is_async_callable(fetch)
        True
        >>> is_async_callable(lambda x: x)
        False
    """
    while isinstance(f, functools.partial):
        f = f.func
    if inspect.iscoroutinefunction(f):
        return True
    if inspect.isfunction(f) or inspect.ismethod(f):
        return False
    return inspect.iscoroutinefunction(getattr(f, "__call__", None))
