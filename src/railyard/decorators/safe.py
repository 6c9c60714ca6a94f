"""@safe and @safe_async decorators for catching exceptions."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Any, overload

import wrapt

from railyard.async_.result import AsyncResult, try_async
from railyard.errors import UnhandledException
from railyard.types.result import Err, Ok, try_

__all__ = ["safe", "safe_async"]


@overload
def safe[**P, T](
    func: Callable[P, T],
) -> Callable[P, Ok[T] | Err[UnhandledException]]: ...


@overload
def safe[**P, T, E](
    func: None = None,
    *,
    catch: Callable[[Exception], E] | None = None,
) -> Callable[[Callable[P, T]], Callable[P, Ok[T] | Err[E]]]: ...


def safe[**P, T](
    func: Callable[P, T] | None = None,
    *,
    catch: Callable[[Exception], Any] | None = None,
) -> Any:
    """Decorator that captures exceptions as Err, like ``try_``.

    Wraps a function so that it returns Ok(value) on success and an Err
    built the way ``try_`` builds it if an exception is raised.

    Can be used with or without arguments:
        @safe
        def risky(): ...

        @safe(catch=lambda e: ParseError(cause=e))
        def parse(): ...

    Args:
        func: The function to wrap (when used without parentheses).
        catch: Transform from the raised exception to the error value.

    Returns:
        A wrapped function that returns Result[T, E] instead of T.

    Example:
        ```python
        @safe
        def divide(a: int, b: int) -> float:
            return a / b
        divide(10, 2)
        # Ok(value=5.0)
        divide(10, 0).unwrap_err().cause
        # ZeroDivisionError('division by zero')
        ```
    """

    @wrapt.decorator
    def wrapper(
        wrapped: Callable[P, T],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Ok[T] | Err[Any]:
        return try_(lambda: wrapped(*args, **kwargs), catch=catch)

    if func is not None:
        return wrapper(func)
    return wrapper


@overload
def safe_async[**P, T](
    func: Callable[P, Awaitable[T]],
) -> Callable[P, AsyncResult[T, UnhandledException]]: ...


@overload
def safe_async[**P, T, E](
    func: None = None,
    *,
    catch: Callable[[Exception], E] | None = None,
) -> Callable[[Callable[P, Awaitable[T]]], Callable[P, AsyncResult[T, E]]]: ...


def safe_async[**P, T](
    func: Callable[P, Awaitable[T]] | None = None,
    *,
    catch: Callable[[Exception], Any] | None = None,
) -> Any:
    """Async decorator that captures exceptions as Err, like ``try_async``.

    Each call returns an AsyncResult; the wrapped coroutine function runs
    when that AsyncResult is first awaited.

    Example:
        ```python
        @safe_async
        async def fetch(url: str) -> str:
            return await http_get(url)

        result = await fetch("https://example.com").map(len)
        ```
    """

    @wrapt.decorator
    def wrapper(
        wrapped: Callable[P, Awaitable[T]],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> AsyncResult[T, Any]:
        return try_async(lambda: wrapped(*args, **kwargs), catch=catch)

    if func is not None:
        return wrapper(func)
    return wrapper
