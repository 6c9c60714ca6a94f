"""AsyncResult type for async-aware Result operations.

AsyncResult wraps an Awaitable[Result[T, E]] and provides the same
combinators as Result, each returning a new AsyncResult that composes
cleanly in async contexts.

Example:
    ```python
    async def fetch_user(id: int) -> Result[User, Error]:
        ...

    # Chain async operations
    result = await (
        AsyncResult(fetch_user(1))
        .and_then(validate_user)
        .map(format_response)
    )
    ```
"""

from __future__ import annotations

import inspect
from collections.abc import Awaitable, Callable, Coroutine, Generator, Iterable
from typing import Any

import aiologic
import anyio

from railyard._internal.capture import captured_error
from railyard.errors import UnhandledException
from railyard.types import result as sync_result
from railyard.types.result import Err, Ok, Result, _require_settled

__all__ = ["AsyncResult", "err_async", "ok_async", "try_async"]


async def _settle(value: Any) -> Any:
    """Await value until something that is not awaitable comes out."""
    while inspect.isawaitable(value):
        value = await value
    return value


class AsyncResult[T, E]:
    """Async-aware Result wrapper for composing async Result operations.

    AsyncResult holds an Awaitable[Result[T, E]] and provides methods
    for transforming and chaining async operations that produce Results.
    Every combinator returns a new AsyncResult; nothing runs until the
    chain is awaited.

    The wrapped awaitable is resolved at most once. The outcome (or the
    exception raised while resolving) is cached, so an AsyncResult can be
    awaited any number of times, concurrently or not, and several chains
    can branch from it.

    Attributes:
        _source: The pending awaitable, dropped once resolved.
        _outcome: The cached Result once resolved.

    Example:
        ```python
        async def get_data() -> Result[int, str]:
            return Ok(42)

        async def main():
            result = await AsyncResult(get_data()).map(lambda x: x * 2)
            assert result == Ok(84)
        ```
    """

    __slots__ = ("_fault", "_lock", "_outcome", "_source")

    def __init__(self, awaitable: Awaitable[Result[T, E]] | Result[T, E]) -> None:
        """Create an AsyncResult from an awaitable or an already-settled Result.

        Args:
            awaitable: An awaitable that produces a Result[T, E], or a Result.
        """
        self._fault: Exception | None = None
        self._lock = aiologic.Lock()
        if isinstance(awaitable, Ok | Err):
            self._source: Awaitable[Result[T, E]] | None = None
            self._outcome: Result[T, E] | None = awaitable
        else:
            self._source = awaitable
            self._outcome = None

    def __await__(self) -> Generator[Any, Any, Result[T, E]]:
        """Support await syntax to get the underlying Result."""
        return self._resolve().__await__()

    async def _resolve(self) -> Result[T, E]:
        if self._outcome is None and self._fault is None:
            async with self._lock:
                if self._outcome is None and self._fault is None:
                    try:
                        outcome = await _settle(self._source)
                        if not isinstance(outcome, Ok | Err):
                            raise TypeError(
                                f"AsyncResult source resolved to a non-Result: {outcome!r}"
                            )
                        self._outcome = outcome
                    except Exception as exc:
                        self._fault = exc
                    self._source = None
        if self._fault is not None:
            raise self._fault
        return self._outcome  # type: ignore[return-value]

    def is_resolved(self) -> bool:
        """Return True once the outcome (or a fault) has been cached."""
        return self._outcome is not None or self._fault is not None

    @classmethod
    def from_ok(cls, value: T) -> AsyncResult[T, Any]:
        """Create an already-settled AsyncResult containing Ok(value)."""
        return cls(Ok(value))

    @classmethod
    def from_err(cls, error: E) -> AsyncResult[Any, E]:
        """Create an already-settled AsyncResult containing Err(error)."""
        return cls(Err(error))

    @classmethod
    def from_result(cls, result: Result[T, E]) -> AsyncResult[T, E]:
        """Create an already-settled AsyncResult from a synchronous Result.

        Awaiting it returns the very same Result instance.
        """
        return cls(result)

    def map[U](self, f: Callable[[T], U | Awaitable[U]]) -> AsyncResult[U, E]:
        """Apply a sync or async function to the Ok value.

        If the underlying Result is Ok, applies f to the value and awaits
        the outcome when f is asynchronous. If Err, the same Err is kept.

        Example:
            ```python
            async def example():
                result = await AsyncResult.from_ok(5).map(lambda x: x * 2)
                assert result == Ok(10)
            ```
        """

        async def _mapped() -> Result[U, E]:
            result = await self
            if isinstance(result, Ok):
                mapped = f(result.value)
                if inspect.isawaitable(mapped):
                    mapped = await mapped
                return Ok(mapped)
            return result

        return AsyncResult(_mapped())

    def map_err[F](self, f: Callable[[E], F | Awaitable[F]]) -> AsyncResult[T, F]:
        """Apply a sync or async function to the Err value.

        If Ok, the same Ok is kept.
        """

        async def _mapped() -> Result[T, F]:
            result = await self
            if isinstance(result, Err):
                mapped = f(result.error)
                if inspect.isawaitable(mapped):
                    mapped = await mapped
                return Err(mapped)
            return result

        return AsyncResult(_mapped())

    def and_then[U, F](
        self,
        f: Callable[[T], Result[U, F] | Awaitable[Result[U, F]]],
    ) -> AsyncResult[U, E | F]:
        """Chain with a function returning a Result, AsyncResult or awaitable.

        If Ok, calls f(value) and resolves whatever it returns into a single
        Result (no nesting). If Err, the same Err is kept and f is not called.

        Example:
            ```python
            def validate(x: int) -> Result[int, str]:
                return Ok(x) if x > 0 else Err("not positive")

            async def example():
                result = await AsyncResult.from_ok(5).and_then(validate)
                assert result == Ok(5)
            ```
        """

        async def _chained() -> Result[U, E | F]:
            result = await self
            if isinstance(result, Ok):
                return await _settle(f(result.value))
            return result

        return AsyncResult(_chained())

    def or_else[F](
        self,
        f: Callable[[E], Result[T, F] | Awaitable[Result[T, F]]],
    ) -> AsyncResult[T, F]:
        """Recover from an Err with a function returning a Result or awaitable.

        If Ok, the same Ok is kept and f is not called.
        """

        async def _recovered() -> Result[T, F]:
            result = await self
            if isinstance(result, Err):
                return await _settle(f(result.error))
            return result

        return AsyncResult(_recovered())

    def match[U](
        self,
        *,
        ok: Callable[[T], U | Awaitable[U]],
        err: Callable[[E], U | Awaitable[U]],
    ) -> Coroutine[Any, Any, U]:
        """Pattern match on the resolved Result.

        Handlers may be sync or async.

        Returns:
            Coroutine that produces the result of the matching handler.
        """

        async def _matched() -> U:
            result = await self
            if isinstance(result, Ok):
                handled = ok(result.value)
            else:
                handled = err(result.error)
            if inspect.isawaitable(handled):
                return await handled
            return handled

        return _matched()

    def unwrap_or(self, default: T) -> Coroutine[Any, Any, T]:
        """Unwrap with a default value.

        Returns:
            Coroutine that produces the Ok value or the default.
        """

        async def _unwrap() -> T:
            result = await self
            return result.unwrap_or(default)

        return _unwrap()

    def unwrap_or_else(self, f: Callable[[E], T]) -> Coroutine[Any, Any, T]:
        """Unwrap with a function to compute the default from the error.

        Returns:
            Coroutine that produces the Ok value or f(error).
        """

        async def _unwrap() -> T:
            result = await self
            return result.unwrap_or_else(f)

        return _unwrap()

    # --- Collections ---

    @staticmethod
    def collect(
        results: Iterable[AsyncResult[T, E] | Awaitable[Result[T, E]] | Result[T, E]],
        *,
        limit: int | None = None,
    ) -> AsyncResult[list[T], E]:
        """Resolve every element concurrently, then collect as ``collect`` does.

        The output keeps input order regardless of completion order; the
        first Err by position is returned as the same instance.

        Args:
            results: AsyncResults, awaitables of Results, or plain Results.
            limit: Maximum number of elements resolving at once. None means
                all of them.
        """
        pending = list(results)

        async def _collected() -> Result[list[T], E]:
            return sync_result.collect(await _gather(pending, limit))

        return AsyncResult(_collected())

    @staticmethod
    def partition(
        results: Iterable[AsyncResult[T, E] | Awaitable[Result[T, E]] | Result[T, E]],
        *,
        limit: int | None = None,
    ) -> AsyncResult[list[T], list[E]]:
        """Resolve every element concurrently, then partition as ``partition`` does."""
        pending = list(results)

        async def _partitioned() -> Result[list[T], list[E]]:
            return sync_result.partition(await _gather(pending, limit))

        return AsyncResult(_partitioned())

    @staticmethod
    def first_ok(
        results: Iterable[AsyncResult[T, E] | Awaitable[Result[T, E]] | Result[T, E]],
        *,
        limit: int | None = None,
    ) -> AsyncResult[T, E]:
        """Resolve every element concurrently, then pick as ``first_ok`` does.

        Returns the first Ok by position, else the last Err. Awaiting the
        result raises ContractViolationError when results is empty.
        """
        pending = list(results)

        async def _first() -> Result[T, E]:
            return sync_result.first_ok(await _gather(pending, limit))

        return AsyncResult(_first())

    @staticmethod
    def try_async[U, F](
        fn: Callable[[], Awaitable[U]] | Awaitable[U],
        *,
        catch: Callable[[Exception], F] | None = None,
    ) -> AsyncResult[U, F] | AsyncResult[U, UnhandledException]:
        """Await a computation and capture any exception it raises as an Err.

        See ``try_async``.
        """
        return try_async(fn, catch=catch)

    def __repr__(self) -> str:
        if self._outcome is not None:
            return f"AsyncResult({self._outcome!r})"
        if self._fault is not None:
            return f"AsyncResult(<raised {self._fault!r}>)"
        return "AsyncResult(<pending>)"


async def _gather[T, E](
    pending: list[AsyncResult[T, E] | Awaitable[Result[T, E]] | Result[T, E]],
    limit: int | None,
) -> list[Result[T, E]]:
    """Start every unresolved element in one task group; keep input order.

    Raises:
        TypeError: If an element resolves to something other than a Result.
    """
    outcomes: list[Any] = list(pending)
    limiter = aiologic.CapacityLimiter(limit) if limit is not None else None

    async def resolve(index: int, awaitable: Awaitable[Result[T, E]]) -> None:
        if limiter is None:
            outcomes[index] = await _settle(awaitable)
            return
        async with limiter:
            outcomes[index] = await _settle(awaitable)

    async with anyio.create_task_group() as tg:
        for index, item in enumerate(pending):
            if not isinstance(item, Ok | Err):
                tg.start_soon(resolve, index, item)

    return _require_settled(outcomes)


def ok_async[T](value: T) -> AsyncResult[T, Any]:
    """Create a success AsyncResult.

    Examples:
        >>> ok_async(42)
        AsyncResult(Ok(value=42))
    """
    return AsyncResult(Ok(value))


def err_async[E](error: E) -> AsyncResult[Any, E]:
    """Create a failure AsyncResult.

    Examples:
        >>> err_async("not found")
        AsyncResult(Err(error='not found'))
    """
    return AsyncResult(Err(error))


def try_async[T, E](
    fn: Callable[[], Awaitable[T]] | Awaitable[T],
    *,
    catch: Callable[[Exception], E] | None = None,
) -> AsyncResult[T, E] | AsyncResult[T, UnhandledException]:
    """Await a computation and capture any exception it raises as an Err.

    The async counterpart of ``try_``. The computation starts when the
    returned AsyncResult is first awaited.

    Args:
        fn: Zero-argument callable returning an awaitable, or the awaitable
            itself.
        catch: Transform from the raised exception to the error value. When
            omitted, the exception is wrapped in an UnhandledException whose
            ``cause`` is the original exception.

    Returns:
        AsyncResult resolving to Ok(value), or to the Err described above.
        Exceptions raised when calling fn or while awaiting are never
        re-raised.

    Example:
        ```python
        result = await try_async(
            lambda: client.get(url),
            catch=lambda e: FetchError(cause=e),
        )
        ```
    """

    async def _attempt() -> Result[T, Any]:
        try:
            awaitable = fn() if callable(fn) else fn
            return Ok(await awaitable)
        except Exception as cause:
            return Err(captured_error("try_async", cause, catch))

    return AsyncResult(_attempt())
