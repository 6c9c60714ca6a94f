"""Result type: Ok[T] | Err[E] for explicit error handling."""

from __future__ import annotations

import inspect
from collections.abc import Awaitable, Callable, Iterable
from typing import TYPE_CHECKING, Any, NoReturn, TypeIs

import msgspec

from railyard._internal.callables import is_async_callable
from railyard._internal.capture import captured_error
from railyard.errors import ContractViolationError, UnhandledException

if TYPE_CHECKING:
    from railyard.async_.result import AsyncResult

__all__ = [
    "Err",
    "Ok",
    "Result",
    "collect",
    "err",
    "first_ok",
    "ok",
    "partition",
    "try_",
]


class Ok[T](msgspec.Struct, frozen=True, gc=False):
    """Success variant of Result containing a value of type T.

    Ok represents the successful outcome of an operation. It wraps a value
    that can be extracted, transformed, or propagated through a chain of
    Result-returning operations.

    Examples:
        >>> ok = Ok(42)
        >>> ok.unwrap()
        42
        >>> ok.map(lambda x: x * 2)
        Ok(value=84)
    """

    value: T

    def is_ok(self) -> TypeIs[Ok[T]]:
        """Return True if the result is Ok.

        This method provides type narrowing - after checking is_ok(),
        the type checker knows the result is Ok[T].
        """
        return True

    def is_err(self) -> TypeIs[Err[Any]]:
        """Return False since this is Ok."""
        return False

    def unwrap(self) -> T:
        """Return the contained Ok value.

        Since this is Ok, this always succeeds.
        """
        return self.value

    def unwrap_or(self, default: T) -> T:  # noqa: ARG002
        """Return the contained Ok value, ignoring the default."""
        return self.value

    def unwrap_or_else(self, f: Callable[[Any], T]) -> T:  # noqa: ARG002
        """Return the contained Ok value, ignoring the fallback function."""
        return self.value

    def unwrap_err(self) -> NoReturn:
        """Raise since Ok has no error.

        Raises:
            ContractViolationError: Always.
        """
        raise ContractViolationError("Called unwrap_err on Ok")

    def expect(self, _msg: str) -> T:
        """Return the contained Ok value, ignoring the message."""
        return self.value

    def map[U](self, f: Callable[[T], U]) -> Ok[U] | AsyncResult[U, Any]:
        """Apply a function to the contained value.

        If f returns an awaitable (an ``async def`` transform), the result
        is lifted into an AsyncResult that resolves to Ok of the awaited
        value.

        Args:
            f: Function to apply to the Ok value.

        Returns:
            Ok containing f(value), or an AsyncResult when f is asynchronous.
        """
        mapped = f(self.value)
        if inspect.isawaitable(mapped):
            from railyard.async_.result import AsyncResult

            return AsyncResult(_ok_after(mapped))
        return Ok(mapped)

    def map_err(self, f: Callable[[Any], Any]) -> Ok[T] | AsyncResult[T, Any]:
        """Return self unchanged since this is Ok.

        An async f still lifts the result into an already-settled AsyncResult.
        """
        if is_async_callable(f):
            from railyard.async_.result import AsyncResult

            return AsyncResult(self)
        return self

    def and_then[U, E](
        self, f: Callable[[T], Result[U, E] | Awaitable[Result[U, E]]]
    ) -> Result[U, E] | AsyncResult[U, E]:
        """Apply a function that returns a Result to the contained value.

        Also known as flatmap or bind. An AsyncResult returned by f is
        passed through; any other awaitable is wrapped in an AsyncResult.

        Args:
            f: Function that takes T and returns Result[U, E].

        Returns:
            The Result returned by f, or an AsyncResult when f is asynchronous.
        """
        chained = f(self.value)
        if inspect.isawaitable(chained):
            from railyard.async_.result import AsyncResult

            if isinstance(chained, AsyncResult):
                return chained
            return AsyncResult(chained)
        return chained

    def or_else(self, f: Callable[[Any], Any]) -> Ok[T] | AsyncResult[T, Any]:
        """Return self unchanged since this is Ok.

        An async f still lifts the result into an already-settled AsyncResult.
        """
        if is_async_callable(f):
            from railyard.async_.result import AsyncResult

            return AsyncResult(self)
        return self

    def match[U](self, *, ok: Callable[[T], U], err: Callable[[Any], U]) -> U:  # noqa: ARG002
        """Call the ok handler with the value and return its result."""
        return ok(self.value)


# Tracked by the gc: error payloads are often exceptions whose tracebacks
# can refer back to the Err holding them.
class Err[E](msgspec.Struct, frozen=True):
    """Error variant of Result containing an error of type E.

    Err represents the failure outcome of an operation. It wraps an error
    value that can be transformed, recovered from, or propagated.

    Examples:
        >>> err = Err("something went wrong")
        >>> err.is_err()
        True
        >>> err.unwrap_or(0)
        0
    """

    error: E

    def is_ok(self) -> TypeIs[Ok[Any]]:
        """Return False since this is Err."""
        return False

    def is_err(self) -> TypeIs[Err[E]]:
        """Return True if the result is Err.

        This method provides type narrowing - after checking is_err(),
        the type checker knows the result is Err[E].
        """
        return True

    def unwrap(self) -> NoReturn:
        """Raise an exception since this is Err.

        Raises:
            ContractViolationError: Always, chained from the error when the
                error is itself an exception.
        """
        if isinstance(self.error, BaseException):
            raise ContractViolationError("Called unwrap on Err") from self.error
        raise ContractViolationError("Called unwrap on Err")

    def unwrap_or[T](self, default: T) -> T:
        """Return the default value since this is Err."""
        return default

    def unwrap_or_else[T](self, f: Callable[[E], T]) -> T:
        """Compute a default value from the error."""
        return f(self.error)

    def unwrap_err(self) -> E:
        """Return the contained error."""
        return self.error

    def expect(self, msg: str) -> NoReturn:
        """Raise an exception with a custom message.

        Args:
            msg: Custom error message.

        Raises:
            ContractViolationError: Always, with the custom message.
        """
        raise ContractViolationError(f"{msg}: {self.error!r}")

    def map(self, f: Callable[[Any], Any]) -> Err[E] | AsyncResult[Any, E]:
        """Return self unchanged since this is Err.

        If f is an async callable, the same Err is returned inside an
        already-settled AsyncResult so async chains keep one shape.
        """
        if is_async_callable(f):
            from railyard.async_.result import AsyncResult

            return AsyncResult(self)
        return self

    def map_err[F](self, f: Callable[[E], F]) -> Err[F] | AsyncResult[Any, F]:
        """Apply a function to the contained error.

        Args:
            f: Function to apply to the error value.

        Returns:
            Err containing f(error), or an AsyncResult when f is asynchronous.
        """
        mapped = f(self.error)
        if inspect.isawaitable(mapped):
            from railyard.async_.result import AsyncResult

            return AsyncResult(_err_after(mapped))
        return Err(mapped)

    def and_then(self, f: Callable[[Any], Any]) -> Err[E] | AsyncResult[Any, E]:
        """Return self unchanged since this is Err.

        If f is an async callable, the same Err is returned inside an
        already-settled AsyncResult.
        """
        if is_async_callable(f):
            from railyard.async_.result import AsyncResult

            return AsyncResult(self)
        return self

    def or_else[T, F](
        self, f: Callable[[E], Result[T, F] | Awaitable[Result[T, F]]]
    ) -> Result[T, F] | AsyncResult[T, F]:
        """Apply a recovery function to the error.

        Args:
            f: Function that takes the error and returns a new Result.

        Returns:
            The Result returned by f, or an AsyncResult when f is asynchronous.
        """
        recovered = f(self.error)
        if inspect.isawaitable(recovered):
            from railyard.async_.result import AsyncResult

            if isinstance(recovered, AsyncResult):
                return recovered
            return AsyncResult(recovered)
        return recovered

    def match[U](self, *, ok: Callable[[Any], U], err: Callable[[E], U]) -> U:  # noqa: ARG002
        """Call the err handler with the error and return its result."""
        return err(self.error)


type Result[T, E = Exception] = Ok[T] | Err[E]


async def _ok_after[T](awaitable: Awaitable[T]) -> Ok[T]:
    return Ok(await awaitable)


async def _err_after[E](awaitable: Awaitable[E]) -> Err[E]:
    return Err(await awaitable)


def ok[T](value: T) -> Ok[T]:
    """Create a success Result.

    Examples:
        >>> ok(42)
        Ok(value=42)
    """
    return Ok(value)


def err[E](error: E) -> Err[E]:
    """Create a failure Result.

    Examples:
        >>> err("not found")
        Err(error='not found')
    """
    return Err(error)


def try_[T, E](
    fn: Callable[[], T],
    *,
    catch: Callable[[Exception], E] | None = None,
) -> Ok[T] | Err[E] | Err[UnhandledException]:
    """Call a function and capture any exception it raises as an Err.

    Args:
        fn: Zero-argument function to call.
        catch: Transform from the raised exception to the error value. When
            omitted, the exception is wrapped in an UnhandledException whose
            ``cause`` is the original exception.

    Returns:
        Ok(fn()) on success, otherwise the Err described above. Exceptions
        are never re-raised; BaseException subclasses outside Exception
        (KeyboardInterrupt, cancellation) are not captured.

    Examples:
        >>> try_(lambda: int("42"))
        Ok(value=42)
        >>> try_(lambda: int("x"), catch=lambda e: type(e).__name__)
        Err(error='ValueError')
    """
    try:
        return Ok(fn())
    except Exception as cause:
        return Err(captured_error("try_", cause, catch))


def _needs_async(results: list[Any]) -> bool:
    """Return True if any element is still awaitable.

    Raises:
        TypeError: If an element is neither a Result nor awaitable.
    """
    pending = False
    for result in results:
        if isinstance(result, Ok | Err):
            continue
        if not inspect.isawaitable(result):
            raise TypeError(f"Expected a Result or an awaitable of one, got {result!r}")
        pending = True
    return pending


def _require_settled(results: list[Any]) -> list[Any]:
    for result in results:
        if not isinstance(result, Ok | Err):
            raise TypeError(f"Expected a Result, got {result!r}")
    return results


def collect[T, E](
    results: Iterable[Result[T, E]] | Iterable[Any],
) -> Result[list[T], E] | AsyncResult[list[T], E]:
    """Collect an iterable of Results into a Result of list.

    This is the ``all`` combinator of other Result libraries, named after
    the builtin it would otherwise shadow. Short-circuits on the first Err
    encountered, returning that same Err instance. If any element is an
    AsyncResult or other awaitable, the collection is delegated to
    ``AsyncResult.collect``.

    Args:
        results: An iterable of Result values.

    Returns:
        Ok(list[T]) if all results are Ok, otherwise the first Err.

    Raises:
        TypeError: If an element is neither a Result nor awaitable.

    Examples:
        >>> collect([Ok(1), Ok(2), Ok(3)])
        Ok(value=[1, 2, 3])
        >>> collect([Ok(1), Err("fail"), Ok(3)])
        Err(error='fail')
    """
    items = list(results)
    if _needs_async(items):
        from railyard.async_.result import AsyncResult

        return AsyncResult.collect(items)

    values: list[T] = []
    for result in items:
        if isinstance(result, Err):
            return result
        values.append(result.value)
    return Ok(values)


def partition[T, E](
    results: Iterable[Result[T, E]] | Iterable[Any],
) -> Result[list[T], list[E]] | AsyncResult[list[T], list[E]]:
    """Collect all values, or all errors if there is at least one.

    Unlike collect, the whole input is always consumed.

    Args:
        results: An iterable of Result values.

    Returns:
        Ok(list[T]) if every result is Ok, otherwise Err(list[E]) holding
        every error in input order.

    Examples:
        >>> partition([Ok(1), Err("a"), Ok(2), Err("b")])
        Err(error=['a', 'b'])
    """
    items = list(results)
    if _needs_async(items):
        from railyard.async_.result import AsyncResult

        return AsyncResult.partition(items)

    values: list[T] = []
    errors: list[E] = []
    for result in items:
        if isinstance(result, Ok):
            values.append(result.value)
        else:
            errors.append(result.error)
    if errors:
        return Err(errors)
    return Ok(values)


def first_ok[T, E](
    results: Iterable[Result[T, E]] | Iterable[Any],
) -> Result[T, E] | AsyncResult[T, E]:
    """Return the first Ok, or the last Err if every result failed.

    Note the asymmetry with collect: when nothing succeeds the *last* error
    is returned, not the first, as it carries the most recent failure.

    Args:
        results: A non-empty iterable of Result values.

    Returns:
        The first Ok instance, else the last Err instance.

    Raises:
        ContractViolationError: If results is empty.

    Examples:
        >>> first_ok([Err("a"), Ok(42), Err("b")])
        Ok(value=42)
        >>> first_ok([Err("a"), Err("b"), Err("c")])
        Err(error='c')
    """
    items = list(results)
    if _needs_async(items):
        from railyard.async_.result import AsyncResult

        return AsyncResult.first_ok(items)

    last_err: Err[E] | None = None
    for result in items:
        if isinstance(result, Ok):
            return result
        last_err = result
    if last_err is None:
        raise ContractViolationError("first_ok called with an empty sequence")
    return last_err
