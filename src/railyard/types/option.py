"""Option type: Some[T] | Nothing for optional values."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any, NoReturn, TypeIs

import msgspec

from railyard.errors import ContractViolationError
from railyard.types.result import Err, Ok

__all__ = [
    "Nothing",
    "NothingType",
    "Option",
    "Some",
    "all_some",
    "first_some",
    "from_optional",
    "from_predicate",
    "nothing",
    "some",
]


class Some[T](msgspec.Struct, frozen=True, gc=False):
    """Some variant of Option containing a value of type T.

    Some represents the presence of a value. It wraps a value that can be
    extracted, transformed, or propagated through a chain of Option-returning
    operations.

    Examples:
        >>> some = Some(42)
        >>> some.unwrap()
        42
        >>> some.map(lambda x: x * 2)
        Some(value=84)
    """

    value: T

    def is_some(self) -> TypeIs[Some[T]]:
        """Return True if the option is Some.

        This method provides type narrowing - after checking is_some(),
        the type checker knows the option is Some[T].
        """
        return True

    def is_none(self) -> TypeIs[NothingType]:
        """Return False since this is Some."""
        return False

    def unwrap(self) -> T:
        """Return the contained Some value."""
        return self.value

    def unwrap_or(self, default: T) -> T:  # noqa: ARG002
        """Return the contained Some value, ignoring the default."""
        return self.value

    def unwrap_or_else(self, f: Callable[[], T]) -> T:  # noqa: ARG002
        """Return the contained Some value, ignoring the fallback function."""
        return self.value

    def map[U](self, f: Callable[[T], U]) -> Some[U]:
        """Apply a function to the contained value.

        Args:
            f: Function to apply to the Some value.

        Returns:
            Some containing the result of applying f to the value.
        """
        return Some(f(self.value))

    def and_then[U](
        self, f: Callable[[T], Some[U] | NothingType]
    ) -> Some[U] | NothingType:
        """Apply a function that returns an Option to the contained value.

        Also known as flatmap or bind.
        """
        return f(self.value)

    def or_else(self, _f: Callable[[], Some[T] | NothingType]) -> Some[T]:
        """Return self unchanged since this is Some."""
        return self

    def filter(self, predicate: Callable[[T], bool]) -> Some[T] | NothingType:
        """Return self if the predicate holds, else Nothing."""
        if predicate(self.value):
            return self
        return Nothing

    def match[U](self, *, some: Callable[[T], U], none: Callable[[], U]) -> U:  # noqa: ARG002
        """Call the some handler with the value and return its result."""
        return some(self.value)

    def to_optional(self) -> T | None:
        """Return the contained value."""
        return self.value

    def zip[U](self, other: Some[U] | NothingType) -> Some[tuple[T, U]] | NothingType:
        """Combine two Some values into a tuple.

        If both are Some, returns Some((self.value, other.value)).
        If other is Nothing, returns Nothing.
        """
        if isinstance(other, Some):
            return Some((self.value, other.value))
        return Nothing

    def ok_or[E](self, _err: E) -> Ok[T]:
        """Convert to Result, returning Ok(value)."""
        return Ok(self.value)


class NothingType(msgspec.Struct, frozen=True, gc=False):
    """Nothing variant of Option representing absence of a value.

    This is a singleton - use the `Nothing` constant instead of
    instantiating directly.

    Examples:
        >>> Nothing.is_none()
        True
        >>> Nothing.unwrap_or(0)
        0
    """

    def is_some(self) -> TypeIs[Some[Any]]:
        """Return False since this is Nothing."""
        return False

    def is_none(self) -> TypeIs[NothingType]:
        """Return True if the option is Nothing."""
        return True

    def unwrap(self) -> NoReturn:
        """Raise an exception since this is Nothing.

        Raises:
            ContractViolationError: Always, since Nothing has no value to unwrap.
        """
        raise ContractViolationError("Called unwrap on Nothing")

    def unwrap_or[T](self, default: T) -> T:
        """Return the default value since this is Nothing."""
        return default

    def unwrap_or_else[T](self, f: Callable[[], T]) -> T:
        """Compute and return a default value since this is Nothing."""
        return f()

    def map(self, _f: Callable[[Any], Any]) -> NothingType:
        """Return Nothing since there's no value to map."""
        return self

    def and_then(self, _f: Callable[[Any], Any]) -> NothingType:
        """Return Nothing since there's no value to bind."""
        return self

    def or_else[T](
        self, f: Callable[[], Some[T] | NothingType]
    ) -> Some[T] | NothingType:
        """Return the Option produced by the fallback function."""
        return f()

    def filter(self, _predicate: Callable[[Any], bool]) -> NothingType:
        """Return Nothing since there's no value to filter."""
        return self

    def match[U](self, *, some: Callable[[Any], U], none: Callable[[], U]) -> U:  # noqa: ARG002
        """Call the none handler and return its result."""
        return none()

    def to_optional(self) -> None:
        """Return None."""
        return None

    def zip(self, _other: Some[Any] | NothingType) -> NothingType:
        """Return Nothing since self is Nothing."""
        return self

    def ok_or[E](self, err: E) -> Err[E]:
        """Convert to Result, returning Err(err)."""
        return Err(err)


Nothing: NothingType = NothingType()
"""Singleton instance representing the absence of a value."""


type Option[T] = Some[T] | NothingType


def some[T](value: T) -> Some[T]:
    """Create a Some Option."""
    return Some(value)


def nothing() -> NothingType:
    """Return the Nothing singleton."""
    return Nothing


def from_optional[T](value: T | None) -> Some[T] | NothingType:
    """Create an Option from a value that may be None.

    Examples:
        >>> from_optional(3)
        Some(value=3)
        >>> from_optional(None) is Nothing
        True
    """
    if value is None:
        return Nothing
    return Some(value)


def from_predicate[T](value: T, predicate: Callable[[T], bool]) -> Some[T] | NothingType:
    """Return Some(value) if predicate(value) holds, else Nothing."""
    if predicate(value):
        return Some(value)
    return Nothing


def all_some[T](options: Iterable[Some[T] | NothingType]) -> Some[list[T]] | NothingType:
    """Collect an iterable of Options into an Option of list.

    Short-circuits on the first Nothing, returning that same instance.

    Examples:
        >>> all_some([Some(1), Some(2)])
        Some(value=[1, 2])
    """
    values: list[T] = []
    for option in options:
        if isinstance(option, NothingType):
            return option
        values.append(option.value)
    return Some(values)


def first_some[T](options: Iterable[Some[T] | NothingType]) -> Some[T] | NothingType:
    """Return the first Some, or Nothing if there is none."""
    for option in options:
        if isinstance(option, Some):
            return option
    return Nothing
