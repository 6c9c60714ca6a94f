"""Error types: contract violations, captured-fault wrapper, and TaggedError."""

from __future__ import annotations

import traceback
from typing import Any, ClassVar

import msgspec

__all__ = [
    "ContractViolationError",
    "TaggedError",
    "UnhandledException",
]


class ContractViolationError(RuntimeError):
    """A programmer error inside the algebra.

    Raised by ``unwrap`` on Err, ``unwrap_err`` on Ok, ``first_ok`` on an
    empty sequence and similar misuse. Never produced as an Err value.
    """


class UnhandledException(Exception):  # noqa: N818
    """Default error for faults captured without a ``catch`` handler.

    The original exception is kept as-is in ``cause`` and ``__cause__`` so
    the chain stays inspectable.

    Examples:
        >>> exc = UnhandledException(ValueError("boom"))
        >>> exc.cause
        ValueError('boom')
        >>> str(exc)
        'Unexpected exception'
    """

    def __init__(self, cause: BaseException, message: str = "Unexpected exception") -> None:
        super().__init__(message)
        self.cause = cause
        self.__cause__ = cause

    @property
    def message(self) -> str:
        return str(self)


# --- TaggedError ---


class TaggedError(Exception):
    """Base class for discriminated exceptions with typed props.

    Each subclass carries a ``_tag`` discriminant, given as a class keyword
    or defaulting to the class name. Keyword props passed to the constructor
    become read-only attributes. A ``message`` prop becomes the exception
    message (the tag otherwise) and a ``cause`` prop that is an exception
    becomes ``__cause__``.

    Examples:
        >>> class CreateRepoError(TaggedError, tag="CreateRepoError"):
        ...     repo_name: str
        >>> exc = CreateRepoError(repo_name="api", message="already exists")
        >>> exc._tag, exc.repo_name, str(exc)
        ('CreateRepoError', 'api', 'already exists')
    """

    _tag: ClassVar[str] = "TaggedError"

    def __init_subclass__(cls, *, tag: str | None = None, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        cls._tag = tag if tag is not None else cls.__name__

    def __init__(self, **props: Any) -> None:
        message = props.get("message")
        super().__init__(message if isinstance(message, str) else self._tag)
        cause = props.get("cause")
        if isinstance(cause, BaseException):
            self.__cause__ = cause
        object.__setattr__(self, "_props", props)

    def __getattr__(self, name: str) -> Any:
        props = self.__dict__.get("_props", {})
        if name in props:
            return props[name]
        raise AttributeError(f"{type(self).__name__!s} has no attribute {name!r}")

    def __setattr__(self, name: str, value: Any) -> None:
        if name in self.__dict__.get("_props", {}):
            raise AttributeError(f"cannot assign to field {name!r}")
        super().__setattr__(name, value)

    def __reduce__(self) -> tuple[Any, ...]:
        return (_rebuild_tagged, (type(self), self._props))

    @property
    def message(self) -> str:
        return str(self)

    @property
    def props(self) -> dict[str, Any]:
        """The keyword props this error was built with."""
        return dict(self._props)

    def stack(self) -> str | None:
        """Formatted traceback, including the cause chain, or None if never raised."""
        if self.__traceback__ is None:
            return None
        return "".join(traceback.format_exception(self)).rstrip()

    def to_dict(self) -> dict[str, Any]:
        """Serializable view of the error."""
        return {
            "_tag": self._tag,
            "message": self.message,
            "stack": self.stack(),
            **self._props,
        }

    def pretty_print(self) -> str:
        """Format as tag and message, one line per prop, then the traceback."""
        lines = [f"{self._tag}: {self.message}"]
        for key, value in self._props.items():
            if key in ("message", "cause"):
                continue
            encoded = msgspec.json.encode(value, enc_hook=repr).decode()
            lines.append(f"  {key}: {encoded}")
        stack = self.stack()
        if stack:
            lines.append(stack)
        return "\n".join(lines)

    def __repr__(self) -> str:
        args = ", ".join(f"{k}={v!r}" for k, v in self._props.items())
        return f"{type(self).__name__}({args})"


def _rebuild_tagged(cls: type[TaggedError], props: dict[str, Any]) -> TaggedError:
    return cls(**props)
