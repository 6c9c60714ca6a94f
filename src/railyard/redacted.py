"""Redacted: an opaque wrapper that keeps secrets out of logs and payloads.

Examples:
    >>> secret = Redacted.make("api-key-123")
    >>> secret
    <redacted>
    >>> msgspec.json.encode({"key": secret}, enc_hook=enc_hook)
    b'{"key":"<redacted>"}'
    >>> Redacted.value(secret)
    'api-key-123'
"""

from __future__ import annotations

import weakref
from typing import Any

from railyard.errors import ContractViolationError

__all__ = ["REDACTED", "Redacted", "enc_hook"]

REDACTED = "<redacted>"

_registry: weakref.WeakKeyDictionary[Redacted[Any], Any] = weakref.WeakKeyDictionary()


class Redacted[A]:
    """A value hidden from repr, str, format and msgspec encoding.

    The wrapped value is stored outside the instance, in a module-level
    weak registry, so copies of a Redacted do not carry it.
    """

    __slots__ = ("__weakref__",)

    @classmethod
    def make(cls, value: A) -> Redacted[A]:
        """Wrap a value in a redacted container."""
        redacted = cls()
        _registry[redacted] = value
        return redacted

    @staticmethod
    def value(redacted: Redacted[A]) -> A:
        """Return the original value.

        Raises:
            ContractViolationError: If the container was not built by make().
        """
        try:
            return _registry[redacted]
        except KeyError:
            raise ContractViolationError("Redacted value was not in registry") from None

    def __repr__(self) -> str:
        return REDACTED

    def __str__(self) -> str:
        return REDACTED

    def __format__(self, _spec: str) -> str:
        return REDACTED


def enc_hook(obj: Any) -> Any:
    """msgspec enc_hook rendering Redacted values as ``"<redacted>"``.

    Raises:
        NotImplementedError: For any other unsupported type, as msgspec expects.
    """
    if isinstance(obj, Redacted):
        return REDACTED
    raise NotImplementedError(f"Objects of type {type(obj).__name__} are not supported")
