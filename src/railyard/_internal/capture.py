"""Conversion of captured exceptions into error payloads.

Shared by try_, try_async and the @safe decorators: the only places where a
raised exception turns into a domain failure.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from railyard._logging import log_captured_fault
from railyard.errors import UnhandledException

__all__ = ["captured_error"]


def captured_error(
    boundary: str,
    cause: Exception,
    catch: Callable[[Exception], Any] | None,
) -> Any:
    """Build the error payload for an exception raised inside a capture boundary.

    Args:
        boundary: Name of the capturing function, for logging.
        cause: The exception raised by the guarded computation.
        catch: Caller-supplied transform, or None for the default wrapper.

    Returns:
        catch(cause), or UnhandledException(cause) when no handler is given.
        If the handler itself raises, an UnhandledException around the
        handler's exception (the original stays reachable via __context__).
    """
    log_captured_fault(boundary, cause)
    if catch is None:
        return UnhandledException(cause)
    try:
        return catch(cause)
    except Exception as handler_fault:
        log_captured_fault(boundary, handler_fault)
        return UnhandledException(handler_fault, "Unexpected exception in catch handler")
