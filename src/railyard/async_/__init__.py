"""Async utilities: AsyncResult and async-aware constructors.

This module provides async-aware Result operations:
- AsyncResult: Wrapper for composing async Result operations
- ok_async / err_async: Already-settled AsyncResults
- try_async: Capture exceptions from awaitables as Err

Examples:
    >>> from railyard.async_ import AsyncResult
    >>>
    >>> async def fetch(id: int) -> Result[dict, str]:
    ...     return Ok({"id": id})
    >>>
    >>> async def main():
    ...     # Use AsyncResult for chaining
    ...     result = await AsyncResult(fetch(1)).map(lambda d: d["id"])
    ...
    ...     # Collect multiple async results, concurrently
    ...     results = await AsyncResult.collect([fetch(1), fetch(2), fetch(3)])
"""

from railyard.async_.result import AsyncResult, err_async, ok_async, try_async

__all__ = [
    "AsyncResult",
    "err_async",
    "ok_async",
    "try_async",
]
