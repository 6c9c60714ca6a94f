"""railyard: Result, AsyncResult and Option types for Python 3.13+.

Flat imports (preferred):
    from railyard import Result, Ok, Err, AsyncResult, Option, Some, Nothing
    from railyard import ok, err, try_, try_async, collect, partition, first_ok

Submodule imports (for organization):
    from railyard.types import Result, Option
    from railyard.async_ import AsyncResult
    from railyard.decorators import safe, safe_async
"""

# Configuration
from railyard._config import Config, get_config, init

# Types
from railyard.types import (
    Err,
    Nothing,
    NothingType,
    Ok,
    Option,
    Result,
    Some,
    all_some,
    collect,
    err,
    first_ok,
    first_some,
    from_optional,
    from_predicate,
    nothing,
    ok,
    partition,
    some,
    try_,
)

# Async
from railyard.async_ import AsyncResult, err_async, ok_async, try_async

# Decorators
from railyard.decorators import safe, safe_async

# Errors
from railyard.errors import ContractViolationError, TaggedError, UnhandledException

# Redaction
from railyard.redacted import Redacted

__all__ = [
    "AsyncResult",
    "Config",
    "ContractViolationError",
    "Err",
    "Nothing",
    "NothingType",
    "Ok",
    "Option",
    "Redacted",
    "Result",
    "Some",
    "TaggedError",
    "UnhandledException",
    "all_some",
    "collect",
    "err",
    "err_async",
    "first_ok",
    "first_some",
    "from_optional",
    "from_predicate",
    "get_config",
    "init",
    "nothing",
    "ok",
    "ok_async",
    "partition",
    "safe",
    "safe_async",
    "some",
    "try_",
    "try_async",
]
