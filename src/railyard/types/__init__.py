"""Core types: Result, Ok, Err, Option, Some, Nothing."""

from railyard.types.option import (
    Nothing,
    NothingType,
    Option,
    Some,
    all_some,
    first_some,
    from_optional,
    from_predicate,
    nothing,
    some,
)
from railyard.types.result import (
    Err,
    Ok,
    Result,
    collect,
    err,
    first_ok,
    ok,
    partition,
    try_,
)

__all__ = [
    "Err",
    "Nothing",
    "NothingType",
    "Ok",
    "Option",
    "Result",
    "Some",
    "all_some",
    "collect",
    "err",
    "first_ok",
    "first_some",
    "from_optional",
    "from_predicate",
    "nothing",
    "ok",
    "partition",
    "some",
    "try_",
]
