"""maybe-result: explicit optional values and success/failure outcomes.

Public API:
    - Maybe, Some, Nothing: a value that may or may not exist
    - Result, Ok, Err: an operation outcome, value or error
    - some(), nothing(), ok(), err(): convenience constructors
    - UnwrapError: raised when unwrapping the empty side of a container
    - Config, use_config(): how payloads are rendered into error messages
"""

from __future__ import annotations

import logging

from maybe_result.config import Config, get_config, reset_config, use_config
from maybe_result.errors import ConfigurationError, MaybeResultError, UnwrapError
from maybe_result.maybe import (
    Maybe,
    Nothing,
    Some,
    from_optional,
    is_nothing,
    is_some,
    nothing,
    some,
)
from maybe_result.result import Err, Ok, Result, err, is_err, is_ok, ok

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("maybe-result")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

# Library-level NullHandler: stay silent unless the consumer configures logging.
logging.getLogger("maybe_result").addHandler(logging.NullHandler())

__all__ = [
    "Config",
    "ConfigurationError",
    "Err",
    "Maybe",
    "MaybeResultError",
    "Nothing",
    "Ok",
    "Result",
    "Some",
    "UnwrapError",
    "err",
    "from_optional",
    "get_config",
    "is_err",
    "is_nothing",
    "is_ok",
    "is_some",
    "nothing",
    "ok",
    "reset_config",
    "some",
    "use_config",
]
