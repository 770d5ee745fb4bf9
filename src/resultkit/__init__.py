"""resultkit: explicit success/failure values instead of exceptions.

Public API:
    - Result, Success, Failure: the two-variant result type and its factories
    - resolving: decorator turning raising functions into result-returning ones
    - collect_successes, collect_failures, partition: batch helpers
    - NOTHING / Nothing: unit payload for outcomes without data
    - settings_override, get_settings: library configuration
"""

from __future__ import annotations

import logging

from resultkit.aggregate import collect_failures, collect_successes, partition
from resultkit.config import Settings, get_settings, reload_settings, settings_override
from resultkit.errors import (
    ConfigurationError,
    ExpectError,
    MisuseError,
    NonePayloadError,
    ResultkitError,
    SingletonError,
    UnwrapError,
)
from resultkit.nothing import NOTHING, Nothing
from resultkit.result import Failure, Result, Success, resolving

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("resultkit")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

# Library-level NullHandler: stay silent unless the consumer configures logging.
logging.getLogger("resultkit").addHandler(logging.NullHandler())

__all__ = [
    "NOTHING",
    "ConfigurationError",
    "ExpectError",
    "Failure",
    "MisuseError",
    "NonePayloadError",
    "Nothing",
    "Result",
    "ResultkitError",
    "Settings",
    "SingletonError",
    "Success",
    "UnwrapError",
    "collect_failures",
    "collect_successes",
    "get_settings",
    "partition",
    "reload_settings",
    "resolving",
    "settings_override",
]
