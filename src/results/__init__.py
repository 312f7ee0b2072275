"""results: a small Ok/Err Result type for Python.

Public API:
    - Ok / Err: the two Result variants
    - wrap() / wrap_async(): capture raised exceptions as Err values
    - is_ok() / is_err(): type-narrowing predicates
    - stringify(): value rendering used in unwrap() messages
    - Config: process-wide settings
"""

from __future__ import annotations

import logging

from results._utils import stringify
from results.config import Config, get_config, set_config
from results.core import Err, Ok, Result, is_err, is_ok, wrap, wrap_async
from results.errors import ConfigurationError, ResultsError, UnwrapError

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("results-lite")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

# Library-level NullHandler: stay silent unless the consumer configures logging.
logging.getLogger("results").addHandler(logging.NullHandler())

__all__ = [
    "Config",
    "ConfigurationError",
    "Err",
    "Ok",
    "Result",
    "ResultsError",
    "UnwrapError",
    "get_config",
    "is_err",
    "is_ok",
    "set_config",
    "stringify",
    "wrap",
    "wrap_async",
]
