"""Rendering helpers shared by the Result accessors."""

from __future__ import annotations

from collections.abc import Mapping
import dataclasses
import logging
from typing import Any

from pydantic import BaseModel
from pydantic_core import to_json

from results.config import get_config

logger = logging.getLogger(__name__)

_COLLECTIONS = (Mapping, list, tuple, set, frozenset, BaseModel)


def _is_structured(value: Any) -> bool:
    if isinstance(value, _COLLECTIONS):
        return True
    return dataclasses.is_dataclass(value) and not isinstance(value, type)


def _fallback(value: Any) -> Any:
    # to_json only knows dict; other Mappings would render as quoted str().
    if isinstance(value, Mapping):
        return dict(value)
    return str(value)


def stringify(value: Any, *, strict: bool | None = None) -> str:
    """Render ``value`` as text suitable for an error message.

    Structured values (mappings, sequences, sets, dataclasses and pydantic
    models) become compact JSON, e.g. ``{"key":"value"}``. Exceptions render
    as their ``repr`` so the type name survives. Everything else uses
    ``str()``.

    Args:
        value: Anything.
        strict: Re-raise serialization failures (circular references)
            instead of falling back to ``repr()``. ``None`` defers to the
            installed ``Config.strict_stringify`` (off by default).
    """
    if isinstance(value, BaseException):
        return repr(value)
    if not _is_structured(value):
        return str(value)

    if strict is None:
        strict = get_config().strict_stringify
    try:
        return to_json(value, fallback=_fallback).decode("utf-8")
    except ValueError as exc:
        if strict:
            raise
        logger.debug("Structured rendering failed, using repr(): %s", exc)
        return repr(value)
