"""Public surface of the results package."""

from __future__ import annotations

import logging

import pytest

import results

pytestmark = pytest.mark.unit


def test_public_exports_resolve() -> None:
    for name in results.__all__:
        assert getattr(results, name) is not None


def test_version_is_a_string() -> None:
    assert isinstance(results.__version__, str)


def test_library_logger_has_null_handler() -> None:
    handlers = logging.getLogger("results").handlers
    assert any(isinstance(h, logging.NullHandler) for h in handlers)
