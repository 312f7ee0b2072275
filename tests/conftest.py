"""Pytest configuration and fixtures.

Provides environment and config isolation. All fixtures here are autouse
unless noted.
"""

from __future__ import annotations

import logging
import os

import pytest

from results.config import set_config

# =============================================================================
# Environment Isolation (Autouse)
# =============================================================================


@pytest.fixture(autouse=True)
def block_dotenv(request, monkeypatch):
    """Prevent python-dotenv from loading project .env files during tests.

    Opt-out: @pytest.mark.allow_dotenv
    """
    if request.node.get_closest_marker("allow_dotenv"):
        return
    monkeypatch.setattr(
        "results.config.load_dotenv", lambda *_args, **_kwargs: False
    )


@pytest.fixture(autouse=True)
def isolate_results_env(request, monkeypatch):
    """Clear RESULTS_* env vars so a developer shell cannot leak into tests.

    Opt-out: @pytest.mark.allow_env_pollution
    """
    if request.node.get_closest_marker("allow_env_pollution"):
        return
    for key in list(os.environ.keys()):
        if key.startswith("RESULTS_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture(autouse=True)
def reset_config():
    """Drop the cached process-wide Config around every test."""
    set_config(None)
    yield
    set_config(None)


# =============================================================================
# Logging
# =============================================================================


@pytest.fixture
def results_debug_logs(caplog):
    """Capture DEBUG records from the results package (not autouse)."""
    caplog.set_level(logging.DEBUG, logger="results")
    return caplog
