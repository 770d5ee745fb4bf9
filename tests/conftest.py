"""Pytest configuration and fixtures.

Provides environment isolation and logging configuration. All fixtures here
are autouse unless noted.
"""

from __future__ import annotations

from contextlib import suppress
import logging
import os

import pytest

from resultkit.config import ENV_PREFIX, reload_settings

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
    with suppress(Exception):
        monkeypatch.setattr(
            "dotenv.load_dotenv", lambda *_args, **_kwargs: False, raising=False
        )


@pytest.fixture(autouse=True)
def isolate_resultkit_env(request, monkeypatch):
    """Ensure a clean RESULTKIT_* environment and fresh settings per test.

    Opt-out: @pytest.mark.allow_env_pollution
    """
    if not request.node.get_closest_marker("allow_env_pollution"):
        for key in list(os.environ.keys()):
            if key.startswith(ENV_PREFIX):
                monkeypatch.delenv(key, raising=False)
    reload_settings()
    yield
    reload_settings()


# =============================================================================
# Logging
# =============================================================================


@pytest.fixture
def resultkit_debug_logs(caplog):
    """Capture DEBUG records from the resultkit logger hierarchy."""
    caplog.set_level(logging.DEBUG, logger="resultkit")
    return caplog
