# ABOUTME: Shared test fixtures for the time CLI test suite.
# ABOUTME: Keeps the API base override out of the environment so tests never reach a real host.

import pytest

from time_cli.config import API_BASE_ENV


@pytest.fixture(autouse=True)
def _no_api_base_override(monkeypatch):
    """Tests start without TIME_CLI_API_BASE, whatever the developer's shell or .env has."""
    monkeypatch.delenv(API_BASE_ENV, raising=False)
