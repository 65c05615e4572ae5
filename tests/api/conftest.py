"""Pytest configuration for live API tests."""

from __future__ import annotations

import pytest

from dms_harness.api_client import DmsApiClient


@pytest.fixture(scope="class")
def api_client(settings):
    """One client per test class: initialized in setup, disposed once in teardown."""
    client = DmsApiClient(settings)
    client.init()
    yield client
    client.dispose()
