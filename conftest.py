"""Root conftest: command-line options, logging, and shared fixtures for all test layers."""

from __future__ import annotations

import os
from unittest.mock import patch

import pytest

from dms_harness.config import Settings
from dms_harness.logging_utils import configure_json_logging

LIVE_MARKERS = ("e2e", "api")

CONFIG_KEYS = (
    "BASE_URL",
    "DMS_USER",
    "DMS_PASS",
    "API_BASE_URL",
    "API_TOKEN",
    "HEADLESS",
    "BROWSER",
    "ARTIFACTS_DIR",
    "LOG_LEVEL",
    "DMS_NAVIGATION_TIMEOUT_MS",
    "DMS_ACTION_TIMEOUT_MS",
    "DMS_API_TIMEOUT_S",
)


def pytest_addoption(parser):
    parser.addoption(
        "--live",
        action="store_true",
        default=False,
        help="Run e2e and api tests against the configured DMS deployment",
    )


def pytest_configure(config):
    settings = Settings.from_env()
    configure_json_logging(settings.log_level)


def pytest_collection_modifyitems(config, items):
    """Skip tests that need a running DMS unless ``--live`` was given."""
    if config.getoption("--live"):
        return
    skip_live = pytest.mark.skip(reason="needs a live DMS deployment (use --live)")
    for item in items:
        if any(marker in item.keywords for marker in LIVE_MARKERS):
            item.add_marker(skip_live)


@pytest.fixture(scope="session")
def settings() -> Settings:
    """Configuration read once per session from the environment and ``.env``."""
    return Settings.from_env()


@pytest.fixture()
def clean_env():
    """Clear every harness config key so defaults apply."""
    with patch.dict(os.environ, {key: "" for key in CONFIG_KEYS}, clear=False):
        yield
