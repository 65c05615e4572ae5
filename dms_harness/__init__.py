"""Playwright and HTTP test harness for the DMS web application."""

from .api_client import (
    DmsApiClient,
    assert_response_contains,
    assert_response_time,
    assert_status,
)
from .config import Settings, Timeouts
from .errors import HarnessError

__all__ = [
    "DmsApiClient",
    "HarnessError",
    "Settings",
    "Timeouts",
    "assert_response_contains",
    "assert_response_time",
    "assert_status",
]

__version__ = "0.1.0"
