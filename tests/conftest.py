"""Test-layer conftest: failure screenshots for browser tests."""

from __future__ import annotations

import pytest

from dms_harness.artifacts import artifact_path
from dms_harness.logging_utils import get_logger

logger = get_logger("tests")


@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """Save a full-page screenshot when a test using the ``page`` fixture fails.

    Each phase report is also kept on the item as ``rep_setup``/``rep_call`` so
    fixtures can see the outcome during teardown.
    """
    outcome = yield
    report = outcome.get_result()
    setattr(item, f"rep_{report.when}", report)
    if report.when != "call" or not report.failed:
        return
    page = item.funcargs.get("page")
    settings = item.funcargs.get("settings")
    if page is None or settings is None:
        return
    target = artifact_path(settings.artifacts_dir, "screenshots", item.nodeid, ".png")
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        page.screenshot(path=str(target), full_page=True)
    except Exception as exc:  # the page may already be closed or crashed
        logger.warning("Could not capture failure screenshot for %s: %s", item.nodeid, exc)
    else:
        logger.info("Saved failure screenshot to %s", target)
