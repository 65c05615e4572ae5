"""Pytest configuration for E2E tests with Playwright."""

from __future__ import annotations

import pytest
from playwright.sync_api import sync_playwright

from dms_harness.artifacts import artifact_path, keep_video_on_failure
from dms_harness.data import valid_user
from dms_harness.pages import AppointmentsPage, LoginPage, RepairOrdersPage


@pytest.fixture(scope="session")
def browser(settings):
    """Launch the configured browser once for the whole session."""
    with sync_playwright() as p:
        browser = getattr(p, settings.browser).launch(headless=settings.headless)
        yield browser
        browser.close()


@pytest.fixture(scope="function")
def page(browser, settings, request):
    """Create a fresh context and page for each test.

    Every page is recorded; the video is kept only when the test body fails.
    """
    videos_dir = settings.artifacts_dir / "videos"
    context = browser.new_context(
        viewport={"width": 1920, "height": 1080},
        base_url=settings.base_url,
        record_video_dir=str(videos_dir),
    )
    context.set_default_navigation_timeout(settings.timeouts.navigation_ms)
    context.set_default_timeout(settings.timeouts.action_ms)
    page = context.new_page()
    yield page
    video = page.video
    page.close()
    context.close()
    report = getattr(request.node, "rep_call", None)
    keep_video_on_failure(
        video,
        failed=report is not None and report.failed,
        target=artifact_path(settings.artifacts_dir, "videos", request.node.nodeid, ".webm"),
    )


@pytest.fixture
def base_url(settings):
    """Base URL for the application."""
    return settings.base_url


@pytest.fixture
def login_page(page, base_url, settings):
    login = LoginPage(page, base_url, timeouts=settings.timeouts)
    login.navigate()
    return login


@pytest.fixture
def logged_in(login_page, settings):
    """Log in with the configured account; yields the login page object."""
    login_page.login_as(valid_user(settings))
    return login_page


@pytest.fixture
def repair_orders_page(logged_in, page, base_url, settings):
    orders = RepairOrdersPage(page, base_url, timeouts=settings.timeouts)
    orders.navigate()
    return orders


@pytest.fixture
def appointments_page(logged_in, page, base_url, settings):
    appointments = AppointmentsPage(page, base_url, timeouts=settings.timeouts)
    appointments.navigate()
    return appointments
