"""Element/action layer shared by every page object.

:class:`PageActions` wraps the raw Playwright calls with bounded timeouts and
converts engine failures into the harness exception taxonomy:

* page loads and settles -> :class:`~dms_harness.errors.NavigationError`
* elements that never appear or vanish -> :class:`~dms_harness.errors.ElementTimeoutError`
* clicks, fills and selects that are rejected -> :class:`~dms_harness.errors.InteractionError`

Boolean probes (``is_visible``, ``is_present``) never raise for a missing
element; they answer ``False``.
"""

from __future__ import annotations

import time
from pathlib import Path
from typing import Callable

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import Locator, Page
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError

from ..config import DEFAULT_BASE_URL, Timeouts
from ..errors import ElementTimeoutError, InteractionError, NavigationError
from ..logging_utils import get_logger

logger = get_logger("pages")

_POLL_INTERVAL_MS = 100


def describe(locator: Locator) -> str:
    """Human-readable name for a locator in error messages."""
    return repr(locator)


class PageActions:
    """Bounded, error-translating wrappers around a Playwright page."""

    def __init__(
        self,
        page: Page,
        base_url: str = DEFAULT_BASE_URL,
        timeouts: Timeouts | None = None,
    ) -> None:
        self.page = page
        self.base_url = base_url.rstrip("/")
        self.timeouts = timeouts or Timeouts()

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------

    def resolve_url(self, url: str) -> str:
        if url.startswith(("http://", "https://")):
            return url
        return f"{self.base_url}/{url.lstrip('/')}"

    def navigate_to(self, url: str) -> None:
        """Load ``url`` (absolute, or a path joined to the base URL)."""
        target = self.resolve_url(url)
        logger.info("Navigating to %s", target)
        try:
            self.page.goto(target, timeout=self.timeouts.navigation_ms)
        except PlaywrightError as exc:
            raise NavigationError(target, exc.message) from exc

    def reload(self) -> None:
        try:
            self.page.reload(timeout=self.timeouts.navigation_ms)
        except PlaywrightError as exc:
            raise NavigationError(self.page.url, exc.message) from exc

    def go_back(self) -> None:
        try:
            self.page.go_back(timeout=self.timeouts.navigation_ms)
        except PlaywrightError as exc:
            raise NavigationError(self.page.url, exc.message) from exc

    def wait_for_page_settled(self) -> None:
        """Block until the network has been idle, bounded by the navigation timeout."""
        try:
            self.page.wait_for_load_state("networkidle", timeout=self.timeouts.navigation_ms)
        except PlaywrightTimeoutError as exc:
            raise NavigationError(self.page.url, exc.message) from exc

    # ------------------------------------------------------------------
    # Waits and probes
    # ------------------------------------------------------------------

    def wait_for_element(self, locator: Locator, timeout: float | None = None) -> None:
        self._wait_for_state(locator, "visible", timeout)

    def wait_for_element_gone(self, locator: Locator, timeout: float | None = None) -> None:
        self._wait_for_state(locator, "hidden", timeout)

    def _wait_for_state(self, locator: Locator, state: str, timeout: float | None) -> None:
        timeout = self.timeouts.action_ms if timeout is None else timeout
        try:
            locator.first.wait_for(state=state, timeout=timeout)
        except PlaywrightTimeoutError as exc:
            raise ElementTimeoutError(describe(locator), state, timeout) from exc

    def wait_for_text_change(
        self,
        locator: Locator,
        previous: str,
        timeout: float | None = None,
    ) -> str:
        """Poll the element text until it differs from ``previous``; return the new text."""
        timeout = self.timeouts.action_ms if timeout is None else timeout
        deadline = time.monotonic() + timeout / 1000
        while True:
            # A 0ms timeout disables the Playwright wait.
            remaining_ms = max((deadline - time.monotonic()) * 1000, 1)
            try:
                current = self.get_text(locator, timeout=remaining_ms)
            except ElementTimeoutError as exc:
                raise ElementTimeoutError(
                    describe(locator), f"different from {previous!r}", timeout
                ) from exc
            if current != previous:
                return current
            if time.monotonic() >= deadline:
                raise ElementTimeoutError(
                    describe(locator), f"different from {previous!r}", timeout
                )
            self.page.wait_for_timeout(_POLL_INTERVAL_MS)

    def is_visible(self, locator: Locator) -> bool:
        """Wait briefly for the element; ``False`` if it is absent or hidden."""
        try:
            locator.first.wait_for(state="visible", timeout=self.timeouts.visibility_probe_ms)
        except PlaywrightTimeoutError:
            return False
        return True

    def is_present(self, locator: Locator) -> bool:
        """``True`` when at least one node is attached right now, visible or not."""
        return locator.count() > 0

    def is_enabled(self, locator: Locator) -> bool:
        try:
            return locator.first.is_enabled(timeout=self.timeouts.action_ms)
        except PlaywrightTimeoutError as exc:
            raise ElementTimeoutError(describe(locator), "attached", self.timeouts.action_ms) from exc

    def is_checked(self, locator: Locator) -> bool:
        try:
            return locator.first.is_checked(timeout=self.timeouts.action_ms)
        except PlaywrightTimeoutError as exc:
            raise ElementTimeoutError(describe(locator), "attached", self.timeouts.action_ms) from exc

    # ------------------------------------------------------------------
    # Interactions
    # ------------------------------------------------------------------

    def _act(self, action: str, locator: Locator, perform: Callable[[Locator], object]) -> None:
        logger.debug("%s %s", action, describe(locator))
        try:
            perform(locator.first)
        except PlaywrightError as exc:
            raise InteractionError(action, describe(locator), exc.message) from exc

    def click(self, locator: Locator) -> None:
        self._act("click", locator, lambda el: el.click(timeout=self.timeouts.action_ms))

    def fill(self, locator: Locator, value: str) -> None:
        self._act("fill", locator, lambda el: el.fill(value, timeout=self.timeouts.action_ms))

    def select_option(self, locator: Locator, value: str) -> None:
        """Select by option value or visible label."""
        self._act(
            "select", locator, lambda el: el.select_option(value, timeout=self.timeouts.action_ms)
        )

    def check(self, locator: Locator) -> None:
        self._act("check", locator, lambda el: el.check(timeout=self.timeouts.action_ms))

    def uncheck(self, locator: Locator) -> None:
        self._act("uncheck", locator, lambda el: el.uncheck(timeout=self.timeouts.action_ms))

    def hover(self, locator: Locator) -> None:
        self._act("hover", locator, lambda el: el.hover(timeout=self.timeouts.action_ms))

    def scroll_to(self, locator: Locator) -> None:
        self._act(
            "scroll to",
            locator,
            lambda el: el.scroll_into_view_if_needed(timeout=self.timeouts.action_ms),
        )

    def press_key(self, locator: Locator, key: str) -> None:
        self._act("press", locator, lambda el: el.press(key, timeout=self.timeouts.action_ms))

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def get_text(self, locator: Locator, timeout: float | None = None) -> str:
        """Stripped text content of the first match; ``""`` for an empty node."""
        timeout = self.timeouts.action_ms if timeout is None else timeout
        try:
            text = locator.first.text_content(timeout=timeout)
        except PlaywrightTimeoutError as exc:
            raise ElementTimeoutError(describe(locator), "attached", timeout) from exc
        return (text or "").strip()

    def get_value(self, locator: Locator) -> str:
        try:
            value = locator.first.input_value(timeout=self.timeouts.action_ms)
        except PlaywrightTimeoutError as exc:
            raise ElementTimeoutError(describe(locator), "attached", self.timeouts.action_ms) from exc
        return value or ""

    def get_all_texts(self, locator: Locator) -> list[str]:
        return [text.strip() for text in locator.all_text_contents() if text and text.strip()]

    def count_matches(self, locator: Locator) -> int:
        return locator.count()

    # ------------------------------------------------------------------
    # Page introspection
    # ------------------------------------------------------------------

    def current_url(self) -> str:
        return self.page.url

    def page_title(self) -> str:
        return self.page.title()

    def url_contains(self, fragment: str) -> bool:
        return fragment in self.page.url

    def title_equals(self, expected: str) -> bool:
        return self.page.title() == expected

    def screenshot(self, path: str | Path) -> bytes:
        """Capture a full-page screenshot, creating the parent directory."""
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        return self.page.screenshot(path=str(target), full_page=True)
