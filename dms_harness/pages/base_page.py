"""Base page object.

Implements the Page Object Model (POM) for the DMS screens.  A page object
holds its route in ``path``, its elements as :class:`Selector` attributes and
exposes business operations.  Low-level element work is delegated to a
composed :class:`PageActions` instance rather than inherited.
"""

from __future__ import annotations

from playwright.sync_api import Page

from ..config import DEFAULT_BASE_URL, Timeouts
from ..logging_utils import get_logger
from .actions import PageActions

logger = get_logger("pages")


class BasePage:
    """Shared navigation and introspection for all DMS page objects."""

    # Subclasses override with the page-specific path segment.
    path: str = "/"

    def __init__(
        self,
        page: Page,
        base_url: str = DEFAULT_BASE_URL,
        *,
        timeouts: Timeouts | None = None,
    ) -> None:
        self.page = page
        self.base_url = base_url.rstrip("/")
        self.actions = PageActions(page, self.base_url, timeouts)

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------

    def navigate(self) -> None:
        """Go to the page's canonical URL and wait for the network to settle."""
        self.actions.navigate_to(self.path)
        self.actions.wait_for_page_settled()

    def reload(self) -> None:
        self.actions.reload()

    @property
    def title(self) -> str:
        return self.actions.page_title()

    @property
    def url(self) -> str:
        return self.actions.current_url()

    def screenshot(self, path: str) -> bytes:
        return self.actions.screenshot(path)
