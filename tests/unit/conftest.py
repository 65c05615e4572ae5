"""Unit-layer fixtures: a mocked Playwright page whose locators are keyed by selector."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest


def keyed_locator(name: str) -> MagicMock:
    """A Locator mock whose ``.locator(css)`` returns one stable child mock per selector."""
    locator = MagicMock(name=name)
    children: dict[str, MagicMock] = {}

    def child(css: str) -> MagicMock:
        if css not in children:
            children[css] = keyed_locator(f"{name} >> {css}")
        return children[css]

    locator.locator.side_effect = child
    locator.children = children
    return locator


@pytest.fixture()
def mock_page() -> MagicMock:
    """A Page mock; ``mock_page.locators[css]`` is the locator created for ``css``."""
    page = MagicMock(name="page")
    locators: dict[str, MagicMock] = {}

    def locator(css: str) -> MagicMock:
        if css not in locators:
            locators[css] = keyed_locator(css)
        return locators[css]

    page.locator.side_effect = locator
    page.locators = locators
    page.url = "http://localhost:3000/login"
    return page
