"""Declarative element handles for page objects.

A :class:`Selector` is a class-level descriptor: reading it from a page object
builds a fresh Playwright :class:`~playwright.sync_api.Locator`, so a handle
never outlives the DOM it was resolved against.
"""

from __future__ import annotations

from typing import Any


class Selector:
    """CSS alternatives resolved lazily against the page or a parent handle.

    Several alternatives are joined into one selector list, so whichever
    variant the app renders is matched.  ``within`` names another attribute
    of the owner whose locator scopes this one.
    """

    def __init__(self, *css: str, within: str | None = None) -> None:
        if not css:
            raise ValueError("Selector needs at least one CSS alternative")
        self.css = ", ".join(css)
        self.within = within
        self.name = ""

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name

    def __get__(self, obj: Any, objtype: type | None = None) -> Any:
        if obj is None:
            return self
        scope = getattr(obj, self.within) if self.within else obj.page
        return scope.locator(self.css)

    def __repr__(self) -> str:
        return f"Selector({self.name or '?'}: {self.css!r})"


def text_match(template: str, value: object) -> str:
    """Fill a ``:has-text("...")`` template, escaping embedded quotes."""
    escaped = str(value).replace("\\", "\\\\").replace('"', '\\"')
    return template.format(escaped)
