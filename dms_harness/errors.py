"""Exception hierarchy for the DMS test harness.

Harness failures (slow or broken app, bad selector, misuse of the API client)
derive from :class:`HarnessError`.  Response checks derive from
:class:`AssertionError` so pytest reports them as ordinary test failures.
"""

from __future__ import annotations


class HarnessError(Exception):
    """Base exception for all harness errors."""


class ConfigurationError(HarnessError):
    """Raised when a configuration value is present but unusable.

    Example:
        raise ConfigurationError("DMS_ACTION_TIMEOUT_MS must be an integer, got 'soon'")
    """


class NavigationError(HarnessError):
    """Raised when a page load or settle does not finish within its timeout."""

    def __init__(self, url: str, message: str) -> None:
        self.url = url
        super().__init__(f"Navigation to {url} failed: {message}")


class ElementTimeoutError(HarnessError):
    """Raised when an element never reaches the expected visibility state."""

    def __init__(self, target: str, state: str, timeout_ms: float) -> None:
        self.target = target
        self.state = state
        self.timeout_ms = timeout_ms
        super().__init__(f"{target} did not become {state} within {timeout_ms:.0f}ms")


class InteractionError(HarnessError):
    """Raised when an element never becomes actionable for click/fill/select."""

    def __init__(self, action: str, target: str, message: str) -> None:
        self.action = action
        self.target = target
        super().__init__(f"Could not {action} {target}: {message}")


class NotInitializedError(HarnessError):
    """Raised when the API client is used before ``init()`` or after ``dispose()``."""


class ApiTimeoutError(HarnessError):
    """Raised when an HTTP call does not complete within the client timeout."""


class ApiConnectionError(HarnessError):
    """Raised when the API cannot be reached at all (DNS, refused, TLS)."""


class ResponseAssertionError(AssertionError):
    """Base class for response-shape assertion failures."""


class StatusMismatchError(ResponseAssertionError):
    """Status code differs from the expected one."""

    def __init__(self, expected: int, actual: int, body_excerpt: str = "") -> None:
        self.expected = expected
        self.actual = actual
        message = f"Expected status {expected}, but got {actual}"
        if body_excerpt:
            message += f" (body: {body_excerpt})"
        super().__init__(message)


class FieldMismatchError(ResponseAssertionError):
    """One or more expected body fields are missing or hold another value.

    ``mismatches`` maps field name to an ``(expected, actual)`` pair; a missing
    field is reported with ``actual`` set to :data:`MISSING`.
    """

    def __init__(self, mismatches: dict[str, tuple[object, object]]) -> None:
        self.mismatches = mismatches
        details = "; ".join(
            f"expected {key} to be {expected!r}, but got {actual!r}"
            for key, (expected, actual) in mismatches.items()
        )
        super().__init__(details)


class ResponseTimeExceededError(ResponseAssertionError):
    """Elapsed time exceeded the allowed bound."""

    def __init__(self, elapsed_ms: float, max_ms: float) -> None:
        self.elapsed_ms = elapsed_ms
        self.max_ms = max_ms
        super().__init__(f"Response took {elapsed_ms:.0f}ms, expected under {max_ms:.0f}ms")


class _Missing:
    def __repr__(self) -> str:
        return "<missing>"


MISSING = _Missing()
