"""HTTP client for the DMS REST API plus response assertion helpers.

The client wraps :class:`httpx.Client` with the API base URL and a bearer
token read once from :class:`~dms_harness.config.Settings`.  It has an explicit
two-phase lifecycle: ``init()`` opens the connection pool, ``dispose()``
closes it, and any request outside that window raises
:class:`~dms_harness.errors.NotInitializedError`.

Non-2xx responses are returned, not raised: a 401 for bad credentials or a 404
for an unknown id is a valid outcome the test checks with :func:`assert_status`.
"""

from __future__ import annotations

import json
import time
from collections.abc import Mapping
from typing import Any
from urllib.parse import quote

import httpx

from .config import Settings
from .errors import (
    MISSING,
    ApiConnectionError,
    ApiTimeoutError,
    FieldMismatchError,
    NotInitializedError,
    ResponseTimeExceededError,
    StatusMismatchError,
)
from .logging_utils import get_logger

logger = get_logger("api")

_BODY_EXCERPT_CHARS = 300


class DmsApiClient:
    """Authenticated client for the DMS repair-order, appointment and auth endpoints."""

    def __init__(
        self,
        settings: Settings | None = None,
        *,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        settings = settings or Settings.from_env()
        self.base_url = settings.api_base_url
        self._token = settings.api_token
        self._timeout = settings.timeouts.api_seconds
        self._transport = transport
        self._client: httpx.Client | None = None

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def init(self) -> None:
        """Open the request context.  Calling it twice is a no-op."""
        if self._client is not None:
            return
        self._client = httpx.Client(
            base_url=self.base_url,
            headers={
                "Authorization": f"Bearer {self._token}",
                "Content-Type": "application/json",
            },
            timeout=self._timeout,
            # Test environments commonly run on self-signed certificates.
            verify=False,
            transport=self._transport,
        )
        logger.info("API client initialized for %s", self.base_url)

    def dispose(self) -> None:
        """Close the request context; later requests raise NotInitializedError."""
        if self._client is None:
            return
        self._client.close()
        self._client = None
        logger.info("API client disposed for %s", self.base_url)

    @property
    def initialized(self) -> bool:
        return self._client is not None

    def __enter__(self) -> "DmsApiClient":
        self.init()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.dispose()

    def _context(self) -> httpx.Client:
        if self._client is None:
            raise NotInitializedError(
                "API context not initialized. Call init() before making requests."
            )
        return self._client

    def _request(
        self,
        method: str,
        path: str,
        *,
        json: Any = None,
        params: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> httpx.Response:
        client = self._context()
        started = time.perf_counter()
        try:
            response = client.request(method, path, json=json, params=params, headers=headers)
        except httpx.TimeoutException as exc:
            raise ApiTimeoutError(
                f"{method} {path} did not complete within {self._timeout:g}s"
            ) from exc
        except httpx.TransportError as exc:
            raise ApiConnectionError(f"{method} {path} failed: {exc}") from exc
        logger.info(
            "%s %s -> %s (%.0f ms)",
            method,
            path,
            response.status_code,
            (time.perf_counter() - started) * 1000,
        )
        return response

    # ------------------------------------------------------------------
    # Repair orders
    # ------------------------------------------------------------------

    def get_repair_orders(self) -> httpx.Response:
        return self._request("GET", "/repair-orders")

    def get_repair_order_by_id(self, order_id: str) -> httpx.Response:
        return self._request("GET", f"/repair-orders/{_segment(order_id)}")

    def create_repair_order(self, order_data: Mapping[str, Any]) -> httpx.Response:
        """POST a new repair order; a 201 body carries the server-assigned ``id``."""
        return self._request("POST", "/repair-orders", json=dict(order_data))

    def update_repair_order(self, order_id: str, update_data: Mapping[str, Any]) -> httpx.Response:
        """PATCH only the supplied fields of a repair order."""
        return self._request("PATCH", f"/repair-orders/{_segment(order_id)}", json=dict(update_data))

    def delete_repair_order(self, order_id: str) -> httpx.Response:
        return self._request("DELETE", f"/repair-orders/{_segment(order_id)}")

    def search_repair_orders(self, filters: Mapping[str, str]) -> httpx.Response:
        """Filter repair orders; every criterion becomes a query parameter and all must match."""
        return self._request("GET", "/repair-orders", params=dict(filters))

    # ------------------------------------------------------------------
    # Appointments
    # ------------------------------------------------------------------

    def get_appointments(self) -> httpx.Response:
        return self._request("GET", "/appointments")

    def get_appointment_by_id(self, appointment_id: str) -> httpx.Response:
        return self._request("GET", f"/appointments/{_segment(appointment_id)}")

    def create_appointment(self, appointment_data: Mapping[str, Any]) -> httpx.Response:
        return self._request("POST", "/appointments", json=dict(appointment_data))

    def update_appointment(self, appointment_id: str, update_data: Mapping[str, Any]) -> httpx.Response:
        return self._request(
            "PATCH", f"/appointments/{_segment(appointment_id)}", json=dict(update_data)
        )

    def cancel_appointment(self, appointment_id: str) -> httpx.Response:
        return self._request("DELETE", f"/appointments/{_segment(appointment_id)}")

    def search_appointments(self, filters: Mapping[str, str]) -> httpx.Response:
        return self._request("GET", "/appointments", params=dict(filters))

    # ------------------------------------------------------------------
    # Authentication
    # ------------------------------------------------------------------

    def authenticate(self, username: str, password: str) -> httpx.Response:
        """POST credentials to ``/auth/login``.

        The returned token is not stored; tests that want to use it pass it to
        :meth:`validate_token` explicitly.
        """
        return self._request("POST", "/auth/login", json={"username": username, "password": password})

    def validate_token(self, token: str | None = None) -> httpx.Response:
        """GET ``/auth/validate`` with the configured token, or ``token`` when given."""
        headers = {"Authorization": f"Bearer {token}"} if token is not None else None
        return self._request("GET", "/auth/validate", headers=headers)

    # ------------------------------------------------------------------
    # Generic verbs for endpoints without a dedicated method
    # ------------------------------------------------------------------

    def get(self, endpoint: str, params: Mapping[str, Any] | None = None) -> httpx.Response:
        return self._request("GET", endpoint, params=params)

    def post(self, endpoint: str, data: Mapping[str, Any]) -> httpx.Response:
        return self._request("POST", endpoint, json=dict(data))

    def patch(self, endpoint: str, data: Mapping[str, Any]) -> httpx.Response:
        return self._request("PATCH", endpoint, json=dict(data))

    def delete(self, endpoint: str) -> httpx.Response:
        return self._request("DELETE", endpoint)


def _segment(value: str) -> str:
    return quote(str(value), safe="")


# ---------------------------------------------------------------------------
# Response validation helpers
# ---------------------------------------------------------------------------


def _status_of(response: Any) -> int:
    status = getattr(response, "status_code", None)
    if status is None:
        status = getattr(response, "status")
        if callable(status):
            status = status()
    return int(status)


def _body_excerpt(response: Any) -> str:
    text = getattr(response, "text", "")
    if callable(text):
        text = text()
    if not isinstance(text, str):
        return ""
    return text[:_BODY_EXCERPT_CHARS]


def assert_status(response: Any, expected_status: int) -> None:
    """Fail with expected vs. actual when the status code differs.

    Accepts an :class:`httpx.Response` or anything exposing ``status_code`` or
    ``status`` (attribute or method).
    """
    actual = _status_of(response)
    if actual != expected_status:
        raise StatusMismatchError(expected_status, actual, _body_excerpt(response))


def assert_response_contains(response_body: Mapping[str, Any], expected_data: Mapping[str, Any]) -> None:
    """Compare only the named fields of ``expected_data``; other body fields are ignored."""
    mismatches: dict[str, tuple[object, object]] = {}
    for key, expected_value in expected_data.items():
        actual_value = response_body.get(key, MISSING)
        if actual_value is MISSING or actual_value != expected_value:
            mismatches[key] = (expected_value, actual_value)
    if mismatches:
        raise FieldMismatchError(mismatches)


def assert_response_time(start_time: float, max_duration_ms: float) -> None:
    """Fail when more than ``max_duration_ms`` passed since ``start_time``.

    ``start_time`` must come from :func:`time.perf_counter`.
    """
    elapsed_ms = (time.perf_counter() - start_time) * 1000
    if elapsed_ms > max_duration_ms:
        raise ResponseTimeExceededError(elapsed_ms, max_duration_ms)


def response_json(response: httpx.Response) -> Any:
    """Parse a JSON body, returning ``None`` for empty or non-JSON bodies."""
    if not response.content:
        return None
    try:
        return response.json()
    except json.JSONDecodeError:
        return None
