"""Unit tests for the response assertion helpers."""

from __future__ import annotations

import time
from types import SimpleNamespace

import httpx
import pytest

from dms_harness.api_client import assert_response_contains, assert_response_time, assert_status
from dms_harness.errors import (
    MISSING,
    FieldMismatchError,
    ResponseTimeExceededError,
    StatusMismatchError,
)


@pytest.mark.unit
class TestAssertStatus:
    """Status comparison across response types."""

    def test_matching_status_passes(self):
        assert_status(httpx.Response(201), 201)

    def test_mismatch_reports_both_codes_and_body(self):
        response = httpx.Response(400, json={"error": "vehicleVin is required"})

        with pytest.raises(StatusMismatchError) as info:
            assert_status(response, 201)

        assert info.value.expected == 201
        assert info.value.actual == 400
        assert "Expected status 201, but got 400" in str(info.value)
        assert "vehicleVin is required" in str(info.value)

    def test_is_an_assertion_error(self):
        with pytest.raises(AssertionError):
            assert_status(httpx.Response(500), 200)

    def test_accepts_status_method(self):
        response = SimpleNamespace(status=lambda: 404, text=lambda: "")
        assert_status(response, 404)

    def test_accepts_status_attribute(self):
        with pytest.raises(StatusMismatchError):
            assert_status(SimpleNamespace(status=204), 200)

    def test_long_body_is_truncated(self):
        response = httpx.Response(500, text="x" * 1000)
        with pytest.raises(StatusMismatchError) as info:
            assert_status(response, 200)
        assert len(str(info.value)) < 400


@pytest.mark.unit
class TestAssertResponseContains:
    """Subset comparison of response bodies."""

    def test_subset_passes_and_extra_fields_are_ignored(self):
        body = {"id": "ro-1", "status": "Completed", "customerName": "Jane Doe"}
        assert_response_contains(body, {"status": "Completed"})

    def test_empty_expectation_passes(self):
        assert_response_contains({"id": 1}, {})

    def test_every_mismatch_is_listed(self):
        body = {"status": "Pending", "actualCost": "100.00"}

        with pytest.raises(FieldMismatchError) as info:
            assert_response_contains(
                body, {"status": "Completed", "actualCost": "125.00", "completionNotes": "done"}
            )

        mismatches = info.value.mismatches
        assert mismatches["status"] == ("Completed", "Pending")
        assert mismatches["actualCost"] == ("125.00", "100.00")
        assert mismatches["completionNotes"] == ("done", MISSING)
        assert "expected status to be 'Completed', but got 'Pending'" in str(info.value)
        assert "<missing>" in str(info.value)

    def test_explicit_none_differs_from_missing(self):
        with pytest.raises(FieldMismatchError) as info:
            assert_response_contains({}, {"notes": None})
        assert info.value.mismatches["notes"] == (None, MISSING)

        assert_response_contains({"notes": None}, {"notes": None})


@pytest.mark.unit
class TestAssertResponseTime:
    """Elapsed-time bound measured with perf_counter."""

    def test_fast_response_passes(self):
        assert_response_time(time.perf_counter(), 2_000)

    def test_slow_response_fails(self):
        start = time.perf_counter() - 3.5

        with pytest.raises(ResponseTimeExceededError) as info:
            assert_response_time(start, 2_000)

        assert info.value.max_ms == 2_000
        assert info.value.elapsed_ms >= 3_500
        assert "expected under 2000ms" in str(info.value)
