"""Tests for API health endpoint behavior.

These tests validate the liveness payload shape and its timestamp against a
fixed clock and against the real wall clock.
"""

from datetime import datetime, timedelta, timezone

from fastapi.testclient import TestClient

from smoke_service.api.application import create_api_application
from smoke_service.config import AppSettings

_FIXED_MOMENT = datetime(2026, 10, 17, 8, 15, 30, 123456, tzinfo=timezone.utc)


def _fixed_clock() -> datetime:
    """Return deterministic current time.

    Returns:
        datetime: Fixed UTC moment.
    """

    return _FIXED_MOMENT


def _build_settings() -> AppSettings:
    """Create test settings object.

    Returns:
        AppSettings: Deterministic test settings for API creation.

    Raises:
        ValueError: Raised by AppSettings when values are invalid.
    """

    return AppSettings(port=3000, app_version="1.0.0", node_env="test")


def _parse_timestamp(raw_timestamp: str) -> datetime:
    """Parse `Z`-suffixed ISO-8601 text into an aware datetime.

    Args:
        raw_timestamp: Timestamp text from a response payload.

    Returns:
        datetime: Parsed aware datetime.
    """

    assert raw_timestamp.endswith("Z")
    return datetime.fromisoformat(raw_timestamp[:-1] + "+00:00")


def test_api_health_returns_healthy_payload_with_fixed_clock() -> None:
    """Return HTTP 200 and exact healthy payload for a fixed clock.

    Returns:
        None: Assertions validate response behavior.

    Raises:
        AssertionError: Raised when response does not match expected payload.
    """

    client = TestClient(create_api_application(_build_settings(), clock=_fixed_clock))

    response = client.get("/health")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("application/json")
    assert response.json() == {"status": "healthy", "timestamp": "2026-10-17T08:15:30.123Z"}


def test_api_health_timestamp_tracks_wall_clock() -> None:
    """Stamp responses with a recent UTC time when using the default clock.

    Returns:
        None: Assertions validate response behavior.

    Raises:
        AssertionError: Raised when timestamp is missing or stale.
    """

    client = TestClient(create_api_application(_build_settings()))

    before = datetime.now(timezone.utc) - timedelta(milliseconds=1)
    response = client.get("/health")
    after = datetime.now(timezone.utc) + timedelta(milliseconds=1)

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"
    assert before <= _parse_timestamp(response.json()["timestamp"]) <= after


def test_api_health_ignores_query_string() -> None:
    """Answer identically when a query string is present."""

    client = TestClient(create_api_application(_build_settings(), clock=_fixed_clock))

    response = client.get("/health", params={"verbose": "1"})

    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "timestamp": "2026-10-17T08:15:30.123Z"}


def test_api_health_timestamps_are_non_decreasing() -> None:
    """Produce identical payloads except for a non-decreasing timestamp."""

    client = TestClient(create_api_application(_build_settings()))

    payloads = [client.get("/health").json() for _ in range(5)]
    timestamps = [_parse_timestamp(payload.pop("timestamp")) for payload in payloads]

    assert all(payload == {"status": "healthy"} for payload in payloads)
    assert timestamps == sorted(timestamps)
