"""Tests for GET /health and GET /ready: liveness and readiness.

Both probes are unconditional: liveness always reports ``healthy`` with the
process uptime, readiness always reports ``ready``.
"""

import asyncio
import re
import time
from datetime import UTC, datetime

import pytest
from fastapi import FastAPI
from httpx import AsyncClient

from src.dependencies import get_clock
from src.runtime import ProcessClock

_DURATION_PART = re.compile(r"(\d+(?:\.\d+)?)(ns|µs|ms|h|m|s)")
_UNIT_SECONDS = {"h": 3600.0, "m": 60.0, "s": 1.0, "ms": 1e-3, "µs": 1e-6, "ns": 1e-9}


def _duration_seconds(text: str) -> float:
    """Parse Go duration text such as ``1h2m3.5s`` into seconds."""
    parts = _DURATION_PART.findall(text)
    assert parts, f"not a duration: {text!r}"
    assert "".join(value + unit for value, unit in parts) == text
    return sum(float(value) * _UNIT_SECONDS[unit] for value, unit in parts)


def _clock_started_seconds_ago(seconds: int) -> ProcessClock:
    return ProcessClock(
        started_at=datetime.now(UTC),
        started_ns=time.monotonic_ns() - seconds * 1_000_000_000,
    )


# ---------------------------------------------------------------------------
# /health
# ---------------------------------------------------------------------------


@pytest.mark.asyncio
async def test_health_returns_200(async_client: AsyncClient) -> None:
    response = await async_client.get("/health")
    assert response.status_code == 200


@pytest.mark.asyncio
async def test_health_status_healthy(async_client: AsyncClient) -> None:
    response = await async_client.get("/health")
    assert response.json()["status"] == "healthy"


@pytest.mark.asyncio
async def test_health_response_schema(async_client: AsyncClient) -> None:
    """Health response contains exactly the documented fields."""
    response = await async_client.get("/health")
    body = response.json()

    assert set(body.keys()) == {"status", "uptime", "checked"}
    assert isinstance(body["uptime"], str)
    _duration_seconds(body["uptime"])


@pytest.mark.asyncio
async def test_health_checked_is_rfc3339_utc(async_client: AsyncClient) -> None:
    before = datetime.now(UTC)
    response = await async_client.get("/health")
    checked = response.json()["checked"]

    assert checked.endswith("Z")
    parsed = datetime.fromisoformat(checked.replace("Z", "+00:00"))
    assert parsed.tzinfo is not None
    assert parsed >= before.replace(microsecond=0)


@pytest.mark.asyncio
async def test_health_uptime_reflects_process_clock(
    app: FastAPI, async_client: AsyncClient
) -> None:
    app.dependency_overrides[get_clock] = lambda: _clock_started_seconds_ago(125)
    response = await async_client.get("/health")
    uptime = response.json()["uptime"]

    assert uptime.startswith("2m5")
    assert 125 <= _duration_seconds(uptime) < 130


@pytest.mark.asyncio
async def test_health_uptime_never_decreases(async_client: AsyncClient) -> None:
    samples = []
    for _ in range(5):
        response = await async_client.get("/health")
        samples.append(_duration_seconds(response.json()["uptime"]))

    assert samples == sorted(samples)


@pytest.mark.asyncio
async def test_health_uptime_strictly_increases_one_second_apart(
    async_client: AsyncClient,
) -> None:
    first = await async_client.get("/health")
    await asyncio.sleep(1.0)
    second = await async_client.get("/health")

    first_uptime = _duration_seconds(first.json()["uptime"])
    second_uptime = _duration_seconds(second.json()["uptime"])
    assert second_uptime > first_uptime
    assert second_uptime - first_uptime >= 0.9


@pytest.mark.asyncio
async def test_health_content_type_json(async_client: AsyncClient) -> None:
    response = await async_client.get("/health")
    assert "application/json" in response.headers["content-type"]


# ---------------------------------------------------------------------------
# /ready
# ---------------------------------------------------------------------------


@pytest.mark.asyncio
async def test_ready_returns_200(async_client: AsyncClient) -> None:
    response = await async_client.get("/ready")
    assert response.status_code == 200


@pytest.mark.asyncio
async def test_ready_body_is_exactly_status_ready(async_client: AsyncClient) -> None:
    response = await async_client.get("/ready")
    assert response.json() == {"status": "ready"}


@pytest.mark.asyncio
async def test_ready_is_unconditional(async_client: AsyncClient) -> None:
    """Readiness has no dependency gating: it never changes between calls."""
    bodies = [(await async_client.get("/ready")).json() for _ in range(3)]
    assert bodies == [{"status": "ready"}] * 3


@pytest.mark.asyncio
async def test_ready_content_type_json(async_client: AsyncClient) -> None:
    response = await async_client.get("/ready")
    assert "application/json" in response.headers["content-type"]
