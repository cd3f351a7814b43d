"""Shared pytest fixtures for the service test suite.

The module-level environment cleanup runs at collection time, before any
``src.*`` module is imported, so every ``Settings()`` built during the run
starts from the documented defaults.

Fixture scopes
--------------
* ``settings``     : function, explicit ``Settings`` with no ``.env`` lookup.
* ``app``          : function, fresh application built by ``create_app``.
* ``async_client`` : function, httpx client wrapping ``app`` in-process.
* ``fixed_hostname``: function, pins the per-request hostname to a known value.
"""

import os
from collections.abc import AsyncGenerator

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

# ---------------------------------------------------------------------------
# Environment bootstrap (must run before any ``src.*`` import)
# ---------------------------------------------------------------------------

for _name in ("PORT", "HOST", "APP_NAME", "APP_VERSION", "LOG_LEVEL"):
    os.environ.pop(_name, None)

TEST_HOSTNAME = "demo-pod-7d9f8c6b5-x2kqp"


@pytest.fixture
def settings():
    from src.config import Settings

    return Settings(_env_file=None)


@pytest.fixture
def app(settings) -> FastAPI:
    from src.application import create_app

    return create_app(settings)


@pytest.fixture
async def async_client(app: FastAPI) -> AsyncGenerator[AsyncClient]:
    """httpx.AsyncClient that drives the application in-process.

    ``ASGITransport`` does not run the lifespan, which only logs.
    """
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client


@pytest.fixture
def fixed_hostname(app: FastAPI) -> str:
    """Make every handler see :data:`TEST_HOSTNAME` as the pod hostname."""
    from src.dependencies import get_hostname

    app.dependency_overrides[get_hostname] = lambda: TEST_HOSTNAME
    return TEST_HOSTNAME
