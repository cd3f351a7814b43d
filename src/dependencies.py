"""FastAPI dependencies: process-wide identity, start clock and hostname.

Identity and clock are captured once by :func:`src.application.create_app` and stored
on ``app.state``; handlers receive them through these providers rather than
module globals, so tests can swap them with ``app.dependency_overrides``.
"""

from fastapi import Request

from src.runtime import ProcessClock, ServiceIdentity, resolve_hostname

__all__ = ["get_identity", "get_clock", "get_hostname"]


def get_identity(request: Request) -> ServiceIdentity:
    return request.app.state.identity


def get_clock(request: Request) -> ProcessClock:
    return request.app.state.clock


def get_hostname() -> str:
    """Resolve the hostname afresh for every request."""
    return resolve_hostname()
