"""Probe endpoints: ``/health`` for liveness and ``/ready`` for readiness."""

from fastapi import APIRouter, Depends

from src.dependencies import get_clock
from src.runtime import ProcessClock, format_duration, utc_now
from src.schemas.health import HealthResponse, ReadyResponse

router = APIRouter(tags=["Health"])


@router.get("/health", response_model=HealthResponse)
async def health(clock: ProcessClock = Depends(get_clock)) -> HealthResponse:  # noqa: B008
    """Return liveness status and time elapsed since the process started.

    Always HTTP 200. The orchestrator restarts the container on anything else,
    and there is nothing inside this process that can become unhealthy.
    """
    return HealthResponse(
        uptime=format_duration(clock.uptime()),
        checked=utc_now(),
    )


@router.get("/ready", response_model=ReadyResponse)
async def ready() -> ReadyResponse:
    """Report readiness to receive traffic.

    The service has no downstream dependencies, so it is ready as soon as it
    is serving requests.
    """
    return ReadyResponse()
