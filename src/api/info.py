"""JSON description of the running instance."""

from fastapi import APIRouter, Depends

from src.dependencies import get_hostname, get_identity
from src.runtime import ServiceIdentity, utc_now
from src.schemas.info import InfoResponse

router = APIRouter(prefix="/info", tags=["Info"])


@router.get("", response_model=InfoResponse)
async def info(
    identity: ServiceIdentity = Depends(get_identity),  # noqa: B008
    hostname: str = Depends(get_hostname),  # noqa: B008
) -> InfoResponse:
    """Return name, version and hostname of the pod that served the request."""
    return InfoResponse(
        name=identity.name,
        version=identity.version,
        hostname=hostname,
        timestamp=utc_now(),
    )
