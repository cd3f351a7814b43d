"""HTML landing page showing which pod served the request."""

import html
import pathlib
from string import Template

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse

from src.dependencies import get_hostname, get_identity
from src.runtime import ServiceIdentity, format_rfc3339, utc_now

root_router = APIRouter()

_TEMPLATE_PATH = pathlib.Path(__file__).parent.parent / "templates" / "home.html"
_HOME_TEMPLATE = Template(_TEMPLATE_PATH.read_text(encoding="utf-8"))


def render_home(identity: ServiceIdentity, hostname: str, request_time: str) -> str:
    """Fill the landing-page template; every value is HTML-escaped."""
    return _HOME_TEMPLATE.substitute(
        name=html.escape(identity.name),
        version=html.escape(identity.version),
        hostname=html.escape(hostname),
        request_time=html.escape(request_time),
    )


@root_router.get("/", response_class=HTMLResponse, include_in_schema=False)
async def home(
    identity: ServiceIdentity = Depends(get_identity),  # noqa: B008
    hostname: str = Depends(get_hostname),  # noqa: B008
) -> str:
    """Serve the landing page."""
    return render_home(identity, hostname, format_rfc3339(utc_now()))
