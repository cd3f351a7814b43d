"""Process-wide runtime values: service identity, start clock and hostname.

Both :class:`ServiceIdentity` and :class:`ProcessClock` are frozen and created
once at startup; request handlers only ever read them.
"""

import logging
import socket
import time
from dataclasses import dataclass, field
from datetime import UTC, datetime

logger = logging.getLogger(__name__)

_NS_PER_US = 1_000
_NS_PER_MS = 1_000_000
_NS_PER_S = 1_000_000_000


@dataclass(frozen=True)
class ServiceIdentity:
    name: str
    version: str


@dataclass(frozen=True)
class ProcessClock:
    """Start-of-process timestamp used to derive uptime.

    ``started_ns`` comes from the monotonic clock so uptime never goes
    backwards when the wall clock is adjusted.
    """

    started_at: datetime
    started_ns: int = field(repr=False)

    @classmethod
    def start(cls) -> "ProcessClock":
        return cls(started_at=datetime.now(UTC), started_ns=time.monotonic_ns())

    def uptime(self, now_ns: int | None = None) -> int:
        """Return nanoseconds elapsed since the clock was started."""
        if now_ns is None:
            now_ns = time.monotonic_ns()
        return max(now_ns - self.started_ns, 0)


def resolve_hostname() -> str:
    """Return the OS hostname, or ``""`` when it cannot be determined."""
    try:
        return socket.gethostname()
    except OSError as exc:
        logger.warning("Hostname lookup failed: %s", exc)
        return ""


def utc_now() -> datetime:
    return datetime.now(UTC)


def format_rfc3339(moment: datetime) -> str:
    """Render *moment* as second-precision RFC 3339 text (``Z`` for UTC)."""
    text = moment.replace(microsecond=0).isoformat()
    if text.endswith("+00:00"):
        text = text[:-6] + "Z"
    return text


def _with_fraction(value: int, scale: int) -> str:
    whole, remainder = divmod(value, scale)
    if not remainder:
        return str(whole)
    width = len(str(scale)) - 1
    return f"{whole}.{str(remainder).rjust(width, '0').rstrip('0')}"


def format_duration(nanoseconds: int) -> str:
    """Render a duration the way Go's ``time.Duration.String`` does.

    Examples: ``0s``, ``750ns``, ``1.5µs``, ``850ms``, ``12.5s``, ``3m7.25s``,
    ``1h0m0s``.
    """
    if nanoseconds == 0:
        return "0s"

    sign = "-" if nanoseconds < 0 else ""
    remaining = abs(nanoseconds)

    if remaining < _NS_PER_S:
        if remaining < _NS_PER_US:
            return f"{sign}{remaining}ns"
        if remaining < _NS_PER_MS:
            return f"{sign}{_with_fraction(remaining, _NS_PER_US)}µs"
        return f"{sign}{_with_fraction(remaining, _NS_PER_MS)}ms"

    total_seconds, fraction = divmod(remaining, _NS_PER_S)
    minutes, seconds = divmod(total_seconds, 60)
    hours, minutes = divmod(minutes, 60)
    seconds_text = _with_fraction(seconds * _NS_PER_S + fraction, _NS_PER_S) + "s"

    if hours:
        return f"{sign}{hours}h{minutes}m{seconds_text}"
    if minutes:
        return f"{sign}{minutes}m{seconds_text}"
    return f"{sign}{seconds_text}"
