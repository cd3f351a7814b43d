"""Process entrypoint: load configuration, bind the listener and serve.

The socket is bound before uvicorn takes over so that an unavailable port is
reported as :class:`StartupBindError` and turned into a nonzero exit status.
"""

import logging
import socket
import sys

import uvicorn
from pydantic import ValidationError

from src.application import create_app
from src.config import Settings, load_settings

logger = logging.getLogger(__name__)

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


class StartupBindError(RuntimeError):
    """The configured listening address could not be bound."""

    def __init__(self, host: str, port: int, cause: OSError | OverflowError) -> None:
        super().__init__(f"cannot bind {host}:{port}: {cause}")
        self.host = host
        self.port = port
        self.cause = cause


def configure_logging(level: str) -> None:
    logging.basicConfig(level=level.upper(), format=_LOG_FORMAT, stream=sys.stderr, force=True)


def bind_socket(host: str, port: int) -> socket.socket:
    """Return a listening-ready TCP socket bound to *host*:*port*.

    Raises:
        StartupBindError: The address is in use, not permitted, or the host or
            port is invalid.
    """
    family = socket.AF_INET6 if ":" in host else socket.AF_INET
    sock = socket.socket(family, socket.SOCK_STREAM)
    sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
    try:
        sock.bind((host, port))
    except (OSError, OverflowError) as exc:
        sock.close()
        raise StartupBindError(host, port, exc) from exc
    return sock


def serve(settings: Settings) -> None:
    sock = bind_socket(settings.host, settings.port)
    config = uvicorn.Config(
        create_app(settings),
        log_level=settings.log_level.lower(),
        log_config=None,
        access_log=False,
    )
    server = uvicorn.Server(config)
    try:
        server.run(sockets=[sock])
    finally:
        sock.close()


def main() -> None:
    """Run the service until terminated.

    Exits with status 1 when the configuration is invalid or the port cannot be
    bound; both are logged at CRITICAL first.
    """
    try:
        settings = load_settings()
    except ValidationError as exc:
        configure_logging("INFO")
        logger.critical("Invalid configuration: %s", exc)
        raise SystemExit(1) from exc

    configure_logging(settings.log_level)
    try:
        serve(settings)
    except StartupBindError as exc:
        logger.critical("Server failed to start: %s", exc)
        raise SystemExit(1) from exc


if __name__ == "__main__":
    main()
