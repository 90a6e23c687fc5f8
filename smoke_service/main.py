"""Main module entrypoint for runtime execution.

This module validates startup configuration, binds the listening socket and
launches the FastAPI service under uvicorn. Startup failures are fatal and
exit with status 1.
"""

import logging
import socket
import sys

import uvicorn
from fastapi import FastAPI

from smoke_service.bootstrap import bootstrap_create_application
from smoke_service.config import SettingsLoadError, config_load_settings

LOGGER = logging.getLogger("smoke_service")


def main_configure_logging() -> None:
    """Route service log lines to standard output as plain messages.

    Returns:
        None: Logger configuration is applied as a side effect.
    """

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter("%(message)s"))
    LOGGER.handlers.clear()
    LOGGER.addHandler(handler)
    LOGGER.setLevel(logging.INFO)
    LOGGER.propagate = False


def main_bind_socket(host: str, port: int) -> socket.socket:
    """Create a listening TCP socket bound to the given address.

    Args:
        host: IPv4 address to bind.
        port: TCP port to bind.

    Returns:
        socket.socket: Bound socket already in listening state.

    Raises:
        OSError: Raised when the address is in use or binding is not permitted.
    """

    listening_socket = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    try:
        listening_socket.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        listening_socket.bind((host, port))
        listening_socket.listen()
    except OSError:
        listening_socket.close()
        raise
    return listening_socket


def main_create_server(application: FastAPI) -> uvicorn.Server:
    """Create the uvicorn server for the application.

    Args:
        application: ASGI application to serve.

    Returns:
        uvicorn.Server: Server with per-request access logging disabled.
    """

    return uvicorn.Server(uvicorn.Config(application, access_log=False))


def main_serve(application: FastAPI, listening_socket: socket.socket) -> None:
    """Serve the application on a pre-bound socket until terminated.

    Args:
        application: ASGI application to serve.
        listening_socket: Bound, listening socket owned for the process lifetime.

    Returns:
        None: Returns after uvicorn handles a shutdown signal.
    """

    server = main_create_server(application)
    server.run(sockets=[listening_socket])


def main() -> None:
    """Run the HTTP responder with validated startup configuration.

    Returns:
        None: This function does not return a runtime value.

    Raises:
        SystemExit: Raised with status 1 when configuration or socket binding fails.
    """

    main_configure_logging()

    try:
        settings = config_load_settings()
    except SettingsLoadError as error:
        LOGGER.error("%s", error)
        raise SystemExit(1) from error

    application = bootstrap_create_application(settings=settings)

    try:
        listening_socket = main_bind_socket(host=settings.application_host, port=settings.port)
    except OSError as error:
        LOGGER.error("Failed to bind %s:%s: %s", settings.application_host, settings.port, error)
        raise SystemExit(1) from error

    LOGGER.info("Server is running on port %s", settings.port)
    LOGGER.info("Environment: %s", settings.node_env)

    main_serve(application=application, listening_socket=listening_socket)


if __name__ == "__main__":
    main()
