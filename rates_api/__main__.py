"""Process entry point — `python -m rates_api` or the `rates-api` script.

Invariants:
    - The logged port is the one the listening socket is bound to (PORT=0 logs the real port)
"""

import logging

import uvicorn

from rates_api.config import get_settings

logger = logging.getLogger(__name__)


def bound_ports(servers) -> list[int]:
    """Ports of every listening socket owned by `servers`."""
    return [
        sock.getsockname()[1]
        for server in servers
        for sock in server.sockets
    ]


class ListeningServer(uvicorn.Server):
    """uvicorn server that logs its bound port once startup completes."""

    async def startup(self, sockets=None) -> None:
        await super().startup(sockets=sockets)
        for port in bound_ports(self.servers):
            logger.info(
                f"Your app is listening on port {port}", extra={"port": port},
            )


def main() -> None:
    settings = get_settings()
    config = uvicorn.Config(
        "rates_api.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )
    ListeningServer(config).run()


if __name__ == "__main__":
    main()
