"""Network reachability probe."""

from __future__ import annotations

import logging
import socket

logger = logging.getLogger(__name__)

# Any routable public address works; connecting a UDP socket sends nothing.
PROBE_ADDRESS = ("8.8.8.8", 53)


def is_connected_to_network(address: tuple[str, int] = PROBE_ADDRESS) -> bool:
    """Return True if the host has a route to the general internet.

    The check only asks the operating system for a default route by
    connecting an unbound UDP socket; no packet leaves the machine and the
    specific target host of a request is not contacted.
    """
    try:
        with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sock:
            sock.connect(address)
    except OSError as exc:
        logger.debug("No route to %s:%s: %s", address[0], address[1], exc)
        return False
    return True
