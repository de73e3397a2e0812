"""Host label used in document footers and message links."""
from __future__ import annotations

import logging
import re
import socket

logger = logging.getLogger(__name__)

_IP_ADDR_RE = re.compile(r"^\d+(\.\d+)+$")


def resolve_host_name() -> str:
    """Return the local host's qualified name.

    When reverse lookup is unavailable the fully qualified name comes back
    as an IP literal.  In that case the plain host name is used instead,
    but only if it is itself qualified with a domain.
    """
    host_name = socket.getfqdn()
    if _IP_ADDR_RE.match(host_name):
        alt_host = socket.gethostname()
        if len(alt_host.split(".")) > 1:
            host_name = alt_host
    logger.debug("Resolved host name %s", host_name)
    return host_name
