"""
Client address used as the rate-limit key.
"""

from ipaddress import ip_address
from typing import Optional

from starlette.requests import Request

from passgen.config import Settings, get_settings


def client_address(request: Request, settings: Optional[Settings] = None) -> str:
    """
    Address of the client that sent request.

    The first X-Forwarded-For hop is used only when TRUST_PROXY_HEADERS is on
    and the peer itself lies in one of the trusted proxy networks. Peers that
    are not IP addresses (test clients, unix sockets) are keyed by their name.
    """
    settings = settings or get_settings()
    peer = request.client.host if request.client else ""
    try:
        peer_ip = ip_address(peer)
    except ValueError:
        return peer or "0.0.0.0"

    if settings.TRUST_PROXY_HEADERS and any(peer_ip in net for net in settings.trusted_proxy_networks):
        first_hop = request.headers.get("X-Forwarded-For", "").split(",")[0].strip()
        try:
            return str(ip_address(first_hop))
        except ValueError:
            pass

    return str(peer_ip)
