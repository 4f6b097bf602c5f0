"""
Client address resolution for per-client rate limiting.
"""

from ipaddress import ip_address, ip_network
from typing import List, Optional

from starlette.requests import Request

from dicepass.config import Settings, settings


def _normalize(value: str) -> Optional[str]:
    try:
        return str(ip_address(value.strip()))
    except ValueError:
        return None


def _trusted(address: str, cidrs: List[str]) -> bool:
    for cidr in cidrs:
        try:
            if ip_address(address) in ip_network(cidr, strict=False):
                return True
        except ValueError:
            continue
    return False


def get_client_ip(request: Request, active_settings: Optional[Settings] = None) -> str:
    """
    Address the rate limiter keys on.

    X-Forwarded-For is read right to left and only while each hop is a
    trusted proxy, so a client cannot choose its own bucket by spoofing the
    header. Falls back to the socket peer, then "unknown".
    """
    active_settings = active_settings or settings
    peer = _normalize(request.client.host) if request.client else None
    if peer is None:
        return "unknown"

    cidrs = active_settings.trusted_proxy_cidrs
    if not active_settings.TRUST_PROXY_HEADERS or not _trusted(peer, cidrs):
        return peer

    forwarded = request.headers.get("X-Forwarded-For", "")
    hops = [hop for hop in (_normalize(item) for item in forwarded.split(",")) if hop]
    client = peer
    for hop in reversed(hops):
        client = hop
        if not _trusted(hop, cidrs):
            break
    return client
