"""
Resolves the ``remoteip`` value sent to siteverify.

The core never guesses the caller's address. Hosts call get_client_ip() (or
resolve_remote_ip() when they only have headers) and hand the result to
ReCaptchaConfig. ``None`` means "unknown" and makes verification fail fast
with MissingIpError instead of sending an empty ``remoteip``.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Optional

from fastapi import Request

# Highest priority first
PROXY_HEADERS: tuple[str, ...] = (
    "CF-Connecting-IP",
    "True-Client-IP",
    "X-Forwarded-For",
    "X-Real-IP",
    "X-Client-IP",
)


def _first_hop(value: Optional[str]) -> Optional[str]:
    if not value:
        return None
    return value.split(",", 1)[0].strip() or None


def resolve_remote_ip(
    headers: Mapping[str, str],
    peer: Optional[str] = None,
    trusted_headers: Iterable[str] = PROXY_HEADERS,
) -> Optional[str]:
    """Return the first usable address from ``trusted_headers``, else ``peer``.

    Only list headers your edge proxy actually sets; anything else is
    client-controlled.
    """
    hops = (_first_hop(headers.get(name)) for name in trusted_headers)
    return next((ip for ip in hops if ip), None) or peer or None


def get_client_ip(request: Request) -> Optional[str]:
    peer = request.client.host if request.client else None
    return resolve_remote_ip(request.headers, peer)
