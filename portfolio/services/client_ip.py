"""Submitter metadata pulled from the incoming request."""

from __future__ import annotations

from starlette.requests import Request

UNKNOWN = "unknown"


def get_client_ip(request: Request, trust_forwarded: bool = False) -> str:
    """Return the submitter's IP address.

    Proxy headers are only honored when ``trust_forwarded`` is set, since
    any client can forge them.
    """
    if trust_forwarded:
        forwarded = request.headers.get("x-forwarded-for")
        if forwarded:
            first = forwarded.split(",")[0].strip()
            if first:
                return first
        real_ip = request.headers.get("x-real-ip")
        if real_ip and real_ip.strip():
            return real_ip.strip()
    if request.client and request.client.host:
        return request.client.host
    return UNKNOWN


def get_user_agent(request: Request) -> str:
    return request.headers.get("user-agent", UNKNOWN)
