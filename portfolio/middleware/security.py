from __future__ import annotations

from collections.abc import Callable, Iterable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

DEFAULT_CSP = (
    "default-src 'self'",
    "base-uri 'none'",
    "frame-ancestors 'none'",
    "img-src 'self' data:",
    "font-src 'self'",
    "connect-src 'self'",
    "script-src 'self'",
    "style-src 'self'",
    "form-action 'self'",
    "upgrade-insecure-requests",
)


def _is_secure_request(request: Request) -> bool:
    # Honor reverse proxy headers if present
    xf_proto = request.headers.get("x-forwarded-proto")
    if xf_proto:
        return "https" in xf_proto
    return request.url.scheme == "https"


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """
    Sets a hardened set of security headers on every response.
    - HTTPS-aware HSTS
    - Strict CSP for the contact page and JSON endpoint
    - Modern cross-origin protections
    """

    def __init__(
        self,
        app,
        *,
        csp_directives: Iterable[str] | None = None,
        hsts: str = "max-age=63072000; includeSubDomains",
        referrer_policy: str = "strict-origin-when-cross-origin",
        permissions_policy: str = "geolocation=(), microphone=(), camera=()",
        add_coop_corp: bool = True,
        skip_hsts_hosts: set[str] | None = None,
        frame_options: str = "DENY",
    ) -> None:
        super().__init__(app)
        self.csp_value = "; ".join(csp_directives or DEFAULT_CSP)
        self.hsts = hsts
        self.referrer_policy = referrer_policy
        self.permissions_policy = permissions_policy
        self.add_coop_corp = add_coop_corp
        self.skip_hsts_hosts = skip_hsts_hosts or {"localhost", "127.0.0.1"}
        self.frame_options = frame_options

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        response = await call_next(request)

        response.headers.setdefault("Content-Security-Policy", self.csp_value)

        # HSTS only over HTTPS and never for local hosts
        if _is_secure_request(request):
            if request.url.hostname not in self.skip_hsts_hosts:
                response.headers.setdefault("Strict-Transport-Security", self.hsts)

        response.headers.setdefault("Referrer-Policy", self.referrer_policy)
        response.headers.setdefault("X-Content-Type-Options", "nosniff")
        response.headers.setdefault("X-Frame-Options", self.frame_options)

        if self.add_coop_corp:
            response.headers.setdefault("Cross-Origin-Opener-Policy", "same-origin")
            response.headers.setdefault("Cross-Origin-Resource-Policy", "same-origin")

        if self.permissions_policy:
            response.headers.setdefault("Permissions-Policy", self.permissions_policy)

        return response
