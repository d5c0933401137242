"""
Security Headers Middleware for FastAPI

Adds the response headers a JSON API should always send:
- Content-Security-Policy (nothing may be loaded or framed)
- HTTP Strict Transport Security (HSTS)
- X-Content-Type-Options / X-Frame-Options
- Referrer-Policy
"""

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

SECURITY_HEADERS = {
    "Content-Security-Policy": "default-src 'none'; frame-ancestors 'none'",
    # 1 year
    "Strict-Transport-Security": "max-age=31536000; includeSubDomains",
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "Referrer-Policy": "no-referrer",
}


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Middleware to add security headers to all responses."""

    async def dispatch(self, request: Request, call_next):
        response: Response = await call_next(request)

        for name, value in SECURITY_HEADERS.items():
            response.headers.setdefault(name, value)

        if "X-Powered-By" in response.headers:
            del response.headers["X-Powered-By"]

        return response
