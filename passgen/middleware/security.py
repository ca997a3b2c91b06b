"""
Security middleware for request filtering
"""

from typing import Optional

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse, Response

from passgen.config import get_settings
from passgen.logging_config import log_rate_limited
from passgen.middleware.rate_limit import RateLimitConfig, RateLimiter
from passgen.utils.network import client_address


class SecurityMiddleware(BaseHTTPMiddleware):
    """
    Middleware that runs before route handlers
    - Applies rate limiting
    - Adds security headers
    """

    # Paths that skip rate limiting
    BYPASS_PATHS = {"/health", "/health/ready"}

    def __init__(self, app, rate_limiter: Optional[RateLimiter] = None):
        super().__init__(app)
        if rate_limiter is None:
            settings = get_settings()
            rate_limiter = RateLimiter(RateLimitConfig(
                requests_per_minute=settings.RATE_LIMIT_PER_MINUTE,
                burst_size=settings.RATE_LIMIT_BURST,
                max_clients=settings.RATE_LIMIT_MAX_CLIENTS,
            ))
        self.rate_limiter = rate_limiter

    async def dispatch(self, request: Request, call_next) -> Response:
        if request.url.path in self.BYPASS_PATHS:
            response = await call_next(request)
            return self._add_security_headers(response)

        client_ip = client_address(request)
        if not self.rate_limiter.is_allowed(client_ip):
            log_rate_limited(client_ip)
            return self._add_security_headers(JSONResponse(
                status_code=429,
                content={"error": "rate_limited", "message": "Too many requests"}
            ))

        response = await call_next(request)
        return self._add_security_headers(response)

    def _add_security_headers(self, response: Response) -> Response:
        """Add security headers to response"""
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        response.headers["Referrer-Policy"] = "no-referrer"
        # Passphrases must never be cached by browsers or proxies
        response.headers["Cache-Control"] = "no-store, no-cache, must-revalidate"
        response.headers["Pragma"] = "no-cache"
        response.headers["Content-Security-Policy"] = "default-src 'none'"
        return response
