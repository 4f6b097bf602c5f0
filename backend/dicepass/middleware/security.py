"""
Security middleware for request filtering
"""

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse, Response

from dicepass.logging_config import log_rate_limited
from dicepass.middleware.rate_limit import RateLimiter
from dicepass.utils.network import get_client_ip


class SecurityMiddleware(BaseHTTPMiddleware):
    """
    Middleware that runs before route handlers
    - Applies per-IP rate limiting
    - Adds security headers so generated passphrases are never cached
    """

    # Paths that skip rate limiting
    BYPASS_PATHS = {"/health", "/health/ready"}

    def __init__(self, app, rate_limiter: RateLimiter):
        super().__init__(app)
        self.rate_limiter = rate_limiter

    async def dispatch(self, request: Request, call_next) -> Response:
        if request.url.path in self.BYPASS_PATHS:
            response = await call_next(request)
            return self._add_security_headers(response)

        client_ip = get_client_ip(request)

        if not self.rate_limiter.is_allowed(client_ip):
            log_rate_limited(client_ip)
            response = JSONResponse(
                status_code=429,
                content={"error": "rate_limited", "message": "Too many requests"},
                headers={"Retry-After": str(self.rate_limiter.retry_after(client_ip))},
            )
            return self._add_security_headers(response)

        response = await call_next(request)
        return self._add_security_headers(response)

    def _add_security_headers(self, response: Response) -> Response:
        """Add security headers to response"""
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        response.headers["Referrer-Policy"] = "no-referrer"
        response.headers["Cache-Control"] = "no-store, no-cache, must-revalidate"
        response.headers["Pragma"] = "no-cache"
        response.headers["Content-Security-Policy"] = "default-src 'none'"
        return response
