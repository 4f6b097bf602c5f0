# dicepass Middleware
from dicepass.middleware.security import SecurityMiddleware
from dicepass.middleware.rate_limit import RateLimitConfig, RateLimiter

__all__ = ["SecurityMiddleware", "RateLimitConfig", "RateLimiter"]
