# passgen middleware
from passgen.middleware.security import SecurityMiddleware
from passgen.middleware.rate_limit import RateLimitConfig, RateLimiter

__all__ = ["SecurityMiddleware", "RateLimitConfig", "RateLimiter"]
