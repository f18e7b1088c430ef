from .rate_limit_store import SlidingWindowRateLimiter
from .session_store import SessionStore

__all__ = [
    "SlidingWindowRateLimiter",
    "SessionStore",
]
