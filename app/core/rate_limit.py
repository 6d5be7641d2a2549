"""
Fixed-window rate limiting keyed by client address
"""
from typing import Callable, Dict, Tuple
from fastapi import Depends, Request
from app.core.config import settings
import logging
import threading
import time

logger = logging.getLogger(__name__)

class RateLimiter:
    """Allow at most ``limit`` calls per client within each ``window_seconds`` window."""

    def __init__(self, limit: int, window_seconds: float, clock: Callable[[], float] = time.monotonic):
        self.limit = limit
        self.window_seconds = window_seconds
        self.clock = clock
        self._windows: Dict[str, Tuple[float, int]] = {}
        self._lock = threading.Lock()

    def allow(self, client_id: str) -> bool:
        now = self.clock()
        with self._lock:
            started, count = self._windows.get(client_id, (now, 0))
            if now - started >= self.window_seconds:
                started, count = now, 0
            if count >= self.limit:
                self._windows[client_id] = (started, count)
                return False
            self._windows[client_id] = (started, count + 1)
            self._prune(now)
            return True

    def reset(self) -> None:
        with self._lock:
            self._windows.clear()

    def _prune(self, now: float) -> None:
        # Drop windows that have fully expired
        expired = [key for key, (started, _) in self._windows.items() if now - started >= self.window_seconds]
        for key in expired:
            del self._windows[key]

class RateLimitExceeded(Exception):
    """Raised by the rate limit dependencies; rendered as a 429 by the app."""

    def __init__(self, client_id: str, path: str):
        super().__init__(f"Rate limit exceeded for {client_id} on {path}")
        self.client_id = client_id
        self.path = path

chat_rate_limiter = RateLimiter(settings.CHAT_RATE_LIMIT, settings.CHAT_RATE_WINDOW_SECONDS)
health_rate_limiter = RateLimiter(settings.HEALTH_RATE_LIMIT, settings.HEALTH_RATE_WINDOW_SECONDS)

def get_chat_rate_limiter() -> RateLimiter:
    return chat_rate_limiter

def get_health_rate_limiter() -> RateLimiter:
    return health_rate_limiter

def client_address(request: Request) -> str:
    return request.client.host if request.client else "unknown"

def _enforce(limiter: RateLimiter, request: Request) -> None:
    client_id = client_address(request)
    if not limiter.allow(client_id):
        logger.warning(f"Rate limit exceeded for {client_id} on {request.url.path}")
        raise RateLimitExceeded(client_id, request.url.path)

async def enforce_chat_rate_limit(
    request: Request,
    limiter: RateLimiter = Depends(get_chat_rate_limiter),
) -> None:
    """Chat quota per client address"""
    _enforce(limiter, request)

async def enforce_health_rate_limit(
    request: Request,
    limiter: RateLimiter = Depends(get_health_rate_limiter),
) -> None:
    """Separate, more lenient quota for health checks"""
    _enforce(limiter, request)
