import os
import time
from collections import defaultdict

from fastapi import Request
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from .auth import configured_keys

WINDOW_SECONDS = 60

# client key -> request timestamps inside the current window
_counters = defaultdict(list)


def _client_key(request: Request) -> str:
    # Runs ahead of auth, so only a configured key may claim its own bucket.
    auth = request.headers.get("Authorization", "")
    if auth.startswith("Bearer "):
        token = auth[len("Bearer "):].strip()
        if token in configured_keys():
            return token
    return request.client.host if request.client else "anonymous"


def _evict_stale(now: float) -> None:
    for key in [k for k, stamps in _counters.items() if not stamps or stamps[-1] <= now - WINDOW_SECONDS]:
        del _counters[key]


class RateLimitMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        if os.getenv("RATE_LIMIT_ENABLED", "false").lower() != "true":
            return await call_next(request)
        if request.url.path == "/__health":
            return await call_next(request)

        key = _client_key(request)
        limit = int(os.getenv("RATE_LIMIT_PER_MINUTE", "10"))
        now = time.time()
        _evict_stale(now)

        window = [t for t in _counters[key] if t > now - WINDOW_SECONDS]
        window.append(now)
        _counters[key] = window

        if len(window) > limit:
            return JSONResponse(
                {"detail": "Rate limit exceeded"},
                status_code=429,
                headers={"Retry-After": str(WINDOW_SECONDS)},
            )

        return await call_next(request)
