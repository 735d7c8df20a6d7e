import logging
import os

from fastapi import Request
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)

PUBLIC_PATHS = {"/__health", "/docs", "/openapi.json"}


def configured_keys():
    return {k.strip() for k in os.getenv("API_KEYS", "").split(",") if k.strip()}


class APIKeyMiddleware(BaseHTTPMiddleware):
    """Bearer API-key check, active only when AUTH_ENABLED=true."""

    async def dispatch(self, request: Request, call_next):
        if request.url.path in PUBLIC_PATHS or request.method == "OPTIONS":
            return await call_next(request)

        if os.getenv("AUTH_ENABLED", "false").lower() != "true":
            return await call_next(request)

        auth = request.headers.get("Authorization", "")
        if not auth.startswith("Bearer "):
            return JSONResponse({"detail": "Missing API key"}, status_code=401)
        token = auth[len("Bearer "):].strip()
        if token not in configured_keys():
            logger.warning("Rejected API key for %s", request.url.path)
            return JSONResponse({"detail": "Invalid API key"}, status_code=403)

        request.state.api_key = token
        return await call_next(request)
