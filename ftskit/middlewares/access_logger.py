from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
import logging
import time

logger = logging.getLogger("access")

_PROBES = {"/", "/health", "/liveness", "/readiness"}


class AccessLoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        path = request.url.path
        if path in _PROBES:
            return await call_next(request)

        x_forwarded_for = request.headers.get("x-forwarded-for")
        if x_forwarded_for:
            ip = x_forwarded_for.split(",")[0].strip()
        else:
            ip = request.client.host if request.client else ""

        start = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - start) * 1000

        logger.info(
            "🛰️ %s %s -> %s (%.1f ms)",
            request.method,
            path,
            response.status_code,
            elapsed_ms,
            extra={
                "ip": ip,
                "user_agent": request.headers.get("user-agent", ""),
            },
        )
        return response
