"""
Notes App Backend — Rate Limiting Middleware
==============================================

What:  Per-IP sliding window rate limiter for the API.
How:   Keeps a list of request timestamps per client IP. On each request the
       timestamps older than the window are dropped; if the remainder has
       reached the limit the request is rejected with 429 and Retry-After.

Scope:
    State is held in process memory, like the notes themselves. With several
    worker processes each one enforces its own limit.
"""

import logging
import time
from collections import defaultdict
from typing import Dict, List, Optional

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import JSONResponse, Response

from app.config import settings
from app.exceptions import RateLimitExceededError
from app.middleware.request_id import request_id_var

logger = logging.getLogger(__name__)


class RateLimitMiddleware(BaseHTTPMiddleware):
    """
    In-memory sliding window rate limiter.

    Configuration (constructor, falling back to settings):
        max_requests: Max requests per window (rate_limit_requests)
        window:       Window duration in seconds (rate_limit_window)

    Excluded paths: health check and API documentation.
    """

    EXCLUDED_PATHS = {"/health", "/docs", "/openapi.json", "/redoc"}

    # Run the inactive-IP sweep every this many recorded requests
    CLEANUP_EVERY = 1000

    def __init__(
        self,
        app,
        max_requests: Optional[int] = None,
        window: Optional[int] = None,
    ):
        super().__init__(app)
        self.max_requests = max_requests or settings.rate_limit_requests
        self.window = window or settings.rate_limit_window
        self._requests: Dict[str, List[float]] = defaultdict(list)
        self._recorded = 0

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if request.url.path in self.EXCLUDED_PATHS:
            return await call_next(request)

        client_ip = request.client.host if request.client else "unknown"

        now = time.time()
        window_start = now - self.window

        # ── Sliding Window: drop entries outside the window ──────────────
        recent = [ts for ts in self._requests[client_ip] if ts > window_start]
        self._requests[client_ip] = recent

        if len(recent) >= self.max_requests:
            retry_after = int(recent[0] + self.window - now) + 1
            logger.warning(
                "Rate limit exceeded for IP %s: %d requests in %ds window",
                client_ip,
                len(recent),
                self.window,
            )
            return self._reject(RateLimitExceededError(retry_after=retry_after))

        recent.append(now)
        self._recorded += 1
        if self._recorded % self.CLEANUP_EVERY == 0:
            self._cleanup_inactive_ips(window_start)

        return await call_next(request)

    @staticmethod
    def _reject(exc: RateLimitExceededError) -> JSONResponse:
        # Exception handlers do not run for responses produced in middleware
        return JSONResponse(
            status_code=429,
            content={
                "error": "rate_limit_exceeded",
                "message": exc.message,
                "details": exc.context,
                "request_id": request_id_var.get(""),
            },
            headers={"Retry-After": str(exc.retry_after)},
        )

    def _cleanup_inactive_ips(self, window_start: float) -> None:
        """Remove IPs that have no requests within the current window."""
        inactive_ips = [
            ip for ip, timestamps in self._requests.items()
            if not timestamps or timestamps[-1] < window_start
        ]
        for ip in inactive_ips:
            del self._requests[ip]

        if inactive_ips:
            logger.debug("Cleaned up %d inactive IP entries", len(inactive_ips))
