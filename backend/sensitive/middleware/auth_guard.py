"""Temporarily blocks clients that keep presenting bad admin tokens."""

import time
from dataclasses import dataclass
from typing import Callable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse

ADMIN_PREFIX = "/api/admin/"

MAX_FAILURES = 5
BLOCK_SECONDS = 3600


@dataclass
class _Strikes:
    count: int = 0
    blocked_until: float = 0.0


class AuthFailureTracker:
    """Counts consecutive 401 answers per client. A successful call forgives them."""

    def __init__(
        self,
        max_failures: int = MAX_FAILURES,
        block_seconds: float = BLOCK_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.max_failures = max_failures
        self.block_seconds = block_seconds
        self._clock = clock
        self._strikes: dict[str, _Strikes] = {}

    def is_blocked(self, client: str) -> bool:
        strikes = self._strikes.get(client)
        if strikes is None or not strikes.blocked_until:
            return False
        if self._clock() < strikes.blocked_until:
            return True
        del self._strikes[client]
        return False

    def observe(self, client: str, status_code: int) -> None:
        if status_code == 401:
            strikes = self._strikes.setdefault(client, _Strikes())
            strikes.count += 1
            if strikes.count >= self.max_failures:
                strikes.blocked_until = self._clock() + self.block_seconds
        elif 200 <= status_code < 300:
            self._strikes.pop(client, None)

    def reset(self) -> None:
        self._strikes.clear()


tracker = AuthFailureTracker()


class AuthGuardMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        if not request.url.path.startswith(ADMIN_PREFIX):
            return await call_next(request)

        client = request.client.host if request.client else "unknown"
        if tracker.is_blocked(client):
            return JSONResponse(
                status_code=429,
                content={"detail": "Too many invalid admin tokens. Try again later."},
            )

        response = await call_next(request)
        tracker.observe(client, response.status_code)
        return response
