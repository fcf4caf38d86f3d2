"""
Rate limit по IP для публичных форм: контактная форма и вход администратора.

Лимит и список маршрутов задаются в config: RATE_LIMIT ("10/minute"),
RATE_LIMITED_PATHS ("POST /messages,POST /auth/login").
IP берётся из X-Forwarded-For только при TRUST_FORWARDED_FOR=true.
Остальные запросы проходят без учёта. При превышении 429 и ErrorResponse.
"""
import time
from typing import Callable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse

from app.core.config import settings
from app.schemas.common import ErrorResponse


def _peer_ip(request: Request) -> str:
    """IP соединения: request.client.host."""
    if request.client:
        return request.client.host
    return "unknown"


def _forwarded_ip(request: Request) -> str:
    """IP клиента за прокси: X-Forwarded-For (первый) или адрес соединения."""
    forwarded = request.headers.get("x-forwarded-for")
    if forwarded:
        return forwarded.split(",")[0].strip()
    return _peer_ip(request)


class RateLimitMiddleware(BaseHTTPMiddleware):
    """Фиксированное окно на пару (IP, маршрут)."""

    def __init__(
        self,
        app,
        key_func: Callable[[Request], str] | None = None,
        routes: set[tuple[str, str]] | None = None,
        max_requests: int | None = None,
        window_seconds: int | None = None,
        trust_forwarded: bool | None = None,
    ):
        super().__init__(app)
        if trust_forwarded is None:
            trust_forwarded = settings.TRUST_FORWARDED_FOR
        self.key_func = key_func or (_forwarded_ip if trust_forwarded else _peer_ip)
        self.routes = routes if routes is not None else settings.rate_limited_routes()
        default_max, default_window = settings.rate_limit_parsed()
        self.max_requests = max_requests or default_max
        self.window_seconds = window_seconds or default_window
        # (ip, method, path) -> (count, window_start)
        self._storage: dict[tuple[str, str, str], tuple[int, float]] = {}
        self._last_sweep = time.monotonic()

    def _route_of(self, request: Request) -> tuple[str, str] | None:
        route = (request.method.upper(), request.url.path.rstrip("/") or "/")
        return route if route in self.routes else None

    def _sweep(self, now: float) -> None:
        """Раз в окно выбросить счётчики с истёкшим окном."""
        if now - self._last_sweep < self.window_seconds:
            return
        self._storage = {
            key: (count, start)
            for key, (count, start) in self._storage.items()
            if now - start < self.window_seconds
        }
        self._last_sweep = now

    async def dispatch(self, request: Request, call_next):
        route = self._route_of(request)
        if route is None:
            return await call_next(request)

        key = (self.key_func(request), *route)
        now = time.monotonic()
        self._sweep(now)
        count, start = self._storage.get(key, (0, now))
        if now - start >= self.window_seconds:
            count, start = 0, now
        count += 1
        self._storage[key] = (count, start)
        if count > self.max_requests:
            body = ErrorResponse(
                error="rate_limit_exceeded",
                message=f"Too many requests. Limit: {self.max_requests} per {self.window_seconds}s.",
            )
            return JSONResponse(status_code=429, content=body.model_dump())
        return await call_next(request)
