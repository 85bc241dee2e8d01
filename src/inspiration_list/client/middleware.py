"""Composable wrappers around a Send callable.

Each factory returns a middleware: a function taking a Send and returning a
new Send. Stack them with compose():

    send = compose(HttpxSender(url), with_retry(), with_progress(print))

Middlewares are applied in order, so the last one listed is outermost
(above, progress events wrap the whole retry loop).
"""

import json
import logging
import time
from collections.abc import Callable
from typing import Any

from .api_client import ApiError, ApiRequest, Send

logger = logging.getLogger(__name__)

Middleware = Callable[[Send], Send]
ProgressCallback = Callable[[dict[str, Any]], None]


def default_retry_condition(error: ApiError) -> bool:
    """Retry network failures and 5xx responses"""
    return error.is_network_error or error.is_server_error


def with_retry(
    max_retries: int = 3,
    retry_delay: float = 1.0,
    retry_condition: Callable[[ApiError], bool] = default_retry_condition,
    sleep: Callable[[float], None] = time.sleep,
) -> Middleware:
    """Retry failed calls with linear backoff: retry_delay * (attempt + 1)

    Args:
        max_retries: Retries after the first attempt
        retry_delay: Base delay in seconds
        retry_condition: Decides whether an ApiError is worth retrying
        sleep: Injectable for tests
    """
    if max_retries < 0:
        raise ValueError(f"max_retries must be >= 0, got {max_retries}")

    def middleware(send: Send) -> Send:
        def send_with_retry(request: ApiRequest) -> Any:
            attempt = 0
            while True:
                try:
                    return send(request)
                except ApiError as e:
                    if attempt >= max_retries or not retry_condition(e):
                        raise
                    delay = retry_delay * (attempt + 1)
                    logger.info(
                        f"Retrying {request.method} {request.path} "
                        f"({attempt + 1}/{max_retries}) in {delay:.1f}s: {e}"
                    )
                    sleep(delay)
                    attempt += 1

        return send_with_retry

    return middleware


class ResponseCache:
    """TTL cache of GET results keyed by method, path and params"""

    def __init__(self, ttl: float = 300.0, clock: Callable[[], float] = time.monotonic):
        self.ttl = ttl
        self._clock = clock
        self._entries: dict[str, tuple[float, Any]] = {}

    @staticmethod
    def key(request: ApiRequest) -> str:
        return json.dumps(
            {"method": request.method, "path": request.path, "params": request.params or {}},
            sort_keys=True,
            default=str,
        )

    def lookup(self, request: ApiRequest) -> tuple[bool, Any]:
        entry = self._entries.get(self.key(request))
        if entry is None:
            return False, None
        stored_at, value = entry
        if self._clock() - stored_at >= self.ttl:
            del self._entries[self.key(request)]
            return False, None
        return True, value

    def store(self, request: ApiRequest, value: Any) -> None:
        self._entries[self.key(request)] = (self._clock(), value)

    def remove(self, request: ApiRequest) -> None:
        self._entries.pop(self.key(request), None)

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)


def with_cache(ttl: float = 300.0, cache: ResponseCache | None = None) -> Middleware:
    """Serve repeated GETs from a ResponseCache; other methods pass through.

    Pass your own ``cache`` to clear or inspect it later.
    """
    cache = cache if cache is not None else ResponseCache(ttl)

    def middleware(send: Send) -> Send:
        def send_with_cache(request: ApiRequest) -> Any:
            if request.method.upper() != "GET":
                return send(request)

            hit, value = cache.lookup(request)
            if hit:
                logger.debug(f"Cache hit: {request.path}")
                return value

            value = send(request)
            cache.store(request, value)
            return value

        return send_with_cache

    return middleware


def with_progress(callback: ProgressCallback) -> Middleware:
    """Report start, success and error events for every call

    Events are dicts with ``type`` and ``request``, plus ``result`` on
    success or ``error`` on failure. Errors are re-raised after reporting.
    """

    def middleware(send: Send) -> Send:
        def send_with_progress(request: ApiRequest) -> Any:
            callback({"type": "start", "request": request})
            try:
                result = send(request)
            except ApiError as e:
                callback({"type": "error", "request": request, "error": e})
                raise
            callback({"type": "success", "request": request, "result": result})
            return result

        return send_with_progress

    return middleware


def compose(send: Send, *middlewares: Middleware) -> Send:
    """Wrap send with each middleware in turn"""
    for middleware in middlewares:
        send = middleware(send)
    return send
