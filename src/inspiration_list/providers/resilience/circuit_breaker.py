"""Circuit breaker for the enrichment endpoint.

Stops calling an upstream that keeps failing so requests fall back to
local content immediately instead of waiting on timeouts. Three states:

- CLOSED: Normal operation, requests pass through
- OPEN: Too many failures detected, reject requests immediately
- HALF_OPEN: Testing if the upstream recovered, allow limited test requests
"""

import logging
import threading
from datetime import datetime
from enum import Enum

logger = logging.getLogger(__name__)


class CircuitState(Enum):
    """Circuit breaker states."""
    CLOSED = "closed"
    OPEN = "open"
    HALF_OPEN = "half_open"


class CircuitBreaker:
    """
    Thread-safe circuit breaker.

    State Machine:
        CLOSED -> (failure_count >= threshold) -> OPEN
        OPEN -> (timeout elapsed) -> HALF_OPEN
        HALF_OPEN -> (success_count >= half_open_max_calls) -> CLOSED
        HALF_OPEN -> (any failure) -> OPEN
    """

    def __init__(
        self,
        threshold: int,
        timeout: float,
        half_open_max_calls: int = 1
    ):
        """Initialize circuit breaker.

        Args:
            threshold: Number of failures required to open circuit
            timeout: Seconds to wait in OPEN state before trying HALF_OPEN
            half_open_max_calls: Maximum test calls in HALF_OPEN state

        Raises:
            ValueError: If threshold <= 0 or timeout < 0
        """
        if threshold <= 0:
            raise ValueError("threshold must be > 0")
        if timeout < 0:
            raise ValueError("timeout must be >= 0")

        self.threshold = threshold
        self.timeout = timeout
        self.half_open_max_calls = half_open_max_calls

        self._state = CircuitState.CLOSED
        self._failure_count = 0
        self._success_count = 0
        self._last_failure_time: datetime | None = None
        self._half_open_calls = 0

        self._lock = threading.Lock()

    def _get_current_state(self) -> CircuitState:
        """Current state, moving OPEN -> HALF_OPEN once the timeout elapsed.

        Must be called with self._lock held.
        """
        if self._state == CircuitState.OPEN and self._last_failure_time:
            elapsed = (datetime.now() - self._last_failure_time).total_seconds()

            if elapsed >= self.timeout:
                logger.info(f"Circuit breaker transitioning to HALF_OPEN after {elapsed:.1f}s")
                self._state = CircuitState.HALF_OPEN
                self._half_open_calls = 0
                self._success_count = 0

        return self._state

    def can_attempt(self) -> bool:
        """Whether a request may be attempted now."""
        with self._lock:
            current_state = self._get_current_state()

            if current_state == CircuitState.OPEN:
                return False

            if current_state == CircuitState.HALF_OPEN:
                if self._half_open_calls >= self.half_open_max_calls:
                    return False
                self._half_open_calls += 1

            return True

    def record_success(self) -> None:
        with self._lock:
            if self._state == CircuitState.HALF_OPEN:
                self._success_count += 1
                if self._success_count >= self.half_open_max_calls:
                    self._state = CircuitState.CLOSED
                    self._failure_count = 0
                    self._success_count = 0
                    self._half_open_calls = 0
                    logger.info("Circuit breaker transitioned to CLOSED (recovery complete)")
            elif self._state == CircuitState.CLOSED:
                self._failure_count = 0

    def record_failure(self) -> None:
        with self._lock:
            self._failure_count += 1
            self._last_failure_time = datetime.now()
            self._half_open_calls = 0

            if self._state == CircuitState.HALF_OPEN:
                self._state = CircuitState.OPEN
                logger.warning("Circuit breaker transitioned to OPEN (failure during recovery test)")
            elif self._failure_count >= self.threshold:
                self._state = CircuitState.OPEN
                logger.warning(
                    f"Circuit breaker transitioned to OPEN "
                    f"(failure count {self._failure_count} >= threshold {self.threshold})"
                )

    def get_state(self) -> CircuitState:
        with self._lock:
            return self._get_current_state()

    def get_stats(self) -> dict:
        """Statistics for the health endpoint."""
        with self._lock:
            return {
                "state": self._get_current_state().value,
                "failure_count": self._failure_count,
                "last_failure": self._last_failure_time.isoformat() if self._last_failure_time else None
            }
