"""HTTP client with connection pooling, bounded retries and a circuit breaker.

Used for the enrichment call. Non-2xx responses count as failures so a
struggling upstream opens the circuit.
"""

import logging
import random
import time
import uuid
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

import httpx

from inspiration_list.providers.resilience.circuit_breaker import CircuitBreaker

logger = logging.getLogger(__name__)


class CircuitOpenError(RuntimeError):
    """Raised instead of calling an upstream whose circuit is open"""


@dataclass
class HttpClientConfig:
    """Configuration for HTTP client resilience features."""

    url: str
    headers: dict[str, str] = field(default_factory=dict)

    # Timeout settings (seconds)
    default_timeout: float = 30.0
    connect_timeout: float = 10.0

    # Retry configuration
    max_retries: int = 0
    retry_base_delay: float = 1.0
    retry_max_delay: float = 10.0

    # Circuit breaker configuration
    circuit_breaker_threshold: int = 5
    circuit_breaker_timeout: float = 60.0

    def __post_init__(self):
        if self.max_retries < 0:
            raise ValueError(f"max_retries must be >= 0, got {self.max_retries}")
        if self.retry_base_delay <= 0:
            raise ValueError(f"retry_base_delay must be > 0, got {self.retry_base_delay}")
        if self.retry_max_delay < self.retry_base_delay:
            raise ValueError(
                f"retry_max_delay ({self.retry_max_delay}) must be >= "
                f"retry_base_delay ({self.retry_base_delay})"
            )
        if self.circuit_breaker_threshold <= 0:
            raise ValueError(
                f"circuit_breaker_threshold must be > 0, got {self.circuit_breaker_threshold}"
            )


class HttpClient:
    """Thread-safe synchronous HTTP client for a single upstream URL."""

    def __init__(self, config: HttpClientConfig, transport: httpx.BaseTransport | None = None):
        """
        Args:
            config: HttpClientConfig with all resilience settings
            transport: Optional httpx transport (tests pass httpx.MockTransport)
        """
        self.config = config
        self._client = httpx.Client(
            timeout=httpx.Timeout(config.default_timeout, connect=config.connect_timeout),
            headers=config.headers,
            follow_redirects=True,
            transport=transport,
        )
        self.circuit_breaker = CircuitBreaker(
            threshold=config.circuit_breaker_threshold,
            timeout=config.circuit_breaker_timeout,
        )

    def with_retry(self, operation: Callable[[], httpx.Response], operation_name: str) -> httpx.Response:
        """Run operation with exponential backoff retries.

        Checks the circuit breaker before each attempt and records the
        outcome of the final attempt.

        Raises:
            CircuitOpenError: If the circuit breaker is OPEN
            httpx.HTTPError: If all attempts failed (HTTPStatusError for non-2xx)
        """
        request_id = str(uuid.uuid4())[:8]

        for attempt in range(self.config.max_retries + 1):
            if not self.circuit_breaker.can_attempt():
                logger.warning(f"[{request_id}] {operation_name} rejected - circuit breaker OPEN")
                raise CircuitOpenError("Circuit breaker OPEN - rejecting request")

            try:
                response = operation()
                response.raise_for_status()
                if attempt > 0:
                    logger.info(
                        f"[{request_id}] {operation_name} succeeded on attempt "
                        f"{attempt + 1}/{self.config.max_retries + 1}"
                    )
                self.circuit_breaker.record_success()
                return response
            except httpx.HTTPError as e:
                if attempt == self.config.max_retries:
                    self.circuit_breaker.record_failure()
                    logger.error(
                        f"[{request_id}] {operation_name} failed after "
                        f"{attempt + 1} attempt(s): {e}"
                    )
                    raise

                delay = min(
                    self.config.retry_base_delay * (2 ** attempt),
                    self.config.retry_max_delay
                )
                final_delay = max(0, delay + random.uniform(-0.5, 0.5) * delay)
                logger.info(
                    f"[{request_id}] {operation_name} attempt "
                    f"{attempt + 1}/{self.config.max_retries + 1} failed: {e}. "
                    f"Retrying in {final_delay:.2f}s..."
                )
                time.sleep(final_delay)

        raise RuntimeError(f"{operation_name} failed unexpectedly")

    def post(self, json: dict[str, Any], timeout: float | None = None) -> httpx.Response:
        """POST a JSON payload to the configured URL.

        Raises:
            CircuitOpenError: If the circuit breaker is OPEN
            httpx.HTTPError: On network errors, non-2xx responses or timeout
        """
        def operation():
            return self._client.post(
                self.config.url,
                json=json,
                timeout=timeout if timeout is not None else httpx.USE_CLIENT_DEFAULT,
            )

        return self.with_retry(operation, "POST enrichment")

    def close(self):
        self._client.close()

    def get_stats(self) -> dict:
        return {
            "default_timeout": self.config.default_timeout,
            "max_retries": self.config.max_retries,
            "circuit_breaker": self.circuit_breaker.get_stats(),
        }
