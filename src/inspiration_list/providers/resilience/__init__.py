"""Resilience utilities for outbound HTTP calls."""

from .circuit_breaker import CircuitBreaker, CircuitState
from .http_client import CircuitOpenError, HttpClient, HttpClientConfig

__all__ = [
    "CircuitBreaker",
    "CircuitOpenError",
    "CircuitState",
    "HttpClient",
    "HttpClientConfig",
]
