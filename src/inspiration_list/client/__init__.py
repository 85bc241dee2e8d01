"""Client for the inspiration HTTP API with composable retry, cache and progress wrappers."""

from .api_client import DEFAULT_BASE_URL, ApiClient, ApiError, ApiRequest, HttpxSender, Send
from .middleware import ResponseCache, compose, default_retry_condition, with_cache, with_progress, with_retry

__all__ = [
    "DEFAULT_BASE_URL",
    "ApiClient",
    "ApiError",
    "ApiRequest",
    "HttpxSender",
    "ResponseCache",
    "Send",
    "compose",
    "default_retry_condition",
    "with_cache",
    "with_progress",
    "with_retry",
]
