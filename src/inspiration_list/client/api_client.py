"""HTTP client for the inspiration API.

ApiClient only knows how to build requests. Sending is delegated to a
``Send`` callable, by default HttpxSender; retry, caching and progress
reporting are layered on with the wrappers in ``client.middleware``.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

import httpx

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://localhost:8787"


@dataclass(frozen=True)
class ApiRequest:
    """One API call, independent of the transport"""

    method: str
    path: str
    params: dict[str, Any] | None = None
    json: Any = None


Send = Callable[[ApiRequest], Any]


class ApiError(Exception):
    """Non-2xx response, or a network failure (status 0)"""

    def __init__(self, message: str, status: int, data: Any = None):
        super().__init__(message)
        self.message = message
        self.status = status
        self.data = data

    @property
    def is_network_error(self) -> bool:
        return self.status == 0

    @property
    def is_client_error(self) -> bool:
        return 400 <= self.status < 500

    @property
    def is_server_error(self) -> bool:
        return self.status >= 500


def _error_message(data: Any, status: int) -> str:
    if isinstance(data, dict):
        return data.get("message") or data.get("error") or f"HTTP {status}"
    return f"HTTP {status}"


class HttpxSender:
    """Default Send implementation over a pooled httpx.Client"""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 30.0,
        transport: httpx.BaseTransport | None = None,
    ):
        self._client = httpx.Client(
            base_url=base_url,
            timeout=timeout,
            headers={"Content-Type": "application/json"},
            transport=transport,
        )

    def __call__(self, request: ApiRequest) -> Any:
        try:
            response = self._client.request(
                request.method,
                request.path,
                params=request.params,
                json=request.json,
            )
        except httpx.HTTPError as e:
            raise ApiError(str(e) or "Network request failed", 0) from e

        data: Any
        if "application/json" in response.headers.get("content-type", ""):
            try:
                data = response.json()
            except ValueError:
                data = response.text
        else:
            data = response.text

        if not response.is_success:
            raise ApiError(_error_message(data, response.status_code), response.status_code, data)

        return data

    def close(self) -> None:
        self._client.close()


class ApiClient:
    """Inspiration API operations over a Send callable

    Example:
        send = compose(HttpxSender(url), with_retry(max_retries=2))
        client = ApiClient(send=send)
    """

    def __init__(self, base_url: str = DEFAULT_BASE_URL, send: Send | None = None, timeout: float = 30.0):
        self.base_url = base_url
        self._owned_sender: HttpxSender | None = None
        if send is None:
            self._owned_sender = HttpxSender(base_url, timeout=timeout)
            send = self._owned_sender
        self.send = send

    def request(self, method: str, path: str, params: dict[str, Any] | None = None, json: Any = None) -> Any:
        return self.send(ApiRequest(method=method, path=path, params=params, json=json))

    def create_inspiration(self, transcribed_text: str, audio_data: str | None = None) -> dict:
        return self.request(
            "POST",
            "/api/inspirations",
            json={"transcribedText": transcribed_text, "audioData": audio_data},
        )

    def list_inspirations(
        self,
        page: int = 1,
        limit: int = 20,
        category: str | None = None,
        search: str | None = None,
    ) -> dict:
        params: dict[str, Any] = {"page": page, "limit": limit}
        if category and category != "all":
            params["category"] = category
        if search:
            params["search"] = search
        return self.request("GET", "/api/inspirations", params=params)

    def get_inspiration(self, inspiration_id: str) -> dict:
        return self.request("GET", f"/api/inspirations/{inspiration_id}")

    def delete_inspiration(self, inspiration_id: str) -> dict:
        return self.request("DELETE", f"/api/inspirations/{inspiration_id}")

    def get_health(self) -> dict:
        return self.request("GET", "/api/health")

    def health_check(self) -> bool:
        """True when the server answers the health endpoint"""
        try:
            self.get_health()
            return True
        except ApiError as e:
            logger.debug(f"Health check failed: {e}")
            return False

    def close(self) -> None:
        if self._owned_sender is not None:
            self._owned_sender.close()
